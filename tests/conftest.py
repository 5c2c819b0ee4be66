# tests/conftest.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from itertools import cycle
from typing import Iterator, Sequence

import numpy as np
import pytest

from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.piece_rules import PieceRule

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@dataclass
class SequencePieceRule(PieceRule):
    """Deterministic rule for tests: cycles through a fixed list of kinds."""

    sequence: Sequence[str] = ("O",)
    _it: Iterator[str] = field(default_factory=lambda: iter(()), init=False, repr=False)

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[str]) -> None:
        unknown = [k for k in self.sequence if k not in kinds]
        if unknown:
            raise ValueError(f"unknown kinds in sequence: {unknown}")
        self._it = cycle(self.sequence)

    def next_piece(self) -> str:
        return next(self._it)


@pytest.fixture(scope="session")
def pieces() -> PieceSet:
    return PieceSet.classic7()


@pytest.fixture
def make_game(pieces: PieceSet):
    def _make(*kinds: str) -> TetrisGame:
        return TetrisGame(piece_set=pieces, piece_rule=SequencePieceRule(sequence=kinds or ("O",)))

    return _make
