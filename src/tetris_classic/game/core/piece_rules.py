# src/tetris_classic/game/core/piece_rules.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np


class PieceRule(ABC):
    """
    Piece selection rule interface.

    Lifecycle:
      - reset(rng=..., kinds=...) is called on every game (re)start
      - next_piece() is called whenever the engine spawns a piece

    The RNG is owned by the game and injected; rules must not create their own streams.
    """

    @abstractmethod
    def reset(self, *, rng: np.random.Generator, kinds: Sequence[str]) -> None:
        raise NotImplementedError

    @abstractmethod
    def next_piece(self) -> str:
        raise NotImplementedError


@dataclass
class UniformPieceRule(PieceRule):
    """
    Uniform piece selection from the available kinds, driven by an injected RNG.
    """

    _rng: np.random.Generator | None = None
    _kinds: tuple[str, ...] = ()

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[str]) -> None:
        self._rng = rng
        self._kinds = tuple(str(k) for k in kinds)
        if not self._kinds:
            raise ValueError("UniformPieceRule requires non-empty kinds")

    def next_piece(self) -> str:
        if self._rng is None or not self._kinds:
            raise RuntimeError("UniformPieceRule.reset() must be called before next_piece()")
        i = int(self._rng.integers(0, len(self._kinds)))
        return self._kinds[i]
