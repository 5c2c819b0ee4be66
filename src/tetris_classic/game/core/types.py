# src/tetris_classic/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    HARD_DROP = auto()
    ROTATE = auto()
    TOGGLE_PAUSE = auto()
    RESTART = auto()


@dataclass(frozen=True, eq=False)
class ActivePiece:
    """
    The falling piece.

    shape holds the kind's board id in filled cells (0 elsewhere); (x, y) is the
    top-left corner of the shape on the board. y may be negative.
    """

    kind: str
    kind_id: int
    shape: np.ndarray
    x: int
    y: int

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return ActivePiece(kind=self.kind, kind_id=self.kind_id, shape=self.shape, x=self.x + dx, y=self.y + dy)

    def cells(self) -> list[tuple[int, int]]:
        """Absolute (x, y) of every filled cell."""
        ys, xs = np.nonzero(self.shape)
        return [(self.x + int(xx), self.y + int(yy)) for yy, xx in zip(ys, xs)]


@dataclass(frozen=True, eq=False)
class State:
    """
    Render-facing snapshot.

    Contracts:
      - grid is a read-only copy of the LOCKED board (no active overlay).
      - grid cells are board ids: 0 = empty, 1..7 = kind_idx + 1.
      - active carries a read-only copy of its shape; renderers overlay it themselves.
    """

    grid: np.ndarray
    active: ActivePiece

    score: int
    lines: int
    level: int
    drop_interval_ms: int

    paused: bool
    game_over: bool

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])
