# src/tetris_classic/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tetris_classic.game.core.constants import EMPTY_CELL


@dataclass
class Board:
    h: int
    w: int
    grid: np.ndarray  # locked blocks only (0=empty, 1..7 board ids)

    @classmethod
    def empty(cls, *, h: int, w: int) -> "Board":
        return cls(h=h, w=w, grid=np.zeros((h, w), dtype=np.uint8))

    def collides(self, *, shape: np.ndarray, px: int, py: int) -> bool:
        """
        True if any filled cell of `shape` placed at (px, py) leaves the board
        horizontally, falls below the floor, or overlaps a locked cell.

        Rows above the board (y < 0) only check the side walls.
        """
        ys, xs = np.nonzero(shape)
        for yy, xx in zip(ys.tolist(), xs.tolist()):
            x = px + xx
            y = py + yy
            if x < 0 or x >= self.w or y >= self.h:
                return True
            if y >= 0 and self.grid[y, x] != EMPTY_CELL:
                return True
        return False

    def lock(self, *, shape: np.ndarray, px: int, py: int) -> int:
        """
        Write the filled cells of `shape` into the grid. Cells above the board are dropped.

        Returns the number of cells written.
        """
        written = 0
        ys, xs = np.nonzero(shape)
        for yy, xx in zip(ys.tolist(), xs.tolist()):
            y = py + yy
            if y < 0:
                continue
            self.grid[y, px + xx] = shape[yy, xx]
            written += 1
        return written

    def clear_full_lines(self) -> int:
        """
        Remove every complete row, shifting the rows above down and refilling the top
        with empty rows. Row count is unchanged.
        """
        full = np.all(self.grid != EMPTY_CELL, axis=1)
        cleared = int(full.sum())
        if cleared <= 0:
            return 0
        new_rows = np.zeros((cleared, self.w), dtype=np.uint8)
        self.grid = np.vstack([new_rows, self.grid[~full]])
        return cleared
