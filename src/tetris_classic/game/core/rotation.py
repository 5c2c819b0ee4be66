# src/tetris_classic/game/core/rotation.py
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from tetris_classic.game.core.board import Board

# Horizontal offsets tried after a blocked rotation, in order.
WALL_KICKS: Tuple[int, ...] = (0, +1, -1)


def rotate_cw(shape: np.ndarray) -> np.ndarray:
    """
    Clockwise quarter turn: an N x M matrix becomes M x N with
    result[i][j] = shape[N-1-j][i].
    """
    return np.rot90(shape, k=-1).copy()


def try_rotate(
        *,
        board: Board,
        shape: np.ndarray,
        px: int,
        py: int,
) -> Optional[Tuple[np.ndarray, int]]:
    """
    Rotate clockwise with a simple wall kick (same x, then x+1, then x-1).

    Returns (new_shape, new_x) for the first placement that fits, or None when every
    candidate collides. y is never adjusted.
    """
    candidate = rotate_cw(shape)
    for dx in WALL_KICKS:
        if not board.collides(shape=candidate, px=px + dx, py=py):
            return candidate, px + dx
    return None
