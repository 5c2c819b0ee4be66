# tests/test_rotation.py
from __future__ import annotations

import numpy as np
import pytest

from tetris_classic.game.core.board import Board
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.rotation import rotate_cw, try_rotate


def test_rotate_cw_follows_index_formula() -> None:
    src = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8)
    out = rotate_cw(src)

    n, m = src.shape
    assert out.shape == (m, n)
    for i in range(m):
        for j in range(n):
            assert out[i, j] == src[n - 1 - j, i]


def test_rotate_cw_returns_independent_copy() -> None:
    src = np.array([[0, 3, 0], [3, 3, 3]], dtype=np.uint8)
    out = rotate_cw(src)
    out[0, 0] = 9
    assert src.tolist() == [[0, 3, 0], [3, 3, 3]]


@pytest.mark.parametrize("kind", ["I", "O", "T", "S", "Z", "J", "L"])
def test_four_rotations_restore_shape(pieces: PieceSet, kind: str) -> None:
    shape = pieces.shape(kind)
    out = shape
    for _ in range(4):
        out = rotate_cw(out)
    assert np.array_equal(out, shape)


def test_try_rotate_in_place_when_free() -> None:
    board = Board.empty(h=20, w=10)
    t = np.array([[0, 3, 0], [3, 3, 3]], dtype=np.uint8)

    out = try_rotate(board=board, shape=t, px=4, py=5)

    assert out is not None
    shape, x = out
    assert x == 4
    assert shape.tolist() == [[3, 0], [3, 3], [3, 0]]


def test_try_rotate_kicks_right_first() -> None:
    board = Board.empty(h=20, w=10)
    s = np.array([[0, 4, 4], [4, 4, 0]], dtype=np.uint8)
    # blocks the rotated S at x=3 (its top-left cell) but not at x=4
    board.grid[5, 3] = 1

    out = try_rotate(board=board, shape=s, px=3, py=5)

    assert out is not None
    shape, x = out
    assert x == 4
    assert shape.tolist() == [[4, 0], [4, 4], [0, 4]]


def test_try_rotate_kicks_left_off_right_wall() -> None:
    board = Board.empty(h=20, w=10)
    i_vertical = np.array([[1], [1], [1], [1]], dtype=np.uint8)

    out = try_rotate(board=board, shape=i_vertical, px=7, py=5)

    assert out is not None
    shape, x = out
    assert x == 6
    assert shape.shape == (1, 4)


def test_try_rotate_gives_up_when_every_kick_collides() -> None:
    board = Board.empty(h=20, w=10)
    i_vertical = np.array([[1], [1], [1], [1]], dtype=np.uint8)

    assert try_rotate(board=board, shape=i_vertical, px=8, py=5) is None
