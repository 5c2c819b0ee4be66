# src/tetris_classic/game/core/constants.py
from __future__ import annotations

# Board geometry (classic playfield)
BOARD_ROWS: int = 20
BOARD_COLS: int = 10

# Board / cell encoding
EMPTY_CELL: int = 0
