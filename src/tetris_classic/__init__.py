# src/tetris_classic/__init__.py
from __future__ import annotations

from tetris_classic.game.core import Command, State, TetrisGame

__version__ = "0.1.0"

__all__ = ["Command", "State", "TetrisGame", "__version__"]
