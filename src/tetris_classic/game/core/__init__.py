# src/tetris_classic/game/core/__init__.py
from __future__ import annotations

from tetris_classic.game.core.board import Board
from tetris_classic.game.core.game import TetrisGame, normalize_command
from tetris_classic.game.core.pieceset import PieceDef, PieceSet
from tetris_classic.game.core.piece_rules import PieceRule, UniformPieceRule
from tetris_classic.game.core.rotation import rotate_cw, try_rotate
from tetris_classic.game.core.rules import ScoreConfig, drop_interval_ms, level_for_lines, score_for_clears
from tetris_classic.game.core.types import ActivePiece, Command, State

__all__ = [
    "ActivePiece",
    "Board",
    "Command",
    "PieceDef",
    "PieceRule",
    "PieceSet",
    "ScoreConfig",
    "State",
    "TetrisGame",
    "UniformPieceRule",
    "drop_interval_ms",
    "level_for_lines",
    "normalize_command",
    "rotate_cw",
    "score_for_clears",
    "try_rotate",
]
