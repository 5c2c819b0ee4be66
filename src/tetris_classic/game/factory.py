# src/tetris_classic/game/factory.py
from __future__ import annotations

from typing import Optional

from tetris_classic.config.game_config import GameConfig
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.piece_rules import PieceRule, UniformPieceRule


def make_piece_rule(name: str) -> PieceRule:
    n = str(name).strip().lower()
    if n == "uniform":
        return UniformPieceRule()
    raise ValueError(f"unknown piece_rule={name!r} (supported: 'uniform')")


def make_game_from_cfg(cfg: GameConfig, *, piece_set: Optional[PieceSet] = None) -> TetrisGame:
    """
    Construct a ready-to-play engine from a validated GameConfig.
    """
    if not isinstance(cfg, GameConfig):
        raise TypeError(f"cfg must be a GameConfig, got {type(cfg)!r}")

    return TetrisGame(
        rows=int(cfg.rows),
        cols=int(cfg.cols),
        piece_set=piece_set,
        piece_rule=make_piece_rule(cfg.piece_rule),
        score_cfg=cfg.scoring.to_score_config(),
        seed=cfg.seed,
    )


__all__ = ["make_game_from_cfg", "make_piece_rule"]
