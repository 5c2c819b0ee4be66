# src/tetris_classic/config/__init__.py
from __future__ import annotations

from tetris_classic.config.game_config import GameConfig, PlayConfig, ScoringConfig, UiConfig
from tetris_classic.config.io import load_play_config, load_yaml, to_plain_dict

__all__ = [
    "GameConfig",
    "PlayConfig",
    "ScoringConfig",
    "UiConfig",
    "load_play_config",
    "load_yaml",
    "to_plain_dict",
]
