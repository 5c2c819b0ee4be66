# src/tetris_classic/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel

from tetris_classic.config.game_config import PlayConfig


def to_plain_dict(cfg: Any) -> dict[str, Any]:
    if isinstance(cfg, BaseModel):
        return cfg.model_dump(mode="json")
    if isinstance(cfg, DictConfig):
        data = OmegaConf.to_container(cfg, resolve=True)
        if not isinstance(data, dict):
            raise TypeError("config must resolve to a mapping")
        return data
    raise TypeError(f"unsupported config type: {type(cfg).__name__}")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise FileNotFoundError(f"config file not found: {cfg_path}")
    cfg = OmegaConf.load(cfg_path)
    data = OmegaConf.to_container(cfg, resolve=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return data


def load_play_config(path: Path | None = None, *, overrides: dict[str, Any] | None = None) -> PlayConfig:
    """
    Load and validate a play config. Missing file path -> built-in defaults.

    `overrides` is a nested mapping merged on top of the file (CLI flags use this).
    """
    base = OmegaConf.create(load_yaml(path) if path is not None else {})
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.create(overrides))
    return PlayConfig.model_validate(to_plain_dict(base))


__all__ = ["to_plain_dict", "load_yaml", "load_play_config"]
