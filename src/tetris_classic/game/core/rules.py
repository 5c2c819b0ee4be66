# src/tetris_classic/game/core/rules.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


def _default_line_points() -> Mapping[int, int]:
    return {1: 100, 2: 300, 3: 500, 4: 800}


@dataclass(frozen=True)
class ScoreConfig:
    line_points: Mapping[int, int] = field(default_factory=_default_line_points)
    soft_drop_points: int = 1
    hard_drop_points: int = 2

    lines_per_level: int = 10
    base_drop_ms: int = 1000
    drop_step_ms: int = 100
    min_drop_ms: int = 100


def score_for_clears(cleared: int, level: int, cfg: ScoreConfig) -> int:
    """
    Points for one lock sequence. Counts without a table entry score nothing.
    `level` is the level in effect before this clear is counted.
    """
    if cleared <= 0:
        return 0
    return int(cfg.line_points.get(int(cleared), 0)) * int(level)


def level_for_lines(lines: int, cfg: ScoreConfig) -> int:
    return int(lines) // int(cfg.lines_per_level) + 1


def drop_interval_ms(level: int, cfg: ScoreConfig) -> int:
    return max(int(cfg.min_drop_ms), int(cfg.base_drop_ms) - (int(level) - 1) * int(cfg.drop_step_ms))
