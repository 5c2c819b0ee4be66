# src/tetris_classic/config/game_config.py
from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import Field, field_validator, model_validator

from tetris_classic.config.base import ConfigBase
from tetris_classic.game.core.constants import BOARD_COLS, BOARD_ROWS
from tetris_classic.game.core.rules import ScoreConfig

PieceRuleName = Literal["uniform"]
LogLevel = Literal["debug", "info", "warning", "error"]


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise ValueError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{where} must be an int-like value, got {value!r}") from e


class ScoringConfig(ConfigBase):
    """
    Points and gravity curve. Defaults are the classic rules:
    100/300/500/800 x level, 1 per soft-drop row, 2 per hard-drop row,
    a level every 10 lines, gravity 1000ms minus 100ms per level (floor 100ms).
    """

    line_points: Dict[int, int] = Field(default_factory=lambda: {1: 100, 2: 300, 3: 500, 4: 800})
    soft_drop_points: int = Field(default=1, ge=0)
    hard_drop_points: int = Field(default=2, ge=0)
    lines_per_level: int = Field(default=10, ge=1)
    base_drop_ms: int = Field(default=1000, ge=1)
    drop_step_ms: int = Field(default=100, ge=0)
    min_drop_ms: int = Field(default=100, ge=1)

    @field_validator("line_points")
    @classmethod
    def _non_negative_points(cls, v: Dict[int, int]) -> Dict[int, int]:
        for k, pts in v.items():
            if int(k) <= 0:
                raise ValueError(f"scoring.line_points keys must be >= 1, got {k}")
            if int(pts) < 0:
                raise ValueError(f"scoring.line_points[{k}] must be >= 0, got {pts}")
        return v

    @model_validator(mode="after")
    def _min_below_base(self) -> "ScoringConfig":
        if self.min_drop_ms > self.base_drop_ms:
            raise ValueError(
                f"scoring.min_drop_ms ({self.min_drop_ms}) must not exceed base_drop_ms ({self.base_drop_ms})"
            )
        return self

    def to_score_config(self) -> ScoreConfig:
        return ScoreConfig(
            line_points=dict(self.line_points),
            soft_drop_points=int(self.soft_drop_points),
            hard_drop_points=int(self.hard_drop_points),
            lines_per_level=int(self.lines_per_level),
            base_drop_ms=int(self.base_drop_ms),
            drop_step_ms=int(self.drop_step_ms),
            min_drop_ms=int(self.min_drop_ms),
        )


class GameConfig(ConfigBase):
    """
    Engine-facing config: board size, RNG seed, piece rule, scoring.
    """

    rows: int = Field(default=BOARD_ROWS, ge=4)
    cols: int = Field(default=BOARD_COLS, ge=4)
    seed: Optional[int] = Field(default=None, ge=0)
    piece_rule: PieceRuleName = "uniform"
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> Optional[int]:
        if v is None:
            return None
        return _as_int(v, where="game.seed")

    @field_validator("piece_rule", mode="before")
    @classmethod
    def _piece_rule_lower(cls, v: object) -> str:
        return str(v).strip().lower()


class UiConfig(ConfigBase):
    cell: int = Field(default=30, ge=8, le=128)
    fps: int = Field(default=60, ge=1, le=480)
    show_grid: bool = True
    key_repeat_delay_ms: int = Field(default=170, ge=0)
    key_repeat_interval_ms: int = Field(default=50, ge=1)
    title: str = "Tetris"


class PlayConfig(ConfigBase):
    game: GameConfig = Field(default_factory=GameConfig)
    ui: UiConfig = Field(default_factory=UiConfig)
    log_level: LogLevel = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level_lower(cls, v: object) -> str:
        return str(v).strip().lower()


__all__ = ["GameConfig", "LogLevel", "PieceRuleName", "PlayConfig", "ScoringConfig", "UiConfig"]
