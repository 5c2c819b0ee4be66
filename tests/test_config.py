# tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tetris_classic.config.game_config import GameConfig, PlayConfig, ScoringConfig
from tetris_classic.config.io import load_play_config, load_yaml, to_plain_dict
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.factory import make_game_from_cfg, make_piece_rule

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_match_classic_rules() -> None:
    cfg = PlayConfig()

    assert (cfg.game.rows, cfg.game.cols) == (20, 10)
    assert cfg.game.seed is None
    assert dict(cfg.game.scoring.line_points) == {1: 100, 2: 300, 3: 500, 4: 800}
    assert cfg.game.scoring.base_drop_ms == 1000
    assert cfg.ui.cell == 30
    assert cfg.log_level == "info"


def test_config_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError, match="Extra inputs"):
        GameConfig.model_validate({"rows": 20, "gravity": "nes"})


def test_config_rejects_other_piece_rules() -> None:
    with pytest.raises(ValidationError):
        GameConfig.model_validate({"piece_rule": "bag7"})


def test_piece_rule_is_normalized() -> None:
    assert GameConfig.model_validate({"piece_rule": " Uniform "}).piece_rule == "uniform"


def test_seed_rejects_bool() -> None:
    with pytest.raises(ValidationError, match="got bool"):
        GameConfig.model_validate({"seed": True})


def test_scoring_min_must_not_exceed_base() -> None:
    with pytest.raises(ValidationError, match="must not exceed base_drop_ms"):
        ScoringConfig(base_drop_ms=100, min_drop_ms=200)


def test_scoring_rejects_negative_points() -> None:
    with pytest.raises(ValidationError, match="must be >= 0"):
        ScoringConfig(line_points={1: -5})


def test_configs_are_frozen() -> None:
    cfg = GameConfig()
    with pytest.raises(ValidationError):
        cfg.rows = 30  # type: ignore[misc]


def test_shipped_play_yaml_validates() -> None:
    cfg = load_play_config(REPO_ROOT / "configs" / "play.yaml")
    assert cfg == PlayConfig()


def test_load_yaml_resolves_interpolation(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("base: 25\nui:\n  cell: ${base}\n", encoding="utf-8")

    data = load_yaml(p)

    assert data["ui"]["cell"] == 25


def test_load_yaml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "nope.yaml")


def test_load_play_config_applies_overrides(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("game:\n  seed: 3\n  rows: 22\nui:\n  fps: 30\n", encoding="utf-8")

    cfg = load_play_config(p, overrides={"game": {"seed": 11}, "ui": {"show_grid": False}})

    assert cfg.game.seed == 11
    assert cfg.game.rows == 22
    assert cfg.ui.fps == 30
    assert cfg.ui.show_grid is False


def test_load_play_config_without_file_uses_defaults() -> None:
    assert load_play_config(None) == PlayConfig()


def test_to_plain_dict_round_trips_model() -> None:
    data = to_plain_dict(PlayConfig())
    assert data["game"]["rows"] == 20
    assert PlayConfig.model_validate(data) == PlayConfig()


def test_make_game_from_cfg_applies_scoring() -> None:
    cfg = GameConfig.model_validate(
        {"rows": 16, "cols": 8, "seed": 4, "scoring": {"base_drop_ms": 800, "drop_step_ms": 50, "min_drop_ms": 200}}
    )

    game = make_game_from_cfg(cfg)

    assert isinstance(game, TetrisGame)
    st = game.state()
    assert (st.rows, st.cols) == (16, 8)
    assert st.drop_interval_ms == 800


def test_make_game_from_cfg_is_seeded() -> None:
    cfg = GameConfig(seed=8)
    a = make_game_from_cfg(cfg)
    b = make_game_from_cfg(cfg)

    kinds_a, kinds_b = [], []
    for _ in range(5):
        kinds_a.append(a.active.kind)
        kinds_b.append(b.active.kind)
        a.hard_drop()
        b.hard_drop()
    assert kinds_a == kinds_b


def test_make_game_from_cfg_requires_game_config() -> None:
    with pytest.raises(TypeError, match="GameConfig"):
        make_game_from_cfg({"rows": 20})  # type: ignore[arg-type]


def test_make_piece_rule_unknown() -> None:
    with pytest.raises(ValueError, match="unknown piece_rule"):
        make_piece_rule("bag7")


def test_ui_title_is_configurable(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("ui:\n  title: Blocks\n", encoding="utf-8")

    assert PlayConfig().ui.title == "Tetris"
    assert load_play_config(p).ui.title == "Blocks"
