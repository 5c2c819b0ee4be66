# tests/test_cli.py
from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("pygame")

from tetris_classic.cli.play import build_parser, cli_overrides, resolve_config  # noqa: E402


def test_no_flags_means_no_overrides() -> None:
    args = build_parser().parse_args([])
    assert cli_overrides(args) == {}
    assert resolve_config(args).ui.show_grid is True


def test_flags_become_nested_overrides() -> None:
    args = build_parser().parse_args(["--seed", "7", "--cell", "24", "--fps", "30", "--no-grid", "--log-level", "debug"])

    assert cli_overrides(args) == {
        "game": {"seed": 7},
        "ui": {"cell": 24, "fps": 30, "show_grid": False},
        "log_level": "debug",
    }


def test_flags_override_config_file(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("game:\n  seed: 1\nui:\n  cell: 20\n", encoding="utf-8")

    cfg = resolve_config(build_parser().parse_args(["--config", str(p), "--seed", "9"]))

    assert cfg.game.seed == 9
    assert cfg.ui.cell == 20


def test_grid_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--show-grid", "--no-grid"])
