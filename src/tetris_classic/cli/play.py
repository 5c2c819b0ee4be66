# src/tetris_classic/cli/play.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

from tetris_classic.config.game_config import PlayConfig
from tetris_classic.config.io import load_play_config
from tetris_classic.game.factory import make_game_from_cfg
from tetris_classic.game.rendering.pygame.app import run_manual_play
from tetris_classic.utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play classic Tetris (pygame).")
    ap.add_argument("--config", type=Path, default=None, help="YAML play config (defaults apply when omitted)")
    ap.add_argument("--seed", type=int, default=None, help="seed the piece RNG for a reproducible sequence")

    # --- UI ---
    ap.add_argument("--cell", type=int, default=None, help="cell size in pixels")
    ap.add_argument("--fps", type=int, default=None, help="render FPS cap")
    grid = ap.add_mutually_exclusive_group()
    grid.add_argument("--show-grid", dest="show_grid", action="store_true", default=None)
    grid.add_argument("--no-grid", dest="show_grid", action="store_false", default=None)
    ap.add_argument("--no-repeat", action="store_true", help="disable key auto-repeat")

    ap.add_argument("--log-level", type=str, default=None, choices=["debug", "info", "warning", "error"])
    return ap


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """
    Nested override mapping built only from flags that were actually given.
    """
    out: dict[str, Any] = {}
    if args.seed is not None:
        out.setdefault("game", {})["seed"] = int(args.seed)

    ui: dict[str, Any] = {}
    if args.cell is not None:
        ui["cell"] = int(args.cell)
    if args.fps is not None:
        ui["fps"] = int(args.fps)
    if args.show_grid is not None:
        ui["show_grid"] = bool(args.show_grid)
    if ui:
        out["ui"] = ui

    if args.log_level is not None:
        out["log_level"] = str(args.log_level)
    return out


def resolve_config(args: argparse.Namespace) -> PlayConfig:
    return load_play_config(args.config, overrides=cli_overrides(args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_config(args)

    logger = setup_logger(name="tetris_classic", use_rich=True, level=cfg.log_level)
    if args.config is not None:
        logger.info("[play] cfg=%s", str(args.config))
    logger.info("[play] seed=%s", "random" if cfg.game.seed is None else str(cfg.game.seed))

    game = make_game_from_cfg(cfg.game)

    return run_manual_play(game=game, ui=cfg.ui, no_repeat=bool(args.no_repeat))


if __name__ == "__main__":
    raise SystemExit(main())
