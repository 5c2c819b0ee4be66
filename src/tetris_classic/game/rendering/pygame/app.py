# src/tetris_classic/game/rendering/pygame/app.py
from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from tetris_classic.config.game_config import UiConfig
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.types import Command, State
from tetris_classic.game.rendering.pygame.renderer import TetrisRenderer

logger = logging.getLogger(__name__)

QUIT = "quit"

KEYMAP: Dict[int, Command | str] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_w: Command.ROTATE,
    pygame.K_x: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
    pygame.K_ESCAPE: QUIT,
}


def command_for_key(key: int) -> Optional[Command | str]:
    return KEYMAP.get(int(key))


def run_manual_play(*, game: TetrisGame, ui: UiConfig, no_repeat: bool = False) -> int:
    """
    Interactive pygame loop.

    Each frame: clock.tick() -> game.tick(dt_ms), then key events -> game.step().
    The screen is redrawn only after the engine reports a change.
    """
    pygame.init()

    renderer = TetrisRenderer(cell=ui.cell, show_grid_lines=ui.show_grid, pieces=game.pieces)
    state = game.state()
    screen, layout = renderer.init_window(rows=state.rows, cols=state.cols, title=ui.title)
    clock = pygame.time.Clock()

    if not no_repeat:
        pygame.key.set_repeat(int(ui.key_repeat_delay_ms), int(ui.key_repeat_interval_ms))

    dirty = True

    def _on_change(_: State) -> None:
        nonlocal dirty
        dirty = True

    unsubscribe = game.subscribe(_on_change)
    logger.info("[play] board=%dx%d cell=%d fps=%d", state.cols, state.rows, ui.cell, ui.fps)

    running = True
    try:
        while running:
            dt_ms = clock.tick(int(ui.fps))
            game.tick(dt_ms)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type in (pygame.WINDOWEXPOSED, pygame.WINDOWRESTORED):
                    dirty = True
                    continue
                if event.type != pygame.KEYDOWN:
                    continue

                cmd = command_for_key(event.key)
                if cmd is None:
                    continue
                if cmd == QUIT:
                    running = False
                    break
                game.step(cmd)

            if dirty:
                renderer.render(screen=screen, state=game.state(), layout=layout)
                pygame.display.flip()
                dirty = False
    finally:
        unsubscribe()
        pygame.quit()

    final = game.state()
    logger.info("[play] exit score=%d lines=%d level=%d", final.score, final.lines, final.level)
    return 0


__all__ = ["KEYMAP", "command_for_key", "run_manual_play"]
