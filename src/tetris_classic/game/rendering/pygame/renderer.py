# src/tetris_classic/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.types import State
from tetris_classic.game.rendering.pygame.grid import draw_grid
from tetris_classic.game.rendering.pygame.palette import Color, Palette
from tetris_classic.game.rendering.pygame.sidebar import SIDEBAR_W, draw_sidebar
from tetris_classic.game.rendering.pygame.surf import SurfaceCache, blit_text_centered

__all__ = ["Color", "Palette", "ScreenLayout", "TetrisRenderer", "screen_layout"]

BOARD_PAD = 24
BOARD_MARGIN = 6


@dataclass(frozen=True)
class Fonts:
    big: pygame.font.Font
    small: pygame.font.Font
    tiny: pygame.font.Font


@dataclass(frozen=True)
class ScreenLayout:
    """
    Pixel geometry of one frame: the board cell area, its border margin,
    the sidebar column and the total window size.
    """

    board: pygame.Rect
    margin: int
    sidebar: pygame.Rect
    size: Tuple[int, int]


def screen_layout(*, rows: int, cols: int, cell: int, sidebar_w: int = SIDEBAR_W) -> ScreenLayout:
    board = pygame.Rect(BOARD_PAD, BOARD_PAD, int(cols) * int(cell), int(rows) * int(cell))
    # sidebar panels line up with the outer edge of the board border
    sidebar = pygame.Rect(
        board.right + BOARD_PAD,
        board.top - BOARD_MARGIN,
        int(sidebar_w),
        board.height + 2 * BOARD_MARGIN,
    )
    size = (sidebar.right + BOARD_PAD // 2, board.bottom + BOARD_PAD)
    return ScreenLayout(board=board, margin=BOARD_MARGIN, sidebar=sidebar, size=size)


class TetrisRenderer:
    def __init__(
        self,
        *,
        cell: int,
        show_grid_lines: bool,
        pieces: PieceSet,
        palette: Optional[Palette] = None,
    ) -> None:
        self.cell = int(cell)
        self.show_grid_lines = bool(show_grid_lines)
        self.pieces = pieces
        self.palette = palette or Palette()

        if not pygame.font.get_init():
            pygame.font.init()
        self.fonts = Fonts(
            big=pygame.font.SysFont("consolas", 44),
            small=pygame.font.SysFont("consolas", 18),
            tiny=pygame.font.SysFont("consolas", 15),
        )

        self.cache = SurfaceCache(highlight_rgba=self.palette.highlight_rgba, shadow_rgba=self.palette.shadow_rgba)

    def init_window(self, *, rows: int, cols: int, title: str = "Tetris") -> tuple[pygame.Surface, ScreenLayout]:
        layout = screen_layout(rows=int(rows), cols=int(cols), cell=self.cell)
        pygame.display.set_caption(str(title))
        screen = pygame.display.set_mode(layout.size)
        return screen, layout

    def render(self, *, screen: pygame.Surface, state: State, layout: ScreenLayout) -> None:
        screen.fill(self.palette.bg)

        draw_grid(
            screen=screen,
            state=state,
            origin=layout.board.topleft,
            margin=layout.margin,
            cell=self.cell,
            show_grid_lines=self.show_grid_lines,
            palette=self.palette,
            pieces=self.pieces,
            cache=self.cache,
        )

        draw_sidebar(
            screen=screen,
            state=state,
            x=layout.sidebar.x,
            y=layout.sidebar.y,
            w=layout.sidebar.width,
            board_outer_h=layout.sidebar.height,
            palette=self.palette,
            font_small=self.fonts.small,
            font_tiny=self.fonts.tiny,
        )

        if state.game_over:
            self._board_overlay(screen=screen, board=layout.board, title="GAME OVER", sub=f"Final score: {state.score}")
        elif state.paused:
            self._board_overlay(screen=screen, board=layout.board, title="PAUSED", sub="Press P to resume")

    def _board_overlay(self, *, screen: pygame.Surface, board: pygame.Rect, title: str, sub: str) -> None:
        shade = pygame.Surface(board.size, pygame.SRCALPHA)
        shade.fill(self.palette.overlay_rgba)
        screen.blit(shade, board.topleft)

        cx, cy = board.center
        blit_text_centered(screen=screen, font=self.fonts.big, text=title, center=(cx, cy - 16), color=self.palette.text)
        blit_text_centered(screen=screen, font=self.fonts.small, text=sub, center=(cx, cy + 24), color=self.palette.muted)
