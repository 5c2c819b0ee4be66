# src/tetris_classic/game/rendering/pygame/sidebar.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from tetris_classic.game.core.types import State
from tetris_classic.game.rendering.pygame.palette import Palette
from tetris_classic.game.rendering.pygame.surf import blit_text

# -----------------------------------------------------------------------------
# Public sizing contract
# -----------------------------------------------------------------------------
SIDEBAR_W = 220

CONTROLS: Tuple[Tuple[str, str], ...] = (
    ("Left/Right", "move"),
    ("Up", "rotate"),
    ("Down", "soft drop"),
    ("Space", "hard drop"),
    ("P", "pause"),
    ("R", "restart"),
    ("Esc", "quit"),
)


# -----------------------------------------------------------------------------
# Layout constants (all magic numbers live here, not inline)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SidebarLayout:
    panel_gap_y: int = 14

    stats_panel_h: int = 150
    controls_min_h: int = 96

    title_pad_x: int = 10
    title_pad_y: int = 8

    stats_pad_x: int = 10
    stats_first_row_y_offset: int = 36
    stats_row_h: int = 24
    stats_value_dx: int = 80

    controls_list_y_offset: int = 36
    controls_key_x_offset: int = 10
    controls_desc_x_offset: int = 110
    controls_row_h: int = 20

    controls_footer_needed_h: int = 120
    controls_status_y_from_bottom: int = 34
    controls_hint_y_from_bottom: int = 16


_LAYOUT = SidebarLayout()


def stats_rows(state: State) -> List[Tuple[str, str]]:
    return [
        ("Score", str(int(state.score))),
        ("Lines", str(int(state.lines))),
        ("Level", str(int(state.level))),
        ("Speed", f"{int(state.drop_interval_ms)} ms"),
    ]


# -----------------------------------------------------------------------------
# Public draw
# -----------------------------------------------------------------------------
def draw_sidebar(
    *,
    screen: pygame.Surface,
    state: State,
    x: int,
    y: int,
    w: int,
    board_outer_h: int,
    palette: Palette,
    font_small: pygame.font.Font,
    font_tiny: pygame.font.Font,
) -> None:
    """
    Render the right sidebar (presentation only): stats and the key legend.
    """
    panel_w = int(w)

    # -------------------------------------------------------------------------
    # STATS panel
    # -------------------------------------------------------------------------
    _panel(screen=screen, palette=palette, font_small=font_small, x=x, y=y, w=panel_w, h=_LAYOUT.stats_panel_h, title="STATS")

    label_x = int(x) + int(_LAYOUT.stats_pad_x)
    value_x = int(label_x) + int(_LAYOUT.stats_value_dx)
    yy = int(y) + int(_LAYOUT.stats_first_row_y_offset)
    for k, v in stats_rows(state):
        _draw_kv(screen=screen, font=font_tiny, palette=palette, k=k, v=v, label_x=label_x, value_x=value_x, y=yy)
        yy += int(_LAYOUT.stats_row_h)

    # -------------------------------------------------------------------------
    # CONTROLS panel
    # -------------------------------------------------------------------------
    ctrl_y = int(y) + int(_LAYOUT.stats_panel_h) + int(_LAYOUT.panel_gap_y)
    controls_h = max(_LAYOUT.controls_min_h, int(board_outer_h) - int(_LAYOUT.stats_panel_h) - int(_LAYOUT.panel_gap_y))
    _panel(screen=screen, palette=palette, font_small=font_small, x=x, y=ctrl_y, w=panel_w, h=controls_h, title="CONTROLS")

    yy = int(ctrl_y) + int(_LAYOUT.controls_list_y_offset)
    key_x = int(x) + int(_LAYOUT.controls_key_x_offset)
    desc_x = int(x) + int(_LAYOUT.controls_desc_x_offset)
    bottom_guard = int(ctrl_y) + int(controls_h) - int(_LAYOUT.controls_status_y_from_bottom) - int(_LAYOUT.controls_row_h)

    for key, desc in CONTROLS:
        if yy > bottom_guard:
            break
        blit_text(screen=screen, font=font_tiny, text=key, pos=(key_x, yy), color=palette.accent)
        blit_text(screen=screen, font=font_tiny, text=desc, pos=(desc_x, yy), color=palette.muted)
        yy += int(_LAYOUT.controls_row_h)

    status: Optional[str] = None
    if state.game_over:
        status = "GAME OVER"
    elif state.paused:
        status = "PAUSED"

    if status is not None and int(controls_h) >= int(_LAYOUT.controls_footer_needed_h):
        status_y = int(ctrl_y) + int(controls_h) - int(_LAYOUT.controls_status_y_from_bottom)
        hint_y = int(ctrl_y) + int(controls_h) - int(_LAYOUT.controls_hint_y_from_bottom)
        hint = "Press R to restart" if state.game_over else "Press P to resume"
        blit_text(screen=screen, font=font_small, text=status, pos=(key_x, status_y), color=palette.warn)
        blit_text(screen=screen, font=font_tiny, text=hint, pos=(key_x, hint_y), color=palette.muted)


# -----------------------------------------------------------------------------
# Small primitives
# -----------------------------------------------------------------------------
def _draw_kv(
    *,
    screen: pygame.Surface,
    font: pygame.font.Font,
    palette: Palette,
    k: str,
    v: str,
    label_x: int,
    value_x: int,
    y: int,
) -> None:
    blit_text(screen=screen, font=font, text=f"{k}:", pos=(int(label_x), int(y)), color=palette.muted)
    blit_text(screen=screen, font=font, text=v, pos=(int(value_x), int(y)), color=palette.text)


def _panel(
    *,
    screen: pygame.Surface,
    palette: Palette,
    font_small: pygame.font.Font,
    x: int,
    y: int,
    w: int,
    h: int,
    title: Optional[str] = None,
) -> None:
    rect = pygame.Rect(int(x), int(y), int(w), int(h))
    pygame.draw.rect(screen, palette.panel_bg, rect)
    pygame.draw.rect(screen, palette.border, rect, width=2)
    if title:
        tx = int(x) + int(_LAYOUT.title_pad_x)
        ty = int(y) + int(_LAYOUT.title_pad_y)
        blit_text(screen=screen, font=font_small, text=title, pos=(tx, ty), color=palette.accent)
