# src/tetris_classic/game/rendering/pygame/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pygame

from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.types import State
from tetris_classic.game.rendering.pygame.palette import Color, Palette
from tetris_classic.game.rendering.pygame.surf import SurfaceCache


# -----------------------------------------------------------------------------
# Rendering constants (no inline magic numbers)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GridRenderCfg:
    border_width: int = 2
    grid_line_width: int = 1


CFG = GridRenderCfg()


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def draw_grid(
        *,
        screen: pygame.Surface,
        state: State,
        origin: Tuple[int, int],
        margin: int,
        cell: int,
        show_grid_lines: bool,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    """
    Draw the locked board, overlay the active piece, then grid lines and border.

    Board cell encoding is "board_id": 0 = empty, 1..K = kind_idx + 1.
    Active cells above the board (y < 0) are not drawn.
    """
    arr = np.asarray(state.grid)
    ox, oy = origin
    h, w = int(arr.shape[0]), int(arr.shape[1])

    pygame.draw.rect(screen, palette.empty, pygame.Rect(ox, oy, w * cell, h * cell))

    ys, xs = np.nonzero(arr)
    for y, x in zip(ys.tolist(), xs.tolist()):
        color = board_id_to_color(board_id=int(arr[y, x]), palette=palette, pieces=pieces)
        screen.blit(cache.cell(size=cell, color=color, bevel=True), (ox + x * cell, oy + y * cell))

    _draw_active_overlay(screen=screen, state=state, origin=origin, cell=cell, palette=palette, pieces=pieces, cache=cache)

    if show_grid_lines:
        _draw_grid_lines(screen=screen, origin=origin, h=h, w=w, cell=cell, palette=palette)

    pygame.draw.rect(
        screen,
        palette.border,
        pygame.Rect(ox - margin, oy - margin, w * cell + 2 * margin, h * cell + 2 * margin),
        width=int(CFG.border_width),
    )


# -----------------------------------------------------------------------------
# Overlay helpers
# -----------------------------------------------------------------------------
def _draw_active_overlay(
        *,
        screen: pygame.Surface,
        state: State,
        origin: Tuple[int, int],
        cell: int,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    ap = state.active
    color = board_id_to_color(board_id=int(ap.kind_id), palette=palette, pieces=pieces)
    block = cache.cell(size=cell, color=color, bevel=True)

    ox, oy = origin
    for gx, gy in ap.cells():
        if gy < 0:
            continue
        screen.blit(block, (ox + gx * cell, oy + gy * cell))


def _draw_grid_lines(
        *,
        screen: pygame.Surface,
        origin: Tuple[int, int],
        h: int,
        w: int,
        cell: int,
        palette: Palette,
) -> None:
    ox, oy = origin
    lw = int(CFG.grid_line_width)
    for y in range(h + 1):
        pygame.draw.line(screen, palette.grid, (ox, oy + y * cell), (ox + w * cell, oy + y * cell), lw)
    for x in range(w + 1):
        pygame.draw.line(screen, palette.grid, (ox + x * cell, oy), (ox + x * cell, oy + h * cell), lw)


# -----------------------------------------------------------------------------
# Color mapping
# -----------------------------------------------------------------------------
def board_id_to_color(*, board_id: int, palette: Palette, pieces: PieceSet) -> Color:
    """
    board_id encoding:
      0      -> empty
      1..K   -> kind_idx+1  (kind_idx = board_id-1)
    """
    if int(board_id) <= 0:
        return palette.empty
    c = pieces.color_of_board_id(int(board_id))
    return c if c is not None else palette.fallback_piece
