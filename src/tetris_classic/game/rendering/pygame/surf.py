# src/tetris_classic/game/rendering/pygame/surf.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

from tetris_classic.game.rendering.pygame.palette import Color, ColorA

BEVEL_PX = 3


@dataclass
class SurfaceCache:
    """
    Cache small surfaces (cell-sized blocks) by (size, color, bevel).
    This avoids re-allocating surfaces every frame.
    """

    _cells: Dict[Tuple[int, Color, bool], pygame.Surface]

    def __init__(
            self,
            *,
            highlight_rgba: ColorA = (255, 255, 255, 77),
            shadow_rgba: ColorA = (0, 0, 0, 77),
    ) -> None:
        self._cells = {}
        self.highlight_rgba = highlight_rgba
        self.shadow_rgba = shadow_rgba

    def cell(self, *, size: int, color: Color, bevel: bool = False) -> pygame.Surface:
        key = (int(size), tuple(color), bool(bevel))
        surf = self._cells.get(key)
        if surf is None:
            s = int(size)
            surf = pygame.Surface((s, s), flags=pygame.SRCALPHA)
            surf.fill(color)
            if bevel and s > 2 * BEVEL_PX:
                self._bevel(surf, s)
            self._cells[key] = surf
        return surf

    def _bevel(self, surf: pygame.Surface, s: int) -> None:
        horiz = pygame.Surface((s, BEVEL_PX), flags=pygame.SRCALPHA)
        vert = pygame.Surface((BEVEL_PX, s), flags=pygame.SRCALPHA)

        horiz.fill(self.highlight_rgba)
        vert.fill(self.highlight_rgba)
        surf.blit(horiz, (0, 0))
        surf.blit(vert, (0, 0))

        horiz.fill(self.shadow_rgba)
        vert.fill(self.shadow_rgba)
        surf.blit(horiz, (0, s - BEVEL_PX))
        surf.blit(vert, (s - BEVEL_PX, 0))

    def __len__(self) -> int:
        return len(self._cells)


def blit_text(
        *,
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[int, int],
        color: Color,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def blit_text_centered(
        *,
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        center: Tuple[int, int],
        color: Color,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, img.get_rect(center=center))
