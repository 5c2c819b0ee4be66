# src/tetris_classic/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]
ColorA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Palette:
    bg: Color = (20, 20, 24)
    panel_bg: Color = (26, 26, 30)
    empty: Color = (0, 0, 0)
    grid: Color = (34, 34, 34)
    border: Color = (90, 90, 105)

    text: Color = (220, 220, 230)
    muted: Color = (170, 170, 185)
    warn: Color = (240, 160, 90)
    accent: Color = (0, 255, 120)

    fallback_piece: Color = (180, 180, 200)

    # block bevel (highlight on top/left, shadow on bottom/right)
    highlight_rgba: ColorA = (255, 255, 255, 77)
    shadow_rgba: ColorA = (0, 0, 0, 77)

    overlay_rgba: ColorA = (0, 0, 0, 178)
