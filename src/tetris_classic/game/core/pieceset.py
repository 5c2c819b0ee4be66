# src/tetris_classic/game/core/pieceset.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import yaml

from tetris_classic.utils.paths import pieces_dir


def _parse_color(v: object) -> Optional[Tuple[int, int, int]]:
    if v is None:
        return None
    if not isinstance(v, (list, tuple)) or len(v) != 3:
        raise ValueError(f"color must be a 3-item list/tuple, got {v!r}")
    r, g, b = v
    for c in (r, g, b):
        if not isinstance(c, int) or isinstance(c, bool) or not (0 <= c <= 255):
            raise ValueError(f"color components must be ints in [0,255], got {v!r}")
    return int(r), int(g), int(b)


def _parse_shape(rows: Sequence[str]) -> np.ndarray:
    if not isinstance(rows, (list, tuple)) or len(rows) == 0:
        raise ValueError("shape must be a non-empty list of strings")

    width = None
    out: List[List[int]] = []
    for r in rows:
        if not isinstance(r, str) or len(r) == 0:
            raise ValueError(f"shape rows must be non-empty strings, got {r!r}")
        if width is None:
            width = len(r)
        elif len(r) != width:
            raise ValueError(f"shape rows must have equal width, got widths {width} and {len(r)}")

        out.append([1 if ch == "#" else 0 for ch in r])

    arr = np.asarray(out, dtype=np.uint8)
    if int(arr.sum()) <= 0:
        raise ValueError("shape must have at least one filled cell ('#')")
    return arr


@dataclass(frozen=True)
class PieceDef:
    kind: str
    mask: np.ndarray  # (H,W) uint8 0/1, spawn orientation
    color: Optional[Tuple[int, int, int]] = None

    def cell_count(self) -> int:
        return int(self.mask.sum())

    def width(self) -> int:
        return int(self.mask.shape[1])


@dataclass(frozen=True)
class PieceSet:
    """
    Spawn geometry + colors, loaded from YAML.

    Provides:
      - stable ordering of kinds (for board-id mapping)
      - shape(kind): spawn matrix whose filled cells carry the kind's board id
      - board_id(kind) in 1..K (0 reserved for empty)

    Only the spawn orientation is stored; rotations are derived at play time.
    """

    pieces: Dict[str, PieceDef]
    kind_order: Tuple[str, ...]

    @staticmethod
    def default_classic7_path() -> Path:
        return pieces_dir() / "classic7.yaml"

    @classmethod
    def classic7(cls) -> "PieceSet":
        return cls.from_yaml(cls.default_classic7_path(), expected_cells=4)

    @classmethod
    def from_yaml(cls, path: Path, *, expected_cells: Optional[int] = None) -> "PieceSet":
        p = Path(path)
        data = yaml.safe_load(p.read_text(encoding="utf-8"))

        if not isinstance(data, dict):
            raise ValueError(f"piece YAML must be a mapping at top-level, got {type(data)!r}")

        if expected_cells is None:
            v = data.get("expected_cells", None)
            if isinstance(v, int):
                expected_cells = v
            elif isinstance(v, str):
                expected_cells = int(v)
            elif v is not None:
                raise TypeError(f"expected_cells must be int or str, got {type(v)!r}")

        pieces_node = data.get("pieces")
        if not isinstance(pieces_node, dict) or not pieces_node:
            raise ValueError("piece YAML must contain non-empty mapping 'pieces:'")

        pieces: Dict[str, PieceDef] = {}
        kind_order: List[str] = []

        for kind, spec in pieces_node.items():
            if not isinstance(kind, str) or not kind:
                raise ValueError(f"piece key must be a non-empty string, got {kind!r}")
            if not isinstance(spec, dict):
                raise ValueError(f"piece spec for {kind!r} must be a mapping, got {type(spec)!r}")

            mask = _parse_shape(spec.get("shape"))

            if expected_cells is not None and int(mask.sum()) != int(expected_cells):
                raise ValueError(f"{kind!r}: expected {expected_cells} filled cells, got {int(mask.sum())}")

            color = _parse_color(spec.get("color"))

            pieces[kind] = PieceDef(kind=kind, mask=mask, color=color)
            kind_order.append(kind)

        return cls(pieces=pieces, kind_order=tuple(kind_order))

    def kinds(self) -> Tuple[str, ...]:
        return self.kind_order

    def __contains__(self, kind: str) -> bool:
        return kind in self.pieces

    def __len__(self) -> int:
        return len(self.kind_order)

    def get(self, kind: str) -> PieceDef:
        try:
            return self.pieces[kind]
        except KeyError as e:
            raise KeyError(f"unknown piece kind {kind!r}. known kinds={list(self.kind_order)!r}") from e

    def mask(self, kind: str) -> np.ndarray:
        return self.get(kind).mask

    def shape(self, kind: str) -> np.ndarray:
        """
        Fresh spawn matrix for `kind`: 0 = empty, board_id(kind) = filled.
        """
        m = self.mask(kind)
        return (m * np.uint8(self.board_id(kind))).astype(np.uint8)

    def kind_idx(self, kind: str) -> int:
        try:
            idx = self.kind_order.index(kind)
        except ValueError as e:
            raise KeyError(f"unknown piece kind {kind!r}") from e
        return int(idx)

    def board_id(self, kind: str) -> int:
        return int(self.kind_idx(kind) + 1)

    def color_of(self, kind: str) -> Optional[Tuple[int, int, int]]:
        return self.get(kind).color

    def color_of_board_id(self, board_id: int) -> Optional[Tuple[int, int, int]]:
        bid = int(board_id)
        if bid <= 0 or bid > len(self.kind_order):
            return None
        return self.color_of(self.kind_order[bid - 1])
