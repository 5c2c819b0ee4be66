# src/tetris_classic/utils/__init__.py
from __future__ import annotations

from tetris_classic.utils.logging import setup_logger
from tetris_classic.utils.paths import assets_dir, package_root, pieces_dir

__all__ = ["setup_logger", "assets_dir", "package_root", "pieces_dir"]
