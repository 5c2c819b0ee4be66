# src/tetris_classic/game/__init__.py
