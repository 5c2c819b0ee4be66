# src/tetris_classic/cli/__init__.py
