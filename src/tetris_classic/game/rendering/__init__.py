# src/tetris_classic/game/rendering/__init__.py
