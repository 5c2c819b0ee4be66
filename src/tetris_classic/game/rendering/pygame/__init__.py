# src/tetris_classic/game/rendering/pygame/__init__.py
