# src/tetris_classic/game/core/game.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from tetris_classic.game.core.board import Board
from tetris_classic.game.core.constants import BOARD_COLS, BOARD_ROWS
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.piece_rules import PieceRule, UniformPieceRule
from tetris_classic.game.core.rotation import try_rotate
from tetris_classic.game.core.rules import ScoreConfig, drop_interval_ms, level_for_lines, score_for_clears
from tetris_classic.game.core.types import ActivePiece, Command, State

logger = logging.getLogger(__name__)

StateListener = Callable[[State], None]

_COMMAND_ALIASES: Dict[str, Command] = {
    "left": Command.MOVE_LEFT,
    "move_left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "move_right": Command.MOVE_RIGHT,
    "down": Command.SOFT_DROP,
    "soft_drop": Command.SOFT_DROP,
    "drop": Command.HARD_DROP,
    "hard_drop": Command.HARD_DROP,
    "up": Command.ROTATE,
    "rotate": Command.ROTATE,
    "rot_cw": Command.ROTATE,
    "pause": Command.TOGGLE_PAUSE,
    "toggle_pause": Command.TOGGLE_PAUSE,
    "restart": Command.RESTART,
    "reset": Command.RESTART,
}


def normalize_command(command: Any) -> Optional[Command]:
    """
    Map a Command or a string alias to a Command. Anything else maps to None.
    """
    if isinstance(command, Command):
        return command
    if isinstance(command, str):
        s = command.strip().lower()
        hit = _COMMAND_ALIASES.get(s)
        if hit is not None:
            return hit
        try:
            return Command[s.upper()]
        except KeyError:
            return None
    return None


class TetrisGame:
    """
    Single-player falling-block engine.

    Contracts:

      - board.grid is the authoritative LOCKED board (0 = empty, 1..7 = board id).
      - The active piece is never written to the grid until it locks.
      - Invalid moves/rotations are rejected silently; a spawn that collides ends the game.
      - Every mutating call returns whether anything changed and notifies subscribers
        with a fresh State. Renderers poll state() or subscribe; the engine never draws.
      - While paused only toggle_pause()/restart() act; while game over only restart() acts.
      - All randomness comes from the injected RNG (seeded via the constructor or reset(seed=...)).
    """

    def __init__(
            self,
            *,
            rows: int = BOARD_ROWS,
            cols: int = BOARD_COLS,
            piece_set: Optional[PieceSet] = None,
            piece_rule: PieceRule | None = None,
            score_cfg: ScoreConfig | None = None,
            seed: Optional[int] = None,
    ) -> None:
        self.h = int(rows)
        self.w = int(cols)
        if self.h <= 0:
            raise ValueError(f"rows must be positive, got {self.h}")
        if self.w <= 0:
            raise ValueError(f"cols must be positive, got {self.w}")

        self.pieces = piece_set or PieceSet.classic7()
        if not self.pieces.kinds():
            raise ValueError("PieceSet has no kinds (empty pieceset is invalid).")

        widest = max(self.pieces.get(k).width() for k in self.pieces.kinds())
        if widest > self.w:
            raise ValueError(f"cols={self.w} is narrower than the widest piece ({widest})")

        self.score_cfg = score_cfg or ScoreConfig()
        self._piece_rule: PieceRule = piece_rule or UniformPieceRule()
        self._rng: np.random.Generator = np.random.default_rng(seed)
        self._listeners: List[StateListener] = []

        self.board = Board.empty(h=self.h, w=self.w)
        self.active: ActivePiece
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = drop_interval_ms(1, self.score_cfg)
        self.drop_counter_ms = 0.0
        self.paused = False
        self.game_over = False
        self._last_cleared = 0

        self._start()

    # ---- lifecycle -----------------------------------------------------------------

    def reset(self, *, seed: Optional[int] = None) -> State:
        """
        Reinitialize every counter, empty the board and spawn a fresh piece.
        """
        if seed is not None:
            self._rng = np.random.default_rng(int(seed))
        self._start()
        logger.debug("game reset (rows=%d cols=%d)", self.h, self.w)
        self._notify()
        return self._state()

    def restart(self) -> bool:
        self.reset()
        return True

    def _start(self) -> None:
        self.board = Board.empty(h=self.h, w=self.w)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = drop_interval_ms(self.level, self.score_cfg)
        self.drop_counter_ms = 0.0
        self.paused = False
        self.game_over = False
        self._last_cleared = 0

        self._piece_rule.reset(rng=self._rng, kinds=self.pieces.kinds())
        self._spawn()

    # ---- change notification -------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register `listener` to receive a State after every mutation.
        Returns a callable that removes the subscription.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self._state()
        for listener in list(self._listeners):
            listener(snap)

    # ---- commands ------------------------------------------------------------------

    def step(self, command: Any) -> Tuple[State, int, bool, Dict[str, object]]:
        """
        Apply one input command and return:

          (state, cleared_lines, game_over, info)

        info["changed"] tells whether the command mutated anything. Unknown commands
        are ignored (info["ignored"] is True).
        """
        cmd = normalize_command(command)
        self._last_cleared = 0
        info: Dict[str, object] = {"command": cmd.name if cmd is not None else None}

        if cmd is None:
            logger.debug("ignoring unknown command %r", command)
            info["changed"] = False
            info["ignored"] = True
            return self._state(), 0, bool(self.game_over), info

        if cmd == Command.MOVE_LEFT:
            changed = self.move(-1)
        elif cmd == Command.MOVE_RIGHT:
            changed = self.move(+1)
        elif cmd == Command.SOFT_DROP:
            changed = self.soft_drop(manual=True)
        elif cmd == Command.HARD_DROP:
            changed = self.hard_drop()
        elif cmd == Command.ROTATE:
            changed = self.rotate()
        elif cmd == Command.TOGGLE_PAUSE:
            changed = self.toggle_pause()
        else:
            changed = self.restart()

        info["changed"] = bool(changed)
        return self._state(), int(self._last_cleared), bool(self.game_over), info

    def tick(self, dt_ms: float) -> bool:
        """
        Advance the gravity timer by `dt_ms` milliseconds.

        Once the accumulated time exceeds the drop interval the piece falls one row
        (or locks) and the counter restarts from zero. Paused or finished games
        do not accumulate.
        """
        if self.paused or self.game_over:
            return False

        self.drop_counter_ms += max(0.0, float(dt_ms))
        if self.drop_counter_ms > self.drop_interval_ms:
            changed = self.soft_drop(manual=False)
            self.drop_counter_ms = 0.0
            return changed
        return False

    def move(self, dir: int) -> bool:
        if dir not in (-1, 1):
            raise ValueError(f"dir must be -1 or +1, got {dir!r}")
        if not self._accepts_play_input():
            return False
        if self.collides(dx=dir, dy=0):
            return False
        self.active = self.active.moved(dir, 0)
        self._notify()
        return True

    def soft_drop(self, *, manual: bool = True) -> bool:
        """
        Drop the piece one row, or lock it if the row below is blocked.
        A manual drop that moves the piece scores soft_drop_points; gravity scores nothing.
        """
        if not self._accepts_play_input():
            return False

        if not self.collides(dx=0, dy=1):
            self.active = self.active.moved(0, 1)
            if manual:
                self.score += int(self.score_cfg.soft_drop_points)
        else:
            self._lock_and_advance()

        self._notify()
        return True

    def hard_drop(self) -> bool:
        if not self._accepts_play_input():
            return False

        distance = 0
        while not self.collides(dx=0, dy=1):
            self.active = self.active.moved(0, 1)
            distance += 1
        self.score += distance * int(self.score_cfg.hard_drop_points)

        self._lock_and_advance()
        self._notify()
        return True

    def rotate(self) -> bool:
        if not self._accepts_play_input():
            return False

        ap = self.active
        out = try_rotate(board=self.board, shape=ap.shape, px=ap.x, py=ap.y)
        if out is None:
            return False

        shape, x = out
        self.active = ActivePiece(kind=ap.kind, kind_id=ap.kind_id, shape=shape, x=x, y=ap.y)
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        if self.game_over:
            return False
        self.paused = not self.paused
        logger.debug("paused=%s", self.paused)
        self._notify()
        return True

    # ---- queries -------------------------------------------------------------------

    def collides(self, piece: ActivePiece | None = None, dx: int = 0, dy: int = 0) -> bool:
        """
        Would `piece` (default: the active piece) collide when shifted by (dx, dy)?
        """
        p = piece if piece is not None else self.active
        return self.board.collides(shape=p.shape, px=p.x + int(dx), py=p.y + int(dy))

    def state(self) -> State:
        """
        Public, stable snapshot accessor (read-only copies, safe to keep across frames).
        """
        return self._state()

    # ---- internals -----------------------------------------------------------------

    def _accepts_play_input(self) -> bool:
        return not (self.paused or self.game_over)

    def _spawn(self) -> None:
        kind = str(self._piece_rule.next_piece())
        shape = self.pieces.shape(kind)
        x = (self.w // 2) - (int(shape.shape[1]) // 2)

        self.active = ActivePiece(kind=kind, kind_id=self.pieces.board_id(kind), shape=shape, x=x, y=0)
        if self.collides():
            self.game_over = True
            logger.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    def _lock_and_advance(self) -> int:
        """
        Lock the active piece, clear lines, update score/lines/level, then spawn the next piece.

        Returns the number of cleared lines.
        """
        ap = self.active
        self.board.lock(shape=ap.shape, px=ap.x, py=ap.y)

        cleared = int(self.board.clear_full_lines())
        if cleared > 0:
            self.lines += cleared

            # Score with the level in effect before this clear levels up.
            self.score += score_for_clears(cleared, self.level, self.score_cfg)

            new_level = level_for_lines(self.lines, self.score_cfg)
            if new_level != self.level:
                logger.info("level %d -> %d (lines=%d)", self.level, new_level, self.lines)
            self.level = new_level
            self.drop_interval_ms = drop_interval_ms(self.level, self.score_cfg)

        self._last_cleared = cleared
        self._spawn()
        return cleared

    def _state(self) -> State:
        grid = self.board.grid.copy()
        grid.flags.writeable = False

        ap = self.active
        shape = ap.shape.copy()
        shape.flags.writeable = False

        return State(
            grid=grid,
            active=ActivePiece(kind=ap.kind, kind_id=ap.kind_id, shape=shape, x=ap.x, y=ap.y),
            score=int(self.score),
            lines=int(self.lines),
            level=int(self.level),
            drop_interval_ms=int(self.drop_interval_ms),
            paused=bool(self.paused),
            game_over=bool(self.game_over),
        )


__all__ = ["TetrisGame", "normalize_command", "StateListener"]
