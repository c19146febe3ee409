# loop.py
from __future__ import annotations
from enum import Enum
import logging
from typing import List, Optional

from .config import CFG, Config
from .display import Display
from .game import Direction, GamePhase, GameSession, TickResult, new_session
from .screens import end_overlay, score_text, start_overlay

log = logging.getLogger(__name__)

# Keys taken from the queue in one tick; the rest wait for the next one
MAX_KEYS_PER_TICK = 32


class Action(Enum):
    MOVE_UP = Direction.UP
    MOVE_DOWN = Direction.DOWN
    MOVE_LEFT = Direction.LEFT
    MOVE_RIGHT = Direction.RIGHT
    QUIT_TO_END = "quit"
    UNRECOGNIZED = None


_KEYMAP = {
    "up": Action.MOVE_UP,
    "down": Action.MOVE_DOWN,
    "left": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
    "q": Action.QUIT_TO_END,
}

def classify_key(key: Optional[str]) -> Action:
    return _KEYMAP.get(key, Action.UNRECOGNIZED)


class GameLoop:
    """
    Drives one GameSession through START -> PLAYING -> END -> START ...

    Takes a display that is already open; every call to step() does one
    unit of work for the current phase (one screen, or one tick).
    """

    def __init__(self, display: Display, cfg: Config = CFG, session: Optional[GameSession] = None):
        self.display = display
        self.cfg = cfg
        self.session = session if session is not None else new_session(cfg.grid_w, cfg.grid_h)

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    def _enter(self, phase: GamePhase) -> None:
        log.info("%s -> %s (points=%d)", self.session.phase.name, phase.name, self.session.points)
        self.session.phase = phase

    def step(self) -> GamePhase:
        """Advance by one screen or tick; returns the phase afterwards."""
        if self.session.phase is GamePhase.START:
            self._start_screen()
        elif self.session.phase is GamePhase.PLAYING:
            self._tick()
        else:
            self._end_screen()
        return self.session.phase

    def run(self) -> None:
        # Only a signal or window close gets out of here
        while True:
            self.step()

    # ---------- Phases ----------
    def _wait_for_key(self) -> None:
        # Keys typed during play must not answer this screen
        self.display.flush_input()
        self.display.poll_key(None)

    def _start_screen(self) -> None:
        s = self.session
        self.display.render(s.grid, score_text(s.points), start_overlay())
        self._wait_for_key()
        s.reset()
        self._enter(GamePhase.PLAYING)
        self._draw()

    def _read_keys(self) -> List[str]:
        """Wait up to one tick for a key, then take whatever else is already queued."""
        keys = []
        key = self.display.poll_key(self.cfg.tick_ms)
        while key is not None:
            keys.append(key)
            if len(keys) >= MAX_KEYS_PER_TICK:
                break
            key = self.display.poll_key(0)
        return keys

    def _tick(self) -> None:
        s = self.session
        move = None
        for key in self._read_keys():
            action = classify_key(key)
            if action is Action.QUIT_TO_END:
                self._enter(GamePhase.END)
                return
            if action is Action.UNRECOGNIZED:
                log.debug("ignoring key %r", key)
            else:
                move = action.value

        if move is not None and not s.apply_input(move):
            log.debug("refusing reverse turn %s while heading %s", move.name, s.direction.name)

        if s.advance_tick() is TickResult.LOSS:
            log.info("hit at %s heading %s", tuple(s.head), s.direction.name)
            self._enter(GamePhase.END)
            return
        self._draw()

    def _end_screen(self) -> None:
        s = self.session
        self.display.render(s.grid, score_text(s.points), end_overlay(s.points))
        self._wait_for_key()
        self._enter(GamePhase.START)

    def _draw(self) -> None:
        s = self.session
        self.display.render(s.grid, score_text(s.points))
