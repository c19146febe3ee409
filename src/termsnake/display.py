# display.py
from __future__ import annotations
import curses
import logging
from typing import Optional, Protocol, Sequence, Tuple

from .config import Config
from .grid import Grid
from .screens import center_lines

log = logging.getLogger(__name__)


class SnakeError(Exception):
    """Base class for errors that stop the game from running."""


class DisplayTooSmall(SnakeError):
    def __init__(self, required: Tuple[int, int], actual: Tuple[int, int], unit: str = "columns x rows"):
        self.required = required
        self.actual = actual
        self.unit = unit
        super().__init__(
            f"display too small: need {required[0]}x{required[1]}, "
            f"have {actual[0]}x{actual[1]} ({unit})"
        )


class Display(Protocol):
    """What GameLoop needs from a screen. Used as a context manager."""

    def __enter__(self) -> "Display":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...

    def poll_key(self, timeout_ms: Optional[int]) -> Optional[str]:
        ...

    def flush_input(self) -> None:
        """Drop keys typed before now."""
        ...

    def render(self, grid: Grid, score_text: str, overlay: Optional[Sequence[str]] = None) -> None:
        ...


def required_size(width: int, height: int) -> Tuple[int, int]:
    """(columns, rows) for a width x height board: border on each side plus a score row."""
    return width + 2, height + 3


# ---------- Terminal ----------
_ARROWS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}

def translate_key(ch: int) -> Optional[str]:
    """curses getch() code -> key name; None when getch timed out."""
    if ch == -1:
        return None
    if ch in _ARROWS:
        return _ARROWS[ch]
    if 0 <= ch < 256 and chr(ch).isprintable():
        return chr(ch)
    return "unknown"


class CursesDisplay:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.stdscr = None
        self.win = None
        self.board = None

    def __enter__(self) -> "CursesDisplay":
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                log.debug("terminal cannot hide the cursor")

            rows, cols = self.stdscr.getmaxyx()
            need_cols, need_rows = required_size(self.width, self.height)
            if cols < need_cols or rows < need_rows:
                raise DisplayTooSmall(required=(need_cols, need_rows), actual=(cols, rows))

            self.stdscr.clear()
            self.stdscr.refresh()
            top, left = (rows - need_rows) // 2, (cols - need_cols) // 2
            self.win = curses.newwin(need_rows, need_cols, top, left)
            self.win.keypad(True)
            self.board = self.win.derwin(self.height + 2, self.width + 2, 1, 0)
            log.info("curses display %dx%d at (%d, %d) in %dx%d terminal",
                     need_cols, need_rows, left, top, cols, rows)
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self.stdscr is None:
            return
        self.stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.stdscr = self.win = self.board = None

    def poll_key(self, timeout_ms: Optional[int]) -> Optional[str]:
        self.win.timeout(-1 if timeout_ms is None else timeout_ms)
        return translate_key(self.win.getch())

    def flush_input(self) -> None:
        curses.flushinp()

    def render(self, grid: Grid, score_text: str, overlay: Optional[Sequence[str]] = None) -> None:
        self.win.erase()
        self.win.addstr(0, 1, score_text[: self.width])
        self.board.box()
        for y, row in enumerate(grid.rows()):
            self.board.addstr(y + 1, 1, row)
        if overlay:
            for x, y, text in center_lines(list(overlay), grid.width, grid.height):
                self.board.addstr(y + 1, x + 1, text, curses.A_BOLD)
        self.win.noutrefresh()
        curses.doupdate()


def open_display(cfg: Config):
    """Build the display named by cfg.backend; enter it to acquire the screen."""
    if cfg.backend == "pygame":
        from .window import PygameDisplay
        return PygameDisplay(cfg.grid_w, cfg.grid_h)
    return CursesDisplay(cfg.grid_w, cfg.grid_h)
