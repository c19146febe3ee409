from dataclasses import dataclass
import os
from typing import Optional

# ----- Grid -----
GRID_W, GRID_H = 32, 16

# ----- Glyphs (terminal) -----
GLYPH_EMPTY = " "
GLYPH_SNAKE = "#"
GLYPH_FOOD = "O"

# ----- Window (pygame backend) -----
CELL_SIZE = 20
SCORE_BAR = 28

# ----- Colors -----
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
EDGE  = (90, 90, 100)

# ----- Directions (dx, dy), y grows downwards -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

BACKENDS = ("curses", "pygame")

# ----- Tunables -----
@dataclass
class Config:
    tick_ms: int = 120
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    backend: str = "curses"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """
        Build a Config from TERMSNAKE_* environment variables.
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        cfg = cls()

        raw_tick = env.get("TERMSNAKE_TICK_MS")
        if raw_tick is not None:
            try:
                cfg.tick_ms = int(raw_tick)
            except ValueError:
                raise ValueError(f"TERMSNAKE_TICK_MS must be an integer, got {raw_tick!r}") from None
            if cfg.tick_ms <= 0:
                raise ValueError(f"TERMSNAKE_TICK_MS must be positive, got {cfg.tick_ms}")

        backend = env.get("TERMSNAKE_BACKEND")
        if backend is not None:
            backend = backend.strip().lower()
            if backend not in BACKENDS:
                raise ValueError(
                    f"TERMSNAKE_BACKEND must be one of {', '.join(BACKENDS)}, got {backend!r}"
                )
            cfg.backend = backend

        cfg.log_file = env.get("TERMSNAKE_LOG") or None
        return cfg

CFG = Config()
