# window.py
from __future__ import annotations
import logging
import time
from typing import Optional, Sequence, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, SCORE_BAR, BG, GREEN, RED, TEXT, EDGE
from .display import DisplayTooSmall
from .grid import Cell, Grid

log = logging.getLogger(__name__)

_ARROWS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}

def translate_key(key: int, unicode: str) -> str:
    """pygame KEYDOWN (key, unicode) -> key name."""
    if key in _ARROWS:
        return _ARROWS[key]
    if unicode and unicode.isprintable():
        return unicode
    return "unknown"

def window_size(width: int, height: int) -> Tuple[int, int]:
    return width * CELL_SIZE, height * CELL_SIZE + SCORE_BAR


class PygameDisplay:
    """Same board in a desktop window: one CELL_SIZE square per cell."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.screen = None
        self.font = None

    def __enter__(self) -> "PygameDisplay":
        pygame.init()
        try:
            need = window_size(self.width, self.height)
            info = pygame.display.Info()
            have = (info.current_w, info.current_h)
            # current_w/h are -1 when the driver cannot tell
            if min(have) > 0 and (have[0] < need[0] or have[1] < need[1]):
                raise DisplayTooSmall(required=need, actual=have, unit="pixels")
            self.screen = pygame.display.set_mode(need)
            pygame.display.set_caption("Snake")
            self.font = pygame.font.SysFont(None, 24)
            log.info("pygame window %dx%d", *need)
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        pygame.quit()
        self.screen = self.font = None

    def poll_key(self, timeout_ms: Optional[int]) -> Optional[str]:
        deadline = None if timeout_ms is None else time.monotonic() + timeout_ms / 1000
        while True:
            if deadline is None:
                event = pygame.event.wait()
            else:
                remaining = int((deadline - time.monotonic()) * 1000)
                # poll() only looks at what is already queued
                event = pygame.event.poll() if remaining <= 0 else pygame.event.wait(remaining)
                if event.type == pygame.NOEVENT:
                    return None
            if event.type == pygame.QUIT:
                raise SystemExit
            if event.type == pygame.KEYDOWN:
                return translate_key(event.key, event.unicode)

    def flush_input(self) -> None:
        pygame.event.clear(pygame.KEYDOWN)

    def _draw_cell(self, gx: int, gy: int, color) -> None:
        rect = pygame.Rect(gx * CELL_SIZE, SCORE_BAR + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(self.screen, color, rect)

    def render(self, grid: Grid, score_text: str, overlay: Optional[Sequence[str]] = None) -> None:
        width_px, height_px = self.screen.get_size()
        self.screen.fill(BG)
        pygame.draw.line(self.screen, EDGE, (0, SCORE_BAR - 1), (width_px, SCORE_BAR - 1))

        for x, y in grid.positions(Cell.FOOD):
            self._draw_cell(x, y, RED)
        for x, y in grid.positions(Cell.SNAKE):
            self._draw_cell(x, y, GREEN)

        txt = self.font.render(score_text, True, TEXT)
        self.screen.blit(txt, (8, 6))

        if overlay:
            # Dim the board under the text
            shade = pygame.Surface((width_px, height_px - SCORE_BAR), pygame.SRCALPHA)
            shade.fill((0, 0, 0, 140))
            self.screen.blit(shade, (0, SCORE_BAR))

            mid_y = SCORE_BAR + (height_px - SCORE_BAR) // 2
            first = mid_y - 14 * (len(overlay) - 1)
            for i, line in enumerate(overlay):
                surf = self.font.render(line, True, (240, 240, 250))
                self.screen.blit(surf, surf.get_rect(center=(width_px // 2, first + 28 * i)))

        pygame.display.flip()
