# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .config import GRID_W, GRID_H, UP, DOWN, LEFT, RIGHT
from .grid import Cell, Grid, Position


class Direction(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @property
    def reverse(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class GamePhase(Enum):
    START = "start"
    PLAYING = "playing"
    END = "end"


class TickResult(Enum):
    CONTINUE = "continue"
    LOSS = "loss"


# ---------- State ----------
@dataclass
class GameSession:
    grid: Grid
    head: Position
    direction: Direction = Direction.RIGHT
    points: int = 0
    phase: GamePhase = field(default=GamePhase.START)

    def reset(self) -> None:
        """Fresh round: empty board, snake at the centre heading right, no points."""
        self.points = 0
        self.direction = Direction.RIGHT
        self.head = Position(self.grid.width // 2, self.grid.height // 2)
        self.grid.clear()
        self.grid[self.head] = Cell.SNAKE

    def apply_input(self, requested: Direction) -> bool:
        """Take a new heading unless it is a 180° turn. Returns True if taken."""
        if requested is self.direction.reverse:
            return False
        self.direction = requested
        return True

    def advance_tick(self) -> TickResult:
        """
        Move the head one cell along the current direction.
        Returns LOSS on a wall or snake hit (nothing is changed),
        otherwise moves the head, scores a point and returns CONTINUE.
        """
        candidate = self.head.moved(self.direction.value)

        # Wall collision
        if not self.grid.in_bounds(candidate):
            return TickResult.LOSS

        # Self collision
        if self.grid[candidate] == Cell.SNAKE:
            return TickResult.LOSS

        # Move; no food yet, so every step scores
        self.grid[self.head] = Cell.EMPTY
        self.grid[candidate] = Cell.SNAKE
        self.head = candidate
        self.points += 1
        return TickResult.CONTINUE


def new_session(width: int = GRID_W, height: int = GRID_H) -> GameSession:
    """A session waiting on the start screen; reset() is called when play begins."""
    return GameSession(
        grid=Grid(width, height),
        head=Position(width // 2, height // 2),
    )
