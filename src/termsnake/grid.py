# grid.py
from __future__ import annotations
from enum import IntEnum
from typing import Iterator, NamedTuple

import numpy as np  # type: ignore

from .config import GLYPH_EMPTY, GLYPH_SNAKE, GLYPH_FOOD


class Cell(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


_GLYPHS = {
    Cell.EMPTY: GLYPH_EMPTY,
    Cell.SNAKE: GLYPH_SNAKE,
    Cell.FOOD: GLYPH_FOOD,
}

def glyph(cell: Cell) -> str:
    return _GLYPHS[Cell(int(cell))]


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, delta) -> "Position":
        dx, dy = delta
        return Position(self.x + dx, self.y + dy)


class Grid:
    """
    Fixed-size board of Cell values.

    Backed by a (height, width) int8 array indexed [y, x]. All access goes
    through in_bounds(); negative coordinates never wrap around.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=np.int8)

    def in_bounds(self, pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"{tuple(pos)} is outside a {self.width}x{self.height} grid")

    def __getitem__(self, pos) -> Cell:
        self._check(pos)
        x, y = pos
        return Cell(int(self._cells[y, x]))

    def __setitem__(self, pos, cell: Cell) -> None:
        self._check(pos)
        x, y = pos
        self._cells[y, x] = Cell(cell)

    def clear(self) -> None:
        self._cells.fill(Cell.EMPTY)

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self._cells == Cell(cell)))

    def positions(self, cell: Cell) -> list[Position]:
        ys, xs = np.nonzero(self._cells == Cell(cell))
        return [Position(int(x), int(y)) for x, y in zip(xs, ys)]

    def rows(self) -> Iterator[str]:
        """Yield each row as a string of glyphs, top to bottom."""
        for row in self._cells:
            yield "".join(glyph(v) for v in row)

    def copy(self) -> "Grid":
        other = Grid(self.width, self.height)
        other._cells = self._cells.copy()
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, snake={self.positions(Cell.SNAKE)})"
