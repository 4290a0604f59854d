# grid.py
from __future__ import annotations
from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    # value is the (dx, dy) unit step; y grows downwards
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def shift(p: Point, d: Direction) -> Point:
    """
    Move one cell in direction d.
    Coordinates saturate at 0: stepping left/up from the first row or
    column stays on it instead of going negative.
    """
    return Point(max(p.x + d.dx, 0), max(p.y + d.dy, 0))


def is_border(p: Point, width: int, height: int) -> bool:
    """True if p lies on the outermost ring of the board."""
    return p.x == 0 or p.x == width - 1 or p.y == 0 or p.y == height - 1


def in_interior(p: Point, width: int, height: int) -> bool:
    return 1 <= p.x <= width - 2 and 1 <= p.y <= height - 2
