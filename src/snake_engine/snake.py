# snake.py
from __future__ import annotations
from collections import deque
from itertools import islice
from typing import Deque, Optional

from .grid import Direction, Point, shift


class Snake:
    """
    Ordered body (head at index 0) plus the direction state.

    Direction changes are buffered: at most one pending change is held
    between ticks and applied at the start of the next advance().
    """

    def __init__(self, head: Point, direction: Direction = Direction.RIGHT):
        self.body: Deque[Point] = deque([Point(*head)])
        self.direction = direction
        self.pending: Optional[Direction] = None

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def neck(self) -> Optional[Point]:
        return self.body[1] if len(self.body) > 1 else None

    @property
    def tail(self) -> Point:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, p) -> bool:
        return p in self.body

    def request_direction_change(self, d: Direction) -> None:
        """Buffer d for the next advance. A 180° turn against the direction in effect is ignored."""
        if d == self.direction.opposite():
            return
        self.pending = d

    def advance(self, ate_food: bool) -> None:
        # Commit direction once per tick
        if self.pending is not None:
            self.direction = self.pending
            self.pending = None

        self.body.appendleft(shift(self.head, self.direction))
        if not ate_food:
            self.body.pop()

    def has_self_collision(self) -> bool:
        head = self.body[0]
        return any(seg == head for seg in islice(self.body, 1, None))
