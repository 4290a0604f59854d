# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging
import random

from .config import clamp_board
from .food import place_food
from .grid import Direction, Point, is_border
from .snake import Snake

logger = logging.getLogger(__name__)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to renderers for the duration of one draw."""
    board_w: int
    board_h: int
    body: Tuple[Point, ...]    # head first
    food: Point
    score: int
    direction: Direction
    terminal: bool
    reason: Optional[str]      # "wall" | "self" | None

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def segments(self) -> Tuple[Point, ...]:
        """Body without the head."""
        return self.body[1:]


# ---------- State ----------
@dataclass
class GameState:
    board_w: int
    board_h: int
    rng: random.Random = field(default_factory=random.Random, repr=False)
    snake: Snake = field(init=False)
    food: Point = field(init=False)
    score: int = field(init=False, default=0)
    terminal: bool = field(init=False, default=False)
    reason: Optional[str] = field(init=False, default=None)

    def __post_init__(self):
        self.reset()

    def reset(self) -> None:
        """Start over on the same board: centred length-1 snake moving right, fresh food, score 0."""
        self.snake = Snake(Point(self.board_w // 2, self.board_h // 2), Direction.RIGHT)
        self.food = place_food(self.board_w, self.board_h, self.snake.body, self.rng)
        self.score = 0
        self.terminal = False
        self.reason = None

    def request_direction_change(self, d: Direction) -> None:
        self.snake.request_direction_change(d)

    def step(self) -> bool:
        """
        Advance the game by one tick.
        Returns True if alive, False if game over. A finished game is
        left untouched until reset().
        """
        if self.terminal:
            return False

        ate_food = self.snake.head == self.food
        self.snake.advance(ate_food)

        if ate_food:
            self.score += 1
            # post-advance body, so the grown tail counts as occupied
            self.food = place_food(self.board_w, self.board_h, self.snake.body, self.rng)

        head = self.snake.head
        if is_border(head, self.board_w, self.board_h):
            self.terminal, self.reason = True, "wall"
        elif self.snake.has_self_collision():
            self.terminal, self.reason = True, "self"

        if self.terminal:
            logger.info("game over (%s) at %s with score %d", self.reason, head, self.score)
        return not self.terminal

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board_w=self.board_w,
            board_h=self.board_h,
            body=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            direction=self.snake.direction,
            terminal=self.terminal,
            reason=self.reason,
        )


def new_game_state(board_w: int, board_h: int, seed: Optional[int] = None) -> GameState:
    """Build a game on a board clamped to the minimum playable size."""
    w, h = clamp_board(board_w, board_h)
    return GameState(w, h, rng=random.Random(seed))
