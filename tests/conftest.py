# tests/conftest.py
import os
import random

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg
import pytest

from snake_engine.game import GameState
from snake_engine.grid import Direction, Point
from snake_engine.snake import Snake


class ManualClock:
    """Clock whose time only moves when a test says so."""
    def __init__(self, start: float = 0.0):
        self.t = start

    def now(self) -> float:
        return self.t

    def advance(self, ms: float) -> None:
        self.t += ms


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(rng):
    return GameState(20, 15, rng=rng)


@pytest.fixture
def snake_factory():
    def make(body, direction=Direction.RIGHT):
        s = Snake(Point(*body[0]), direction)
        s.body.extend(Point(*p) for p in body[1:])
        return s
    return make


@pytest.fixture
def place(snake_factory):
    """Put a game into a given position: body (head first), direction and food."""
    def arrange(state, body, direction=Direction.RIGHT, food=(1, 1)):
        state.snake = snake_factory(body, direction)
        state.food = Point(*food)
        return state
    return arrange
