# intents.py
from __future__ import annotations
from enum import Enum, auto
from typing import Iterable

from .game import GameState
from .grid import Direction


class Intent(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    QUIT = auto()


INTENT_TO_DIRECTION = {
    Intent.MOVE_UP: Direction.UP,
    Intent.MOVE_DOWN: Direction.DOWN,
    Intent.MOVE_LEFT: Direction.LEFT,
    Intent.MOVE_RIGHT: Direction.RIGHT,
}


def apply_intents(state: GameState, intents: Iterable[Intent]) -> bool:
    """Feed polled intents to the game in order. Return False to quit."""
    for intent in intents:
        if intent is Intent.QUIT:
            return False
        state.request_direction_change(INTENT_TO_DIRECTION[intent])
    return True
