"""Tick-driven snake simulation engine."""

from snake_engine.grid import Direction, Point
from snake_engine.snake import Snake
from snake_engine.food import place_food
from snake_engine.game import GameState, Snapshot, new_game_state
from snake_engine.scheduler import TickScheduler, should_step

__all__ = [
    "Direction",
    "Point",
    "Snake",
    "place_food",
    "GameState",
    "Snapshot",
    "new_game_state",
    "TickScheduler",
    "should_step",
]
