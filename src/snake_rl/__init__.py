"""Headless environment and scripted players for the snake engine."""

from snake_rl.env import ACTIONS, SnakeEnv, observe

__all__ = ["ACTIONS", "SnakeEnv", "observe"]
