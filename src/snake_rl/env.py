# src/snake_rl/env.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import random

import numpy as np  # type: ignore

from snake_engine.config import BOARD_W, BOARD_H
from snake_engine.game import GameState, new_game_state
from snake_engine.grid import Direction, is_border, shift
from snake_engine.loop import Renderer

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.UP,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.RIGHT,
}

_CLOCKWISE = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction: Direction) -> Direction:
    """Rotate a direction 90° CCW (screen coordinates)."""
    return _CLOCKWISE[(_CLOCKWISE.index(direction) - 1) % 4]

def right_of(direction: Direction) -> Direction:
    """Rotate a direction 90° CW (screen coordinates)."""
    return _CLOCKWISE[(_CLOCKWISE.index(direction) + 1) % 4]

def manhattan(ax: int, ay: int, bx: int, by: int) -> int:
    """Manhattan (L1) distance on the grid."""
    return abs(ax - bx) + abs(ay - by)

def would_die(state: GameState, direction: Direction) -> bool:
    """
    True if the next tick, heading in `direction`, ends the game.
    Mirrors GameState.step(): growth is decided by the head sitting on the
    food before the move, and the tail only moves away when not growing.
    """
    head = state.snake.head
    nxt = shift(head, direction)
    if is_border(nxt, state.board_w, state.board_h):
        return True
    body = list(state.snake.body)
    if head != state.food:
        body = body[:-1]
    return nxt in body

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(state: GameState) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal
    """
    hx, hy = state.snake.head
    fx, fy = state.food

    denom_w = max(state.board_w - 1, 1)
    denom_h = max(state.board_h - 1, 1)

    d = state.snake.direction
    return np.array(
        [
            hx / denom_w, hy / denom_h, fx / denom_w, fy / denom_h,
            float(d.dx), float(d.dy),
            float(would_die(state, d)),
            float(would_die(state, left_of(d))),
            float(would_die(state, right_of(d))),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper that advances the game exactly one tick per step(),
    with no real-time gating.

    Rewards:
      + eat_reward  when food is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step (tiny negative to discourage dithering)
      + death_reward on death
    """
    board_w: int        = BOARD_W
    board_h: int        = BOARD_H
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int | None = None
    renderer: Renderer | None = None

    def __post_init__(self):
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)
        self.state: GameState | None = None

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)
        if self.state is None:
            self.state = new_game_state(self.board_w, self.board_h)
            # board may have been clamped to the minimum size
            self.board_w, self.board_h = self.state.board_w, self.state.board_h
        self.state.rng = self.rng
        self.state.reset()
        return observe(self.state)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        """
        if self.state is None:
            raise RuntimeError("Call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")

        state = self.state
        # reversals are dropped by the snake, same as for keyboard input
        state.request_direction_change(ACTIONS[action])

        hx, hy = state.snake.head
        d_before = manhattan(hx, hy, *state.food)
        score_before = state.score

        alive = state.step()

        if not alive:
            reward = self.death_reward
        else:
            reward = self.step_penalty
            if state.score > score_before:
                reward += self.eat_reward
            hx2, hy2 = state.snake.head
            d_after = manhattan(hx2, hy2, *state.food)
            reward += self.shaping_coef * (d_before - d_after)

        snap = state.snapshot()
        info = {"score": state.score, "reason": state.reason, "snapshot": snap}
        if not alive:
            logger.debug("episode ended: %s, score %d", state.reason, state.score)
        return observe(state), reward, not alive, info

    def render(self) -> None:
        """Hand the current snapshot to the renderer, if one is attached."""
        if self.renderer is None or self.state is None:
            return
        self.renderer.draw(self.state.snapshot())

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)
