# src/snake_rl/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Random policy: pick a uniformly random action.
    Reversals it picks are simply dropped by the snake.
    """
    return int(np.random.randint(env.action_space_n))
