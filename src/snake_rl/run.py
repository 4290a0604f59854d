# src/snake_rl/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import List, Tuple

from snake_engine.config import CFG
from snake_rl.env import SnakeEnv
from snake_rl.policies import POLICIES

Row = Tuple[int, int, float, int]


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float, max_steps: int = 10_000) -> Tuple[int, float, int]:
    """
    Run a single episode with a scripted policy.

    Returns:
        steps: number of steps taken
        total: total return (sum of rewards)
        score: final score from info["score"]
    """
    try:
        choose = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        a = choose(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        env.render()
        total += r
        steps += 1

        if done or steps >= max_steps:
            score = info.get("score", 0)
            break

    return steps, total, score


def run_episodes(env: SnakeEnv, policy: str, episodes: int, epsilon: float,
                 max_steps: int = 10_000) -> List[Row]:
    rows: List[Row] = []
    print("ep,steps,return,score")
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon, max_steps)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))
    return rows


def write_csv(path: str, rows: List[Row]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(("ep", "steps", "return", "score"))
        writer.writerows(rows)


# --------------------------
# Main
# --------------------------
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Let a scripted policy play snake headlessly.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument("--epsilon", type=float, default=0.1, help="epsilon for eps-greedy")
    parser.add_argument("--outdir", type=str, default="data/runs", help="CSV is saved here")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--width", type=int, default=CFG.board_w)
    parser.add_argument("--height", type=int, default=CFG.board_h)
    parser.add_argument("--max-steps", type=int, default=10_000, help="per-episode step cap")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> str:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"auto_{args.policy}.csv")

    env = SnakeEnv(board_w=args.width, board_h=args.height, seed_value=args.seed)
    print(f"Running {args.episodes} episode(s) with policy={args.policy} ε={args.epsilon}")
    rows = run_episodes(env, args.policy, args.episodes, args.epsilon, args.max_steps)
    write_csv(out_csv, rows)

    print(f"\nSaved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
