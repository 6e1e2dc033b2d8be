# /experiments/sanity_rollout.py
"""
Sanity rollouts for DodgeEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds, per pattern/speed
- Writes an episodes CSV for notebook analysis

Usage examples (from repo root):
  # Both policies, all patterns, medium speed, 20 default seeds:
  python -m experiments.sanity_rollout --policies both

  # Only heuristic on walls at fast speed, custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --patterns walls --speed fast --seeds 111,222,333

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from src.env.dodge_env import DodgeEnv
from src.env.observations import MAX_OBSTACLES
from src.game.options import GameConfig, Pattern, Speed


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.randint(0, 3))  # stay / left / right
    return act

def tiny_heuristic_policy_init(danger_y: float = 0.6, lane_half_width: float = 0.08):
    """
    Very small rule: look at obstacles in the bottom band of the screen
    (y_norm > danger_y) whose x is within `lane_half_width` of the player,
    and step away from the closest one. Otherwise stay.
    """
    def act(obs: np.ndarray) -> int:
        px = float(obs[0])
        slots = obs[1:].reshape(MAX_OBSTACLES, 2)
        threats = [x for x, y in slots if y > danger_y and abs(x - px) < lane_half_width]
        if not threats:
            return 0
        nearest = min(threats, key=lambda x: abs(x - px))
        if px <= 0.02:
            return 2
        if px >= 0.98:
            return 1
        return 1 if nearest >= px else 2
    return act


# ------------------------ Rollout core ------------------------

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    config: GameConfig,
                    seed: int,
                    steps_limit: int) -> Tuple[int, float, int, bool, bool]:
    """Returns: (ep_len, ret_sum, score_seconds, terminated, truncated)"""
    env = DodgeEnv(config=config)

    if policy_name == "random":
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            obs, r, term, trunc, info = env.step(policy(obs))
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
        seconds = int(info.get("seconds", 0))
    finally:
        env.close()

    return ep_len, ret_sum, seconds, bool(term), bool(trunc)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--patterns", type=str, default="asteroids,walls,blocks",
                    help="Comma-separated obstacle patterns")
    ap.add_argument("--speed", type=str, default="medium",
                    choices=[s.value for s in Speed])
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--steps", type=int, default=3600,
                    help="Hard cap on frames per episode (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))  # 20 fixed eval seeds by default

    patterns = [Pattern(p.strip()) for p in args.patterns.split(",") if p.strip()]

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "env_name", "policy_name", "pattern", "speed", "seed",
        "episode_len_frames", "return_sum", "score_seconds",
        "terminated", "truncated",
    ]

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} patterns={[p.value for p in patterns]} "
          f"speed={args.speed} on {len(seeds)} seeds")
    print(f"Writing summaries to {episodes_csv}")

    for pattern in patterns:
        config = GameConfig(pattern=pattern, speed=args.speed)
        for policy_name in to_run:
            for seed in seeds:
                ep_len, ret_sum, seconds, terminated, truncated = run_one_episode(
                    policy_name=policy_name,
                    config=config,
                    seed=seed,
                    steps_limit=args.steps,
                )
                row = [
                    "DodgeEnv", policy_name, pattern.value, args.speed, seed,
                    ep_len, f"{ret_sum:.1f}", seconds,
                    int(terminated), int(truncated),
                ]
                write_episode_row(episodes_csv, header, row)

                print(f"[{policy_name}/{pattern.value}] seed={seed}  len={ep_len}  "
                      f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
