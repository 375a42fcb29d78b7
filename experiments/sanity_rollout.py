# /experiments/sanity_rollout.py
"""
Play DragonEnv with scripted policies and tabulate how far each one gets.

  python -m experiments.sanity_rollout                     # both policies, seeds 101..120
  python -m experiments.sanity_rollout --policy heuristic --seeds 1,2,3 --traces
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np

from flappy_dragon.env.dragon_env import DragonEnv

Policy = Callable[[np.ndarray], int]


def flap_at_random(seed: int, flap_prob: float = 0.15) -> Policy:
    rng = np.random.RandomState(seed)
    return lambda _obs: int(rng.random_sample() < flap_prob)


def chase_gap_center(_seed: int) -> Policy:
    """Flap while falling below the middle of the next gap (obs = y, vy, dx, top, bottom)."""
    def act(obs: np.ndarray) -> int:
        y, vy, _dx, top, bottom = (float(v) for v in obs)
        return int(y > 0.5 * (top + bottom) and vy >= 0.0)
    return act


POLICIES: Dict[str, Callable[[int], Policy]] = {
    "random": flap_at_random,
    "heuristic": chase_gap_center,
}


def play(policy: Policy, seed: int, frame_skip: int, max_steps: int):
    """One episode; returns the per-episode summary and the action sequence."""
    env = DragonEnv(frame_skip=frame_skip)
    actions: List[int] = []
    total = 0.0
    try:
        obs, info = env.reset(seed=seed)
        for _ in range(max_steps):
            a = policy(obs)
            actions.append(a)
            obs, r, term, trunc, info = env.step(a)
            total += r
            if term or trunc:
                break
    finally:
        env.close()
    summary = {
        "seed": seed,
        "steps": len(actions),
        "return": round(total, 1),
        "score": info["score"],
        "distance": info["distance"],
        "death_cause": info.get("death_cause") or "",
    }
    return summary, actions


def main():
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--policy", choices=[*POLICIES, "both"], default="both")
    ap.add_argument("--seeds", default="", help="comma-separated, default 101..120")
    ap.add_argument("--frame-skip", type=int, default=4)
    ap.add_argument("--steps", type=int, default=10_000, help="decision cap per episode")
    ap.add_argument("--out-dir", default="experiments/runs")
    ap.add_argument("--traces", action="store_true", help="save each action sequence as .npy")
    args = ap.parse_args()

    seeds = [int(s) for s in args.seeds.split(",") if s.strip()] or list(range(101, 121))
    names = list(POLICIES) if args.policy == "both" else [args.policy]
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    rows = []
    for name in names:
        for seed in seeds:
            summary, actions = play(POLICIES[name](seed), seed, args.frame_skip, args.steps)
            rows.append({"policy": name, **summary})
            print(f"[{name}] seed={seed} score={summary['score']} steps={summary['steps']} "
                  f"cause={summary['death_cause'] or '-'}")
            if args.traces:
                np.save(out_dir / f"{name}_{seed}_actions.npy", np.asarray(actions, dtype=np.int8))

    with (out_dir / "episodes.csv").open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)

    for name in names:
        scores = [r["score"] for r in rows if r["policy"] == name]
        print(f"{name}: mean score {np.mean(scores):.2f}, best {max(scores)}")


if __name__ == "__main__":
    main()
