from __future__ import annotations

import argparse

import gymnasium as gym

import tetromino_engine.env  # noqa: F401  ensure registration


def run_random(steps: int = 200, seed: int | None = None) -> dict:
    env = gym.make("TetrominoEngine-10x24-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    moves = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        moves += int(info["moved"])
        if terminated or truncated:
            obs, info = env.reset()
    env.close()
    summary = {"steps": steps, "moves": moves, "pieces_locked": info["pieces_locked"]}
    print(f"Random agent: {moves}/{steps} commands changed the board, "
          f"{summary['pieces_locked']} pieces locked")
    return summary


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    return p


if __name__ == "__main__":  # pragma: no cover
    args = build_parser().parse_args()
    run_random(args.steps, args.seed)
