"""Gymnasium environments for the tetromino engine."""

from __future__ import annotations

from gymnasium.envs.registration import register

# One command per step on the default 10x24 board
register(
    id="TetrominoEngine-10x24-v0",
    entry_point="tetromino_engine.env.tetromino_env:TetrominoEnv",
)

__all__ = ["TetrominoEngine-10x24-v0"]
