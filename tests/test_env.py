import gymnasium as gym
import numpy as np

import tetromino_engine.env  # noqa: F401
from tetromino_engine.env.tetromino_env import TetrominoEnv
from tetromino_engine.game import Command, GameConfig
from tetromino_engine.rl.random_agent import run_random


def test_reset_returns_board_observation():
    env = TetrominoEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (24, 10)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert np.count_nonzero(obs < 0) == 4
    assert info["pieces_locked"] == 0


def test_seeded_resets_are_reproducible():
    env = TetrominoEnv()
    first, _ = env.reset(seed=11)
    second, _ = env.reset(seed=11)
    assert np.array_equal(first, second)


def test_step_applies_one_command():
    env = TetrominoEnv()
    env.reset(seed=1)
    obs, reward, terminated, truncated, info = env.step(int(Command.MOVE_DOWN))
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["moved"]
    # every spawn shape touches row 0, so one step down clears it
    assert not np.any(obs[0] < 0)

    _, _, _, _, info = env.step(int(Command.LOCK))
    assert info["pieces_locked"] == 1


def test_episode_truncates_after_max_steps():
    env = TetrominoEnv(GameConfig(max_episode_steps=3))
    env.reset(seed=0)
    results = [env.step(int(Command.MOVE_UP))[3] for _ in range(3)]
    assert results == [False, False, True]


def test_rgb_render():
    env = TetrominoEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (24 * 12, 10 * 12, 3)
    assert img.dtype == np.uint8


def test_registered_env_runs():
    env = gym.make("TetrominoEngine-10x24-v0")
    obs, _ = env.reset(seed=4)
    obs, *_ = env.step(env.action_space.sample())
    assert obs.shape == (24, 10)
    env.close()


def test_random_agent_summary(capsys):
    summary = run_random(steps=50, seed=2)
    assert summary["steps"] == 50
    assert 0 <= summary["moves"] <= 50
    assert "Random agent" in capsys.readouterr().out
