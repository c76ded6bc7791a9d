from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetromino_engine.game import Color, Command, GameConfig, RandomShapeSource, TetrominoGame
from tetromino_engine.visualization.palette import color_for_value


class TetrominoEnv(gym.Env):
    """One engine command per step.

    The engine has no score and no game-over state, so the reward is always
    0.0 and episodes only end by truncation after `max_episode_steps`.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = TetrominoGame(self.config)
        self.render_mode = render_mode

        top = int(max(Color))
        self.observation_space = spaces.Box(
            low=-top, high=top, shape=(self.config.height, self.config.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Command))

        self._steps = 0
        self._last_obs: Optional[np.ndarray] = None

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self, moved: bool = False) -> Dict[str, Any]:
        piece = self.game.current_piece
        return {
            "pieces_locked": self.game.pieces_locked,
            "piece": piece.kind.name,
            "position": piece.position,
            "moved": moved,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.shape_source = RandomShapeSource(seed)
        self.game.reset()
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        moved = self.game.step(Command(int(action)))
        self._steps += 1
        truncated = self._steps >= self.config.max_episode_steps
        obs = self._get_obs()
        self._last_obs = obs
        return obs, 0.0, False, truncated, self._get_info(moved)

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self._last_obs if self._last_obs is not None else self._get_obs()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
