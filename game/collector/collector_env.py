"""
CollectorEnv - the star collector as a Gymnasium environment
-------------------------------------------------------------
- Same World / physics step as the playable game
- Action: MultiBinary(4) = held keys (up, down, left, right)
- One env step = one fixed simulation step
- Reward: points scored during the step (pickups and the time bonus)
- Episode ends when the round is won or the timer runs out

Quick test:
    python -m rl.evaluate --policy greedy --episodes 3
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import DEFAULT_CONFIG, GameConfig
from .input import Controls
from .physics import step
from .state import GameState
from .utils import clamp
from .world import World, activate, new_world


class CollectorEnv(gym.Env):
    """Single-round star collection environment"""

    metadata = {"render_modes": ["human"], "render_fps": DEFAULT_CONFIG.fps}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode
        self.config = config
        self.width = config.width if width is None else width
        self.height = config.height if height is None else height
        self.dt = config.dt

        self.action_space = spaces.MultiBinary(4)

        # Player: pos(2) vel(2) time(1) progress(1)
        # Each star: rel pos(2) collected(1)
        obs_dim = 6 + 3 * config.star_count
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.world: World = new_world(self.width, self.height, config)
        self._rng = random.Random()
        self._step_count = 0

        # Arcade rendering state
        self._window = None
        self._renderer = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)

        # a fresh world keeps the best score but can always be activated
        high_score = self.world.high_score
        self.world = new_world(self.width, self.height, self.config)
        self.world.high_score = high_score
        activate(self.world, self.config, self._rng)
        self._step_count = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._get_info()

    def step(self, action):
        up, down, left, right = (bool(a) for a in np.asarray(action).reshape(-1)[:4])
        before = self.world.score

        step(self.world, Controls(up, down, left, right), self.dt, self.config)
        self._step_count += 1

        reward = float(self.world.score - before)
        terminated = self.world.state != GameState.PLAYING
        truncated = False

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        w = self.world
        p = w.player
        vmax = self.config.player_max_speed

        obs_parts = [
            (p.x / w.width) * 2 - 1,
            (p.y / w.height) * 2 - 1,
            clamp(p.vx / vmax, -1, 1),
            clamp(p.vy / vmax, -1, 1),
            (w.time_left / self.config.time_limit) * 2 - 1,
            (w.collected_count / max(1, len(w.collectibles))) * 2 - 1,
        ]
        for star in w.collectibles:
            obs_parts += [
                clamp((star.x - p.x) / w.width, -1, 1),
                clamp((star.y - p.y) / w.height, -1, 1),
                1.0 if star.collected else 0.0,
            ]

        obs = np.array(obs_parts, dtype=np.float32)
        return np.clip(obs, -1.0, 1.0)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.world.score,
            "high_score": self.world.high_score,
            "time_left": self.world.time_left,
            "collected": self.world.collected_count,
            "state": self.world.state.value,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode != "human":
            return None

        if self._window is None:
            import arcade
            from .window import SceneRenderer

            self._window = arcade.Window(int(self.width), int(self.height), "CollectorEnv - Arcade")
            self._renderer = SceneRenderer(self._window, lambda: self.world)

        self._window.dispatch_events()
        self._renderer.draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
            self._renderer = None
