# src/env/dodge_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS
from src.game.controls import Direction
from src.game.options import GameConfig
from src.game.render import render as render_frame
from src.game.session import Session
from src.game.state import Phase
from src.env.observations import build_observation, observation_bounds

# action -> held directions for that frame
ACTIONS = (
    frozenset(),                    # 0 = stay
    frozenset({Direction.LEFT}),    # 1 = left
    frozenset({Direction.RIGHT}),   # 2 = right
)


class DodgeEnv(gym.Env):
    """
    Dodge game as a Gymnasium environment (vector observations).
    - One env step = one game frame (60 Hz).
    - Reward: +1 per surviving frame, -1 on the collision frame.
    - Observation: shape (25,), float32 (see src/env/observations.py).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 config: Optional[GameConfig] = None,
                 render_mode: Optional[str] = None,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode!r}"
        self.config = config if config is not None else GameConfig()
        self.render_mode = render_mode

        self.time_limit_steps = None
        if time_limit_seconds is not None:
            self.time_limit_steps = int(FPS * time_limit_seconds)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.session: Optional[Session] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self._render_rng = random.Random(0)

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        if options and "config" in options:
            self.config = options["config"]

        # Obstacle placement draws from a Random seeded off np_random so that
        # reset(seed=...) reproduces the same layout
        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.session = Session(self.config, rng=rng)
        self.session.start()
        self.timestep = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "Call reset() before step()"

        self.session.tick(ACTIONS[int(action)])
        self.timestep += 1

        terminated = self.session.phase is Phase.GAME_OVER
        reward = -1.0 if terminated else 1.0
        truncated = False
        if (self.time_limit_steps is not None) and (self.timestep >= self.time_limit_steps):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session.state)

    def _info(self) -> Dict[str, Any]:
        assert self.session is not None
        state = self.session.state
        return {
            "score": state.score,
            "seconds": state.seconds,
            "timestep": self.timestep,
            "pattern": self.config.pattern.value,
            "speed": self.config.speed.value,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Retro Dodge - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))

        render_frame(self.screen, self.session.state, self.config, rng=self._render_rng)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
