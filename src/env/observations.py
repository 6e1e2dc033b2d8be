# src/env/observations.py
"""
Fixed-size observation vector for the dodge env.

Layout (25,) float32:
    [player_x_norm,
     ob0_x_norm, ob0_y_norm, ..., ob11_x_norm, ob11_y_norm]

x is normalized by the field width into [0,1], y by the field height and
clipped to [-1,1] (obstacles waiting above the field read as negative).
Unused slots (patterns with fewer than 12 obstacles) are (0, -1).
"""
from __future__ import annotations
from typing import Tuple
import numpy as np

from src.game.config import WIDTH, HEIGHT, PLAYER_W, BLOCK_COUNT
from src.game.state import GameState

MAX_OBSTACLES = BLOCK_COUNT     # largest pool of any pattern
OBS_SIZE = 1 + 2 * MAX_OBSTACLES
PAD_SLOT: Tuple[float, float] = (0.0, -1.0)


def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.array([0.0] + [0.0, -1.0] * MAX_OBSTACLES, dtype=np.float32)
    high = np.array([1.0] + [1.0, 1.0] * MAX_OBSTACLES, dtype=np.float32)
    return low, high


def build_observation(state: GameState) -> np.ndarray:
    obs = np.empty(OBS_SIZE, dtype=np.float32)
    obs[0] = np.clip(state.player.x / max(1, WIDTH - PLAYER_W), 0.0, 1.0)

    slots = obs[1:].reshape(MAX_OBSTACLES, 2)
    slots[:] = PAD_SLOT
    for i, ob in enumerate(state.obstacles[:MAX_OBSTACLES]):
        slots[i, 0] = np.clip(ob.x / max(1, WIDTH - ob.w), 0.0, 1.0)
        slots[i, 1] = np.clip(ob.y / HEIGHT, -1.0, 1.0)
    return obs
