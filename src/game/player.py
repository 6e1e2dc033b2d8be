# src/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import AbstractSet
from .config import (
    WIDTH, PLAYER_W, PLAYER_H, PLAYER_SPAWN_X, PLAYER_SPAWN_Y, PLAYER_STEP
)
from .controls import Direction


@dataclass
class Player:
    """
    Player box at the bottom of the field. Only x changes during play;
    it is clamped to [0, WIDTH - w] on every move.
    """
    x: int = PLAYER_SPAWN_X
    y: int = PLAYER_SPAWN_Y
    w: int = PLAYER_W
    h: int = PLAYER_H

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.w, self.h)

    @property
    def max_x(self) -> int:
        return WIDTH - self.w

    def move(self, held: AbstractSet[Direction]) -> None:
        """Apply held directions, left first then right (right wins when both are held)."""
        if Direction.LEFT in held:
            self.x = max(0, self.x - PLAYER_STEP)
        if Direction.RIGHT in held:
            self.x = min(self.max_x, self.x + PLAYER_STEP)
