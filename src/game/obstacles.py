# src/game/obstacles.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional
import pygame
from .config import (
    WIDTH, ASTEROID_COUNT, ASTEROID_SIZE, ASTEROID_SPAWN_Y_MIN,
    WALL_COUNT, WALL_W, WALL_H, WALL_SPACING_X, WALL_BASE_Y, WALL_STEP_Y,
    BLOCK_COUNT, BLOCK_SIZE, BLOCK_SPAWN_Y_MIN,
    RECYCLE_BELOW_Y, RECYCLE_Y_MIN,
)
from .options import Pattern

# Fixed pool size per pattern; never changes during a session
POOL_SIZES = {
    Pattern.ASTEROIDS: ASTEROID_COUNT,
    Pattern.WALLS: WALL_COUNT,
    Pattern.BLOCKS: BLOCK_COUNT,
}


@dataclass
class Obstacle:
    """
    Falling rectangle. `vx` is only set for walls, which sweep sideways and
    bounce off the field edges; everything else falls straight down.
    """
    x: int
    y: int
    w: int
    h: int
    vy: int
    vx: Optional[int] = None

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.w, self.h)

    @property
    def max_x(self) -> int:
        return WIDTH - self.w

    def advance(self, bounce: bool) -> None:
        """Move one frame. With `bounce`, reverse vx on reaching either side."""
        self.y += self.vy
        if self.vx:
            self.x += self.vx
            if bounce:
                # flip only while heading into the edge so an obstacle sitting
                # on the bound leaves it instead of jittering in place
                if (self.x <= 0 and self.vx < 0) or (self.x >= self.max_x and self.vx > 0):
                    self.vx = -self.vx

    def needs_recycle(self) -> bool:
        return self.y > RECYCLE_BELOW_Y

    def recycle(self, rng, keep_x: bool) -> None:
        """Send back above the field; vy (and vx) persist."""
        self.y = rng.randrange(RECYCLE_Y_MIN, 0)
        if not keep_x:
            self.x = rng.randrange(0, self.max_x)


def _random_drop(count: int, size: int, y_min: int, speed: int, rng) -> List[Obstacle]:
    return [
        Obstacle(
            x=rng.randrange(0, WIDTH - size),
            y=rng.randrange(y_min, 0),
            w=size,
            h=size,
            vy=speed,
        )
        for _ in range(count)
    ]


def _walls(speed: int) -> List[Obstacle]:
    return [
        Obstacle(
            x=i * WALL_SPACING_X,
            y=WALL_BASE_Y - i * WALL_STEP_Y,
            w=WALL_W,
            h=WALL_H,
            vy=speed,
            vx=speed if i % 2 == 0 else -speed,
        )
        for i in range(WALL_COUNT)
    ]


def generate(pattern: Pattern | str, speed_units: int, rng: random.Random | None = None) -> List[Obstacle]:
    """
    Build the obstacle pool for a session.
    Unseeded unless an rng is passed in (the headless env does that).
    """
    pattern = Pattern(pattern)
    rng = rng if rng is not None else random
    if pattern is Pattern.ASTEROIDS:
        return _random_drop(ASTEROID_COUNT, ASTEROID_SIZE, ASTEROID_SPAWN_Y_MIN, speed_units, rng)
    if pattern is Pattern.WALLS:
        return _walls(speed_units)
    return _random_drop(BLOCK_COUNT, BLOCK_SIZE, BLOCK_SPAWN_Y_MIN, speed_units, rng)
