# src/game/controls.py
from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, Set
import pygame


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


# Arrow keys and A/D both steer
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class HeldKeys:
    """
    Set of movement keys currently held down. Written by key events,
    read once per tick through `snapshot()`.
    """
    def __init__(self):
        self._keys: Set[int] = set()

    def press(self, key: int) -> bool:
        """Record a key-down. True only on the first press of a movement key."""
        if key not in KEY_DIRECTIONS or key in self._keys:
            return False
        self._keys.add(key)
        return True

    def release(self, key: int) -> None:
        self._keys.discard(key)

    def clear(self) -> None:
        self._keys.clear()

    def snapshot(self) -> FrozenSet[Direction]:
        return frozenset(KEY_DIRECTIONS[k] for k in self._keys)
