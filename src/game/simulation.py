# src/game/simulation.py
"""
Single-frame game update. No pygame display dependency; usable headless by
the game loop, the gym env and the tests alike.
"""
from __future__ import annotations
import random
from typing import AbstractSet, Optional
from .controls import Direction
from .geometry import first_overlap
from .options import GameConfig, Pattern
from .state import GameState, Phase


def step(state: GameState,
         config: GameConfig,
         held: AbstractSet[Direction] = frozenset(),
         rng: Optional[random.Random] = None) -> GameState:
    """
    Advance `state` by one frame in place and return it.

    Order: player move (clamped), obstacle motion (walls bounce), recycling of
    obstacles below the field, then collision. A collision ends the round with
    the positions of this frame and no score for it; otherwise score += 1.
    Outside PLAYING this is a no-op.
    """
    if state.phase is not Phase.PLAYING:
        return state

    rng = rng if rng is not None else random
    walls = config.pattern is Pattern.WALLS

    state.player.move(held)

    for ob in state.obstacles:
        ob.advance(bounce=walls)
        if ob.needs_recycle():
            ob.recycle(rng, keep_x=walls)

    hit = first_overlap(state.player.rect, (ob.rect for ob in state.obstacles))
    if hit is not None:
        state.phase = Phase.GAME_OVER
        return state

    state.score += 1
    return state
