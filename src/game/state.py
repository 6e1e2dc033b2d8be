# src/game/state.py
from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional
from .config import FRAMES_PER_SECOND_SCORE
from .obstacles import Obstacle, generate
from .options import GameConfig
from .player import Player


class Phase(Enum):
    """Session phases. Exactly one is active at a time."""
    CONFIGURING = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    phase: Phase = Phase.CONFIGURING
    score: int = 0                  # frames survived
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)

    @property
    def is_playing(self) -> bool:
        """True while a round is on screen (including its game-over freeze)."""
        return self.phase in (Phase.PLAYING, Phase.GAME_OVER)

    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def seconds(self) -> int:
        return self.score // FRAMES_PER_SECOND_SCORE


def new_game_state(config: GameConfig, rng: Optional[random.Random] = None) -> GameState:
    """Fresh round: player at spawn, score 0, obstacle pool regenerated."""
    return GameState(
        phase=Phase.PLAYING,
        score=0,
        player=Player(),
        obstacles=generate(config.pattern, config.speed_units, rng),
    )
