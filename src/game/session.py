# src/game/session.py
"""
Session flow for one player.

Phases:
    CONFIGURING: options are being picked, no round exists
    PLAYING: a round is running, one step per tick
    GAME_OVER: the round is frozen on its collision frame

    CONFIGURING --start--> PLAYING --collision--> GAME_OVER
    GAME_OVER --restart--> PLAYING      (same config, fresh round)
    GAME_OVER --reconfigure--> CONFIGURING (config kept, round dropped)
"""
from __future__ import annotations
import logging
import random
from typing import AbstractSet, Optional

from .audio import AudioCues, SilentAudio, CUE_BLIP, CUE_BOOM, CUE_START
from .controls import Direction, HeldKeys
from .options import GameConfig
from .simulation import step
from .state import GameState, Phase, new_game_state

logger = logging.getLogger(__name__)


class Session:
    VALID_TRANSITIONS = {
        (Phase.CONFIGURING, Phase.PLAYING),   # start
        (Phase.PLAYING, Phase.GAME_OVER),     # collision
        (Phase.GAME_OVER, Phase.PLAYING),     # restart
        (Phase.GAME_OVER, Phase.CONFIGURING), # reconfigure
    }

    def __init__(self,
                 config: Optional[GameConfig] = None,
                 audio: Optional[AudioCues] = None,
                 rng: Optional[random.Random] = None):
        self._config = config if config is not None else GameConfig()
        self.audio: AudioCues = audio if audio is not None else SilentAudio()
        self.rng = rng
        self.keys = HeldKeys()
        self.state = GameState()
        self.music_enabled = False

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def can_transition(self, to_phase: Phase) -> bool:
        return (self.phase, to_phase) in self.VALID_TRANSITIONS

    def _log_transition(self, old: Phase, new: Phase) -> None:
        logger.info(f"Session transition: {old.name} -> {new.name}")

    def _reject(self, action: str) -> bool:
        logger.warning(f"Invalid {action} while {self.phase.name}")
        return False

    # ---- configuration ----

    def configure(self, config: GameConfig) -> bool:
        """Replace the options. Only allowed while CONFIGURING."""
        if self.phase is not Phase.CONFIGURING:
            return self._reject("configure")
        self._config = config
        logger.debug(f"Config set: {config.to_query()}")
        return True

    def toggle_music(self) -> bool:
        self.music_enabled = not self.music_enabled
        self.audio.set_loop_enabled(self.music_enabled)
        return self.music_enabled

    # ---- transitions ----

    def _new_round(self) -> None:
        old = self.phase
        self.state = new_game_state(self._config, self.rng)
        self._log_transition(old, self.phase)
        self.audio.play_cue(CUE_START)

    def start(self) -> bool:
        if self.phase is not Phase.CONFIGURING:
            return self._reject("start")
        self._new_round()
        return True

    def restart(self) -> bool:
        if self.phase is not Phase.GAME_OVER:
            return self._reject("restart")
        self._new_round()
        return True

    def reconfigure(self) -> bool:
        if not self.can_transition(Phase.CONFIGURING):
            return self._reject("reconfigure")
        old = self.phase
        self.state = GameState()
        self._log_transition(old, self.phase)
        return True

    # ---- input ----

    def press(self, key: int) -> bool:
        """Key-down. Movement keys blip on their first press."""
        first = self.keys.press(key)
        if first:
            self.audio.play_cue(CUE_BLIP)
        return first

    def release(self, key: int) -> None:
        self.keys.release(key)

    # ---- per-frame ----

    def tick(self, held: Optional[AbstractSet[Direction]] = None) -> GameState:
        """One simulation step on the current round; no-op unless PLAYING."""
        if self.phase is not Phase.PLAYING:
            return self.state
        if held is None:
            held = self.keys.snapshot()
        step(self.state, self._config, held, self.rng)
        if self.phase is Phase.GAME_OVER:
            self._log_transition(Phase.PLAYING, Phase.GAME_OVER)
            logger.info(f"Round over after {self.state.seconds}s ({self.state.score} frames)")
            self.audio.play_cue(CUE_BOOM)
        return self.state
