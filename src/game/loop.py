# src/game/loop.py
from __future__ import annotations
from typing import AbstractSet, Optional

import pygame

from .controls import Direction
from .render import render
from .session import Session
from .state import GameState, Phase


class GameLoop:
    """
    Frame driver. The host calls `frame()` once per display refresh; a step
    runs only while the session is PLAYING and not paused, then the frame is
    drawn. There is no timer of its own: cadence comes from the caller.
    """
    def __init__(self, session: Session, surface: Optional[pygame.Surface],
                 font: Optional[pygame.font.Font] = None, render_rng=None):
        self.session = session
        self.surface = surface
        self.font = font
        self.render_rng = render_rng
        self.paused = False
        self.steps = 0              # simulation steps run by this driver

    @property
    def scheduled(self) -> bool:
        return self.session.phase is Phase.PLAYING and not self.paused

    def toggle_pause(self) -> bool:
        if self.session.phase is not Phase.PLAYING:
            self.paused = False
            return False
        self.paused = not self.paused
        return self.paused

    def frame(self, held: Optional[AbstractSet[Direction]] = None) -> GameState:
        """One tick: step (if scheduled) then render."""
        if self.scheduled:
            self.session.tick(held)
            self.steps += 1
        if self.session.phase is not Phase.PLAYING:
            self.paused = False
        render(self.surface, self.session.state, self.session.config, self.font, self.render_rng)
        return self.session.state
