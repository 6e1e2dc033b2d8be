# src/game/render.py
"""
Draws a GameState onto an 800x600 surface. Reads state only.

The stars and city backgrounds are re-rolled on every call, so the sky
twinkles and the skyline flickers; they carry no game state. The grid is
fixed.
"""
from __future__ import annotations
import random
from typing import Optional, Tuple

import pygame

from .config import (
    WIDTH, HEIGHT, COLOR_BG, COLOR_STAR, COLOR_CITY, COLOR_GRID,
    COLOR_PLAYER, COLOR_ASTEROID, COLOR_WALL, COLOR_BLOCK, COLOR_FG,
    STAR_COUNT, STAR_SIZE, CITY_BAR_COUNT, CITY_BAR_SPACING, CITY_BAR_W,
    CITY_BAR_MIN_H, CITY_BAR_EXTRA_H, GRID_STEP,
    FONT_NAME, FONT_SIZE, SCORE_POS,
)
from .obstacles import Obstacle
from .options import Background, GameConfig, Pattern, Sprite
from .player import Player
from .state import GameState

OBSTACLE_COLORS = {
    Pattern.ASTEROIDS: COLOR_ASTEROID,
    Pattern.WALLS: COLOR_WALL,
    Pattern.BLOCKS: COLOR_BLOCK,
}

_font: Optional[pygame.font.Font] = None


def get_font() -> pygame.font.Font:
    """Shared HUD font; falls back to pygame's default face if the arcade one is missing."""
    global _font
    if _font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        _font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
    return _font


# ---- background ----

def draw_stars(surf: pygame.Surface, rng) -> None:
    for _ in range(STAR_COUNT):
        x = rng.randrange(0, WIDTH)
        y = rng.randrange(0, HEIGHT)
        surf.fill(COLOR_STAR, (x, y, STAR_SIZE, STAR_SIZE))


def draw_city(surf: pygame.Surface, rng) -> None:
    for i in range(CITY_BAR_COUNT):
        h = CITY_BAR_MIN_H + rng.randrange(0, CITY_BAR_EXTRA_H)
        surf.fill(COLOR_CITY, (i * CITY_BAR_SPACING, HEIGHT - h, CITY_BAR_W, h))


def draw_grid(surf: pygame.Surface) -> None:
    for x in range(0, WIDTH + 1, GRID_STEP):
        pygame.draw.line(surf, COLOR_GRID, (x, 0), (x, HEIGHT), 1)
    for y in range(0, HEIGHT + 1, GRID_STEP):
        pygame.draw.line(surf, COLOR_GRID, (0, y), (WIDTH, y), 1)


def draw_background(surf: pygame.Surface, background: Background, rng=None) -> None:
    rng = rng if rng is not None else random
    surf.fill(COLOR_BG)
    if background is Background.STARS:
        draw_stars(surf, rng)
    elif background is Background.CITY:
        draw_city(surf, rng)
    else:
        draw_grid(surf)


# ---- actors ----

def triangle_points(player: Player) -> Tuple[Tuple[float, float], ...]:
    x, y, w, h = player.x, player.y, player.w, player.h
    return ((x + w / 2, y), (x, y + h), (x + w, y + h))


def draw_player(surf: pygame.Surface, player: Player, sprite: Sprite) -> None:
    if sprite is Sprite.SPACESHIP:
        pygame.draw.polygon(surf, COLOR_PLAYER, triangle_points(player))
    elif sprite is Sprite.BIRD:
        pygame.draw.circle(surf, COLOR_PLAYER, player.rect.center, player.w // 2)
    else:
        pygame.draw.rect(surf, COLOR_PLAYER, player.rect)


def draw_obstacle(surf: pygame.Surface, ob: Obstacle, pattern: Pattern) -> None:
    color = OBSTACLE_COLORS[pattern]
    if pattern is Pattern.ASTEROIDS:
        pygame.draw.circle(surf, color, ob.rect.center, ob.w // 2)
    else:
        pygame.draw.rect(surf, color, ob.rect)


def draw_score(surf: pygame.Surface, state: GameState, font: pygame.font.Font) -> None:
    surf.blit(font.render(f"Score: {state.seconds}", True, COLOR_FG), SCORE_POS)


def render(surf: Optional[pygame.Surface],
           state: GameState,
           config: GameConfig,
           font: Optional[pygame.font.Font] = None,
           rng=None) -> None:
    """Full frame: background, then (during a round) player, obstacles and score."""
    if surf is None:
        return
    draw_background(surf, config.background, rng)
    if not state.is_playing:
        return
    draw_player(surf, state.player, config.sprite)
    for ob in state.obstacles:
        draw_obstacle(surf, ob, config.pattern)
    draw_score(surf, state, font if font is not None else get_font())
