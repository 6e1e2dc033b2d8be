# src/game/overlay.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional

import pygame

from .config import (
    WIDTH, HEIGHT, COLOR_FG, COLOR_ACCENT, COLOR_DANGER, COLOR_PANEL,
    SCREENSHOT_NAME,
)
from .options import GameConfig

# key -> GameConfig field it cycles on the config panel
CONFIG_KEYS = {
    pygame.K_1: "sprite",
    pygame.K_2: "background",
    pygame.K_3: "pattern",
    pygame.K_4: "speed",
}

FIELD_LABELS = {
    "sprite": "Sprite",
    "background": "Background",
    "pattern": "Obstacles",
    "speed": "Speed",
}

INSTRUCTIONS = "Use arrow keys or A/D to move. Dodge everything!"


def _panel(surf: pygame.Surface, w: int, h: int) -> pygame.Rect:
    rect = pygame.Rect((WIDTH - w) // 2, (HEIGHT - h) // 2, w, h)
    shade = pygame.Surface((w, h), pygame.SRCALPHA)
    shade.fill((*COLOR_PANEL, 220))
    surf.blit(shade, rect.topleft)
    pygame.draw.rect(surf, COLOR_ACCENT, rect, width=2, border_radius=10)
    return rect


def _centered_lines(surf: pygame.Surface, font: pygame.font.Font, lines: List[str],
                    rect: pygame.Rect, color=COLOR_FG, gap: int = 14) -> None:
    rendered = [font.render(line, True, color) for line in lines]
    total = sum(r.get_height() for r in rendered) + gap * (len(rendered) - 1)
    y = rect.centery - total // 2
    for r in rendered:
        surf.blit(r, (rect.centerx - r.get_width() // 2, y))
        y += r.get_height() + gap


def config_lines(config: GameConfig, music_enabled: bool) -> List[str]:
    lines = ["RETRO ARCADE GAME CREATOR", ""]
    for i, (field, label) in enumerate(FIELD_LABELS.items(), start=1):
        lines.append(f"[{i}] {label}: {getattr(config, field).value}")
    lines.append(f"[M] Music: {'on' if music_enabled else 'off'}")
    lines += ["", "ENTER to start"]
    return lines


def draw_config_panel(surf: pygame.Surface, font: pygame.font.Font,
                      config: GameConfig, music_enabled: bool) -> None:
    rect = _panel(surf, 560, 380)
    _centered_lines(surf, font, config_lines(config, music_enabled), rect)


def draw_instructions(surf: pygame.Surface, font: pygame.font.Font) -> None:
    text = font.render(INSTRUCTIONS, True, COLOR_FG)
    surf.blit(text, ((WIDTH - text.get_width()) // 2, HEIGHT - 40))


def draw_game_over(surf: pygame.Surface, font: pygame.font.Font, seconds: int) -> None:
    rect = _panel(surf, 520, 220)
    _centered_lines(surf, font, ["GAME OVER"], rect.move(0, -60), color=COLOR_DANGER)
    _centered_lines(surf, font, [
        f"Final Score: {seconds} seconds",
        "[R] Restart  [C] Reconfigure",
        "[S] Save screenshot",
    ], rect.move(0, 20))


def draw_paused(surf: pygame.Surface, font: pygame.font.Font) -> None:
    rect = _panel(surf, 300, 90)
    _centered_lines(surf, font, ["PAUSED", "[P] resume"], rect)


def save_screenshot(surf: pygame.Surface, directory: Optional[Path] = None) -> Path:
    """Write the surface as a PNG; numbered if the plain name is taken."""
    directory = Path(directory) if directory is not None else Path.cwd()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / SCREENSHOT_NAME
    n = 1
    while path.exists():
        path = directory / f"{Path(SCREENSHOT_NAME).stem}-{n}.png"
        n += 1
    pygame.image.save(surf, str(path))
    return path
