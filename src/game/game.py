# src/game/game.py
import sys, argparse, logging
from pathlib import Path
import pygame
from pygame import K_ESCAPE, K_RETURN, K_KP_ENTER, K_m, K_p, K_r, K_c, K_s
from .config import WIDTH, HEIGHT, FPS
from .controls import KEY_DIRECTIONS
from .audio import ChiptuneAudio, SilentAudio
from .loop import GameLoop
from .options import Background, GameConfig, Pattern, Speed, Sprite
from .overlay import (
    CONFIG_KEYS, draw_config_panel, draw_game_over, draw_instructions,
    draw_paused, save_screenshot,
)
from .render import get_font
from .session import Session
from .state import Phase

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Retro arcade dodge game.")
    p.add_argument("--query", type=str, default="",
                   help='Shareable options, e.g. "sprite=robot&bg=grid&pattern=blocks&speed=slow".')
    p.add_argument("--sprite", choices=[s.value for s in Sprite], default=None)
    p.add_argument("--bg", choices=[b.value for b in Background], default=None)
    p.add_argument("--pattern", choices=[o.value for o in Pattern], default=None)
    p.add_argument("--speed", choices=[s.value for s in Speed], default=None)
    p.add_argument("--music", action="store_true", help="Start with the background loop on.")
    p.add_argument("--no-audio", action="store_true", help="Disable all sound.")
    p.add_argument("--screenshot-dir", type=Path, default=Path("."),
                   help="Where [S] on the game-over screen saves PNGs.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def config_from_args(args) -> GameConfig:
    """--query first, then explicit flags on top."""
    config = GameConfig.from_query(args.query) if args.query else GameConfig()
    return config.with_updates(sprite=args.sprite, background=args.bg,
                               pattern=args.pattern, speed=args.speed)


def handle_key_down(session: Session, loop: GameLoop, key: int, screenshot_dir: Path) -> None:
    if key in KEY_DIRECTIONS:
        # held in every phase so a key pressed before ENTER or R steers at once
        session.press(key)
        return
    phase = session.phase
    if phase is Phase.CONFIGURING:
        if key in CONFIG_KEYS:
            session.configure(session.config.cycled(CONFIG_KEYS[key]))
        elif key == K_m:
            session.toggle_music()
        elif key in (K_RETURN, K_KP_ENTER):
            if session.start():
                logger.info(f"Share: ?{session.config.to_query()}")
    elif phase is Phase.PLAYING:
        if key == K_p:
            loop.toggle_pause()
    elif phase is Phase.GAME_OVER:
        if key == K_r:
            session.restart()
        elif key == K_c:
            session.reconfigure()
        elif key == K_s and loop.surface is not None:
            path = save_screenshot(loop.surface, screenshot_dir)
            logger.info(f"Saved screenshot to {path}")


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    pygame.display.set_caption("Retro Arcade Game Creator")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = get_font()

    audio = SilentAudio()
    if not args.no_audio:
        chiptune = ChiptuneAudio()
        if chiptune.init():
            audio = chiptune

    session = Session(config, audio=audio)
    if args.music:
        session.toggle_music()
    loop = GameLoop(session, screen, font)
    show_instructions = True

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if session.phase is Phase.CONFIGURING and event.key in (K_RETURN, K_KP_ENTER):
                    show_instructions = False
                handle_key_down(session, loop, event.key, args.screenshot_dir)
            if event.type == pygame.KEYUP:
                session.release(event.key)
            if event.type == pygame.WINDOWFOCUSLOST:
                # key-ups are not delivered while unfocused
                session.keys.clear()

        # step + render of the game itself
        loop.frame()

        # --- Overlays ---
        if session.phase is Phase.CONFIGURING:
            draw_config_panel(screen, font, session.config, session.music_enabled)
            if show_instructions:
                draw_instructions(screen, font)
        elif session.phase is Phase.GAME_OVER:
            draw_game_over(screen, font, session.state.seconds)
        elif loop.paused:
            draw_paused(screen, font)

        pygame.display.flip()


if __name__ == "__main__":
    run()
