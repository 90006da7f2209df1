"""
Wall Invaders bootstrap: window, event pump and fixed-rate game loop.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

import pygame

from wall_invaders.audio import Sounds
from wall_invaders.config import ConfigError, GameConfig, load_config
from wall_invaders.constants import WINDOW_SIZE, Key
from wall_invaders.game import Game
from wall_invaders.render import PygameRenderer, load_sprites
from wall_invaders.utils import configure_logging, find_assets_root, logger

KEY_MAP = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_p: Key.P,
    pygame.K_m: Key.M,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wall-invaders", description="Defend the wall from the invaders."
    )
    parser.add_argument("--config", help="JSON file with game settings")
    parser.add_argument("--debug", action="store_true", help="outline play bounds")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--fps", type=int, help="override the tick rate")
    parser.add_argument("--log-level", default="INFO", help="logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """
    Merge the config file and command-line overrides.

    :raise ConfigError: If the result is invalid
    """
    config = load_config(args.config) if args.config else GameConfig()
    if args.debug:
        config = replace(config, debug_mode=True)
    if args.fps is not None:
        config = replace(config, fps=args.fps)
    return config.validate()


def handle_events(game: Game) -> bool:
    """
    Forward key events to the game

    :return: False once the player asked to quit
    :rtype: bool
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            logger.debug("Quitting the game")
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                logger.debug("Quitting the game")
                return False
            key = KEY_MAP.get(event.key)
            if key == Key.M:
                game.mute()
            elif key is not None:
                game.key_down(key)
        elif event.type == pygame.KEYUP:
            key = KEY_MAP.get(event.key)
            if key is not None:
                game.key_up(key)
    return True


def run(argv: Sequence[str] | None = None) -> None:
    """
    Main entry point for Wall Invaders.

    - Loads settings from an optional JSON file plus CLI flags.
    - Opens the window and loads sprites and sounds once.
    - Ticks the game at the configured fps until the window closes.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = build_config(args)
    except (ConfigError, OSError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(2) from e

    try:
        assets_root = find_assets_root()
    except FileNotFoundError as e:
        logger.warning(f"{e} Running without sprites or sounds.")
        assets_root = None

    pygame.init()
    w_width, w_height = WINDOW_SIZE
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Wall Invaders")

    sounds = Sounds()
    sounds.init()
    if assets_root is not None:
        sounds.load_defaults(assets_root)
    sounds.mute = args.mute

    try:
        game = Game(
            config,
            width=w_width,
            height=w_height,
            renderer=PygameRenderer(screen, load_sprites(assets_root)),
            sounds=sounds,
        )
    except ConfigError as e:
        pygame.quit()
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(2) from e
    logger.info(f"Starting Wall Invaders at {config.fps} fps")
    logger.debug(config.to_dict())

    clock = pygame.time.Clock()
    game.start()
    try:
        while handle_events(game):
            clock.tick(config.fps)
            game.tick()
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
