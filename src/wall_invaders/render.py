"""
Pygame renderer
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygame

from wall_invaders.entities import Box
from wall_invaders.utils import logger

if TYPE_CHECKING:
    from wall_invaders.game import Game
    from wall_invaders.scenes.play import PlaySnapshot

BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
GREY = (128, 128, 128)
TITLE = (255, 0, 0)
SUBTITLE = (120, 140, 255)
BRICK = (117, 71, 42)
BOMB = (255, 85, 85)
INVADER = (0, 160, 0)
SHIP = (80, 220, 255)
DEBUG = (255, 0, 0)

SPRITES = {
    "background": "img/background.png",
    "idle": "img/ship_idle.png",
    "walk0": "img/ship_walk0.png",
    "walk1": "img/ship_walk1.png",
    "jump_left": "img/ship_jump_left.png",
    "jump_right": "img/ship_jump_right.png",
    "jump_up": "img/ship_jump_up.png",
    "throw": "img/ship_throw.png",
    "invader": "img/invader.png",
    "bomb": "img/bomb.png",
    "rocket": "img/brick.png",
    "wall": "img/brick_tile.png",
}


def load_image(filename: str | Path, transparent: bool = False) -> pygame.Surface:
    """
    Load an image

    :param filename: Name of the file
    :type filename: str | Path

    :param transparent: Transparency flag
    :type transparent: bool

    :raise pygame.error: If the image cannot be loaded
    :return: pygame.Surface
    """
    image = pygame.image.load(str(filename))

    image = image.convert()
    if transparent:
        color = image.get_at((0, 0))
        image.set_colorkey(color, pygame.RLEACCEL)

    return image


def load_sprites(assets_root: Path | None) -> dict[str, pygame.Surface]:
    """
    Load every known sprite once. Missing files are skipped, and the
    renderer draws flat shapes in their place.
    """
    sprites: dict[str, pygame.Surface] = {}
    if assets_root is None:
        return sprites

    for name, relative in SPRITES.items():
        path = assets_root / relative
        if not path.is_file():
            continue
        try:
            sprites[name] = load_image(path, transparent=name != "background")
        except pygame.error as e:
            logger.warning(f"Failed to load image {path}: {e}")
    logger.debug(f"Loaded {len(sprites)} sprites")
    return sprites


class PygameRenderer:
    """
    Draws each state onto a pygame surface.
    """

    def __init__(self, screen: pygame.Surface, sprites: dict[str, pygame.Surface]):
        self._screen = screen
        self._sprites = sprites
        self._title_font = pygame.font.Font(None, 60)
        self._big_font = pygame.font.Font(None, 44)
        self._font = pygame.font.Font(None, 28)
        self._small_font = pygame.font.Font(None, 20)

    def _text(
        self,
        font: pygame.font.Font,
        text: str,
        color: tuple[int, int, int],
        pos: tuple[float, float],
        align: str = "center",
    ) -> None:
        surface = font.render(text, True, color)
        anchor = {"left": "midleft", "right": "midright"}.get(align, "center")
        self._screen.blit(surface, surface.get_rect(**{anchor: (int(pos[0]), int(pos[1]))}))

    def _box(self, name: str, box: Box, color: tuple[int, int, int]) -> None:
        rect = pygame.Rect(0, 0, int(box.width), int(box.height))
        rect.center = (int(box.x), int(box.y))
        sprite = self._sprites.get(name)
        if sprite is not None:
            self._screen.blit(sprite, sprite.get_rect(center=rect.center))
        else:
            pygame.draw.rect(self._screen, color, rect)

    def draw_welcome(self, game: Game) -> None:
        w, h = game.width, game.height
        self._screen.fill(BACKGROUND)
        self._text(self._title_font, "Wall Invaders", TITLE, (w / 2, h / 2 - 100))
        self._text(
            self._font,
            "Launch bricks at the invaders to build up your wall,",
            SUBTITLE,
            (w / 2, h / 2 - 30),
        )
        self._text(
            self._font,
            "catch their bombs to stop it being torn down.",
            SUBTITLE,
            (w / 2, h / 2),
        )
        self._text(self._font, "PRESS ENTER TO START", GREY, (w / 2, h / 2 + 100))
        pygame.display.flip()

    def draw_level_intro(self, game: Game, level: int, message: str) -> None:
        w, h = game.width, game.height
        self._screen.fill(BACKGROUND)
        self._text(self._big_font, f"Level {level}", WHITE, (w / 2, h / 2))
        self._text(self._font, f"Get ready in {message}", WHITE, (w / 2, h / 2 + 36))
        pygame.display.flip()

    def draw_play(self, game: Game, snapshot: PlaySnapshot) -> None:
        background = self._sprites.get("background")
        if background is not None:
            self._screen.blit(background, (0, 0))
        else:
            self._screen.fill(BACKGROUND)

        for block in snapshot.wall_blocks:
            self._box("wall", block, BRICK)
        for invader in snapshot.invaders:
            self._box("invader", invader, INVADER)
        for bomb in snapshot.bombs:
            self._box("bomb", Box(bomb.x, bomb.y, 6, 10), BOMB)
        for rocket in snapshot.rockets:
            self._box("rocket", Box(rocket.x, rocket.y, 8, 6), BRICK)
        self._box(snapshot.ship_pose, snapshot.ship, SHIP)

        bounds = snapshot.bounds
        text_y = bounds.bottom + (game.height - bounds.bottom + 100) / 2 + 7
        self._text(
            self._small_font,
            f"Caught: {snapshot.lives}",
            WHITE,
            (bounds.left, text_y),
            align="left",
        )
        self._text(
            self._small_font,
            f"Wall Strength: {snapshot.score}%, Level: {snapshot.level}",
            WHITE,
            (bounds.right, text_y),
            align="right",
        )

        if snapshot.debug_mode:
            pygame.draw.rect(self._screen, DEBUG, (0, 0, game.width, game.height), 1)
            pygame.draw.rect(
                self._screen,
                DEBUG,
                (
                    bounds.left,
                    bounds.top,
                    bounds.right - bounds.left,
                    bounds.bottom - bounds.top,
                ),
                1,
            )
        pygame.display.flip()

    def draw_pause(self, game: Game) -> None:
        self._screen.fill(BACKGROUND)
        self._text(self._font, "Paused", WHITE, (game.width / 2, game.height / 2))
        pygame.display.flip()

    def draw_game_over(self, game: Game) -> None:
        w, h = game.width, game.height
        self._screen.fill(BACKGROUND)
        self._text(self._big_font, "Game Over!", WHITE, (w / 2, h / 2 - 40))
        self._text(
            self._font,
            f"You caught {game.lives} bombs and got to level {game.level}.",
            WHITE,
            (w / 2, h / 2),
        )
        self._text(self._font, "Press Enter to play again.", WHITE, (w / 2, h / 2 + 40))
        pygame.display.flip()
