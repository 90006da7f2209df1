"""
Sound effects through the pygame mixer.
"""

from __future__ import annotations

from pathlib import Path

import pygame

from wall_invaders.constants import SOUND_BANG, SOUND_EXPLOSION, SOUND_SHOOT
from wall_invaders.utils import logger

DEFAULT_SOUNDS = {
    SOUND_SHOOT: "sounds/shoot.wav",
    SOUND_BANG: "sounds/bang.wav",
    SOUND_EXPLOSION: "sounds/explosion.wav",
}


class Sounds:
    """
    Named sound bank. Playing a sound that is missing, failed to load,
    or while muted does nothing.
    """

    def __init__(self) -> None:
        self.mute = False
        self.enabled = False
        self.sounds: dict[str, pygame.mixer.Sound | None] = {}

    def init(self) -> None:
        """
        Start the mixer. On failure the bank stays silent.
        """
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Audio disabled: {e}")
            self.enabled = False
            return
        self.enabled = True

    def load_sound(self, name: str, path: str | Path) -> None:
        """
        Load a sound under ``name``

        :param name: Logical sound name
        :type name: str

        :param path: Sound file
        :type path: str | Path
        """
        self.sounds[name] = None
        if not self.enabled:
            return

        try:
            self.sounds[name] = pygame.mixer.Sound(str(path))
        except (pygame.error, FileNotFoundError) as e:
            logger.warning(f"Failed to load sound {name} from {path}: {e}")
            return
        logger.debug(f"Loaded sound {name}")

    def load_defaults(self, assets_root: Path) -> None:
        for name, relative in DEFAULT_SOUNDS.items():
            self.load_sound(name, assets_root / relative)

    def play_sound(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is None or self.mute:
            return
        sound.play()
