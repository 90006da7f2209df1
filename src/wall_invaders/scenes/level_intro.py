"""
Level intro countdown
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wall_invaders.constants import LEVEL_INTRO_SECONDS

if TYPE_CHECKING:
    from wall_invaders.game import Game


class LevelIntroState:
    """
    Shows 'Level N' with a 3-2-1 countdown, then starts play.

    The countdown runs on accumulated ``dt`` so it does not depend on how
    long each tick really took.
    """

    def __init__(self, level: int):
        self.level = level
        self.countdown = LEVEL_INTRO_SECONDS
        self.countdown_message = "3"

    def update(self, game: Game, dt: float) -> None:
        # pylint: disable=import-outside-toplevel
        from wall_invaders.scenes.play import PlayState

        self.countdown -= dt

        if self.countdown < 2:
            self.countdown_message = "2"
        if self.countdown < 1:
            self.countdown_message = "1"
        if self.countdown <= 1:
            game.replace_state(PlayState(game.config, self.level))

    def draw(self, game: Game, dt: float) -> None:
        game.renderer.draw_level_intro(game, self.level, self.countdown_message)
