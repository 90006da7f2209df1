"""
Welcome screen
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wall_invaders.constants import Key
from wall_invaders.scenes.level_intro import LevelIntroState

if TYPE_CHECKING:
    from wall_invaders.game import Game


class WelcomeState:
    """
    Title screen; Enter starts a new game.
    """

    def draw(self, game: Game, dt: float) -> None:
        game.renderer.draw_welcome(game)

    def on_key_down(self, game: Game, key: Key) -> None:
        if key == Key.ENTER:
            game.new_session()
            game.replace_state(LevelIntroState(game.level))
