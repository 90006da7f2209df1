"""
Game over screen
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wall_invaders.constants import Key
from wall_invaders.scenes.level_intro import LevelIntroState
from wall_invaders.utils import logger

if TYPE_CHECKING:
    from wall_invaders.game import Game


class GameOverState:
    """
    Shows the final tally; Enter starts over from level 1.
    """

    def enter(self, game: Game) -> None:
        logger.info(f"Game over: caught {game.lives}, reached level {game.level}")

    def draw(self, game: Game, dt: float) -> None:
        game.renderer.draw_game_over(game)

    def on_key_down(self, game: Game, key: Key) -> None:
        if key == Key.ENTER:
            game.new_session()
            game.replace_state(LevelIntroState(1))
