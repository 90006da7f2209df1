"""
Pause screen
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wall_invaders.constants import Key

if TYPE_CHECKING:
    from wall_invaders.game import Game


class PauseState:
    """
    Sits on top of the play state; P resumes it.
    """

    def draw(self, game: Game, dt: float) -> None:
        game.renderer.draw_pause(game)

    def on_key_down(self, game: Game, key: Key) -> None:
        if key == Key.P:
            game.pop_state()
