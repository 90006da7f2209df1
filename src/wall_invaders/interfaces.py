"""
Collaborator protocols the game core talks to, with headless defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from wall_invaders.game import Game
    from wall_invaders.scenes.play import PlaySnapshot


class Renderer(Protocol):
    """Draws one frame for the active state."""

    def draw_welcome(self, game: Game) -> None: ...

    def draw_level_intro(self, game: Game, level: int, message: str) -> None: ...

    def draw_play(self, game: Game, snapshot: PlaySnapshot) -> None: ...

    def draw_pause(self, game: Game) -> None: ...

    def draw_game_over(self, game: Game) -> None: ...


class SoundPlayer(Protocol):
    """Fire-and-forget sound effects."""

    mute: bool

    def play_sound(self, name: str) -> None: ...


class NullRenderer:
    """Renderer that draws nothing."""

    def draw_welcome(self, game: Game) -> None:
        pass

    def draw_level_intro(self, game: Game, level: int, message: str) -> None:
        pass

    def draw_play(self, game: Game, snapshot: PlaySnapshot) -> None:
        pass

    def draw_pause(self, game: Game) -> None:
        pass

    def draw_game_over(self, game: Game) -> None:
        pass


class NullSounds:
    """Sound player that plays nothing."""

    def __init__(self) -> None:
        self.mute = False

    def play_sound(self, name: str) -> None:
        pass
