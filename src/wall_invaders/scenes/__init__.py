"""
Game states: welcome, level intro, play, pause and game over.
"""

from wall_invaders.scenes.game_over import GameOverState
from wall_invaders.scenes.level_intro import LevelIntroState
from wall_invaders.scenes.pause import PauseState
from wall_invaders.scenes.play import PlayState
from wall_invaders.scenes.welcome import WelcomeState

__all__ = [
    "GameOverState",
    "LevelIntroState",
    "PauseState",
    "PlayState",
    "WelcomeState",
]
