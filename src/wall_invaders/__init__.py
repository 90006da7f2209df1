"""
Wall Invaders: defend a brick wall from an invader swarm.
"""

from wall_invaders.config import ConfigError, GameConfig
from wall_invaders.game import Game

__all__ = ["ConfigError", "Game", "GameConfig"]
__version__ = "0.1.0"
