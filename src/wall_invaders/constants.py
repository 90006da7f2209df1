"""
Constants for the game.
"""

from __future__ import annotations

from enum import IntEnum

WINDOW_SIZE = (800, 600)

# Ship jump, in pixels per tick
JUMP_VELOCITY = 20.0
GRAVITY = 2.5

# Walk-cycle frame swap interval, in seconds
PACE_INTERVAL = 0.1

# Invader sprites are drawn offset from their hitbox, so the rocket test
# squeezes the vertical extent by this divisor.
INVADER_HIT_DIVISOR = 1.2

LEVEL_INTRO_SECONDS = 3.0

# Wall strip placement relative to the play area
WALL_OFFSET_Y = 70
WALL_SPAN = 780

# Invader grid horizontal span and rank spacing
INVADER_SPAN = 510
INVADER_RANK_SPACING = 40

# Rocket spawn offset above the ship centre
ROCKET_NOSE_OFFSET = 12

SOUND_SHOOT = "shoot"
SOUND_BANG = "bang"
SOUND_EXPLOSION = "explosion"


class Key(IntEnum):
    """
    Abstract key identifiers, numbered after the browser key codes.
    """

    ENTER = 13
    SPACE = 32
    LEFT = 37
    UP = 38
    RIGHT = 39
    M = 77
    P = 80
