"""
Wall Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from wall_invaders.constants import PACE_INTERVAL, Key


@dataclass(frozen=True)
class Bounds:
    """
    Play-area bounds in screen coordinates.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def centered(
        cls, screen_width: float, screen_height: float, width: float, height: float
    ) -> Bounds:
        """Bounds of a ``width`` x ``height`` area centred in the screen."""
        return cls(
            left=screen_width / 2 - width / 2,
            top=screen_height / 2 - height / 2,
            right=screen_width / 2 + width / 2,
            bottom=screen_height / 2 + height / 2,
        )


@dataclass
class Box:
    """
    Centre-positioned rectangle.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    @property
    def collider(self) -> RectCollider:
        """Top-left collider; edges count as touching."""
        return RectCollider(
            Position2D(self.left, self.top), Size2D(self.width, self.height)
        )

    def overlaps(self, other: Box) -> bool:
        """Strict overlap test; touching edges do not count."""
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )


@dataclass
class Ship(Box):
    """
    Ship entity
    """

    width: float = 50
    height: float = 50
    vertical_velocity: float = 0.0


@dataclass
class Invader(Box):
    """
    Invader entity. ``rank`` and ``file`` locate it in the grid.
    """

    rank: int = 0
    file: int = 0
    width: float = 40
    height: float = 40


@dataclass
class WallBlock(Box):
    """
    Wall block entity
    """

    width: float = 18
    height: float = 30


@dataclass
class Rocket:
    """
    Rocket fired by the ship; ``velocity`` is an upward speed.
    """

    x: float
    y: float
    velocity: float


@dataclass
class Bomb:
    """
    Bomb dropped by an invader; ``velocity`` is a downward speed.
    """

    x: float
    y: float
    velocity: float

    @property
    def collider(self) -> RectCollider:
        return RectCollider(Position2D(self.x, self.y), Size2D(0, 0))


@dataclass
class ShipController:
    """
    Per-session ship movement flags used by physics and sprite selection.
    """

    airborne: bool = False
    walking: bool = False
    throwing: bool = False
    jump_requested: bool = False
    pace: int = 1
    pace_timer: float = field(default=0.0, repr=False)

    def advance_pace(self, dt: float) -> None:
        """Swap the walk-cycle frame every ``PACE_INTERVAL`` seconds."""
        self.pace_timer += dt
        while self.pace_timer >= PACE_INTERVAL:
            self.pace_timer -= PACE_INTERVAL
            self.pace = 2 if self.pace == 1 else 1

    def pose(self, pressed_keys: Collection[Key]) -> str:
        """
        Pick the ship sprite for this frame. Reading it changes nothing;
        the ship system clears ``throwing`` at the start of each tick.
        """
        if self.walking:
            key = Key.LEFT if self.pace == 1 else Key.RIGHT
            if key in pressed_keys and self.airborne:
                return "jump_left" if key == Key.LEFT else "jump_right"
            if key in pressed_keys and self.throwing:
                return "throw"
            return "walk0" if self.pace == 1 else "walk1"

        if self.airborne:
            return "jump_up"
        if self.throwing:
            return "throw"
        return "idle"
