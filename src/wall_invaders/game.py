"""
Game session and state stack.
"""

from __future__ import annotations

import random
import time
from typing import Any, Callable

from wall_invaders.config import ConfigError, GameConfig
from wall_invaders.constants import INVADER_SPAN, WINDOW_SIZE, Key
from wall_invaders.entities import Bounds, Invader
from wall_invaders.interfaces import NullRenderer, NullSounds, Renderer, SoundPlayer
from wall_invaders.utils import logger


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class Game:  # pylint: disable=too-many-instance-attributes
    """
    Session counters plus a stack of states.

    A state is any object; the game calls whichever of ``enter``, ``leave``,
    ``update``, ``draw``, ``on_key_down`` and ``on_key_up`` it defines.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        width: int = WINDOW_SIZE[0],
        height: int = WINDOW_SIZE[1],
        renderer: Renderer | None = None,
        sounds: SoundPlayer | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = _monotonic_ms,
    ):  # pylint: disable=too-many-arguments
        """
        :param config: Game settings, validated here
        :type config: GameConfig

        :param width: Screen width
        :type width: int

        :param height: Screen height
        :type height: int

        :param clock: Millisecond clock used to rate-limit rockets
        :type clock: Callable[[], float]

        :raise ConfigError: If the config is invalid or the play area does
            not fit between the invader grid and the screen
        """
        self.config = (config or GameConfig()).validate()
        grid_width = INVADER_SPAN + Invader.width
        if not grid_width <= self.config.game_width <= width:
            raise ConfigError(
                f"game_width must be between {grid_width} and the screen width "
                f"{width}, got {self.config.game_width}"
            )
        self.width = width
        self.height = height
        self.bounds = Bounds.centered(
            width, height, self.config.game_width, self.config.game_height
        )

        self.renderer: Renderer = renderer or NullRenderer()
        self.sounds: SoundPlayer = sounds or NullSounds()
        self.rng = rng or random.Random()
        self.clock = clock

        self.lives = 0
        self.score = self.config.starting_score
        self.level = 1

        self.state_stack: list[Any] = []
        self.pressed_keys: set[Key] = set()

    def current_state(self) -> Any | None:
        """Top of the stack, or None."""
        return self.state_stack[-1] if self.state_stack else None

    def replace_state(self, state: Any) -> None:
        """
        Leave and drop the current state, then enter ``state`` in its place.
        """
        current = self.current_state()
        if current is not None:
            self._call(current, "leave")
            self.state_stack.pop()

        self._call(state, "enter")
        self.state_stack.append(state)
        logger.debug(f"State -> {type(state).__name__}")

    def push_state(self, state: Any) -> None:
        """Enter ``state`` on top of the current one."""
        self._call(state, "enter")
        self.state_stack.append(state)
        logger.debug(f"Pushed {type(state).__name__}")

    def pop_state(self) -> None:
        """Leave and drop the current state, resuming the one below."""
        current = self.current_state()
        if current is None:
            return
        self._call(current, "leave")
        self.state_stack.pop()
        logger.debug(f"Popped {type(current).__name__}")

    def tick(self, dt: float | None = None) -> None:
        """
        Run one update and one draw on the current state.

        :param dt: Seconds elapsed, defaults to one tick at the configured fps
        :type dt: float
        """
        state = self.current_state()
        if state is None:
            return
        if dt is None:
            dt = self.config.dt

        self._call(state, "update", dt)
        self._call(state, "draw", dt)

    def key_down(self, key: Key) -> None:
        self.pressed_keys.add(key)
        state = self.current_state()
        if state is not None:
            self._call(state, "on_key_down", key)

    def key_up(self, key: Key) -> None:
        self.pressed_keys.discard(key)
        state = self.current_state()
        if state is not None:
            self._call(state, "on_key_up", key)

    def start(self) -> None:
        """Enter the welcome screen."""
        # pylint: disable=import-outside-toplevel
        from wall_invaders.scenes.welcome import WelcomeState

        self.lives = 0
        self.replace_state(WelcomeState())

    def new_session(self) -> None:
        """Reset the counters for a fresh playthrough."""
        self.level = 1
        self.score = self.config.starting_score
        self.lives = 0
        logger.debug("New session")

    def play_sound(self, name: str) -> None:
        self.sounds.play_sound(name)

    def mute(self, value: bool | None = None) -> None:
        """
        Mute, unmute, or toggle when ``value`` is None.
        """
        self.sounds.mute = (not self.sounds.mute) if value is None else value
        logger.debug(f"Muted: {self.sounds.mute}")

    def _call(self, state: Any, capability: str, *args: Any) -> None:
        handler = getattr(state, capability, None)
        if handler is not None:
            handler(self, *args)
