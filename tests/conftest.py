"""
Shared fixtures for the game tests.
"""

import pytest

from wall_invaders.config import GameConfig
from wall_invaders.game import Game
from wall_invaders.scenes.play import PlayState, PlayTickContext


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class StubRandom:
    """Returns the given values in turn, repeating the last one."""

    def __init__(self, *values: float):
        self.values = list(values) or [0.99]

    def random(self) -> float:
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


class RecordingSounds:
    def __init__(self):
        self.mute = False
        self.played = []

    def play_sound(self, name):
        if not self.mute:
            self.played.append(name)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_welcome(self, game):
        self.calls.append(("welcome",))

    def draw_level_intro(self, game, level, message):
        self.calls.append(("level_intro", level, message))

    def draw_play(self, game, snapshot):
        self.calls.append(("play", snapshot))

    def draw_pause(self, game):
        self.calls.append(("pause",))

    def draw_game_over(self, game):
        self.calls.append(("game_over",))


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def game(config, clock, sounds, renderer):
    # 800x600 screen: play bounds are left=50, top=150, right=750, bottom=450
    return Game(
        config,
        width=800,
        height=600,
        renderer=renderer,
        sounds=sounds,
        rng=StubRandom(0.99),
        clock=clock,
    )


@pytest.fixture
def play(game):
    state = PlayState(game.config, game.level)
    game.replace_state(state)
    return state


@pytest.fixture
def ctx(game, play):
    return PlayTickContext(game=game, world=play.world, dt=game.config.dt)
