"""
Tests for the state stack and the menu transitions.
"""

import pytest

from wall_invaders.constants import Key
from wall_invaders.scenes import (
    GameOverState,
    LevelIntroState,
    PauseState,
    WelcomeState,
)


class RecorderState:
    """State that logs every capability call."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def enter(self, game):
        self.log.append((self.name, "enter"))

    def leave(self, game):
        self.log.append((self.name, "leave"))

    def update(self, game, dt):
        self.log.append((self.name, "update", dt))

    def draw(self, game, dt):
        self.log.append((self.name, "draw", dt))

    def on_key_down(self, game, key):
        self.log.append((self.name, "key_down", key))

    def on_key_up(self, game, key):
        self.log.append((self.name, "key_up", key))


class TestStateStack:
    def test_empty_stack_has_no_current_state(self, game):
        assert game.current_state() is None
        game.tick()
        game.pop_state()

    def test_replace_on_empty_stack_enters_and_pushes(self, game):
        log = []
        a = RecorderState("a", log)

        game.replace_state(a)

        assert game.state_stack == [a]
        assert log == [("a", "enter")]

    def test_replace_leaves_current_and_keeps_size(self, game):
        log = []
        a, b = RecorderState("a", log), RecorderState("b", log)
        game.replace_state(a)

        game.replace_state(b)

        assert game.state_stack == [b]
        assert log == [("a", "enter"), ("a", "leave"), ("b", "enter")]

    def test_push_keeps_previous_state(self, game):
        log = []
        a, b = RecorderState("a", log), RecorderState("b", log)
        game.replace_state(a)

        game.push_state(b)

        assert game.state_stack == [a, b]
        assert game.current_state() is b
        assert ("a", "leave") not in log

    def test_pop_leaves_top_and_exposes_previous(self, game):
        log = []
        a, b = RecorderState("a", log), RecorderState("b", log)
        game.replace_state(a)
        game.push_state(b)

        game.pop_state()

        assert game.current_state() is a
        assert log[-1] == ("b", "leave")

    def test_tick_updates_then_draws_once(self, game):
        log = []
        game.replace_state(RecorderState("a", log))
        log.clear()

        game.tick(0.5)

        assert log == [("a", "update", 0.5), ("a", "draw", 0.5)]

    def test_tick_defaults_to_configured_rate(self, game):
        log = []
        game.replace_state(RecorderState("a", log))

        game.tick()

        assert log[-1] == ("a", "draw", pytest.approx(1 / game.config.fps))

    def test_tick_only_reaches_top_state(self, game):
        log = []
        game.replace_state(RecorderState("a", log))
        game.push_state(RecorderState("b", log))
        log.clear()

        game.tick(0.1)

        assert [entry[0] for entry in log] == ["b", "b"]

    def test_states_need_no_capabilities(self, game):
        bare = object()

        game.replace_state(bare)
        game.tick()
        game.key_down(Key.SPACE)
        game.key_up(Key.SPACE)
        game.pop_state()

        assert game.state_stack == []

    def test_keys_are_recorded_then_forwarded(self, game):
        log = []
        game.replace_state(RecorderState("a", log))

        game.key_down(Key.LEFT)
        assert Key.LEFT in game.pressed_keys
        assert log[-1] == ("a", "key_down", Key.LEFT)

        game.key_up(Key.LEFT)
        assert Key.LEFT not in game.pressed_keys
        assert log[-1] == ("a", "key_up", Key.LEFT)

    def test_key_up_for_unpressed_key_is_harmless(self, game):
        game.key_up(Key.RIGHT)

        assert game.pressed_keys == set()


class TestTransitions:
    def test_start_shows_welcome(self, game, renderer):
        game.lives = 7

        game.start()
        game.tick()

        assert isinstance(game.current_state(), WelcomeState)
        assert game.lives == 0
        assert renderer.calls == [("welcome",)]

    def test_welcome_enter_starts_level_one(self, game):
        game.start()
        game.score, game.level, game.lives = 80, 4, 3

        game.key_down(Key.ENTER)

        state = game.current_state()
        assert isinstance(state, LevelIntroState)
        assert state.level == 1
        assert (game.score, game.level, game.lives) == (50, 1, 0)
        assert len(game.state_stack) == 1

    def test_welcome_ignores_other_keys(self, game):
        game.start()

        game.key_down(Key.SPACE)

        assert isinstance(game.current_state(), WelcomeState)

    def test_game_over_enter_resets_session(self, game, renderer):
        game.replace_state(GameOverState())
        game.score, game.level, game.lives = -3, 6, 12
        game.tick()
        assert renderer.calls[-1] == ("game_over",)

        game.key_down(Key.ENTER)

        state = game.current_state()
        assert isinstance(state, LevelIntroState)
        assert state.level == 1
        assert (game.score, game.level, game.lives) == (50, 1, 0)

    def test_pause_pops_on_p(self, game):
        below = RecorderState("below", [])
        game.replace_state(below)
        game.push_state(PauseState())

        game.key_down(Key.P)

        assert game.current_state() is below

    def test_mute_toggles_and_forces(self, game, sounds):
        game.mute()
        assert sounds.mute is True
        game.mute()
        assert sounds.mute is False
        game.mute(True)
        game.mute(True)
        assert sounds.mute is True
