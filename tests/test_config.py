"""
Tests for configuration and the difficulty resolver.
"""

import json

import pytest

from wall_invaders.config import (
    ConfigError,
    GameConfig,
    load_config,
    rebase_score,
    resolve_level,
)
from wall_invaders.game import Game


def test_defaults_are_valid():
    config = GameConfig().validate()

    assert config.fps == 50
    assert config.dt == pytest.approx(0.02)
    assert config.fire_interval_ms == pytest.approx(500)


@pytest.mark.parametrize(
    "overrides",
    [
        {"fps": 0},
        {"fps": -10},
        {"rocket_max_fire_rate": 0},
        {"invader_ranks": 0},
        {"points_per_invader": 0},
        {"bomb_rate": -0.1},
        {"invader_drop_distance": -1},
        {"bomb_min_velocity": 90, "bomb_max_velocity": 60},
        {"starting_score": 100},
    ],
)
def test_invalid_values_fail_fast(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides).validate()


def test_game_rejects_bad_config_before_play():
    with pytest.raises(ConfigError):
        Game(GameConfig(rocket_max_fire_rate=0))


@pytest.mark.parametrize("game_width", [400, 549, 801])
def test_game_rejects_play_area_that_cannot_hold_the_swarm(game_width):
    with pytest.raises(ConfigError, match="game_width"):
        Game(GameConfig(game_width=game_width), width=800, height=600)


@pytest.mark.parametrize("game_width", [550, 800])
def test_game_accepts_play_area_edges(game_width):
    game = Game(GameConfig(game_width=game_width), width=800, height=600)

    assert game.bounds.right - game.bounds.left == game_width


@pytest.mark.parametrize(
    "overrides",
    [
        {"fps": float("nan")},
        {"bomb_rate": float("nan")},
        {"ship_speed": float("inf")},
        {"invader_acceleration": float("-inf")},
        {"game_width": "wide"},
    ],
)
def test_non_finite_values_fail_fast(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides).validate()


def test_load_config_rejects_nan(tmp_path):
    path = tmp_path / "game.json"
    path.write_text('{"bomb_rate": NaN}')

    with pytest.raises(ConfigError, match="bomb_rate"):
        load_config(path)


def test_from_dict_keeps_defaults_for_missing_keys():
    config = GameConfig.from_dict({"invader_ranks": 3, "ship_speed": 200})

    assert config.invader_ranks == 3
    assert config.ship_speed == 200
    assert config.invader_files == 10


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigError, match="shipspeed"):
        GameConfig.from_dict({"shipspeed": 200})


def test_to_dict_round_trips_through_from_dict():
    config = GameConfig(bomb_rate=0.2, debug_mode=True)

    assert GameConfig.from_dict(config.to_dict()) == config


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"fps": 30, "invader_files": 8}))

    config = load_config(path)

    assert config.fps == 30
    assert config.invader_files == 8


def test_load_config_requires_an_object(tmp_path):
    path = tmp_path / "game.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_reports_bad_json(tmp_path):
    path = tmp_path / "game.json"
    path.write_text("{fps: 30")

    with pytest.raises(ConfigError):
        load_config(path)


def test_resolve_level_scales_with_difficulty():
    config = GameConfig(
        invader_initial_velocity=20,
        bomb_rate=0.1,
        bomb_min_velocity=40,
        bomb_max_velocity=60,
        level_difficulty_multiplier=0.5,
    )

    params = resolve_level(config, 2)

    assert params.level == 2
    assert params.invader_velocity == pytest.approx(40)
    assert params.bomb_rate == pytest.approx(0.2)
    assert params.bomb_min_velocity == pytest.approx(80)
    assert params.bomb_max_velocity == pytest.approx(120)


def test_resolve_level_speeds_up_ship_per_cleared_level():
    config = GameConfig(ship_speed=150, ship_speed_increment=8)

    assert resolve_level(config, 1).ship_speed == 150
    assert resolve_level(config, 4).ship_speed == 174


@pytest.mark.parametrize("level", range(1, 10))
def test_rebase_score_shrinks_with_level(level):
    assert rebase_score(level) == 50 - 5 * level


@pytest.mark.parametrize("level", [10, 11, 25])
def test_rebase_score_floor(level):
    assert rebase_score(level) == 5
