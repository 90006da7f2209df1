"""
Game configuration and per-level difficulty.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from wall_invaders.utils import logger

SCORE_FLOOR = 5
LAST_CUSHION_LEVEL = 9


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


@dataclass
class GameConfig:  # pylint: disable=too-many-instance-attributes
    """
    Tunable settings for a game session.
    """

    bomb_rate: float = 0.05
    bomb_min_velocity: float = 50.0
    bomb_max_velocity: float = 50.0
    invader_initial_velocity: float = 25.0
    invader_acceleration: float = 0.0
    invader_drop_distance: float = 20.0
    rocket_velocity: float = 120.0
    rocket_max_fire_rate: float = 2.0
    game_width: int = 700
    game_height: int = 300
    fps: int = 50
    debug_mode: bool = False
    invader_ranks: int = 5
    invader_files: int = 10
    ship_speed: float = 150.0
    ship_speed_increment: float = 8.0
    level_difficulty_multiplier: float = 0.3
    points_per_invader: int = 5
    rocket_cost: int = 1
    wall_penalty: int = 5
    starting_score: int = 50
    winning_score: int = 100
    wall_ranks: int = 3
    wall_files: int = 50

    def validate(self) -> GameConfig:
        """
        Check the settings before any state uses them.

        :raise ConfigError: If a value is out of range
        :return: The config itself
        :rtype: GameConfig
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool):
                continue
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")

        positive = (
            "fps",
            "rocket_max_fire_rate",
            "rocket_velocity",
            "invader_initial_velocity",
            "game_width",
            "game_height",
            "invader_ranks",
            "invader_files",
            "points_per_invader",
            "winning_score",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        non_negative = (
            "bomb_rate",
            "bomb_min_velocity",
            "invader_acceleration",
            "invader_drop_distance",
            "ship_speed",
            "ship_speed_increment",
            "level_difficulty_multiplier",
            "rocket_cost",
            "wall_penalty",
            "wall_ranks",
            "wall_files",
        )
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")

        if self.bomb_min_velocity > self.bomb_max_velocity:
            raise ConfigError(
                f"bomb_min_velocity ({self.bomb_min_velocity}) is above "
                f"bomb_max_velocity ({self.bomb_max_velocity})"
            )
        if not 0 < self.starting_score < self.winning_score:
            raise ConfigError(
                f"starting_score must be between 0 and {self.winning_score}, "
                f"got {self.starting_score}"
            )
        return self

    @property
    def dt(self) -> float:
        """Seconds per tick."""
        return 1 / self.fps

    @property
    def fire_interval_ms(self) -> float:
        """Minimum milliseconds between two rockets."""
        return 1000 / self.rocket_max_fire_rate

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """
        Create config from dictionary. Missing keys keep their defaults.

        :raise ConfigError: If the mapping has keys the config does not know
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        try:
            return cls(**data).validate()
        except TypeError as e:
            raise ConfigError(str(e)) from e


def load_config(path: str | Path) -> GameConfig:
    """
    Load a config from a JSON file

    :param path: Path to the JSON file
    :type path: str | Path

    :raise ConfigError: If the file is not a JSON object or holds bad values
    """
    logger.debug(f"Loading config from {path}")
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return GameConfig.from_dict(data)


@dataclass(frozen=True)
class LevelParams:
    """
    Difficulty values derived for one level.
    """

    level: int
    invader_velocity: float
    bomb_rate: float
    bomb_min_velocity: float
    bomb_max_velocity: float
    ship_speed: float


def resolve_level(config: GameConfig, level: int) -> LevelParams:
    """
    Scale the base config for the given level.

    Every scaled value grows by ``level * level_difficulty_multiplier`` times
    its base value. The ship gains ``ship_speed_increment`` per level cleared.
    """
    multiplier = level * config.level_difficulty_multiplier

    params = LevelParams(
        level=level,
        invader_velocity=config.invader_initial_velocity * (1 + multiplier),
        bomb_rate=config.bomb_rate * (1 + multiplier),
        bomb_min_velocity=config.bomb_min_velocity * (1 + multiplier),
        bomb_max_velocity=config.bomb_max_velocity * (1 + multiplier),
        ship_speed=config.ship_speed + (level - 1) * config.ship_speed_increment,
    )
    logger.debug(f"Level {level} params: {params}")
    return params


def rebase_score(level: int) -> int:
    """
    Starting score for a level reached by clearing the previous one.

    Higher levels start with a smaller cushion, down to ``SCORE_FLOOR``.
    """
    if level <= LAST_CUSHION_LEVEL:
        return 50 - 5 * level
    return SCORE_FLOOR
