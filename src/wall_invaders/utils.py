"""
Wall Invaders utils
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("wall_invaders")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logging handler for the game.

    :param level: Logging level name or number
    :type level: int | str
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def find_assets_root() -> Path:
    """
    Walk up from this module to the nearest `assets` directory.

    :raises FileNotFoundError: If there is none.
    """
    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")
