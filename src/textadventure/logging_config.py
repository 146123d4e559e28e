from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "textadventure"
LEVEL_ENV_VAR = "TA_LOG_LEVEL"


def _level_from_env(default_level: int) -> int:
    name = os.getenv(LEVEL_ENV_VAR)
    if not name:
        return default_level
    level = getattr(logging, name.strip().upper(), None)
    if not isinstance(level, int):
        return default_level
    return level


def configure_logging(default_level: int = logging.WARNING, stream: Optional[TextIO] = None) -> int:
    """Route the package's log records to ``stream`` (stderr by default).

    Stdout belongs to the game's prompts and messages. TA_LOG_LEVEL, when set
    to a level name, overrides ``default_level``. Returns the level applied.
    """
    level = _level_from_env(default_level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    # Replace our previous handler on repeated calls
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    return level
