"""Logging setup shared by the CLI and SDK entry points."""

import logging
import os

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(default_level: str = "WARNING") -> int:
    """Configure root logging from the LOG_LEVEL environment variable.

    Args:
        default_level: Level name used when LOG_LEVEL is unset or invalid

    Returns:
        The numeric level that was applied
    """
    level_name = os.environ.get("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = getattr(logging, default_level.upper(), logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(level)
    return level
