"""Loguru sink configuration."""
from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", debug: bool = False, sink=sys.stderr) -> int:
    """Replace loguru's default sink with a single one.

    Args:
        level: Minimum level to emit
        debug: Force DEBUG regardless of level
        sink: Destination passed to logger.add

    Returns:
        Sink id, usable with logger.remove
    """
    logger.remove()
    return logger.add(sink, level="DEBUG" if debug else level.upper(), format=LOG_FORMAT)
