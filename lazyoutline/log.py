"""Logging setup for the command-line front door.

The library logs through ``loguru`` and is disabled on import; embedding
applications opt in with ``logger.enable("lazyoutline")``.
"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> <cyan>{name}</cyan> {message}"


def configure_logging(verbose: bool = False, sink=None) -> int:
    """Enable package logging with a single sink and return its handler id."""
    logger.remove()
    logger.enable("lazyoutline")
    return logger.add(
        sink if sink is not None else sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        colorize=None if sink is None else False,
    )
