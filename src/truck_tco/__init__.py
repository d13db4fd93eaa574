"""Truck TCO — diesel vs. electric heavy-truck total cost of ownership."""

import logging
import os

__version__ = "1.0.0"

_LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """Install a root handler once.

    Level priority: argument, then ``TRUCK_TCO_LOG_LEVEL``, then INFO.
    """
    if level is None:
        level = os.getenv("TRUCK_TCO_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
