"""Logging setup for applications embedding feedwriter."""

import logging
import sys


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Send log records to stdout at the given level.

    Replaces any handlers already on the root logger. Unknown level names
    fall back to INFO.

    Args:
        level: Level name, usually ``Config.log_level``
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Module logger; feedwriter modules only log at DEBUG."""
    return logging.getLogger(name)
