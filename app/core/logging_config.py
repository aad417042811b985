"""
Centralized logging configuration for the Recipe Matcher application.

Every module obtains its logger through ``get_logger(__name__)``; the level
defaults to INFO and can be raised or lowered with the ``LOG_LEVEL``
environment variable (e.g. ``LOG_LEVEL=DEBUG``).
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FORMATTER = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _env_level(default: int = logging.INFO) -> int:
    name = os.getenv("LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger that writes to stdout with the application format.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        A configured Logger instance
    """
    logger = logging.getLogger(name)

    # Repeated imports must not stack handlers.
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        logger.setLevel(_env_level())

    return logger


def setup_logging(level: int = None) -> None:
    """
    Configure the root logger (used by entry points such as run.py).

    Args:
        level: The logging level; falls back to LOG_LEVEL, then INFO
    """
    logging.basicConfig(
        level=level if level is not None else _env_level(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
