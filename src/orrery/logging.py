"""
Logging configuration for the orrery package.

This module provides a standardized logging setup for all modules
within orrery, ensuring consistent log formatting and control.
"""

import logging
import os
import sys

# Default logging level - Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure the logger if it hasn't been already
    if not logger.handlers:
        root_logger = logging.getLogger("orrery")
        log_level = (
            root_logger.level if root_logger.level != logging.NOTSET else _get_log_level()
        )
        logger.setLevel(log_level)

        # stderr, so JSON written to stdout stays clean
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)

    return logger


def _get_log_level() -> int:
    """
    Get the logging level based on the ORRERY_LOG_LEVEL environment variable.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get("ORRERY_LOG_LEVEL", "").upper()
    return _LEVELS.get(log_level_str, DEFAULT_LOG_LEVEL)


def set_log_level(level: int) -> None:
    """
    Set the logging level for all orrery loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root = logging.getLogger("orrery")
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)

    # Loggers created through get_logger carry their own level and handler
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("orrery.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
