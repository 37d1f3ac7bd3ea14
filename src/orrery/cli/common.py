"""
Command-line interface utilities for orrery.

This module provides logging configuration for the CLI and the parsing
of date arguments shared by its commands.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from ..logging import get_logger, set_log_level
from ..space_time.epoch import J2000, J2000_JULIAN_DATE

logger = get_logger(__name__)


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line flags.

    Args:
        args: Parsed flags: ``quiet``, ``debug`` and the ``verbose`` count
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
    elif verbosity == 0:
        log_level = logging.WARNING
    elif verbosity == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    set_log_level(log_level)
    logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str) -> datetime:
    """Parse date input in various formats.

    Args:
        date_str: Date string in various formats:
            - Julian date (e.g., "2460385.333333333")
            - ISO format with timezone (e.g., "2024-03-15T20:00:00+00:00")
            - ISO format without timezone, taken as UTC
            - "now"

    Returns:
        A timezone-aware datetime

    Raises:
        ValueError: If date string is invalid
    """
    if date_str.strip().lower() == "now":
        return datetime.now(timezone.utc)

    try:
        jd = float(date_str.strip("' "))
    except ValueError:
        pass
    else:
        try:
            return J2000 + timedelta(days=jd - J2000_JULIAN_DATE)
        except (OverflowError, ValueError):
            raise ValueError(f"Date out of range: {date_str}")

    try:
        dt = datetime.fromisoformat(date_str.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"Invalid date format: {date_str}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
