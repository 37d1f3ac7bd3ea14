"""J2000 reference epoch and elapsed-time helpers."""

from datetime import datetime, timedelta, timezone

from .pythonic_datetimes import ensure_utc

# 2000-01-01T12:00:00 UTC
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
J2000_JULIAN_DATE = 2451545.0

ONE_DAY = timedelta(days=1)


def days_since_j2000(dt: datetime) -> float:
    """Days elapsed from J2000 to ``dt``; negative before the epoch.

    The division is done on the timedelta itself, which works on whole
    microseconds, so whole multiples of a period in days come out exact.

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    return (ensure_utc(dt) - J2000) / ONE_DAY


def julian_from_datetime(dt: datetime) -> float:
    """Convert a timezone-aware datetime to a Julian date."""
    return J2000_JULIAN_DATE + days_since_j2000(dt)
