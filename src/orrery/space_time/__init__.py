from .epoch import J2000, J2000_JULIAN_DATE, days_since_j2000, julian_from_datetime
from .pythonic_datetimes import NaiveDateTimeError, ensure_utc, isoformat_utc, utc_now

__all__ = [
    "J2000",
    "J2000_JULIAN_DATE",
    "days_since_j2000",
    "julian_from_datetime",
    "NaiveDateTimeError",
    "ensure_utc",
    "isoformat_utc",
    "utc_now",
]
