from enum import Enum


class Quantity(Enum):
    """
    Quantities an ephemeris source can report for a body.
    Names are SQL-friendly.
    """

    # Basic identifiers
    BODY = "body"
    JULIAN_DATE = "julian_date"

    # Positional quantities
    RIGHT_ASCENSION = "right_ascension"
    DECLINATION = "declination"

    # Distance from the observing center, in AU
    DELTA = "delta"


# What a source must report for a position to be turned into coordinates
SPHERICAL_QUANTITIES = (
    Quantity.DELTA,
    Quantity.RIGHT_ASCENSION,
    Quantity.DECLINATION,
)
