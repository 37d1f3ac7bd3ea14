"""
Skyfield-based ephemeris implementation.

Positions are heliocentric: right ascension, declination and distance of
each body as seen from the Sun, in the ICRS frame, read from a JPL kernel
on local disk. Nothing is downloaded.
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..space_time.epoch import J2000, J2000_JULIAN_DATE, julian_from_datetime
from ..space_time.pythonic_datetimes import ensure_utc, utc_now
from .ephemeris import Ephemeris
from .quantities import Quantity


class SkyfieldEphemeris(Ephemeris):
    """Implements the Ephemeris interface on top of a Skyfield kernel."""

    # Catalog key -> kernel target name. The Sun is the center, so it is absent.
    BODY_NAMES: Mapping[str, str] = {
        "mercury": "mercury barycenter",
        "venus": "venus barycenter",
        "earth": "earth",
        "moon": "moon",
        "mars": "mars barycenter",
        "jupiter": "jupiter barycenter",
        "saturn": "saturn barycenter",
        "uranus": "uranus barycenter",
        "neptune": "neptune barycenter",
        "pluto": "pluto barycenter",
    }

    def __init__(self, kernel: Any, timescale: Any) -> None:
        """
        Args:
            kernel: A loaded Skyfield SPK kernel
            timescale: A Skyfield Timescale
        """
        self.kernel = kernel
        self.timescale = timescale

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SkyfieldEphemeris":
        """Load a kernel such as de421.bsp from disk.

        Raises:
            ImportError: If skyfield is not installed
            OSError: If the kernel file cannot be read
        """
        from skyfield.api import load, load_file

        return cls(load_file(str(path)), load.timescale(builtin=True))

    def get_planet_position(
        self, planet: str, time: Optional[Union[float, datetime]] = None
    ) -> Dict[Quantity, Any]:
        """
        Get a body's heliocentric position.

        Raises:
            KeyError: If the kernel has no such body
        """
        if time is None:
            time = utc_now()
        elif isinstance(time, float):
            time = J2000 + timedelta(days=time - J2000_JULIAN_DATE)
        time = ensure_utc(time)

        target = self.kernel[self.BODY_NAMES.get(planet.lower(), planet)]
        sun = self.kernel["sun"]
        t = self.timescale.from_datetime(time)
        ra, dec, distance = (target - sun).at(t).radec()

        return {
            Quantity.BODY: planet,
            Quantity.JULIAN_DATE: julian_from_datetime(time),
            Quantity.RIGHT_ASCENSION: ra.hours * 15.0,
            Quantity.DECLINATION: dec.degrees,
            Quantity.DELTA: distance.au,
        }
