from .quantities import Quantity, SPHERICAL_QUANTITIES
from .ephemeris import Ephemeris
from .skyfield_ephemeris import SkyfieldEphemeris

__all__ = [
    "Quantity",
    "SPHERICAL_QUANTITIES",
    "Ephemeris",
    "SkyfieldEphemeris",
]
