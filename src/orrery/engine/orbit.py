"""
Circular-orbit fallback projection.

Each body moves at a constant angular rate around a circle in the
ecliptic plane, starting from angle 0 at J2000. Eccentricity, inclination
and perturbations are ignored. The result is reproducible: the same
(period, distance, instant) always gives the same position.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Any, Mapping, Optional, Tuple

from ..config import ORBITAL_PERIODS_DAYS
from ..space_time.epoch import days_since_j2000

TWO_PI = 2.0 * math.pi

Vector = Tuple[float, float, float]


@dataclass(frozen=True)
class Projection:
    angle: float
    position: Vector


def is_valid_period(period_days: Any) -> bool:
    """True for a real, finite, positive number of days."""
    if isinstance(period_days, bool) or not isinstance(period_days, Real):
        return False
    return math.isfinite(period_days) and period_days > 0


def orbit_fraction(elapsed_days: float, period_days: float) -> float:
    """Fraction of a revolution completed, in [0, 1).

    Python's modulo already lands in [0, period) for negative elapsed
    times, but a tiny negative remainder can round up to exactly
    ``period``; that case is folded back to 0.
    """
    fraction = (elapsed_days % period_days) / period_days
    if fraction >= 1.0:
        return 0.0
    return fraction


class OrbitProjector:
    """Mean-anomaly projection onto a circle in the ecliptic plane."""

    def __init__(self, periods: Mapping[str, Optional[float]] = ORBITAL_PERIODS_DAYS):
        """
        Args:
            periods: Orbital period in days by body key, consulted when a
                catalog entry declares no usable period of its own
        """
        self.periods = periods

    def resolve_period(self, key: str, declared: Optional[float] = None) -> Optional[float]:
        """The declared period when valid, else the table's, else None."""
        if is_valid_period(declared):
            return declared
        tabled = self.periods.get(key)
        return tabled if is_valid_period(tabled) else None

    def angle(self, period_days: Optional[float], instant: datetime) -> float:
        """Orbital angle in radians at ``instant``; 0 without a valid period.

        Raises:
            NaiveDateTimeError: If instant is naive
        """
        if not is_valid_period(period_days):
            return 0.0
        elapsed = days_since_j2000(instant)
        return orbit_fraction(elapsed, float(period_days)) * TWO_PI

    def project(
        self, period_days: Optional[float], distance: float, instant: datetime
    ) -> Projection:
        """
        Project a body onto its circular orbit.

        Args:
            period_days: Days per revolution, as given by resolve_period, which
                falls back to the period table when the record has none.
                None or invalid keeps the body at angle 0
            distance: Orbit radius in scene units
            instant: Timezone-aware instant

        Returns:
            The angle and the (x, 0, z) position
        """
        angle = self.angle(period_days, instant)
        position = (distance * math.cos(angle), 0.0, distance * math.sin(angle))
        return Projection(angle=angle, position=position)
