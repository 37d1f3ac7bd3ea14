from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, Union
from datetime import datetime

from .quantities import Quantity


class Ephemeris(ABC):
    """
    Abstract interface for precise ephemeris sources.

    Implementations report spherical coordinates for a body; the
    precision adapter turns them into scene positions.
    """

    @abstractmethod
    def get_planet_position(
        self, planet: str, time: Optional[Union[float, datetime]] = None
    ) -> Dict[Quantity, Any]:
        """
        Get a planet's position at a specific time.

        Args:
            planet: The source's identifier for the body.
            time: The time for which to retrieve the position.
                  If None, the current time is used.
                  Can be a Julian date float or a datetime object.

        Returns:
            A dictionary mapping Quantity enum values to their corresponding values.
            Will include at minimum:
            - Quantity.RIGHT_ASCENSION (degrees)
            - Quantity.DECLINATION (degrees)
            - Quantity.DELTA (distance in AU)
        """
        pass
