from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CatalogEntry:
    """One body's static description, in canonical shape.

    ``distance`` is left exactly as the source supplied it (a number, a
    unit string such as ``"149.6 million km"``, or None); the distance
    parser turns it into scene units.
    """

    key: str
    name: str
    distance: Any = None
    orbit_period_days: Optional[float] = None
    radius: Optional[float] = None
    texture_url: Optional[str] = None
