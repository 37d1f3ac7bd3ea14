"""
Engine configuration.

Lookup tables and unit constants live here as read-only data and are
handed to the distance parser and the orbit projector when they are built,
so tests can swap in their own tables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

# Default scene distance per body, used when a record carries no usable one
DEFAULT_SCENE_DISTANCES: Mapping[str, float] = MappingProxyType(
    {
        "sun": 0.0,
        "mercury": 50.0,
        "venus": 70.0,
        "earth": 95.0,
        "mars": 120.0,
        "jupiter": 180.0,
        "saturn": 220.0,
        "uranus": 280.0,
        "neptune": 320.0,
    }
)

# Scene distance for a body missing from DEFAULT_SCENE_DISTANCES
FALLBACK_SCENE_DISTANCE = 100.0

# Sidereal orbital periods in days; None marks a body that does not orbit
ORBITAL_PERIODS_DAYS: Mapping[str, Optional[float]] = MappingProxyType(
    {
        "mercury": 87.969,
        "venus": 224.701,
        "earth": 365.256,
        "mars": 686.98,
        "jupiter": 4332.589,
        "saturn": 10759.0,
        "uranus": 30688.5,
        "neptune": 60182.0,
        "sun": None,
    }
)

# One scene unit is a million kilometres: "149.6 million km" -> 149.6
KM_PER_SCENE_UNIT = 1e6

# IAU 2012 astronomical unit
KM_PER_AU = 149597870.7

DEFAULT_DATA_DIR = "./data"
DEFAULT_KERNEL_NAME = "de421.bsp"


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass(frozen=True)
class EngineConfig:
    """Everything the position engine needs besides the catalog itself."""

    default_distances: Mapping[str, float] = field(
        default_factory=lambda: DEFAULT_SCENE_DISTANCES
    )
    fallback_distance: float = FALLBACK_SCENE_DISTANCE
    orbital_periods: Mapping[str, Optional[float]] = field(
        default_factory=lambda: ORBITAL_PERIODS_DAYS
    )
    km_per_scene_unit: float = KM_PER_SCENE_UNIT
    # Multiplier for precise positions, which arrive in AU; None converts AU to scene units
    precise_scale: Optional[float] = None
    data_dir: Path = Path(DEFAULT_DATA_DIR)
    catalog_path: Optional[Path] = None
    kernel_path: Optional[Path] = None

    @property
    def resolved_kernel_path(self) -> Path:
        if self.kernel_path is not None:
            return self.kernel_path
        return self.data_dir / DEFAULT_KERNEL_NAME

    @property
    def resolved_precise_scale(self) -> float:
        if self.precise_scale is not None:
            return self.precise_scale
        return KM_PER_AU / self.km_per_scene_unit

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from ORRERY_* environment variables.

        Raises:
            ValueError: If a numeric variable does not parse
        """
        catalog = os.environ.get("ORRERY_CATALOG")
        kernel = os.environ.get("ORRERY_KERNEL")
        return cls(
            km_per_scene_unit=_env_float("ORRERY_KM_PER_SCENE_UNIT", KM_PER_SCENE_UNIT),
            precise_scale=_env_float("ORRERY_PRECISE_SCALE", None),
            data_dir=Path(os.environ.get("ORRERY_DATA_DIR", DEFAULT_DATA_DIR)),
            catalog_path=Path(catalog) if catalog else None,
            kernel_path=Path(kernel) if kernel else None,
        )
