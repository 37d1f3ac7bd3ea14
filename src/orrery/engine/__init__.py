from .orbit import OrbitProjector, Projection, is_valid_period
from .positions import (
    PositionEngine,
    PositionReport,
    PositionResult,
    PositionSource,
    compute_positions,
)
from .precision import (
    Available,
    PrecisionCapability,
    PrecisionOutcome,
    PrecisionStatus,
    Spherical,
    Unavailable,
    load_precision_capability,
    spherical_to_cartesian,
)

__all__ = [
    "OrbitProjector",
    "Projection",
    "is_valid_period",
    "PositionEngine",
    "PositionReport",
    "PositionResult",
    "PositionSource",
    "compute_positions",
    "Available",
    "PrecisionCapability",
    "PrecisionOutcome",
    "PrecisionStatus",
    "Spherical",
    "Unavailable",
    "load_precision_capability",
    "spherical_to_cartesian",
]
