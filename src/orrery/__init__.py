"""Approximate solar-system positions from loosely structured planet catalogs."""

from .catalog import CatalogEntry, DistanceParser, load_catalog, normalize_record
from .config import EngineConfig
from .engine import PositionEngine, PositionReport, PositionResult, PositionSource, compute_positions
from .errors import CatalogUnreadable, MissingIdentifier, OrreryError

__version__ = "0.1.0"

__all__ = [
    "CatalogEntry",
    "DistanceParser",
    "load_catalog",
    "normalize_record",
    "EngineConfig",
    "PositionEngine",
    "PositionReport",
    "PositionResult",
    "PositionSource",
    "compute_positions",
    "CatalogUnreadable",
    "MissingIdentifier",
    "OrreryError",
]
