from .distance import DistanceParser
from .entry import CatalogEntry
from .loader import DEFAULT_CATALOG_PATH, load_catalog_file
from .normalizer import FIELD_ALIASES, normalize_catalog, normalize_record
from .source import load_catalog
from .storage import PlanetStore

__all__ = [
    "DistanceParser",
    "CatalogEntry",
    "DEFAULT_CATALOG_PATH",
    "load_catalog_file",
    "FIELD_ALIASES",
    "normalize_catalog",
    "normalize_record",
    "load_catalog",
    "PlanetStore",
]
