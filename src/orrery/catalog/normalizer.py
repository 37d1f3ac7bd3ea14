"""
Normalization of loosely structured planet records.

Records come from the planet store or from hand-authored JSON, and the
field names drift between sources. Every alternate spelling is listed in
FIELD_ALIASES in precedence order; nothing else in orrery reads raw
records.
"""

import math
import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..errors import MissingIdentifier
from ..logging import get_logger
from .entry import CatalogEntry

logger = get_logger(__name__)

# Canonical field -> source field names, first match wins
FIELD_ALIASES: Mapping[str, Tuple[str, ...]] = {
    "key": ("key",),
    "name": ("name",),
    "distance": ("distance", "distanceFromSun", "sceneDistance", "distanceFromSunKm"),
    "orbit_period_days": ("orbitPeriodDays", "orbitPeriod", "orbitalPeriod", "period"),
    "radius": ("radius", "size"),
    "texture_url": ("textureUrl", "texture"),
}

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _first(record: Mapping[str, Any], canonical: str) -> Any:
    for alias in FIELD_ALIASES[canonical]:
        value = record.get(alias)
        if not _is_blank(value):
            return value
    return None


def _leading_float(value: Any) -> Optional[float]:
    """Read a number the lenient way: ``"687 days"`` -> 687.0."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            return float(match.group(1))
    return None


def _texture_url(record: Mapping[str, Any]) -> Optional[str]:
    texture = _first(record, "texture_url")
    if texture is not None:
        return str(texture)
    image = record.get("image")
    if not _is_blank(image):
        return f"/images/{image}"
    return None


def normalize_record(record: Any) -> CatalogEntry:
    """Map a raw record onto a CatalogEntry.

    Args:
        record: A mapping of unknown shape

    Returns:
        The canonical entry. Optional fields that are missing become None.

    Raises:
        MissingIdentifier: If the record has neither ``key`` nor ``name``,
            or is not a mapping at all
    """
    if not isinstance(record, Mapping):
        raise MissingIdentifier(record)

    raw_key = _first(record, "key")
    raw_name = _first(record, "name")
    if raw_key is not None:
        key = str(raw_key).strip().lower()
    elif raw_name is not None:
        key = str(raw_name).strip().lower()
    else:
        raise MissingIdentifier(record)

    name = str(raw_name).strip() if raw_name is not None else key

    radius = _leading_float(_first(record, "radius"))
    if radius is not None and not math.isfinite(radius):
        radius = None

    return CatalogEntry(
        key=key,
        name=name,
        distance=_first(record, "distance"),
        orbit_period_days=_leading_float(_first(record, "orbit_period_days")),
        radius=radius,
        texture_url=_texture_url(record),
    )


def normalize_catalog(
    records: Sequence[Any], skip_invalid: bool = False
) -> List[CatalogEntry]:
    """Normalize a whole catalog, keeping its order.

    Args:
        records: Raw records
        skip_invalid: Drop records without an identifier instead of raising

    Raises:
        MissingIdentifier: For the first unidentifiable record, unless
            skip_invalid is set
    """
    entries: List[CatalogEntry] = []
    for index, record in enumerate(records):
        try:
            entries.append(normalize_record(record))
        except MissingIdentifier:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping catalog record {index}: no key or name")
    return entries
