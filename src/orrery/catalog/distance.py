"""Resolution of raw distance values into scene units."""

import math
import re
from typing import Any, Mapping, Optional

from ..config import (
    DEFAULT_SCENE_DISTANCES,
    FALLBACK_SCENE_DISTANCE,
    KM_PER_SCENE_UNIT,
    EngineConfig,
)
from ..logging import get_logger

logger = get_logger(__name__)

# A decimal number, optionally followed by a scale word: "149.6 million km"
DISTANCE_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)\s*(million|billion)?", re.IGNORECASE)

SCALE_WORDS = {
    "million": 1e6,
    "billion": 1e9,
}

# "4,495 million km": commas between digits are thousands separators
_THOUSANDS_SEPARATOR = re.compile(r"(?<=\d),(?=\d{3})")


class DistanceParser:
    """Turns a number, a unit string or nothing into a scene distance.

    Numbers are trusted to be scene units already. Strings are read as
    kilometres and divided by ``km_per_scene_unit``. Whatever cannot be
    read, or reads as zero or less, is replaced by the body's entry in
    ``defaults``, or ``fallback`` for bodies not in the table.
    """

    def __init__(
        self,
        defaults: Mapping[str, float] = DEFAULT_SCENE_DISTANCES,
        fallback: float = FALLBACK_SCENE_DISTANCE,
        km_per_scene_unit: float = KM_PER_SCENE_UNIT,
    ):
        if km_per_scene_unit <= 0:
            raise ValueError("km_per_scene_unit must be positive")
        self.defaults = defaults
        self.fallback = fallback
        self.km_per_scene_unit = km_per_scene_unit

    @classmethod
    def from_config(cls, config: EngineConfig) -> "DistanceParser":
        return cls(
            defaults=config.default_distances,
            fallback=config.fallback_distance,
            km_per_scene_unit=config.km_per_scene_unit,
        )

    def parse(self, raw: Any, key: str) -> float:
        """Resolve ``raw`` for the body ``key``. Never raises."""
        value = self._read(raw)
        if value is not None and math.isfinite(value) and value > 0:
            return value

        default = self.default_for(key)
        logger.debug(f"No usable distance for {key!r} ({raw!r}); using default {default}")
        return default

    def default_for(self, key: str) -> float:
        return float(self.defaults.get(key, self.fallback))

    def _read(self, raw: Any) -> Optional[float]:
        if isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float)):
            try:
                return float(raw)
            except OverflowError:
                # ints past the float range, as json gives for long digit runs
                return None
        if isinstance(raw, str):
            return self._read_string(raw)
        return None

    def _read_string(self, raw: str) -> Optional[float]:
        text = _THOUSANDS_SEPARATOR.sub("", raw)
        match = DISTANCE_PATTERN.search(text)
        if match:
            number = float(match.group(1))
            scale = SCALE_WORDS.get((match.group(2) or "").lower(), 1.0)
            return number * scale / self.km_per_scene_unit

        try:
            return float(text.strip())
        except ValueError:
            return None
