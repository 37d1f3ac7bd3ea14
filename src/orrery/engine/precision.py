"""
Optional precise positions.

A precision capability is chosen once, when the engine is built: either
``Available``, wrapping an Ephemeris backend, or ``Unavailable``. Every
lookup answers with a single PrecisionOutcome; anything other than
``OK`` sends the body to the orbit projector.
"""

import importlib
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from numbers import Real
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

from ..ephemeris.ephemeris import Ephemeris
from ..ephemeris.quantities import SPHERICAL_QUANTITIES, Quantity
from ..logging import get_logger

logger = get_logger(__name__)

Vector = Tuple[float, float, float]


class PrecisionStatus(Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    NOT_MAPPED = "not_mapped"
    MALFORMED = "malformed"
    FAILED = "failed"


@dataclass(frozen=True)
class Spherical:
    distance: float
    ra_degrees: float
    dec_degrees: float


@dataclass(frozen=True)
class PrecisionOutcome:
    status: PrecisionStatus
    spherical: Optional[Spherical] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is PrecisionStatus.OK


def spherical_to_cartesian(range_: float, ra_degrees: float, dec_degrees: float) -> Vector:
    """Convert (range, right ascension, declination) to (x, y, z).

    Args:
        range_: Distance from the origin
        ra_degrees: Right ascension in degrees
        dec_degrees: Declination in degrees
    """
    ra = math.radians(ra_degrees)
    dec = math.radians(dec_degrees)
    return (
        range_ * math.cos(dec) * math.cos(ra),
        range_ * math.cos(dec) * math.sin(ra),
        range_ * math.sin(dec),
    )


def _key_variants(key: str) -> Iterator[str]:
    seen = set()
    for variant in (key, key.lower(), key.upper(), key.capitalize()):
        if variant not in seen:
            seen.add(variant)
            yield variant


def _finite(value: Any) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, Real)
        and math.isfinite(value)
    )


class PrecisionCapability(ABC):
    """Source of precise spherical coordinates, possibly absent."""

    @property
    @abstractmethod
    def available(self) -> bool:
        pass

    @abstractmethod
    def lookup(self, key: str, instant: datetime) -> PrecisionOutcome:
        """Look up ``key`` at ``instant``. Never raises."""
        pass


class Unavailable(PrecisionCapability):
    """No precise source; every body falls back."""

    def __init__(self, reason: str = "no precise ephemeris configured"):
        self.reason = reason

    @property
    def available(self) -> bool:
        return False

    def lookup(self, key: str, instant: datetime) -> PrecisionOutcome:
        return PrecisionOutcome(PrecisionStatus.UNAVAILABLE, detail=self.reason)

    def __repr__(self) -> str:
        return f"Unavailable({self.reason!r})"


class Available(PrecisionCapability):
    """A working Ephemeris backend plus the bodies it knows about."""

    def __init__(self, ephemeris: Ephemeris, body_map: Mapping[str, str]):
        """
        Args:
            ephemeris: Backend answering get_planet_position
            body_map: Catalog key -> backend identifier
        """
        self.ephemeris = ephemeris
        self.body_map = body_map

    @property
    def available(self) -> bool:
        return True

    def identifier_for(self, key: str) -> Optional[str]:
        for variant in _key_variants(key):
            if variant in self.body_map:
                return self.body_map[variant]
        return None

    def lookup(self, key: str, instant: datetime) -> PrecisionOutcome:
        identifier = self.identifier_for(key)
        if identifier is None:
            return PrecisionOutcome(PrecisionStatus.NOT_MAPPED)

        try:
            reply = self.ephemeris.get_planet_position(identifier, instant)
        except Exception as e:
            logger.debug(f"Precise lookup for {key!r} failed: {e!r}")
            return PrecisionOutcome(PrecisionStatus.FAILED, detail=repr(e))

        return self._read_reply(key, reply)

    def _read_reply(self, key: str, reply: Any) -> PrecisionOutcome:
        if not isinstance(reply, Mapping):
            return PrecisionOutcome(
                PrecisionStatus.MALFORMED, detail=f"unexpected reply {type(reply).__name__}"
            )
        missing = [q.value for q in SPHERICAL_QUANTITIES if not _finite(reply.get(q))]
        if missing:
            logger.debug(f"Precise reply for {key!r} lacks {', '.join(missing)}")
            return PrecisionOutcome(
                PrecisionStatus.MALFORMED, detail=f"missing {', '.join(missing)}"
            )

        return PrecisionOutcome(
            PrecisionStatus.OK,
            spherical=Spherical(
                distance=float(reply[Quantity.DELTA]),
                ra_degrees=float(reply[Quantity.RIGHT_ASCENSION]),
                dec_degrees=float(reply[Quantity.DECLINATION]),
            ),
        )

    def __repr__(self) -> str:
        return f"Available({type(self.ephemeris).__name__}, {len(self.body_map)} bodies)"


def load_precision_capability(kernel_path: Optional[Union[str, Path]]) -> PrecisionCapability:
    """
    Select the precision capability for this process.

    Skyfield is optional. A missing library, a missing kernel file or a
    kernel that will not load all give ``Unavailable``; none of them is
    an error.

    Args:
        kernel_path: JPL kernel (e.g. de421.bsp) on local disk
    """
    if kernel_path is None:
        return Unavailable("no kernel configured")

    try:
        importlib.import_module("skyfield.api")
    except ImportError:
        logger.info("skyfield is not installed; using fallback orbits only")
        return Unavailable("skyfield is not installed")

    path = Path(kernel_path)
    if not path.is_file():
        logger.info(f"Ephemeris kernel {path} not found; using fallback orbits only")
        return Unavailable(f"kernel {path} not found")

    from ..ephemeris.skyfield_ephemeris import SkyfieldEphemeris

    try:
        ephemeris = SkyfieldEphemeris.from_file(path)
    except Exception as e:
        logger.warning(f"Could not load ephemeris kernel {path}: {e}")
        return Unavailable(f"kernel {path} failed to load")

    logger.info(f"Precise positions from {path}")
    return Available(ephemeris, SkyfieldEphemeris.BODY_NAMES)

