"""
The position query.

PositionEngine.query takes a raw catalog and an instant and returns a
PositionReport: one PositionResult per body, in catalog order, each
tagged with the method that produced it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from ..catalog.distance import DistanceParser
from ..catalog.entry import CatalogEntry
from ..catalog.normalizer import normalize_catalog
from ..config import EngineConfig
from ..logging import get_logger
from ..space_time.pythonic_datetimes import ensure_utc, isoformat_utc, utc_now
from .orbit import OrbitProjector
from .precision import (
    PrecisionCapability,
    Unavailable,
    load_precision_capability,
    spherical_to_cartesian,
)

logger = get_logger(__name__)

Vector = Tuple[float, float, float]


class PositionSource(Enum):
    PRECISE = "precise"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class PositionResult:
    key: str
    position: Vector
    source: PositionSource
    # Only set for fallback results
    angle: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        x, y, z = self.position
        data: Dict[str, Any] = {
            "key": self.key,
            "position": {"x": x, "y": y, "z": z},
            "source": self.source.value,
        }
        if self.angle is not None:
            data["angle"] = self.angle
        return data


@dataclass(frozen=True)
class PositionReport:
    generated_at: datetime
    instant: datetime
    results: Tuple[PositionResult, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedAt": isoformat_utc(self.generated_at),
            "instant": isoformat_utc(self.instant),
            "results": [result.to_dict() for result in self.results],
        }

    def by_key(self) -> Dict[str, PositionResult]:
        return {result.key: result for result in self.results}


class PositionEngine:
    """
    Computes positions for a catalog of bodies.

    Each body is handled on its own: the precision capability is asked
    first, and anything short of a clean answer falls through to the
    orbit projector. Nothing is shared between bodies or between queries.
    """

    def __init__(
        self,
        precision: Optional[PrecisionCapability] = None,
        projector: Optional[OrbitProjector] = None,
        distance_parser: Optional[DistanceParser] = None,
        precise_scale: float = 1.0,
    ):
        self.precision = precision if precision is not None else Unavailable()
        self.projector = projector or OrbitProjector()
        self.distance_parser = distance_parser or DistanceParser()
        self.precise_scale = precise_scale

    @classmethod
    def from_config(
        cls, config: EngineConfig, use_precise: bool = True
    ) -> "PositionEngine":
        """Build an engine from configuration, choosing the precision source once."""
        precision = (
            load_precision_capability(config.resolved_kernel_path)
            if use_precise
            else Unavailable("precise positions disabled")
        )
        return cls(
            precision=precision,
            projector=OrbitProjector(config.orbital_periods),
            distance_parser=DistanceParser.from_config(config),
            precise_scale=config.resolved_precise_scale,
        )

    def position_of(self, entry: CatalogEntry, instant: datetime) -> PositionResult:
        """Position of one body: precise if possible, fallback otherwise."""
        outcome = self.precision.lookup(entry.key, instant)
        if outcome.ok and outcome.spherical is not None:
            s = outcome.spherical
            x, y, z = spherical_to_cartesian(s.distance, s.ra_degrees, s.dec_degrees)
            scale = self.precise_scale
            return PositionResult(
                key=entry.key,
                position=(x * scale, y * scale, z * scale),
                source=PositionSource.PRECISE,
            )

        logger.debug(f"{entry.key}: {outcome.status.value}, using fallback orbit")
        distance = self.distance_parser.parse(entry.distance, entry.key)
        period = self.projector.resolve_period(entry.key, entry.orbit_period_days)
        projection = self.projector.project(period, distance, instant)
        return PositionResult(
            key=entry.key,
            position=projection.position,
            source=PositionSource.FALLBACK,
            angle=projection.angle,
        )

    def query(
        self,
        records: Sequence[Any],
        at: Optional[datetime] = None,
        skip_invalid: bool = False,
    ) -> PositionReport:
        """
        Compute positions for every record in a raw catalog.

        Args:
            records: Raw catalog records, in any of the accepted shapes
            at: Timezone-aware instant; the current time when omitted
            skip_invalid: Drop records with no key or name instead of raising

        Returns:
            A PositionReport with one result per (kept) record, in order

        Raises:
            MissingIdentifier: If a record has no key or name and
                skip_invalid is not set
            NaiveDateTimeError: If ``at`` has no timezone
        """
        generated_at = utc_now()
        instant = ensure_utc(at) if at is not None else generated_at

        entries = normalize_catalog(records, skip_invalid=skip_invalid)
        results = tuple(self.position_of(entry, instant) for entry in entries)

        precise = sum(1 for r in results if r.source is PositionSource.PRECISE)
        logger.info(
            f"Computed {len(results)} positions ({precise} precise) for {isoformat_utc(instant)}"
        )
        return PositionReport(generated_at=generated_at, instant=instant, results=results)


def compute_positions(
    records: Sequence[Any],
    at: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> Dict[str, Any]:
    """Positions for ``records`` as a JSON-ready envelope.

    Convenience wrapper for services: builds an engine from ``config``
    (or the environment) and returns ``PositionReport.to_dict()``.
    Unidentifiable records are skipped.
    """
    engine = PositionEngine.from_config(config or EngineConfig.from_env())
    return engine.query(records, at=at, skip_invalid=True).to_dict()
