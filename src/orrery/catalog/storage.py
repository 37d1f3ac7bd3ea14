"""
Storage for the planet catalog.

This module keeps planet records in a local SQLite database, the
persistent alternative to the JSON catalog file.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.orm import Session

from ..logging import get_logger
from .distance import DistanceParser
from .models import Base, PlanetRow
from .normalizer import normalize_record

logger = get_logger(__name__)


class PlanetStore:
    """
    Storage manager for planet records.

    Records are normalized on the way in and their distances resolved to
    scene units, so what comes back out is already in canonical shape.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] = "./data",
        distance_parser: Optional[DistanceParser] = None,
    ):
        """
        Initialize the storage manager.

        Args:
            data_dir: Directory where the SQLite database will be stored.
            distance_parser: Resolves raw distances before they are stored.
        """
        self.data_dir = Path(data_dir)
        self.db_path = self.data_dir / "planets.db"
        self.distance_parser = distance_parser or DistanceParser()

        os.makedirs(self.data_dir, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{self.db_path}")
        Base.metadata.create_all(self.engine)

    # --- Reading methods ---

    def count(self) -> int:
        with Session(self.engine) as session:
            return session.scalar(select(func.count()).select_from(PlanetRow)) or 0

    def list_records(self) -> List[Dict[str, Any]]:
        """
        Get every stored planet, nearest first.

        Returns:
            Records in the loose catalog shape, ordered by scene distance.
        """
        with Session(self.engine) as session:
            rows = session.execute(
                select(PlanetRow).order_by(PlanetRow.distance, PlanetRow.key)
            ).scalars()
            return [row.to_record() for row in rows]

    # --- Writing methods ---

    def replace_all(self, records: Sequence[Any]) -> int:
        """
        Replace the stored catalog with ``records``.

        Existing rows are cleared first, so reseeding never duplicates keys.

        Args:
            records: Raw catalog records

        Returns:
            The number of rows written

        Raises:
            MissingIdentifier: If a record has neither key nor name; nothing
                is written in that case
        """
        rows = []
        for record in records:
            entry = normalize_record(record)
            info = record.get("info") if isinstance(record.get("info"), str) else None
            rows.append(
                PlanetRow(
                    key=entry.key,
                    name=entry.name,
                    distance=self.distance_parser.parse(entry.distance, entry.key),
                    orbit_period_days=entry.orbit_period_days,
                    radius=entry.radius,
                    texture_url=entry.texture_url,
                    info=info,
                )
            )

        with Session(self.engine) as session:
            session.execute(delete(PlanetRow))
            session.add_all(rows)
            session.commit()

        logger.info(f"Stored {len(rows)} planets in {self.db_path}")
        return len(rows)
