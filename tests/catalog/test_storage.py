"""
Unit tests for the PlanetStore class.
"""

import sqlite3
import tempfile
import unittest
from pathlib import Path

from orrery.catalog.loader import load_catalog_file
from orrery.catalog.normalizer import normalize_record
from orrery.catalog.storage import PlanetStore
from orrery.errors import MissingIdentifier


class TestPlanetStore(unittest.TestCase):
    """Test the PlanetStore class."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.data_dir = Path(self.temp_dir.name)
        self.store = PlanetStore(data_dir=str(self.data_dir))

    def tearDown(self):
        self.store.engine.dispose()
        self.temp_dir.cleanup()

    def test_database_creation(self):
        """The database file and the planets table are created."""
        self.assertTrue(self.store.db_path.exists())

        conn = sqlite3.connect(str(self.store.db_path))
        cursor = conn.cursor()
        cursor.execute("PRAGMA table_info(planets)")
        column_names = [col[1] for col in cursor.fetchall()]
        conn.close()

        for col in ["key", "name", "distance", "orbit_period_days", "radius"]:
            self.assertIn(col, column_names)

    def test_empty_store(self):
        self.assertEqual(self.store.count(), 0)
        self.assertEqual(self.store.list_records(), [])

    def test_replace_all_resolves_distances(self):
        count = self.store.replace_all(load_catalog_file())
        self.assertEqual(count, 9)
        self.assertEqual(self.store.count(), 9)

        records = {r["key"]: r for r in self.store.list_records()}
        self.assertAlmostEqual(records["mercury"]["distance"], 57.9)
        self.assertAlmostEqual(records["saturn"]["distance"], 1400.0)
        self.assertEqual(records["earth"]["distance"], 95.0)
        self.assertEqual(records["sun"]["distance"], 0.0)
        self.assertIsNone(records["sun"]["orbitPeriodDays"])
        self.assertEqual(records["mars"]["orbitPeriodDays"], 686.98)
        self.assertEqual(records["mars"]["textureUrl"], "/images/mars.jpg")

    def test_records_come_back_nearest_first(self):
        self.store.replace_all(load_catalog_file())
        records = self.store.list_records()
        self.assertEqual(records[0]["key"], "sun")
        distances = [r["distance"] for r in records]
        self.assertEqual(distances, sorted(distances))

    def test_stored_records_normalize(self):
        self.store.replace_all([{"name": "Earth", "distance": 95, "orbitPeriodDays": 365.256}])
        entry = normalize_record(self.store.list_records()[0])
        self.assertEqual(entry.key, "earth")
        self.assertEqual(entry.distance, 95.0)
        self.assertEqual(entry.orbit_period_days, 365.256)

    def test_reseeding_replaces_rows(self):
        self.store.replace_all(load_catalog_file())
        self.store.replace_all([{"key": "earth", "distance": 95}])
        self.assertEqual(self.store.count(), 1)

    def test_bad_record_writes_nothing(self):
        self.store.replace_all([{"key": "earth", "distance": 95}])
        with self.assertRaises(MissingIdentifier):
            self.store.replace_all([{"key": "mars"}, {"distance": 3}])
        self.assertEqual([r["key"] for r in self.store.list_records()], ["earth"])


if __name__ == "__main__":
    unittest.main()
