"""Tests for loading catalogs from JSON files."""

import json

import pytest

from orrery.catalog.loader import DEFAULT_CATALOG_PATH, load_catalog_file
from orrery.catalog.normalizer import normalize_catalog
from orrery.errors import CatalogUnreadable


def test_loads_a_list(tmp_path):
    path = tmp_path / "planets.json"
    path.write_text(json.dumps([{"key": "earth", "distance": 95}]))
    assert load_catalog_file(path) == [{"key": "earth", "distance": 95}]


def test_loads_a_planets_object(tmp_path):
    path = tmp_path / "planets.json"
    path.write_text(json.dumps({"planets": [{"name": "Mars"}]}))
    assert load_catalog_file(str(path)) == [{"name": "Mars"}]


def test_missing_file(tmp_path):
    with pytest.raises(CatalogUnreadable) as excinfo:
        load_catalog_file(tmp_path / "nope.json")
    assert "nope.json" in excinfo.value.source


def test_invalid_json(tmp_path):
    path = tmp_path / "planets.json"
    path.write_text("[{not json")
    with pytest.raises(CatalogUnreadable, match="invalid JSON"):
        load_catalog_file(path)


def test_payload_must_be_a_list(tmp_path):
    path = tmp_path / "planets.json"
    path.write_text(json.dumps({"earth": {"distance": 95}}))
    with pytest.raises(CatalogUnreadable, match="list"):
        load_catalog_file(path)


def test_packaged_catalog():
    assert DEFAULT_CATALOG_PATH.is_file()
    records = load_catalog_file()
    entries = normalize_catalog(records)
    keys = [entry.key for entry in entries]
    assert keys[0] == "sun"
    assert len(keys) == len(set(keys)) == 9
    assert {"mercury", "earth", "neptune"} <= set(keys)
