"""Tests for the optional precise position source."""

import math
import sys
import unittest
from datetime import datetime, timezone

import pytest

from orrery.engine.precision import (
    Available,
    PrecisionStatus,
    Spherical,
    Unavailable,
    load_precision_capability,
    spherical_to_cartesian,
)
from orrery.ephemeris.ephemeris import Ephemeris
from orrery.ephemeris.quantities import Quantity

NOW = datetime(2025, 3, 19, 20, 0, 0, tzinfo=timezone.utc)


class FakeEphemeris(Ephemeris):
    """Answers from a fixed table; exceptions in the table are raised."""

    def __init__(self, replies):
        self.replies = replies
        self.calls = []

    def get_planet_position(self, planet, time=None):
        self.calls.append((planet, time))
        reply = self.replies[planet]
        if isinstance(reply, Exception):
            raise reply
        return reply


def spherical_reply(delta=1.0, ra=0.0, dec=0.0):
    return {
        Quantity.DELTA: delta,
        Quantity.RIGHT_ASCENSION: ra,
        Quantity.DECLINATION: dec,
    }


class TestSphericalToCartesian(unittest.TestCase):
    def assertVectorAlmostEqual(self, actual, expected):
        for a, e in zip(actual, expected):
            self.assertAlmostEqual(a, e, places=12)

    def test_axes(self):
        self.assertVectorAlmostEqual(spherical_to_cartesian(1.0, 0.0, 0.0), (1.0, 0.0, 0.0))
        self.assertVectorAlmostEqual(spherical_to_cartesian(2.0, 90.0, 0.0), (0.0, 2.0, 0.0))
        self.assertVectorAlmostEqual(spherical_to_cartesian(3.0, 0.0, 90.0), (0.0, 0.0, 3.0))
        self.assertVectorAlmostEqual(spherical_to_cartesian(1.0, 180.0, 0.0), (-1.0, 0.0, 0.0))

    def test_length_is_range(self):
        x, y, z = spherical_to_cartesian(5.2, 123.4, -17.5)
        self.assertAlmostEqual(math.sqrt(x * x + y * y + z * z), 5.2, places=12)


class TestUnavailable(unittest.TestCase):
    def test_every_lookup_is_unavailable(self):
        capability = Unavailable("not installed")
        self.assertFalse(capability.available)
        outcome = capability.lookup("earth", NOW)
        self.assertEqual(outcome.status, PrecisionStatus.UNAVAILABLE)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.detail, "not installed")


class TestAvailable(unittest.TestCase):
    def setUp(self):
        self.ephemeris = FakeEphemeris(
            {
                "399": spherical_reply(1.0, 90.0, 0.0),
                "4": {Quantity.DELTA: 1.5, Quantity.RIGHT_ASCENSION: 10.0},
                "5": RuntimeError("kernel exploded"),
                "6": ["not", "a", "mapping"],
                "7": spherical_reply("far", 1.0, 1.0),
            }
        )
        self.capability = Available(
            self.ephemeris,
            {"earth": "399", "MARS": "4", "Jupiter": "5", "saturn": "6", "uranus": "7"},
        )

    def test_ok(self):
        outcome = self.capability.lookup("earth", NOW)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.spherical, Spherical(1.0, 90.0, 0.0))
        self.assertEqual(self.ephemeris.calls, [("399", NOW)])

    def test_not_mapped(self):
        outcome = self.capability.lookup("sun", NOW)
        self.assertEqual(outcome.status, PrecisionStatus.NOT_MAPPED)
        self.assertEqual(self.ephemeris.calls, [])

    def test_case_variants(self):
        self.assertEqual(self.capability.identifier_for("mars"), "4")
        self.assertEqual(self.capability.identifier_for("jupiter"), "5")
        self.assertEqual(self.capability.identifier_for("Earth"), "399")
        self.assertIsNone(self.capability.identifier_for("pluto"))

    def test_missing_quantities_are_malformed(self):
        outcome = self.capability.lookup("mars", NOW)
        self.assertEqual(outcome.status, PrecisionStatus.MALFORMED)
        self.assertIn("declination", outcome.detail)

    def test_non_numeric_quantities_are_malformed(self):
        self.assertEqual(self.capability.lookup("uranus", NOW).status, PrecisionStatus.MALFORMED)

    def test_non_mapping_reply_is_malformed(self):
        self.assertEqual(self.capability.lookup("saturn", NOW).status, PrecisionStatus.MALFORMED)

    def test_backend_errors_are_contained(self):
        outcome = self.capability.lookup("jupiter", NOW)
        self.assertEqual(outcome.status, PrecisionStatus.FAILED)
        self.assertIn("kernel exploded", outcome.detail)


def test_no_kernel_configured():
    capability = load_precision_capability(None)
    assert isinstance(capability, Unavailable)


def test_missing_kernel_file(tmp_path):
    capability = load_precision_capability(tmp_path / "de421.bsp")
    assert isinstance(capability, Unavailable)
    assert not capability.available


def test_skyfield_not_installed(tmp_path, monkeypatch):
    kernel = tmp_path / "de421.bsp"
    kernel.write_bytes(b"")
    monkeypatch.setitem(sys.modules, "skyfield.api", None)
    capability = load_precision_capability(kernel)
    assert isinstance(capability, Unavailable)
    assert capability.reason == "skyfield is not installed"


def test_corrupt_kernel(tmp_path):
    pytest.importorskip("skyfield.api")
    kernel = tmp_path / "de421.bsp"
    kernel.write_bytes(b"this is not a kernel")
    capability = load_precision_capability(kernel)
    assert isinstance(capability, Unavailable)
    assert "failed to load" in capability.reason
