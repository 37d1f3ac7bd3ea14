"""Tests for the J2000 epoch helpers."""

import unittest
from datetime import datetime, timedelta, timezone

from orrery.space_time.epoch import (
    J2000,
    J2000_JULIAN_DATE,
    days_since_j2000,
    julian_from_datetime,
)
from orrery.space_time.pythonic_datetimes import (
    NaiveDateTimeError,
    ensure_utc,
    isoformat_utc,
)


class TestEpoch(unittest.TestCase):
    def test_epoch(self):
        self.assertEqual(J2000, datetime(2000, 1, 1, 12, tzinfo=timezone.utc))
        self.assertEqual(days_since_j2000(J2000), 0.0)

    def test_elapsed_days(self):
        self.assertEqual(days_since_j2000(J2000 + timedelta(days=1)), 1.0)
        self.assertEqual(days_since_j2000(J2000 + timedelta(hours=6)), 0.25)
        self.assertEqual(days_since_j2000(J2000 - timedelta(days=2)), -2.0)

    def test_whole_periods_are_exact(self):
        self.assertEqual(days_since_j2000(J2000 + timedelta(days=365.256)), 365.256)

    def test_other_timezones(self):
        tokyo = timezone(timedelta(hours=9))
        self.assertEqual(days_since_j2000(datetime(2000, 1, 1, 21, tzinfo=tokyo)), 0.0)

    def test_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            days_since_j2000(datetime(2000, 1, 1, 12))

    def test_julian_date(self):
        self.assertEqual(julian_from_datetime(J2000), J2000_JULIAN_DATE)
        self.assertEqual(julian_from_datetime(J2000 + timedelta(days=1)), 2451546.0)


class TestPythonicDatetimes(unittest.TestCase):
    def test_ensure_utc(self):
        plus_two = timezone(timedelta(hours=2))
        dt = ensure_utc(datetime(2025, 3, 19, 22, tzinfo=plus_two))
        self.assertEqual(dt, datetime(2025, 3, 19, 20, tzinfo=timezone.utc))
        self.assertEqual(dt.tzinfo, timezone.utc)

    def test_isoformat_utc(self):
        self.assertEqual(
            isoformat_utc(datetime(2024, 3, 15, 20, tzinfo=timezone.utc)),
            "2024-03-15T20:00:00.000Z",
        )
        minus_five = timezone(timedelta(hours=-5))
        self.assertEqual(
            isoformat_utc(datetime(2024, 3, 15, 15, 30, 0, 250000, tzinfo=minus_five)),
            "2024-03-15T20:30:00.250Z",
        )
