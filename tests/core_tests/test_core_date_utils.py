"""Tests for core/date_utils.py wire date handling."""

from __future__ import annotations

import datetime as dt
import unittest

from core.date_utils import (
    decode_date,
    decode_datetime,
    encode_date_field,
    format_date,
    normalize_weekday,
    parse_date,
    to_iso_str,
)
from core.errors import FormatError


class TestParseDate(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(parse_date("2017-05-15"), dt.date(2017, 5, 15))

    def test_invalid_values(self):
        for value in ("2017-5-15", "15-05-2017", "2017-05-15T00:00:00Z", "2017-13-01", "2017-02-29", "", None):
            with self.subTest(value=value):
                with self.assertRaises(FormatError):
                    parse_date(value, "start_date")

    def test_error_carries_field_and_value(self):
        with self.assertRaises(FormatError) as ctx:
            parse_date("tomorrow", "end_date")
        self.assertEqual(ctx.exception.field, "end_date")
        self.assertEqual(ctx.exception.value, "tomorrow")
        self.assertIn("YYYY-MM-DD", str(ctx.exception))


class TestEncodeDateField(unittest.TestCase):

    def test_empty_is_unset(self):
        self.assertIsNone(encode_date_field("", "start_date"))
        self.assertIsNone(encode_date_field(None, "start_date"))

    def test_round_trips_without_shifting(self):
        self.assertEqual(encode_date_field("2017-12-31", "end_date"), "2017-12-31")

    def test_format_date_pads(self):
        self.assertEqual(format_date(dt.date(17, 1, 2)), "0017-01-02")


class TestDecode(unittest.TestCase):

    def test_decode_date(self):
        self.assertEqual(decode_date("2017-06-01"), dt.date(2017, 6, 1))
        self.assertEqual(decode_date("2017-06-01T00:00:00Z"), dt.date(2017, 6, 1))
        self.assertIsNone(decode_date(None))
        self.assertIsNone(decode_date(""))

    def test_decode_datetime_zulu(self):
        self.assertEqual(
            decode_datetime("2017-05-15T07:22:08Z"),
            dt.datetime(2017, 5, 15, 7, 22, 8, tzinfo=dt.timezone.utc),
        )

    def test_decode_datetime_naive_is_utc(self):
        self.assertEqual(decode_datetime("2017-05-15T07:22:08").tzinfo, dt.timezone.utc)


class TestToIsoStr(unittest.TestCase):

    def test_values(self):
        self.assertIsNone(to_iso_str(None))
        self.assertEqual(to_iso_str("2017-05-16T00:00:00Z"), "2017-05-16T00:00:00Z")
        self.assertEqual(to_iso_str(dt.date(2017, 5, 16)), "2017-05-16T00:00:00Z")
        self.assertEqual(to_iso_str(dt.datetime(2017, 5, 16, 7, 26, 38)), "2017-05-16T07:26:38Z")

    def test_aware_datetime_converted_to_utc(self):
        bkk = dt.timezone(dt.timedelta(hours=7))
        self.assertEqual(to_iso_str(dt.datetime(2017, 5, 16, 14, 0, tzinfo=bkk)), "2017-05-16T07:00:00Z")


class TestNormalizeWeekday(unittest.TestCase):

    def test_aliases(self):
        self.assertEqual(normalize_weekday("Mon"), "monday")
        self.assertEqual(normalize_weekday("TH"), "thursday")
        self.assertEqual(normalize_weekday(" saturday "), "saturday")

    def test_unknown_passes_through(self):
        self.assertEqual(normalize_weekday("Someday"), "someday")


if __name__ == "__main__":
    unittest.main()
