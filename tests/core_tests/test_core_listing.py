"""Tests for core/listing.py and core/operation.py."""

from __future__ import annotations

import datetime as dt
import unittest

from core.listing import ListParams, Ordering
from core.operation import Endpoint, Op


class TestListParams(unittest.TestCase):

    def test_defaults_are_empty(self):
        self.assertEqual(ListParams().to_params(), {})

    def test_all_fields(self):
        params = ListParams(
            offset=10,
            limit=50,
            from_=dt.date(2017, 5, 1),
            to=dt.datetime(2017, 5, 16, 7, 26, 38),
            order="reverse_chronological",
        )
        self.assertEqual(
            params.to_params(),
            {
                "offset": 10,
                "limit": 50,
                "from": "2017-05-01T00:00:00Z",
                "to": "2017-05-16T07:26:38Z",
                "order": "reverse_chronological",
            },
        )

    def test_enum_order(self):
        self.assertEqual(ListParams(order=Ordering.CHRONOLOGICAL).to_params(), {"order": "chronological"})

    def test_unknown_order_rejected(self):
        with self.assertRaises(ValueError):
            ListParams(order="sideways").to_params()


class TestOp(unittest.TestCase):

    def test_url_joins_base_and_path(self):
        self.assertEqual(Op("GET", "/schedules").url(), "https://api.omise.co/schedules")
        self.assertEqual(Op("GET", "tokens", endpoint=Endpoint.VAULT).url(), "https://vault.omise.co/tokens")

    def test_url_with_custom_base(self):
        op = Op("GET", "/schedules")
        self.assertEqual(op.url({"api": "http://localhost:9000/"}), "http://localhost:9000/schedules")

    def test_has_body(self):
        self.assertTrue(Op("post", "/x").has_body)
        self.assertFalse(Op("GET", "/x").has_body)
        self.assertFalse(Op("DELETE", "/x").has_body)


if __name__ == "__main__":
    unittest.main()
