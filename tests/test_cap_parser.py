"""Tests for the market-cap text parser."""

from __future__ import annotations

import math
import unittest

from crossover_engine.models import is_missing
from crossover_engine.scraping.cap_parser import parse_cap, unit_multiplier


class TestParseCap(unittest.TestCase):

    def test_trillions(self):
        self.assertAlmostEqual(parse_cap("$21.857 T"), 21_857_000_000_000, delta=1)

    def test_billions(self):
        self.assertEqual(parse_cap("$900 B"), 900_000_000_000)

    def test_thousand_separators_removed(self):
        self.assertEqual(parse_cap("$1,234 B"), 1_234_000_000_000)

    def test_surrounding_whitespace(self):
        self.assertAlmostEqual(parse_cap("  $2.5T \n"), 2_500_000_000_000, delta=1)

    def test_no_unit_is_plain_dollars(self):
        self.assertEqual(parse_cap("$123,456"), 123_456)

    def test_million_marker_is_not_scaled(self):
        # M is stripped but left at x1; change this test only on purpose
        self.assertEqual(parse_cap("$512 M"), 512)

    def test_none_and_empty(self):
        self.assertIsNone(parse_cap(None))
        self.assertIsNone(parse_cap(""))

    def test_unparseable_numeral_is_nan(self):
        self.assertTrue(math.isnan(parse_cap("n/a")))
        self.assertTrue(math.isnan(parse_cap("$ T")))

    def test_nan_counts_as_missing(self):
        self.assertTrue(is_missing(parse_cap("n/a")))
        self.assertFalse(is_missing(parse_cap("$1 B")))

    def test_leading_numeral_prefix(self):
        self.assertEqual(parse_cap("$1.5 B (est)"), 1_500_000_000)


class TestUnitMultiplier(unittest.TestCase):

    def test_trillion_beats_billion(self):
        self.assertEqual(unit_multiplier("1 TB"), 1e12)

    def test_unknown(self):
        self.assertEqual(unit_multiplier("42 K"), 1.0)


if __name__ == "__main__":
    unittest.main()
