"""Tests for display formatting, including the end-to-end render paths."""

from __future__ import annotations

import unittest

from crossover_engine.formatter import (
    CALCULATING_TEXT, ERROR_TEXT, FETCH_ERROR_TEXT, OVERTAKEN_TEXT,
    format_countdown, format_usd, render_snapshot,
)
from crossover_engine.models import ZERO_DURATION, CrossoverDuration, MarketSnapshot
from tests.fixtures import BITCOIN_CAP, GOLD_CAP


class TestFormatUsd(unittest.TestCase):

    def test_whole_dollars_with_separators(self):
        self.assertEqual(format_usd(21_857_000_000_000), "$21,857,000,000,000")

    def test_rounds_to_zero_decimals(self):
        self.assertEqual(format_usd(1234.6), "$1,235")

    def test_falsy_is_error(self):
        self.assertEqual(format_usd(None), ERROR_TEXT)
        self.assertEqual(format_usd(0), ERROR_TEXT)
        self.assertEqual(format_usd(float("nan")), ERROR_TEXT)

    def test_infinite_is_error(self):
        self.assertEqual(format_usd(float("inf")), ERROR_TEXT)
        self.assertEqual(format_usd(float("-inf")), ERROR_TEXT)


class TestFormatCountdown(unittest.TestCase):

    def test_none_is_calculating(self):
        self.assertEqual(format_countdown(None), CALCULATING_TEXT)

    def test_zero_is_overtaken(self):
        self.assertEqual(format_countdown(ZERO_DURATION), OVERTAKEN_TEXT)
        self.assertEqual(format_countdown(CrossoverDuration(0, 0, 0, 0, 0, 0)), OVERTAKEN_TEXT)

    def test_full_breakdown(self):
        d = CrossoverDuration(6, 6, 27, 4, 12, 9)
        self.assertEqual(format_countdown(d), "6y 6m 27d 4h 12m 9s")

    def test_only_seconds_left_is_not_overtaken(self):
        self.assertEqual(format_countdown(CrossoverDuration(seconds=1)), "0y 0m 0d 0h 0m 1s")


class TestRenderSnapshot(unittest.TestCase):

    def test_live_snapshot(self):
        state = render_snapshot(MarketSnapshot(GOLD_CAP, BITCOIN_CAP))
        self.assertEqual(state.gold_text, "$21,857,000,000,000")
        self.assertEqual(state.bitcoin_text, "$1,900,000,000,000")
        self.assertRegex(state.countdown_text, r"^6y \d+m \d+d \d+h \d+m \d+s$")
        self.assertFalse(state.stale)

    def test_equal_caps_overtaken(self):
        state = render_snapshot(MarketSnapshot(1000, 1000))
        self.assertEqual(state.countdown_text, OVERTAKEN_TEXT)

    def test_fetch_error(self):
        state = render_snapshot(MarketSnapshot(source="unavailable", error="boom"))
        self.assertEqual(state.gold_text, FETCH_ERROR_TEXT)
        self.assertEqual(state.bitcoin_text, FETCH_ERROR_TEXT)
        self.assertEqual(state.countdown_text, ERROR_TEXT)

    def test_missing_bitcoin(self):
        state = render_snapshot(MarketSnapshot(GOLD_CAP, None))
        self.assertEqual(state.gold_text, "$21,857,000,000,000")
        self.assertEqual(state.bitcoin_text, ERROR_TEXT)
        self.assertEqual(state.countdown_text, ERROR_TEXT)

    def test_missing_gold(self):
        state = render_snapshot(MarketSnapshot(None, 500))
        self.assertEqual(state.gold_text, ERROR_TEXT)
        self.assertEqual(state.countdown_text, ERROR_TEXT)

    def test_cached_values_are_marked(self):
        state = render_snapshot(MarketSnapshot(GOLD_CAP, BITCOIN_CAP, source="cache"))
        self.assertTrue(state.stale)
        self.assertEqual(state.gold_text, "$21,857,000,000,000 (cached)")
        self.assertEqual(state.bitcoin_text, "$1,900,000,000,000 (cached)")
        self.assertTrue(state.countdown_text.startswith("6y "))


if __name__ == "__main__":
    unittest.main()
