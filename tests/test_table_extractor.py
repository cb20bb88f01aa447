"""Tests for the assets table extractor."""

from __future__ import annotations

import unittest

from crossover_engine.scraping.table_extractor import extract_cap_texts, parse_document
from tests.fixtures import MARKET_PAGE, NO_BITCOIN_PAGE, NO_TABLE_PAGE, table_page


class TestExtractCapTexts(unittest.TestCase):

    def test_finds_both_assets(self):
        texts = extract_cap_texts(parse_document(MARKET_PAGE))
        self.assertEqual(texts.gold_text, "$21.857 T")
        self.assertEqual(texts.bitcoin_text, "$1.900 T")

    def test_accepts_raw_html(self):
        texts = extract_cap_texts(MARKET_PAGE)
        self.assertEqual(texts.gold_text, "$21.857 T")

    def test_first_match_wins(self):
        page = table_page([
            ("1", "Gold Trust", "$100 B"),
            ("2", "Gold Mining Co", "$50 B"),
            ("3", "Wrapped Bitcoin", "$12 B"),
            ("4", "Bitcoin", "$1.9 T"),
        ])
        texts = extract_cap_texts(page)
        self.assertEqual(texts.gold_text, "$100 B")
        self.assertEqual(texts.bitcoin_text, "$12 B")

    def test_name_match_is_case_insensitive(self):
        page = table_page([("1", "GOLD", "$1 T"), ("2", "BitCoin", "$2 T")])
        texts = extract_cap_texts(page)
        self.assertEqual(texts.gold_text, "$1 T")
        self.assertEqual(texts.bitcoin_text, "$2 T")

    def test_missing_bitcoin_row(self):
        texts = extract_cap_texts(NO_BITCOIN_PAGE)
        self.assertEqual(texts.gold_text, "$21.857 T")
        self.assertIsNone(texts.bitcoin_text)

    def test_no_table(self):
        texts = extract_cap_texts(NO_TABLE_PAGE)
        self.assertIsNone(texts.gold_text)
        self.assertIsNone(texts.bitcoin_text)

    def test_row_without_cap_cell(self):
        page = "<table><tr><td>1</td><td>Gold</td></tr><tr><td>2</td><td>Bitcoin</td><td>$1 T</td></tr></table>"
        texts = extract_cap_texts(page)
        self.assertIsNone(texts.gold_text)
        self.assertEqual(texts.bitcoin_text, "$1 T")

    def test_header_row_ignored(self):
        page = table_page([("1", "Bitcoin", "$2 T")])
        texts = extract_cap_texts(page)
        self.assertEqual(texts.bitcoin_text, "$2 T")
        self.assertIsNone(texts.gold_text)


if __name__ == "__main__":
    unittest.main()
