"""
Crossover Watch: Table Extractor
─────────────────────────────────
Finds the gold and bitcoin rows in the assets-by-market-cap table.

Row layout on the source page:
  td[1] rank · td[2] name (+ ticker) · td[3] market cap · ...

Matching is a case-insensitive substring test on the name cell. The
first row that matches wins, so "Gold Trust" shadows a later
"Gold Mining Co". Missing cells never raise; the slot stays None.
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from crossover_engine.models import CapTexts

log = logging.getLogger("cw.extractor")

ROW_SELECTOR  = "table tr"
NAME_SELECTOR = "td:nth-child(2)"
CAP_SELECTOR  = "td:nth-child(3)"

GOLD_KEY    = "gold"
BITCOIN_KEY = "bitcoin"


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _cell_text(row: Tag, selector: str) -> Optional[str]:
    cell = row.select_one(selector)
    if cell is None:
        return None
    text = cell.get_text(" ", strip=True)
    return text or None


def extract_cap_texts(document: Union[BeautifulSoup, str]) -> CapTexts:
    if isinstance(document, str):
        document = parse_document(document)

    rows = document.select(ROW_SELECTOR)
    if not rows:
        log.warning("No table rows found in document")

    out = CapTexts()
    gold_seen = bitcoin_seen = False

    for row in rows:
        name = _cell_text(row, NAME_SELECTOR)
        if not name:
            continue
        name = name.lower()

        if not gold_seen and GOLD_KEY in name:
            out.gold_text = _cell_text(row, CAP_SELECTOR)
            gold_seen = True
        if not bitcoin_seen and BITCOIN_KEY in name:
            out.bitcoin_text = _cell_text(row, CAP_SELECTOR)
            bitcoin_seen = True

        if gold_seen and bitcoin_seen:
            break

    if not gold_seen:
        log.warning("No row matching 'gold'")
    if not bitcoin_seen:
        log.warning("No row matching 'bitcoin'")
    return out
