"""
Crossover Watch: Scrape Endpoint
─────────────────────────────────
GET /scrape

Runs one live collection and returns the parsed caps:
  200  {"goldCap": 21857000000000.0, "bitcoinCap": 1900000000000.0}
  500  {"error": "Failed to scrape data"}

A page that loads but lacks a row still returns 200, with null for
the missing cap. The collector behind this endpoint is normally built
with FallbackPolicy.NULL so a failed scrape is reported, not masked.
"""

import logging
from typing import Tuple

from crossover_engine.models import MarketSnapshot

log = logging.getLogger("cw.api.scrape")

SCRAPE_ERROR = "Failed to scrape data"


def scrape_body(snapshot: MarketSnapshot) -> Tuple[int, dict]:
    if snapshot.error and snapshot.source == "unavailable":
        log.error(f"Scraping error: {snapshot.error}")
        return 500, {"error": SCRAPE_ERROR}
    body = snapshot.to_dict()
    if snapshot.is_stale:
        body["stale"] = True
        body["age_s"] = snapshot.age_seconds()
    return 200, body


async def get_scrape_response(collector) -> Tuple[int, dict]:
    snapshot = await collector.collect()
    return scrape_body(snapshot)
