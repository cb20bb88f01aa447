"""
Crossover Watch: Last-Known-Good Cache
───────────────────────────────────────
Holds the most recent snapshot that had BOTH caps.
Partial snapshots are never stored and nothing is ever evicted, so once
one good cycle has run the display always has something to fall back on.

In-memory only. One instance is shared by the collector and the
endpoints that want to report on it.
"""

import logging
from dataclasses import replace
from typing import Optional

from crossover_engine.models import MarketSnapshot

log = logging.getLogger("cw.cache")


class SnapshotCache:

    def __init__(self):
        self._last: Optional[MarketSnapshot] = None

    def get_last_valid(self) -> Optional[MarketSnapshot]:
        """Copy of the last complete snapshot, tagged source="cache"."""
        if self._last is None:
            return None
        return replace(self._last, source="cache", error=None)

    def put_if_complete(self, snapshot: MarketSnapshot) -> bool:
        if not snapshot.is_complete:
            return False
        self._last = replace(snapshot)
        log.debug(f"Cache updated: gold={snapshot.gold_cap:.0f} btc={snapshot.bitcoin_cap:.0f}")
        return True

    def age_seconds(self) -> Optional[int]:
        return self._last.age_seconds() if self._last else None

    @property
    def has_value(self) -> bool:
        return self._last is not None
