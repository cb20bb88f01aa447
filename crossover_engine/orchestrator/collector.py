"""
Crossover Watch: Snapshot Collector
────────────────────────────────────
One call = one attempt to read both caps.

  1. fetch page HTML (bounded by FETCH_TIMEOUT_S)
  2. extract the gold / bitcoin cap strings
  3. parse them to USD
  4. store complete results in the cache

Failure handling depends on the policy:
  CACHE  serve the last complete snapshot (source="cache") when there is one
  NULL   return {None, None} with the error set

A live result missing one cap counts as a failure for the CACHE policy:
the cached pair is served whole rather than mixing fresh and cached
values. With an empty cache, or under NULL, the partial live snapshot
is returned as-is.
"""

import asyncio
import enum
import logging
from typing import Optional

import httpx

from crossover_engine import config
from crossover_engine.cache import SnapshotCache
from crossover_engine.errors import MarketDataError, TransportError
from crossover_engine.models import MarketSnapshot, is_missing
from crossover_engine.scraping import build_fetcher, extract_cap_texts, parse_cap, parse_document

log = logging.getLogger("cw.collector")


class FallbackPolicy(str, enum.Enum):
    CACHE = "cache"
    NULL  = "null"


def _clean(value: Optional[float]) -> Optional[float]:
    return None if is_missing(value) else value


class MarketCapCollector:

    def __init__(self, fetcher, cache: Optional[SnapshotCache] = None,
                 policy: FallbackPolicy = FallbackPolicy.CACHE,
                 timeout: float = config.FETCH_TIMEOUT_S):
        self.fetcher = fetcher
        self.cache   = cache if cache is not None else SnapshotCache()
        self.policy  = FallbackPolicy(policy)
        self.timeout = timeout

    async def _fetch_live(self) -> MarketSnapshot:
        html = await self.fetcher.fetch_market_html()
        texts = extract_cap_texts(parse_document(html))
        return MarketSnapshot(
            gold_cap=_clean(parse_cap(texts.gold_text)),
            bitcoin_cap=_clean(parse_cap(texts.bitcoin_text)),
        )

    async def collect(self) -> MarketSnapshot:
        try:
            snapshot = await asyncio.wait_for(self._fetch_live(), timeout=self.timeout)
        except asyncio.TimeoutError:
            log.warning(f"Fetch timed out after {self.timeout}s")
            return self._fallback(f"Timed out after {self.timeout}s")
        except MarketDataError as e:
            log.warning(f"Fetch failed: {e}")
            return self._fallback(str(e))
        except Exception as e:
            log.warning(f"Unexpected fetch error: {type(e).__name__}: {e}")
            return self._fallback(str(e) or type(e).__name__)

        if self.cache.put_if_complete(snapshot):
            return snapshot

        log.warning(f"Partial snapshot: gold={snapshot.gold_cap} btc={snapshot.bitcoin_cap}")
        if self.policy is FallbackPolicy.CACHE:
            cached = self.cache.get_last_valid()
            if cached is not None:
                return cached
        return snapshot

    def _fallback(self, reason: str) -> MarketSnapshot:
        if self.policy is FallbackPolicy.CACHE:
            cached = self.cache.get_last_valid()
            if cached is not None:
                log.info(f"Serving cached snapshot (age={cached.age_seconds()}s)")
                return cached
        return MarketSnapshot(source="unavailable", error=reason)


class ScrapeApiCollector(MarketCapCollector):
    """
    Client of a scrape server's GET /scrape.

    The server has already done extraction and parsing, so the body is
    read directly: {goldCap, bitcoinCap} on 200, {error} otherwise.
    """

    def __init__(self, api_url: str = config.SCRAPE_API_URL,
                 cache: Optional[SnapshotCache] = None,
                 policy: FallbackPolicy = FallbackPolicy.CACHE,
                 timeout: float = config.FETCH_TIMEOUT_S,
                 client: Optional[httpx.AsyncClient] = None):
        super().__init__(fetcher=None, cache=cache, policy=policy, timeout=timeout)
        self.api_url = api_url
        self._client = client

    async def _get_json(self, client: httpx.AsyncClient) -> dict:
        try:
            r = await client.get(self.api_url, timeout=config.REQUEST_TIMEOUT)
            data = r.json()
        except httpx.HTTPError as e:
            raise TransportError(f"Error calling {self.api_url}: {e}") from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {self.api_url}") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected body from {self.api_url}")
        if data.get("error"):
            raise TransportError(str(data["error"]))
        if r.status_code != 200:
            raise TransportError(f"HTTP {r.status_code} from {self.api_url}")
        return data

    async def _fetch_live(self) -> MarketSnapshot:
        if self._client is not None:
            data = await self._get_json(self._client)
        else:
            async with httpx.AsyncClient() as client:
                data = await self._get_json(client)
        snap = MarketSnapshot.from_dict(data)
        snap.gold_cap = _clean(snap.gold_cap)
        snap.bitcoin_cap = _clean(snap.bitcoin_cap)
        return snap


def build_collector(strategy: str = config.FETCH_STRATEGY,
                    policy: str = config.FALLBACK_POLICY,
                    cache: Optional[SnapshotCache] = None) -> MarketCapCollector:
    if strategy == "api":
        return ScrapeApiCollector(cache=cache, policy=FallbackPolicy(policy))
    return MarketCapCollector(build_fetcher(strategy), cache=cache, policy=FallbackPolicy(policy))
