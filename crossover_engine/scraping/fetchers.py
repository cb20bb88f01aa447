"""
Crossover Watch: Page Fetchers
───────────────────────────────
Fetchers pull the raw assets-by-market-cap HTML.
They return a string. They do NOT parse it.

Strategies:
  - DirectFetcher   plain GET with browser-like headers
  - ProxyFetcher    GET through a URL-template proxy (CORS relays etc.)
  - BrowserFetcher  headless Chromium via Playwright, for when the
                    table is rendered client-side

Every failure is raised as TransportError or StructureError so the
collector can treat all three strategies the same way. No retries
here: the next poll tick is the retry.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from crossover_engine import config
from crossover_engine.errors import StructureError, TransportError

log = logging.getLogger("cw.fetchers")


# ══════════════════════════════════════════════════════════════
# HTTP FETCHERS
# ══════════════════════════════════════════════════════════════
class DirectFetcher:

    name = "direct"

    def __init__(self, url: str = config.SOURCE_URL,
                 client: Optional[httpx.AsyncClient] = None,
                 timeout: float = config.REQUEST_TIMEOUT):
        self.url     = url
        self.timeout = timeout
        self._client = client

    def request_url(self) -> str:
        return self.url

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            r = await client.get(url, headers=config.HEADERS,
                                 timeout=self.timeout, follow_redirects=True)
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout fetching {url[:60]}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Error fetching {url[:60]}: {e}") from e
        if r.status_code != 200:
            raise TransportError(f"HTTP {r.status_code} from {url[:60]}")
        return r.text

    async def fetch_market_html(self) -> str:
        url = self.request_url()
        if self._client is not None:
            return await self._get(self._client, url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._get(client, url)


class ProxyFetcher(DirectFetcher):

    name = "proxy"

    def __init__(self, url: str = config.SOURCE_URL,
                 proxy_template: str = config.PROXY_URL_TEMPLATE,
                 client: Optional[httpx.AsyncClient] = None,
                 timeout: float = config.REQUEST_TIMEOUT):
        super().__init__(url, client=client, timeout=timeout)
        self.proxy_template = proxy_template

    def request_url(self) -> str:
        return self.proxy_template.format(url=quote(self.url, safe=""))


# ══════════════════════════════════════════════════════════════
# HEADLESS BROWSER
# ══════════════════════════════════════════════════════════════
class BrowserFetcher:
    """
    Navigates with headless Chromium and returns the rendered DOM.

    Navigation waits for network idle (NAVIGATION_TIMEOUT_MS); the table
    must then appear within SELECTOR_TIMEOUT_MS or the fetch fails with
    StructureError. Needs the "render" extra and `playwright install chromium`.
    """

    name = "render"

    def __init__(self, url: str = config.SOURCE_URL,
                 navigation_timeout_ms: int = config.NAVIGATION_TIMEOUT_MS,
                 selector_timeout_ms: int = config.SELECTOR_TIMEOUT_MS):
        self.url                   = url
        self.navigation_timeout_ms = navigation_timeout_ms
        self.selector_timeout_ms   = selector_timeout_ms

    async def fetch_market_html(self) -> str:
        try:
            from playwright.async_api import Error as PlaywrightError
            from playwright.async_api import TimeoutError as PlaywrightTimeoutError
            from playwright.async_api import async_playwright
        except ImportError as e:
            raise TransportError("playwright not installed: pip install '.[render]' "
                                 "&& playwright install chromium") from e

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    page = await browser.new_page(extra_http_headers={
                        "Accept-Language": config.HEADERS["Accept-Language"],
                    })
                    try:
                        await page.goto(self.url, wait_until="networkidle",
                                        timeout=self.navigation_timeout_ms)
                    except PlaywrightTimeoutError as e:
                        raise TransportError(f"Navigation timeout for {self.url[:60]}") from e

                    try:
                        await page.wait_for_selector("table", timeout=self.selector_timeout_ms)
                    except PlaywrightTimeoutError as e:
                        raise StructureError("Table did not appear") from e

                    return await page.content()
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise TransportError(f"Browser error: {e}") from e


STRATEGIES = {
    "direct": DirectFetcher,
    "proxy":  ProxyFetcher,
    "render": BrowserFetcher,
}


def build_fetcher(strategy: str = config.FETCH_STRATEGY, url: str = config.SOURCE_URL):
    try:
        cls = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown fetch strategy '{strategy}' "
                         f"(expected one of {', '.join(STRATEGIES)})") from None
    log.info(f"Fetcher: {cls.name} -> {url[:60]}")
    return cls(url=url)
