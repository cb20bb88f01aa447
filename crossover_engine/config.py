"""
Crossover Watch: Configuration
───────────────────────────────
Single source of truth for sources, timeouts and growth assumptions.
Everything except the growth model can be overridden from the
environment (or a .env file in the working directory).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Source page ───────────────────────────────────────────────
SOURCE_URL = os.getenv("SOURCE_URL", "https://companiesmarketcap.com/assets-by-market-cap/")

# "direct" | "proxy" | "render" | "api"
FETCH_STRATEGY = os.getenv("FETCH_STRATEGY", "direct").lower()

# {url} is replaced with the quoted source URL
PROXY_URL_TEMPLATE = os.getenv("PROXY_URL_TEMPLATE", "https://api.allorigins.win/raw?url={url}")

# The scrape server renders by default, like a browser would
SERVER_FETCH_STRATEGY = os.getenv("SERVER_FETCH_STRATEGY", "render").lower()

# Scrape server consumed by the "api" strategy
SCRAPE_API_URL = os.getenv("SCRAPE_API_URL", "http://localhost:3000/scrape")

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "en-US,en;q=0.9",
}

# ── Timeouts ──────────────────────────────────────────────────
REQUEST_TIMEOUT       = float(os.getenv("REQUEST_TIMEOUT", "15"))        # httpx, seconds
NAVIGATION_TIMEOUT_MS = int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000"))  # page.goto
SELECTOR_TIMEOUT_MS   = int(os.getenv("SELECTOR_TIMEOUT_MS", "5000"))     # wait for <table>
FETCH_TIMEOUT_S       = float(os.getenv("FETCH_TIMEOUT_S", "45"))         # whole fetch step

# ── Polling ───────────────────────────────────────────────────
POLL_INTERVAL_S = int(os.getenv("POLL_INTERVAL_S", "60"))
POLL_ON_STARTUP = os.getenv("POLL_ON_STARTUP", "false").lower() == "true"

# "cache" | "null"
FALLBACK_POLICY = os.getenv("FALLBACK_POLICY", "cache").lower()

# ── Server ────────────────────────────────────────────────────
PORT = int(os.getenv("PORT", "3000"))

# ── Growth model (simplified constant-rate compounding) ───────
BITCOIN_GROWTH_RATE = 0.5    # 50% per year
GOLD_GROWTH_RATE    = 0.05   # 5% per year

SECONDS_PER_YEAR  = 31_536_000   # 365 days
SECONDS_PER_MONTH = SECONDS_PER_YEAR / 12
SECONDS_PER_DAY   = 86_400
