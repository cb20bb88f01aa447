"""
Crossover Watch: Crossover Projector
─────────────────────────────────────
How long until bitcoin's market cap catches gold's, if each compounds
at a fixed annual rate.

    relative = BITCOIN_GROWTH_RATE - GOLD_GROWTH_RATE      (0.45)
    years    = ln(gold / bitcoin) / ln(1 + relative)

The figure is then broken down on a fixed calendar: 365-day years,
twelve equal months, 24h days. Each unit is floored and the remainder
carried to the next.

Return values:
  ZERO_DURATION  bitcoin already >= gold, or an input is missing
  None           the maths gives no positive finite crossing
"""

import math
from typing import Optional

from crossover_engine.config import (
    BITCOIN_GROWTH_RATE, GOLD_GROWTH_RATE,
    SECONDS_PER_DAY, SECONDS_PER_MONTH, SECONDS_PER_YEAR,
)
from crossover_engine.models import ZERO_DURATION, CrossoverDuration, is_missing


def crossover_years(gold_cap: float, bitcoin_cap: float,
                    fast_rate: float = BITCOIN_GROWTH_RATE,
                    slow_rate: float = GOLD_GROWTH_RATE) -> Optional[float]:
    """Raw years to crossover, or None when the log terms are undefined."""
    relative = fast_rate - slow_rate
    ratio = gold_cap / bitcoin_cap
    if ratio <= 0 or relative <= -1:
        return None
    denom = math.log(1 + relative)
    if denom == 0:
        return None
    years = math.log(ratio) / denom
    if not math.isfinite(years):
        return None
    return years


def decompose(total_seconds: float) -> CrossoverDuration:
    years = math.floor(total_seconds / SECONDS_PER_YEAR)
    rem = total_seconds % SECONDS_PER_YEAR
    months = math.floor(rem / SECONDS_PER_MONTH)
    rem %= SECONDS_PER_MONTH
    days = math.floor(rem / SECONDS_PER_DAY)
    rem %= SECONDS_PER_DAY
    hours = math.floor(rem / 3600)
    rem %= 3600
    minutes = math.floor(rem / 60)
    seconds = math.floor(rem % 60)
    return CrossoverDuration(years, months, days, hours, minutes, seconds)


def project(gold_cap: Optional[float], bitcoin_cap: Optional[float],
            fast_rate: float = BITCOIN_GROWTH_RATE,
            slow_rate: float = GOLD_GROWTH_RATE) -> Optional[CrossoverDuration]:
    if is_missing(gold_cap) or is_missing(bitcoin_cap) or bitcoin_cap >= gold_cap:
        return ZERO_DURATION

    years = crossover_years(gold_cap, bitcoin_cap, fast_rate, slow_rate)
    if years is None or years <= 0:
        return None
    return decompose(years * SECONDS_PER_YEAR)
