"""
Crossover Watch: Display Formatter
───────────────────────────────────
Strings for the three display slots: gold cap, bitcoin cap, countdown.
"""

from typing import Optional

from crossover_engine.models import CrossoverDuration, DisplayState, MarketSnapshot, is_missing
from crossover_engine.projector import project

ERROR_TEXT       = "Error"
FETCH_ERROR_TEXT = "Error fetching data"
CALCULATING_TEXT = "Calculating..."
OVERTAKEN_TEXT   = "Bitcoin has overtaken Gold!"
STALE_SUFFIX     = " (cached)"


def format_usd(value: Optional[float]) -> str:
    if is_missing(value):
        return ERROR_TEXT
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_countdown(duration: Optional[CrossoverDuration]) -> str:
    if duration is None:
        return CALCULATING_TEXT
    if duration.is_zero:
        return OVERTAKEN_TEXT
    d = duration
    return f"{d.years}y {d.months}m {d.days}d {d.hours}h {d.minutes}m {d.seconds}s"


def render_snapshot(snapshot: MarketSnapshot) -> DisplayState:
    """
    Full display state for one cycle.

    A failed fetch with nothing to show gives "Error fetching data" in
    both slots. A single missing cap renders "Error" for that slot and
    for the countdown, since a projection from one side is meaningless.
    Cached values carry a suffix so they are never mistaken for live ones.
    """
    if snapshot.error and is_missing(snapshot.gold_cap) and is_missing(snapshot.bitcoin_cap):
        return DisplayState(FETCH_ERROR_TEXT, FETCH_ERROR_TEXT, ERROR_TEXT)

    gold = format_usd(snapshot.gold_cap)
    bitcoin = format_usd(snapshot.bitcoin_cap)
    if snapshot.is_stale:
        if gold != ERROR_TEXT:
            gold += STALE_SUFFIX
        if bitcoin != ERROR_TEXT:
            bitcoin += STALE_SUFFIX

    if not snapshot.is_complete:
        countdown = ERROR_TEXT
    else:
        countdown = format_countdown(project(snapshot.gold_cap, snapshot.bitcoin_cap))

    return DisplayState(gold, bitcoin, countdown, stale=snapshot.is_stale)
