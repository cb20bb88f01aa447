"""
Crossover Watch: Market-Cap Parser
───────────────────────────────────
Turns the free-text cap column into USD.

    "$21.857 T"  ->  21_857_000_000_000
    "$900 B"     ->     900_000_000_000
    "$512 M"     ->                 512   (M is stripped, not scaled)

The M case is a known quirk of the source data contract and is kept
as-is; tests pin it so any change is deliberate.
"""

import re
from typing import Optional

_NOISE   = re.compile(r"[$,]")
_UNITS   = re.compile(r"[TBM]")
_NUMERAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

MULTIPLIERS = {
    "T": 1e12,
    "B": 1e9,
}


def _leading_float(text: str) -> float:
    """Parse the numeric prefix of text, NaN when there is none."""
    m = _NUMERAL.match(text.lstrip())
    if not m:
        return float("nan")
    return float(m.group(0))


def unit_multiplier(clean: str) -> float:
    if "T" in clean:
        return MULTIPLIERS["T"]
    if "B" in clean:
        return MULTIPLIERS["B"]
    return 1.0


def parse_cap(text: Optional[str]) -> Optional[float]:
    """
    Parse a cap string like "$21.857 T".

    Returns None for None/empty input and NaN when the numeral cannot be
    read. Callers must run the result through is_missing() before using it.
    """
    if not text:
        return None
    clean = _NOISE.sub("", text).strip()
    multiplier = unit_multiplier(clean)
    return _leading_float(_UNITS.sub("", clean)) * multiplier
