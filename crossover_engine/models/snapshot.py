"""
Crossover Watch: Snapshot Models
─────────────────────────────────
Canonical shapes passed between the collector, projector and formatter.
MarketSnapshot.to_dict() is what /scrape returns.
"""

import math
import time
from dataclasses import dataclass, field
from typing import Optional

from crossover_engine.config import SECONDS_PER_DAY, SECONDS_PER_MONTH, SECONDS_PER_YEAR


def is_missing(value: Optional[float]) -> bool:
    """None, NaN, infinities and zero all count as "no value"."""
    if value is None:
        return True
    try:
        return not math.isfinite(value) or value == 0
    except TypeError:
        return True


@dataclass
class CapTexts:
    gold_text:    Optional[str] = None   # e.g. "$21.857 T"
    bitcoin_text: Optional[str] = None


@dataclass
class MarketSnapshot:
    gold_cap:    Optional[float] = None   # USD
    bitcoin_cap: Optional[float] = None   # USD
    source:      str = "live"             # "live" | "cache" | "unavailable"
    error:       Optional[str] = None
    fetched_at:  float = field(default_factory=time.time)

    @property
    def is_complete(self) -> bool:
        return not is_missing(self.gold_cap) and not is_missing(self.bitcoin_cap)

    @property
    def is_stale(self) -> bool:
        return self.source == "cache"

    @property
    def overtaken(self) -> bool:
        return self.is_complete and self.bitcoin_cap >= self.gold_cap

    def age_seconds(self) -> int:
        return int(time.time() - self.fetched_at)

    def to_dict(self) -> dict:
        if self.error and not self.is_complete:
            return {"error": self.error}
        return {"goldCap": _json_number(self.gold_cap), "bitcoinCap": _json_number(self.bitcoin_cap)}

    @classmethod
    def from_dict(cls, d: dict, source: str = "live") -> "MarketSnapshot":
        if d.get("error"):
            return cls(source="unavailable", error=str(d["error"]))
        return cls(
            gold_cap=_as_float(d.get("goldCap")),
            bitcoin_cap=_as_float(d.get("bitcoinCap")),
            source=source,
        )


@dataclass(frozen=True)
class CrossoverDuration:
    years:   int = 0
    months:  int = 0
    days:    int = 0
    hours:   int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def is_zero(self) -> bool:
        return not any((self.years, self.months, self.days,
                        self.hours, self.minutes, self.seconds))

    def total_seconds(self) -> float:
        return (self.years * SECONDS_PER_YEAR + self.months * SECONDS_PER_MONTH
                + self.days * SECONDS_PER_DAY + self.hours * 3600
                + self.minutes * 60 + self.seconds)


ZERO_DURATION = CrossoverDuration()


@dataclass
class DisplayState:
    gold_text:      str = "Loading..."
    bitcoin_text:   str = "Loading..."
    countdown_text: str = "Calculating..."
    stale:          bool = False

    def to_dict(self) -> dict:
        return {
            "gold":      self.gold_text,
            "bitcoin":   self.bitcoin_text,
            "countdown": self.countdown_text,
            "stale":     self.stale,
        }


def _as_float(v) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def _json_number(v: Optional[float]) -> Optional[float]:
    # NaN and infinities are not valid JSON
    if v is None or not math.isfinite(v):
        return None
    return v
