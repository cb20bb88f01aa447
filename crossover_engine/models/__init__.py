from .snapshot import (
    CapTexts, CrossoverDuration, DisplayState, MarketSnapshot, ZERO_DURATION, is_missing,
)

__all__ = [
    "CapTexts", "CrossoverDuration", "DisplayState", "MarketSnapshot",
    "ZERO_DURATION", "is_missing",
]
