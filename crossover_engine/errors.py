"""
Crossover Watch: Errors
────────────────────────
Failures a fetcher can raise. The collector catches MarketDataError
and degrades to nulls or cached values, so none of these reach the
display.

Unparseable cap text is not an exception: the parser returns NaN.
"""


class MarketDataError(Exception):
    """Base class for anything that stops a cycle from reading live caps."""


class TransportError(MarketDataError):
    """Network failure, timeout, or a non-success HTTP status."""


class StructureError(MarketDataError):
    """The page loaded but the expected table never appeared."""
