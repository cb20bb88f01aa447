from .collector import FallbackPolicy, MarketCapCollector, ScrapeApiCollector, build_collector
from .poller import Poller, log_display

__all__ = [
    "FallbackPolicy", "MarketCapCollector", "ScrapeApiCollector", "build_collector",
    "Poller", "log_display",
]
