"""
Crossover Watch
────────────────
Scrapes gold and bitcoin market caps and counts down to the day
bitcoin's cap overtakes gold's, under fixed growth assumptions.

    from crossover_engine.orchestrator import build_collector, Poller
    poller = Poller(build_collector("direct"))
    poller.start()
"""

__version__ = "1.0.0"
