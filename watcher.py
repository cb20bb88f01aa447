"""
Crossover Watch: Console Watcher
─────────────────────────────────
Polls the market-cap page and logs the gold / bitcoin caps and the
countdown every cycle, until bitcoin overtakes gold or Ctrl-C.

  python watcher.py                      # direct fetch, every 60s
  python watcher.py --strategy render    # headless browser
  python watcher.py --strategy api       # read a running app.py's /scrape
  python watcher.py --once --policy null
"""

import argparse
import asyncio
import logging

from crossover_engine import config
from crossover_engine.orchestrator import Poller, build_collector

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
log = logging.getLogger("cw.watcher")


async def watch(strategy: str, policy: str, interval: int, once: bool):
    poller = Poller(build_collector(strategy, policy=policy), interval_s=interval)
    if once:
        await poller.run_cycle()
        return poller

    poller.start()
    try:
        await poller.finished.wait()
    finally:
        poller.stop()
    return poller


def main(argv=None):
    parser = argparse.ArgumentParser(description="Gold vs bitcoin crossover watcher")
    parser.add_argument("--strategy", choices=["direct", "proxy", "render", "api"],
                        default=config.FETCH_STRATEGY)
    parser.add_argument("--policy", choices=["cache", "null"], default=config.FALLBACK_POLICY)
    parser.add_argument("--interval", type=int, default=config.POLL_INTERVAL_S,
                        help="seconds between polls")
    parser.add_argument("--once", action="store_true", help="run a single cycle and exit")
    args = parser.parse_args(argv)

    if args.interval <= 0:
        parser.error("--interval must be positive")

    try:
        asyncio.run(watch(args.strategy, args.policy, args.interval, args.once))
    except KeyboardInterrupt:
        log.info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
