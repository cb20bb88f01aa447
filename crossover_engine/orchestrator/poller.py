"""
Crossover Watch: Poll Driver
─────────────────────────────
Runs collect -> render -> display on a fixed interval.

  - first cycle fires immediately, then every POLL_INTERVAL_S
  - max_instances=1: a slow cycle delays the next tick, never overlaps it
  - once a complete snapshot shows bitcoin >= gold the job is removed
    and `finished` is set; there is nothing left to count down to

Failed cycles are not retried. The next tick is the retry.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from crossover_engine import config
from crossover_engine.formatter import render_snapshot
from crossover_engine.models import DisplayState, MarketSnapshot

log = logging.getLogger("cw.poller")

JOB_ID = "crossover_poll"

DisplaySink = Callable[[DisplayState], None]


def log_display(state: DisplayState):
    tag = " [stale]" if state.stale else ""
    log.info(f"Gold: {state.gold_text} | Bitcoin: {state.bitcoin_text} | "
             f"Countdown: {state.countdown_text}{tag}")


class Poller:

    def __init__(self, collector, display: DisplaySink = log_display,
                 interval_s: int = config.POLL_INTERVAL_S):
        self.collector  = collector
        self.display    = display
        self.interval_s = interval_s
        self.cycles     = 0
        self.last_state:    Optional[DisplayState] = None
        self.last_snapshot: Optional[MarketSnapshot] = None
        self.last_run_at:   Optional[float] = None
        self._scheduler: Optional[AsyncIOScheduler] = None
        self._finished:  Optional[asyncio.Event] = None

    @property
    def finished(self) -> asyncio.Event:
        # Created lazily so it binds to the loop that awaits it
        if self._finished is None:
            self._finished = asyncio.Event()
        return self._finished

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    async def run_cycle(self) -> DisplayState:
        """One collect -> render -> display pass. Never raises."""
        self.cycles += 1
        t0 = time.monotonic()
        try:
            snapshot = await self.collector.collect()
        except Exception as e:
            log.error(f"Cycle {self.cycles}: collector raised {e}")
            snapshot = MarketSnapshot(source="unavailable", error=str(e))

        state = render_snapshot(snapshot)
        self.last_snapshot = snapshot
        self.last_state    = state
        self.last_run_at   = time.time()
        try:
            self.display(state)
        except Exception as e:
            log.error(f"Display sink failed: {e}")

        log.debug(f"Cycle {self.cycles} done in {time.monotonic() - t0:.1f}s ({snapshot.source})")

        if snapshot.overtaken:
            log.info("Bitcoin has overtaken gold, polling stopped")
            self._remove_job()
            self.finished.set()
        return state

    def start(self):
        if self.is_running:
            log.warning("Poller already running, ignoring start call")
            return
        self.finished.clear()
        self._scheduler = AsyncIOScheduler(timezone="UTC")
        self._scheduler.add_job(
            self.run_cycle,
            IntervalTrigger(seconds=self.interval_s, timezone="UTC"),
            id                 = JOB_ID,
            name               = f"Crossover poll every {self.interval_s}s",
            next_run_time      = datetime.now(timezone.utc),
            max_instances      = 1,
            coalesce           = True,
            misfire_grace_time = self.interval_s,
            replace_existing   = True,
        )
        self._scheduler.start()
        log.info(f"Poller live: every {self.interval_s}s")

    def stop(self):
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            log.info("Poller stopped")
        self._scheduler = None

    def _remove_job(self):
        if self._scheduler is not None and self._scheduler.get_job(JOB_ID):
            self._scheduler.remove_job(JOB_ID)

    def status(self) -> dict:
        job = self._scheduler.get_job(JOB_ID) if self.is_running else None
        nxt = job.next_run_time if job else None
        return {
            "running":     self.is_running and job is not None,
            "finished":    self._finished is not None and self._finished.is_set(),
            "interval_s":  self.interval_s,
            "cycles":      self.cycles,
            "last_run_at": int(self.last_run_at) if self.last_run_at else None,
            "next_run":    nxt.isoformat() if nxt else None,
            "display":     self.last_state.to_dict() if self.last_state else None,
            "snapshot":    self.last_snapshot.to_dict() if self.last_snapshot else None,
            "source":      self.last_snapshot.source if self.last_snapshot else None,
        }
