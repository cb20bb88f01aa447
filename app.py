import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crossover_engine import __version__, config
from crossover_engine.api import get_scrape_response
from crossover_engine.cache import SnapshotCache
from crossover_engine.orchestrator import FallbackPolicy, Poller, build_collector

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
log = logging.getLogger("cw.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # /scrape reports failures; the background poller falls back to cache
    app.state.scrape_collector = build_collector(
        config.SERVER_FETCH_STRATEGY, policy=FallbackPolicy.NULL, cache=SnapshotCache(),
    )
    app.state.poller = Poller(build_collector(
        config.SERVER_FETCH_STRATEGY, policy=FallbackPolicy.CACHE, cache=SnapshotCache(),
    ))
    if config.POLL_ON_STARTUP:
        app.state.poller.start()
    log.info(f"Scrape strategy: {config.SERVER_FETCH_STRATEGY}")
    yield
    app.state.poller.stop()


app = FastAPI(
    title="Crossover Watch",
    description="Gold vs bitcoin market caps and a countdown to the crossover.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)


def get_scrape_collector(request: Request):
    collector = getattr(request.app.state, "scrape_collector", None)
    if collector is None:
        raise HTTPException(503, "Scraper not initialised")
    return collector


def get_poller(request: Request) -> Poller:
    poller = getattr(request.app.state, "poller", None)
    if poller is None:
        raise HTTPException(503, "Poller not initialised")
    return poller


@app.get("/")
async def root():
    return {"status": "ok", "docs": "/docs", "api": "/scrape"}


@app.get("/health")
async def health():
    return {
        "status":    "healthy",
        "strategy":  config.SERVER_FETCH_STRATEGY,
        "timestamp": int(time.time()),
    }


@app.get("/scrape", tags=["Market caps"])
async def scrape(collector=Depends(get_scrape_collector)):
    status, body = await get_scrape_response(collector)
    return JSONResponse(body, status_code=status)


@app.get("/api/status", tags=["Countdown"])
async def poller_status(poller: Poller = Depends(get_poller)):
    return poller.status()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=config.PORT, reload=False, log_level="info")
