"""
FastAPI application serving live airport snapshots.

Run with:
    uvicorn airport_live.web.main:app
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from airport_live import __version__
from airport_live.sources.avwx import AvWxSource
from airport_live.sources.ivao import IvaoClient
from airport_live.storage.base import AirportStore
from airport_live.storage.json_store import JsonAirportStore
from airport_live.storage.sqlite_store import SQLiteAirportStore
from airport_live.web import config
from airport_live.web.api import live

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO), format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

# client IP -> (window start, requests in window)
request_counts = {}


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def check_rate_limit(client_ip: str) -> bool:
    """Fixed-window rate limit per client IP."""
    global request_counts
    now = time.time()
    request_counts = {
        ip: window for ip, window in request_counts.items()
        if now - window[0] < config.RATE_LIMIT_WINDOW
    }

    window_start, seen = request_counts.get(client_ip, (now, 0))
    if seen >= config.RATE_LIMIT_MAX_REQUESTS:
        return False
    request_counts[client_ip] = (window_start, seen + 1)
    return True


def open_store() -> AirportStore:
    """JSON document when AIRPORTS_JSON is set, else the SQLite database."""
    if config.AIRPORTS_JSON:
        return JsonAirportStore(config.AIRPORTS_JSON)
    return SQLiteAirportStore(config.AIRPORTS_DB)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the airport store and wire the live feed sources."""
    logger.info("Starting up live airport service...")

    try:
        store = open_store()
        logger.info(f"Airport store ready with {len(store.list_icaos())} airports")
    except Exception as e:
        logger.error(f"Failed to open airport store: {e}")
        raise

    live.set_store(store)
    live.set_sources(
        AvWxSource(base_url=config.AVIATION_WEATHER_BASE),
        IvaoClient(
            base_url=config.IVAO_API_BASE,
            api_key=config.IVAO_API_KEY,
            client_id=config.IVAO_CLIENT_ID,
            client_secret=config.IVAO_CLIENT_SECRET,
            scope=config.IVAO_OAUTH_SCOPE,
        ),
        timeout=config.FEED_TIMEOUT_SECONDS,
    )
    logger.info("Live feeds: IVAO %s, weather %s", config.IVAO_API_BASE, config.AVIATION_WEATHER_BASE)

    yield

    logger.info("Shutting down live airport service...")


app = FastAPI(
    title="Live Airport Operations",
    description="Live stand occupancy, runway advisory, traffic and weather for an airport",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(config.SECURITY_HEADERS)
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %d in %.3fs (%s)",
        request.method, request.url.path, response.status_code,
        time.perf_counter() - started, _client_ip(request),
    )
    return response


@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    client_ip = _client_ip(request)
    if check_rate_limit(client_ip):
        return await call_next(request)

    logger.warning("Rate limit hit by %s on %s", client_ip, request.url.path)
    return JSONResponse(
        status_code=429,
        content={"detail": f"At most {config.RATE_LIMIT_MAX_REQUESTS} requests per minute"},
    )


app.add_middleware(TrustedHostMiddleware, allowed_hosts=config.ALLOWED_HOSTS)

if config.FORCE_HTTPS:
    app.add_middleware(HTTPSRedirectMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(live.router, prefix="/airports", tags=["live"])


@app.get("/health")
async def health_check():
    """Liveness probe."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def run(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    uvicorn.run("airport_live.web.main:app", host=host, port=port, reload=reload, log_level="info")


if __name__ == "__main__":
    run(reload=True)
