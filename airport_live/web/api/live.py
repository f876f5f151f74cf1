import dataclasses
import logging
import re
from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query, Request

from airport_live.live.runways import runway_heading
from airport_live.live.snapshot import build_live_snapshot
from airport_live.sources.avwx import AvWxSource
from airport_live.sources.feeds import FEED_TIMEOUT_SECONDS, fetch_live_feeds, fetch_metars
from airport_live.sources.ivao import IvaoClient
from airport_live.storage.base import AirportStore
from airport_live.weather.analysis import WeatherAnalyzer
from airport_live.weather.parser import WeatherParser
from airport_live.web.config import FEATURED_AIRPORTS, ICAO_PATTERN, MAX_WORST_WEATHER_AIRPORTS
from .models import LiveAirportResponse, WeatherSeverityResponse, WorstWeatherResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Global references, set at startup
store: Optional[AirportStore] = None
avwx: Optional[AvWxSource] = None
ivao: Optional[IvaoClient] = None
feed_timeout: float = FEED_TIMEOUT_SECONDS

_ICAO_RE = re.compile(ICAO_PATTERN)


def set_store(s: Optional[AirportStore]):
    """Set the global airport store reference."""
    global store
    store = s


def set_sources(avwx_source: Optional[AvWxSource], ivao_client: Optional[IvaoClient], timeout: float = FEED_TIMEOUT_SECONDS):
    """Set the live feed sources used by every poll."""
    global avwx, ivao, feed_timeout
    avwx = avwx_source
    ivao = ivao_client
    feed_timeout = timeout


def _validated_icao(icao: str) -> str:
    if not _ICAO_RE.match(icao):
        raise HTTPException(status_code=400, detail=f"Invalid ICAO code: {icao}")
    return icao.upper()


@router.get("/weather/worst", response_model=WorstWeatherResponse)
def get_worst_weather(
    request: Request,
    icaos: Optional[str] = Query(None, description="Comma separated ICAO codes, defaults to the featured airports", max_length=200),
):
    """Rank airports by current weather severity, worst first."""
    if not store:
        raise HTTPException(status_code=500, detail="Store not loaded")

    codes = [c.strip() for c in icaos.split(",") if c.strip()] if icaos else list(FEATURED_AIRPORTS)
    if not codes:
        raise HTTPException(status_code=400, detail="No airports requested")
    if len(codes) > MAX_WORST_WEATHER_AIRPORTS:
        raise HTTPException(status_code=400, detail=f"At most {MAX_WORST_WEATHER_AIRPORTS} airports")
    codes = [_validated_icao(c) for c in codes]

    ranked = []
    for severity in WeatherAnalyzer.rank_worst_weather(fetch_metars(codes, avwx, ivao, feed_timeout)):
        airport = store.get_airport(severity.icao)
        crosswind = None
        if airport:
            severity = dataclasses.replace(severity, name=airport.name or None)
            headings = [h for h in (runway_heading(r) for r in airport.runways) if h is not None]
            crosswind = WeatherAnalyzer.max_crosswind(WeatherParser.parse_metar(severity.metar), headings)
        ranked.append(WeatherSeverityResponse.from_severity(severity, crosswind))

    return WorstWeatherResponse(worst=ranked[0] if ranked else None, ranked=ranked)


@router.get("/{icao}/live", response_model=LiveAirportResponse)
def get_airport_live(
    request: Request,
    icao: str = Path(..., description="ICAO airport code"),
):
    """Live operational picture of an airport. Feed failures degrade, never error."""
    code = _validated_icao(icao)
    if not store:
        raise HTTPException(status_code=500, detail="Store not loaded")

    airport = store.get_airport(code)
    if not airport:
        raise HTTPException(status_code=404, detail=f"Airport {code} not found")

    feeds = fetch_live_feeds(code, avwx, ivao, feed_timeout)
    snapshot = build_live_snapshot(airport, feeds)
    return LiveAirportResponse.from_snapshot(snapshot)
