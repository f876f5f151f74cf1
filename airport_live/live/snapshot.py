"""
Live airport snapshot orchestrator.

Combines the static airport model with one poll's worth of feeds. Each feed
is normalized once and each facet of the snapshot is computed from its own
inputs only, so a missing feed empties its own facet and nothing else.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from airport_live.feeds.normalizer import FeedNormalizer
from airport_live.live.controllers import airport_center, match_controllers
from airport_live.live.occupancy import match_stands
from airport_live.live.runways import advise_for_metar
from airport_live.live.traffic import split_traffic
from airport_live.models.airport import AirportModel
from airport_live.models.snapshot import LiveSnapshot
from airport_live.weather.parser import WeatherParser, is_unavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedBundle:
    """
    Raw feeds for one poll. Any member may be None (feed unavailable).

    Attributes:
        metar: Raw METAR text
        taf: Raw TAF text
        whazzup: Whazzup bundle (pilots and controllers)
        flights: Dedicated flights feed
        online_atc: Dedicated online ATC feed
    """

    metar: Optional[str] = None
    taf: Optional[str] = None
    whazzup: Any = None
    flights: Any = None
    online_atc: Any = None


def build_live_snapshot(airport: AirportModel, feeds: Optional[FeedBundle] = None) -> LiveSnapshot:
    """
    Build the live operational picture of an airport.

    Args:
        airport: Static airport model
        feeds: Raw feeds for this poll; None means every feed is unavailable

    Returns:
        A new LiveSnapshot

    Raises:
        TypeError: If airport is not an AirportModel
    """
    if not isinstance(airport, AirportModel):
        raise TypeError(f"airport must be an AirportModel, got {type(airport).__name__}")
    if feeds is None:
        feeds = FeedBundle()

    icao = airport.icao.upper()

    metar = WeatherParser.parse_metar(feeds.metar)
    taf = WeatherParser.parse_taf(feeds.taf)

    flights = FeedNormalizer.select_flights(feeds.whazzup, feeds.flights)
    controllers = FeedNormalizer.select_controllers(feeds.whazzup, feeds.online_atc)

    occupancy = match_stands(airport.stands, flights)
    runways = advise_for_metar(metar, airport.runways)
    atc = match_controllers(icao, controllers, airport_center(airport))
    inbound, outbound = split_traffic(icao, flights)

    logger.debug(
        "Snapshot %s: %d flights, %d controllers, %d/%d stands occupied",
        icao, len(flights), len(atc), len(occupancy.occupied), len(occupancy.stands),
    )

    return LiveSnapshot(
        icao=icao,
        metar_raw=None if is_unavailable(feeds.metar) else feeds.metar,
        taf_raw=None if is_unavailable(feeds.taf) else feeds.taf,
        metar=metar,
        taf=tuple(taf),
        stands=occupancy.stands,
        occupancy_available=occupancy.available,
        runways=tuple(runways),
        atc=tuple(atc),
        inbound=tuple(inbound),
        outbound=tuple(outbound),
        has_traffic_data=bool(flights),
    )
