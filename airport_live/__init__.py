"""
Live airport operations reconciliation engine.

This package combines a static airport model (stands, runways, ATC
frequencies) with live-network feeds and raw METAR/TAF reports into one
operational picture of the airport.

The main public API includes:
- AirportModel: Static airport data consumed by the engine
- FeedBundle / build_live_snapshot: One poll's feeds in, a LiveSnapshot out
- WeatherParser: METAR and TAF decoding
- WeatherAnalyzer: Worst-weather ranking across airports
- FeedNormalizer: Canonical flights and controllers from upstream payloads
- LivePoller: Client-side poll loop for the snapshot endpoint
"""

__version__ = '0.1.0'

from airport_live.models import AirportModel, AtcFrequency, LiveSnapshot, Runway, Stand
from airport_live.feeds import FeedNormalizer
from airport_live.weather import WeatherAnalyzer, WeatherParser
from airport_live.live import FeedBundle, build_live_snapshot
from airport_live.poller import LivePoller

__all__ = [
    'AirportModel',
    'AtcFrequency',
    'FeedBundle',
    'FeedNormalizer',
    'LivePoller',
    'LiveSnapshot',
    'Runway',
    'Stand',
    'WeatherAnalyzer',
    'WeatherParser',
    'build_live_snapshot',
]
