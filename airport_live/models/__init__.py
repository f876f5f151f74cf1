"""
Data models for the airport_live library.

Static airport data (AirportModel and its stands, runways and frequencies),
the canonical live-network records, and the derived values that make up a
LiveSnapshot.
"""

from .airport import AirportModel, AtcFrequency, Runway, Stand
from .traffic import TrackedController, TrackedFlight
from .snapshot import (
    LiveSnapshot,
    OccupancyResult,
    OnlineController,
    RunwayAdvisory,
    StandOccupancy,
    TrafficEntry,
)

__all__ = [
    # Static airport data
    'AirportModel',
    'AtcFrequency',
    'Runway',
    'Stand',
    # Live network records
    'TrackedController',
    'TrackedFlight',
    # Derived values
    'LiveSnapshot',
    'OccupancyResult',
    'OnlineController',
    'RunwayAdvisory',
    'StandOccupancy',
    'TrafficEntry',
]
