"""
Pydantic models for API responses built from the live snapshot values.
"""

from typing import List, Optional

from pydantic import BaseModel

from airport_live.models.snapshot import LiveSnapshot
from airport_live.weather.analysis import WeatherSeverity


class OccupantResponse(BaseModel):
    callsign: str
    aircraft: Optional[str] = None


class StandResponse(BaseModel):
    id: str
    name: str
    lat: float
    lon: float
    occupied: bool
    occupant: Optional[OccupantResponse] = None
    distance_m: Optional[float] = None


class TrafficResponse(BaseModel):
    callsign: str
    aircraft: Optional[str] = None
    state: str
    dep: Optional[str] = None
    arr: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None


class ControllerResponse(BaseModel):
    callsign: str
    frequency: Optional[float] = None
    distance_m: Optional[float] = None


class CloudResponse(BaseModel):
    type: str
    height: int
    convective: Optional[str] = None


class DecodedMetarResponse(BaseModel):
    raw: Optional[str] = None
    wind_direction: Optional[int] = None
    wind_speed: Optional[int] = None
    wind_gust: Optional[int] = None
    visibility: Optional[str] = None
    visibility_meters: Optional[float] = None
    temperature: Optional[int] = None
    dewpoint: Optional[int] = None
    qnh: Optional[int] = None
    altimeter: Optional[float] = None
    clouds: List[CloudResponse] = []
    weather: List[str] = []
    weather_codes: List[str] = []


class TafPeriodResponse(BaseModel):
    label: str
    wind_direction: Optional[int] = None
    wind_speed: Optional[int] = None
    wind_gust: Optional[int] = None
    visibility: Optional[str] = None
    visibility_meters: Optional[float] = None
    clouds: List[CloudResponse] = []
    weather: List[str] = []


class RunwayResponse(BaseModel):
    id: str
    heading: Optional[float] = None
    headwind: Optional[float] = None
    crosswind: Optional[float] = None
    favored: bool


class LiveAirportResponse(BaseModel):
    """Pydantic model for the live poll endpoint."""

    icao: str
    metar: Optional[str] = None
    taf: Optional[str] = None
    stands: List[StandResponse]
    inbound: List[TrafficResponse]
    outbound: List[TrafficResponse]
    atc: List[ControllerResponse]
    decoded_metar: DecodedMetarResponse
    taf_periods: List[TafPeriodResponse]
    runways: List[RunwayResponse]
    favored_runway: Optional[str] = None
    has_traffic_data: bool
    occupancy_available: bool

    @classmethod
    def from_snapshot(cls, snapshot: LiveSnapshot):
        """Create LiveAirportResponse from a LiveSnapshot."""
        return cls(**snapshot.to_dict())


class WeatherSeverityResponse(BaseModel):
    icao: str
    name: Optional[str] = None
    metar: str
    wind_kts: int
    visibility_meters: Optional[float] = None
    rain_score: int
    rain_label: Optional[str] = None
    max_crosswind: Optional[int] = None

    @classmethod
    def from_severity(cls, severity: WeatherSeverity, max_crosswind: Optional[int] = None):
        return cls(max_crosswind=max_crosswind, **severity.to_dict())


class WorstWeatherResponse(BaseModel):
    worst: Optional[WeatherSeverityResponse] = None
    ranked: List[WeatherSeverityResponse]
