"""Canonical live-network records produced by the feed normalizer."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TrackedFlight:
    """
    A pilot connected to the live network, one poll's worth.

    Position fields are None when no upstream candidate resolved; the record
    is never given a fabricated coordinate.
    """

    callsign: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    ground_speed_kt: Optional[float] = None
    altitude_ft: Optional[float] = None
    departure_icao: Optional[str] = None
    arrival_icao: Optional[str] = None
    aircraft_type: Optional[str] = None
    explicit_state: Optional[str] = None
    on_ground: Optional[bool] = None

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        return {
            'callsign': self.callsign,
            'lat': self.latitude,
            'lon': self.longitude,
            'ground_speed': self.ground_speed_kt,
            'altitude': self.altitude_ft,
            'dep': self.departure_icao,
            'arr': self.arrival_icao,
            'aircraft': self.aircraft_type,
            'state': self.explicit_state,
            'on_ground': self.on_ground,
        }


@dataclass(frozen=True)
class TrackedController:
    """An ATC client connected to the live network."""

    callsign: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    frequency: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        return {
            'callsign': self.callsign,
            'lat': self.latitude,
            'lon': self.longitude,
            'frequency': self.frequency,
        }
