"""Static airport model: stands, runways and ATC frequencies."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Stand:
    """A parking stand with its surveyed coordinate."""

    id: str
    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'lat': self.latitude,
            'lon': self.longitude,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Stand':
        return cls(
            id=str(data.get('id', '')),
            name=str(data.get('name') or data.get('id', '')),
            latitude=float(data['lat'] if 'lat' in data else data['latitude']),
            longitude=float(data['lon'] if 'lon' in data else data['longitude']),
        )


@dataclass(frozen=True)
class Runway:
    """
    A runway direction.

    The identifier is the published designator ("09L", "27", "09/27").
    heading_deg is optional; when absent the advisor derives it from the
    identifier.
    """

    id: str
    heading_deg: Optional[float] = None
    length_m: Optional[float] = None
    holding_points: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'heading': self.heading_deg,
            'length_m': self.length_m,
            'holding_points': list(self.holding_points),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Runway':
        heading = data.get('heading', data.get('heading_deg'))
        length = data.get('length_m', data.get('length'))
        return cls(
            id=str(data.get('id', '')),
            heading_deg=float(heading) if heading is not None else None,
            length_m=float(length) if length is not None else None,
            holding_points=tuple(data.get('holding_points') or data.get('holdingPoints') or ()),
        )


@dataclass(frozen=True)
class AtcFrequency:
    """A published ATC station frequency."""

    station: str
    frequency_mhz: float

    def to_dict(self) -> dict:
        return {'station': self.station, 'frequency': self.frequency_mhz}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AtcFrequency':
        return cls(
            station=str(data.get('station', '')),
            frequency_mhz=float(data.get('frequency', data.get('frequency_mhz'))),
        )


@dataclass(frozen=True)
class AirportModel:
    """
    Read-only airport model consumed by the live engine.

    Attributes:
        icao: ICAO code, uppercase
        name: Airport name
        latitude: Reference latitude (optional)
        longitude: Reference longitude (optional)
        stands: Parking stands
        runways: Runway directions
        frequencies: Published ATC frequencies
    """

    icao: str
    name: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    stands: Tuple[Stand, ...] = field(default_factory=tuple)
    runways: Tuple[Runway, ...] = field(default_factory=tuple)
    frequencies: Tuple[AtcFrequency, ...] = field(default_factory=tuple)

    @property
    def has_reference_point(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        return {
            'icao': self.icao,
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'stands': [s.to_dict() for s in self.stands],
            'runways': [r.to_dict() for r in self.runways],
            'frequencies': [f.to_dict() for f in self.frequencies],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AirportModel':
        """Create an AirportModel from a dictionary (JSON export format)."""
        latitude = data.get('latitude', data.get('lat'))
        longitude = data.get('longitude', data.get('lon'))
        return cls(
            icao=str(data['icao']).upper(),
            name=data.get('name', '') or '',
            latitude=float(latitude) if latitude is not None else None,
            longitude=float(longitude) if longitude is not None else None,
            stands=tuple(Stand.from_dict(s) for s in data.get('stands', [])),
            runways=tuple(Runway.from_dict(r) for r in data.get('runways', [])),
            frequencies=tuple(AtcFrequency.from_dict(f) for f in data.get('frequencies', [])),
        )

    def __repr__(self) -> str:
        return f"AirportModel({self.icao}, stands={len(self.stands)}, runways={len(self.runways)})"
