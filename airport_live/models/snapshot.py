"""Derived live-operations values and the LiveSnapshot aggregate."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from airport_live.models.airport import Runway, Stand
from airport_live.models.traffic import TrackedController, TrackedFlight
from airport_live.weather.models import ParsedMetar, TafPeriod


@dataclass(frozen=True)
class StandOccupancy:
    """Occupancy of one stand; occupant is the nearest flight within threshold."""

    stand: Stand
    occupied: bool = False
    occupant: Optional[TrackedFlight] = None
    distance_m: Optional[float] = None

    def to_dict(self) -> dict:
        data = self.stand.to_dict()
        data['occupied'] = self.occupied
        data['occupant'] = (
            {'callsign': self.occupant.callsign, 'aircraft': self.occupant.aircraft_type}
            if self.occupant else None
        )
        data['distance_m'] = round(self.distance_m, 1) if self.distance_m is not None else None
        return data


@dataclass(frozen=True)
class OccupancyResult:
    """
    Stand occupancy for an airport.

    available is False when no flight position could be resolved: the
    stands are then reported free because nothing could be checked, not
    because they were confirmed empty.
    """

    stands: Tuple[StandOccupancy, ...] = ()
    available: bool = False

    @property
    def occupied(self) -> Tuple[StandOccupancy, ...]:
        return tuple(s for s in self.stands if s.occupied)


@dataclass(frozen=True)
class RunwayAdvisory:
    """Wind figures for one runway. Negative headwind is a tailwind."""

    runway: Runway
    heading_deg: Optional[float] = None
    headwind_kt: Optional[float] = None
    crosswind_kt: Optional[float] = None
    is_favored: bool = False

    def to_dict(self) -> dict:
        return {
            'id': self.runway.id,
            'heading': self.heading_deg,
            'headwind': round(self.headwind_kt, 1) if self.headwind_kt is not None else None,
            'crosswind': round(self.crosswind_kt, 1) if self.crosswind_kt is not None else None,
            'favored': self.is_favored,
        }


@dataclass(frozen=True)
class OnlineController:
    """A controller considered online for the airport."""

    controller: TrackedController
    distance_m: Optional[float] = None
    matched_by_callsign: bool = False

    def to_dict(self) -> dict:
        return {
            'callsign': self.controller.callsign,
            'frequency': self.controller.frequency,
            'distance_m': round(self.distance_m, 1) if self.distance_m is not None else None,
        }


@dataclass(frozen=True)
class TrafficEntry:
    """A flight with its display phase label."""

    flight: TrackedFlight
    phase: str

    def to_dict(self) -> dict:
        return {
            'callsign': self.flight.callsign,
            'aircraft': self.flight.aircraft_type,
            'state': self.phase,
            'dep': self.flight.departure_icao,
            'arr': self.flight.arrival_icao,
            'lat': self.flight.latitude,
            'lon': self.flight.longitude,
        }


@dataclass(frozen=True)
class LiveSnapshot:
    """
    Operational picture of one airport for one poll.

    Each facet is computed independently: a missing feed leaves its own
    facet empty/unavailable and nothing else.

    Attributes:
        icao: Airport ICAO code
        metar_raw: METAR as fetched (None when unavailable)
        taf_raw: TAF as fetched (None when unavailable)
        metar: Decoded METAR
        taf: Decoded TAF periods, in order
        stands: Stand occupancy
        occupancy_available: False when occupancy could not be checked
        runways: Runway advisories
        atc: Controllers online for the airport, nearest first
        inbound: Flights arriving at the airport
        outbound: Flights departing the airport
        has_traffic_data: False when the traffic feed was unavailable or empty
    """

    icao: str
    metar_raw: Optional[str] = None
    taf_raw: Optional[str] = None
    metar: ParsedMetar = field(default_factory=ParsedMetar)
    taf: Tuple[TafPeriod, ...] = ()
    stands: Tuple[StandOccupancy, ...] = ()
    occupancy_available: bool = False
    runways: Tuple[RunwayAdvisory, ...] = ()
    atc: Tuple[OnlineController, ...] = ()
    inbound: Tuple[TrafficEntry, ...] = ()
    outbound: Tuple[TrafficEntry, ...] = ()
    has_traffic_data: bool = False

    @property
    def favored_runway(self) -> Optional[RunwayAdvisory]:
        for advisory in self.runways:
            if advisory.is_favored:
                return advisory
        return None

    def to_dict(self) -> dict:
        """Poll endpoint payload."""
        favored = self.favored_runway
        return {
            'icao': self.icao,
            'metar': self.metar_raw,
            'taf': self.taf_raw,
            'stands': [s.to_dict() for s in self.stands],
            'inbound': [t.to_dict() for t in self.inbound],
            'outbound': [t.to_dict() for t in self.outbound],
            'atc': [c.to_dict() for c in self.atc],
            'decoded_metar': self.metar.to_dict(),
            'taf_periods': [p.to_dict() for p in self.taf],
            'runways': [r.to_dict() for r in self.runways],
            'favored_runway': favored.runway.id if favored else None,
            'has_traffic_data': self.has_traffic_data,
            'occupancy_available': self.occupancy_available,
        }
