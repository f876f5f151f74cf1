"""
Normalize live-network payloads into TrackedFlight / TrackedController.

Upstream payloads vary between producers and API versions. Every logical
field is looked up through the ordered candidate paths in
airport_live.feeds.fields; the first candidate that yields a usable value
wins. Nothing here raises on bad input: unusable values are skipped and
unusable records are dropped.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence

from airport_live.feeds import fields
from airport_live.feeds.fields import FieldPath
from airport_live.models.traffic import TrackedController, TrackedFlight

logger = logging.getLogger(__name__)


# --- Coercions: return None for anything unusable ---

def to_float(value: Any) -> Optional[float]:
    """Finite float from a number or numeric string ("38,77" accepted)."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(',', '.'))
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def to_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    return None


def to_icao(value: Any) -> Optional[str]:
    """ICAO code from a string or an object such as {"icao": "LPPT"}."""
    if isinstance(value, Mapping):
        for key in fields.ICAO_OBJECT_KEYS:
            code = to_text(value.get(key))
            if code:
                return code.upper()
        return None
    code = to_text(value)
    return code.upper() if code else None


def to_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def resolve_path(record: Any, path: FieldPath) -> Any:
    """Walk a key path through nested mappings; None if any step is missing."""
    current = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def first_match(record: Any, paths: Sequence[FieldPath], coerce: Callable[[Any], Any]) -> Any:
    """First candidate path whose value survives coercion, else None."""
    for path in paths:
        value = coerce(resolve_path(record, path))
        if value is not None:
            return value
    return None


def as_list(payload: Any) -> List[Any]:
    """
    The list carried by a payload.

    Bare lists and lists wrapped in {"data"|"result"|"items": [...]} are
    accepted; anything else is an empty list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        for key in fields.LIST_WRAPPER_KEYS:
            wrapped = payload.get(key)
            if isinstance(wrapped, list):
                return wrapped
    return []


def _bundle_list(payload: Any, paths: Sequence[FieldPath]) -> Optional[List[Any]]:
    """List found under one of the whazzup bundle paths, or None."""
    for path in paths:
        found = resolve_path(payload, path)
        if found is not None:
            return as_list(found)
    return None


class FeedNormalizer:
    """
    Canonicalize pilot and controller feeds.

    Example:
        flights = FeedNormalizer.normalize_flights(
            {"clients": {"pilots": [{"lastTrack": {"latitude": 1, "longitude": 2}}]}}
        )
        flights[0].latitude  # 1.0
    """

    @staticmethod
    def normalize_flight(record: Any) -> Optional[TrackedFlight]:
        """Canonical flight for one record, None if the record is unusable."""
        if not isinstance(record, Mapping):
            return None

        callsign = first_match(record, fields.FLIGHT_CALLSIGN, to_text)
        latitude = first_match(record, fields.FLIGHT_LATITUDE, to_float)
        longitude = first_match(record, fields.FLIGHT_LONGITUDE, to_float)
        if latitude is None or longitude is None:
            latitude = longitude = None
        if not callsign and latitude is None:
            return None

        return TrackedFlight(
            callsign=callsign.upper() if callsign else "",
            latitude=latitude,
            longitude=longitude,
            ground_speed_kt=first_match(record, fields.FLIGHT_GROUND_SPEED, to_float),
            altitude_ft=first_match(record, fields.FLIGHT_ALTITUDE, to_float),
            departure_icao=first_match(record, fields.FLIGHT_DEPARTURE, to_icao),
            arrival_icao=first_match(record, fields.FLIGHT_ARRIVAL, to_icao),
            aircraft_type=first_match(record, fields.FLIGHT_AIRCRAFT, to_text),
            explicit_state=first_match(record, fields.FLIGHT_STATE, to_text),
            on_ground=first_match(record, fields.FLIGHT_ON_GROUND, to_bool),
        )

    @staticmethod
    def normalize_controller(record: Any) -> Optional[TrackedController]:
        """Canonical controller for one record, None without a callsign."""
        if not isinstance(record, Mapping):
            return None

        callsign = first_match(record, fields.CONTROLLER_CALLSIGN, to_text)
        if not callsign:
            return None
        latitude = first_match(record, fields.CONTROLLER_LATITUDE, to_float)
        longitude = first_match(record, fields.CONTROLLER_LONGITUDE, to_float)
        if latitude is None or longitude is None:
            latitude = longitude = None

        return TrackedController(
            callsign=callsign.upper(),
            latitude=latitude,
            longitude=longitude,
            frequency=first_match(record, fields.CONTROLLER_FREQUENCY, to_float),
        )

    @classmethod
    def pilot_records(cls, payload: Any) -> List[Any]:
        """Raw pilot records from a whazzup bundle or a flights list."""
        bundled = _bundle_list(payload, fields.PILOT_LIST_PATHS)
        return bundled if bundled is not None else as_list(payload)

    @classmethod
    def controller_records(cls, payload: Any, bundle_only: bool = False) -> List[Any]:
        """
        Raw controller records from a whazzup bundle or an ATC list.

        Args:
            payload: Whazzup bundle or online ATC list
            bundle_only: Ignore bare lists (a bare whazzup list holds pilots)
        """
        records: List[Any] = []
        for path in fields.CONTROLLER_LIST_PATHS:
            found = resolve_path(payload, path)
            if found is not None:
                records.extend(as_list(found))
        if records or bundle_only:
            return records
        return as_list(payload)

    @classmethod
    def normalize_flights(cls, payload: Any) -> List[TrackedFlight]:
        """All usable flights in a payload; malformed records are dropped."""
        flights = []
        dropped = 0
        for record in cls.pilot_records(payload):
            flight = cls.normalize_flight(record)
            if flight is None:
                dropped += 1
                continue
            flights.append(flight)
        if dropped:
            logger.debug("Dropped %d malformed pilot records", dropped)
        return flights

    @classmethod
    def normalize_controllers(cls, payload: Any, bundle_only: bool = False) -> List[TrackedController]:
        """All usable controllers in a payload, first occurrence per callsign."""
        controllers = []
        seen = set()
        dropped = 0
        for record in cls.controller_records(payload, bundle_only=bundle_only):
            controller = cls.normalize_controller(record)
            if controller is None:
                dropped += 1
                continue
            if controller.callsign in seen:
                continue
            seen.add(controller.callsign)
            controllers.append(controller)
        if dropped:
            logger.debug("Dropped %d malformed controller records", dropped)
        return controllers

    @classmethod
    def select_flights(cls, whazzup: Any, flights: Any) -> List[TrackedFlight]:
        """Flights from the whazzup bundle, else from the dedicated flights feed."""
        from_bundle = cls.normalize_flights(whazzup) if whazzup is not None else []
        if from_bundle:
            return from_bundle
        return cls.normalize_flights(flights) if flights is not None else []

    @classmethod
    def select_controllers(cls, whazzup: Any, online_atc: Any) -> List[TrackedController]:
        """Controllers from the whazzup bundle, else from the online ATC feed."""
        from_bundle = cls.normalize_controllers(whazzup, bundle_only=True) if whazzup is not None else []
        if from_bundle:
            return from_bundle
        return cls.normalize_controllers(online_atc) if online_atc is not None else []
