"""
Candidate field paths for live-network records.

Each logical field maps to an ordered tuple of key paths; the normalizer
takes the first path that resolves to a usable value. The order is part of
the contract: newer API shapes first, legacy shapes last.
"""

from typing import Tuple

FieldPath = Tuple[str, ...]

# Wrappers a list may arrive in ({"data": [...]}, ...)
LIST_WRAPPER_KEYS = ('data', 'result', 'items')

# Whazzup bundle layout
PILOT_LIST_PATHS: Tuple[FieldPath, ...] = (
    ('clients', 'pilots'),
    ('pilots',),
)

CONTROLLER_LIST_PATHS: Tuple[FieldPath, ...] = (
    ('clients', 'atcs'),
    ('clients', 'atc'),
    ('clients', 'controllers'),
    ('clients', 'controlers'),
    ('atcs',),
    ('atc',),
    ('controllers',),
    ('controlers',),
)

# Flights
FLIGHT_CALLSIGN: Tuple[FieldPath, ...] = (
    ('callsign',),
    ('callSign',),
    ('flightPlan', 'callsign'),
)

FLIGHT_LATITUDE: Tuple[FieldPath, ...] = (
    ('lastTrack', 'latitude'),
    ('lastTrack', 'lat'),
    ('location', 'latitude'),
    ('location', 'lat'),
    ('position', 'latitude'),
    ('position', 'lat'),
    ('latitude',),
    ('lat',),
)

FLIGHT_LONGITUDE: Tuple[FieldPath, ...] = (
    ('lastTrack', 'longitude'),
    ('lastTrack', 'lon'),
    ('location', 'longitude'),
    ('location', 'lon'),
    ('position', 'longitude'),
    ('position', 'lon'),
    ('longitude',),
    ('lon',),
    ('lng',),
)

FLIGHT_DEPARTURE: Tuple[FieldPath, ...] = (
    ('flightPlan', 'departureId'),
    ('flight_plan', 'departureId'),
    ('flight_plan', 'departure'),
    ('departure',),
    ('departureId',),
    ('dep',),
    ('origin',),
    ('from',),
)

FLIGHT_ARRIVAL: Tuple[FieldPath, ...] = (
    ('flightPlan', 'arrivalId'),
    ('flight_plan', 'arrivalId'),
    ('flight_plan', 'arrival'),
    ('arrival',),
    ('arrivalId',),
    ('arr',),
    ('destination',),
    ('dest',),
    ('to',),
)

FLIGHT_GROUND_SPEED: Tuple[FieldPath, ...] = (
    ('lastTrack', 'groundSpeed'),
    ('groundSpeed',),
    ('ground_speed',),
    ('gs',),
    ('speed',),
    ('velocity',),
)

FLIGHT_ALTITUDE: Tuple[FieldPath, ...] = (
    ('lastTrack', 'altitude'),
    ('altitude',),
    ('alt',),
)

FLIGHT_AIRCRAFT: Tuple[FieldPath, ...] = (
    ('flightPlan', 'aircraftId'),
    ('flightPlan', 'aircraft', 'icaoCode'),
    ('flight_plan', 'aircraftId'),
    ('flight_plan', 'aircraft_short'),
    ('aircraftType',),
    ('aircraft',),
)

FLIGHT_ON_GROUND: Tuple[FieldPath, ...] = (
    ('lastTrack', 'onGround'),
    ('onGround',),
    ('on_ground',),
)

FLIGHT_STATE: Tuple[FieldPath, ...] = (
    ('state',),
    ('status',),
    ('phase',),
    ('flightPhase',),
    ('lastTrack', 'state'),
    ('lastTrack', 'phase'),
    ('lastTrack', 'groundState'),
)

# Keys of an object-shaped airport reference ({"icao": "LPPT", ...})
ICAO_OBJECT_KEYS = ('icao', 'id', 'code', 'airport', 'station')

# Controllers
CONTROLLER_CALLSIGN: Tuple[FieldPath, ...] = (
    ('callsign',),
    ('callSign',),
    ('station',),
    ('atcSession', 'callsign'),
)

CONTROLLER_LATITUDE: Tuple[FieldPath, ...] = (
    ('lastTrack', 'latitude'),
    ('location', 'latitude'),
    ('location', 'lat'),
    ('position', 'latitude'),
    ('position', 'lat'),
    ('latitude',),
    ('lat',),
)

CONTROLLER_LONGITUDE: Tuple[FieldPath, ...] = (
    ('lastTrack', 'longitude'),
    ('location', 'longitude'),
    ('location', 'lon'),
    ('position', 'longitude'),
    ('position', 'lon'),
    ('longitude',),
    ('lon',),
    ('lng',),
)

CONTROLLER_FREQUENCY: Tuple[FieldPath, ...] = (
    ('atcSession', 'frequency'),
    ('frequency',),
    ('freq',),
)
