"""Controllers online for an airport: callsign match or proximity."""

from typing import List, Optional, Sequence, Tuple

from airport_live.geo import centroid, haversine_meters
from airport_live.models.airport import AirportModel
from airport_live.models.snapshot import OnlineController
from airport_live.models.traffic import TrackedController

# 10 nautical miles. Covers tower, ground, delivery and approach
# positions logged on from the field without reaching neighbouring airports.
ATC_PROXIMITY_RADIUS_M = 18520.0


def airport_center(airport: AirportModel) -> Optional[Tuple[float, float]]:
    """Mean of the stand coordinates, else the airport reference point."""
    if airport.stands:
        return centroid((s.latitude, s.longitude) for s in airport.stands)
    if airport.has_reference_point:
        return airport.latitude, airport.longitude
    return None


def match_controllers(
    icao: str,
    controllers: Sequence[TrackedController],
    center: Optional[Tuple[float, float]],
    radius_m: float = ATC_PROXIMITY_RADIUS_M,
) -> List[OnlineController]:
    """
    Controllers online for an airport.

    A controller matches when its callsign contains the ICAO code, or when
    it has a position within radius_m of the airport center.

    Returns:
        Matches sorted by distance, callsign-only matches without a
        position last
    """
    icao = icao.upper()
    matched = []
    for controller in controllers:
        by_callsign = icao in controller.callsign.upper()
        distance = None
        if controller.has_position and center is not None:
            distance = haversine_meters(center[0], center[1], controller.latitude, controller.longitude)
        in_range = distance is not None and distance <= radius_m
        if by_callsign or in_range:
            matched.append(OnlineController(controller=controller, distance_m=distance, matched_by_callsign=by_callsign))

    return sorted(matched, key=lambda c: c.distance_m if c.distance_m is not None else float('inf'))
