"""Stand occupancy by nearest-neighbor distance thresholding."""

import logging
from typing import Sequence

from airport_live.geo import haversine_meters
from airport_live.models.airport import Stand
from airport_live.models.snapshot import OccupancyResult, StandOccupancy
from airport_live.models.traffic import TrackedFlight

logger = logging.getLogger(__name__)

# An aircraft parked on a stand reports a position within a wingspan or so
# of the stand's surveyed point. Operationally tuned; the match is
# distance-only, so an aircraft taxiing between adjacent stands can be
# assigned to either (or both).
STAND_OCCUPANCY_THRESHOLD_M = 40.0


def match_stands(
    stands: Sequence[Stand],
    flights: Sequence[TrackedFlight],
    threshold_m: float = STAND_OCCUPANCY_THRESHOLD_M,
) -> OccupancyResult:
    """
    Assign an occupancy state to every stand.

    A stand is occupied when its nearest positioned flight is strictly
    closer than threshold_m; that flight is the occupant.

    Returns:
        OccupancyResult with available=False when no flight has a position
    """
    positioned = [f for f in flights if f.has_position]
    if not positioned:
        logger.debug("No positioned flights, stand occupancy unavailable")
        return OccupancyResult(
            stands=tuple(StandOccupancy(stand=s) for s in stands),
            available=False,
        )

    results = []
    for stand in stands:
        nearest = None
        nearest_distance = float('inf')
        for flight in positioned:
            distance = haversine_meters(stand.latitude, stand.longitude, flight.latitude, flight.longitude)
            if distance < nearest_distance:
                nearest, nearest_distance = flight, distance

        if nearest is not None and nearest_distance < threshold_m:
            results.append(StandOccupancy(stand=stand, occupied=True, occupant=nearest, distance_m=nearest_distance))
        else:
            results.append(StandOccupancy(stand=stand))

    return OccupancyResult(stands=tuple(results), available=True)
