"""
Traffic classification.

The phase label is a display heuristic, not a statement about the actual
flight phase: an explicit state from the feed wins, otherwise the label is
guessed from the on-ground flag and ground speed.
"""

from typing import List, Sequence, Tuple

from airport_live.models.snapshot import TrafficEntry
from airport_live.models.traffic import TrackedFlight

TAXI_SPEED_THRESHOLD_KT = 10

PHASE_TAXI = "Taxi"
PHASE_ON_STAND = "On Stand"
PHASE_EN_ROUTE = "En Route"


def flight_phase(flight: TrackedFlight) -> str:
    """Approximate phase label for a flight."""
    if flight.explicit_state:
        return flight.explicit_state
    if flight.on_ground:
        if flight.ground_speed_kt is not None and flight.ground_speed_kt > TAXI_SPEED_THRESHOLD_KT:
            return PHASE_TAXI
        return PHASE_ON_STAND
    return PHASE_EN_ROUTE


def classify(flight: TrackedFlight) -> TrafficEntry:
    return TrafficEntry(flight=flight, phase=flight_phase(flight))


def split_traffic(
    icao: str,
    flights: Sequence[TrackedFlight],
) -> Tuple[List[TrafficEntry], List[TrafficEntry]]:
    """
    Inbound and outbound traffic for an airport, in feed order.

    Returns:
        (inbound, outbound)
    """
    icao = icao.upper()
    inbound = [classify(f) for f in flights if f.arrival_icao == icao]
    outbound = [classify(f) for f in flights if f.departure_icao == icao]
    return inbound, outbound
