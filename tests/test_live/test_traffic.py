"""Tests for flight phase labels and inbound/outbound split."""

import pytest

from airport_live.live.traffic import flight_phase, split_traffic
from airport_live.models.traffic import TrackedFlight


class TestFlightPhase:

    def test_explicit_state_wins(self):
        assert flight_phase(TrackedFlight(callsign="A", explicit_state="Boarding", on_ground=True)) == "Boarding"

    @pytest.mark.parametrize("ground_speed,expected", [
        (25, "Taxi"),
        (11, "Taxi"),
        (10, "On Stand"),
        (0, "On Stand"),
        (None, "On Stand"),
    ])
    def test_on_ground(self, ground_speed, expected):
        flight = TrackedFlight(callsign="A", on_ground=True, ground_speed_kt=ground_speed)
        assert flight_phase(flight) == expected

    def test_airborne(self):
        assert flight_phase(TrackedFlight(callsign="A", on_ground=False, ground_speed_kt=450)) == "En Route"

    def test_unknown_ground_state(self):
        assert flight_phase(TrackedFlight(callsign="A", ground_speed_kt=5)) == "En Route"


class TestSplitTraffic:

    def test_split(self):
        flights = [
            TrackedFlight(callsign="IN1", arrival_icao="LPPT", departure_icao="EGLL"),
            TrackedFlight(callsign="OUT1", departure_icao="LPPT", arrival_icao="LPPR"),
            TrackedFlight(callsign="OTHER", departure_icao="LPFR", arrival_icao="LPPR"),
            TrackedFlight(callsign="IN2", arrival_icao="LPPT"),
        ]
        inbound, outbound = split_traffic("lppt", flights)

        assert [t.flight.callsign for t in inbound] == ["IN1", "IN2"]
        assert [t.flight.callsign for t in outbound] == ["OUT1"]
        assert inbound[0].phase == "En Route"

    def test_local_flight_in_both(self):
        flights = [TrackedFlight(callsign="CIRCUIT", departure_icao="LPPT", arrival_icao="LPPT")]
        inbound, outbound = split_traffic("LPPT", flights)
        assert len(inbound) == 1 and len(outbound) == 1

    def test_empty(self):
        assert split_traffic("LPPT", []) == ([], [])
