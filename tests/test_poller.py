"""Tests for the client-side live poll loop."""

import threading
from unittest.mock import MagicMock

import requests

from airport_live.poller import LivePoller, empty_state, merge_live_payload


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")


PAYLOAD = {
    "metar": "LPPT 27010KT",
    "decoded_metar": {"wind_speed": 10},
    "taf": "TAF LPPT",
    "taf_periods": [{"label": "INITIAL"}],
    "stands": [{"id": "101", "occupied": True}],
    "inbound": [{"callsign": "RYR1"}],
    "outbound": [],
    "atc": [{"callsign": "LPPT_TWR"}],
    "runways": [{"id": "27", "favored": True}],
    "favored_runway": "27",
    "has_traffic_data": True,
    "occupancy_available": True,
}


def make_poller(*responses, **kwargs):
    session = MagicMock()
    session.get.side_effect = list(responses)
    return LivePoller("http://localhost:8000/", "lppt", session=session, **kwargs), session


class TestMergeLivePayload:

    def test_success_replaces_facets(self):
        state = merge_live_payload(empty_state(), PAYLOAD)
        assert state["metar"] == "LPPT 27010KT"
        assert state["stands"] == PAYLOAD["stands"]
        assert state["favored_runway"] == "27"

    def test_null_weather_keeps_previous(self):
        previous = merge_live_payload(empty_state(), PAYLOAD)
        state = merge_live_payload(previous, dict(PAYLOAD, metar=None, taf=None, decoded_metar=None))

        assert state["metar"] == "LPPT 27010KT"
        assert state["decoded_metar"] == {"wind_speed": 10}
        assert state["taf"] == "TAF LPPT"

    def test_non_list_facet_becomes_empty(self):
        previous = merge_live_payload(empty_state(), PAYLOAD)
        state = merge_live_payload(previous, dict(PAYLOAD, stands=None, atc="oops"))
        assert state["stands"] == []
        assert state["atc"] == []

    def test_lists_replaced_not_appended(self):
        previous = merge_live_payload(empty_state(), PAYLOAD)
        state = merge_live_payload(previous, dict(PAYLOAD, inbound=[{"callsign": "EZY2"}]))
        assert state["inbound"] == [{"callsign": "EZY2"}]

    def test_non_object_payload_ignored(self):
        previous = merge_live_payload(empty_state(), PAYLOAD)
        assert merge_live_payload(previous, ["not", "an", "object"]) is previous

    def test_previous_not_modified(self):
        previous = empty_state()
        merge_live_payload(previous, PAYLOAD)
        assert previous == empty_state()


class TestLivePoller:

    def test_url(self):
        poller, _ = make_poller()
        assert poller.url == "http://localhost:8000/airports/LPPT/live"

    def test_poll_once_success(self):
        updates = []
        poller, session = make_poller(MockResponse(PAYLOAD), on_update=updates.append)

        assert poller.poll_once()
        assert poller.state["metar"] == "LPPT 27010KT"
        assert updates[0]["atc"] == [{"callsign": "LPPT_TWR"}]
        assert session.get.call_args[0][0] == "http://localhost:8000/airports/LPPT/live"

    def test_http_error_keeps_state(self):
        poller, _ = make_poller(MockResponse(PAYLOAD), MockResponse({}, status_code=502))
        poller.poll_once()

        assert not poller.poll_once()
        assert poller.state["stands"] == PAYLOAD["stands"]

    def test_transport_error_keeps_state(self):
        poller, _ = make_poller(MockResponse(PAYLOAD), requests.exceptions.Timeout("slow"))
        poller.poll_once()

        assert not poller.poll_once()
        assert poller.state["metar"] == "LPPT 27010KT"

    def test_invalid_json_keeps_state(self):
        poller, _ = make_poller(MockResponse(ValueError("bad json")))
        assert not poller.poll_once()
        assert poller.state == empty_state()

    def test_non_object_body_is_not_an_update(self):
        updates = []
        poller, _ = make_poller(MockResponse(PAYLOAD), MockResponse(["LPPT"]), on_update=updates.append)
        poller.poll_once()

        assert not poller.poll_once()
        assert len(updates) == 1
        assert poller.state["metar"] == "LPPT 27010KT"

    def test_overlapping_poll_skipped(self):
        started = threading.Event()
        release = threading.Event()
        session = MagicMock()

        def slow_get(*args, **kwargs):
            started.set()
            release.wait(5)
            return MockResponse(PAYLOAD)

        session.get.side_effect = slow_get
        poller = LivePoller("http://localhost:8000", "LPPT", session=session)

        worker = threading.Thread(target=poller.poll_once)
        worker.start()
        started.wait(5)
        try:
            assert not poller.poll_once()
        finally:
            release.set()
            worker.join(5)

        assert session.get.call_count == 1

    def test_state_is_a_copy(self):
        poller, _ = make_poller(MockResponse(PAYLOAD))
        poller.poll_once()
        poller.state["stands"].append("mutated")
        assert poller.state["stands"] == PAYLOAD["stands"]

    def test_start_and_stop(self):
        polled = threading.Event()
        poller, _ = make_poller(MockResponse(PAYLOAD), interval=60, on_update=lambda state: polled.set())

        poller.start()
        try:
            assert polled.wait(5)
            assert poller.running
        finally:
            poller.stop(timeout=5)

        assert not poller.running
