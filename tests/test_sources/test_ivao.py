"""Tests for the IVAO API client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from airport_live.sources.ivao import IvaoClient


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")


def make_session(get=None, post=None):
    session = MagicMock()
    session.get.return_value = get if get is not None else MockResponse({})
    session.post.return_value = post if post is not None else MockResponse({})
    return session


class TestTrackerFeeds:

    def test_whazzup(self):
        session = make_session(get=MockResponse({"clients": {"pilots": []}}))
        client = IvaoClient(session=session)

        assert client.get_whazzup() == {"clients": {"pilots": []}}
        assert session.get.call_args[0][0] == "https://api.ivao.aero/v2/tracker/whazzup"

    @pytest.mark.parametrize("method,path", [
        ("get_flights", "/v2/tracker/flights"),
        ("get_online_atc", "/v2/tracker/atc"),
    ])
    def test_paths(self, method, path):
        session = make_session(get=MockResponse([]))
        getattr(IvaoClient(base_url="http://ivao.local", session=session), method)()
        assert session.get.call_args[0][0] == f"http://ivao.local{path}"

    def test_api_key_header(self):
        session = make_session()
        IvaoClient(api_key="secret", session=session).get_whazzup()
        assert session.get.call_args[1]["headers"]["X-API-Key"] == "secret"

    def test_no_credentials_no_bearer(self):
        session = make_session()
        IvaoClient(session=session).get_whazzup()
        assert "Authorization" not in session.get.call_args[1]["headers"]
        session.post.assert_not_called()

    def test_http_error_raises(self):
        session = make_session(get=MockResponse({}, status_code=503))
        with pytest.raises(requests.exceptions.HTTPError):
            IvaoClient(session=session).get_whazzup()


class TestOAuthToken:

    def test_bearer_token_cached(self):
        session = make_session(post=MockResponse({"access_token": "tok", "expires_in": 3600}))
        client = IvaoClient(client_id="id", client_secret="secret", session=session)

        client.get_whazzup()
        client.get_flights()

        assert session.post.call_count == 1
        assert session.post.call_args[1]["data"]["grant_type"] == "client_credentials"
        assert session.get.call_args[1]["headers"]["Authorization"] == "Bearer tok"

    def test_token_refreshed_near_expiry(self):
        session = make_session(post=MockResponse({"access_token": "tok", "expires_in": 60}))
        client = IvaoClient(client_id="id", client_secret="secret", session=session)

        with patch("airport_live.sources.ivao.time.time", return_value=1000.0):
            client.get_whazzup()
        with patch("airport_live.sources.ivao.time.time", return_value=1040.0):
            client.get_whazzup()

        assert session.post.call_count == 2

    def test_token_failure_still_requests(self):
        session = make_session(post=MockResponse({}, status_code=401))
        client = IvaoClient(client_id="id", client_secret="secret", session=session)

        client.get_whazzup()
        assert "Authorization" not in session.get.call_args[1]["headers"]


class TestAirportWeather:

    @pytest.mark.parametrize("payload", [
        {"metar": {"raw": "LPPT 27010KT"}, "taf": {"raw": "TAF LPPT"}},
        {"metar": "LPPT 27010KT", "taf": "TAF LPPT"},
        {"weather": {"metar": "LPPT 27010KT", "taf": "TAF LPPT"}},
        {"data": {"metar": "LPPT 27010KT", "taf": "TAF LPPT"}},
    ])
    def test_shapes(self, payload):
        session = make_session(get=MockResponse(payload))
        weather = IvaoClient(session=session).get_metar_taf("lppt")

        assert weather == {"metar": "LPPT 27010KT", "taf": "TAF LPPT"}
        assert session.get.call_args[0][0].endswith("/v2/airports/LPPT")

    def test_failure_is_empty(self):
        session = make_session(get=MockResponse({}, status_code=404))
        assert IvaoClient(session=session).get_metar_taf("XXXX") == {"metar": None, "taf": None}

    def test_missing_reports(self):
        session = make_session(get=MockResponse({"name": "Lisbon"}))
        assert IvaoClient(session=session).get_metar_taf("LPPT") == {"metar": None, "taf": None}
