"""IVAO live-network API client."""

import logging
import time
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class IvaoClient:
    """
    Client for the IVAO v2 API: tracker feeds and airport weather.

    Authenticates with an API key and, when client credentials are
    configured, an OAuth client_credentials bearer token cached until
    shortly before it expires. Tracker getters raise on failure; the caller
    decides how to degrade.

    Example:
        client = IvaoClient(api_key="...")
        whazzup = client.get_whazzup()
    """

    BASE_URL = "https://api.ivao.aero"
    DEFAULT_TIMEOUT = 15
    DEFAULT_SCOPE = "openid profile email"
    TOKEN_TTL_SECONDS = 300
    TOKEN_REFRESH_MARGIN_SECONDS = 30

    WHAZZUP_PATH = "/v2/tracker/whazzup"
    ATC_PATH = "/v2/tracker/atc"
    FLIGHTS_PATH = "/v2/tracker/flights"
    AIRPORT_PATH = "/v2/airports/{icao}"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        scope: str = DEFAULT_SCOPE,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip('/')
        self._api_key = api_key
        self._client_id = client_id
        self._client_secret = client_secret
        self._scope = scope
        self._session = session or requests.Session()
        self._timeout = timeout
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    def get_whazzup(self) -> Any:
        """Whazzup bundle: all connected pilots and controllers."""
        return self._get(self.WHAZZUP_PATH)

    def get_flights(self) -> Any:
        return self._get(self.FLIGHTS_PATH)

    def get_online_atc(self) -> Any:
        return self._get(self.ATC_PATH)

    def get_metar_taf(self, icao: str) -> Dict[str, Optional[str]]:
        """
        METAR/TAF from the airport endpoint.

        The airport document shape varies by API version; the report may sit
        under metar.raw, metar, weather.metar or data.metar (TAF likewise).
        Any failure yields {"metar": None, "taf": None}.
        """
        try:
            data = self._get(self.AIRPORT_PATH.format(icao=icao.strip().upper()))
        except (requests.RequestException, ValueError) as e:
            logger.warning("IVAO airport weather failed for %s: %s", icao, e)
            return {"metar": None, "taf": None}
        return {"metar": self._report(data, 'metar'), "taf": self._report(data, 'taf')}

    @staticmethod
    def _report(data: Any, kind: str) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        candidates = [data.get(kind)]
        if isinstance(data.get(kind), dict):
            candidates.insert(0, data[kind].get('raw'))
        for parent in ('weather', 'data'):
            if isinstance(data.get(parent), dict):
                candidates.append(data[parent].get(kind))
        for value in candidates:
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    def _access_token(self) -> Optional[str]:
        """Cached OAuth token, refreshed when close to expiry. None without credentials."""
        now = time.time()
        if self._token and self._token_expires_at > now + self.TOKEN_REFRESH_MARGIN_SECONDS:
            return self._token
        if not self._client_id or not self._client_secret:
            return None

        try:
            response = self._session.post(
                f"{self._base_url}/oauth/token",
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "scope": self._scope,
                },
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("IVAO token request failed: %s", e)
            return None

        token = payload.get('access_token') if isinstance(payload, dict) else None
        if not token:
            return None
        self._token = token
        self._token_expires_at = now + (payload.get('expires_in') or self.TOKEN_TTL_SECONDS)
        return token

    def _get(self, path: str) -> Any:
        """GET a JSON document, raising requests.HTTPError on a non-2xx status."""
        headers = {"Accept": "application/json"}
        token = self._access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if self._api_key:
            headers["X-API-Key"] = self._api_key

        response = self._session.get(f"{self._base_url}{path}", headers=headers, timeout=self._timeout)
        response.raise_for_status()
        return response.json()
