"""Aviation Weather (aviationweather.gov) API source for live METAR/TAF text."""

import logging
from typing import Any, Dict, Optional, Sequence

import requests

logger = logging.getLogger(__name__)

# Raw report keys seen across API versions, first match wins
METAR_RAW_KEYS = ('rawOb', 'rawText', 'raw', 'raw_report')
TAF_RAW_KEYS = ('rawTaf', 'raw', 'raw_text', 'rawReport')


class AvWxSource:
    """
    Fetch the latest METAR and TAF for an airport from aviationweather.gov.

    Requests the JSON format and returns the raw report text, which the
    WeatherParser decodes. Failures are logged and reported as None.

    Example:
        source = AvWxSource()
        weather = source.fetch_metar_taf("LPPT")
        weather["metar"]  # "LPPT 121030Z 32012KT ..." or None
    """

    BASE_URL = "https://aviationweather.gov/api/data"
    DEFAULT_TIMEOUT = 15
    USER_AGENT = "airport-live/1.0 (live airport operations)"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            base_url: API root, defaults to BASE_URL.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._base_url = (base_url or self.BASE_URL).rstrip('/')
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch_metar(self, icao: str) -> Optional[str]:
        """Latest raw METAR for an airport, None when there is none."""
        data = self._fetch_json("metar", {"ids": icao.strip().upper(), "format": "json", "taf": "false"})
        return self._first_raw(data, METAR_RAW_KEYS)

    def fetch_taf(self, icao: str) -> Optional[str]:
        """Latest raw TAF for an airport, None when there is none."""
        data = self._fetch_json("taf", {"ids": icao.strip().upper(), "format": "json"})
        return self._first_raw(data, TAF_RAW_KEYS)

    def fetch_metar_taf(self, icao: str) -> Dict[str, Optional[str]]:
        """
        Fetch both reports for an airport.

        Returns:
            {"metar": str or None, "taf": str or None}
        """
        return {"metar": self.fetch_metar(icao), "taf": self.fetch_taf(icao)}

    def _fetch_json(self, endpoint: str, params: dict) -> Any:
        """
        Make HTTP GET request and return decoded JSON.

        Handles 204 (no data) and any failure by returning None.
        """
        url = f"{self._base_url}/{endpoint}"
        try:
            response = self._session.get(
                url, params=params, timeout=self._timeout, headers={"Accept": "application/json"}
            )
            if response.status_code == 204:
                return None
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("AvWx fetch failed for %s: %s", endpoint, e)
            return None

    @staticmethod
    def _first_raw(data: Any, keys: Sequence[str]) -> Optional[str]:
        """Raw text of the first report in a JSON list response."""
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return None
        for key in keys:
            value = data[0].get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
