"""
Client-side poll loop for the live snapshot endpoint.

Keeps the last good picture of an airport: a failed poll leaves the held
state untouched, a successful one is merged into it.
"""

import copy
import logging
import threading
from typing import Any, Callable, Dict, Optional

import requests

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 60
REQUEST_TIMEOUT_SECONDS = 10

# Replaced on every successful poll; anything that is not a list becomes []
LIST_FACETS = ('stands', 'inbound', 'outbound', 'atc', 'runways')

# Raw report key -> decoded companion. A None report keeps the previous pair.
WEATHER_FACETS = (('metar', 'decoded_metar'), ('taf', 'taf_periods'))

SCALAR_FACETS = ('favored_runway', 'has_traffic_data', 'occupancy_available')


def empty_state() -> Dict[str, Any]:
    state: Dict[str, Any] = {key: [] for key in LIST_FACETS}
    state.update({'metar': None, 'decoded_metar': None, 'taf': None, 'taf_periods': []})
    state.update({'favored_runway': None, 'has_traffic_data': False, 'occupancy_available': False})
    return state


def merge_live_payload(previous: Dict[str, Any], payload: Any) -> Dict[str, Any]:
    """
    Merge a poll response into the held state.

    Args:
        previous: State held before this poll (not modified)
        payload: Decoded JSON body of the poll response

    Returns:
        New state dict; previous unchanged when payload is not an object
    """
    if not isinstance(payload, dict):
        return previous

    merged = dict(previous)
    for raw_key, decoded_key in WEATHER_FACETS:
        if payload.get(raw_key) is not None:
            merged[raw_key] = payload[raw_key]
            merged[decoded_key] = payload.get(decoded_key)
    for key in LIST_FACETS:
        value = payload.get(key)
        merged[key] = value if isinstance(value, list) else []
    for key in SCALAR_FACETS:
        if key in payload:
            merged[key] = payload[key]
    return merged


class LivePoller:
    """
    Poll GET {base_url}/airports/{icao}/live at a fixed interval.

    At most one request is in flight: a poll started while another is
    running is skipped. Non-2xx responses and transport or JSON errors keep
    the previous state.

    Example:
        poller = LivePoller("http://localhost:8000", "LPPT", on_update=print)
        poller.start()
        ...
        poller.stop()
    """

    def __init__(
        self,
        base_url: str,
        icao: str,
        session: Optional[requests.Session] = None,
        interval: float = POLL_INTERVAL_SECONDS,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        on_update: Optional[Callable[[Dict[str, Any]], None]] = None,
    ):
        self.url = f"{base_url.rstrip('/')}/airports/{icao.strip().upper()}/live"
        self.interval = interval
        self._session = session or requests.Session()
        self._timeout = timeout
        self._on_update = on_update
        self._state = empty_state()
        self._state_lock = threading.Lock()
        self._in_flight = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> Dict[str, Any]:
        with self._state_lock:
            return copy.deepcopy(self._state)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def poll_once(self) -> bool:
        """
        Run one poll.

        Returns:
            True when the state was updated, False when the poll was skipped
            or failed
        """
        if not self._in_flight.acquire(blocking=False):
            logger.debug("Poll of %s skipped, previous request still in flight", self.url)
            return False
        try:
            try:
                response = self._session.get(self.url, timeout=self._timeout)
                response.raise_for_status()
                payload = response.json()
            except (requests.RequestException, ValueError) as e:
                logger.warning("Poll of %s failed: %s", self.url, e)
                return False

            with self._state_lock:
                merged = merge_live_payload(self._state, payload)
                if merged is self._state:
                    logger.warning("Poll of %s returned %s, not an object", self.url, type(payload).__name__)
                    return False
                self._state = merged
                snapshot = copy.deepcopy(self._state)
        finally:
            self._in_flight.release()

        if self._on_update:
            self._on_update(snapshot)
        return True

    def start(self) -> None:
        """Poll immediately, then every interval seconds, on a daemon thread."""
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="live-poller", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.is_set():
            self.poll_once()
            self._stop.wait(self.interval)
