"""
Feed fan-out for one airport poll.

All feeds are fetched concurrently and joined against a shared deadline. A
feed that raises or misses the deadline is reported as None; the snapshot
degrades that facet only.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from airport_live.live.snapshot import FeedBundle
from airport_live.sources.avwx import AvWxSource
from airport_live.sources.ivao import IvaoClient

logger = logging.getLogger(__name__)

FEED_TIMEOUT_SECONDS = 2.5
NOT_AVAILABLE_TEMPLATE = "{kind} {icao} not available"


def fetch_metar_taf(
    icao: str,
    avwx: Optional[AvWxSource] = None,
    ivao: Optional[IvaoClient] = None,
) -> Dict[str, Optional[str]]:
    """
    METAR/TAF with fallbacks.

    aviationweather.gov first, then the IVAO airport endpoint. When neither
    returns a report the result carries explicit "METAR XXXX not available"
    markers, which the decoder treats as missing.
    """
    icao = icao.strip().upper()
    fetchers = []
    if avwx is not None:
        fetchers.append(("aviationweather", avwx.fetch_metar_taf))
    if ivao is not None:
        fetchers.append(("ivao", ivao.get_metar_taf))

    for name, fetch in fetchers:
        try:
            weather = fetch(icao)
        except Exception as e:
            logger.warning("Weather source %s failed for %s: %s", name, icao, e)
            continue
        if weather.get('metar') or weather.get('taf'):
            return {"metar": weather.get('metar'), "taf": weather.get('taf')}

    return {
        "metar": NOT_AVAILABLE_TEMPLATE.format(kind="METAR", icao=icao),
        "taf": NOT_AVAILABLE_TEMPLATE.format(kind="TAF", icao=icao),
    }


def fetch_live_feeds(
    icao: str,
    avwx: Optional[AvWxSource] = None,
    ivao: Optional[IvaoClient] = None,
    timeout: float = FEED_TIMEOUT_SECONDS,
) -> FeedBundle:
    """
    Fetch every feed for an airport concurrently.

    Args:
        icao: Airport ICAO code
        avwx: aviationweather.gov source
        ivao: IVAO client; without it the traffic and ATC feeds are None
        timeout: Overall deadline in seconds for the joined feeds

    Returns:
        FeedBundle with None for every feed that failed or timed out
    """
    tasks: Dict[str, Callable] = {'weather': lambda: fetch_metar_taf(icao, avwx, ivao)}
    if ivao is not None:
        tasks['whazzup'] = ivao.get_whazzup
        tasks['flights'] = ivao.get_flights
        tasks['online_atc'] = ivao.get_online_atc

    results = {}
    executor = ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="feed")
    try:
        futures = {name: executor.submit(task) for name, task in tasks.items()}
        deadline = time.monotonic() + timeout
        for name, future in futures.items():
            try:
                results[name] = future.result(timeout=max(0.0, deadline - time.monotonic()))
            except FutureTimeoutError:
                logger.warning("Feed %s for %s timed out after %.1fs", name, icao, timeout)
                results[name] = None
            except Exception as e:
                logger.warning("Feed %s for %s failed: %s", name, icao, e)
                results[name] = None
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    weather = results.get('weather') or {}
    return FeedBundle(
        metar=weather.get('metar'),
        taf=weather.get('taf'),
        whazzup=results.get('whazzup'),
        flights=results.get('flights'),
        online_atc=results.get('online_atc'),
    )


def fetch_metars(
    icaos: Sequence[str],
    avwx: Optional[AvWxSource] = None,
    ivao: Optional[IvaoClient] = None,
    timeout: float = FEED_TIMEOUT_SECONDS,
) -> List[Tuple[str, Optional[str]]]:
    """
    Current METAR for several airports, fetched concurrently.

    Returns:
        (icao, raw METAR or None) pairs in input order
    """
    icaos = [icao.strip().upper() for icao in icaos if icao.strip()]
    if not icaos:
        return []

    results: Dict[str, Optional[str]] = {}
    executor = ThreadPoolExecutor(max_workers=min(len(icaos), 8), thread_name_prefix="metar")
    try:
        futures = {icao: executor.submit(fetch_metar_taf, icao, avwx, ivao) for icao in icaos}
        deadline = time.monotonic() + timeout
        for icao, future in futures.items():
            try:
                results[icao] = future.result(timeout=max(0.0, deadline - time.monotonic())).get('metar')
            except FutureTimeoutError:
                logger.warning("METAR for %s timed out after %.1fs", icao, timeout)
                results[icao] = None
            except Exception as e:
                logger.warning("METAR for %s failed: %s", icao, e)
                results[icao] = None
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return [(icao, results.get(icao)) for icao in icaos]
