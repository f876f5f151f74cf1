#!/usr/bin/env python3

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from airport_live.live.snapshot import FeedBundle, build_live_snapshot
from airport_live.poller import POLL_INTERVAL_SECONDS, LivePoller
from airport_live.sources.avwx import AvWxSource
from airport_live.sources.feeds import fetch_live_feeds
from airport_live.sources.ivao import IvaoClient
from airport_live.storage.json_store import JsonAirportStore
from airport_live.storage.sqlite_store import SQLiteAirportStore
from airport_live.weather.parser import WeatherParser
from airport_live.web import config

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _open_store(args):
    if args.json:
        return JsonAirportStore(args.json)
    return SQLiteAirportStore(args.db)


def cmd_snapshot(args) -> int:
    """Build one live snapshot and print it as JSON."""
    store = _open_store(args)
    airport = store.get_airport(args.icao)
    if airport is None:
        logger.error(f"Airport {args.icao.upper()} not found")
        return 1

    if args.offline:
        feeds = FeedBundle(metar=args.metar, taf=args.taf)
    else:
        ivao = IvaoClient(
            base_url=config.IVAO_API_BASE,
            api_key=config.IVAO_API_KEY,
            client_id=config.IVAO_CLIENT_ID,
            client_secret=config.IVAO_CLIENT_SECRET,
        )
        avwx = AvWxSource(base_url=config.AVIATION_WEATHER_BASE)
        feeds = fetch_live_feeds(airport.icao, avwx, ivao, timeout=args.timeout)
        if args.metar or args.taf:
            feeds = FeedBundle(
                metar=args.metar or feeds.metar,
                taf=args.taf or feeds.taf,
                whazzup=feeds.whazzup,
                flights=feeds.flights,
                online_atc=feeds.online_atc,
            )

    _print_json(build_live_snapshot(airport, feeds).to_dict())
    return 0


def cmd_watch(args) -> int:
    """Poll a running service and print every update until interrupted."""
    poller = LivePoller(args.url, args.icao, interval=args.interval, on_update=_print_json)
    poller.start()
    try:
        while poller.running:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Stopping")
    finally:
        poller.stop(timeout=5)
    return 0


def cmd_metar(args) -> int:
    """Decode a METAR (and optionally a TAF) given on the command line."""
    result = {'metar': WeatherParser.parse_metar(args.raw).to_dict()}
    if args.taf:
        result['taf'] = [p.to_dict() for p in WeatherParser.parse_taf(args.taf)]
    _print_json(result)
    return 0


def cmd_serve(args) -> int:
    from airport_live.web.main import run

    run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='airport-live', description='Live airport operations')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    subparsers = parser.add_subparsers(dest='command', required=True)

    snapshot = subparsers.add_parser('snapshot', help='Print the live snapshot of an airport')
    snapshot.add_argument('icao', help='ICAO airport code')
    snapshot.add_argument('--db', help='SQLite airport database', default=config.AIRPORTS_DB)
    snapshot.add_argument('--json', help='JSON airport document (overrides --db)', default=config.AIRPORTS_JSON)
    snapshot.add_argument('--metar', help='Use this METAR instead of the fetched one')
    snapshot.add_argument('--taf', help='Use this TAF instead of the fetched one')
    snapshot.add_argument('--offline', help='Do not fetch live feeds', action='store_true')
    snapshot.add_argument('--timeout', help='Feed deadline in seconds', type=float, default=config.FEED_TIMEOUT_SECONDS)
    snapshot.set_defaults(func=cmd_snapshot)

    watch = subparsers.add_parser('watch', help='Poll a running service for an airport')
    watch.add_argument('icao', help='ICAO airport code')
    watch.add_argument('-u', '--url', help='Service base URL', default='http://localhost:8000')
    watch.add_argument('-i', '--interval', help='Poll interval in seconds', type=float, default=POLL_INTERVAL_SECONDS)
    watch.set_defaults(func=cmd_watch)

    metar = subparsers.add_parser('metar', help='Decode a METAR')
    metar.add_argument('raw', help='Raw METAR text')
    metar.add_argument('--taf', help='Raw TAF text to decode as well')
    metar.set_defaults(func=cmd_metar)

    serve = subparsers.add_parser('serve', help='Run the web service')
    serve.add_argument('--host', default='0.0.0.0')
    serve.add_argument('--port', type=int, default=8000)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT,
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
