"""
Live operations: reconciles the static airport model with live feeds.

Example:
    from airport_live.live import FeedBundle, build_live_snapshot

    snapshot = build_live_snapshot(airport, FeedBundle(metar=raw_metar, whazzup=bundle))
    snapshot.favored_runway
"""

from airport_live.live.controllers import ATC_PROXIMITY_RADIUS_M, airport_center, match_controllers
from airport_live.live.occupancy import STAND_OCCUPANCY_THRESHOLD_M, match_stands
from airport_live.live.runways import advise_for_metar, advise_runways, runway_heading
from airport_live.live.snapshot import FeedBundle, build_live_snapshot
from airport_live.live.traffic import flight_phase, split_traffic

__all__ = [
    'ATC_PROXIMITY_RADIUS_M',
    'STAND_OCCUPANCY_THRESHOLD_M',
    'FeedBundle',
    'advise_for_metar',
    'advise_runways',
    'airport_center',
    'build_live_snapshot',
    'flight_phase',
    'match_controllers',
    'match_stands',
    'runway_heading',
    'split_traffic',
]
