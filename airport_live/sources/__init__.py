"""Live feed sources: aviationweather.gov, IVAO, and the per-poll fan-out."""

from airport_live.sources.avwx import AvWxSource
from airport_live.sources.ivao import IvaoClient
from airport_live.sources.feeds import FEED_TIMEOUT_SECONDS, fetch_live_feeds, fetch_metar_taf, fetch_metars

__all__ = ['AvWxSource', 'IvaoClient', 'FEED_TIMEOUT_SECONDS', 'fetch_live_feeds', 'fetch_metar_taf', 'fetch_metars']
