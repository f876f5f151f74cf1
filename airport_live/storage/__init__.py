"""Static airport data access."""

from airport_live.storage.base import AirportStore
from airport_live.storage.json_store import JsonAirportStore
from airport_live.storage.sqlite_store import SQLiteAirportStore

__all__ = ['AirportStore', 'JsonAirportStore', 'SQLiteAirportStore']
