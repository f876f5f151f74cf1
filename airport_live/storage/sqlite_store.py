import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

from airport_live.models.airport import AirportModel, AtcFrequency, Runway, Stand
from airport_live.storage.base import AirportStore

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS airports (
        icao TEXT PRIMARY KEY,
        name TEXT,
        latitude REAL,
        longitude REAL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS stands (
        airport_icao TEXT NOT NULL,
        stand_id TEXT NOT NULL,
        name TEXT,
        latitude REAL NOT NULL,
        longitude REAL NOT NULL,
        position INTEGER NOT NULL,
        PRIMARY KEY (airport_icao, stand_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS runways (
        airport_icao TEXT NOT NULL,
        runway_id TEXT NOT NULL,
        heading REAL,
        length_m REAL,
        holding_points TEXT,
        position INTEGER NOT NULL,
        PRIMARY KEY (airport_icao, runway_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS frequencies (
        airport_icao TEXT NOT NULL,
        station TEXT NOT NULL,
        frequency_mhz REAL NOT NULL,
        position INTEGER NOT NULL
    )
    """,
)


class SQLiteAirportStore(AirportStore):
    """
    Airport data in a SQLite database.

    Stands, runways and frequencies keep their insertion order, which is the
    display order the live engine preserves.
    """

    def __init__(self, database_path: str):
        """
        Args:
            database_path: Path to the SQLite database file, created if missing
        """
        self.database_path = Path(database_path)
        self.create_schema()

    @contextmanager
    def _get_connection(self):
        """Get a database connection with proper configuration."""
        conn = sqlite3.connect(str(self.database_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def create_schema(self) -> None:
        with self._get_connection() as conn:
            for statement in SCHEMA:
                conn.execute(statement)
            conn.commit()

    def save_airport(self, airport: AirportModel) -> None:
        """Insert or replace an airport and all its children."""
        icao = airport.icao.upper()
        with self._get_connection() as conn:
            conn.execute(
                'INSERT OR REPLACE INTO airports (icao, name, latitude, longitude) VALUES (?, ?, ?, ?)',
                (icao, airport.name, airport.latitude, airport.longitude),
            )
            for table in ('stands', 'runways', 'frequencies'):
                conn.execute(f'DELETE FROM {table} WHERE airport_icao = ?', (icao,))
            conn.executemany(
                'INSERT INTO stands VALUES (?, ?, ?, ?, ?, ?)',
                [(icao, s.id, s.name, s.latitude, s.longitude, i) for i, s in enumerate(airport.stands)],
            )
            conn.executemany(
                'INSERT INTO runways VALUES (?, ?, ?, ?, ?, ?)',
                [
                    (icao, r.id, r.heading_deg, r.length_m, json.dumps(list(r.holding_points)), i)
                    for i, r in enumerate(airport.runways)
                ],
            )
            conn.executemany(
                'INSERT INTO frequencies VALUES (?, ?, ?, ?)',
                [(icao, f.station, f.frequency_mhz, i) for i, f in enumerate(airport.frequencies)],
            )
            conn.commit()
        logger.info(f"Saved airport {icao} ({len(airport.stands)} stands, {len(airport.runways)} runways)")

    def get_airport(self, icao: str) -> Optional[AirportModel]:
        icao = icao.strip().upper()
        with self._get_connection() as conn:
            row = conn.execute('SELECT * FROM airports WHERE icao = ?', (icao,)).fetchone()
            if not row:
                return None

            stands = conn.execute(
                'SELECT * FROM stands WHERE airport_icao = ? ORDER BY position', (icao,)
            ).fetchall()
            runways = conn.execute(
                'SELECT * FROM runways WHERE airport_icao = ? ORDER BY position', (icao,)
            ).fetchall()
            frequencies = conn.execute(
                'SELECT * FROM frequencies WHERE airport_icao = ? ORDER BY position', (icao,)
            ).fetchall()

        return AirportModel(
            icao=row['icao'],
            name=row['name'] or '',
            latitude=row['latitude'],
            longitude=row['longitude'],
            stands=tuple(
                Stand(id=s['stand_id'], name=s['name'] or s['stand_id'], latitude=s['latitude'], longitude=s['longitude'])
                for s in stands
            ),
            runways=tuple(
                Runway(
                    id=r['runway_id'],
                    heading_deg=r['heading'],
                    length_m=r['length_m'],
                    holding_points=tuple(json.loads(r['holding_points'] or '[]')),
                )
                for r in runways
            ),
            frequencies=tuple(
                AtcFrequency(station=f['station'], frequency_mhz=f['frequency_mhz']) for f in frequencies
            ),
        )

    def list_icaos(self) -> List[str]:
        with self._get_connection() as conn:
            return [row['icao'] for row in conn.execute('SELECT icao FROM airports ORDER BY icao')]
