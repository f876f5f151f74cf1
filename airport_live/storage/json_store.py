import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from airport_live.models.airport import AirportModel
from airport_live.storage.base import AirportStore

logger = logging.getLogger(__name__)


class JsonAirportStore(AirportStore):
    """
    Airport data from a JSON document.

    The document is either a list of airports or {"airports": [...]}, each in
    the AirportModel.to_dict() format. Loaded once at construction.
    """

    def __init__(self, json_path: str):
        self.json_path = Path(json_path)
        self._airports = self._load()

    def _load(self) -> Dict[str, AirportModel]:
        with open(self.json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get('airports', [])
        if not isinstance(data, list):
            raise ValueError(f"{self.json_path}: expected a list of airports")

        airports = {}
        for entry in data:
            airport = AirportModel.from_dict(entry)
            airports[airport.icao] = airport
        logger.info(f"Loaded {len(airports)} airports from {self.json_path}")
        return airports

    def get_airport(self, icao: str) -> Optional[AirportModel]:
        return self._airports.get(icao.strip().upper())

    def list_icaos(self) -> List[str]:
        return sorted(self._airports)
