from abc import ABC, abstractmethod
from typing import List, Optional

from airport_live.models.airport import AirportModel


class AirportStore(ABC):
    """Read-only access to static airport data."""

    @abstractmethod
    def get_airport(self, icao: str) -> Optional[AirportModel]:
        """
        Get an airport with its stands, runways and frequencies.

        Args:
            icao: ICAO airport code (case-insensitive)

        Returns:
            AirportModel, or None when the airport is unknown
        """
        pass

    @abstractmethod
    def list_icaos(self) -> List[str]:
        """ICAO codes of every stored airport, sorted."""
        pass
