"""Weather severity: ranking featured airports by their current METAR."""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from airport_live.geo import crosswind_component
from airport_live.weather.models import ParsedMetar
from airport_live.weather.parser import WeatherParser, is_unavailable


@dataclass(frozen=True)
class WeatherSeverity:
    """
    Severity figures for one airport's METAR.

    Attributes:
        icao: Airport ICAO code
        metar: Raw METAR
        wind_kts: max(speed, gust), -1 when the METAR has no wind group
        visibility_meters: Visibility, +inf when unknown
        rain_score: 2 heavy rain, 1 rain, 0 none
    """

    icao: str
    metar: str
    wind_kts: int
    visibility_meters: float
    rain_score: int
    name: Optional[str] = None

    @property
    def rain_label(self) -> Optional[str]:
        if self.rain_score >= 2:
            return "Heavy rain"
        if self.rain_score == 1:
            return "Rain"
        return None

    def to_dict(self) -> dict:
        return {
            'icao': self.icao,
            'name': self.name,
            'metar': self.metar,
            'wind_kts': self.wind_kts,
            'visibility_meters': None if math.isinf(self.visibility_meters) else self.visibility_meters,
            'rain_score': self.rain_score,
            'rain_label': self.rain_label,
        }


class WeatherAnalyzer:
    """
    Aviation weather comparisons.

    All methods are static: pure functions over decoded reports.
    """

    @staticmethod
    def wind_kts(metar: ParsedMetar) -> int:
        if metar.wind_speed_kt is None:
            return -1
        return max(metar.wind_speed_kt, metar.gust_kt or 0)

    @staticmethod
    def visibility_meters(metar: ParsedMetar) -> float:
        if metar.visibility_meters is None:
            return math.inf
        return metar.visibility_meters

    @staticmethod
    def rain_score(metar: ParsedMetar) -> int:
        if not metar.is_available:
            return -1
        rain = [code for code in metar.weather_codes if code.endswith('RA')]
        if any(code.startswith('+') for code in rain):
            return 2
        return 1 if rain else 0

    @classmethod
    def severity(cls, icao: str, raw_metar: Optional[str], name: Optional[str] = None) -> Optional[WeatherSeverity]:
        """Severity for one airport, None when its METAR is missing."""
        if is_unavailable(raw_metar):
            return None
        metar = WeatherParser.parse_metar(raw_metar)
        return WeatherSeverity(
            icao=icao.upper(),
            name=name,
            metar=metar.raw,
            wind_kts=cls.wind_kts(metar),
            visibility_meters=cls.visibility_meters(metar),
            rain_score=cls.rain_score(metar),
        )

    @classmethod
    def rank_worst_weather(
        cls,
        reports: Iterable[Tuple[str, Optional[str]]],
    ) -> List[WeatherSeverity]:
        """
        Rank airports from worst to best weather.

        Stronger wind first, then lower visibility, then heavier rain.
        Airports without a METAR are left out.

        Args:
            reports: (icao, raw METAR) pairs
        """
        severities = [s for s in (cls.severity(icao, raw) for icao, raw in reports) if s is not None]
        return sorted(
            severities,
            key=lambda s: (-s.wind_kts, s.visibility_meters, -s.rain_score),
        )

    @classmethod
    def worst_weather(cls, reports: Iterable[Tuple[str, Optional[str]]]) -> Optional[WeatherSeverity]:
        ranked = cls.rank_worst_weather(reports)
        return ranked[0] if ranked else None

    @staticmethod
    def max_crosswind(metar: ParsedMetar, headings: Sequence[float]) -> Optional[int]:
        """
        Worst crosswind across runway headings, using max(speed, gust).

        None when the wind is calm/variable or no heading is known.
        """
        if metar.wind_direction_deg is None or metar.wind_speed_kt is None or not headings:
            return None
        speed = max(metar.wind_speed_kt, metar.gust_kt or 0)
        worst = max(crosswind_component(metar.wind_direction_deg, speed, h) for h in headings)
        return round(worst)
