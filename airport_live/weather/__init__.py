"""
Weather module for decoding METAR/TAF reports.

Provides:
- ParsedMetar: Decoded METAR fields
- TafPeriod: One TAF forecast period
- CloudLayer: Cloud layer (cover + base)
- WeatherParser: Tokenizer/classifier for METAR and TAF text
- WeatherAnalyzer: Worst-weather ranking and crosswind figures

Example:
    from airport_live.weather import WeatherParser

    metar = WeatherParser.parse_metar(
        "LPPT 211230Z 33012KT 9999 FEW020 18/09 Q1015"
    )
    print(metar.wind_direction_deg, metar.qnh_hpa)  # 330 1015
"""

from airport_live.weather.models import CloudLayer, ParsedMetar, TafPeriod
from airport_live.weather.parser import WeatherParser, is_unavailable
from airport_live.weather.analysis import WeatherAnalyzer, WeatherSeverity

__all__ = [
    'CloudLayer',
    'ParsedMetar',
    'TafPeriod',
    'WeatherParser',
    'WeatherAnalyzer',
    'WeatherSeverity',
    'is_unavailable',
]
