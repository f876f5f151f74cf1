"""Decoded weather data models."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class CloudLayer:
    """
    A single cloud layer.

    Attributes:
        cover: FEW, SCT, BKN or OVC
        height_hundred_ft: Base height in hundreds of feet
        convective: CB or TCU when reported
    """

    cover: str
    height_hundred_ft: int
    convective: Optional[str] = None

    @property
    def code(self) -> str:
        """Report form, e.g. "BKN035"."""
        return f"{self.cover}{self.height_hundred_ft:03d}"

    @property
    def height_ft(self) -> int:
        return self.height_hundred_ft * 100

    def to_dict(self) -> dict:
        return {
            'type': self.cover,
            'height': self.height_hundred_ft,
            'convective': self.convective,
        }


@dataclass(frozen=True)
class ParsedMetar:
    """
    Decoded METAR.

    Every field is optional: a parse miss leaves the field None and decoding
    continues with the rest of the report.

    Attributes:
        raw: Original report text (None when no METAR was available)
        wind_direction_deg: Wind direction (None if variable or calm)
        wind_speed_kt: Wind speed in knots
        gust_kt: Gust speed in knots
        visibility: Visibility group as reported ("9999", "10SM", "CAVOK")
        visibility_meters: Visibility converted to meters
        temperature_c: Temperature in Celsius
        dewpoint_c: Dewpoint in Celsius
        qnh_hpa: QNH in hectopascal
        altimeter_inhg: Altimeter setting in inches of mercury
        cloud_layers: Cloud layers in order of appearance
        present_weather: Human labels for present weather groups
        weather_codes: Raw present weather groups ("-SHRA")
    """

    raw: Optional[str] = None
    wind_direction_deg: Optional[int] = None
    wind_speed_kt: Optional[int] = None
    gust_kt: Optional[int] = None
    visibility: Optional[str] = None
    visibility_meters: Optional[float] = None
    temperature_c: Optional[int] = None
    dewpoint_c: Optional[int] = None
    qnh_hpa: Optional[int] = None
    altimeter_inhg: Optional[float] = None
    cloud_layers: Tuple[CloudLayer, ...] = field(default_factory=tuple)
    present_weather: Tuple[str, ...] = field(default_factory=tuple)
    weather_codes: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_available(self) -> bool:
        return self.raw is not None

    @property
    def ceiling_ft(self) -> Optional[int]:
        """Lowest BKN or OVC layer in feet."""
        heights = [c.height_ft for c in self.cloud_layers if c.cover in ('BKN', 'OVC')]
        return min(heights) if heights else None

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'wind_direction': self.wind_direction_deg,
            'wind_speed': self.wind_speed_kt,
            'wind_gust': self.gust_kt,
            'visibility': self.visibility,
            'visibility_meters': self.visibility_meters,
            'temperature': self.temperature_c,
            'dewpoint': self.dewpoint_c,
            'qnh': self.qnh_hpa,
            'altimeter': self.altimeter_inhg,
            'clouds': [c.to_dict() for c in self.cloud_layers],
            'weather': list(self.present_weather),
            'weather_codes': list(self.weather_codes),
        }

    def __repr__(self) -> str:
        if self.raw is None:
            return "ParsedMetar(unavailable)"
        return f"ParsedMetar({self.wind_direction_deg}/{self.wind_speed_kt} vis={self.visibility})"


@dataclass(frozen=True)
class TafPeriod:
    """
    One forecast period of a TAF.

    Attributes:
        label: "INITIAL", "FM 120300", "TEMPO 1203/1206", "PROB30 TEMPO 1203/1206"
    """

    label: str
    wind_direction_deg: Optional[int] = None
    wind_speed_kt: Optional[int] = None
    gust_kt: Optional[int] = None
    visibility: Optional[str] = None
    visibility_meters: Optional[float] = None
    cloud_layers: Tuple[CloudLayer, ...] = field(default_factory=tuple)
    present_weather: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def change_type(self) -> str:
        """First word of the label: INITIAL, FM, TEMPO, BECMG or PROBnn."""
        return self.label.split()[0]

    def to_dict(self) -> dict:
        return {
            'label': self.label,
            'wind_direction': self.wind_direction_deg,
            'wind_speed': self.wind_speed_kt,
            'wind_gust': self.gust_kt,
            'visibility': self.visibility,
            'visibility_meters': self.visibility_meters,
            'clouds': [c.to_dict() for c in self.cloud_layers],
            'weather': list(self.present_weather),
        }
