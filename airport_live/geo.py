"""
Geodesy helpers for airport-surface scale computations.

All angles are in degrees, distances in meters and speeds in knots.
Headings follow the aviation convention (1-360, never 0).
"""

import math
from typing import Iterable, Optional, Tuple

EARTH_RADIUS_M = 6371000.0


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points using the Haversine formula.

    Args:
        lat1, lon1: First point in decimal degrees
        lat2, lon2: Second point in decimal degrees

    Returns:
        Distance in meters
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def normalize_heading(raw: float) -> float:
    """Normalize a heading into 1..360; north is reported as 360."""
    heading = ((raw % 360) + 360) % 360
    return 360 if heading == 0 else heading


def _angle_between(wind_direction_deg: float, runway_heading_deg: float) -> float:
    return abs(((wind_direction_deg - runway_heading_deg + 540) % 360) - 180)


def headwind_component(
    wind_direction_deg: Optional[float],
    wind_speed_kt: Optional[float],
    runway_heading_deg: Optional[float],
) -> Optional[float]:
    """
    Signed headwind component along a runway.

    Positive is a headwind, negative a tailwind. Returns None when the wind
    direction (calm/variable), the wind speed or the runway heading is unknown.
    """
    if wind_direction_deg is None or runway_heading_deg is None or wind_speed_kt is None:
        return None
    angle = _angle_between(wind_direction_deg, runway_heading_deg)
    return math.cos(math.radians(angle)) * wind_speed_kt


def crosswind_component(
    wind_direction_deg: Optional[float],
    wind_speed_kt: Optional[float],
    runway_heading_deg: Optional[float],
) -> Optional[float]:
    """Unsigned crosswind component across a runway, None when undefined."""
    if wind_direction_deg is None or runway_heading_deg is None or wind_speed_kt is None:
        return None
    angle = _angle_between(wind_direction_deg, runway_heading_deg)
    return abs(math.sin(math.radians(angle)) * wind_speed_kt)


def centroid(points: Iterable[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
    """Arithmetic mean of (lat, lon) pairs; None for an empty input."""
    points = list(points)
    if not points:
        return None
    lat = sum(p[0] for p in points) / len(points)
    lon = sum(p[1] for p in points) / len(points)
    return lat, lon
