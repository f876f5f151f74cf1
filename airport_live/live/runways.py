"""Runway advisor: headwind per runway and the favored runway."""

import re
from typing import List, Optional, Sequence

from airport_live.geo import crosswind_component, headwind_component, normalize_heading
from airport_live.models.airport import Runway
from airport_live.models.snapshot import RunwayAdvisory
from airport_live.weather.models import ParsedMetar

_IDENT_NUMBER_RE = re.compile(r'(\d{1,2})')


def runway_heading(runway: Runway) -> Optional[float]:
    """
    Heading of a runway in 1..360.

    The published heading when present, else the designator number x 10
    ("09L" -> 90, "27/09" -> 270). None when neither is usable.
    """
    if runway.heading_deg is not None:
        return normalize_heading(runway.heading_deg)
    first_end = re.split(r'[\\/]', runway.id.strip())[0]
    match = _IDENT_NUMBER_RE.match(first_end)
    if not match:
        return None
    return normalize_heading(int(match.group(1)) * 10)


def advise_runways(
    wind_direction_deg: Optional[float],
    wind_speed_kt: Optional[float],
    runways: Sequence[Runway],
) -> List[RunwayAdvisory]:
    """
    Score every runway against the wind.

    The favored runway has the largest headwind among runways with a known
    heading; ties go to the first in input order. Calm or variable wind, or
    no usable heading, favors nothing.

    Args:
        wind_direction_deg: Wind direction, None when calm/variable
        wind_speed_kt: Wind speed
        runways: Runways in display order

    Returns:
        One RunwayAdvisory per runway, in input order
    """
    headings = [runway_heading(r) for r in runways]
    headwinds = [headwind_component(wind_direction_deg, wind_speed_kt, h) for h in headings]

    favored_index = None
    for index, headwind in enumerate(headwinds):
        if headwind is None:
            continue
        if favored_index is None or headwind > headwinds[favored_index]:
            favored_index = index

    return [
        RunwayAdvisory(
            runway=runway,
            heading_deg=heading,
            headwind_kt=headwind,
            crosswind_kt=crosswind_component(wind_direction_deg, wind_speed_kt, heading),
            is_favored=index == favored_index,
        )
        for index, (runway, heading, headwind) in enumerate(zip(runways, headings, headwinds))
    ]


def advise_for_metar(metar: ParsedMetar, runways: Sequence[Runway]) -> List[RunwayAdvisory]:
    """advise_runways() with the wind of a decoded METAR."""
    return advise_runways(metar.wind_direction_deg, metar.wind_speed_kt, runways)
