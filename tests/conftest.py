import json
from pathlib import Path

import pytest

from airport_live.models.airport import AirportModel, AtcFrequency, Runway, Stand

# Meters per degree of latitude on the haversine sphere
METERS_PER_DEGREE = 6371000.0 * 3.141592653589793 / 180


def offset_north(lat: float, meters: float) -> float:
    """Latitude a given distance north of lat."""
    return lat + meters / METERS_PER_DEGREE


@pytest.fixture
def lppt() -> AirportModel:
    """Small airport: two stands 200 m apart, runway pair 03/21 plus 17/35."""
    return AirportModel(
        icao="LPPT",
        name="Lisbon",
        latitude=38.7813,
        longitude=-9.1359,
        stands=(
            Stand(id="101", name="Stand 101", latitude=38.7700, longitude=-9.1300),
            Stand(id="102", name="Stand 102", latitude=offset_north(38.7700, 200), longitude=-9.1300),
        ),
        runways=(
            Runway(id="03", heading_deg=30),
            Runway(id="21", heading_deg=210),
            Runway(id="17"),
            Runway(id="35"),
        ),
        frequencies=(AtcFrequency(station="LPPT_TWR", frequency_mhz=118.1),),
    )


@pytest.fixture
def airports_json(tmp_path, lppt) -> Path:
    """JSON airport document holding LPPT."""
    path = tmp_path / 'airports.json'
    with open(path, 'w') as f:
        json.dump({'airports': [lppt.to_dict()]}, f)
    return path
