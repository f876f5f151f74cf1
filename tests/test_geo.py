"""Tests for geodesy helpers."""

import pytest

from airport_live.geo import (
    centroid,
    crosswind_component,
    haversine_meters,
    headwind_component,
    normalize_heading,
)


class TestHaversine:

    def test_same_point_is_zero(self):
        assert haversine_meters(38.77, -9.13, 38.77, -9.13) == 0

    def test_one_degree_of_latitude(self):
        assert haversine_meters(0, 0, 1, 0) == pytest.approx(111195, abs=1)

    def test_symmetric(self):
        a = haversine_meters(38.77, -9.13, 41.24, -8.68)
        b = haversine_meters(41.24, -8.68, 38.77, -9.13)
        assert a == pytest.approx(b)

    def test_lisbon_porto(self):
        # LPPT to LPPR is about 277 km
        assert haversine_meters(38.7813, -9.1359, 41.2481, -8.6814) == pytest.approx(276000, rel=0.02)


class TestNormalizeHeading:

    @pytest.mark.parametrize("raw,expected", [
        (0, 360),
        (360, 360),
        (90, 90),
        (450, 90),
        (-90, 270),
        (720, 360),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_heading(raw) == expected


class TestWindComponents:

    def test_straight_headwind(self):
        assert headwind_component(270, 15, 270) == pytest.approx(15)

    def test_straight_tailwind(self):
        assert headwind_component(270, 15, 90) == pytest.approx(-15)

    def test_wraps_through_north(self):
        # 350 vs 010: 20 degrees apart
        assert headwind_component(350, 10, 10) == pytest.approx(9.397, abs=0.001)

    def test_direct_crosswind(self):
        assert headwind_component(360, 10, 90) == pytest.approx(0, abs=1e-9)
        assert crosswind_component(360, 10, 90) == pytest.approx(10)

    def test_crosswind_is_unsigned(self):
        assert crosswind_component(300, 10, 270) == pytest.approx(5)
        assert crosswind_component(240, 10, 270) == pytest.approx(5)

    @pytest.mark.parametrize("direction,speed,heading", [
        (None, 10, 270),
        (270, None, 270),
        (270, 10, None),
    ])
    def test_missing_input_is_none(self, direction, speed, heading):
        assert headwind_component(direction, speed, heading) is None
        assert crosswind_component(direction, speed, heading) is None


class TestCentroid:

    def test_mean(self):
        assert centroid([(0, 0), (2, 4)]) == (1, 2)

    def test_empty(self):
        assert centroid([]) is None

    def test_accepts_generator(self):
        assert centroid((p for p in [(1.0, 1.0)])) == (1.0, 1.0)
