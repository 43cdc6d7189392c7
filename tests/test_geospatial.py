import math

import pytest

from nearby_routes.models.domain import Coordinate
from nearby_routes.services.geospatial import distance_km, haversine_km, is_valid_coordinate


def test_one_degree_of_longitude_on_the_equator():
    assert distance_km(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)) == pytest.approx(111.19, abs=0.5)


def test_distance_is_zero_for_identical_points():
    point = Coordinate(28.6139, 77.2090)
    assert distance_km(point, point) == 0.0


def test_distance_is_symmetric():
    a = Coordinate(28.6139, 77.2090)
    b = Coordinate(28.6189, 77.2120)
    assert distance_km(a, b) == distance_km(b, a)


def test_out_of_range_input_degrades_to_a_number():
    value = haversine_km(120.0, 400.0, -95.0, -200.0)
    assert isinstance(value, float)
    assert not math.isinf(value)


def test_is_valid_coordinate_rejects_nan_and_out_of_range():
    assert is_valid_coordinate(Coordinate(28.6, 77.2))
    assert not is_valid_coordinate(Coordinate(float("nan"), 77.2))
    assert not is_valid_coordinate(Coordinate(91.0, 0.0))
    assert not is_valid_coordinate(Coordinate(0.0, -180.5))


@pytest.mark.parametrize("lat", [-87.5, -82.0, -12.0, -8.0, -5.5, 0.0, 45.0, 90.0])
def test_antipodal_points_give_half_circumference(lat):
    assert haversine_km(lat, 0.0, -lat, 180.0) == pytest.approx(math.pi * 6371.0)


def test_near_antipodal_scan_never_raises():
    for step in range(-180, 181):
        lat = step / 2
        assert haversine_km(lat, 0.0, -lat, 180.0) <= math.pi * 6371.0 + 1e-6


def test_non_finite_input_gives_nan():
    assert math.isnan(distance_km(Coordinate(math.inf, 0.0), Coordinate(0.0, 0.0)))
    assert math.isnan(haversine_km(0.0, 0.0, float("nan"), 10.0))
    assert math.isnan(haversine_km(0.0, -math.inf, 0.0, 10.0))
