import pytest

from dronepath.core.geo import (
    Coordinate,
    format_distance_km,
    haversine_km,
    path_segments,
    total_path_distance_km,
)


def test_one_degree_of_longitude_on_equator():
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.19, abs=0.1)


def test_london_to_paris(london_paris):
    (lat1, lon1), (lat2, lon2) = london_paris
    d = haversine_km(lat1, lon1, lat2, lon2)
    assert 343.0 <= d <= 344.5


def test_haversine_is_symmetric():
    assert haversine_km(10, 20, -5, 40) == pytest.approx(haversine_km(-5, 40, 10, 20))


def test_antipodal_points_do_not_raise():
    # 半个地球周长
    assert haversine_km(0, 0, 0, 180) == pytest.approx(3.141592653589793 * 6371.0, rel=1e-9)


def test_total_distance_zero_for_fewer_than_two_points():
    assert total_path_distance_km([]) == 0.0
    assert total_path_distance_km([(12.0, 77.0)]) == 0.0


def test_total_distance_zero_for_identical_points():
    assert total_path_distance_km([(12.0, 77.0), (12.0, 77.0)]) == 0.0


def test_total_distance_sums_consecutive_segments_in_order():
    pts = [(0.0, 0.0), (0.0, 1.0), (0.0, 0.0)]
    assert total_path_distance_km(pts) == pytest.approx(2 * haversine_km(0, 0, 0, 1))


def test_path_segments_pairs_neighbours():
    segs = path_segments([(1, 2), (3, 4), (5, 6)])
    assert segs == [
        (Coordinate(1.0, 2.0), Coordinate(3.0, 4.0)),
        (Coordinate(3.0, 4.0), Coordinate(5.0, 6.0)),
    ]
    assert path_segments([(1, 2)]) == []


def test_format_distance_two_decimals():
    assert format_distance_km(343.5349) == "343.53 km"
    assert format_distance_km(0) == "0.00 km"
