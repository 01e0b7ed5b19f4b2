import pytest

from dronepath.core.statistics import DENSITY_EPSILON, compute_graph_statistics


def test_spread_is_sum_of_lat_and_lng_ranges():
    stats = compute_graph_statistics([(10.0, 70.0), (12.0, 71.5), (11.0, 69.0)])
    assert stats.count == 3
    assert stats.spread == pytest.approx(2.0 + 2.5)
    assert stats.density == pytest.approx(3 / (4.5 + DENSITY_EPSILON))


def test_single_point_uses_epsilon_guard():
    stats = compute_graph_statistics([(20.6, 78.9)])
    assert stats.count == 1
    assert stats.spread == 0.0
    assert stats.density == pytest.approx(1 / 0.0001)


def test_duplicate_points_are_degenerate_not_an_error():
    stats = compute_graph_statistics([(5.0, 5.0)] * 4)
    assert stats.spread == 0.0
    assert stats.density == pytest.approx(4 / DENSITY_EPSILON)


def test_empty_point_set_is_refused():
    with pytest.raises(ValueError):
        compute_graph_statistics([])
