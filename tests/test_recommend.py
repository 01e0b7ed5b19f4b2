from __future__ import annotations

import pytest

from dronepath.core.errors import InsufficientPointsError, RecommendationError
from dronepath.core.explain import EXPLANATIONS, SELECTION_REASON
from dronepath.core.recommend import compute_recommendation, ranking_to_frame


def test_recommendation_for_london_paris(london_paris):
    rec = compute_recommendation(london_paris)

    assert len(rec.ranking) == 12
    assert 343.0 <= rec.total_distance_km <= 344.5
    assert rec.distance_label.endswith(" km")
    assert rec.statistics.count == 2
    # 2 points: BFS 100 on top; spread > 0.3 and low density lift A* to 100 as well,
    # but A* sits before BFS in the catalog
    assert rec.best.name == "A*"
    assert rec.top_explanation == EXPLANATIONS["A*"]
    assert rec.selection_reason == SELECTION_REASON
    assert rec.iterations == 2


def test_close_points_recommend_bfs():
    rec = compute_recommendation([(12.90, 77.50), (12.91, 77.52), (12.93, 77.51)])
    assert rec.best.name == "BFS"
    assert rec.top_explanation == EXPLANATIONS["BFS"]


def test_compute_is_deterministic():
    pts = [(19.07, 72.87), (18.52, 73.85), (17.38, 78.48), (13.08, 80.27)]
    a = compute_recommendation(pts)
    b = compute_recommendation(list(pts))
    assert a == b
    assert a.to_dict() == b.to_dict()


@pytest.mark.parametrize("points", [[], [(20.6, 78.9)]])
def test_fewer_than_two_points_is_refused(points):
    with pytest.raises(InsufficientPointsError) as excinfo:
        compute_recommendation(points)
    assert excinfo.value.received == len(points)
    assert excinfo.value.required == 2
    assert isinstance(excinfo.value, RecommendationError)


def test_identical_points_are_scored_with_zero_distance():
    rec = compute_recommendation([(5.0, 5.0), (5.0, 5.0)])
    assert rec.total_distance_km == 0.0
    assert rec.statistics.spread == 0.0
    assert len(rec.ranking) == 12


def test_top_slices_ranking():
    rec = compute_recommendation([(0.0, 0.0), (0.0, 0.01)])
    assert rec.top(3) == rec.ranking[:3]
    assert rec.top(0) == ()


def test_large_cluster_recommends_bidirectional_dijkstra():
    # 9 clustered points: Bidirectional Dijkstra (85 + 20) wins
    pts = [(10.0 + i * 0.001, 10.0) for i in range(9)]
    rec = compute_recommendation(pts)
    assert rec.best.name == "Bidirectional Dijkstra"
    assert rec.top_explanation == EXPLANATIONS["Bidirectional Dijkstra"]


def test_ranking_to_frame_columns_and_order(london_paris):
    rec = compute_recommendation(london_paris)
    df = ranking_to_frame(rec.ranking)
    assert list(df.columns) == ["rank", "algorithm", "complexity", "base_score", "score", "adjustments"]
    assert list(df["rank"]) == list(range(1, 13))
    assert list(df["algorithm"]) == [s.name for s in rec.ranking]
    assert df["score"].is_monotonic_decreasing


def test_to_dict_is_json_friendly(london_paris):
    import json

    payload = compute_recommendation(london_paris).to_dict()
    text = json.dumps(payload)
    assert '"best"' in text
    assert len(payload["ranking"]) == 12
