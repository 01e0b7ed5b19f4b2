"""
推荐入口：点集 -> 统计 -> 评分排序 -> 解释文本 + 路径长度。

compute_recommendation 是核心对外的唯一入口，纯函数、确定性、无 I/O。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd

from .errors import InsufficientPointsError
from .explain import SELECTION_REASON, select_explanation
from .geo import Coordinate, format_distance_km, total_path_distance_km
from .scoring import ScoredAlgorithm, rank_algorithms
from .statistics import GraphStatistics, compute_graph_statistics

logger = logging.getLogger(__name__)

MIN_POINTS = 2


@dataclass(frozen=True)
class Recommendation:
    """一次推荐计算的结果。"""

    points: Tuple[Coordinate, ...]
    statistics: GraphStatistics
    ranking: Tuple[ScoredAlgorithm, ...]
    top_explanation: str
    total_distance_km: float
    selection_reason: str = SELECTION_REASON

    @property
    def best(self) -> ScoredAlgorithm:
        return self.ranking[0]

    @property
    def iterations(self) -> int:
        # 演示口径：迭代次数即点数
        return len(self.points)

    @property
    def distance_label(self) -> str:
        return format_distance_km(self.total_distance_km)

    def top(self, k: int = 3) -> Tuple[ScoredAlgorithm, ...]:
        return self.ranking[: max(0, k)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "best": self.best.name,
            "complexity": self.best.descriptor.complexity_label,
            "total_distance_km": self.total_distance_km,
            "points": [list(p) for p in self.points],
            "statistics": {
                "count": self.statistics.count,
                "spread": self.statistics.spread,
                "density": self.statistics.density,
            },
            "ranking": [
                {"name": s.name, "score": s.score, "adjustments": list(s.adjustments)}
                for s in self.ranking
            ],
            "selection_reason": self.selection_reason,
            "explanation": self.top_explanation,
        }


def compute_recommendation(points: Sequence[Tuple[float, float]]) -> Recommendation:
    """
    计算算法推荐。

    Args:
        points: [(lat, lng), ...] 有序点列表，至少 2 个

    Returns:
        Recommendation 对象

    Raises:
        InsufficientPointsError: 点数少于 2，此时不做任何计算
    """
    if len(points) < MIN_POINTS:
        raise InsufficientPointsError(received=len(points), required=MIN_POINTS)

    coords = tuple(Coordinate(float(lat), float(lng)) for lat, lng in points)
    stats = compute_graph_statistics(coords)
    ranking = rank_algorithms(stats)
    best = ranking[0]

    rec = Recommendation(
        points=coords,
        statistics=stats,
        ranking=ranking,
        top_explanation=select_explanation(best.name),
        total_distance_km=total_path_distance_km(coords),
    )
    logger.info(
        "[RECOMMEND] n=%d spread=%.4f density=%.2f best=%s score=%d distance=%s",
        stats.count,
        stats.spread,
        stats.density,
        best.name,
        best.score,
        rec.distance_label,
    )
    return rec


def ranking_to_frame(ranking: Sequence[ScoredAlgorithm]) -> pd.DataFrame:
    """把排序结果转成 DataFrame（UI 表格 / CLI 输出共用）。"""
    rows: List[Dict[str, Any]] = []
    for rank, item in enumerate(ranking, start=1):
        rows.append(
            {
                "rank": rank,
                "algorithm": item.name,
                "complexity": item.descriptor.complexity_label,
                "base_score": item.descriptor.base_score,
                "score": item.score,
                "adjustments": ", ".join(item.adjustments),
            }
        )
    return pd.DataFrame(rows, columns=["rank", "algorithm", "complexity", "base_score", "score", "adjustments"])
