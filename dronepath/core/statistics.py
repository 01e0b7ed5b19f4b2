"""
点集几何统计。

提供点数、包围盒跨度（spread）与密度（density）三个粗略指标，
供评分器使用。每次评分都从点集重新计算，不单独缓存。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

DENSITY_EPSILON = 0.0001  # spread 为 0（单点或重复点）时避免除零


@dataclass(frozen=True)
class GraphStatistics:
    """点集统计结果数据类。"""

    count: int
    spread: float  # 纬度范围 + 经度范围（度）
    density: float  # count / (spread + ε)


def compute_graph_statistics(points: Sequence[Tuple[float, float]]) -> GraphStatistics:
    """
    计算点集的 count / spread / density。

    Args:
        points: [(lat, lng), ...] 有序点列表

    Returns:
        GraphStatistics 对象

    Raises:
        ValueError: 点集为空（极值无定义）
    """
    if len(points) == 0:
        raise ValueError("Cannot compute statistics of an empty point set")

    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    lat_range = float(np.ptp(arr[:, 0]))
    lng_range = float(np.ptp(arr[:, 1]))

    count = int(arr.shape[0])
    spread = lat_range + lng_range
    density = count / (spread + DENSITY_EPSILON)

    return GraphStatistics(count=count, spread=spread, density=density)
