"""
大圆距离与路径长度工具。

坐标统一为 (lat, lng) 十进制度数，不做范围校验。
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence, Tuple

EARTH_RADIUS_KM = 6371.0  # 地球平均半径


class Coordinate(NamedTuple):
    """地图点击得到的一个坐标（不可变）。"""

    lat: float
    lng: float


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    计算两点间的大圆距离（单位：km）。

    使用 2R·asin(√a) 形式的 haversine 公式，R = 6371 km。

    Args:
        lat1, lon1: 起点纬度、经度（度）
        lat2, lon2: 终点纬度、经度（度）

    Returns:
        距离（km）
    """
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlambda / 2) ** 2
    )
    # 浮点误差可能让 a 略大于 1
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, a)))


def path_segments(points: Sequence[Tuple[float, float]]) -> List[Tuple[Coordinate, Coordinate]]:
    """返回相邻点对 [(p0, p1), (p1, p2), ...]，点数 < 2 时为空。"""
    coords = [Coordinate(float(lat), float(lng)) for lat, lng in points]
    return list(zip(coords[:-1], coords[1:]))


def total_path_distance_km(points: Sequence[Tuple[float, float]]) -> float:
    """
    按插入顺序累加相邻点之间的 haversine 距离。

    点数 < 2 时返回 0.0。
    """
    total = 0.0
    for a, b in path_segments(points):
        total += haversine_km(a.lat, a.lng, b.lat, b.lng)
    return total


def format_distance_km(distance_km: float) -> str:
    return f"{distance_km:.2f} km"
