"""Ordered, append-only point collection backing a route session."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .geo import Coordinate


class PointSet:
    """
    用户在地图上依次点击得到的点序列。

    插入顺序即路径顺序；只支持追加与整体清空。
    """

    def __init__(self, points: List[Tuple[float, float]] | None = None):
        self._points: List[Coordinate] = []
        for lat, lng in points or []:
            self.append(lat, lng)

    def append(self, lat: float, lng: float) -> Coordinate:
        coord = Coordinate(float(lat), float(lng))
        self._points.append(coord)
        return coord

    def clear(self) -> None:
        self._points.clear()

    def snapshot(self) -> Tuple[Coordinate, ...]:
        """不可变快照，评分与动画都基于它，避免后续追加影响已有结果。"""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.snapshot())

    def __getitem__(self, idx: int) -> Coordinate:
        return self._points[idx]

    def __repr__(self) -> str:
        return f"PointSet(n={len(self._points)})"
