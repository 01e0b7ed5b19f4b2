"""
路线会话 - 显式持有点集、最近一次推荐与无人机动画

替代全局可变状态：UI 把一个 RouteSession 放进 session_state，
每个操作都通过它完成，核心逻辑可脱离渲染层单独测试。
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .animation import DEFAULT_STEP_S, MarkerAnimation, PollingScheduler, Scheduler
from .geo import Coordinate, path_segments
from .points import PointSet
from .recommend import Recommendation, compute_recommendation
from .scoring import ScoredAlgorithm

logger = logging.getLogger(__name__)


class RouteSession:
    """单个用户会话（仅内存，不持久化）。"""

    def __init__(self, scheduler: Optional[Scheduler] = None, step_s: float = DEFAULT_STEP_S):
        self.points = PointSet()
        self.last_recommendation: Optional[Recommendation] = None
        self.animation = MarkerAnimation(scheduler or PollingScheduler(), step_s=step_s)

    def add_point(self, lat: float, lng: float) -> Coordinate:
        coord = self.points.append(lat, lng)
        logger.debug("[SESSION] add point #%d (%.5f, %.5f)", len(self.points), coord.lat, coord.lng)
        return coord

    def compute(self) -> Recommendation:
        """
        对当前点集计算推荐并启动动画。

        Raises:
            InsufficientPointsError: 点数不足；此时会话状态保持不变
        """
        snapshot = self.points.snapshot()
        rec = compute_recommendation(snapshot)
        self.last_recommendation = rec
        self.animation.start(snapshot)
        return rec

    def top_algorithms(self, k: int = 3) -> Tuple[ScoredAlgorithm, ...]:
        if self.last_recommendation is None:
            return ()
        return self.last_recommendation.top(k)

    def path_segments(self) -> List[Tuple[Coordinate, Coordinate]]:
        return path_segments(self.points.snapshot())

    def reset(self) -> None:
        self.points.clear()
        self.last_recommendation = None
        self.animation.cancel()
        logger.info("[SESSION] reset")
