"""
无人机标记动画 - 显式状态机 + 调度器抽象

状态：
- IDLE：未开始或已取消
- ANIMATING：正在沿路径移动（index 为当前显示的点）
- DONE：路径走完

开始新动画或重置会取消尚未执行的步骤；旧动画遗留的回调通过
generation 计数识别并丢弃，不会改动当前状态。
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from .geo import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_STEP_S = 0.9


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> int:
        ...

    def cancel(self, handle: int) -> None:
        ...


class PollingScheduler:
    """
    由调用方轮询驱动的调度器。

    call_later 只登记回调；run_pending() 在时钟到点后按到期顺序执行。
    Streamlit 端在定时重跑的 fragment 里轮询，测试里注入假时钟。
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._cancelled: set[int] = set()
        self._seq = itertools.count()
        # 执行回调期间以其到期时间为基准登记后续任务，轮询迟到时可以补齐
        self._running_due: Optional[float] = None

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> int:
        handle = next(self._seq)
        base = self._running_due if self._running_due is not None else self._clock()
        heapq.heappush(self._queue, (base + max(0.0, delay_s), handle, callback))
        return handle

    def cancel(self, handle: int) -> None:
        self._cancelled.add(handle)

    def pending(self) -> int:
        return sum(1 for _, h, _ in self._queue if h not in self._cancelled)

    def run_pending(self) -> int:
        """执行所有已到期的回调，返回执行数量。回调内新登记的任务若已到期也会执行。"""
        fired = 0
        while self._queue and self._queue[0][0] <= self._clock():
            due, handle, callback = heapq.heappop(self._queue)
            if handle in self._cancelled:
                self._cancelled.discard(handle)
                continue
            self._running_due = due
            try:
                callback()
            finally:
                self._running_due = None
            fired += 1
        return fired


class AnimationState(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    DONE = "done"


class MarkerAnimation:
    """沿路径逐点移动标记，每步间隔 step_s 秒。"""

    def __init__(self, scheduler: Scheduler, step_s: float = DEFAULT_STEP_S):
        if step_s <= 0:
            raise ValueError(f"step_s must be positive, got {step_s}")
        self.scheduler = scheduler
        self.step_s = step_s
        self.state = AnimationState.IDLE
        self.index: int = -1
        self._path: Tuple[Coordinate, ...] = ()
        self._handle: Optional[int] = None
        self._generation = 0

    @property
    def position(self) -> Optional[Coordinate]:
        if self.state == AnimationState.IDLE or not self._path:
            return None
        return self._path[min(self.index, len(self._path) - 1)]

    @property
    def path(self) -> Tuple[Coordinate, ...]:
        return self._path

    def start(self, path: Sequence[Tuple[float, float]]) -> None:
        self._cancel_pending()
        self._generation += 1
        self._path = tuple(Coordinate(float(lat), float(lng)) for lat, lng in path)

        if not self._path:
            self.state = AnimationState.DONE
            self.index = -1
            return

        self.state = AnimationState.ANIMATING
        self.index = 0
        logger.debug("[ANIM] start gen=%d points=%d", self._generation, len(self._path))
        self._schedule_next()

    def cancel(self) -> None:
        self._cancel_pending()
        self._generation += 1
        self.state = AnimationState.IDLE
        self.index = -1
        self._path = ()

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _schedule_next(self) -> None:
        generation = self._generation
        self._handle = self.scheduler.call_later(self.step_s, lambda: self._step(generation))

    def _step(self, generation: int) -> None:
        if generation != self._generation or self.state != AnimationState.ANIMATING:
            return
        self._handle = None
        self.index += 1
        if self.index >= len(self._path):
            self.state = AnimationState.DONE
            self.index = len(self._path) - 1
            logger.debug("[ANIM] done gen=%d", generation)
            return
        self._schedule_next()
