"""Cooperative implementation of Scheduler.

Nothing runs in the background: the owning event loop (the CLI input
loop) calls ``run_pending()`` between events, so timer callbacks execute
on the same thread as user actions and in deadline order.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import Callable

from storefront.domain.service.scheduler import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class LoopTask(ScheduledTask):

    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self._callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def run(self) -> None:
        # A task fires at most once.
        self._cancelled = True
        self._callback()


class LoopScheduler(Scheduler):

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, LoopTask]] = []
        self._sequence = itertools.count()

    # --- Scheduler interface --------------------------------------------------

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> LoopTask:
        deadline = self._clock() + delay_ms / 1000
        task = LoopTask(deadline, callback)
        heapq.heappush(self._queue, (deadline, next(self._sequence), task))
        return task

    # --- Loop integration -----------------------------------------------------

    def run_pending(self) -> int:
        """Run every live task whose deadline has passed; return how many ran."""
        now = self._clock()
        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            logger.debug("Running task due at %.3f", task.deadline)
            task.run()
            ran += 1
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, task in self._queue if not task.cancelled)
