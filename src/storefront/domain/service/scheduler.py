"""Abstract single-shot timer used by the checkout flow.

Defined in the domain layer so the checkout state machine never depends
on a concrete event loop. Implementations live in the infrastructure
layer (and as fakes in the tests).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once the task can no longer run (cancelled or already fired)."""


class Scheduler(ABC):

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run *callback* once, *delay_ms* milliseconds from now."""
