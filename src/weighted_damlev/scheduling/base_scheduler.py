from __future__ import annotations

"""Scheduler base class."""

from typing import Callable

Work = Callable[[], None]


class SchedulerUnavailableError(RuntimeError):
    """Raised when deferred work cannot be queued on the host."""


class BaseScheduler:
    name: str = "base"

    def submit(self, work: Work) -> None:  # pragma: no cover - interface
        """Queue *work* to run after the current call stack has unwound."""

        raise NotImplementedError
