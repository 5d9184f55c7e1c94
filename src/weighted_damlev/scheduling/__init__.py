from __future__ import annotations

"""Scheduler registry."""

from typing import Dict, Type

from .base_scheduler import BaseScheduler, SchedulerUnavailableError, Work
from .event_loop import EventLoopScheduler
from .ready_queue import ReadyQueueScheduler

_SCHEDULERS: Dict[str, Type[BaseScheduler]] = {
    EventLoopScheduler.name: EventLoopScheduler,
    ReadyQueueScheduler.name: ReadyQueueScheduler,
}

DEFAULT_SCHEDULER = EventLoopScheduler.name


def get_scheduler(name: str = DEFAULT_SCHEDULER) -> BaseScheduler:
    try:
        scheduler_cls = _SCHEDULERS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown scheduler '{name}'") from exc
    return scheduler_cls()


def register_scheduler(scheduler_cls: Type[BaseScheduler]) -> None:
    """Register a new scheduler class by its declared name."""

    if not getattr(scheduler_cls, "name", None):  # pragma: no cover - defensive
        raise ValueError("Scheduler class must define a name")
    _SCHEDULERS[scheduler_cls.name] = scheduler_cls


def available_schedulers() -> Dict[str, Type[BaseScheduler]]:
    """Return the currently registered scheduler mapping."""

    return dict(_SCHEDULERS)


__all__ = [
    "BaseScheduler",
    "EventLoopScheduler",
    "ReadyQueueScheduler",
    "SchedulerUnavailableError",
    "Work",
    "available_schedulers",
    "get_scheduler",
    "register_scheduler",
]
