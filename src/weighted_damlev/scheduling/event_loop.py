from __future__ import annotations

"""Deferred delivery on the running asyncio event loop."""

import asyncio
import logging
from typing import Optional

from .base_scheduler import BaseScheduler, SchedulerUnavailableError, Work

logger = logging.getLogger(__name__)


class EventLoopScheduler(BaseScheduler):
    """Run work on the next turn of an asyncio loop.

    Without an explicit loop the currently running one is used, so deferred
    calls must be made from inside a coroutine or loop callback.
    """

    name = "event_loop"

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self.loop = loop

    def submit(self, work: Work) -> None:
        loop = self.loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise SchedulerUnavailableError(
                    "Deferred distance needs a running event loop; pass "
                    "scheduler=ReadyQueueScheduler() from synchronous code."
                ) from exc
        logger.debug("Scheduling deferred work on %r", loop)
        loop.call_soon(work)


__all__ = ["EventLoopScheduler"]
