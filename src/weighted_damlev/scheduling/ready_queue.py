from __future__ import annotations

"""Explicitly drained FIFO of deferred work."""

import logging
from collections import deque
from typing import Deque

from .base_scheduler import BaseScheduler, Work

logger = logging.getLogger(__name__)


class ReadyQueueScheduler(BaseScheduler):
    """Hold submitted work until the host calls :meth:`run_pending`."""

    name = "ready_queue"

    def __init__(self) -> None:
        self._ready: Deque[Work] = deque()

    def __len__(self) -> int:
        return len(self._ready)

    def submit(self, work: Work) -> None:
        self._ready.append(work)

    def run_pending(self) -> int:
        """Run the work queued so far and return how many items ran.

        Work submitted while draining waits for the next call. An exception
        from a work item propagates; the items behind it stay queued.
        """

        batch = len(self._ready)
        ran = 0
        while ran < batch:
            work = self._ready.popleft()
            ran += 1
            work()
        logger.debug("Ran %d deferred item(s), %d still queued", ran, len(self._ready))
        return ran


__all__ = ["ReadyQueueScheduler"]
