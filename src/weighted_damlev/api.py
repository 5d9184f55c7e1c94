from __future__ import annotations

"""Public entry points: argument checks and optional deferred delivery."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Callable, Mapping, Optional, Union

from .config import CostWeights
from .core.engine import Number, osa_distance
from .scheduling import BaseScheduler, get_scheduler

logger = logging.getLogger(__name__)

WeightsLike = Union[CostWeights, Mapping[str, Any], None]
CompletionHandler = Callable[[Number, Any, Any], None]


class InvalidSequenceError(TypeError):
    """Raised when an argument is not an indexable sequence of symbols."""


def ensure_sequence(value: Any, role: str) -> Sequence:
    """Return *value* if it can be compared symbol by symbol."""

    if isinstance(value, (str, bytes, bytearray, Sequence)):
        return value
    raise InvalidSequenceError(
        f"{role} must be a sequence of symbols, got {type(value).__name__}"
    )


def distance(
    source: Any,
    target: Any,
    weights: WeightsLike = None,
    on_complete: Optional[CompletionHandler] = None,
    *,
    index_aligned: bool = True,
    scheduler: Optional[BaseScheduler] = None,
) -> Optional[Number]:
    """Weighted Damerau-Levenshtein distance from *source* to *target*.

    Without *on_complete* the distance is returned. With it, nothing is
    returned and ``on_complete(result, source, target)`` is called once from
    *scheduler* (the running event loop by default) after this call returns.
    Arguments are checked before anything is scheduled.
    """

    ensure_sequence(source, "source")
    ensure_sequence(target, "target")
    cost_weights = CostWeights.coerce(weights)

    if on_complete is None:
        return osa_distance(source, target, cost_weights, index_aligned=index_aligned)

    if not callable(on_complete):
        raise TypeError("on_complete must be callable")

    def deliver() -> None:
        result = osa_distance(source, target, cost_weights, index_aligned=index_aligned)
        on_complete(result, source, target)

    if scheduler is None:
        scheduler = get_scheduler()
    scheduler.submit(deliver)
    logger.debug("Deferred distance for sequences of length %d and %d", len(source), len(target))
    return None


async def distance_async(
    source: Any,
    target: Any,
    weights: WeightsLike = None,
    *,
    index_aligned: bool = True,
) -> Number:
    """Coroutine form: yield to the loop once, then compute."""

    ensure_sequence(source, "source")
    ensure_sequence(target, "target")
    cost_weights = CostWeights.coerce(weights)
    await asyncio.sleep(0)
    return osa_distance(source, target, cost_weights, index_aligned=index_aligned)
