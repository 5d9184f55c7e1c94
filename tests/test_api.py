from __future__ import annotations

import asyncio
from typing import Any, List, Tuple

import pytest

from weighted_damlev import InvalidSequenceError, InvalidWeightError, distance, distance_async
from weighted_damlev.scheduling import ReadyQueueScheduler, SchedulerUnavailableError

Call = Tuple[Any, Any, Any]


def test_sync_mode_returns_distance() -> None:
    assert distance("Floor", "Flower") == 3
    assert distance("Floor", "Flower", index_aligned=False) == 2
    assert distance("kitten", "sitting", {"swap": 1, "substitute": 1}) == 3


def test_weight_mapping_defaults_and_zero() -> None:
    assert distance("ab", "ba", {"swap": 0}) == 0
    assert distance("ab", "ba", {"swap": None}) == 1


def test_negative_weight_rejected_before_computation() -> None:
    with pytest.raises(InvalidWeightError):
        distance("a", "b", {"delete": -1})


@pytest.mark.parametrize("bad", [12, None, 3.5, {"a": 1}, {1, 2}])
def test_non_sequence_rejected(bad: Any) -> None:
    with pytest.raises(InvalidSequenceError):
        distance(bad, "abc")
    with pytest.raises(TypeError):
        distance("abc", bad)


def test_deferred_mode_waits_for_the_queue() -> None:
    queue = ReadyQueueScheduler()
    calls: List[Call] = []

    returned = distance(
        "Floor",
        "Flower",
        on_complete=lambda *args: calls.append(args),
        scheduler=queue,
    )

    assert returned is None
    assert calls == []
    assert queue.run_pending() == 1
    assert calls == [(3, "Floor", "Flower")]
    assert queue.run_pending() == 0
    assert len(calls) == 1


def test_deferred_result_matches_sync_result() -> None:
    queue = ReadyQueueScheduler()
    calls: List[Call] = []
    weights = {"swap": 2, "substitute": 3, "insert": 1, "delete": 2}
    source, target = list("conversation"), list("conservation")

    distance(source, target, weights, lambda *args: calls.append(args), scheduler=queue)
    queue.run_pending()

    assert calls[0][0] == distance(source, target, weights)
    assert calls[0][1] is source
    assert calls[0][2] is target


def test_invalid_arguments_raise_before_scheduling() -> None:
    queue = ReadyQueueScheduler()
    with pytest.raises(InvalidSequenceError):
        distance(5, "a", on_complete=lambda *args: None, scheduler=queue)
    with pytest.raises(TypeError):
        distance("a", "b", on_complete=5, scheduler=queue)  # type: ignore[arg-type]
    assert len(queue) == 0


def test_deferred_mode_on_running_event_loop() -> None:
    calls: List[Call] = []

    async def scenario() -> None:
        result = distance("ab", "ba", on_complete=lambda *args: calls.append(args))
        assert result is None
        assert calls == []
        await asyncio.sleep(0)
        assert calls == [(1, "ab", "ba")]

    asyncio.run(scenario())
    assert len(calls) == 1


def test_deferred_mode_without_event_loop() -> None:
    with pytest.raises(SchedulerUnavailableError):
        distance("a", "b", on_complete=lambda *args: None)


def test_distance_async() -> None:
    assert asyncio.run(distance_async("kitten", "sitting")) == 3
    assert asyncio.run(distance_async("ab", "ba", {"swap": 0.5})) == pytest.approx(0.5)


def test_string_weights_rejected() -> None:
    with pytest.raises(InvalidWeightError):
        distance("ab", "ba", {"swap": "0"})
    with pytest.raises(InvalidWeightError):
        distance("a", "b", {"substitute": "1.5", "insert": "9", "delete": "9"})


def test_empty_queue_scheduler_receives_work() -> None:
    queue = ReadyQueueScheduler()
    assert len(queue) == 0

    distance("ab", "ba", on_complete=lambda *args: None, scheduler=queue)

    assert len(queue) == 1


def test_distance_async_checks_arguments() -> None:
    with pytest.raises(InvalidSequenceError):
        asyncio.run(distance_async(42, "abc"))
    with pytest.raises(InvalidWeightError):
        asyncio.run(distance_async("ab", "ba", {"insert": -1}))
