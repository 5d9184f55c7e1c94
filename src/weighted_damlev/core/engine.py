from __future__ import annotations

"""Weighted Damerau-Levenshtein distance (optimal string alignment)."""

from typing import Sequence, Union

from ..config import CostWeights

Number = Union[int, float]


def osa_distance(
    source: Sequence[object],
    target: Sequence[object],
    weights: CostWeights,
    *,
    index_aligned: bool = True,
) -> Number:
    """Return the weighted edit cost of turning *source* into *target*.

    Substitutions, adjacent swaps, deletions and insertions are priced by
    *weights*. A swap reaches back two rows, so three rows of the
    cost matrix are kept: ``row0`` two rows back,
    ``row1`` the previous row and ``row2`` the row being filled.

    At the start of outer step ``i``, ``row1[j]`` holds the cost of turning
    ``source[:i]`` into ``target[:j]``.

    With ``index_aligned`` the substitution test compares ``source[i]`` with
    ``target[i]``, which keeps the historical values (``Floor`` to ``Flower``
    costs 3); an index past the end of *target* is a mismatch. Without it the
    test is the usual ``source[i] != target[j]``.

    Weights must be non-negative; the result is undefined otherwise.
    """

    swap, substitute, insert, delete = (
        weights.swap,
        weights.substitute,
        weights.insert,
        weights.delete,
    )
    if not weights.is_integral:
        swap, substitute, insert, delete = map(float, (swap, substitute, insert, delete))

    source_len = len(source)
    target_len = len(target)
    width = target_len + 1

    row0 = [0] * width
    row1 = [j * insert for j in range(width)]
    row2 = [0] * width

    for i in range(source_len):
        symbol = source[i]
        row2[0] = (i + 1) * delete
        if index_aligned:
            mismatch = i >= target_len or symbol != target[i]
        for j in range(target_len):
            if not index_aligned:
                mismatch = symbol != target[j]
            cost = row1[j] + substitute * mismatch
            # swap
            if i > 0 and j > 0 and source[i - 1] == target[j] and symbol == target[j - 1]:
                candidate = row0[j - 1] + swap
                if candidate < cost:
                    cost = candidate
            # deletion
            candidate = row1[j + 1] + delete
            if candidate < cost:
                cost = candidate
            # insertion
            candidate = row2[j] + insert
            if candidate < cost:
                cost = candidate
            row2[j + 1] = cost
        row0, row1, row2 = row1, row2, row0

    return row1[target_len]
