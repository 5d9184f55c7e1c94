from __future__ import annotations

"""Summaries of scored pair batches."""

from pathlib import Path
from statistics import mean
from typing import Any, Dict, Sequence

from ..utils import jsonio
from .pairwise import PairRecord


def summarise(records: Sequence[PairRecord]) -> Dict[str, Any]:
    if not records:
        return {
            "num_pairs": 0,
            "mean_distance": 0.0,
            "min_distance": None,
            "max_distance": None,
            "zero_distance_rate": 0.0,
        }

    distances = [record.distance for record in records]
    zeros = sum(1 for value in distances if value == 0)
    return {
        "num_pairs": len(records),
        "mean_distance": float(mean(distances)),
        "min_distance": min(distances),
        "max_distance": max(distances),
        "zero_distance_rate": zeros / len(records),
    }


def write_summary(path: Path, records: Sequence[PairRecord]) -> Path:
    jsonio.write_json(
        path,
        {
            "summary": summarise(records),
            "records": [record.to_dict() for record in records],
        },
    )
    return path
