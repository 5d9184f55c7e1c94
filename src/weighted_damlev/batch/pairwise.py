from __future__ import annotations

"""Distances over many pairs: pairwise matrices and JSONL pair files."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..api import WeightsLike, ensure_sequence
from ..config import CostWeights, DistanceOptions
from ..core.engine import Number, osa_distance
from ..utils import jsonio

logger = logging.getLogger(__name__)

Pair = Tuple[Any, Any]


class MalformedPairError(ValueError):
    """Raised when a pair-file row lacks a usable source or target."""


@dataclass
class PairRecord:
    source: Any
    target: Any
    distance: Number

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        for key in ("source", "target"):
            if isinstance(payload[key], tuple):
                payload[key] = list(payload[key])
        return payload


def pairwise_distances(
    sources: Sequence[Any],
    targets: Optional[Sequence[Any]] = None,
    weights: WeightsLike = None,
    *,
    index_aligned: bool = True,
) -> np.ndarray:
    """Matrix whose ``[a, b]`` entry is the distance from ``sources[a]`` to ``targets[b]``.

    *targets* defaults to *sources*. Integer weights give an ``int64`` matrix,
    anything else ``float64``.
    """

    cost_weights = CostWeights.coerce(weights)
    columns = sources if targets is None else targets
    for item in sources:
        ensure_sequence(item, "source")
    if targets is not None:
        for item in columns:
            ensure_sequence(item, "target")
    dtype = np.int64 if cost_weights.is_integral else np.float64
    matrix = np.zeros((len(sources), len(columns)), dtype=dtype)
    for a, source in enumerate(sources):
        for b, target in enumerate(columns):
            matrix[a, b] = osa_distance(
                source, target, cost_weights, index_aligned=index_aligned
            )
    return matrix


def score_pairs(
    pairs: Iterable[Pair], options: Optional[DistanceOptions] = None
) -> List[PairRecord]:
    options = options or DistanceOptions()
    records: List[PairRecord] = []
    for source, target in pairs:
        ensure_sequence(source, "source")
        ensure_sequence(target, "target")
        value = osa_distance(
            source, target, options.weights, index_aligned=options.index_aligned
        )
        records.append(PairRecord(source=source, target=target, distance=value))
    logger.debug("Scored %d pair(s)", len(records))
    return records


def _symbols(value: Any, path: Path, line_number: int, key: str) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return tuple(value)
    raise MalformedPairError(
        f"{path}:{line_number}: '{key}' must be a string or a list of symbols"
    )


def load_pairs(path: Path) -> List[Pair]:
    """Read ``{"source": ..., "target": ...}`` rows from a JSONL file."""

    if not path.exists():
        raise FileNotFoundError(f"Pair file not found at {path}")
    pairs: List[Pair] = []
    for line_number, row in jsonio.iter_jsonl(path):
        if not isinstance(row, dict) or "source" not in row or "target" not in row:
            raise MalformedPairError(
                f"{path}:{line_number}: expected an object with 'source' and 'target'"
            )
        pairs.append(
            (
                _symbols(row["source"], path, line_number, "source"),
                _symbols(row["target"], path, line_number, "target"),
            )
        )
    return pairs


def write_results(path: Path, records: Iterable[PairRecord]) -> None:
    jsonio.write_jsonl(path, [record.to_dict() for record in records])
