from .pairwise import (
    MalformedPairError,
    PairRecord,
    load_pairs,
    pairwise_distances,
    score_pairs,
    write_results,
)
from . import reports

__all__ = [
    "MalformedPairError",
    "PairRecord",
    "load_pairs",
    "pairwise_distances",
    "score_pairs",
    "write_results",
    "reports",
]
