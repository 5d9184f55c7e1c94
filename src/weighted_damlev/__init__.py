"""weighted-damlev package."""
from importlib.metadata import version, PackageNotFoundError

from .api import InvalidSequenceError, distance, distance_async
from .config import CostWeights, DistanceOptions, InvalidWeightError
from .core.engine import osa_distance

try:
    __version__ = version("weighted-damlev")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CostWeights",
    "DistanceOptions",
    "InvalidSequenceError",
    "InvalidWeightError",
    "distance",
    "distance_async",
    "osa_distance",
]
