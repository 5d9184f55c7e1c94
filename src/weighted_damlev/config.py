from __future__ import annotations

"""Cost weights, distance options, and weight-profile loading."""

import numbers
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    ValidationError,
    field_validator,
)

Weight = Union[NonNegativeInt, NonNegativeFloat]

DEFAULT_WEIGHT = 1
WEIGHT_NAMES = ("swap", "substitute", "insert", "delete")


class InvalidWeightError(ValueError):
    """Raised when a cost weight is negative or not a number."""


class WeightsFileNotFoundError(FileNotFoundError):
    """Raised when a weight profile cannot be located."""


class CostWeights(BaseModel):
    """Multipliers for the four edit operations.

    A weight that is missing or explicitly ``None`` falls back to 1. Zero is
    a legal weight and is kept as given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    swap: Weight = DEFAULT_WEIGHT
    substitute: Weight = DEFAULT_WEIGHT
    insert: Weight = DEFAULT_WEIGHT
    delete: Weight = DEFAULT_WEIGHT

    @field_validator("swap", "substitute", "insert", "delete", mode="before")
    @classmethod
    def _unset_means_default(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_WEIGHT
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"weights must be numbers, got {type(value).__name__}")
        return value

    @property
    def is_integral(self) -> bool:
        return all(isinstance(getattr(self, name), int) for name in WEIGHT_NAMES)

    @classmethod
    def coerce(
        cls, value: Union["CostWeights", Mapping[str, Any], None]
    ) -> "CostWeights":
        """Build weights from ``None``, a mapping, or an existing instance."""

        if value is None:
            return cls()
        if isinstance(value, CostWeights):
            return value
        if not isinstance(value, Mapping):
            raise InvalidWeightError(
                f"Weights must be a mapping or CostWeights, got {type(value).__name__}"
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise InvalidWeightError(f"Invalid cost weights: {exc}") from exc

    def as_dict(self) -> dict[str, Weight]:
        return {name: getattr(self, name) for name in WEIGHT_NAMES}


class DistanceOptions(BaseModel):
    """Weights plus the substitution comparison variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    weights: CostWeights = Field(default_factory=CostWeights)
    index_aligned: bool = True

    @field_validator("weights", mode="before")
    @classmethod
    def _default_weights(cls, value: Any) -> Any:
        return CostWeights() if value is None else value


def options_from_mapping(data: Any) -> DistanceOptions:
    """Interpret a decoded profile, flat or with a ``weights:`` block."""

    if data is None:
        return DistanceOptions()
    if not isinstance(data, Mapping):
        raise ValueError("Weight profile must be a mapping")
    payload = dict(data)
    if "weights" not in payload:
        weights = {name: payload.pop(name) for name in WEIGHT_NAMES if name in payload}
        payload["weights"] = weights
    try:
        return DistanceOptions.model_validate(payload)
    except ValidationError as exc:
        raise InvalidWeightError(f"Invalid weight profile: {exc}") from exc


def load_weights(path: Path) -> DistanceOptions:
    """Load a YAML weight profile from *path*."""

    if not path.exists():
        raise WeightsFileNotFoundError(f"Weight profile not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed weight profile {path}: {exc}") from exc
    return options_from_mapping(data)


PROFILES_DIR = Path(__file__).resolve().parents[2] / "data" / "weights"


def list_profiles(directory: Path = PROFILES_DIR) -> List[str]:
    """Return the names of the YAML profiles stored in *directory*."""

    return sorted(p.stem for p in directory.glob("*.yaml"))


def load_profile(name: str, *, directory: Path = PROFILES_DIR) -> DistanceOptions:
    """Load a named profile from the profiles directory."""

    return load_weights(directory / f"{name}.yaml")


def resolve_options(
    *,
    weights_file: Optional[Path] = None,
    profile: Optional[str] = None,
    overrides: Optional[Mapping[str, Optional[Weight]]] = None,
    index_aligned: Optional[bool] = None,
) -> DistanceOptions:
    """Combine a profile file with explicitly supplied values.

    Explicit overrides win over the file; ``None`` overrides are ignored.
    A *weights_file* takes precedence over a named *profile*.
    """

    if weights_file is not None:
        base = load_weights(weights_file)
    elif profile is not None:
        base = load_profile(profile)
    else:
        base = DistanceOptions()
    merged = base.weights.as_dict()
    for name, value in (overrides or {}).items():
        if value is not None:
            merged[name] = value
    return DistanceOptions(
        weights=CostWeights.coerce(merged),
        index_aligned=base.index_aligned if index_aligned is None else index_aligned,
    )
