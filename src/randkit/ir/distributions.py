"""Distribution descriptors: what kind of value to sample.

Distributions are pure data. They carry a target type, up to two
auxiliary parameters and the deduced element type; turning them into
values is the job of the sampler protocol.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple
import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .types import HasEltype, deduce_type, eltype

FLOAT_TYPES = (float, np.float16, np.float32, np.float64)


class Distribution(BaseModel, HasEltype):
    """Generic distribution over ``target`` with 0, 1 or 2 parameters.

    ``Distribution(Pair, range(1, 11), str)`` describes pairs whose first
    element is drawn from the range and whose second is a random string
    element; its ``eltype`` is ``Pair[int, str]``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: Any = float
    params: Tuple[Any, ...] = ()
    eltype: Any = None

    def __init__(self, target: Any = float, *params: Any, **data: Any) -> None:
        if data.get("eltype") is None:
            data["eltype"] = deduce_type(target, *params)
        super().__init__(target=target, params=tuple(params), **data)

    @field_validator("params")
    @classmethod
    def validate_params(cls, v: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """At most two auxiliary parameters are supported."""
        if len(v) > 2:
            raise ValueError(f"Distribution takes at most 2 parameters, got {len(v)}")
        return v


class Uniform(Distribution):
    """Abstract tag for uniform distributions."""


class FloatInterval(Uniform):
    """Abstract tag for uniform floats over a unit-width interval."""

    @field_validator("target")
    @classmethod
    def validate_float_target(cls, v: Any) -> Any:
        if v not in FLOAT_TYPES:
            raise ValueError(f"{cls.__name__} requires a float type, got {v!r}")
        return v


class CloseOpen(FloatInterval):
    """Uniform floats in [0, 1)."""

    def __init__(self, target: Any = float, **data: Any) -> None:
        super().__init__(target, **data)


class Close1Open2(FloatInterval):
    """Uniform floats in [1, 2)."""

    def __init__(self, target: Any = float, **data: Any) -> None:
        super().__init__(target, **data)


class Normal(Distribution):
    """Normal (Gaussian) distribution."""

    mean: float = 0.0
    std: float = 1.0

    def __init__(self, target: Any = float, **data: Any) -> None:
        super().__init__(target, **data)

    @field_validator("target")
    @classmethod
    def validate_float_target(cls, v: Any) -> Any:
        if v not in FLOAT_TYPES:
            raise ValueError(f"Normal requires a float type, got {v!r}")
        return v

    @field_validator("std")
    @classmethod
    def validate_std(cls, v: float) -> float:
        """Ensure std is positive."""
        if v <= 0:
            raise ValueError("std must be positive")
        return v


class Exponential(Distribution):
    """Exponential distribution."""

    scale: float = 1.0  # 1/lambda

    def __init__(self, target: Any = float, **data: Any) -> None:
        super().__init__(target, **data)

    @field_validator("target")
    @classmethod
    def validate_float_target(cls, v: Any) -> Any:
        if v not in FLOAT_TYPES:
            raise ValueError(f"Exponential requires a float type, got {v!r}")
        return v

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: float) -> float:
        """Ensure scale is positive."""
        if v <= 0:
            raise ValueError("scale must be positive")
        return v


class Categorical(Distribution):
    """Weighted choice among a fixed set of values.

    Weights are relative; they are normalised when a sampler is built.
    Without weights every value is equally likely.
    """

    values: Tuple[Any, ...]
    weights: Optional[Tuple[float, ...]] = None

    def __init__(self, values: Any, weights: Any = None, **data: Any) -> None:
        values = tuple(values)
        if weights is not None:
            weights = tuple(float(w) for w in weights)
        super().__init__(eltype(values), values=values, weights=weights, **data)

    @model_validator(mode="after")
    def check_weights(self) -> "Categorical":
        """Ensure weights line up with values and have positive mass."""
        if not self.values:
            raise ValueError("Categorical needs at least one value")
        if self.weights is not None:
            if len(self.weights) != len(self.values):
                raise ValueError("Weights length must match values length")
            if any(w < 0 for w in self.weights):
                raise ValueError("Weights must be non-negative")
            if sum(self.weights) <= 0:
                raise ValueError("Weights must have a positive sum")
        return self
