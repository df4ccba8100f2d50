"""Request descriptors: distributions and element types."""

from .types import Pair, HasEltype, eltype, deduce_type, is_concrete, arity
from .distributions import (
    Distribution,
    Uniform,
    FloatInterval,
    CloseOpen,
    Close1Open2,
    Normal,
    Exponential,
    Categorical,
)

__all__ = [
    "Pair",
    "HasEltype",
    "eltype",
    "deduce_type",
    "is_concrete",
    "arity",
    "Distribution",
    "Uniform",
    "FloatInterval",
    "CloseOpen",
    "Close1Open2",
    "Normal",
    "Exponential",
    "Categorical",
]
