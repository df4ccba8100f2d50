"""Resolved sampler shapes.

A sampler is an immutable strategy for producing values of one element
type. There are exactly three shapes:

* ``SamplerType``: identifies a type; the type alone selects the algorithm.
* ``SamplerTrivial``: wraps the request value unchanged.
* ``SamplerTag``: holds data precomputed by the algorithm named by ``tag``.

Every sampler records the repetition it was resolved for.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
import numpy as np

from randkit.ir.types import HasEltype, eltype as eltype_of


class Repetition(str, Enum):
    """How many draws a sampler is being resolved for."""

    ONE = "one"
    MANY = "many"


class Sampler(HasEltype):
    """Base class for the three sampler shapes."""

    repetition: Repetition


@dataclass(frozen=True)
class SamplerType(Sampler):
    kind: Any
    repetition: Repetition = Repetition.MANY

    @property
    def eltype(self) -> Any:
        return self.kind


@dataclass(frozen=True)
class SamplerTrivial(Sampler):
    value: Any
    repetition: Repetition = Repetition.MANY

    @property
    def eltype(self) -> Any:
        return eltype_of(self.value)


@dataclass(frozen=True, eq=False)
class SamplerTag(Sampler):
    tag: str
    data: Any
    eltype: Any
    repetition: Repetition = Repetition.MANY
    source: Optional[Any] = None  # the request the data was computed from

    def __post_init__(self):
        _freeze(self.data)


def _freeze(data: Any) -> None:
    """Make numpy arrays in the payload read-only."""
    if isinstance(data, np.ndarray):
        data.flags.writeable = False
    elif isinstance(data, tuple):
        for item in data:
            if isinstance(item, np.ndarray):
                item.flags.writeable = False
