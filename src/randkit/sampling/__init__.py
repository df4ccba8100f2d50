"""Sampler protocol: sampler shapes, registry and resolution."""

from .samplers import Repetition, Sampler, SamplerType, SamplerTrivial, SamplerTag
from .errors import (
    RandkitError,
    UnsupportedRequestError,
    RepetitionMismatchError,
    InvalidDimensionsError,
    UniverseExhaustedError,
    EmptyCollectionError,
)
from .registry import (
    RequestShape,
    register_resolver,
    register_draw,
    resolver,
    drawer,
    find_resolver,
    find_draw,
    list_resolvers,
    list_draws,
)
from .resolve import resolve

__all__ = [
    "Repetition",
    "Sampler",
    "SamplerType",
    "SamplerTrivial",
    "SamplerTag",
    "RandkitError",
    "UnsupportedRequestError",
    "RepetitionMismatchError",
    "InvalidDimensionsError",
    "UniverseExhaustedError",
    "EmptyCollectionError",
    "RequestShape",
    "register_resolver",
    "register_draw",
    "resolver",
    "drawer",
    "find_resolver",
    "find_draw",
    "list_resolvers",
    "list_draws",
    "resolve",
]
