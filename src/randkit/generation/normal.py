"""Normal and exponential deviates.

Engines backed by numpy use numpy's ziggurat routines through
``rng.generator``. Any other engine falls back to the Marsaglia polar
method and inverse-transform sampling over [0, 1) draws.
"""

import math
from typing import Any, Tuple

from randkit.engines.base import Engine
from randkit.engines.numpy_engines import NumpyEngine
from randkit.ir.distributions import Exponential, Normal
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerTrivial
from .floats import close_open


def polar_normal(rng: Engine) -> float:
    """Standard normal deviate by the Marsaglia polar method."""
    while True:
        u = 2.0 * close_open(rng) - 1.0
        v = 2.0 * close_open(rng) - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)


def inverse_exponential(rng: Engine) -> float:
    """Standard exponential deviate by inverse transform."""
    return -math.log1p(-close_open(rng))


def _normal_params(dist: Normal) -> Tuple[Any, float, float]:
    return (dist.target, dist.mean, dist.std)


def _exponential_params(dist: Exponential) -> Tuple[Any, float]:
    return (dist.target, dist.scale)


@resolver(RequestShape.DISTRIBUTION, Normal)
def resolve_normal(rng: Engine, dist: Normal, repetition: Repetition):
    if repetition is Repetition.ONE:
        return SamplerTrivial(dist, repetition)
    return SamplerTag("normal", _normal_params(dist), dist.eltype, repetition, source=dist)


@resolver(RequestShape.DISTRIBUTION, Exponential)
def resolve_exponential(rng: Engine, dist: Exponential, repetition: Repetition):
    if repetition is Repetition.ONE:
        return SamplerTrivial(dist, repetition)
    return SamplerTag("exponential", _exponential_params(dist), dist.eltype, repetition, source=dist)


def _scaled_normal(params: Tuple[Any, float, float], z: float) -> Any:
    target, mean, std = params
    return target(mean + std * z)


def _scaled_exponential(params: Tuple[Any, float], e: float) -> Any:
    target, scale = params
    return target(scale * e)


@drawer(RequestShape.TAG, "normal")
def draw_normal(rng: Engine, sampler: SamplerTag) -> Any:
    return _scaled_normal(sampler.data, polar_normal(rng))


@drawer(RequestShape.TAG, "normal", engine=NumpyEngine)
def draw_normal_numpy(rng: NumpyEngine, sampler: SamplerTag) -> Any:
    return _scaled_normal(sampler.data, float(rng.generator.standard_normal()))


@drawer(RequestShape.DISTRIBUTION, Normal)
def draw_normal_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    return _scaled_normal(_normal_params(sampler.value), polar_normal(rng))


@drawer(RequestShape.DISTRIBUTION, Normal, engine=NumpyEngine)
def draw_normal_trivial_numpy(rng: NumpyEngine, sampler: SamplerTrivial) -> Any:
    return _scaled_normal(_normal_params(sampler.value), float(rng.generator.standard_normal()))


@drawer(RequestShape.TAG, "exponential")
def draw_exponential(rng: Engine, sampler: SamplerTag) -> Any:
    return _scaled_exponential(sampler.data, inverse_exponential(rng))


@drawer(RequestShape.TAG, "exponential", engine=NumpyEngine)
def draw_exponential_numpy(rng: NumpyEngine, sampler: SamplerTag) -> Any:
    return _scaled_exponential(sampler.data, float(rng.generator.standard_exponential()))


@drawer(RequestShape.DISTRIBUTION, Exponential)
def draw_exponential_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    return _scaled_exponential(_exponential_params(sampler.value), inverse_exponential(rng))


@drawer(RequestShape.DISTRIBUTION, Exponential, engine=NumpyEngine)
def draw_exponential_trivial_numpy(rng: NumpyEngine, sampler: SamplerTrivial) -> Any:
    return _scaled_exponential(
        _exponential_params(sampler.value), float(rng.generator.standard_exponential())
    )
