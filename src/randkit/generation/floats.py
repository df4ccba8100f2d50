"""Uniform floating point generation over [0, 1) and [1, 2)."""

from typing import Any
import numpy as np

from randkit.engines.base import Engine
from randkit.ir.distributions import Close1Open2, CloseOpen
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerTrivial, SamplerType

# (significand bits used for [0,1), mantissa bits for [1,2))
FLOAT_BITS = {
    float: (53, 52),
    np.float64: (53, 52),
    np.float32: (24, 23),
    np.float16: (11, 10),
}


def close_open(rng: Engine, kind: Any = float) -> Any:
    """Uniform value of float type ``kind`` in [0, 1)."""
    bits, _ = FLOAT_BITS[kind]
    return kind(rng.next_bits(bits) * 2.0 ** -bits)


def close1_open2(rng: Engine, kind: Any = float) -> Any:
    """Uniform value of float type ``kind`` in [1, 2), filling the mantissa directly."""
    _, bits = FLOAT_BITS[kind]
    return kind(1.0 + rng.next_bits(bits) * 2.0 ** -bits)


def draw_float_type(rng: Engine, sampler: SamplerType) -> Any:
    return close_open(rng, sampler.kind)


for _float_type in FLOAT_BITS:
    drawer(RequestShape.TYPE, _float_type)(draw_float_type)


@drawer(RequestShape.TYPE, complex)
def draw_complex(rng: Engine, sampler: SamplerType) -> complex:
    """Real and imaginary parts drawn independently from [0, 1)."""
    return complex(close_open(rng), close_open(rng))


@resolver(RequestShape.DISTRIBUTION, CloseOpen)
@resolver(RequestShape.DISTRIBUTION, Close1Open2)
def resolve_float_interval(rng: Engine, dist: Any, repetition: Repetition):
    """Interval tags collapse to the float type they produce."""
    return SamplerTag(type(dist).__name__, dist.target, dist.eltype, repetition, source=dist)


@drawer(RequestShape.TAG, "CloseOpen")
def draw_close_open(rng: Engine, sampler: SamplerTag) -> Any:
    return close_open(rng, sampler.data)


@drawer(RequestShape.TAG, "Close1Open2")
def draw_close1_open2(rng: Engine, sampler: SamplerTag) -> Any:
    return close1_open2(rng, sampler.data)


@drawer(RequestShape.DISTRIBUTION, CloseOpen)
def draw_close_open_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    return close_open(rng, sampler.value.target)


@drawer(RequestShape.DISTRIBUTION, Close1Open2)
def draw_close1_open2_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    return close1_open2(rng, sampler.value.target)
