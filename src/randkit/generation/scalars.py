"""Scalar generation: one value from a sampler."""

from typing import Any, Optional
import numpy as np

from randkit.engines.base import Engine
from randkit.engines.default import get_default_engine
from randkit.sampling.errors import UnsupportedRequestError
from randkit.sampling.registry import RequestShape, drawer, find_draw
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition, Sampler, SamplerType


def draw_sampler(rng: Engine, sampler: Sampler) -> Any:
    """
    Produce one value from a resolved sampler.

    Args:
        rng: Engine to consume bits from
        sampler: Resolved sampler (left unchanged)

    Returns:
        A value of ``sampler.eltype``
    """
    func = find_draw(rng, sampler)
    if func is None:
        raise UnsupportedRequestError(sampler.eltype, sampler.repetition)
    return func(rng, sampler)


def draw(request: Any = float, rng: Optional[Engine] = None) -> Any:
    """
    Draw a single random value.

    Args:
        request: A type (default float), a Distribution, a collection to
            pick from, or an already resolved Sampler
        rng: Engine to use; the process-wide default engine when omitted

    Returns:
        One random value

    Example:
        >>> draw(range(1, 11), rng=MersenneTwister(42))
    """
    if rng is None:
        rng = get_default_engine()
    if isinstance(request, Sampler):
        return draw_sampler(rng, request)
    return draw_sampler(rng, resolve(rng, request, Repetition.ONE))


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned ``bits``-wide integer as two's complement."""
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


@drawer(RequestShape.TYPE, int)
def draw_int(rng: Engine, sampler: SamplerType) -> int:
    """Full-range signed 64-bit integer."""
    return to_signed(rng.next_word(), 64)


@drawer(RequestShape.TYPE, bool)
def draw_bool(rng: Engine, sampler: SamplerType) -> bool:
    return rng.next_bits(1) == 1


@drawer(RequestShape.TYPE, np.bool_)
def draw_np_bool(rng: Engine, sampler: SamplerType) -> np.bool_:
    return np.bool_(rng.next_bits(1))


@drawer(RequestShape.TYPE, np.integer)
def draw_fixed_width(rng: Engine, sampler: SamplerType) -> Any:
    """Full-range value of any numpy integer type, sized by ``np.iinfo``."""
    info = np.iinfo(sampler.kind)
    value = rng.next_bits(info.bits)
    if info.min < 0:
        value = to_signed(value, info.bits)
    return sampler.kind(value)

