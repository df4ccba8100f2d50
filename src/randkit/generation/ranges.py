"""Uniform integers from ranges by bitmask rejection sampling.

For a range of ``n`` elements, draw ``(n - 1).bit_length()`` bits and
reject values ``>= n``; fewer than two attempts are needed on average.
Resolving for many draws precomputes the length and bit width once.
"""

from typing import NamedTuple

from randkit.engines.base import Engine
from randkit.sampling.errors import EmptyCollectionError
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerTrivial


class RangeSpan(NamedTuple):
    """Precomputed rejection parameters for ``n`` outcomes."""

    n: int
    bits: int


def make_span(n: int) -> RangeSpan:
    return RangeSpan(n, (n - 1).bit_length())


def uniform_index(rng: Engine, span: RangeSpan) -> int:
    """Uniform integer in [0, span.n)."""
    if span.bits == 0:
        return 0
    while True:
        x = rng.next_bits(span.bits)
        if x < span.n:
            return x


def uniform_below(rng: Engine, n: int) -> int:
    """Uniform integer in [0, n) without precomputation."""
    return uniform_index(rng, make_span(n))


@resolver(RequestShape.VALUE, range)
def resolve_range(rng: Engine, r: range, repetition: Repetition):
    if len(r) == 0:
        raise EmptyCollectionError(r)
    if repetition is Repetition.ONE:
        return SamplerTrivial(r, repetition)
    return SamplerTag("range", (r, make_span(len(r))), int, repetition, source=r)


@drawer(RequestShape.TAG, "range")
def draw_range(rng: Engine, sampler: SamplerTag) -> int:
    r, span = sampler.data
    return r[uniform_index(rng, span)]


@drawer(RequestShape.VALUE, range)
def draw_range_trivial(rng: Engine, sampler: SamplerTrivial) -> int:
    r = sampler.value
    return r[uniform_below(rng, len(r))]
