"""Uniform picks from collections and component-wise distributions."""

from collections.abc import Mapping, Sequence, Set
from itertools import islice
from typing import Any, get_origin
import numpy as np

from randkit.engines.base import Engine
from randkit.ir.distributions import Distribution, FloatInterval, Uniform
from randkit.ir.types import Pair, eltype, is_concrete
from randkit.sampling.errors import EmptyCollectionError, UnsupportedRequestError
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerTrivial
from .ranges import make_span, uniform_below, uniform_index
from .scalars import draw_sampler


def _check_nonempty(collection: Any) -> None:
    size = collection.size if isinstance(collection, np.ndarray) else len(collection)
    if size == 0:
        raise EmptyCollectionError(collection)


# Sequences (list, tuple, str, ndarray): index directly.


@resolver(RequestShape.VALUE, Sequence)
@resolver(RequestShape.VALUE, np.ndarray)
def resolve_sequence(rng: Engine, seq: Any, repetition: Repetition):
    _check_nonempty(seq)
    if repetition is Repetition.ONE:
        return SamplerTrivial(seq, repetition)
    if isinstance(seq, np.ndarray):
        flat = seq.reshape(-1).copy()
    elif isinstance(seq, (str, bytes, tuple)):
        flat = seq
    else:
        flat = tuple(seq)
    return SamplerTag("sequence", (flat, make_span(len(flat))), eltype(seq), repetition, source=seq)


@drawer(RequestShape.TAG, "sequence")
def draw_sequence(rng: Engine, sampler: SamplerTag) -> Any:
    seq, span = sampler.data
    return seq[uniform_index(rng, span)]


@drawer(RequestShape.VALUE, Sequence)
@drawer(RequestShape.VALUE, np.ndarray)
def draw_sequence_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    seq = sampler.value
    if isinstance(seq, np.ndarray):
        seq = seq.reshape(-1)
    return seq[uniform_below(rng, len(seq))]


# Sets and mappings have no positional access. A single draw walks to the
# chosen position; many draws snapshot the elements once. The snapshot
# does not see later changes to the collection.


def _element(collection: Any, index: int) -> Any:
    if isinstance(collection, Mapping):
        key = next(islice(iter(collection), index, None))
        return Pair(key, collection[key])
    return next(islice(iter(collection), index, None))


@resolver(RequestShape.VALUE, Set)
@resolver(RequestShape.VALUE, Mapping)
def resolve_unordered(rng: Engine, collection: Any, repetition: Repetition):
    _check_nonempty(collection)
    if repetition is Repetition.ONE:
        return SamplerTrivial(collection, repetition)
    if isinstance(collection, Mapping):
        snapshot = tuple(Pair(k, v) for k, v in collection.items())
    else:
        snapshot = tuple(collection)
    return SamplerTag("sequence", (snapshot, make_span(len(snapshot))), eltype(collection), repetition, source=collection)


@drawer(RequestShape.VALUE, Set)
@drawer(RequestShape.VALUE, Mapping)
def draw_unordered_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    collection = sampler.value
    return _element(collection, uniform_below(rng, len(collection)))


# Generic distributions

# Subclasses outside this set must register their own resolver
GENERIC_KINDS = (Distribution, Uniform, FloatInterval)


def _is_composite(t: Any) -> bool:
    origin = get_origin(t) or t
    return isinstance(origin, type) and issubclass(origin, tuple)


@resolver(RequestShape.DISTRIBUTION, Distribution)
def resolve_distribution(rng: Engine, dist: Distribution, repetition: Repetition):
    """
    Resolve a generic Distribution.

    * no params: same as requesting ``dist.target``
    * ``Pair``/tuple target: one sampler per param, drawn independently
    * one param and a concrete scalar target: draw from the param, convert
    * any other subclass without its own resolver: unsupported
    """
    if type(dist) not in GENERIC_KINDS:
        raise UnsupportedRequestError(
            dist, repetition, reason=f"no resolver registered for {type(dist).__name__}"
        )
    if not dist.params:
        return resolve(rng, dist.target, repetition)
    if _is_composite(dist.eltype):
        fields = getattr(get_origin(dist.eltype) or dist.eltype, "_fields", None)
        if fields is not None and len(fields) != len(dist.params):
            raise UnsupportedRequestError(
                dist, repetition, reason=f"expected {len(fields)} parameters, got {len(dist.params)}"
            )
        parts = tuple(resolve(rng, p, repetition) for p in dist.params)
        return SamplerTag("components", parts, dist.eltype, repetition, source=dist)
    if len(dist.params) == 1 and is_concrete(dist.target):
        inner = resolve(rng, dist.params[0], repetition)
        return SamplerTag("convert", (dist.target, inner), dist.target, repetition, source=dist)
    raise UnsupportedRequestError(dist, repetition, reason="no rule for these parameters")


@drawer(RequestShape.TAG, "components")
def draw_components(rng: Engine, sampler: SamplerTag) -> Any:
    values = tuple(draw_sampler(rng, part) for part in sampler.data)
    origin = get_origin(sampler.eltype) or sampler.eltype
    if origin is tuple:
        return values
    return origin(*values)


@drawer(RequestShape.TAG, "convert")
def draw_convert(rng: Engine, sampler: SamplerTag) -> Any:
    target, inner = sampler.data
    return target(draw_sampler(rng, inner))
