"""Sets and mappings with a target number of distinct entries.

Values are drawn and inserted until the collection reaches the requested
size; duplicates are absorbed by the insertion, so this is rejection
sampling. The loop only ends once the size is reached: asking for more
distinct values than the request can produce never terminates unless
``distinct_max_draws`` is configured, in which case UniverseExhaustedError
is raised after that many draws.
"""

from collections.abc import MutableMapping, MutableSet
from numbers import Integral
from typing import Any, Optional, get_args, get_origin

from randkit.config.settings import get_settings
from randkit.config.logging import get_logger
from randkit.engines.base import Engine
from randkit.engines.default import get_default_engine
from randkit.ir.distributions import Distribution
from randkit.ir.types import Pair, deduce_type, eltype
from randkit.sampling.errors import (
    InvalidDimensionsError,
    UnsupportedRequestError,
    UniverseExhaustedError,
)
from randkit.sampling.registry import find_draw
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition, Sampler
from randkit.utils.error_logging import log_error

logger = get_logger(__name__)


def check_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidDimensionsError(f"Count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidDimensionsError(f"Count must be non-negative, got {n}")
    return int(n)


def _insert(collection: Any, value: Any) -> None:
    if isinstance(collection, MutableMapping):
        key, item = value
        collection[key] = item
    else:
        collection.add(value)


def _pair_request(key_type: Any, value_type: Any) -> Distribution:
    return Distribution(Pair, key_type, value_type)


def default_request(collection: Any) -> Any:
    """Request implied by the entries already in ``collection``."""
    if isinstance(collection, MutableMapping):
        if not collection:
            raise UnsupportedRequestError(
                type(collection),
                reason="cannot infer key and value types of an empty mapping; pass a request",
            )
        return _pair_request(*get_args(eltype(collection)))
    if collection:
        return type(next(iter(collection)))
    return float


def _is_pair_type(t: Any) -> bool:
    origin = get_origin(t) or t
    if not isinstance(origin, type) or not issubclass(origin, tuple):
        return False
    if issubclass(origin, Pair):
        return True
    args = get_args(t)
    return len(args) == 2 and Ellipsis not in args


def check_mapping_sampler(sampler: Sampler) -> None:
    """Mappings can only take Pair (or 2-tuple) draws."""
    if not _is_pair_type(sampler.eltype):
        error = UnsupportedRequestError(
            sampler.eltype,
            sampler.repetition,
            reason="mapping entries must be drawn as Pairs",
        )
        log_error(error, operation="fill_distinct")
        raise error


def fill_with_distinct(rng: Engine, collection: Any, n: int, sampler: Sampler) -> Any:
    """Clear ``collection`` and insert draws until it holds ``n`` entries."""
    if isinstance(collection, MutableMapping):
        check_mapping_sampler(sampler)
    limit = get_settings().distinct_max_draws
    func = find_draw(rng, sampler)
    collection.clear()
    draws = 0
    while len(collection) < n:
        if limit is not None and draws >= limit:
            error = UniverseExhaustedError(n, len(collection), draws)
            log_error(
                error,
                context={"eltype": sampler.eltype, "limit": limit},
                operation="fill_distinct",
                log_level="warning",
            )
            raise error
        _insert(collection, func(rng, sampler))
        draws += 1
    logger.debug(f"Collected {n} distinct values in {draws} draws")
    return collection


def _check_collection(collection: Any) -> None:
    if not isinstance(collection, (MutableSet, MutableMapping)):
        raise TypeError(
            f"Expected a mutable set or mapping, got {type(collection).__name__}"
        )


def fill_distinct(
    collection: Any,
    n: Optional[int] = None,
    request: Any = None,
    rng: Optional[Engine] = None,
) -> Any:
    """
    Refill a set or mapping with ``n`` distinct random entries.

    Args:
        collection: A mutable set, or a mutable mapping receiving Pairs
        n: Target size; defaults to the collection's current size
        request: What to draw; inferred from existing entries when omitted
        rng: Engine to use; the default engine when omitted

    Returns:
        The same collection, now holding exactly ``n`` entries
    """
    _check_collection(collection)
    n = check_count(len(collection) if n is None else n)
    if rng is None:
        rng = get_default_engine()
    if request is None:
        request = default_request(collection)
    sampler = resolve(rng, request, Repetition.MANY)
    return fill_with_distinct(rng, collection, n, sampler)


def draw_collection(
    request: Any,
    container: Any,
    n: int,
    rng: Optional[Engine] = None,
) -> Any:
    """
    Build a new set or mapping of ``n`` distinct random entries.

    ``container`` is a set or mapping type, optionally subscripted. It is
    refined with the element type of ``request`` before instantiation, so
    ``draw_collection(range(1, 1001), set, 50)`` builds a ``set[int]``.
    For mappings ``request`` must produce Pairs; if it is None it is
    derived from ``dict[K, V]``-style subscripts.

    Example:
        >>> dist = Distribution(Pair, range(10), "abc")
        >>> draw_collection(dist, dict, 3, rng=MersenneTwister(42))
    """
    origin = get_origin(container) or container
    if not (isinstance(origin, type) and issubclass(origin, (MutableSet, MutableMapping))):
        raise TypeError(f"Expected a mutable set or mapping type, got {container!r}")
    n = check_count(n)
    mapping = issubclass(origin, MutableMapping)

    if request is None:
        args = get_args(container)
        if mapping:
            if len(args) != 2:
                raise UnsupportedRequestError(
                    container, reason="pass a request or subscript the mapping type with key and value types"
                )
            request = _pair_request(*args)
        else:
            request = args[0] if args else float

    if rng is None:
        rng = get_default_engine()
    sampler = resolve(rng, request, Repetition.MANY)

    if mapping:
        check_mapping_sampler(sampler)
        kind = deduce_type(container, *get_args(sampler.eltype))
    else:
        kind = deduce_type(container, sampler.eltype)
    return fill_with_distinct(rng, kind(), n, sampler)
