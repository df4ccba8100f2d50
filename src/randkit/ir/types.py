"""Element types and type deduction for requests."""

from collections.abc import Collection, Mapping, Set
from typing import Any, Generic, NamedTuple, Optional, Tuple, TypeVar, get_args, get_origin
import numpy as np

K = TypeVar("K")
V = TypeVar("V")


class Pair(NamedTuple, Generic[K, V]):
    """A (key, value) pair; inserted into a mapping as ``mapping[first] = second``."""

    first: K
    second: V


class HasEltype:
    """Marker for objects that declare an ``eltype`` (distributions, samplers)."""


def is_type_like(x: Any) -> bool:
    """True for classes and subscripted generic aliases such as ``set[int]``."""
    return isinstance(x, type) or get_origin(x) is not None


def arity(t: Any) -> Optional[int]:
    """
    Number of type parameters of an unsubscripted generic type.

    Returns None for variadic types (tuple), 0 for non-generic types.
    """
    if isinstance(t, type):
        if issubclass(t, (np.generic, np.ndarray)):
            return 0
        if issubclass(t, tuple) and not hasattr(t, "_fields"):
            return None
        if issubclass(t, Mapping):
            return 2
        if issubclass(t, (list, Set)):
            return 1
    return len(getattr(t, "__parameters__", ()) or ())


def is_concrete(t: Any) -> bool:
    """
    Whether ``t`` fully determines the kind of value it describes.

    Subscripted aliases and plain classes are concrete; unsubscripted
    generic containers (``set``, ``dict``, ``Pair``...) are not.
    """
    if get_origin(t) is not None:
        return True
    if not isinstance(t, type):
        return True
    n = arity(t)
    return n is not None and n == 0


def _common_type(values: Any) -> Any:
    kinds = {type(v) for v in values}
    return kinds.pop() if len(kinds) == 1 else object


def eltype(x: Any) -> Any:
    """
    Element type of a request: the type of value drawing from ``x`` yields.

    Args:
        x: A type, distribution, sampler or collection value

    Returns:
        The element type
    """
    if isinstance(x, HasEltype):
        return x.eltype
    if is_type_like(x):
        origin = get_origin(x)
        if origin is None:
            return x if is_concrete(x) else object
        args = get_args(x)
        if isinstance(origin, type) and origin is not Pair:
            if issubclass(origin, Mapping) and len(args) == 2:
                return Pair[args[0], args[1]]
            if issubclass(origin, (list, Set)) and len(args) == 1:
                return args[0]
        return x
    if isinstance(x, range):
        return int
    if isinstance(x, str):
        return str
    if isinstance(x, np.ndarray):
        return x.dtype.type
    if isinstance(x, Mapping):
        return Pair[_common_type(x.keys()), _common_type(x.values())]
    if isinstance(x, Collection):
        return _common_type(x)
    return type(x)


def deduce_type(t: Any, *params: Any) -> Any:
    """
    Refine an abstract type with the element types of ``params``.

    A concrete ``t`` is returned unchanged. Otherwise ``t`` is subscripted
    with ``eltype(p)`` for each param, left to right, up to the number of
    parameters ``t`` takes. If too few params are given ``t`` stays abstract.

    Example:
        >>> deduce_type(Pair, range(1, 11), "abc")
        Pair[int, str]
    """
    if not params or is_concrete(t):
        return t
    args: Tuple[Any, ...] = tuple(eltype(p) for p in params)
    n = arity(t)
    if n is not None:
        if len(args) < n:
            return t
        args = args[:n]
    return t[args] if len(args) > 1 else t[args[0]]
