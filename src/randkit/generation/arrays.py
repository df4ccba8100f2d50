"""Filling arrays and mutable sequences with random values."""

from collections.abc import MutableSequence
from numbers import Integral
from typing import Any, Optional, Tuple
import numpy as np

from randkit.engines.base import Engine
from randkit.engines.default import get_default_engine
from randkit.ir.types import eltype
from randkit.sampling.errors import InvalidDimensionsError
from randkit.sampling.registry import find_draw
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition, Sampler

NUMERIC_BASES = (np.generic, bool, int, float, complex)


def check_dims(dims: Tuple[Any, ...]) -> Tuple[int, ...]:
    """
    Normalise ``dims`` to a shape tuple.

    Accepts either separate integers or a single tuple of integers.

    Raises:
        InvalidDimensionsError: If a dimension is negative or not an integer
    """
    if len(dims) == 1 and isinstance(dims[0], (tuple, list)):
        dims = tuple(dims[0])
    for d in dims:
        if isinstance(d, bool) or not isinstance(d, Integral):
            raise InvalidDimensionsError(f"Dimensions must be integers, got {dims!r}")
        if d < 0:
            raise InvalidDimensionsError(f"Dimensions must be non-negative, got {dims!r}")
    return tuple(int(d) for d in dims)


def dtype_for(kind: Any) -> np.dtype:
    """numpy dtype able to hold values of element type ``kind``."""
    if isinstance(kind, type) and issubclass(kind, NUMERIC_BASES):
        return np.dtype(kind)
    return np.dtype(object)


def default_request(array: Any) -> Any:
    """Request implied by an array's element type."""
    if isinstance(array, np.ndarray):
        if array.dtype == np.dtype(object):
            return float
        return array.dtype.type
    if len(array) > 0:
        return type(array[0])
    return float


def fill_with(rng: Engine, array: Any, sampler: Sampler) -> Any:
    """Write one draw from ``sampler`` into every slot of ``array``, in order."""
    func = find_draw(rng, sampler)
    if isinstance(array, np.ndarray):
        for index in np.ndindex(array.shape):
            array[index] = func(rng, sampler)
    else:
        for i in range(len(array)):
            array[i] = func(rng, sampler)
    return array


def fill(array: Any, request: Any = None, rng: Optional[Engine] = None) -> Any:
    """
    Populate ``array`` with random values, in place.

    The request is resolved once for many draws, then every slot is
    written exactly once in iteration order (C order for ndarrays).

    Args:
        array: A writeable numpy array or a mutable sequence
        request: What to draw; defaults to the array's element type
        rng: Engine to use; the default engine when omitted

    Returns:
        The same array
    """
    if isinstance(array, np.ndarray):
        if not array.flags.writeable:
            raise ValueError("Cannot fill a read-only array")
    elif not isinstance(array, MutableSequence):
        raise TypeError(
            f"Cannot fill {type(array).__name__}; expected a numpy array or mutable sequence"
        )
    if rng is None:
        rng = get_default_engine()
    if request is None:
        request = default_request(array)
    sampler = resolve(rng, request, Repetition.MANY)
    return fill_with(rng, array, sampler)


def draw_array(request: Any = float, *dims: Any, rng: Optional[Engine] = None) -> np.ndarray:
    """
    Allocate an array of shape ``dims`` and fill it with draws from ``request``.

    Example:
        >>> draw_array(float, 2, 3, rng=MersenneTwister(1)).shape
        (2, 3)
    """
    shape = check_dims(dims)
    if rng is None:
        rng = get_default_engine()
    sampler = resolve(rng, request, Repetition.MANY)
    array = np.empty(shape, dtype=dtype_for(eltype(sampler)))
    return fill_with(rng, array, sampler)
