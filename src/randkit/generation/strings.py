"""Random strings and bit arrays."""

import string
from typing import Any, Optional, Sequence
import numpy as np

from randkit.config.settings import get_settings
from randkit.engines.base import Engine, WORD_BITS
from randkit.engines.default import get_default_engine
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerType
from .arrays import check_dims, fill_with

ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase


def draw_string(
    n: Optional[int] = None,
    chars: Sequence[str] = ALPHANUMERIC,
    rng: Optional[Engine] = None,
) -> str:
    """
    Random string of ``n`` characters picked independently from ``chars``.

    Args:
        n: Length; defaults to the ``string_length`` setting (8)
        chars: Candidate characters (a string or sequence of 1-char strings)
        rng: Engine to use; the default engine when omitted
    """
    if n is None:
        n = get_settings().string_length
    (n,) = check_dims((n,))
    if rng is None:
        rng = get_default_engine()
    if n == 0:
        return ""
    sampler = resolve(rng, chars, Repetition.MANY)
    return "".join(fill_with(rng, [""] * n, sampler))


@resolver(RequestShape.TYPE, str)
def resolve_str_type(rng: Engine, kind: Any, repetition: Repetition):
    """Many ``str`` draws share one alphabet sampler and the configured length."""
    if repetition is Repetition.ONE:
        return SamplerType(kind, repetition)
    chars = resolve(rng, ALPHANUMERIC, Repetition.MANY)
    return SamplerTag(
        "string", (get_settings().string_length, chars), str, repetition, source=kind
    )


@drawer(RequestShape.TAG, "string")
def draw_string_tag(rng: Engine, sampler: SamplerTag) -> str:
    n, chars = sampler.data
    return "".join(fill_with(rng, [""] * n, chars))


@drawer(RequestShape.TYPE, str)
def draw_str_type(rng: Engine, sampler: SamplerType) -> str:
    """Requesting the ``str`` type yields a random alphanumeric string."""
    return draw_string(rng=rng)


def draw_bits(*dims: Any, rng: Optional[Engine] = None, packed: bool = False) -> np.ndarray:
    """
    Random boolean array of shape ``dims``.

    Bits are taken 64 at a time from whole engine words, in C order.

    Args:
        *dims: Shape, as integers or a single tuple
        rng: Engine to use; the default engine when omitted
        packed: Return ``numpy.packbits`` output (uint8, 8 bits per byte,
            flattened) instead of a bool array

    Returns:
        Boolean array, or packed uint8 array
    """
    shape = check_dims(dims)
    if rng is None:
        rng = get_default_engine()
    total = int(np.prod(shape, dtype=np.int64))
    n_words = -(-total // WORD_BITS)
    words = np.array([rng.next_word() for _ in range(n_words)], dtype=np.uint64)
    bits = np.unpackbits(words.view(np.uint8), bitorder="little")[:total]
    result = bits.astype(bool).reshape(shape)
    if packed:
        return np.packbits(result.reshape(-1))
    return result
