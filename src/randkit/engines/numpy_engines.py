"""Engines backed by numpy bit generators."""

from typing import Any, Optional
import numpy as np

from .base import Engine, WORD_BITS
from randkit.config.logging import get_logger

logger = get_logger(__name__)


class NumpyEngine(Engine):
    """Engine wrapping a ``numpy.random.BitGenerator``.

    ``generator`` exposes a ``numpy.random.Generator`` over the same bit
    generator, so raw words and numpy routines advance one shared state.
    """

    bit_generator_cls: Any = np.random.PCG64
    raw_bits: int = 64  # width of one value from random_raw()

    def __init__(self, seed: Optional[int] = None):
        self._seed: Optional[int] = None
        self.reseed(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def reseed(self, seed: Optional[int] = None) -> "NumpyEngine":
        if seed is not None and seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")
        self._seed = seed
        self._bitgen = self.bit_generator_cls(seed)
        self._generator = np.random.Generator(self._bitgen)
        logger.debug(f"Reseeded {type(self).__name__} with seed={seed}")
        return self

    def next_word(self) -> int:
        if self.raw_bits == WORD_BITS:
            return int(self._bitgen.random_raw())
        hi, lo = self._bitgen.random_raw(2)
        return (int(hi) << 32) | int(lo)

    def _wrap(self, bitgen: Any, seed: Optional[int]) -> "NumpyEngine":
        clone = type(self).__new__(type(self))
        clone._seed = seed
        clone._bitgen = bitgen
        clone._generator = np.random.Generator(bitgen)
        return clone

    def copy(self) -> "NumpyEngine":
        """Return an independent engine in the same state."""
        bitgen = self.bit_generator_cls()
        bitgen.state = self._bitgen.state
        return self._wrap(bitgen, self._seed)

    def jumped(self, jumps: int = 1) -> "NumpyEngine":
        """
        Return a new engine whose state is this one advanced by ``jumps`` jumps.

        A jump skips far enough ahead (2**128 draws for MT19937, about
        2**127 for PCG64) that streams obtained with different jump
        counts do not overlap in practice. This engine is left unchanged.

        Args:
            jumps: Number of jumps, at least 1

        Returns:
            A new engine of the same class
        """
        if isinstance(jumps, bool) or not isinstance(jumps, int) or jumps < 1:
            raise ValueError(f"jumps must be a positive integer, got {jumps!r}")
        logger.debug(f"Jumping {type(self).__name__} ahead {jumps} time(s)")
        return self._wrap(self._bitgen.jumped(jumps), None)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _states_equal(self._bitgen.state, other._bitgen.state)

    # Equality compares mutable state, so engines are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"


def _states_equal(a: Any, b: Any) -> bool:
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_states_equal(a[k], b[k]) for k in a)
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return a == b


class MersenneTwister(NumpyEngine):
    """Mersenne Twister (MT19937) engine."""

    bit_generator_cls = np.random.MT19937
    raw_bits = 32


class PCG64Engine(NumpyEngine):
    """Permuted congruential generator (PCG64) engine."""

    bit_generator_cls = np.random.PCG64
    raw_bits = 64


def randjump(rng: NumpyEngine, jumps: int = 1) -> NumpyEngine:
    """
    Engine for a stream that does not overlap ``rng``'s.

    Use one jumped engine per concurrent consumer instead of sharing
    ``rng``; give each consumer a different jump count.

    Raises:
        TypeError: If ``rng`` has no jump-ahead support
    """
    if not isinstance(rng, NumpyEngine):
        raise TypeError(f"{type(rng).__name__} does not support jumping ahead")
    return rng.jumped(jumps)
