"""Base engine interface."""

from abc import ABC, abstractmethod
from typing import Optional

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


class Engine(ABC):
    """Base class for all sources of raw random bits.

    An engine is stateful: every call advances it. Engines are not
    synchronised, so a single instance must not be shared by concurrent
    draw sequences.
    """

    @abstractmethod
    def next_word(self) -> int:
        """Return one raw unsigned 64-bit word."""
        pass

    @abstractmethod
    def reseed(self, seed: Optional[int] = None) -> "Engine":
        """
        Reseed the engine in place.

        Args:
            seed: Seed value; None seeds from fresh entropy

        Returns:
            The engine itself
        """
        pass

    def next_bits(self, width: int) -> int:
        """
        Return an unsigned integer made of exactly ``width`` random bits.

        Words are concatenated most significant first and the surplus low
        bits of the last word are discarded.
        """
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        value = 0
        filled = 0
        while filled < width:
            value = (value << WORD_BITS) | self.next_word()
            filled += WORD_BITS
        return value >> (filled - width)
