"""Engine reading from the operating system's entropy source."""

import os
from typing import Optional

from .base import Engine


class RandomDevice(Engine):
    """Engine drawing every word from ``os.urandom``.

    It keeps no state and cannot be seeded; reseeding without a seed is a
    no-op.
    """

    def next_word(self) -> int:
        return int.from_bytes(os.urandom(8), "little")

    def reseed(self, seed: Optional[int] = None) -> "RandomDevice":
        if seed is not None:
            raise ValueError("RandomDevice does not accept a seed")
        return self

    def __repr__(self) -> str:
        return "RandomDevice()"
