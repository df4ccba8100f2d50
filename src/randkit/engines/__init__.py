"""Random bit engines."""

from .base import Engine
from .numpy_engines import NumpyEngine, MersenneTwister, PCG64Engine, randjump
from .device import RandomDevice
from .default import (
    ENGINES,
    make_engine,
    get_default_engine,
    seed_default_engine,
    reset_default_engine,
)

__all__ = [
    "Engine",
    "NumpyEngine",
    "MersenneTwister",
    "PCG64Engine",
    "RandomDevice",
    "randjump",
    "ENGINES",
    "make_engine",
    "get_default_engine",
    "seed_default_engine",
    "reset_default_engine",
]
