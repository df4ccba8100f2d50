"""Random value generation built on the sampler protocol.

Importing this package registers the built-in resolvers and draw
algorithms.
"""

from .scalars import draw, draw_sampler
from . import floats, ranges, containers, normal, categorical  # noqa: F401  (registration)
from .arrays import fill, draw_array, check_dims
from .distinct import fill_distinct, draw_collection
from .misc import randsubseq, shuffle, randperm, randcycle
from .sparse import draw_sparse
from .strings import ALPHANUMERIC, draw_string, draw_bits

__all__ = [
    "draw",
    "draw_sampler",
    "fill",
    "draw_array",
    "check_dims",
    "fill_distinct",
    "draw_collection",
    "randsubseq",
    "shuffle",
    "randperm",
    "randcycle",
    "draw_sparse",
    "ALPHANUMERIC",
    "draw_string",
    "draw_bits",
]
