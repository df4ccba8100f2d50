"""Sparse matrices with randomly placed nonzeros."""

from typing import Any, Optional
import numpy as np
from scipy import sparse

from randkit.engines.base import Engine
from randkit.engines.default import get_default_engine
from randkit.ir.distributions import CloseOpen
from randkit.sampling.errors import UnsupportedRequestError
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition
from randkit.config.logging import get_logger
from .arrays import check_dims, dtype_for, fill_with
from .misc import check_probability, randsubseq

logger = get_logger(__name__)


def draw_sparse(
    p: float,
    m: int,
    n: Optional[int] = None,
    request: Any = None,
    rng: Optional[Engine] = None,
) -> sparse.csc_matrix:
    """
    Random sparse matrix with expected density ``p``.

    Each of the ``m * n`` positions is occupied independently with
    probability ``p``; occupied positions get values drawn from
    ``request``, resolved once.

    Args:
        p: Occupancy probability in [0, 1]
        m: Number of rows
        n: Number of columns; omitted for an ``m x 1`` column vector
        request: Nonzero value generator; defaults to CloseOpen(float)
        rng: Engine to use; the default engine when omitted

    Returns:
        ``scipy.sparse.csc_matrix`` of shape ``(m, n)``
    """
    p = check_probability(p)
    m, n = check_dims((m, 1 if n is None else n))
    if rng is None:
        rng = get_default_engine()
    if request is None:
        request = CloseOpen(float)
    sampler = resolve(rng, request, Repetition.MANY)
    dtype = dtype_for(sampler.eltype)
    if dtype == np.dtype(object):
        raise UnsupportedRequestError(request, Repetition.MANY, reason="sparse values must be numeric")

    if m == 0 or n == 0:
        return sparse.csc_matrix((m, n), dtype=dtype)

    # Linear indices run down columns first
    linear = np.asarray(randsubseq(range(m * n), p, rng=rng), dtype=np.int64)
    values = fill_with(rng, np.empty(len(linear), dtype=dtype), sampler)
    rows = linear % m
    cols = linear // m
    logger.debug(f"Sparse {m}x{n} matrix with {len(linear)} nonzeros (p={p})")
    return sparse.csc_matrix((values, (rows, cols)), shape=(m, n), dtype=dtype)
