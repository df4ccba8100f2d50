"""Random subsequences and permutations."""

import math
from typing import Any, List, Optional
import numpy as np

from randkit.engines.base import Engine
from randkit.engines.default import get_default_engine
from randkit.ir.distributions import Exponential
from randkit.sampling.resolve import resolve
from randkit.sampling.samplers import Repetition
from .arrays import check_dims
from .floats import close_open
from .ranges import uniform_below
from .scalars import draw_sampler

# Above this probability a per-element coin flip beats geometric skipping
DENSE_THRESHOLD = 0.15


def check_probability(p: float) -> float:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability {p} not in [0, 1]")
    return float(p)


def randsubseq(collection: Any, p: float, rng: Optional[Engine] = None) -> List[Any]:
    """
    Random subsequence of ``collection`` keeping each element with probability ``p``.

    Order is preserved. For small ``p`` the gaps between kept elements are
    drawn from a geometric distribution, so the cost is proportional to the
    number of elements kept rather than to ``len(collection)``.

    Args:
        collection: Indexable sequence
        p: Inclusion probability in [0, 1]
        rng: Engine to use; the default engine when omitted

    Returns:
        List of kept elements
    """
    p = check_probability(p)
    if rng is None:
        rng = get_default_engine()
    n = len(collection)
    if p == 1.0:
        return list(collection)
    if p == 0.0 or n == 0:
        return []

    kept: List[Any] = []
    if p > DENSE_THRESHOLD:
        for i in range(n):
            if close_open(rng) < p:
                kept.append(collection[i])
        return kept

    scale = -1.0 / math.log1p(-p)
    gaps = resolve(rng, Exponential(), Repetition.MANY)
    i = -1
    while True:
        step = draw_sampler(rng, gaps) * scale
        if step >= n - 1 - i:
            return kept
        i += max(1, math.ceil(step))
        kept.append(collection[i])


def shuffle(seq: Any, rng: Optional[Engine] = None) -> Any:
    """Shuffle a mutable sequence or array in place (Fisher-Yates) and return it."""
    if rng is None:
        rng = get_default_engine()
    for i in range(len(seq) - 1, 0, -1):
        j = uniform_below(rng, i + 1)
        _swap(seq, i, j)
    return seq


def randperm(n: int, rng: Optional[Engine] = None) -> np.ndarray:
    """Uniformly random permutation of ``0..n-1``."""
    (n,) = check_dims((n,))
    return shuffle(np.arange(n, dtype=np.int64), rng=rng)


def randcycle(n: int, rng: Optional[Engine] = None) -> np.ndarray:
    """
    Uniformly random cyclic permutation of ``0..n-1`` (Sattolo's algorithm).

    Following ``i -> perm[i]`` from any start visits all ``n`` positions.
    """
    (n,) = check_dims((n,))
    if rng is None:
        rng = get_default_engine()
    perm = np.arange(n, dtype=np.int64)
    for i in range(n - 1, 0, -1):
        j = uniform_below(rng, i)
        _swap(perm, i, j)
    return perm


def _swap(seq: Any, i: int, j: int) -> None:
    if isinstance(seq, np.ndarray):
        seq[[i, j]] = seq[[j, i]]
    else:
        seq[i], seq[j] = seq[j], seq[i]
