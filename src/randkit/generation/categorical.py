"""Weighted categorical sampling.

Many draws build a Vose alias table once (O(k) setup, O(1) per draw). A
single draw skips the table and walks the cumulative weights instead.
"""

from typing import Any, Tuple
import numpy as np

from randkit.engines.base import Engine
from randkit.ir.distributions import Categorical
from randkit.sampling.registry import RequestShape, drawer, resolver
from randkit.sampling.samplers import Repetition, SamplerTag, SamplerTrivial
from randkit.config.logging import get_logger
from .floats import close_open
from .ranges import make_span, uniform_below, uniform_index

logger = get_logger(__name__)


def normalized_weights(dist: Categorical) -> np.ndarray:
    """Probabilities summing to 1 (uniform when the distribution has no weights)."""
    k = len(dist.values)
    if dist.weights is None:
        return np.full(k, 1.0 / k)
    weights = np.asarray(dist.weights, dtype=np.float64)
    return weights / weights.sum()


def build_alias_table(probs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build a Vose alias table.

    Args:
        probs: Probabilities summing to 1

    Returns:
        (prob, alias): column ``i`` keeps outcome ``i`` with probability
        ``prob[i]`` and otherwise yields ``alias[i]``
    """
    k = len(probs)
    scaled = probs * k
    prob = np.zeros(k, dtype=np.float64)
    alias = np.zeros(k, dtype=np.int64)
    small = [i for i in range(k) if scaled[i] < 1.0]
    large = [i for i in range(k) if scaled[i] >= 1.0]

    while small and large:
        s = small.pop()
        l = large.pop()
        prob[s] = scaled[s]
        alias[s] = l
        scaled[l] = (scaled[l] + scaled[s]) - 1.0
        if scaled[l] < 1.0:
            small.append(l)
        else:
            large.append(l)

    # Leftovers are 1 up to rounding error
    for i in large + small:
        prob[i] = 1.0
        alias[i] = i

    return prob, alias


@resolver(RequestShape.DISTRIBUTION, Categorical)
def resolve_categorical(rng: Engine, dist: Categorical, repetition: Repetition):
    if repetition is Repetition.ONE:
        return SamplerTrivial(dist, repetition)
    prob, alias = build_alias_table(normalized_weights(dist))
    logger.debug(f"Built alias table for {len(dist.values)} categories")
    return SamplerTag(
        "alias",
        (dist.values, make_span(len(dist.values)), prob, alias),
        dist.eltype,
        repetition,
        source=dist,
    )


@drawer(RequestShape.TAG, "alias")
def draw_alias(rng: Engine, sampler: SamplerTag) -> Any:
    values, span, prob, alias = sampler.data
    i = uniform_index(rng, span)
    if close_open(rng) < prob[i]:
        return values[i]
    return values[alias[i]]


@drawer(RequestShape.DISTRIBUTION, Categorical)
def draw_categorical_trivial(rng: Engine, sampler: SamplerTrivial) -> Any:
    dist = sampler.value
    if dist.weights is None:
        return dist.values[uniform_below(rng, len(dist.values))]
    u = close_open(rng) * sum(dist.weights)
    cumulative = 0.0
    for value, weight in zip(dist.values, dist.weights):
        cumulative += weight
        if u < cumulative:
            return value
    # Rounding can leave u at the total; take the last value with mass
    return next(v for v, w in zip(reversed(dist.values), reversed(dist.weights)) if w > 0)
