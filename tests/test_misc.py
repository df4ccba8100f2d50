"""Tests for subsequences and permutations."""

import numpy as np
import pytest

from randkit.engines import MersenneTwister
from randkit.sampling import InvalidDimensionsError
from randkit.generation import randcycle, randperm, randsubseq, shuffle


def test_randsubseq_preserves_order(rng):
    kept = randsubseq(list(range(1000)), 0.1, rng=rng)
    assert kept == sorted(kept)
    assert len(set(kept)) == len(kept)


@pytest.mark.parametrize("p", [0.01, 0.1, 0.5, 0.9])
def test_randsubseq_rate(p):
    rng = MersenneTwister(21)
    n = 20000
    kept = randsubseq(range(n), p, rng=rng)
    assert len(kept) / n == pytest.approx(p, abs=0.02)


def test_randsubseq_extremes(rng):
    assert randsubseq([1, 2, 3], 0.0, rng=rng) == []
    assert randsubseq([1, 2, 3], 1.0, rng=rng) == [1, 2, 3]
    assert randsubseq([], 0.5, rng=rng) == []


def test_randsubseq_rejects_bad_probability(rng):
    with pytest.raises(ValueError):
        randsubseq([1, 2], -0.1, rng=rng)


def test_shuffle_in_place(rng):
    items = list(range(50))
    result = shuffle(items, rng=rng)
    assert result is items
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def test_shuffle_array(rng):
    array = np.arange(20)
    shuffle(array, rng=rng)
    assert sorted(array.tolist()) == list(range(20))


def test_randperm(rng):
    perm = randperm(30, rng=rng)
    assert sorted(perm.tolist()) == list(range(30))
    assert randperm(0, rng=rng).tolist() == []


def test_randperm_same_seed():
    assert randperm(10, rng=MersenneTwister(5)).tolist() == randperm(10, rng=MersenneTwister(5)).tolist()


@pytest.mark.parametrize("n", [1, 2, 5, 40])
def test_randcycle_is_single_cycle(rng, n):
    perm = randcycle(n, rng=rng)
    assert sorted(perm.tolist()) == list(range(n))
    seen = set()
    i = 0
    while i not in seen:
        seen.add(i)
        i = int(perm[i])
    assert len(seen) == n


def test_negative_sizes(rng):
    with pytest.raises(InvalidDimensionsError):
        randperm(-1, rng=rng)
    with pytest.raises(InvalidDimensionsError):
        randcycle(-2, rng=rng)
