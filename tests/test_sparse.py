"""Tests for sparse matrix generation."""

import numpy as np
import pytest
from scipy import sparse

from randkit.engines import MersenneTwister
from randkit.ir import Close1Open2
from randkit.sampling import InvalidDimensionsError, UnsupportedRequestError
from randkit.generation import draw_sparse


def test_shape_and_type(rng):
    matrix = draw_sparse(0.3, 20, 10, rng=rng)
    assert isinstance(matrix, sparse.csc_matrix)
    assert matrix.shape == (20, 10)
    assert matrix.dtype == np.float64


def test_column_vector_when_n_omitted(rng):
    assert draw_sparse(0.5, 7, rng=rng).shape == (7, 1)


def test_density_is_close_to_p():
    matrix = draw_sparse(0.05, 200, 200, rng=MersenneTwister(1))
    assert matrix.nnz / 40000 == pytest.approx(0.05, abs=0.01)


def test_dense_probability_uses_coin_flips():
    matrix = draw_sparse(0.6, 100, 100, rng=MersenneTwister(1))
    assert matrix.nnz / 10000 == pytest.approx(0.6, abs=0.03)


def test_extreme_probabilities(rng):
    assert draw_sparse(0.0, 5, 5, rng=rng).nnz == 0
    full = draw_sparse(1.0, 5, 5, rng=rng)
    assert full.nnz == 25


def test_values_come_from_request(rng):
    matrix = draw_sparse(0.5, 30, 30, Close1Open2(), rng=rng)
    assert np.all((matrix.data >= 1.0) & (matrix.data < 2.0))
    ints = draw_sparse(0.5, 10, 10, range(1, 4), rng=rng)
    assert ints.dtype == np.int64
    assert set(ints.data.tolist()) <= {1, 2, 3}


def test_empty_shape(rng):
    assert draw_sparse(0.5, 0, 4, rng=rng).shape == (0, 4)


def test_same_seed_same_matrix():
    a = draw_sparse(0.2, 15, 15, rng=MersenneTwister(9))
    b = draw_sparse(0.2, 15, 15, rng=MersenneTwister(9))
    assert np.array_equal(a.toarray(), b.toarray())


def test_invalid_arguments(rng):
    with pytest.raises(ValueError):
        draw_sparse(1.5, 3, 3, rng=rng)
    with pytest.raises(InvalidDimensionsError):
        draw_sparse(0.5, -3, rng=rng)
    with pytest.raises(UnsupportedRequestError):
        draw_sparse(0.5, 3, 3, "abc", rng=rng)
