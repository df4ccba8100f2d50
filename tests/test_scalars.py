"""Tests for single-value generation."""

from collections import Counter, OrderedDict

import numpy as np
import pytest

from randkit.engines import MersenneTwister, PCG64Engine, seed_default_engine
from randkit.ir import (
    Categorical,
    Close1Open2,
    CloseOpen,
    Distribution,
    Exponential,
    Normal,
    Pair,
)
from randkit.sampling import EmptyCollectionError, Repetition, resolve
from randkit.generation import draw, draw_sampler


def test_uniform_int_scenario():
    """Two freshly seeded engines give the same single draw."""
    a = draw(range(1, 11), rng=MersenneTwister(42))
    b = draw(range(1, 11), rng=MersenneTwister(42))
    assert a == b
    assert 1 <= a <= 10


@pytest.mark.parametrize(
    "request_",
    [float, int, bool, complex, np.float32, np.int8, np.uint16, range(3, 9), "xyz", Normal(), Exponential()],
)
def test_same_seed_same_values(request_):
    a = MersenneTwister(11)
    b = MersenneTwister(11)
    assert [draw(request_, rng=a) for _ in range(20)] == [draw(request_, rng=b) for _ in range(20)]


def test_default_request_is_float(rng):
    value = draw(rng=rng)
    assert isinstance(value, float)
    assert 0.0 <= value < 1.0


def test_default_engine_is_used_when_rng_omitted():
    seed_default_engine(5)
    first = draw(int)
    seed_default_engine(5)
    assert draw(int) == first


def test_default_engine_from_settings(monkeypatch):
    monkeypatch.setenv("RANDKIT_SEED", "8")
    assert draw(int) == draw(int, rng=MersenneTwister(8))


@pytest.mark.parametrize("kind", [float, np.float64, np.float32, np.float16])
def test_float_types_in_unit_interval(rng, kind):
    values = [draw(kind, rng=rng) for _ in range(500)]
    assert all(isinstance(v, kind) for v in values)
    assert all(0 <= v < 1 for v in values)


def test_close_open_and_close1_open2(rng):
    low = [draw(CloseOpen(), rng=rng) for _ in range(500)]
    high = [draw(Close1Open2(), rng=rng) for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in low)
    assert all(1.0 <= v < 2.0 for v in high)
    assert isinstance(draw(CloseOpen(np.float32), rng=rng), np.float32)


def test_int_uses_full_width(rng):
    values = [draw(int, rng=rng) for _ in range(200)]
    assert all(-(2**63) <= v < 2**63 for v in values)
    assert any(v < 0 for v in values)
    assert any(v > 2**40 for v in values)


@pytest.mark.parametrize("kind", [np.int8, np.int16, np.int32, np.int64, np.uint8, np.uint32, np.uint64])
def test_numpy_int_types(rng, kind):
    info = np.iinfo(kind)
    values = [draw(kind, rng=rng) for _ in range(100)]
    assert all(isinstance(v, kind) for v in values)
    assert all(info.min <= v <= info.max for v in values)


def test_bool(rng):
    values = [draw(bool, rng=rng) for _ in range(200)]
    assert set(values) == {True, False}
    assert isinstance(draw(np.bool_, rng=rng), np.bool_)


def test_complex(rng):
    z = draw(complex, rng=rng)
    assert isinstance(z, complex)
    assert 0 <= z.real < 1 and 0 <= z.imag < 1


def test_range_covers_all_values(rng):
    values = {draw(range(10, 20, 2), rng=rng) for _ in range(300)}
    assert values == {10, 12, 14, 16, 18}


def test_single_element_range(rng):
    assert draw(range(7, 8), rng=rng) == 7


def test_empty_collections_raise(rng):
    with pytest.raises(EmptyCollectionError):
        draw(range(0), rng=rng)
    with pytest.raises(EmptyCollectionError):
        draw([], rng=rng)
    with pytest.raises(EmptyCollectionError):
        resolve(rng, set(), Repetition.MANY)


def test_sequence_and_string(rng):
    assert draw([3, 1, 4], rng=rng) in (3, 1, 4)
    assert draw("abc", rng=rng) in "abc"
    assert draw(np.array([[5, 6], [7, 8]]), rng=rng) in (5, 6, 7, 8)


def test_set_and_mapping(rng):
    assert draw({"a", "b"}, rng=rng) in {"a", "b"}
    picked = draw(OrderedDict([(1, "x"), (2, "y")]), rng=rng)
    assert isinstance(picked, Pair)
    assert picked in (Pair(1, "x"), Pair(2, "y"))


def test_mapping_many_draws_are_pairs(rng):
    sampler = resolve(rng, {1: "x", 2: "y"}, Repetition.MANY)
    assert sampler.eltype == Pair[int, str]
    values = {draw_sampler(rng, sampler) for _ in range(50)}
    assert values == {Pair(1, "x"), Pair(2, "y")}


def test_pair_distribution(rng):
    value = draw(Distribution(Pair, range(1, 11), "abc"), rng=rng)
    assert isinstance(value, Pair)
    assert 1 <= value.first <= 10
    assert value.second in "abc"


def test_tuple_distribution(rng):
    value = draw(Distribution(tuple, bool, range(3)), rng=rng)
    assert isinstance(value, tuple)
    assert isinstance(value[0], bool)
    assert value[1] in (0, 1, 2)


def test_convert_distribution(rng):
    value = draw(Distribution(float, range(1, 4)), rng=rng)
    assert isinstance(value, float)
    assert value in (1.0, 2.0, 3.0)


def test_distribution_without_params_draws_target(rng):
    a = MersenneTwister(3)
    assert draw(Distribution(int), rng=a) == draw(int, rng=MersenneTwister(3))


def test_categorical_frequencies():
    rng = PCG64Engine(2024)
    dist = Categorical(["a", "b", "c"], [1, 2, 7])
    sampler = resolve(rng, dist, Repetition.MANY)
    counts = Counter(draw_sampler(rng, sampler) for _ in range(20000))
    assert counts["a"] / 20000 == pytest.approx(0.1, abs=0.02)
    assert counts["b"] / 20000 == pytest.approx(0.2, abs=0.02)
    assert counts["c"] / 20000 == pytest.approx(0.7, abs=0.02)


def test_categorical_zero_weight_never_drawn(rng):
    dist = Categorical(["never", "always"], [0, 1])
    sampler = resolve(rng, dist, Repetition.MANY)
    assert {draw_sampler(rng, sampler) for _ in range(200)} == {"always"}
    assert {draw(dist, rng=rng) for _ in range(200)} == {"always"}


def test_categorical_unweighted(rng):
    values = {draw(Categorical("xyz"), rng=rng) for _ in range(200)}
    assert values == {"x", "y", "z"}


def test_normal_moments():
    rng = MersenneTwister(7)
    sampler = resolve(rng, Normal(mean=3.0, std=2.0))
    values = np.array([draw_sampler(rng, sampler) for _ in range(20000)])
    assert values.mean() == pytest.approx(3.0, abs=0.1)
    assert values.std() == pytest.approx(2.0, abs=0.1)


def test_exponential_mean():
    rng = MersenneTwister(7)
    sampler = resolve(rng, Exponential(scale=0.5))
    values = np.array([draw_sampler(rng, sampler) for _ in range(20000)])
    assert values.min() >= 0
    assert values.mean() == pytest.approx(0.5, abs=0.03)


def test_str_type_gives_alphanumeric_string(rng):
    value = draw(str, rng=rng)
    assert len(value) == 8
    assert value.isalnum()
