"""Tests for sampler resolution and the registry."""

import numpy as np
import pytest

import randkit.generation.categorical as categorical_module
from randkit.engines import Engine, MersenneTwister, RandomDevice
from randkit.ir import Categorical, Distribution, Normal, Pair, Uniform
from randkit.sampling import (
    Repetition,
    RepetitionMismatchError,
    RequestShape,
    SamplerTag,
    SamplerTrivial,
    SamplerType,
    UnsupportedRequestError,
    drawer,
    find_draw,
    list_draws,
    resolve,
    resolver,
)
from randkit.generation import draw, draw_sampler, fill


class Opaque:
    """A type nothing knows how to sample."""


class Dice(Distribution):
    """Test-only distribution registered through the public decorators."""

    sides: int = 6


@resolver(RequestShape.DISTRIBUTION, Dice)
def resolve_dice(rng, dist, repetition):
    return SamplerTag("dice", dist.sides, int, repetition, source=dist)


@drawer(RequestShape.TAG, "dice")
def draw_dice(rng, sampler):
    return 1 + rng.next_word() % sampler.data


class WordEngine(Engine):
    """Minimal engine without a numpy generator."""

    def __init__(self, seed=0):
        self.inner = MersenneTwister(seed)

    def next_word(self):
        return self.inner.next_word()

    def reseed(self, seed=None):
        self.inner.reseed(seed)
        return self


def test_type_without_rule_gives_type_sampler(rng):
    sampler = resolve(rng, float, Repetition.ONE)
    assert sampler == SamplerType(float, Repetition.ONE)
    assert sampler.eltype is float


def test_value_without_rule_gives_trivial_sampler(rng):
    sampler = resolve(rng, range(1, 11), Repetition.ONE)
    assert isinstance(sampler, SamplerTrivial)
    assert sampler.value == range(1, 11)
    assert sampler.eltype is int


def test_many_draws_precompute(rng):
    sampler = resolve(rng, range(1, 11))
    assert isinstance(sampler, SamplerTag)
    assert sampler.tag == "range"
    assert sampler.repetition is Repetition.MANY
    assert sampler.eltype is int


def test_default_repetition_is_many(rng):
    assert resolve(rng, int).repetition is Repetition.MANY


def test_repetition_accepts_strings(rng):
    assert resolve(rng, int, "one").repetition is Repetition.ONE


def test_resolving_a_sampler_for_same_repetition_returns_it(rng):
    sampler = resolve(rng, range(5), Repetition.MANY)
    assert resolve(rng, sampler, Repetition.MANY) is sampler


def test_repetition_mismatch(rng):
    one_shot = resolve(rng, range(5), Repetition.ONE)
    with pytest.raises(RepetitionMismatchError):
        resolve(rng, one_shot, Repetition.MANY)
    with pytest.raises(RepetitionMismatchError):
        fill(np.zeros(3, dtype=np.int64), one_shot, rng=rng)


def test_one_shot_sampler_still_draws(rng):
    """Drawing directly from a sampler does not re-resolve it."""
    one_shot = resolve(rng, range(5), Repetition.ONE)
    assert draw(one_shot, rng=rng) in range(5)


def test_unsupported_type(rng):
    with pytest.raises(UnsupportedRequestError) as excinfo:
        resolve(rng, Opaque, Repetition.ONE)
    message = str(excinfo.value)
    assert "Opaque" in message
    assert "repetition=one" in message


def test_unsupported_value(rng):
    with pytest.raises(UnsupportedRequestError):
        draw(Opaque(), rng=rng)
    # Also a TypeError for callers that catch the builtin
    with pytest.raises(TypeError):
        draw(Opaque(), rng=rng)


def test_unsupported_distribution_params(rng):
    with pytest.raises(UnsupportedRequestError):
        draw(Distribution(Pair, range(3)), rng=rng)


def test_registered_distribution(rng):
    values = [draw(Dice(sides=4), rng=rng) for _ in range(200)]
    assert set(values) <= {1, 2, 3, 4}
    assert "tag:dice@Engine" in list_draws()


def test_sampler_shared_across_engines():
    sampler = resolve(MersenneTwister(1), range(100))
    a = [draw_sampler(MersenneTwister(9), sampler) for _ in range(3)]
    b = [draw_sampler(MersenneTwister(9), sampler) for _ in range(3)]
    assert a == b


def test_tagged_payload_is_read_only(rng):
    sampler = resolve(rng, Categorical(["x", "y"], [1, 3]))
    _, _, prob, alias = sampler.data
    with pytest.raises(ValueError):
        prob[0] = 0.5
    with pytest.raises(ValueError):
        alias[0] = 1


def test_single_draw_skips_alias_table(rng, monkeypatch):
    """Precomputation happens for many draws only."""
    calls = []
    original = categorical_module.build_alias_table

    def counting(probs):
        calls.append(len(probs))
        return original(probs)

    monkeypatch.setattr(categorical_module, "build_alias_table", counting)
    dist = Categorical(["a", "b", "c"], [1, 1, 2])

    one = resolve(rng, dist, Repetition.ONE)
    assert isinstance(one, SamplerTrivial)
    assert calls == []

    many = resolve(rng, dist, Repetition.MANY)
    assert isinstance(many, SamplerTag)
    assert calls == [3]


def test_engine_specific_draw_for_numpy_engines():
    """Numpy-backed engines draw normals through their numpy generator."""
    a = MersenneTwister(3)
    b = MersenneTwister(3)
    assert draw(Normal(), rng=a) == b.generator.standard_normal()


def test_generic_engine_falls_back():
    rng = WordEngine(1)
    sampler = resolve(rng, Normal())
    assert find_draw(rng, sampler) is not find_draw(MersenneTwister(1), sampler)
    values = [draw_sampler(rng, sampler) for _ in range(10)]
    assert all(isinstance(v, float) for v in values)
    assert isinstance(draw(Normal(), rng=RandomDevice()), float)


class Poisson(Distribution):
    """A distribution with parameters but no registered resolver."""

    lam: float = 3.0


def test_unregistered_distribution_subclass_is_unsupported(rng):
    with pytest.raises(UnsupportedRequestError) as excinfo:
        draw(Poisson(int), rng=rng)
    assert "Poisson" in str(excinfo.value)
    with pytest.raises(UnsupportedRequestError):
        resolve(rng, Poisson(int), Repetition.MANY)


def test_uniform_tag_without_params_draws_target():
    assert draw(Uniform(int), rng=MersenneTwister(2)) == draw(int, rng=MersenneTwister(2))
