"""Shared fixtures."""

import pytest

from randkit.config.settings import reset_settings
from randkit.engines import MersenneTwister, reset_default_engine


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Isolate tests from the environment and from each other's default engine."""
    for var in ("RANDKIT_SEED", "RANDKIT_ENGINE", "RANDKIT_DISTINCT_MAX_DRAWS", "RANDKIT_STRING_LENGTH"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    reset_default_engine()
    yield
    reset_settings()
    reset_default_engine()


@pytest.fixture
def rng():
    """Engine with a fixed seed."""
    return MersenneTwister(42)
