"""Shared fixtures for the insight-mcp test suite."""

import numpy as np
import pytest

from insight_mcp.config import Settings
from insight_mcp.service import QueryService


async def no_sleep(seconds):
    return None


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def settings():
    return Settings(query_delay=0.0, table_delay=0.0)


@pytest.fixture
def service(settings, rng):
    """QueryService that resolves immediately with a seeded random source."""
    return QueryService(settings, rng=rng, sleep=no_sleep)


class FixedRng:
    """Stand-in for numpy's Generator returning fixed draws."""

    def __init__(self, uniform=0.5, integer=42):
        self.uniform = uniform
        self.integer = integer
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.uniform

    def integers(self, low, high=None):
        self.calls += 1
        return self.integer


class ExplodingRng:
    """Fails the test if any code path draws randomness."""

    def random(self):
        raise AssertionError("random() called outside the payment-status answer")

    def integers(self, low, high=None):
        raise AssertionError("integers() called outside the payment-status answer")


@pytest.fixture
def exploding_rng():
    return ExplodingRng()


@pytest.fixture
def fixed_rng():
    """Factory for FixedRng with chosen draws."""
    return FixedRng
