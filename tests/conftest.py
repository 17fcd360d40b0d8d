"""Pytest configuration for the path tracer core tests.

Provides seeded random generators so stochastic tests are reproducible.
"""

import pytest

from core.utils import make_rng


@pytest.fixture
def rng():
    """A fresh, seeded numpy Generator for each test."""
    return make_rng(12345)


class FixedRng:
    """Stand-in random source returning preset values.

    ``random()`` always returns ``value``; ``uniform`` returns the midpoint of
    the requested range, i.e. the zero vector for [-1, 1] samplers.
    """

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, low: float, high: float) -> float:
        return 0.5 * (low + high)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRng instances."""
    return FixedRng
