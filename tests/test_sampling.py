"""Unit tests for the rejection samplers in core.utils."""

import random

import numpy as np
import pytest

from core.utils import (
    make_rng,
    random_in_unit_circle,
    random_in_unit_sphere,
    random_unit_vector,
)

NUM_SAMPLES = 10000


class TestUnitSphere:
    """Tests for uniform sampling inside the unit ball."""

    def test_samples_inside_ball(self, rng):
        for _ in range(NUM_SAMPLES):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_mean_is_centroid(self, rng):
        samples = np.array([random_in_unit_sphere(rng).to_array() for _ in range(NUM_SAMPLES)])
        # Per-axis std is sqrt(1/5), so the standard error of the mean is ~0.0045
        np.testing.assert_allclose(samples.mean(axis=0), [0.0, 0.0, 0.0], atol=0.03)

    def test_fills_the_ball(self, rng):
        """Uniform in volume: 1/8 of samples fall inside radius 0.5."""
        inner = sum(
            random_in_unit_sphere(rng).length_squared() < 0.25 for _ in range(NUM_SAMPLES)
        )
        assert inner / NUM_SAMPLES == pytest.approx(0.125, abs=0.02)


class TestUnitCircle:
    """Tests for uniform sampling inside the unit disk in the xy-plane."""

    def test_samples_inside_disk(self, rng):
        for _ in range(NUM_SAMPLES):
            p = random_in_unit_circle(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_mean_is_centroid(self, rng):
        samples = np.array([random_in_unit_circle(rng).to_array() for _ in range(NUM_SAMPLES)])
        np.testing.assert_allclose(samples.mean(axis=0), [0.0, 0.0, 0.0], atol=0.03)


class TestRandomSource:
    """Tests for explicit random source handling."""

    def test_seeded_generators_are_reproducible(self):
        a = make_rng(7)
        b = make_rng(7)
        for _ in range(20):
            assert random_in_unit_sphere(a) == random_in_unit_sphere(b)

    def test_stdlib_random_is_accepted(self):
        """Anything with uniform() and random() works as a random source."""
        source = random.Random(3)
        assert random_in_unit_sphere(source).length_squared() < 1.0

    def test_unit_vector(self, rng):
        for _ in range(100):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)
