"""
Tests for deterministic roughness.
"""

import math

import pytest

from curve_series.curves.roughness import apply_roughness, export_seed, max_variation, seeded_random


class TestSeededRandom:
    """Tests for seeded_random."""

    def test_range(self):
        """Test outputs fall in [0, 1)."""
        values = [seeded_random(seed) for seed in range(5000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_reproducible(self):
        """Test the same seed always gives the same value."""
        assert seeded_random(123456) == seeded_random(123456)

    def test_formula(self):
        """Test the value is the fractional part of sin(seed * 9999) * 10000."""
        raw = math.sin(17 * 9999) * 10000
        assert seeded_random(17) == pytest.approx(raw - math.floor(raw))
        assert seeded_random(0) == 0.0

    def test_spread(self):
        """Test values are spread over the unit interval."""
        values = [seeded_random(seed) for seed in range(2000)]
        below_half = sum(1 for v in values if v < 0.5)
        assert 800 < below_half < 1200


class TestApplyRoughness:
    """Tests for apply_roughness."""

    def test_zero_roughness_is_identity(self):
        """Test roughness 0 never changes the value."""
        for seed in range(50):
            assert apply_roughness(42.5, 0, seed, 100.0) == 42.5

    def test_known_offset(self):
        """Test seed 0 gives the most negative offset."""
        # seeded_random(0) == 0 -> offset = -max_variation
        assert apply_roughness(50.0, 100, 0, 100.0) == pytest.approx(40.0)
        assert apply_roughness(50.0, 50, 0, 100.0) == pytest.approx(45.0)

    def test_deterministic(self):
        """Test identical arguments give identical output."""
        assert apply_roughness(10.0, 73, 5002, 250.0) == apply_roughness(10.0, 73, 5002, 250.0)

    @pytest.mark.parametrize("roughness", [1, 25, 50, 99, 100])
    @pytest.mark.parametrize("value_range", [1.0, 100.0, -100.0, 0.0])
    def test_bounded(self, roughness, value_range):
        """Test the offset never exceeds 10% of the range."""
        bound = 0.1 * abs(value_range)
        for seed in range(0, 200_000, 997):
            offset = apply_roughness(0.0, roughness, seed, value_range)
            assert abs(offset) <= bound + 1e-12

    def test_custom_fraction(self):
        """Test the variation fraction is configurable."""
        assert apply_roughness(0.0, 100, 0, 100.0, fraction=0.2) == pytest.approx(-20.0)


class TestHelpers:
    """Tests for max_variation and export_seed."""

    def test_max_variation(self):
        """Test the bound scales with roughness and range."""
        assert max_variation(100, 100.0) == pytest.approx(10.0)
        assert max_variation(50, 200.0) == pytest.approx(10.0)
        assert max_variation(0, 200.0) == 0.0

    def test_export_seed(self):
        """Test seeds combine the day index and the curve index."""
        assert export_seed(0, 0) == 0
        assert export_seed(3, 2) == 3002
        assert export_seed(182, 4) == 182004
