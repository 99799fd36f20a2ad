"""
Tests for the integer-support quantile search.
"""

import math

import pytest

from savvystats.core.settings import DiscreteSearchSettings
from savvystats.solver import search_integer


def _geometric_cdf(k, p=0.3):
    return 1.0 - (1.0 - p) ** (k + 1)


def _brute_force(target, cdf, upper):
    for k in range(upper + 1):
        if cdf(k) >= target:
            return k
    return upper


class TestSearchInteger:

    @pytest.mark.parametrize("target", [0.05, 0.3, 0.5, 0.9, 0.99])
    @pytest.mark.parametrize("start", [0, 3, 40])
    def test_matches_brute_force(self, target, start):
        result = search_integer(target, _geometric_cdf, start)
        assert result.converged
        assert result.value == _brute_force(target, _geometric_cdf, 1000)

    def test_returns_lower_edge(self):
        result = search_integer(0.1, _geometric_cdf, 5)
        assert result.value == 0
        assert result.converged

    def test_respects_upper_bound(self):
        steps = [0.0, 0.1, 0.2, 0.4, 0.7, 1.0]
        result = search_integer(0.65, lambda k: steps[min(k, 5)], 0, upper=5)
        assert result.value == 4

    def test_stall_at_upper_edge(self):
        """A cumulative function pinned below the target stops at the edge."""
        result = search_integer(0.9, lambda k: 0.5, 2, upper=10)
        assert result.value == 10
        assert not result.converged

    def test_unbounded_stall_stops(self):
        result = search_integer(0.9, lambda k: 0.5, 2)
        assert not result.converged
        assert result.iterations < 1000

    def test_unbounded_stall_returns_plateau_start(self):
        plateau = lambda k: min(0.5, k / 10)
        result = search_integer(0.9, plateau, 0)
        assert not result.converged
        assert 5 <= result.value < 100

    def test_custom_settings(self):
        slow = DiscreteSearchSettings(step=1, growth=1.0, decay=1.0)
        result = search_integer(0.5, _geometric_cdf, 0, slow)
        assert result.value == _brute_force(0.5, _geometric_cdf, 100)
        assert result.iterations == result.value + 1

    def test_iteration_cap(self):
        capped = DiscreteSearchSettings(max_iterations=3)
        result = search_integer(1 - 1e-12, _geometric_cdf, 0, capped)
        assert not result.converged
        assert result.iterations == 3
        assert math.isfinite(result.error)


def _halving_cdf(k):
    # reaches exactly 1.0 in floating point from k = 53 on
    return 1.0 - 0.5 ** (k + 1)


class TestSearchIntegerBracketing:

    @pytest.mark.parametrize("target", [0.9, 0.99])
    def test_settles_without_oscillating(self, target):
        result = search_integer(target, _geometric_cdf, 3)
        assert result.converged
        assert result.iterations < 20

    def test_answer_meets_target(self):
        for start in (0, 3, 12, 40, 200):
            k = search_integer(0.995, _geometric_cdf, start).value
            assert _geometric_cdf(k) >= 0.995
            assert _geometric_cdf(k - 1) < 0.995

    def test_saturated_region_is_not_a_stall(self):
        """Two evaluations where the cdf is exactly 1.0 keep the search going down."""
        target = 1 - 1e-12
        result = search_integer(target, _halving_cdf, 200)
        assert result.converged
        assert result.value == _brute_force(target, _halving_cdf, 1000)

    def test_saturated_region_with_upper_bound(self):
        target = 1 - 1e-12
        result = search_integer(target, _halving_cdf, 90, upper=100)
        assert result.value == _brute_force(target, _halving_cdf, 100)

    def test_each_point_evaluated_once(self):
        calls = []

        def counting_cdf(k):
            calls.append(k)
            return _geometric_cdf(k)

        search_integer(0.99, counting_cdf, 40)
        assert len(calls) == len(set(calls))
