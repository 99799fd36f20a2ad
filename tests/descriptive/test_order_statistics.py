"""
Tests for percentile, median, quartile and mode.
"""

import numpy as np
import pytest

from savvystats import descriptive
from savvystats.core.exceptions import DomainError


class TestPercentile:

    def test_extremes(self, rng):
        x = rng.normal(size=25)
        assert descriptive.percentile(x, 0) == x.min()
        assert descriptive.percentile(x, 100) == x.max()

    def test_whole_rank(self):
        # rank = 0.25 * 8 = 2
        assert descriptive.percentile([7, 1, 3, 5, 2, 6, 4], 25) == 2.0

    def test_fractional_rank_averages_neighbours(self):
        # rank = 0.5 * 5 = 2.5 -> mean of 2nd and 3rd order statistics
        assert descriptive.percentile([1, 2, 3, 4], 50) == 2.5

    def test_rank_below_one_gives_minimum(self):
        assert descriptive.percentile([10, 20, 30], 10) == 10.0

    def test_rank_above_n_gives_maximum(self):
        assert descriptive.percentile([10, 20, 30], 90) == 30.0

    def test_unsorted_input(self):
        assert descriptive.percentile([5, 1, 4, 2, 3], 50) == 3.0

    @pytest.mark.parametrize("k", [-1, 100.5, "50", None])
    def test_k_domain(self, k):
        with pytest.raises(DomainError):
            descriptive.percentile([1, 2, 3], k)


class TestMedianAndQuartile:

    def test_median_odd(self):
        assert descriptive.median([3, 1, 2]) == 2.0

    def test_median_even(self):
        assert descriptive.median([4, 1, 3, 2]) == 2.5

    def test_quartiles(self, small_sample):
        assert descriptive.quartile(small_sample, 0) == 2.0
        assert descriptive.quartile(small_sample, 2) == descriptive.median(small_sample)
        assert descriptive.quartile(small_sample, 4) == 9.0

    def test_quartile_ordering(self, rng):
        x = rng.normal(size=31)
        values = [descriptive.quartile(x, q) for q in range(5)]
        assert np.all(np.diff(values) >= 0)

    @pytest.mark.parametrize("q", [5, -1, 1.5])
    def test_quartile_domain(self, q):
        with pytest.raises(DomainError):
            descriptive.quartile([1, 2, 3], q)


class TestMode:

    def test_single_mode(self):
        assert descriptive.mode([1, 2, 2, 3]) == (2.0,)

    def test_ties_ascending(self, small_sample):
        assert descriptive.mode(small_sample) == (4.0, 7.0)

    def test_no_repeats(self):
        assert descriptive.mode([1, 2, 3]) == ()

    def test_last_group_counted(self):
        assert descriptive.mode([1, 5, 5, 5]) == (5.0,)
