"""
Tests for confidence intervals.

Exact intervals are checked against their beta / chi-square closed forms
via scipy.stats.
"""

import math

import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from savvystats.core.selectors import Method, Sidedness
from savvystats.estimation import (
    binomial_conf,
    chisq_conf,
    normal_between,
    normal_conf,
    poisson_conf,
    t_conf,
)

TWO = Sidedness.TWO_SIDED


class TestNormalConf:

    def test_two_sided(self):
        ci = normal_conf(0.05, 10.0, 2.0, 25, TWO)
        half = sp_stats.norm.ppf(0.975) * 2.0 / 5.0
        assert_allclose([ci.lower, ci.upper], [10.0 - half, 10.0 + half], atol=1e-7)
        assert ci.conf_level == pytest.approx(0.95)
        assert ci.estimate == 10.0

    def test_one_sided_uses_full_alpha(self):
        lower = normal_conf(0.05, 0.0, 1.0, 1, Sidedness.LOWER)
        assert lower.upper is None
        assert lower.lower == pytest.approx(-sp_stats.norm.ppf(0.95), abs=1e-7)
        upper = normal_conf(0.05, 0.0, 1.0, 1, Sidedness.UPPER)
        assert upper.lower is None
        assert upper.upper == pytest.approx(sp_stats.norm.ppf(0.95), abs=1e-7)

    def test_zero_stdev_is_degenerate(self):
        ci = normal_conf(0.05, 3.0, 0.0, 10, TWO)
        assert ci.lower == ci.upper == 3.0


class TestNormalBetween:

    def test_central_95(self):
        ci = normal_between(0.95, 0.0, 1.0)
        assert ci.upper == pytest.approx(1.959963984540054, abs=1e-7)
        assert ci.lower == pytest.approx(-ci.upper)

    def test_symmetric_about_mean(self):
        ci = normal_between(0.5, 100.0, 15.0)
        assert ci.lower + ci.upper == pytest.approx(200.0)
        assert ci.conf_level == 0.5

    def test_edges(self):
        assert normal_between(0.0, 2.0, 1.0).width == pytest.approx(0.0)
        ci = normal_between(1.0, 2.0, 1.0)
        assert ci.lower == -math.inf
        assert ci.upper == math.inf


class TestTConf:

    def test_half_width(self):
        ci = t_conf(0.05, 10.0, 2.0, 25, TWO)
        half = sp_stats.t.ppf(0.975, 24) * 2.0 / 5.0
        assert ci.width / 2 == pytest.approx(half, abs=1e-7)
        assert ci.contains(10.0)

    def test_wider_than_normal(self):
        t_ci = t_conf(0.05, 0.0, 1.0, 5, TWO)
        z_ci = normal_conf(0.05, 0.0, 1.0, 5, TWO)
        assert t_ci.width > z_ci.width

    def test_one_sided(self):
        ci = t_conf(0.1, 5.0, 1.0, 16, Sidedness.LOWER)
        assert ci.upper is None
        assert ci.lower == pytest.approx(5.0 - sp_stats.t.ppf(0.9, 15) / 4.0, abs=1e-7)


class TestChisqConf:

    def test_variance_interval(self):
        ci = chisq_conf(0.05, 2.0, 25, TWO)
        df, ss = 24, 24 * 4.0
        assert ci.lower == pytest.approx(ss / sp_stats.chi2.ppf(0.975, df), rel=1e-6)
        assert ci.upper == pytest.approx(ss / sp_stats.chi2.ppf(0.025, df), rel=1e-6)
        assert ci.estimate == pytest.approx(4.0)
        assert ci.contains(4.0)

    def test_one_sided_upper(self):
        ci = chisq_conf(0.05, 1.5, 10, Sidedness.UPPER)
        assert ci.lower is None
        assert ci.upper == pytest.approx(9 * 2.25 / sp_stats.chi2.ppf(0.05, 9), rel=1e-6)

    def test_method_name(self):
        assert "variance" in chisq_conf(0.05, 1.0, 5, TWO).method


class TestBinomialConf:

    def test_exact_matches_clopper_pearson(self):
        k, n = 7, 30
        ci = binomial_conf(0.05, k, n, TWO, Method.EXACT)
        assert ci.lower == pytest.approx(sp_stats.beta.ppf(0.025, k, n - k + 1), abs=1e-6)
        assert ci.upper == pytest.approx(sp_stats.beta.ppf(0.975, k + 1, n - k), abs=1e-6)
        assert "Clopper-Pearson" in ci.method

    def test_exact_edges(self):
        zero = binomial_conf(0.05, 0, 20, TWO, Method.EXACT)
        assert zero.lower == 0.0
        assert zero.upper == pytest.approx(1 - 0.025 ** (1 / 20), abs=1e-6)
        full = binomial_conf(0.05, 20, 20, TWO, Method.EXACT)
        assert full.upper == 1.0
        assert full.lower == pytest.approx(0.025 ** (1 / 20), abs=1e-6)

    def test_normal_wald(self):
        ci = binomial_conf(0.05, 12, 40, TWO, Method.NORMAL)
        half = sp_stats.norm.ppf(0.975) * math.sqrt(0.3 * 0.7 / 40)
        assert_allclose([ci.lower, ci.upper], [0.3 - half, 0.3 + half], atol=1e-7)
        assert ci.warnings == ()

    def test_auto_picks_normal_when_valid(self):
        auto = binomial_conf(0.05, 12, 40, TWO, Method.AUTO)
        assert auto == binomial_conf(0.05, 12, 40, TWO, Method.NORMAL)

    def test_auto_picks_exact_when_invalid(self):
        auto = binomial_conf(0.05, 2, 15, TWO, Method.AUTO)
        assert auto == binomial_conf(0.05, 2, 15, TWO, Method.EXACT)
        assert auto.warnings == ()

    def test_forced_normal_outside_validity_warns(self):
        ci = binomial_conf(0.05, 2, 15, TWO, Method.NORMAL)
        assert ci.has_warning("normal approximation may be inaccurate")
        assert ci.lower == 0.0

    def test_bounds_clipped(self):
        ci = binomial_conf(0.01, 1, 100, TWO, Method.NORMAL)
        assert ci.lower >= 0.0
        assert ci.upper <= 1.0

    def test_one_sided_exact_uses_full_alpha(self):
        k, n = 4, 25
        ci = binomial_conf(0.05, k, n, Sidedness.UPPER, Method.EXACT)
        assert ci.lower is None
        assert ci.upper == pytest.approx(sp_stats.beta.ppf(0.95, k + 1, n - k), abs=1e-6)


class TestPoissonConf:

    @pytest.mark.parametrize("k", [1, 4, 12])
    def test_exact_matches_garwood(self, k):
        ci = poisson_conf(0.05, k, TWO, Method.EXACT)
        assert ci.lower == pytest.approx(sp_stats.chi2.ppf(0.025, 2 * k) / 2, abs=1e-6)
        assert ci.upper == pytest.approx(sp_stats.chi2.ppf(0.975, 2 * k + 2) / 2, abs=1e-6)

    def test_zero_count(self):
        ci = poisson_conf(0.05, 0, TWO, Method.EXACT)
        assert ci.lower == 0.0
        assert ci.upper == pytest.approx(-math.log(0.025), abs=1e-6)

    def test_normal(self):
        ci = poisson_conf(0.05, 25, TWO, Method.NORMAL)
        half = sp_stats.norm.ppf(0.975) * 5.0
        assert_allclose([ci.lower, ci.upper], [25 - half, 25 + half], atol=1e-6)

    def test_normal_lower_clipped(self):
        ci = poisson_conf(0.05, 2, TWO, Method.NORMAL)
        assert ci.lower == 0.0
        assert ci.has_warning("count = 2")

    def test_auto_threshold(self):
        assert "Normal" in poisson_conf(0.05, 5, TWO, Method.AUTO).method
        assert "Garwood" in poisson_conf(0.05, 4, TWO, Method.AUTO).method
