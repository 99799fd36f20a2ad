"""
Tests for savvystats.chisq.
"""

import math

import pytest
from scipy import stats as sp_stats

from savvystats import chisq
from savvystats.core.exceptions import DomainError


class TestDist:

    def test_cumulative_by_default(self):
        assert chisq.dist(3.84, 1) == pytest.approx(sp_stats.chi2.cdf(3.84, 1), abs=1e-9)

    def test_density_zero_at_origin(self):
        assert chisq.dist(0, 5, cumulative=False) == 0.0

    def test_negative_stat_allowed(self):
        assert chisq.dist(-1.0, 3) == 0.0

    def test_df_domain(self):
        with pytest.raises(DomainError, match="df"):
            chisq.dist(1.0, 0)


class TestInv:

    def test_critical_value(self):
        assert chisq.inv(0.95, 1) == pytest.approx(3.841458820694124, rel=1e-6)

    def test_edges(self):
        assert chisq.inv(0, 4) == 0.0
        assert chisq.inv(1, 4) == math.inf


class TestConfAndTest:

    def test_conf_variance(self):
        ci = chisq.conf(0.1, 3.0, 16)
        assert ci.lower == pytest.approx(15 * 9 / sp_stats.chi2.ppf(0.95, 15), rel=1e-6)
        assert ci.upper == pytest.approx(15 * 9 / sp_stats.chi2.ppf(0.05, 15), rel=1e-6)

    def test_conf_domain(self):
        with pytest.raises(DomainError) as excinfo:
            chisq.conf(0.0, -1.0, 1)
        assert len(excinfo.value.violations) == 3

    def test_test1s(self):
        stat = 15 * 9 / 4.0
        expected = sp_stats.chi2.sf(stat, 15)
        assert chisq.test1s(4.0, 3.0, 16, "greater") == pytest.approx(expected, abs=1e-9)

    def test_test1s_expected_positive(self):
        with pytest.raises(DomainError, match="expected"):
            chisq.test1s(0.0, 3.0, 16)
