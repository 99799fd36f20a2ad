"""
Tests for the DomainChecks collector and the number predicates.
"""

import math

import numpy as np
import pytest

from savvystats.core.exceptions import DomainError
from savvystats.core.validation import DomainChecks, is_integer, is_number


class TestPredicates:

    @pytest.mark.parametrize("value", [0, 1, -3, 2.5, np.float64(1.5), np.int64(4), math.inf])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, False, math.nan, "3", None, [1], 1 + 2j])
    def test_non_numbers(self, value):
        assert not is_number(value)

    @pytest.mark.parametrize("value", [0, 7, -2, 3.0, np.int32(5), np.float64(2.0)])
    def test_integers(self, value):
        assert is_integer(value)

    @pytest.mark.parametrize("value", [2.5, math.inf, math.nan, True, "4"])
    def test_non_integers(self, value):
        assert not is_integer(value)


class TestDomainChecks:

    def test_passing_checks_do_not_raise(self):
        checks = DomainChecks("f")
        assert checks.probability(0.5)
        assert checks.integer(3, "n")
        assert checks.positive(2.0, "s")
        assert checks.alpha(0.05)
        checks.raise_if_failed()
        assert checks.violations == ()

    def test_all_violations_reported(self):
        checks = DomainChecks("binom.dist")
        checks.integer(-1, "successes")
        checks.probability(1.5, "probability")
        with pytest.raises(DomainError) as excinfo:
            checks.raise_if_failed()
        err = excinfo.value
        assert len(err.violations) == 2
        assert err.function == "binom.dist"
        assert str(err).startswith("binom.dist: ")
        assert "; " in str(err)

    def test_failed_check_returns_false(self):
        checks = DomainChecks("f")
        assert not checks.number("a", "x")
        assert not checks.positive(0, "x")
        assert not checks.non_negative(-1, "x")
        assert not checks.integer(1.5, "x")
        assert len(checks.violations) == 4

    def test_non_numeric_reported_once(self):
        checks = DomainChecks("f")
        checks.positive(None, "x")
        assert checks.violations == ("x must be a number, got None",)

    def test_probability_bounds_inclusive(self):
        checks = DomainChecks("f")
        assert checks.probability(0.0)
        assert checks.probability(1.0)
        assert not checks.probability(-1e-12)

    def test_alpha_bounds_exclusive(self):
        checks = DomainChecks("f")
        assert not checks.alpha(0.0)
        assert not checks.alpha(1.0)

    def test_infinite_rejected_unless_allowed(self):
        checks = DomainChecks("f")
        assert not checks.number(math.inf, "x")
        assert checks.number(math.inf, "y", finite=False)

    def test_integer_minimum(self):
        checks = DomainChecks("f")
        assert not checks.integer(1, "count", minimum=2)
        assert checks.integer(-5, "k", minimum=None)

    def test_nan_is_non_numeric(self):
        checks = DomainChecks("f")
        checks.number(math.nan, "x")
        assert "must be a number" in checks.violations[0]

    def test_collectors_are_independent(self):
        first = DomainChecks("f")
        first.fail("broken")
        second = DomainChecks("g")
        second.raise_if_failed()
