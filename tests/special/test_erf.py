"""
Tests for the error function.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import special as sp_special

from savvystats.core.exceptions import DomainError
from savvystats.special import erf


class TestErf:

    def test_zero(self):
        assert erf(0) == 0.0

    @pytest.mark.parametrize("z", [0.01, 0.3, 1.0, 1.5, 2.5, 2.99, 3.0, 3.5, 4.5, 6.0])
    def test_against_scipy(self, z):
        assert_allclose(erf(z), sp_special.erf(z), rtol=1e-9, atol=1e-12)

    def test_odd(self):
        for z in (0.2, 1.7, 3.4, 5.0):
            assert erf(-z) == -erf(z)

    def test_bounded(self):
        for z in np.linspace(-8, 8, 161):
            assert -1.0 <= erf(float(z)) <= 1.0

    def test_saturates(self):
        assert erf(10.0) == 1.0
        assert erf(math.inf) == 1.0
        assert erf(-math.inf) == -1.0

    def test_non_decreasing(self):
        values = [erf(float(z)) for z in np.linspace(-5, 5, 201)]
        assert np.all(np.diff(values) >= 0)

    @pytest.mark.parametrize("z", ["1", None, math.nan, False])
    def test_domain(self, z):
        with pytest.raises(DomainError):
            erf(z)
