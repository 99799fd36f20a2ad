"""
Normal distribution: density, cumulative and inverse.

The cumulative function goes through the error function,
Phi(x) = (1 + erf(z)) / 2 with z = (x - mean) / (stdev sqrt 2). Below the
mean the sum 1 + erf(z) cancels, so past one unit of z the lower tail is
taken from erfc directly.
"""

from __future__ import annotations

import math

from savvystats.core.settings import NORMAL_TAIL_LIMIT, SYMMETRIC_CLIMB
from savvystats.solver import SolverResult, invert
from savvystats.special._erf import _erf, _erfc_tail

_SQRT2 = math.sqrt(2.0)
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def normal_pdf(x: float, mean: float, stdev: float) -> float:
    z = (x - mean) / stdev
    return math.exp(-0.5 * z * z) / (stdev * _SQRT_TWO_PI)


def normal_cdf(x: float, mean: float, stdev: float) -> float:
    z = (x - mean) / (stdev * _SQRT2)
    if z <= -NORMAL_TAIL_LIMIT:
        return 0.5 * _erfc_tail(-z)
    return 0.5 * (1.0 + _erf(z))


def symmetric_initial_guess(prob: float) -> float:
    """Start left of zero below the median, right of it above."""
    if prob < 0.5:
        return -0.5
    if prob > 0.5:
        return 0.5
    return 0.0


def solve_standard_normal(prob: float) -> SolverResult:
    """z with Phi(z) = prob, for 0 < prob < 1."""
    return invert(
        prob,
        lambda z: normal_cdf(z, 0.0, 1.0),
        symmetric_initial_guess(prob),
        SYMMETRIC_CLIMB,
    )


def normal_quantile(prob: float, mean: float, stdev: float) -> float:
    if prob <= 0.0:
        return -math.inf
    if prob >= 1.0:
        return math.inf
    z = solve_standard_normal(prob).value
    return z * stdev + mean
