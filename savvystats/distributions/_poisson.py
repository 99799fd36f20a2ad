"""
Poisson distribution: mass, cumulative, quantile and inverse-in-mean.
"""

from __future__ import annotations

import math

from savvystats.core.settings import FLOAT_CEILING, RATE_CLIMB
from savvystats.solver import SolverResult, invert, search_integer
from savvystats.special._gamma import _ln_gamma


def poisson_pmf(k: int, mu: float) -> float:
    if k < 0:
        return 0.0
    if mu == 0.0:
        return 1.0 if k == 0 else 0.0
    if k == 0:
        return math.exp(-mu)
    return math.exp(k * math.log(mu) - mu - _ln_gamma(k + 1.0))


def poisson_cdf(k: int, mu: float) -> float:
    if k < 0:
        return 0.0
    total = 0.0
    for j in range(k, -1, -1):
        total += poisson_pmf(j, mu)
    # sums that land within an ulp of 1 are reported as exactly 1
    if total >= FLOAT_CEILING:
        return 1.0
    return total


def poisson_quantile(prob: float, mu: float) -> float:
    """
    Smallest k with poisson_cdf(k, mu) >= prob.

    Returned as a float so that prob = 1 can answer inf; finite answers are
    whole numbers.
    """
    if prob <= 0.0:
        return 0.0
    if prob >= 1.0:
        return math.inf
    result = search_integer(
        prob,
        lambda k: poisson_cdf(k, mu),
        math.floor(mu),
        lower=0,
    )
    return float(result.value)


def solve_poisson_mean(prob: float, k: int) -> SolverResult:
    return invert(
        prob,
        lambda mu: poisson_cdf(k, mu),
        max(float(k), 0.5),
        RATE_CLIMB,
        lower=0.0,
        increasing=False,
    )


def poisson_invp(prob: float, k: int) -> float:
    """Mean mu with poisson_cdf(k, mu) = prob."""
    if prob <= 0.0:
        return math.inf
    if prob >= 1.0:
        return 0.0
    return solve_poisson_mean(prob, k).value
