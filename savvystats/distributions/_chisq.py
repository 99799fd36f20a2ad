"""
Chi-square distribution: density, cumulative and inverse.

The cumulative function is the regularized lower incomplete gamma function
P(df/2, stat/2), formed as exp(ln gamma(df/2, stat/2) - ln Gamma(df/2)).
The density is defined as 0 for stat <= 0; it is never evaluated there,
so 0 ** negative never happens for df < 2.
"""

from __future__ import annotations

import math

from savvystats.core.settings import CHISQ_CLIMB
from savvystats.solver import SolverResult, invert
from savvystats.special._gamma import _ln_gamma, _ln_lower_gamma

_LN2 = math.log(2.0)


def chisq_pdf(stat: float, df: float) -> float:
    if stat <= 0.0 or math.isinf(stat):
        return 0.0
    half = df / 2.0
    ln_density = (
        (half - 1.0) * math.log(stat) - stat / 2.0 - half * _LN2 - _ln_gamma(half)
    )
    return math.exp(ln_density)


def chisq_cdf(stat: float, df: float) -> float:
    if stat <= 0.0:
        return 0.0
    if math.isinf(stat):
        return 1.0
    half = df / 2.0
    value = math.exp(_ln_lower_gamma(half, stat / 2.0) - _ln_gamma(half))
    return min(1.0, value)


def solve_chisq(prob: float, df: float) -> SolverResult:
    # the mean is a serviceable start on both sides of the skewed body
    return invert(
        prob,
        lambda x: chisq_cdf(x, df),
        float(df),
        CHISQ_CLIMB,
        lower=0.0,
    )


def chisq_quantile(prob: float, df: float) -> float:
    if prob <= 0.0:
        return 0.0
    if prob >= 1.0:
        return math.inf
    return solve_chisq(prob, df).value
