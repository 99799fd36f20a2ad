"""
Student's t distribution: density, cumulative and inverse.

    P(|T| > |t|) = I_x(df/2, 1/2),   x = df / (t^2 + df)

and the cumulative function halves that tail and reflects it by the sign
of t.
"""

from __future__ import annotations

import math

from savvystats.core.settings import SYMMETRIC_CLIMB
from savvystats.distributions._normal import symmetric_initial_guess
from savvystats.solver import SolverResult, invert
from savvystats.special._beta import _regularized_incomplete_beta
from savvystats.special._gamma import _ln_gamma


def t_pdf(t: float, df: float) -> float:
    if math.isinf(t):
        return 0.0
    ln_density = (
        _ln_gamma((df + 1.0) / 2.0)
        - _ln_gamma(df / 2.0)
        - 0.5 * math.log(df * math.pi)
        - (df + 1.0) / 2.0 * math.log1p(t * t / df)
    )
    return math.exp(ln_density)


def t_cdf(t: float, df: float) -> float:
    if math.isinf(t):
        return 1.0 if t > 0 else 0.0
    x = df / (t * t + df)
    two_tailed = _regularized_incomplete_beta(x, df / 2.0, 0.5)
    if t > 0:
        return 1.0 - two_tailed / 2.0
    return two_tailed / 2.0


def solve_t(prob: float, df: float) -> SolverResult:
    return invert(
        prob,
        lambda t: t_cdf(t, df),
        symmetric_initial_guess(prob),
        SYMMETRIC_CLIMB,
    )


def t_quantile(prob: float, df: float) -> float:
    if prob <= 0.0:
        return -math.inf
    if prob >= 1.0:
        return math.inf
    return solve_t(prob, df).value
