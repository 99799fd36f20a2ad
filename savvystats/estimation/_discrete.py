"""
Intervals and exact one-sample tests for the binomial and Poisson families.

Interval methods
----------------
normal : Wald interval p +/- z sqrt(p(1-p)/n) clipped to [0, 1] for a
         proportion; k +/- z sqrt(k) with the lower bound clipped at 0 for
         a Poisson mean.
exact  : Clopper-Pearson for a proportion, Garwood for a Poisson mean.
         Each bound is the parameter value at which the observed count
         sits exactly on the excluded tail:

             lower:  P(X >= k | lower) = a   i.e.  cdf(k - 1 | lower) = 1 - a
             upper:  P(X <= k | upper) = a   i.e.  cdf(k | upper)     = a

auto   : normal when its validity rule holds (n p (1-p) >= 5, or k >= 5),
         exact otherwise.

Asking for the normal method outside its validity rule is allowed; the
interval then carries a warning.
"""

from __future__ import annotations

import math

from savvystats.core.selectors import Alternative, Method, Sidedness
from savvystats.core.settings import APPROXIMATION_THRESHOLD
from savvystats.distributions import (
    binomial_cdf,
    binomial_invp,
    normal_quantile,
    poisson_cdf,
    poisson_invp,
)
from savvystats.estimation._common import keep_bounds, p_value, tail_area
from savvystats.estimation.solution import ConfidenceInterval


def _pick_method(method: Method, valid: bool) -> Method:
    if method is Method.AUTO:
        return Method.NORMAL if valid else Method.EXACT
    return method


def binomial_conf(
    alpha: float, successes: int, trials: int,
    sidedness: Sidedness, method: Method,
) -> ConfidenceInterval:
    """Interval for a binomial success probability."""
    k, n = int(successes), int(trials)
    p_hat = k / n
    variance = n * p_hat * (1.0 - p_hat)
    valid = variance >= APPROXIMATION_THRESHOLD
    method = _pick_method(method, valid)
    tail = tail_area(alpha, sidedness)

    warnings_list: list[str] = []
    if method is Method.NORMAL:
        if not valid:
            warnings_list.append(
                f"normal approximation may be inaccurate: n*p*(1-p) = "
                f"{variance:.4g} < {APPROXIMATION_THRESHOLD:g}"
            )
        z = normal_quantile(1.0 - tail, 0.0, 1.0)
        half_width = z * math.sqrt(p_hat * (1.0 - p_hat) / n)
        lower = max(0.0, p_hat - half_width)
        upper = min(1.0, p_hat + half_width)
        name = "Wald (normal approximation) interval for a proportion"
    else:
        lower = 0.0 if k == 0 else binomial_invp(1.0 - tail, k - 1, n)
        upper = 1.0 if k == n else binomial_invp(tail, k, n)
        name = "Clopper-Pearson exact interval for a proportion"

    lower, upper = keep_bounds(lower, upper, sidedness)
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=p_hat,
        conf_level=1.0 - alpha,
        sidedness=sidedness,
        method=name,
        warnings=tuple(warnings_list),
    )


def poisson_conf(
    alpha: float, successes: int, sidedness: Sidedness, method: Method,
) -> ConfidenceInterval:
    """Interval for a Poisson mean from one observed count."""
    k = int(successes)
    valid = k >= APPROXIMATION_THRESHOLD
    method = _pick_method(method, valid)
    tail = tail_area(alpha, sidedness)

    warnings_list: list[str] = []
    if method is Method.NORMAL:
        if not valid:
            warnings_list.append(
                f"normal approximation may be inaccurate: count = {k} "
                f"< {APPROXIMATION_THRESHOLD:g}"
            )
        z = normal_quantile(1.0 - tail, 0.0, 1.0)
        half_width = z * math.sqrt(k)
        lower = max(0.0, k - half_width)
        upper = k + half_width
        name = "Normal approximation interval for a Poisson mean"
    else:
        lower = 0.0 if k == 0 else poisson_invp(1.0 - tail, k - 1)
        upper = poisson_invp(tail, k)
        name = "Garwood exact interval for a Poisson mean"

    lower, upper = keep_bounds(lower, upper, sidedness)
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=float(k),
        conf_level=1.0 - alpha,
        sidedness=sidedness,
        method=name,
        warnings=tuple(warnings_list),
    )


def binomial_test(
    expected: float, successes: int, trials: int, alternative: Alternative,
) -> float:
    """Exact binomial test of H0: p = expected."""
    k, n = int(successes), int(trials)
    less = binomial_cdf(k, n, expected)
    greater = 1.0 - binomial_cdf(k - 1, n, expected)
    return p_value(less, greater, alternative)


def poisson_test(
    expected: float, successes: int, alternative: Alternative,
) -> float:
    """Exact Poisson test of H0: mean = expected."""
    k = int(successes)
    less = poisson_cdf(k, expected)
    greater = 1.0 - poisson_cdf(k - 1, expected)
    return p_value(less, greater, alternative)
