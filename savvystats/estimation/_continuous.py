"""
Intervals and one-sample tests for the continuous families.

Normal and Student's t intervals and tests concern the population mean;
the chi-square interval and test concern the population variance, with
df = count - 1 in the t and chi-square cases.
"""

from __future__ import annotations

import math

from savvystats.core.selectors import Alternative, Sidedness
from savvystats.distributions import (
    chisq_cdf,
    chisq_quantile,
    normal_cdf,
    normal_quantile,
    t_cdf,
    t_quantile,
)
from savvystats.estimation._common import (
    keep_bounds,
    p_value,
    symmetric_bounds,
    tail_area,
)
from savvystats.estimation.solution import ConfidenceInterval


def normal_conf(
    alpha: float, mean: float, stdev: float, count: int, sidedness: Sidedness,
) -> ConfidenceInterval:
    """mean +/- z * stdev / sqrt(count), stdev treated as known."""
    z = normal_quantile(1.0 - tail_area(alpha, sidedness), 0.0, 1.0)
    half_width = z * stdev / math.sqrt(count)
    lower, upper = symmetric_bounds(mean, half_width, sidedness)
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=mean,
        conf_level=1.0 - alpha,
        sidedness=sidedness,
        method="Normal (z) interval for the mean",
    )


def normal_between(prob: float, mean: float, stdev: float) -> ConfidenceInterval:
    """Central interval of a normal distribution holding probability prob."""
    upper = normal_quantile(0.5 + prob / 2.0, mean, stdev)
    lower = 2.0 * mean - upper
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=mean,
        conf_level=prob,
        sidedness=Sidedness.TWO_SIDED,
        method="Central normal interval",
    )


def t_conf(
    alpha: float, mean: float, stdev: float, count: int, sidedness: Sidedness,
) -> ConfidenceInterval:
    """mean +/- t(count - 1) * stdev / sqrt(count)."""
    df = count - 1
    t = t_quantile(1.0 - tail_area(alpha, sidedness), df)
    half_width = t * stdev / math.sqrt(count)
    lower, upper = symmetric_bounds(mean, half_width, sidedness)
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=mean,
        conf_level=1.0 - alpha,
        sidedness=sidedness,
        method="Student's t interval for the mean",
    )


def chisq_conf(
    alpha: float, stdev: float, count: int, sidedness: Sidedness,
) -> ConfidenceInterval:
    """
    Interval for the population variance.

        [df s^2 / chi2(1 - a), df s^2 / chi2(a)]

    with a = alpha/2 for two-sided intervals and alpha for one-sided ones.
    """
    df = count - 1
    tail = tail_area(alpha, sidedness)
    scaled = df * stdev * stdev
    lower = scaled / chisq_quantile(1.0 - tail, df)
    upper = scaled / chisq_quantile(tail, df)
    lower, upper = keep_bounds(lower, upper, sidedness)
    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        estimate=stdev * stdev,
        conf_level=1.0 - alpha,
        sidedness=sidedness,
        method="Chi-square interval for the variance",
    )


def normal_test(
    expected: float, mean: float, stdev: float, count: int,
    alternative: Alternative,
) -> float:
    """One-sample z test of the mean."""
    z = (mean - expected) / (stdev / math.sqrt(count))
    less = normal_cdf(z, 0.0, 1.0)
    greater = normal_cdf(-z, 0.0, 1.0)
    return p_value(less, greater, alternative)


def t_test(
    expected: float, mean: float, stdev: float, count: int,
    alternative: Alternative,
) -> float:
    """One-sample t test of the mean, df = count - 1."""
    df = count - 1
    t = (mean - expected) / (stdev / math.sqrt(count))
    less = t_cdf(t, df)
    greater = t_cdf(-t, df)
    return p_value(less, greater, alternative)


def chisq_test(
    expected: float, stdev: float, count: int, alternative: Alternative,
) -> float:
    """
    One-sample chi-square test of the variance against `expected`.

    The statistic is (count - 1) s^2 / expected on count - 1 degrees of
    freedom.
    """
    df = count - 1
    stat = df * stdev * stdev / expected
    less = chisq_cdf(stat, df)
    greater = 1.0 - less
    return p_value(less, greater, alternative)
