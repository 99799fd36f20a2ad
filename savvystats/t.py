"""
Student's t family.

    dist(stat, df, cumulative=True)
    inv(prob, df)
    conf(alpha, mean, stdev, count, sidedness)     df = count - 1
    test1s(expected, mean, stdev, count, alternative)
"""

from __future__ import annotations

from typing import Any

from savvystats.core.selectors import Alternative, Sidedness
from savvystats.core.validation import DomainChecks
from savvystats.distributions import t_cdf, t_pdf, t_quantile
from savvystats.estimation import ConfidenceInterval, t_conf, t_test


def dist(stat: Any, df: Any, cumulative: bool = True) -> float:
    checks = DomainChecks("t.dist")
    checks.number(stat, "stat", finite=False)
    checks.positive(df, "df")
    checks.require(
        isinstance(cumulative, bool),
        f"cumulative must be True or False, got {cumulative!r}",
    )
    checks.raise_if_failed()

    if cumulative:
        return t_cdf(float(stat), float(df))
    return t_pdf(float(stat), float(df))


def inv(prob: Any, df: Any) -> float:
    checks = DomainChecks("t.inv")
    checks.probability(prob, "prob")
    checks.positive(df, "df")
    checks.raise_if_failed()
    return t_quantile(float(prob), float(df))


def conf(alpha: Any, mean: Any, stdev: Any, count: Any,
         sidedness: Any = "two-sided") -> ConfidenceInterval:
    """
    t interval for the mean from sample statistics.

    Parameters
    ----------
    alpha : float
        Significance level in (0, 1).
    mean, stdev : float
        Sample mean and sample standard deviation.
    count : int
        Sample size, at least 2.
    sidedness : str, int or Sidedness
        'two-sided', 'lower' or 'upper'.
    """
    checks = DomainChecks("t.conf")
    checks.alpha(alpha)
    checks.number(mean, "mean")
    checks.non_negative(stdev, "stdev")
    checks.integer(count, "count", minimum=2)
    side = checks.selector(sidedness, Sidedness, "sidedness")
    checks.raise_if_failed()
    return t_conf(
        float(alpha), float(mean), float(stdev), int(count), side,
    )


def test1s(expected: Any, mean: Any, stdev: Any, count: Any,
           alternative: Any = "different") -> float:
    """One-sample t test of H0: population mean = expected."""
    checks = DomainChecks("t.test1s")
    checks.number(expected, "expected")
    checks.number(mean, "mean")
    checks.positive(stdev, "stdev")
    checks.integer(count, "count", minimum=2)
    alt = checks.selector(alternative, Alternative, "alternative")
    checks.raise_if_failed()
    return t_test(
        float(expected), float(mean), float(stdev), int(count), alt,
    )
