"""
Chi-square family.

    dist(stat, df, cumulative=True)
    inv(prob, df)
    conf(alpha, stdev, count, sidedness)         interval for the variance
    test1s(expected, stdev, count, alternative)  test of the variance

`expected` in test1s is the hypothesised population variance.
"""

from __future__ import annotations

from typing import Any

from savvystats.core.selectors import Alternative, Sidedness
from savvystats.core.validation import DomainChecks
from savvystats.distributions import chisq_cdf, chisq_pdf, chisq_quantile
from savvystats.estimation import ConfidenceInterval, chisq_conf, chisq_test


def dist(stat: Any, df: Any, cumulative: bool = True) -> float:
    """Chi-square cumulative probability, or the density (0 for stat <= 0)."""
    checks = DomainChecks("chisq.dist")
    checks.number(stat, "stat", finite=False)
    checks.positive(df, "df")
    checks.require(
        isinstance(cumulative, bool),
        f"cumulative must be True or False, got {cumulative!r}",
    )
    checks.raise_if_failed()

    if cumulative:
        return chisq_cdf(float(stat), float(df))
    return chisq_pdf(float(stat), float(df))


def inv(prob: Any, df: Any) -> float:
    """Quantile; 0 at prob = 0 and inf at prob = 1."""
    checks = DomainChecks("chisq.inv")
    checks.probability(prob, "prob")
    checks.positive(df, "df")
    checks.raise_if_failed()
    return chisq_quantile(float(prob), float(df))


def conf(alpha: Any, stdev: Any, count: Any,
         sidedness: Any = "two-sided") -> ConfidenceInterval:
    checks = DomainChecks("chisq.conf")
    checks.alpha(alpha)
    checks.non_negative(stdev, "stdev")
    checks.integer(count, "count", minimum=2)
    side = checks.selector(sidedness, Sidedness, "sidedness")
    checks.raise_if_failed()
    return chisq_conf(
        float(alpha), float(stdev), int(count), side,
    )


def test1s(expected: Any, stdev: Any, count: Any,
           alternative: Any = "different") -> float:
    checks = DomainChecks("chisq.test1s")
    checks.positive(expected, "expected")
    checks.non_negative(stdev, "stdev")
    checks.integer(count, "count", minimum=2)
    alt = checks.selector(alternative, Alternative, "alternative")
    checks.raise_if_failed()
    return chisq_test(
        float(expected), float(stdev), int(count), alt,
    )
