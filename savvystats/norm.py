"""
Normal family.

    dist(x, mean=0, stdev=1, cumulative=True)
    inv(prob, mean=0, stdev=1)
    between(prob, mean=0, stdev=1)            central interval holding prob
    conf(alpha, mean, stdev, count, sidedness)
    test1s(expected, mean, stdev, count, alternative)

conf and test1s treat stdev as the known population standard deviation
(z procedures); see savvystats.t when it is estimated from the sample.
"""

from __future__ import annotations

from typing import Any

from savvystats.core.selectors import Alternative, Sidedness
from savvystats.core.validation import DomainChecks
from savvystats.distributions import normal_cdf, normal_pdf, normal_quantile
from savvystats.estimation import (
    ConfidenceInterval,
    normal_between,
    normal_conf,
    normal_test,
)


def dist(x: Any, mean: Any = 0.0, stdev: Any = 1.0,
         cumulative: bool = True) -> float:
    """Normal cumulative probability, or the density when cumulative=False."""
    checks = DomainChecks("norm.dist")
    checks.number(x, "x", finite=False)
    checks.number(mean, "mean")
    checks.positive(stdev, "stdev")
    checks.require(
        isinstance(cumulative, bool),
        f"cumulative must be True or False, got {cumulative!r}",
    )
    checks.raise_if_failed()

    if cumulative:
        return normal_cdf(float(x), float(mean), float(stdev))
    return normal_pdf(float(x), float(mean), float(stdev))


def inv(prob: Any, mean: Any = 0.0, stdev: Any = 1.0) -> float:
    """Quantile: x with dist(x, mean, stdev) = prob. -inf/inf at 0/1."""
    checks = DomainChecks("norm.inv")
    checks.probability(prob, "prob")
    checks.number(mean, "mean")
    checks.positive(stdev, "stdev")
    checks.raise_if_failed()
    return normal_quantile(float(prob), float(mean), float(stdev))


def between(prob: Any, mean: Any = 0.0, stdev: Any = 1.0) -> ConfidenceInterval:
    """Symmetric interval around the mean holding probability prob."""
    checks = DomainChecks("norm.between")
    checks.probability(prob, "prob")
    checks.number(mean, "mean")
    checks.positive(stdev, "stdev")
    checks.raise_if_failed()
    return normal_between(float(prob), float(mean), float(stdev))


def _check_sample(checks: DomainChecks, mean: Any, stdev: Any, count: Any,
                  *, strict_stdev: bool) -> None:
    checks.number(mean, "mean")
    if strict_stdev:
        checks.positive(stdev, "stdev")
    else:
        checks.non_negative(stdev, "stdev")
    checks.integer(count, "count", minimum=1)


def conf(alpha: Any, mean: Any, stdev: Any, count: Any,
         sidedness: Any = "two-sided") -> ConfidenceInterval:
    """z interval for the mean: mean +/- z * stdev / sqrt(count)."""
    checks = DomainChecks("norm.conf")
    checks.alpha(alpha)
    _check_sample(checks, mean, stdev, count, strict_stdev=False)
    side = checks.selector(sidedness, Sidedness, "sidedness")
    checks.raise_if_failed()
    return normal_conf(
        float(alpha), float(mean), float(stdev), int(count), side,
    )


def test1s(expected: Any, mean: Any, stdev: Any, count: Any,
           alternative: Any = "different") -> float:
    """One-sample z test of H0: population mean = expected."""
    checks = DomainChecks("norm.test1s")
    checks.number(expected, "expected")
    _check_sample(checks, mean, stdev, count, strict_stdev=True)
    alt = checks.selector(alternative, Alternative, "alternative")
    checks.raise_if_failed()
    return normal_test(
        float(expected), float(mean), float(stdev), int(count), alt,
    )
