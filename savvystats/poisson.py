"""
Poisson family.

    dist(successes, mean_rate, cumulative=False)
    inv(prob, mean_rate)                 smallest k with cdf >= prob
    invp(prob, successes)                mean with cdf(successes) = prob
    conf(alpha, successes, sidedness, method)
    test1s(expected, successes, alternative)
"""

from __future__ import annotations

from typing import Any

from savvystats.core.selectors import Alternative, Method, Sidedness
from savvystats.core.validation import DomainChecks
from savvystats.distributions import (
    poisson_cdf,
    poisson_invp,
    poisson_pmf,
    poisson_quantile,
)
from savvystats.estimation import ConfidenceInterval, poisson_conf, poisson_test


def dist(successes: Any, mean_rate: Any, cumulative: bool = False) -> float:
    """Poisson probability mass, or the cumulative probability."""
    checks = DomainChecks("poisson.dist")
    checks.integer(successes, "successes", minimum=0)
    checks.non_negative(mean_rate, "mean_rate")
    checks.require(
        isinstance(cumulative, bool),
        f"cumulative must be True or False, got {cumulative!r}",
    )
    checks.raise_if_failed()

    if cumulative:
        return poisson_cdf(int(successes), float(mean_rate))
    return poisson_pmf(int(successes), float(mean_rate))


def inv(prob: Any, mean_rate: Any) -> float:
    """
    Smallest count whose cumulative probability >= prob.

    Whole-numbered float; inf at prob = 1.
    """
    checks = DomainChecks("poisson.inv")
    checks.probability(prob, "prob")
    checks.non_negative(mean_rate, "mean_rate")
    checks.raise_if_failed()
    return poisson_quantile(float(prob), float(mean_rate))


def invp(prob: Any, successes: Any) -> float:
    """Mean rate at which P(X <= successes) = prob."""
    checks = DomainChecks("poisson.invp")
    checks.probability(prob, "prob")
    checks.integer(successes, "successes", minimum=0)
    checks.raise_if_failed()
    return poisson_invp(float(prob), int(successes))


def conf(alpha: Any, successes: Any, sidedness: Any = "two-sided",
         method: Any = "auto") -> ConfidenceInterval:
    """Confidence interval for a Poisson mean from one observed count."""
    checks = DomainChecks("poisson.conf")
    checks.alpha(alpha)
    checks.integer(successes, "successes", minimum=0)
    side = checks.selector(sidedness, Sidedness, "sidedness")
    how = checks.selector(method, Method, "method")
    checks.raise_if_failed()
    return poisson_conf(
        float(alpha), int(successes), side, how,
    )


def test1s(expected: Any, successes: Any, alternative: Any = "different") -> float:
    """Exact one-sample Poisson test of H0: mean = expected."""
    checks = DomainChecks("poisson.test1s")
    checks.non_negative(expected, "expected")
    checks.integer(successes, "successes", minimum=0)
    alt = checks.selector(alternative, Alternative, "alternative")
    checks.raise_if_failed()
    return poisson_test(
        float(expected), int(successes), alt,
    )
