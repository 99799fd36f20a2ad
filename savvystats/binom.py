"""
Binomial family.

    dist(successes, trials, probability, cumulative=False)
    inv(prob, trials, probability)              smallest k with cdf >= prob
    invp(prob, successes, trials)               p with cdf(successes) = prob
    conf(alpha, successes, trials, sidedness, method)
    test1s(expected, successes, trials, alternative)

Examples
--------
>>> from savvystats import binom
>>> binom.dist(3, 10, 0.5)
0.1171875
>>> ci = binom.conf(0.05, 12, 40, method="exact")
"""

from __future__ import annotations

from typing import Any

from savvystats.core.selectors import Alternative, Method, Sidedness
from savvystats.core.validation import DomainChecks
from savvystats.distributions import (
    binomial_cdf,
    binomial_invp,
    binomial_pmf,
    binomial_quantile,
)
from savvystats.estimation import ConfidenceInterval, binomial_conf, binomial_test


def _check_counts(
    checks: DomainChecks, successes: Any, trials: Any, *, min_trials: int = 0,
) -> None:
    ok_k = checks.integer(successes, "successes", minimum=0)
    ok_n = checks.integer(trials, "trials", minimum=min_trials)
    if ok_k and ok_n:
        checks.require(
            successes <= trials,
            f"successes must not exceed trials, got {successes!r} > {trials!r}",
        )


def dist(successes: Any, trials: Any, probability: Any,
         cumulative: bool = False) -> float:
    """
    Binomial probability mass, or the cumulative probability when
    cumulative=True.
    """
    checks = DomainChecks("binom.dist")
    _check_counts(checks, successes, trials)
    checks.probability(probability, "probability")
    checks.require(
        isinstance(cumulative, bool),
        f"cumulative must be True or False, got {cumulative!r}",
    )
    checks.raise_if_failed()

    k, n, p = int(successes), int(trials), float(probability)
    if cumulative:
        return binomial_cdf(k, n, p)
    return binomial_pmf(k, n, p)


def inv(prob: Any, trials: Any, probability: Any) -> int:
    """Smallest number of successes whose cumulative probability >= prob."""
    checks = DomainChecks("binom.inv")
    checks.probability(prob, "prob")
    checks.integer(trials, "trials", minimum=0)
    checks.probability(probability, "probability")
    checks.raise_if_failed()
    return binomial_quantile(float(prob), int(trials), float(probability))


def invp(prob: Any, successes: Any, trials: Any) -> float:
    """Success probability p at which P(X <= successes) = prob."""
    checks = DomainChecks("binom.invp")
    checks.probability(prob, "prob")
    _check_counts(checks, successes, trials, min_trials=1)
    checks.raise_if_failed()
    return binomial_invp(float(prob), int(successes), int(trials))


def conf(alpha: Any, successes: Any, trials: Any,
         sidedness: Any = "two-sided", method: Any = "auto") -> ConfidenceInterval:
    """
    Confidence interval for the success probability.

    Parameters
    ----------
    alpha : float
        Significance level in (0, 1).
    successes, trials : int
        Observed count and number of trials (trials >= 1).
    sidedness : str, int or Sidedness
        'two-sided', 'lower' or 'upper' (codes 0, -1, 1).
    method : str, int or Method
        'auto', 'exact' or 'normal' (codes 0, 1, 2).
    """
    checks = DomainChecks("binom.conf")
    checks.alpha(alpha)
    _check_counts(checks, successes, trials, min_trials=1)
    side = checks.selector(sidedness, Sidedness, "sidedness")
    how = checks.selector(method, Method, "method")
    checks.raise_if_failed()
    return binomial_conf(
        float(alpha), int(successes), int(trials), side, how,
    )


def test1s(expected: Any, successes: Any, trials: Any,
           alternative: Any = "different") -> float:
    """Exact one-sample binomial test of H0: p = expected. Returns the p-value."""
    checks = DomainChecks("binom.test1s")
    checks.probability(expected, "expected")
    _check_counts(checks, successes, trials, min_trials=1)
    alt = checks.selector(alternative, Alternative, "alternative")
    checks.raise_if_failed()
    return binomial_test(
        float(expected), int(successes), int(trials), alt,
    )
