"""
Binomial distribution: mass, cumulative, quantile and inverse-in-p.

The mass function builds C(n, k) p^k q^(n-k) one ratio at a time starting
from the smaller of the two powers, so the running product stays in range
for any n a caller would sum over. If the product still overflows it is
recomputed in log space.
"""

from __future__ import annotations

import math

from savvystats.core.settings import PROPORTION_CLIMB
from savvystats.solver import SolverResult, invert, search_integer
from savvystats.special._gamma import _ln_gamma


def binomial_pmf(k: int, n: int, p: float) -> float:
    if k < 0 or k > n:
        return 0.0
    p_term = p ** k
    q_term = (1.0 - p) ** (n - k)
    if p_term == 0.0 or q_term == 0.0:
        return 0.0

    smaller, larger = min(p_term, q_term), max(p_term, q_term)
    r = min(k, n - k)
    mass = smaller
    for i in range(1, r + 1):
        mass = mass * (n - r + i) / i

    if math.isinf(mass):
        ln_choose = _ln_gamma(n + 1.0) - _ln_gamma(k + 1.0) - _ln_gamma(n - k + 1.0)
        return math.exp(ln_choose + k * math.log(p) + (n - k) * math.log1p(-p))
    return mass * larger


def binomial_cdf(k: int, n: int, p: float) -> float:
    if k < 0:
        return 0.0
    total = 0.0
    for j in range(min(k, n), -1, -1):
        total += binomial_pmf(j, n, p)
    return min(1.0, total)


def binomial_quantile(prob: float, n: int, p: float) -> int:
    """Smallest k with binomial_cdf(k, n, p) >= prob."""
    if prob <= 0.0:
        return 0
    if prob >= 1.0:
        return n
    result = search_integer(
        prob,
        lambda k: binomial_cdf(k, n, p),
        math.floor(n * p),
        lower=0,
        upper=n,
    )
    return int(result.value)


def solve_binomial_p(prob: float, k: int, n: int) -> SolverResult:
    # cdf(k; n, p) falls as p rises
    return invert(
        prob,
        lambda p: binomial_cdf(k, n, p),
        k / n,
        PROPORTION_CLIMB,
        lower=0.0,
        upper=1.0,
        increasing=False,
    )


def binomial_invp(prob: float, k: int, n: int) -> float:
    """Success probability p with binomial_cdf(k, n, p) = prob."""
    if k >= n or prob <= 0.0:
        return 1.0
    if prob >= 1.0:
        return 0.0
    return solve_binomial_p(prob, k, n).value
