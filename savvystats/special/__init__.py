"""
Special functions and combinatorics.

Numerical primitives underneath every distribution in savvystats.

Public API:
    ln_gamma(z)                          - ln Gamma(z), Lanczos approximation
    ln_lower_incomplete_gamma(a, x)      - ln gamma(a, x)
    regularized_lower_gamma(a, x)        - P(a, x)
    ln_incomplete_beta(x, a, b)          - ln I_x(a, b), no branch selection
    regularized_incomplete_beta(x, a, b) - I_x(a, b)
    erf(z)                               - error function
    permutations(n, k)                   - n! / (n-k)!
    combinations(n, k)                   - n choose k
"""

from savvystats.special._gamma import (
    ln_gamma,
    ln_lower_incomplete_gamma,
    regularized_lower_gamma,
)
from savvystats.special._beta import (
    ln_incomplete_beta,
    regularized_incomplete_beta,
)
from savvystats.special._erf import erf
from savvystats.special._combinatorics import permutations, combinations

__all__ = [
    "ln_gamma",
    "ln_lower_incomplete_gamma",
    "regularized_lower_gamma",
    "ln_incomplete_beta",
    "regularized_incomplete_beta",
    "erf",
    "permutations",
    "combinations",
]
