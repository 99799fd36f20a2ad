"""
Permutation and combination counts without factorials.

n! overflows a double at n = 171, long before n-choose-k does, so
combinations are accumulated one ratio at a time: after step i the running
value is C(n - r + i, i), an integer, which keeps the result exact for as
long as it fits in 53 bits.
"""

from __future__ import annotations

from savvystats.core.validation import DomainChecks


def _check_counts(function: str, n: int, k: int) -> None:
    checks = DomainChecks(function)
    n_ok = checks.integer(n, "n", minimum=0)
    k_ok = checks.integer(k, "k", minimum=0)
    if n_ok and k_ok:
        checks.require(
            k <= n, f"n must be greater than or equal to k, got n={n}, k={k}"
        )
    checks.raise_if_failed()


def _combinations(n: int, k: int) -> float:
    r = min(k, n - k)
    result = 1.0
    for i in range(1, r + 1):
        result = result * (n - r + i) / i
    return result


def permutations(n: int, k: int) -> int:
    """
    Number of ordered selections of k items from n: n! / (n - k)!.

    Computed as the falling product n (n-1) ... (n-k+1) in exact integer
    arithmetic; 1 when k = 0.
    """
    _check_counts("permutations", n, k)
    n, k = int(n), int(k)
    result = 1
    for factor in range(n, n - k, -1):
        result *= factor
    return result


def combinations(n: int, k: int) -> float:
    """
    Number of unordered selections of k items from n: n! / (k! (n - k)!).

    Uses min(k, n - k) ratio terms, so combinations(n, k) and
    combinations(n, n - k) run the identical computation.
    """
    _check_counts("combinations", n, k)
    return _combinations(int(n), int(k))
