"""
Quantile search over an integer support.

Finds the smallest k with cdf(k) >= target. The step doubles while the
search keeps moving the same way; once it first turns around the target
is bracketed, and from then on the step only halves, never dropping
below one, so the search closes in on the answer instead of overshooting
back and forth.

Each cumulative value is evaluated at most once per call; the boundary
check cdf(k - 1) < target usually reuses a value already seen.

Stall rules:
    - pinned at a support bound (the clamped k did not move), the search
      returns that bound;
    - if two consecutive evaluations below the target give bit-identical
      cumulative values, the function has stopped rising short of the
      target (saturated in floating point) and the search returns the
      bound it was heading for, or the first saturated point on an
      unbounded support.
Both report converged=False.
"""

from __future__ import annotations

from typing import Callable

from savvystats.core.settings import DISCRETE_SEARCH, DiscreteSearchSettings
from savvystats.solver._hill_climb import SolverResult


def search_integer(
    target: float,
    cdf: Callable[[int], float],
    start: int,
    settings: DiscreteSearchSettings = DISCRETE_SEARCH,
    *,
    lower: int = 0,
    upper: int | None = None,
) -> SolverResult:
    """
    Smallest k in [lower, upper] with cdf(k) >= target.

    Parameters
    ----------
    target : float
        Cumulative probability in [0, 1].
    cdf : callable
        Non-decreasing cumulative function of an integer.
    start : int
        First k to evaluate (typically the floor of the mean).
    lower, upper : int
        Support bounds; upper=None for an unbounded support.
    """
    def clamp(k: int) -> int:
        if k < lower:
            return lower
        if upper is not None and k > upper:
            return upper
        return k

    seen: dict[int, float] = {}

    def value(k: int) -> float:
        if k not in seen:
            seen[k] = cdf(k)
        return seen[k]

    k = clamp(int(start))
    step = float(settings.step)
    bracketed = False
    last_k: int | None = None
    last_diff: float | None = None

    for iteration in range(1, settings.max_iterations + 1):
        diff = target - value(k)

        if diff <= 0:
            if k == lower or value(k - 1) < target:
                return SolverResult(k, iteration, True, diff)
            direction = -1
        else:
            direction = 1

        if last_diff is not None:
            if k == last_k:
                return SolverResult(k, iteration, False, diff)
            if diff > 0 and diff == last_diff and value(k) > 0:
                edge = upper if upper is not None else last_k
                return SolverResult(edge, iteration, False, target - value(edge))
            if (diff > 0) != (last_diff > 0):
                bracketed = True
            if bracketed:
                step = max(float(settings.min_step), step * settings.decay)
            else:
                step *= settings.growth

        last_k = k
        last_diff = diff
        k = clamp(k + direction * int(step))

    return SolverResult(k, settings.max_iterations, False, target - value(k))
