"""
Shared helpers for intervals and one-sample tests.
"""

from __future__ import annotations

from savvystats.core.selectors import Alternative, Sidedness


def tail_area(alpha: float, sidedness: Sidedness) -> float:
    """Probability left in each excluded tail."""
    if sidedness is Sidedness.TWO_SIDED:
        return alpha / 2.0
    return alpha


def keep_bounds(
    lower: float, upper: float, sidedness: Sidedness,
) -> tuple[float | None, float | None]:
    """Drop the bound a one-sided interval does not carry."""
    if sidedness is Sidedness.LOWER:
        return lower, None
    if sidedness is Sidedness.UPPER:
        return None, upper
    return lower, upper


def symmetric_bounds(
    estimate: float, half_width: float, sidedness: Sidedness,
) -> tuple[float | None, float | None]:
    return keep_bounds(estimate - half_width, estimate + half_width, sidedness)


def p_value(less: float, greater: float, alternative: Alternative) -> float:
    """
    Pick the p-value for the alternative from the two tail probabilities.

    Two-sided p-values double the smaller tail, capped at 1.
    """
    if alternative is Alternative.LESS:
        return min(1.0, less)
    if alternative is Alternative.GREATER:
        return min(1.0, greater)
    return min(1.0, 2.0 * min(less, greater))
