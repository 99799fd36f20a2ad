"""
Bidirectional hill-climbing inverse for monotone functions.

Given a target probability and a monotone cumulative function, walks a
guess toward the point where the function meets the target:

    error     = target - f(guess)
    direction = sign(error)            (flipped for decreasing f)
    step     *= growth  if error kept its sign since the last iteration
    step     *= decay   otherwise (we just overshot)
    guess    += direction * step

This is not bisection: nothing is bracketed. It converges fast on average
when the step constants suit the shape of f, so each family passes its own
HillClimbSettings tier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from savvystats.core.settings import HillClimbSettings


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of one inversion.

    Attributes:
        value: The estimate (best seen when not converged)
        iterations: Function evaluations used
        converged: Whether |error| fell below the tolerance
        error: target - f(value)
    """
    value: float
    iterations: int
    converged: bool
    error: float


def _clamp(value: float, lower: float | None, upper: float | None) -> float:
    if lower is not None and value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value


def invert(
    target: float,
    cdf: Callable[[float], float],
    initial: float,
    settings: HillClimbSettings,
    *,
    lower: float | None = None,
    upper: float | None = None,
    increasing: bool = True,
) -> SolverResult:
    """
    Find x with cdf(x) = target.

    Parameters
    ----------
    target : float
        Probability to hit.
    cdf : callable
        Monotone function of one float.
    initial : float
        Starting guess, from the family's initial-guess rule.
    settings : HillClimbSettings
        Step size, growth/decay factors, tolerance and iteration cap.
    lower, upper : float or None
        Bounds of the search domain; guesses are clamped to them.
    increasing : bool
        False when cdf decreases in its argument (e.g. a binomial CDF as a
        function of the success probability).

    Returns
    -------
    SolverResult
        Never raises on non-convergence; the best guess seen is returned
        with converged=False.
    """
    guess = _clamp(initial, lower, upper)
    step = settings.step
    last_error = 1.0
    best_value, best_error = guess, None

    for iteration in range(1, settings.max_iterations + 1):
        error = target - cdf(guess)

        if best_error is None or abs(error) < abs(best_error):
            best_value, best_error = guess, error
        if abs(error) < settings.tolerance:
            return SolverResult(guess, iteration, True, error)

        direction = 1.0 if error > 0 else -1.0
        if not increasing:
            direction = -direction

        if error * last_error > 0:
            step *= settings.growth
        else:
            step *= settings.decay

        guess = _clamp(guess + direction * step, lower, upper)
        last_error = error

    return SolverResult(best_value, settings.max_iterations, False, best_error)
