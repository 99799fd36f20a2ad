"""
Error function.

Near the origin erf is summed from its Taylor series

    erf(z) = 2/sqrt(pi) * sum_n (-1)^n z^(2n+1) / (n! (2n+1))

with each term built from the previous one. The series alternates and its
terms grow like exp(z^2) before they shrink, so for |z| past
ERF_SERIES_LIMIT the complement erfc(|z|) = Q(1/2, z^2) is taken from the
incomplete gamma continued fraction.
"""

from __future__ import annotations

import math

from savvystats.core.settings import ERF_SERIES, ERF_SERIES_LIMIT, SeriesSettings
from savvystats.core.validation import DomainChecks
from savvystats.special._gamma import _upper_gamma_ratio

_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def _erf_series(z: float, settings: SeriesSettings = ERF_SERIES) -> float:
    value = z
    total = z
    z2 = z * z
    for n in range(1, settings.max_iterations + 1):
        value *= -z2 * (2 * n - 1) / (n * (2 * n + 1))
        total += value
        if abs(value) < settings.tolerance * abs(total):
            break
    # floating-point overshoot past +-1
    return min(1.0, max(-1.0, _TWO_OVER_SQRT_PI * total))


def _erfc_tail(z: float) -> float:
    """erfc(z) for z >= 1, without forming 1 - erf(z)."""
    if math.isinf(z):
        return 0.0
    return _upper_gamma_ratio(0.5, z * z)


def _erf(z: float) -> float:
    if z == 0.0:
        return 0.0
    if abs(z) < ERF_SERIES_LIMIT:
        return _erf_series(z)
    return math.copysign(1.0 - _erfc_tail(abs(z)), z)


def erf(z: float) -> float:
    """
    Error function erf(z), in [-1, 1].

    Parameters
    ----------
    z : float
        Any real number; +-inf map to +-1.
    """
    checks = DomainChecks("erf")
    checks.number(z, "z", finite=False)
    checks.raise_if_failed()
    return _erf(float(z))
