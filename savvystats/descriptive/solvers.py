"""
Public API for descriptive statistics.

Each function accepts a 1-D numeric array-like and an optional boolean
`where` mask of the same length; only rows where the mask is True are
used. Results are Python floats (or a tuple / array where noted).

Percentiles use the exclusive (n + 1) rule: the k-th percentile sits at
rank k/100 * (n + 1) of the sorted sample. A whole-number rank picks that
order statistic; otherwise the two neighbouring order statistics are
averaged. Ranks outside [1, n] fall back to the extremes, and k = 0 and
k = 100 always return the minimum and maximum.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from savvystats.core.validation import DomainChecks
from savvystats.descriptive._sample import as_sample, require_positive
from savvystats.descriptive.solution import SampleStatistics


def total(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """Sum of the observations."""
    return float(np.sum(as_sample(x, where, "total")))


def minimum(x: ArrayLike, where: ArrayLike | None = None) -> float:
    return float(np.min(as_sample(x, where, "minimum")))


def maximum(x: ArrayLike, where: ArrayLike | None = None) -> float:
    return float(np.max(as_sample(x, where, "maximum")))


def value_range(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """max - min."""
    values = as_sample(x, where, "value_range")
    return float(np.max(values) - np.min(values))


def mean(x: ArrayLike, where: ArrayLike | None = None) -> float:
    return float(np.mean(as_sample(x, where, "mean")))


def geomean(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """Geometric mean, exp(mean(log x)). All observations must be positive."""
    values = as_sample(x, where, "geomean")
    require_positive(values, "geomean")
    return float(np.exp(np.mean(np.log(values))))


def log_transform(x: ArrayLike, where: ArrayLike | None = None) -> NDArray:
    """Natural log of each selected observation, as a new array."""
    values = as_sample(x, where, "log_transform")
    require_positive(values, "log_transform")
    return np.log(values)


def sum_of_squares(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """Sum of squared deviations from the mean."""
    values = as_sample(x, where, "sum_of_squares")
    return _sum_of_squares(values)


def variance(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """Sample variance, n - 1 denominator. Needs two observations."""
    values = as_sample(x, where, "variance", required=2)
    return _sum_of_squares(values) / (values.size - 1)


def stdev(x: ArrayLike, where: ArrayLike | None = None) -> float:
    """Sample standard deviation, n - 1 denominator."""
    values = as_sample(x, where, "stdev", required=2)
    return math.sqrt(_sum_of_squares(values) / (values.size - 1))


def percentile(x: ArrayLike, k: Any, where: ArrayLike | None = None) -> float:
    """
    The k-th percentile, 0 <= k <= 100, by the exclusive (n + 1) rule.

    Examples
    --------
    >>> percentile([1, 2, 3, 4], 50)
    2.5
    """
    checks = DomainChecks("percentile")
    if checks.number(k, "k"):
        checks.require(0 <= k <= 100, f"k must be between 0 and 100, got {k!r}")
    checks.raise_if_failed()
    values = np.sort(as_sample(x, where, "percentile"))
    return _percentile_sorted(values, float(k))


def median(x: ArrayLike, where: ArrayLike | None = None) -> float:
    values = np.sort(as_sample(x, where, "median"))
    return _percentile_sorted(values, 50.0)


def quartile(x: ArrayLike, q: Any, where: ArrayLike | None = None) -> float:
    """
    Quartile q in 0..4: 0 is the minimum, 2 the median, 4 the maximum.
    """
    checks = DomainChecks("quartile")
    if checks.integer(q, "q", minimum=0):
        checks.require(q <= 4, f"q must be at most 4, got {q!r}")
    checks.raise_if_failed()
    values = np.sort(as_sample(x, where, "quartile"))
    return _percentile_sorted(values, 25.0 * int(q))


def mode(x: ArrayLike, where: ArrayLike | None = None) -> tuple[float, ...]:
    """
    Most frequent value(s), ascending.

    Returns every value tied for the highest count, or an empty tuple when
    no value occurs more than once.
    """
    values = as_sample(x, where, "mode")
    unique, counts = np.unique(values, return_counts=True)
    top = counts.max()
    if top < 2:
        return ()
    return tuple(float(v) for v in unique[counts == top])


def sample_statistics(x: ArrayLike, where: ArrayLike | None = None) -> SampleStatistics:
    """
    Mean, standard deviation and count in one pass over the filter.

    The standard deviation of a single observation is reported as 0.0.
    """
    values = as_sample(x, where, "sample_statistics")
    n = int(values.size)
    sd = math.sqrt(_sum_of_squares(values) / (n - 1)) if n > 1 else 0.0
    return SampleStatistics(mean=float(np.mean(values)), stdev=sd, count=n)


def _sum_of_squares(values: NDArray) -> float:
    deviations = values - np.mean(values)
    return float(np.dot(deviations, deviations))


def _percentile_sorted(values: NDArray, k: float) -> float:
    n = values.size
    if k <= 0.0:
        return float(values[0])
    if k >= 100.0:
        return float(values[-1])

    rank = k / 100.0 * (n + 1)
    if rank <= 1.0:
        return float(values[0])
    if rank >= n:
        return float(values[-1])

    whole = math.floor(rank)
    if rank == whole:
        return float(values[whole - 1])
    return float((values[whole - 1] + values[whole]) / 2.0)

