"""
Descriptive statistics over a 1-D sample.

Public API:
    total, minimum, maximum, value_range
    mean, geomean, log_transform
    sum_of_squares, variance, stdev
    percentile, median, quartile, mode
    sample_statistics(x)   - SampleStatistics(mean, stdev, count)

Every function takes an optional boolean `where` mask selecting the rows
to use.
"""

from savvystats.descriptive.solution import SampleStatistics
from savvystats.descriptive.solvers import (
    total,
    minimum,
    maximum,
    value_range,
    mean,
    geomean,
    log_transform,
    sum_of_squares,
    variance,
    stdev,
    percentile,
    median,
    quartile,
    mode,
    sample_statistics,
)

__all__ = [
    "total",
    "minimum",
    "maximum",
    "value_range",
    "mean",
    "geomean",
    "log_transform",
    "sum_of_squares",
    "variance",
    "stdev",
    "percentile",
    "median",
    "quartile",
    "mode",
    "sample_statistics",
    "SampleStatistics",
]
