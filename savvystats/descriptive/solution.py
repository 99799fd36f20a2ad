"""
Result type for descriptive statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleStatistics:
    """
    The summary bundle consumed by the interval and test routines.

    Unpacks in the argument order norm.conf and t.conf expect::

        ci = t.conf(0.05, *sample_statistics(x))

    Attributes:
        mean: Sample mean
        stdev: Sample standard deviation (n - 1 denominator); 0.0 for a
            single observation
        count: Number of observations used
    """
    mean: float
    stdev: float
    count: int

    def __iter__(self):
        yield self.mean
        yield self.stdev
        yield self.count
