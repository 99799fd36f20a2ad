"""
Confidence intervals and one-sample tests.

Interval functions return a ConfidenceInterval; test functions return a
p-value. Arguments are taken as already validated, with selectors already
resolved to enum members; the family modules are the checked entry points.
"""

from savvystats.estimation._continuous import (
    chisq_conf,
    chisq_test,
    normal_between,
    normal_conf,
    normal_test,
    t_conf,
    t_test,
)
from savvystats.estimation._discrete import (
    binomial_conf,
    binomial_test,
    poisson_conf,
    poisson_test,
)
from savvystats.estimation.solution import ConfidenceInterval

__all__ = [
    "ConfidenceInterval",
    "normal_conf",
    "normal_between",
    "normal_test",
    "t_conf",
    "t_test",
    "chisq_conf",
    "chisq_test",
    "binomial_conf",
    "binomial_test",
    "poisson_conf",
    "poisson_test",
]
