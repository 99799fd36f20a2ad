"""
savvystats: distribution functions, confidence intervals and one-sample
tests built on self-contained special functions.

Family modules:
    binom: Binomial
    poisson: Poisson
    norm: Normal
    t: Student's t
    chisq: Chi-square

Each exposes dist / inv / conf / test1s (binom and poisson add invp).

Submodules:
    special: ln Gamma, incomplete gamma and beta, erf, combinatorics
    distributions: Unchecked evaluators behind the family modules
    solver: Inverse solvers
    estimation: Intervals and tests
    descriptive: Sample summaries with row filters
"""

__version__ = "0.1.0"

from savvystats import special
from savvystats import solver
from savvystats import distributions
from savvystats import estimation
from savvystats import descriptive
from savvystats import binom, poisson, norm, t, chisq
from savvystats.core.exceptions import SavvyStatsError, DomainError, EmptySampleError
from savvystats.core.selectors import Sidedness, Alternative, Method
from savvystats.estimation.solution import ConfidenceInterval
from savvystats.descriptive.solution import SampleStatistics

__all__ = [
    "__version__",
    "binom",
    "poisson",
    "norm",
    "t",
    "chisq",
    "special",
    "solver",
    "distributions",
    "estimation",
    "descriptive",
    "SavvyStatsError",
    "DomainError",
    "EmptySampleError",
    "Sidedness",
    "Alternative",
    "Method",
    "ConfidenceInterval",
    "SampleStatistics",
]
