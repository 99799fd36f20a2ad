"""
Inverse solvers.

Public API:
    invert(target, cdf, initial, settings)   - hill-climbing inverse of a
                                               monotone continuous function
    search_integer(target, cdf, start)       - quantile search on an integer
                                               support
    SolverResult                             - value + convergence metadata
"""

from savvystats.solver._hill_climb import SolverResult, invert
from savvystats.solver._integer_search import search_integer

__all__ = [
    "SolverResult",
    "invert",
    "search_integer",
]
