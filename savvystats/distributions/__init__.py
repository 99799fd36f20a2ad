"""
Distribution evaluators.

Plain-float kernels for the five families. They assume arguments already
checked by the family modules (savvystats.binom, savvystats.poisson,
savvystats.norm, savvystats.t, savvystats.chisq), which are the validated
public surface.

The solve_* functions expose the SolverResult of an inverse for callers
that want the convergence metadata; the *_quantile / *_invp functions
return just the value.
"""

from savvystats.distributions._binomial import (
    binomial_cdf,
    binomial_invp,
    binomial_pmf,
    binomial_quantile,
    solve_binomial_p,
)
from savvystats.distributions._chisq import (
    chisq_cdf,
    chisq_pdf,
    chisq_quantile,
    solve_chisq,
)
from savvystats.distributions._normal import (
    normal_cdf,
    normal_pdf,
    normal_quantile,
    solve_standard_normal,
)
from savvystats.distributions._poisson import (
    poisson_cdf,
    poisson_invp,
    poisson_pmf,
    poisson_quantile,
    solve_poisson_mean,
)
from savvystats.distributions._student_t import (
    solve_t,
    t_cdf,
    t_pdf,
    t_quantile,
)

__all__ = [
    "binomial_pmf",
    "binomial_cdf",
    "binomial_quantile",
    "binomial_invp",
    "solve_binomial_p",
    "poisson_pmf",
    "poisson_cdf",
    "poisson_quantile",
    "poisson_invp",
    "solve_poisson_mean",
    "normal_pdf",
    "normal_cdf",
    "normal_quantile",
    "solve_standard_normal",
    "t_pdf",
    "t_cdf",
    "t_quantile",
    "solve_t",
    "chisq_pdf",
    "chisq_cdf",
    "chisq_quantile",
    "solve_chisq",
]
