"""
Numeric settings for the iterative routines.

Every series, continued fraction and solver in savvystats runs to a fixed
iteration cap so that it always terminates; the tolerances and caps live
here as frozen tiers, one per routine.

Tiers are plain module constants. Solver entry points accept a settings
instance so a caller can run the same loop with other constants.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesSettings:
    """Stopping rule for a series or continued-fraction expansion."""
    tolerance: float
    max_iterations: int
    name: str


@dataclass(frozen=True)
class HillClimbSettings:
    """
    Step control for the bidirectional hill-climbing inverse.

    Attributes:
        step: Initial step size
        growth: Factor applied while successive errors keep their sign
        decay: Factor applied right after the error changes sign
        tolerance: Absolute probability error that ends the search
        max_iterations: Unconditional stop
    """
    step: float
    growth: float
    decay: float
    name: str
    tolerance: float = 1e-10
    max_iterations: int = 1000


@dataclass(frozen=True)
class DiscreteSearchSettings:
    """Step control for the integer-support quantile search."""
    step: int = 2
    growth: float = 2.0
    decay: float = 0.5
    min_step: int = 1
    max_iterations: int = 1000


# Taylor series of the error function
ERF_SERIES = SeriesSettings(
    tolerance=2e-10,
    max_iterations=1000,
    name='erf_series',
)

# Lower incomplete gamma series (and the upper continued fraction)
GAMMA_SERIES = SeriesSettings(
    tolerance=2e-10,
    max_iterations=1000,
    name='gamma_series',
)

# Incomplete beta continued fraction. Converges within a few dozen
# iterations on the branch picked by regularized_incomplete_beta.
BETA_FRACTION = SeriesSettings(
    tolerance=2e-10,
    max_iterations=50,
    name='beta_fraction',
)

# Normal and Student's t quantiles
SYMMETRIC_CLIMB = HillClimbSettings(
    step=0.25,
    growth=1.2,
    decay=0.5,
    name='symmetric',
)

# Chi-square quantiles; tuned for the skewed shape
CHISQ_CLIMB = HillClimbSettings(
    step=0.20,
    growth=1.09,
    decay=0.35,
    name='chisq',
)

# Binomial success probability given a cumulative probability
PROPORTION_CLIMB = HillClimbSettings(
    step=0.05,
    growth=1.2,
    decay=0.5,
    name='proportion',
)

# Poisson rate given a cumulative probability
RATE_CLIMB = HillClimbSettings(
    step=0.5,
    growth=1.2,
    decay=0.5,
    name='rate',
)

DISCRETE_SEARCH = DiscreteSearchSettings()

# Beyond this |z| the alternating erf series loses digits to cancellation;
# the tails come from the incomplete gamma continued fraction instead
ERF_SERIES_LIMIT = 3.0

# Below z = -NORMAL_TAIL_LIMIT the sum 1 + erf(z) loses digits, so the normal
# cumulative function is taken from erfc; the continued fraction for
# Q(1/2, z^2) still converges quickly there
NORMAL_TAIL_LIMIT = 1.0

# Normal approximations to the binomial and Poisson are used when the
# variance (n*p*(1-p), or the count) reaches this value
APPROXIMATION_THRESHOLD = 5.0

# Largest double below 1; cumulative sums landing here are reported as 1
FLOAT_CEILING = 0.9999999999999999
