"""
Exception hierarchy for savvystats.

All exceptions inherit from SavvyStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Every violated precondition is reported, not just the first
    - Iterative routines never raise on exhaustion; they return their
      best estimate instead
"""


class SavvyStatsError(Exception):
    """Base exception for all savvystats errors."""
    pass


class DomainError(SavvyStatsError):
    """
    An argument is outside the domain of the function.

    Raised when a value is non-numeric, out of its required range, or of
    the wrong discrete/continuous kind, and when a selector (sidedness,
    alternative, method) is not one of the accepted values.

    Attributes:
        violations: Every precondition that failed, in the order checked
        function: Name of the public function that rejected the call
    """

    def __init__(
        self,
        message: str,
        violations: tuple[str, ...] | None = None,
        function: str | None = None,
    ):
        super().__init__(message)
        self.violations = violations if violations is not None else (message,)
        self.function = function


class EmptySampleError(DomainError):
    """
    A sample has too few observations for the requested statistic.

    Raised by the descriptive functions when the data (after applying the
    row filter) is empty, or smaller than the statistic needs.

    Attributes:
        n_observations: Observations left after filtering
        required: Minimum number the statistic needs
    """

    def __init__(
        self,
        message: str,
        n_observations: int,
        required: int,
        function: str | None = None,
    ):
        super().__init__(message, function=function)
        self.n_observations = n_observations
        self.required = required
