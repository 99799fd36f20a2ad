"""
Core infrastructure for savvystats.

Shared abstractions used by every other subpackage.

Key components:
    exceptions: Exception hierarchy
    validation: Collecting argument validation
    selectors: Sidedness / Alternative / Method enumerations
    settings: Tolerances, iteration caps and solver tuning
"""

from savvystats.core.exceptions import (
    SavvyStatsError,
    DomainError,
    EmptySampleError,
)
from savvystats.core.selectors import (
    Sidedness,
    Alternative,
    Method,
    resolve_sidedness,
    resolve_alternative,
    resolve_method,
)
from savvystats.core.validation import DomainChecks

__all__ = [
    # Exceptions
    "SavvyStatsError",
    "DomainError",
    "EmptySampleError",
    # Selectors
    "Sidedness",
    "Alternative",
    "Method",
    "resolve_sidedness",
    "resolve_alternative",
    "resolve_method",
    # Validation
    "DomainChecks",
]
