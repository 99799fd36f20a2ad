"""
Argument validation for savvystats.

Every public function validates its arguments up front with a DomainChecks
collector: each check records a violation instead of raising, and
raise_if_failed() raises a single DomainError listing all of them.

Design principles:
    - No silent type coercion (integral floats are accepted as integers,
      nothing else is converted)
    - bool and NaN are non-numeric
    - Parameter names and actual values in every message
    - Collector state is local to one call, never shared
"""

from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Any

from savvystats.core.exceptions import DomainError
from savvystats.core.selectors import match_selector, selector_message


def is_number(value: Any) -> bool:
    """True for real, non-bool, non-NaN numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def is_integer(value: Any) -> bool:
    """True for integers and for finite floats with no fractional part."""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


class DomainChecks:
    """
    Collects precondition violations for one function call.

    Usage:
        checks = DomainChecks("binom.dist")
        checks.integer(successes, "successes", minimum=0)
        checks.probability(p, "probability")
        checks.raise_if_failed()

    Each check method returns True when the value passed, so dependent
    checks (e.g. successes <= trials) can be skipped when an operand is
    already invalid.
    """

    def __init__(self, function: str):
        self._function = function
        self._violations: list[str] = []

    @property
    def violations(self) -> tuple[str, ...]:
        return tuple(self._violations)

    def fail(self, message: str) -> None:
        self._violations.append(message)

    def require(self, condition: bool, message: str) -> bool:
        if not condition:
            self.fail(message)
        return condition

    def number(self, value: Any, name: str, *, finite: bool = True) -> bool:
        """Value must be a real number (finite unless finite=False)."""
        if not is_number(value):
            self.fail(f"{name} must be a number, got {value!r}")
            return False
        if finite and not math.isfinite(value):
            self.fail(f"{name} must be finite, got {value!r}")
            return False
        return True

    def positive(self, value: Any, name: str) -> bool:
        """Value must be a finite number > 0."""
        if not self.number(value, name):
            return False
        return self.require(value > 0, f"{name} must be positive, got {value!r}")

    def non_negative(self, value: Any, name: str) -> bool:
        """Value must be a finite number >= 0."""
        if not self.number(value, name):
            return False
        return self.require(
            value >= 0, f"{name} must be non-negative, got {value!r}"
        )

    def integer(self, value: Any, name: str, *, minimum: int | None = 0) -> bool:
        """Value must be a whole number, at least `minimum` when given."""
        if not is_integer(value):
            self.fail(f"{name} must be an integer, got {value!r}")
            return False
        if minimum is not None and value < minimum:
            self.fail(f"{name} must be at least {minimum}, got {value!r}")
            return False
        return True

    def probability(self, value: Any, name: str = "probability") -> bool:
        """Value must lie in the closed interval [0, 1]."""
        if not self.number(value, name):
            return False
        return self.require(
            0.0 <= value <= 1.0,
            f"{name} must be between 0 and 1 inclusive, got {value!r}",
        )

    def alpha(self, value: Any, name: str = "alpha") -> bool:
        """Significance level must lie strictly inside (0, 1)."""
        if not self.number(value, name):
            return False
        return self.require(
            0.0 < value < 1.0, f"{name} must be in (0, 1), got {value!r}"
        )

    def selector(self, value: Any, enum_cls: type[Enum], name: str) -> Enum | None:
        """
        Resolve a selector (sidedness, alternative, method) to its enum
        member. An unknown value is recorded with the accepted values and
        None is returned, so it is reported alongside the other violations.
        """
        member = match_selector(value, enum_cls)
        if member is None:
            self.fail(selector_message(value, enum_cls, name))
        return member

    def raise_if_failed(self) -> None:
        """Raise one DomainError listing every recorded violation."""
        if self._violations:
            raise DomainError(
                f"{self._function}: " + "; ".join(self._violations),
                violations=tuple(self._violations),
                function=self._function,
            )
