"""
Selector enumerations for interval and test routines.

Public functions accept an enum member, a lowercase string, or an integer
code, and resolve it once at the boundary. Everything below the family
modules works with enum members only.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from savvystats.core.exceptions import DomainError


class Sidedness(Enum):
    """Which bounds a confidence interval carries."""
    LOWER = "lower"
    TWO_SIDED = "two-sided"
    UPPER = "upper"


class Alternative(Enum):
    """Alternative hypothesis of a one-sample test."""
    LESS = "less"
    DIFFERENT = "different"
    GREATER = "greater"


class Method(Enum):
    """How a discrete-family confidence interval is computed."""
    AUTO = "auto"
    EXACT = "exact"
    NORMAL = "normal"


_SIDEDNESS_CODES = {-1: Sidedness.LOWER, 0: Sidedness.TWO_SIDED, 1: Sidedness.UPPER}
_ALTERNATIVE_CODES = {
    -1: Alternative.LESS, 0: Alternative.DIFFERENT, 1: Alternative.GREATER,
}
_METHOD_CODES = {0: Method.AUTO, 1: Method.EXACT, 2: Method.NORMAL}

_CODES: dict[type[Enum], dict[int, Enum]] = {
    Sidedness: _SIDEDNESS_CODES,
    Alternative: _ALTERNATIVE_CODES,
    Method: _METHOD_CODES,
}


def match_selector(value: Any, enum_cls: type[Enum]) -> Enum | None:
    """The member named by an enum member, string or integer code, else None."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            return None
    if isinstance(value, int) and not isinstance(value, bool):
        return _CODES[enum_cls].get(value)
    return None


def selector_message(value: Any, enum_cls: type[Enum], name: str) -> str:
    accepted = [m.value for m in enum_cls] + sorted(_CODES[enum_cls])
    return f"{name} must be one of {accepted}, got {value!r}"


def _resolve(value: Any, enum_cls: type[Enum], name: str):
    member = match_selector(value, enum_cls)
    if member is None:
        raise DomainError(selector_message(value, enum_cls, name), function=name)
    return member


def resolve_sidedness(value: Any) -> Sidedness:
    """'lower' / 'two-sided' / 'upper', or -1 / 0 / 1."""
    return _resolve(value, Sidedness, "sidedness")


def resolve_alternative(value: Any) -> Alternative:
    """'less' / 'different' / 'greater', or -1 / 0 / 1."""
    return _resolve(value, Alternative, "alternative")


def resolve_method(value: Any) -> Method:
    """'auto' / 'exact' / 'normal', or 0 / 1 / 2."""
    return _resolve(value, Method, "method")
