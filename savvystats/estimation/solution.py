"""
Confidence interval result type.

ConfidenceInterval carries the bounds plus the metadata needed to print
it, in the spirit of an htest record: the point estimate, the confidence
level, which bounds were requested, the method, and any non-fatal
warnings raised while computing it.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from savvystats.core.selectors import Sidedness


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Interval estimate for a population parameter.

    Attributes
    ----------
    lower : float or None
        Lower bound; None when undefined (an upper one-sided interval).
    upper : float or None
        Upper bound; None when undefined (a lower one-sided interval).
    estimate : float or None
        Point estimate the interval was built around.
    conf_level : float or None
        1 - alpha (or the central probability for normal_between).
    sidedness : Sidedness
        Which bounds were requested.
    method : str
        Human-readable method name, e.g. "Clopper-Pearson exact".
    warnings : tuple of str
        Non-fatal diagnostics, e.g. a normal approximation used outside
        its validity rule.
    """
    lower: float | None
    upper: float | None
    estimate: float | None = None
    conf_level: float | None = None
    sidedness: Sidedness = Sidedness.TWO_SIDED
    method: str = ""
    warnings: tuple[str, ...] = ()

    @property
    def width(self) -> float | None:
        """upper - lower, or None if either bound is undefined."""
        if self.lower is None or self.upper is None:
            return None
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        """True if value lies within the defined bounds (inclusive)."""
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True

    def has_warning(self, substring: str) -> bool:
        return any(substring in w for w in self.warnings)

    def summary(self) -> str:
        """
        Format for printing, e.g.::

            Student's t interval for the mean
            95 percent confidence interval (two-sided):
             8.937119  11.06288
            estimate: 10
        """
        lines = []
        if self.method:
            lines.append(self.method)
        heading = "confidence interval"
        if self.conf_level is not None:
            heading = f"{_format_level(self.conf_level)} percent {heading}"
        lines.append(f"{heading} ({self.sidedness.value}):")
        lines.append(f" {_format_bound(self.lower)}  {_format_bound(self.upper)}")
        if self.estimate is not None:
            lines.append(f"estimate: {self.estimate:.7g}")
        for w in self.warnings:
            lines.append(f"warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ConfidenceInterval(lower={self.lower!r}, upper={self.upper!r}, "
            f"sidedness={self.sidedness.value!r})"
        )


def _format_level(conf_level: float) -> str:
    pct = conf_level * 100.0
    return f"{pct:g}"


def _format_bound(x: float | None) -> str:
    """Format a bound, handling undefined and infinite values."""
    if x is None:
        return "undefined"
    if math.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
