"""
Input preparation for the descriptive functions.

Every function takes a 1-D numeric array-like plus an optional boolean
`where` mask selecting the rows to use, and works on the filtered copy.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from savvystats.core.exceptions import DomainError, EmptySampleError


def as_sample(
    data: ArrayLike,
    where: ArrayLike | None,
    function: str,
    *,
    required: int = 1,
) -> NDArray[np.floating[Any]]:
    """
    Validate, filter and convert a sample to a float64 vector.

    Raises
    ------
    DomainError
        Non-numeric or NaN data, data that is not one-dimensional, or a
        mask whose length does not match.
    EmptySampleError
        Fewer than `required` observations survive the filter.
    """
    try:
        values = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise DomainError(
            f"{function}: cannot convert data to an array: {e}", function=function,
        ) from e

    # bool is not np.number; complex is, but has no ordering
    if (
        not np.issubdtype(values.dtype, np.number)
        or np.issubdtype(values.dtype, np.complexfloating)
    ):
        raise DomainError(
            f"{function}: data must be real numbers, got dtype {values.dtype}",
            function=function,
        )
    if values.ndim != 1:
        raise DomainError(
            f"{function}: data must be one-dimensional, got shape {values.shape}",
            function=function,
        )
    values = values.astype(np.float64)

    if where is not None:
        mask = np.asarray(where)
        if mask.dtype != np.bool_:
            raise DomainError(
                f"{function}: where must be a boolean mask, got dtype {mask.dtype}",
                function=function,
            )
        if mask.shape != values.shape:
            raise DomainError(
                f"{function}: where has shape {mask.shape}, "
                f"data has shape {values.shape}",
                function=function,
            )
        values = values[mask]

    if np.isnan(values).any():
        raise DomainError(
            f"{function}: data contains NaN", function=function,
        )
    if values.size < required:
        raise EmptySampleError(
            f"{function}: needs at least {required} observation(s), "
            f"got {values.size}",
            n_observations=int(values.size),
            required=required,
            function=function,
        )
    return values


def require_positive(values: NDArray, function: str) -> None:
    """All observations must be > 0 (geometric mean, log transform)."""
    if np.any(values <= 0):
        bad = values[values <= 0]
        raise DomainError(
            f"{function}: all values must be positive, got {bad[0]!r}",
            function=function,
        )
