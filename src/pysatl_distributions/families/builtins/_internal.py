"""
Helpers shared by the builtin families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_distributions.errors import DimensionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt


def is_valid_multinomial(values: Sequence[float], incl_zero: bool) -> bool:
    """
    Check weights or concentrations of a multivariate family.

    Valid when non-empty, every entry is finite and non-negative (strictly
    positive when ``incl_zero`` is False) and the total is positive.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        return False
    if not np.all(np.isfinite(arr)):
        return False
    if incl_zero:
        if np.any(arr < 0.0):
            return False
    elif np.any(arr <= 0.0):
        return False
    return bool(arr.sum() > 0.0)


def is_integral(value: Any) -> bool:
    """Whether ``value`` is an integer (bools excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    return isinstance(value, (float, np.floating)) and float(value).is_integer()


def as_outcome_vector(x: Any, length: int, *, dtype: npt.DTypeLike = np.float64) -> npt.NDArray[Any]:
    """
    Convert a multivariate outcome for a checked operation.

    Raises
    ------
    DimensionError
        If ``x`` is not one-dimensional or has the wrong length.
    """
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim != 1:
        raise DimensionError(
            f"Argument x must be one-dimensional, got {arr.ndim} dimensions", argument="x"
        )
    if arr.size != length:
        raise DimensionError.length("x", int(arr.size), length)
    return arr


def require_length(x: npt.NDArray[Any], length: int) -> None:
    """Fail loudly for an outcome of the wrong length (unchecked paths)."""
    if x.shape != (length,):
        raise ValueError(f"Expected an outcome of shape ({length},), got {x.shape}")
