"""
Floating-point comparison helpers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite, isnan


def almost_eq(a: float, b: float, acc: float) -> bool:
    """
    Compare two floats with an absolute tolerance.

    Identical infinities compare equal; NaN never does.

    Examples
    --------
    >>> almost_eq(0.1 + 0.2, 0.3, 1e-15)
    True
    """
    if isnan(a) or isnan(b):
        return False
    if not (isfinite(a) and isfinite(b)):
        return a == b
    return abs(a - b) <= acc


def relative_eq(a: float, b: float, rel: float) -> bool:
    """
    Compare two floats with a relative tolerance.

    Falls back to an absolute comparison against ``rel`` when both values are
    tiny, so that ``relative_eq(0.0, 1e-300, 1e-12)`` holds.
    """
    if isnan(a) or isnan(b):
        return False
    if not (isfinite(a) and isfinite(b)):
        return a == b
    scale = max(abs(a), abs(b))
    if scale < 1.0:
        return abs(a - b) <= rel
    return abs(a - b) <= rel * scale


def is_probability(p: float) -> bool:
    """Whether ``p`` is a valid probability in ``[0, 1]``."""
    return 0.0 <= p <= 1.0


__all__ = [
    "almost_eq",
    "relative_eq",
    "is_probability",
]
