"""
Supports of the builtin distributions.

A support answers membership queries for checked density and mass
operations and, for discrete distributions, enumerates the outcomes that
carry mass.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distributions.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Interval on the real line carrying the density of a continuous distribution."""


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...

    def iter_leq(self, x: Number) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int or None
        Smallest outcome, ``None`` when unbounded below.
    max_k : int or None
        Largest outcome, ``None`` when unbounded above (Poisson, Geometric).

    Notes
    -----
    Membership accepts integral floats (``2.0``) and rejects non-finite
    values, so ``inf`` is never an outcome even for a support unbounded
    above.
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        k = np.floor(np.where(finite, xf, 0.0))
        mask = finite & (xf == k)
        if self.min_k is not None:
            mask &= k >= self.min_k
        if self.max_k is not None:
            mask &= k <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask.astype(bool))

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    def iter_points(self) -> Iterator[int]:
        """
        Outcomes in increasing order; lazy when unbounded above.

        Raises
        ------
        RuntimeError
            If the support is unbounded below.
        """
        if self.min_k is None:
            raise RuntimeError("Cannot enumerate an integer support without a lower bound")
        if self.max_k is None:
            return itertools.count(self.min_k)
        return iter(range(self.min_k, self.max_k + 1))

    def iter_leq(self, x: Number) -> Iterator[int]:
        """Outcomes not exceeding ``x``, in increasing order."""
        if self.min_k is None:
            raise RuntimeError("Cannot enumerate an integer support without a lower bound")
        last = math.floor(float(x))
        if self.max_k is not None:
            last = min(last, self.max_k)
        return iter(range(self.min_k, last + 1))

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
