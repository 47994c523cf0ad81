"""
Checked Operation Plumbing
==========================

Mixins deriving the *checked* method family of a univariate distribution from
its unchecked one:

- :class:`CheckedDensity` – ``checked_pdf`` / ``checked_ln_pdf``;
- :class:`CheckedMass` – ``checked_pmf`` / ``checked_ln_pmf``;
- :class:`CheckedQuantile` – ``checked_inverse_cdf``.

Each checked method validates its argument, raises a
:class:`~pysatl_distributions.errors.StatsError` on failure and otherwise
delegates to the unchecked method, so both forms agree wherever the checked
one returns. The unchecked methods themselves stay free of validation.

Notes
-----
The mixins rely on the host class providing ``support`` (and
``minimum``/``maximum`` for the messages of :class:`CheckedMass`) alongside the
unchecked methods.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

from pysatl_distributions.errors import DomainError, UndefinedResultError
from pysatl_distributions.precision import is_probability

if TYPE_CHECKING:
    from pysatl_distributions.distributions.capabilities import (
        Continuous,
        Discrete,
        InverseCDF,
        Max,
        Min,
    )
    from pysatl_distributions.distributions.support import ContinuousSupport, DiscreteSupport


def _bounds(distribution: object) -> tuple[Any, Any]:
    bounded = cast("Min[Any]", distribution)
    return bounded.minimum, cast("Max[Any]", distribution).maximum


class CheckedDensity:
    """Checked density operations for univariate continuous distributions."""

    __slots__ = ()

    def _is_undefined_at(self, x: float) -> bool:
        """Whether the density at an in-domain ``x`` is numerically undefined."""
        return False

    def _validate_point(self, x: float) -> None:
        support = cast("ContinuousSupport", getattr(self, "support"))
        if not support.contains(x):
            raise DomainError.outside("x", x, support)
        if self._is_undefined_at(x):
            raise UndefinedResultError(f"Density is undefined at x={x}", argument="x")

    def checked_pdf(self, x: float) -> float:
        """
        Evaluate the density at ``x``.

        Raises
        ------
        DomainError
            If ``x`` lies outside ``support`` (endpoints as the support
            declares them, infinities excluded) or is NaN.
        UndefinedResultError
            If the density at ``x`` requires raising zero to a negative power.
        """
        self._validate_point(x)
        return cast("Continuous[float, float]", self).pdf(x)

    def checked_ln_pdf(self, x: float) -> float:
        """Evaluate the log-density at ``x``; raises like :meth:`checked_pdf`."""
        self._validate_point(x)
        return cast("Continuous[float, float]", self).ln_pdf(x)


class CheckedMass:
    """Checked mass operations for univariate discrete distributions."""

    __slots__ = ()

    def _validate_point(self, x: float) -> int:
        support = cast("DiscreteSupport", getattr(self, "support"))
        if not support.contains(x):
            low, high = _bounds(self)
            raise DomainError(
                f"Argument x={x} must be an integer in [{low}, {high}]", argument="x"
            )
        return int(x)

    def checked_pmf(self, x: int) -> float:
        """
        Evaluate the mass at ``x``.

        Raises
        ------
        DomainError
            If ``x`` is not an integer of the support.
        """
        k = self._validate_point(x)
        return cast("Discrete[int, float]", self).pmf(k)

    def checked_ln_pmf(self, x: int) -> float:
        """Evaluate the log-mass at ``x``; raises like :meth:`checked_pmf`."""
        k = self._validate_point(x)
        return cast("Discrete[int, float]", self).ln_pmf(k)


class CheckedQuantile:
    """Checked quantile operation."""

    __slots__ = ()

    def checked_inverse_cdf(self, p: float) -> Any:
        """
        Return the smallest ``x`` such that ``cdf(x) >= p``.

        Raises
        ------
        DomainError
            If ``p`` lies outside ``[0, 1]`` or is NaN.
        """
        if not is_probability(p):
            raise DomainError.interval("p", p, 0.0, 1.0)
        return cast("InverseCDF[Any]", self).inverse_cdf(p)


def require_probability(p: float) -> None:
    """
    Fail loudly for a probability outside ``[0, 1]``.

    Used by unchecked quantile functions; raises a plain ``ValueError`` rather
    than a recoverable :class:`~pysatl_distributions.errors.StatsError`.
    """
    if not is_probability(p):
        raise ValueError("Probability must be in [0, 1]")


__all__ = [
    "CheckedDensity",
    "CheckedMass",
    "CheckedQuantile",
    "require_probability",
]
