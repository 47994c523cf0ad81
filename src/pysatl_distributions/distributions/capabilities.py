"""
Distribution Capabilities
=========================

This module defines the capability protocols a concrete distribution may
honour. Capabilities compose by set, not by hierarchy: a distribution lists
the protocols it can honestly satisfy and nothing else.

- :class:`Distribution` – sampling with an explicitly supplied randomness source.
- :class:`Min`, :class:`Max` – bounds of the support.
- :class:`Univariate` – cumulative distribution function (with bounds and sampling).
- :class:`InverseCDF`, :class:`CheckedInverseCDF` – quantile function.
- :class:`Continuous`, :class:`CheckedContinuous` – density and log-density.
- :class:`Discrete`, :class:`CheckedDiscrete` – mass and log-mass.

Notes
-----
- *Unchecked* methods assume valid input. Structurally invalid input (wrong
  dimensionality, a probability outside ``[0, 1]``) may raise any exception;
  an in-structure point outside the support yields zero density/mass.
- *Checked* methods report invalid input as a
  :class:`~pysatl_distributions.errors.StatsError`. A point with zero density
  inside the support is a valid zero, not a failure.
- Checked and unchecked forms agree wherever the checked form returns.
- There is no checked CDF. The CDF is total on its argument type (0 below the
  support, 1 above it), so there is nothing for a checked form to report for
  univariate distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_distributions.types import CapabilityName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_distributions.types import RandomSource


@runtime_checkable
class Distribution[T](Protocol):
    """
    Sampling capability.

    Examples
    --------
    A trivial implementation that forwards the randomness source:

    >>> import numpy as np
    >>> class Foo:
    ...     def sample(self, rng: np.random.Generator) -> float:
    ...         return float(rng.random())
    >>> isinstance(Foo(), Distribution)
    True
    """

    def sample(self, rng: RandomSource) -> T:
        """
        Draw one outcome.

        Parameters
        ----------
        rng : numpy.random.Generator
            Randomness source. It is advanced by an algorithm-specific amount.

        Returns
        -------
        T
            A single draw distributed according to the distribution's law.
        """
        ...


@runtime_checkable
class Min[T](Protocol):
    """Lower bound of the support."""

    @property
    def minimum(self) -> T: ...


@runtime_checkable
class Max[T](Protocol):
    """Upper bound of the support."""

    @property
    def maximum(self) -> T: ...


@runtime_checkable
class Univariate[T, K](Distribution[K], Min[T], Max[T], Protocol):
    """
    Cumulative capability of a univariate distribution.

    The CDF is non-decreasing, equals 0 at or below ``minimum`` and 1 at or
    above ``maximum``.

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Uniform
    >>> Uniform(0.0, 1.0).cdf(0.5)
    0.5
    """

    def cdf(self, x: K) -> K:
        """
        Evaluate the cumulative distribution function at ``x``.

        May fail loudly on structurally invalid input, depending on the
        implementor.
        """
        ...


@runtime_checkable
class InverseCDF[T](Protocol):
    """
    Quantile capability (unchecked).

    Declared independently of :class:`Univariate`: a cheap forward CDF does not
    imply a closed-form inverse, and vice versa.

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Categorical
    >>> Categorical([0.0, 1.0, 2.0]).inverse_cdf(0.5)
    2
    """

    def inverse_cdf(self, p: T) -> T:
        """
        Return the smallest ``x`` such that ``cdf(x) >= p``.

        Raises ``ValueError`` for ``p`` outside ``[0, 1]``.
        """
        ...


@runtime_checkable
class CheckedInverseCDF[T](Protocol):
    """
    Quantile capability (checked).

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Categorical
    >>> Categorical([0.0, 1.0, 2.0]).checked_inverse_cdf(-1.0)
    Traceback (most recent call last):
        ...
    pysatl_distributions.errors.DomainError: Argument p=-1.0 must lie in [0.0, 1.0]
    """

    def checked_inverse_cdf(self, p: T) -> T:
        """
        Return the smallest ``x`` such that ``cdf(x) >= p``.

        Raises
        ------
        DomainError
            If ``p`` lies outside ``[0, 1]``.
        """
        ...


@runtime_checkable
class Continuous[T, K](Protocol):
    """
    Density capability (unchecked).

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Uniform
    >>> n = Uniform(0.0, 1.0)
    >>> n.pdf(0.5), n.ln_pdf(0.5)
    (1.0, 0.0)
    """

    def pdf(self, x: T) -> K:
        """Evaluate the probability density function at ``x``."""
        ...

    def ln_pdf(self, x: T) -> K:
        """Evaluate the natural logarithm of the density at ``x``."""
        ...


@runtime_checkable
class CheckedContinuous[T, K](Protocol):
    """
    Density capability (checked).

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Dirichlet
    >>> n = Dirichlet([1.0, 2.0, 3.0])
    >>> n.checked_pdf([0.0])
    Traceback (most recent call last):
        ...
    pysatl_distributions.errors.DimensionError: Argument x has length 1, expected 3
    """

    def checked_pdf(self, x: T) -> K:
        """
        Evaluate the probability density function at ``x``.

        Raises
        ------
        StatsError
            If ``x`` is outside the domain, structurally invalid, or the
            density is numerically undefined there.
        """
        ...

    def checked_ln_pdf(self, x: T) -> K:
        """Evaluate the log-density at ``x``, reporting invalid input."""
        ...


@runtime_checkable
class Discrete[T, K](Protocol):
    """
    Mass capability (unchecked).

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Binomial
    >>> from pysatl_distributions.precision import almost_eq
    >>> almost_eq(Binomial(0.5, 10).pmf(5), 0.24609375, 1e-15)
    True
    """

    def pmf(self, x: T) -> K:
        """Evaluate the probability mass function at ``x``."""
        ...

    def ln_pmf(self, x: T) -> K:
        """Evaluate the natural logarithm of the mass at ``x``."""
        ...


@runtime_checkable
class CheckedDiscrete[T, K](Protocol):
    """
    Mass capability (checked).

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Multinomial
    >>> n = Multinomial([0.3, 0.7], 5)
    >>> n.checked_pmf([1])
    Traceback (most recent call last):
        ...
    pysatl_distributions.errors.DimensionError: Argument x has length 1, expected 2
    """

    def checked_pmf(self, x: T) -> K:
        """
        Evaluate the probability mass function at ``x``.

        Raises
        ------
        StatsError
            If ``x`` is outside the domain or structurally invalid.
        """
        ...

    def checked_ln_pmf(self, x: T) -> K:
        """Evaluate the log-mass at ``x``, reporting invalid input."""
        ...


CAPABILITY_PROTOCOLS: Mapping[CapabilityName, type] = {
    CapabilityName.SAMPLING: Distribution,
    CapabilityName.MIN: Min,
    CapabilityName.MAX: Max,
    CapabilityName.UNIVARIATE: Univariate,
    CapabilityName.INVERSE_CDF: InverseCDF,
    CapabilityName.CHECKED_INVERSE_CDF: CheckedInverseCDF,
    CapabilityName.CONTINUOUS: Continuous,
    CapabilityName.CHECKED_CONTINUOUS: CheckedContinuous,
    CapabilityName.DISCRETE: Discrete,
    CapabilityName.CHECKED_DISCRETE: CheckedDiscrete,
}
"""Capability name to protocol."""


def capabilities_of(obj: object) -> frozenset[CapabilityName]:
    """
    Report the capabilities an object satisfies.

    Parameters
    ----------
    obj : object
        Any object, typically a distribution.

    Returns
    -------
    frozenset[CapabilityName]
        Names of every capability protocol ``obj`` structurally satisfies.

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Gamma
    >>> CapabilityName.INVERSE_CDF in capabilities_of(Gamma(2.0, 1.0))
    False
    """
    return frozenset(name for name, proto in CAPABILITY_PROTOCOLS.items() if isinstance(obj, proto))


__all__ = [
    "Distribution",
    "Min",
    "Max",
    "Univariate",
    "InverseCDF",
    "CheckedInverseCDF",
    "Continuous",
    "CheckedContinuous",
    "Discrete",
    "CheckedDiscrete",
    "CAPABILITY_PROTOCOLS",
    "capabilities_of",
]
