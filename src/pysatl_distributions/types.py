"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the capability layer and the
builtin distribution families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Outcome space of a distribution: its kind and the length of one draw.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Outcome dimension (1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.floating[Any]]
"""Type alias for floating-point arrays (continuous multivariate outcomes)."""

IntArray = NDArray[np.integer[Any]]
"""Type alias for integer arrays (discrete multivariate outcomes)."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type RandomSource = np.random.Generator
"""Randomness source consumed by sampling: produces uniform variates on demand."""


class ContinuousSupportShape1D(Enum):
    """
    Enumeration of 1D continuous support shapes.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Right-bounded ray (-∞, b] or (-∞, b).
    RAY_RIGHT
        Left-bounded ray [a, ∞) or (a, ∞).
    BOUNDED_INTERVAL
        Bounded interval [a, b], (a, b], [a, b), or (a, b).
    EMPTY
        Empty support.
    SINGLE_POINT
        Single point {a}.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def __str__(self) -> str:
        """Bracket notation, e.g. ``(0.0, inf)`` or ``[0.0, 1.0]``."""
        opening = "[" if self.left_closed else "("
        closing = "]" if self.right_closed else ")"
        return f"{opening}{self.left}, {self.right}{closing}"

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """
        Get the topological shape of the interval.

        Returns
        -------
        ContinuousSupportShape1D
            Classification of the interval's shape.
        """
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY

        if self.left == self.right and self.left_closed and self.right_closed:
            return ContinuousSupportShape1D.SINGLE_POINT

        if self.left == -inf and self.right == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.left == -inf and self.right < inf:
            return ContinuousSupportShape1D.RAY_LEFT
        if self.left > -inf and self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


class CapabilityName(StrEnum):
    """
    Enumeration of distribution capabilities.

    A concrete distribution honours a subset of these; checked variants are an
    orthogonal axis over density, mass and inverse-cumulative capabilities.

    Note
    ----------
    There is deliberately no checked counterpart of ``UNIVARIATE``: the CDF is
    defined on every real argument, clamping to 0 and 1 outside the support.
    """

    SAMPLING = "sampling"
    MIN = "min"
    MAX = "max"
    UNIVARIATE = "univariate"
    INVERSE_CDF = "inverse_cdf"
    CHECKED_INVERSE_CDF = "checked_inverse_cdf"
    CONTINUOUS = "continuous"
    CHECKED_CONTINUOUS = "checked_continuous"
    DISCRETE = "discrete"
    CHECKED_DISCRETE = "checked_discrete"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    BETA = "Beta"
    BINOMIAL = "Binomial"
    CATEGORICAL = "Categorical"
    CAUCHY = "Cauchy"
    CHI = "Chi"
    CHI_SQUARED = "ChiSquared"
    DIRICHLET = "Dirichlet"
    DISCRETE_UNIFORM = "DiscreteUniform"
    ERLANG = "Erlang"
    EXPONENTIAL = "Exponential"
    FISHER_SNEDECOR = "FisherSnedecor"
    GAMMA = "Gamma"
    GEOMETRIC = "Geometric"
    HYPERGEOMETRIC = "Hypergeometric"
    INVERSE_GAMMA = "InverseGamma"
    LOG_NORMAL = "LogNormal"
    MULTINOMIAL = "Multinomial"
    NORMAL = "Normal"
    PARETO = "Pareto"
    POISSON = "Poisson"
    STUDENTS_T = "StudentsT"
    TRIANGULAR = "Triangular"
    UNIFORM = "Uniform"
    WEIBULL = "Weibull"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "FloatArray",
    "IntArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "RandomSource",
    "CapabilityName",
    "FamilyName",
]
