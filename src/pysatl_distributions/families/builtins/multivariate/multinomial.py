"""
Multinomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
from scipy.special import gammaln, xlogy

from pysatl_distributions.distributions.capabilities import (
    CheckedDiscrete,
    Discrete,
    Distribution,
    Max,
    Min,
)
from pysatl_distributions.errors import DomainError
from pysatl_distributions.families.builtins._internal import (
    as_outcome_vector,
    is_integral,
    is_valid_multinomial,
    require_length,
)
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, IntArray, Kind

if TYPE_CHECKING:
    from pysatl_distributions.types import FloatArray, RandomSource


@parametrization(name=FamilyName.MULTINOMIAL)
class Multinomial(
    Parametrization,
    Distribution[IntArray],
    Min[int],
    Max[int],
    Discrete[npt.ArrayLike, float],
    CheckedDiscrete[npt.ArrayLike, float],
):
    """
    Multinomial distribution: category counts of ``n`` independent draws.

    Parameters
    ----------
    weights : sequence of float
        Unnormalized, non-negative category weights with a positive total.
        Stored as a tuple.
    n : int
        Number of draws.

    Examples
    --------
    >>> m = Multinomial([0.3, 0.7], 5)
    >>> round(m.pmf([2, 3]), 6)
    0.3087
    """

    weights: tuple[float, ...]
    n: int
    _p: FloatArray = field(init=False, repr=False, compare=False)

    @constraint(description="weights are non-negative with a positive total")
    def check_weights(self) -> bool:
        return is_valid_multinomial(self.weights, incl_zero=True)

    @constraint(description="n is a non-negative integer")
    def check_n(self) -> bool:
        return is_integral(self.n) and self.n >= 0

    def __post_init__(self) -> None:
        weights = np.asarray(self.weights, dtype=np.float64)
        object.__setattr__(self, "weights", tuple(float(w) for w in weights))
        object.__setattr__(self, "n", int(self.n))
        object.__setattr__(self, "_p", weights / weights.sum())

    @property
    def p(self) -> tuple[float, ...]:
        """Normalized category probabilities."""
        return tuple(float(v) for v in self._p)

    @property
    def dimension(self) -> int:
        return len(self.weights)

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return EuclideanDistributionType(kind=Kind.DISCRETE, dimension=self.dimension)

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return self.n

    def _in_domain(self, x: npt.NDArray[Any]) -> bool:
        if not np.all(np.isfinite(x)) or np.any(x < 0) or np.any(x != np.floor(x)):
            return False
        return int(x.sum()) == self.n

    def _ln_mass(self, x: npt.NDArray[Any]) -> float:
        return float(
            gammaln(self.n + 1.0) - np.sum(gammaln(x + 1.0)) + np.sum(xlogy(x, self._p))
        )

    def pmf(self, x: npt.ArrayLike) -> float:
        """
        Mass at the count vector ``x``; ``0`` when the counts do not sum to ``n``.

        Raises
        ------
        ValueError
            If ``x`` does not have one entry per category.
        """
        return math.exp(self.ln_pmf(x))

    def ln_pmf(self, x: npt.ArrayLike) -> float:
        arr = np.asarray(x, dtype=np.float64)
        require_length(arr, self.dimension)
        if not self._in_domain(arr):
            return -math.inf
        return self._ln_mass(arr)

    def _validate_point(self, x: npt.ArrayLike) -> npt.NDArray[Any]:
        arr = as_outcome_vector(x, self.dimension)
        if not self._in_domain(arr):
            raise DomainError(
                f"Argument x={arr.tolist()} must hold non-negative integer counts summing to {self.n}",
                argument="x",
            )
        return arr

    def checked_pmf(self, x: npt.ArrayLike) -> float:
        """
        Mass at the count vector ``x``.

        Raises
        ------
        DimensionError
            If ``x`` is not one-dimensional or has the wrong length.
        DomainError
            If ``x`` holds negative or fractional counts or does not sum to ``n``.
        """
        return math.exp(self._ln_mass(self._validate_point(x)))

    def checked_ln_pmf(self, x: npt.ArrayLike) -> float:
        return self._ln_mass(self._validate_point(x))

    def sample(self, rng: RandomSource) -> IntArray:
        return rng.multinomial(self.n, self._p)
