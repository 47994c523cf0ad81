"""
Dirichlet distribution family implementation.
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
    CheckedContinuous,
    Continuous,
    Distribution,
    Max,
    Min,
)
from pysatl_distributions.errors import DomainError, UndefinedResultError
from pysatl_distributions.families.builtins._internal import (
    as_outcome_vector,
    is_valid_multinomial,
    require_length,
)
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, FloatArray, Kind

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource

SIMPLEX_TOLERANCE = 1e-8


@parametrization(name=FamilyName.DIRICHLET)
class Dirichlet(
    Parametrization,
    Distribution[FloatArray],
    Min[float],
    Max[float],
    Continuous[npt.ArrayLike, float],
    CheckedContinuous[npt.ArrayLike, float],
):
    """
    Dirichlet distribution over the probability simplex.

    Parameters
    ----------
    alpha : sequence of float
        Concentration parameters, at least two and all positive. Stored as a
        tuple.

    Notes
    -----
    Bounds are per component: every coordinate of an outcome lies in
    ``[0, 1]`` and the coordinates sum to one (up to ``1e-8``).
    """

    alpha: tuple[float, ...]
    _alpha: FloatArray = field(init=False, repr=False, compare=False)
    _ln_norm: float = field(init=False, repr=False, compare=False)

    @constraint(description="at least two concentrations")
    def check_length(self) -> bool:
        return np.ndim(self.alpha) == 1 and len(self.alpha) >= 2

    @constraint(description="concentrations are positive and finite")
    def check_alpha_positive(self) -> bool:
        return is_valid_multinomial(self.alpha, incl_zero=False)

    def __post_init__(self) -> None:
        alpha = np.asarray(self.alpha, dtype=np.float64)
        object.__setattr__(self, "alpha", tuple(float(a) for a in alpha))
        object.__setattr__(self, "_alpha", alpha)
        ln_norm = float(np.sum(gammaln(alpha)) - gammaln(alpha.sum()))
        object.__setattr__(self, "_ln_norm", ln_norm)

    @property
    def dimension(self) -> int:
        return len(self.alpha)

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=self.dimension)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return 1.0

    def _on_simplex(self, x: npt.NDArray[Any]) -> bool:
        if not np.all((x >= 0.0) & (x <= 1.0)):
            return False
        return abs(float(x.sum()) - 1.0) <= SIMPLEX_TOLERANCE

    def _ln_density(self, x: npt.NDArray[Any]) -> float:
        return float(np.sum(xlogy(self._alpha - 1.0, x))) - self._ln_norm

    def pdf(self, x: npt.ArrayLike) -> float:
        """
        Density at ``x``; ``0`` off the simplex.

        Raises
        ------
        ValueError
            If ``x`` does not have one entry per concentration.
        """
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: npt.ArrayLike) -> float:
        arr = np.asarray(x, dtype=np.float64)
        require_length(arr, self.dimension)
        if not self._on_simplex(arr):
            return -math.inf
        return self._ln_density(arr)

    def _validate_point(self, x: npt.ArrayLike) -> npt.NDArray[Any]:
        arr = as_outcome_vector(x, self.dimension)
        if not self._on_simplex(arr):
            raise DomainError(
                f"Argument x={arr.tolist()} must lie on the probability simplex", argument="x"
            )
        if np.any((arr == 0.0) & (self._alpha < 1.0)):
            raise UndefinedResultError(
                "Density is undefined at a zero component with concentration below 1",
                argument="x",
            )
        return arr

    def checked_pdf(self, x: npt.ArrayLike) -> float:
        """
        Density at ``x``.

        Raises
        ------
        DimensionError
            If ``x`` is not one-dimensional or has the wrong length.
        DomainError
            If ``x`` lies off the probability simplex.
        UndefinedResultError
            If a zero coordinate meets a concentration below one.
        """
        return math.exp(self._ln_density(self._validate_point(x)))

    def checked_ln_pdf(self, x: npt.ArrayLike) -> float:
        return self._ln_density(self._validate_point(x))

    def sample(self, rng: RandomSource) -> FloatArray:
        return rng.dirichlet(self._alpha)
