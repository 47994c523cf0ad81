"""
Categorical distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from bisect import bisect_left
from dataclasses import field
from itertools import accumulate
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distributions.distributions.capabilities import (
    CheckedDiscrete,
    CheckedInverseCDF,
    Discrete,
    InverseCDF,
    Univariate,
)
from pysatl_distributions.distributions.checked import (
    CheckedMass,
    CheckedQuantile,
    require_probability,
)
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.families.builtins._internal import is_valid_multinomial
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.CATEGORICAL)
class Categorical(
    Parametrization,
    CheckedMass,
    CheckedQuantile,
    Univariate[int, float],
    Discrete[int, float],
    CheckedDiscrete[int, float],
    InverseCDF[float],
    CheckedInverseCDF[float],
):
    """
    Categorical distribution over the indices ``0, ..., len(weights) - 1``.

    Parameters
    ----------
    weights : sequence of float
        Unnormalized, non-negative category weights with a positive total.
        Stored as a tuple.

    Examples
    --------
    >>> c = Categorical([0.0, 1.0, 2.0])
    >>> c.pmf(0), c.cdf(1), c.inverse_cdf(0.5)
    (0.0, 0.3333333333333333, 2)
    """

    weights: tuple[float, ...]
    _cumulative: tuple[float, ...] = field(init=False, repr=False, compare=False)
    _cdf_values: tuple[float, ...] = field(init=False, repr=False, compare=False)

    @constraint(description="weights are non-negative with a positive total")
    def check_weights(self) -> bool:
        return is_valid_multinomial(self.weights, incl_zero=True)

    def __post_init__(self) -> None:
        weights = tuple(float(w) for w in self.weights)
        object.__setattr__(self, "weights", weights)
        cumulative = tuple(accumulate(weights))
        object.__setattr__(self, "_cumulative", cumulative)
        object.__setattr__(self, "_cdf_values", tuple(c / cumulative[-1] for c in cumulative))

    @property
    def _total(self) -> float:
        return self._cumulative[-1]

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=len(self.weights) - 1)

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return len(self.weights) - 1

    def pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return 0.0
        return self.weights[int(x)] / self._total

    def ln_pmf(self, x: int) -> float:
        mass = self.pmf(x)
        return math.log(mass) if mass > 0.0 else -math.inf

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x >= self.maximum:
            return 1.0
        return self._cdf_values[math.floor(x)]

    def inverse_cdf(self, p: float) -> int:
        """Smallest index whose ``cdf`` reaches ``p``."""
        require_probability(p)
        return bisect_left(self._cdf_values, p)

    def sample(self, rng: RandomSource) -> int:
        u = float(rng.random()) * self._total
        # side="right" never lands on a zero-weight category
        index = int(np.searchsorted(self._cumulative, u, side="right"))
        return min(index, self.maximum)
