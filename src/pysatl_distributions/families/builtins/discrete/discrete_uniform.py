"""
Discrete uniform distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

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
from pysatl_distributions.families.builtins._internal import is_integral
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.DISCRETE_UNIFORM)
class DiscreteUniform(
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
    Uniform distribution over the integers ``lower_bound, ..., upper_bound``.

    Parameters
    ----------
    lower_bound : int
    upper_bound : int
    """

    lower_bound: int
    upper_bound: int

    @constraint(description="bounds are integers")
    def check_bounds_integral(self) -> bool:
        return is_integral(self.lower_bound) and is_integral(self.upper_bound)

    @constraint(description="lower_bound <= upper_bound")
    def check_lower_not_above_upper(self) -> bool:
        return self.lower_bound <= self.upper_bound

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower_bound", int(self.lower_bound))
        object.__setattr__(self, "upper_bound", int(self.upper_bound))

    @property
    def _count(self) -> int:
        return self.upper_bound - self.lower_bound + 1

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=self.lower_bound, max_k=self.upper_bound)

    @property
    def minimum(self) -> int:
        return self.lower_bound

    @property
    def maximum(self) -> int:
        return self.upper_bound

    def pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return 0.0
        return 1.0 / self._count

    def ln_pmf(self, x: int) -> float:
        mass = self.pmf(x)
        return math.log(mass) if mass > 0.0 else -math.inf

    def cdf(self, x: float) -> float:
        if x < self.lower_bound:
            return 0.0
        if x >= self.upper_bound:
            return 1.0
        return (math.floor(x) - self.lower_bound + 1) / self._count

    def inverse_cdf(self, p: float) -> int:
        require_probability(p)
        k = self.lower_bound - 1 + math.ceil(p * self._count)
        k = min(max(k, self.lower_bound), self.upper_bound)
        # p * count may round across a grid point; settle against cdf itself
        if k > self.lower_bound and self.cdf(k - 1) >= p:
            return k - 1
        if k < self.upper_bound and self.cdf(k) < p:
            return k + 1
        return k

    def sample(self, rng: RandomSource) -> int:
        return int(rng.integers(self.lower_bound, self.upper_bound, endpoint=True))
