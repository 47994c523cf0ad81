"""
Hypergeometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_distributions.distributions.capabilities import (
    CheckedDiscrete,
    Discrete,
    Univariate,
)
from pysatl_distributions.distributions.checked import CheckedMass
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


@parametrization(name=FamilyName.HYPERGEOMETRIC)
class Hypergeometric(
    Parametrization,
    CheckedMass,
    Univariate[int, float],
    Discrete[int, float],
    CheckedDiscrete[int, float],
):
    """
    Hypergeometric distribution: successes among ``draws`` items taken
    without replacement from a ``population`` holding ``successes`` marked
    items.

    The support is ``max(0, draws + successes - population)`` through
    ``min(successes, draws)``.
    """

    population: int
    successes: int
    draws: int

    @constraint(description="parameters are non-negative integers")
    def check_integral(self) -> bool:
        return all(
            is_integral(v) and v >= 0 for v in (self.population, self.successes, self.draws)
        )

    @constraint(description="successes <= population")
    def check_successes(self) -> bool:
        return self.successes <= self.population

    @constraint(description="draws <= population")
    def check_draws(self) -> bool:
        return self.draws <= self.population

    def __post_init__(self) -> None:
        for name in ("population", "successes", "draws"):
            object.__setattr__(self, name, int(getattr(self, name)))

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=self.minimum, max_k=self.maximum)

    @property
    def minimum(self) -> int:
        return max(0, self.draws + self.successes - self.population)

    @property
    def maximum(self) -> int:
        return min(self.successes, self.draws)

    def _ways(self, k: int) -> int:
        return math.comb(self.successes, k) * math.comb(self.population - self.successes, self.draws - k)

    def pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return 0.0
        # exact integer ratio, correctly rounded
        return self._ways(int(x)) / math.comb(self.population, self.draws)

    def ln_pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return -math.inf
        return math.log(self._ways(int(x))) - math.log(math.comb(self.population, self.draws))

    def cdf(self, x: float) -> float:
        if x < self.minimum:
            return 0.0
        if x >= self.maximum:
            return 1.0
        ways = sum(self._ways(k) for k in self.support.iter_leq(x))
        return ways / math.comb(self.population, self.draws)

    def sample(self, rng: RandomSource) -> int:
        if self.draws == 0:
            return 0
        bad = self.population - self.successes
        return int(rng.hypergeometric(self.successes, bad, self.draws))
