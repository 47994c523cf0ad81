"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import gammaincc, gammaln, xlogy

from pysatl_distributions.distributions.capabilities import (
    CheckedDiscrete,
    Discrete,
    Univariate,
)
from pysatl_distributions.distributions.checked import CheckedMass
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.POISSON)
class Poisson(
    Parametrization,
    CheckedMass,
    Univariate[int, float],
    Discrete[int, float],
    CheckedDiscrete[int, float],
):
    """
    Poisson distribution.

    Probability mass function:
        P(k) = λ^k e^(-λ) / k!

    Parameters
    ----------
    rate : float
        Expected number of events (λ).
    """

    rate: float

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return 0.0 < self.rate < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> float:
        return math.inf

    def pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return 0.0
        return math.exp(self.ln_pmf(x))

    def ln_pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return -math.inf
        k = int(x)
        return float(xlogy(k, self.rate) - self.rate - gammaln(k + 1.0))

    def cdf(self, x: float) -> float:
        """Regularized upper incomplete gamma ``Q(⌊x⌋ + 1, λ)``."""
        if x < 0.0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return float(gammaincc(math.floor(x) + 1.0, self.rate))

    def sample(self, rng: RandomSource) -> int:
        return int(rng.poisson(self.rate))
