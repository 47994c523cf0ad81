"""
Bernoulli distribution family implementation.
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
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.precision import is_probability
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.BERNOULLI)
class Bernoulli(
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
    Bernoulli distribution on ``{0, 1}``.

    Parameters
    ----------
    p : float
        Probability of the outcome ``1``.

    Examples
    --------
    >>> b = Bernoulli(0.25)
    >>> b.pmf(1), b.cdf(0.5), b.inverse_cdf(0.8)
    (0.25, 0.75, 1)
    """

    p: float

    @constraint(description="0 <= p <= 1")
    def check_p_probability(self) -> bool:
        return is_probability(self.p)

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=1)

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return 1

    def pmf(self, x: int) -> float:
        if x == 0:
            return 1.0 - self.p
        if x == 1:
            return self.p
        return 0.0

    def ln_pmf(self, x: int) -> float:
        mass = self.pmf(x)
        return math.log(mass) if mass > 0.0 else -math.inf

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x < 1.0:
            return 1.0 - self.p
        return 1.0

    def inverse_cdf(self, p: float) -> int:
        require_probability(p)
        return 0 if p <= 1.0 - self.p else 1

    def sample(self, rng: RandomSource) -> int:
        return int(rng.random() < self.p)
