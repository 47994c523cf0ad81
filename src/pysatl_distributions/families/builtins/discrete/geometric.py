"""
Geometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import xlog1py

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
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.GEOMETRIC)
class Geometric(
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
    Geometric distribution: number of trials up to and including the first
    success, supported on ``{1, 2, ...}``.

    Parameters
    ----------
    p : float
        Success probability of a single trial, ``0 < p <= 1``.

    Notes
    -----
    The maximum is ``inf``; ``inverse_cdf(1)`` returns it.
    """

    p: float

    @constraint(description="0 < p <= 1")
    def check_p(self) -> bool:
        return 0.0 < self.p <= 1.0

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=1)

    @property
    def minimum(self) -> int:
        return 1

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
        return float(xlog1py(int(x) - 1, -self.p)) + math.log(self.p)

    def cdf(self, x: float) -> float:
        if x < 1.0:
            return 0.0
        if math.isinf(x) or self.p == 1.0:
            return 1.0
        return -math.expm1(math.floor(x) * math.log1p(-self.p))

    def inverse_cdf(self, p: float) -> int | float:
        require_probability(p)
        if p == 0.0 or self.p == 1.0:
            return 1
        if p == 1.0:
            return math.inf
        k = max(1, math.ceil(math.log1p(-p) / math.log1p(-self.p)))
        # one-step correction for rounding in the logarithms
        if k > 1 and self.cdf(k - 1) >= p:
            return k - 1
        if self.cdf(k) < p:
            return k + 1
        return k

    def sample(self, rng: RandomSource) -> int:
        return int(rng.geometric(self.p))
