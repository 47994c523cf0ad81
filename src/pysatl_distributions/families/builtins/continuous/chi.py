"""
Chi distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import gammainc, gammaln, xlogy

from pysatl_distributions.distributions.capabilities import (
    CheckedContinuous,
    Continuous,
    Univariate,
)
from pysatl_distributions.distributions.checked import CheckedDensity
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.CHI)
class Chi(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Chi distribution: the Euclidean norm of ``freedom`` standard normals.

    Probability density function:
        f(x) = x^(k-1) exp(-x²/2) / (2^(k/2-1) Γ(k/2)) for x ≥ 0
    """

    freedom: float

    @constraint(description="freedom > 0")
    def check_freedom_positive(self) -> bool:
        return 0.0 < self.freedom < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    def _is_undefined_at(self, x: float) -> bool:
        return x == 0.0 and self.freedom < 1.0

    def pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return -math.inf
        half_k = self.freedom / 2.0
        return float(
            xlogy(self.freedom - 1.0, x)
            - 0.5 * x * x
            - (half_k - 1.0) * math.log(2.0)
            - gammaln(half_k)
        )

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return float(gammainc(self.freedom / 2.0, 0.5 * x * x))

    def sample(self, rng: RandomSource) -> float:
        return math.sqrt(float(rng.chisquare(self.freedom)))
