"""
Inverse-gamma distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import gammaincc, gammaln

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


@parametrization(name=FamilyName.INVERSE_GAMMA)
class InverseGamma(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Inverse-gamma distribution: ``1/X`` with ``X ~ Gamma(shape, rate)``.

    Probability density function:
        f(x) = β^α / Γ(α) x^(-α-1) exp(-β/x) for x > 0
    """

    shape: float
    rate: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return 0.0 < self.shape < math.inf

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return 0.0 < self.rate < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        if x <= 0.0 or math.isinf(x):
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if x <= 0.0 or math.isinf(x):
            return -math.inf
        return float(
            self.shape * math.log(self.rate)
            - gammaln(self.shape)
            - (self.shape + 1.0) * math.log(x)
            - self.rate / x
        )

    def cdf(self, x: float) -> float:
        """Regularized upper incomplete gamma ``Q(α, β/x)``."""
        if x <= 0.0:
            return 0.0
        return float(gammaincc(self.shape, self.rate / x))

    def sample(self, rng: RandomSource) -> float:
        draw = float(rng.gamma(self.shape, 1.0 / self.rate))
        # underflow of the gamma draw maps to the far right tail
        return 1.0 / draw if draw > 0.0 else math.inf
