"""
Exponential distribution family implementation.

Contains the Exponential family parametrized by its rate.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_distributions.distributions.capabilities import (
    CheckedContinuous,
    CheckedInverseCDF,
    Continuous,
    InverseCDF,
    Univariate,
)
from pysatl_distributions.distributions.checked import (
    CheckedDensity,
    CheckedQuantile,
    require_probability,
)
from pysatl_distributions.distributions.strategies import InverseTransformSampling
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous


@parametrization(name=FamilyName.EXPONENTIAL)
class Exponential(
    Parametrization,
    CheckedDensity,
    CheckedQuantile,
    InverseTransformSampling,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
    InverseCDF[float],
    CheckedInverseCDF[float],
):
    """
    Exponential distribution.

    The exponential distribution describes the time between events in a
    Poisson point process.

    Probability density function:
        f(x) = λ * exp(-λx) for x ≥ 0, 0 otherwise

    Parameters
    ----------
    rate : float
        Rate parameter (λ).
    """

    rate: float

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return 0.0 < self.rate < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=True)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        """
        Probability density function.

        - For x < 0: returns 0
        - For x ≥ 0: returns λ * exp(-λx)
        """
        if x < 0.0:
            return 0.0
        return self.rate * math.exp(-self.rate * x)

    def ln_pdf(self, x: float) -> float:
        if x < 0.0:
            return -math.inf
        return math.log(self.rate) - self.rate * x

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function ``1 - exp(-λx)``.

        Computed as ``-expm1(-λx)`` to stay accurate near zero.
        """
        if x <= 0.0:
            return 0.0
        return -math.expm1(-self.rate * x)

    def inverse_cdf(self, p: float) -> float:
        """
        Quantile function ``-ln(1 - p)/λ``.

        Returns ``inf`` for ``p = 1``.
        """
        require_probability(p)
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.rate
