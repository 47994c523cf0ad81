"""
Triangular distribution family implementation.
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


@parametrization(name=FamilyName.TRIANGULAR)
class Triangular(
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
    Triangular distribution on ``[lower, upper]`` with peak at ``mode``.

    Parameters
    ----------
    lower : float
        Lower limit (a).
    upper : float
        Upper limit (b).
    mode : float
        Mode (c), with ``a ≤ c ≤ b``.
    """

    lower: float
    upper: float
    mode: float

    @constraint(description="parameters are finite")
    def check_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.lower, self.upper, self.mode))

    @constraint(description="lower < upper")
    def check_lower_less_than_upper(self) -> bool:
        return self.lower < self.upper

    @constraint(description="lower <= mode <= upper")
    def check_mode_inside(self) -> bool:
        return self.lower <= self.mode <= self.upper

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.lower, right=self.upper)

    @property
    def minimum(self) -> float:
        return self.lower

    @property
    def maximum(self) -> float:
        return self.upper

    def pdf(self, x: float) -> float:
        a, b, c = self.lower, self.upper, self.mode
        if x < a or x > b:
            return 0.0
        if x < c:
            return 2.0 * (x - a) / ((b - a) * (c - a))
        if x == c:
            return 2.0 / (b - a)
        return 2.0 * (b - x) / ((b - a) * (b - c))

    def ln_pdf(self, x: float) -> float:
        density = self.pdf(x)
        return math.log(density) if density > 0.0 else -math.inf

    def cdf(self, x: float) -> float:
        a, b, c = self.lower, self.upper, self.mode
        if x <= a:
            return 0.0
        if x >= b:
            return 1.0
        if x <= c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        return 1.0 - (b - x) ** 2 / ((b - a) * (b - c))

    def inverse_cdf(self, p: float) -> float:
        require_probability(p)
        a, b, c = self.lower, self.upper, self.mode
        if p == 0.0:
            return a
        if p < (c - a) / (b - a):
            return a + math.sqrt(p * (b - a) * (c - a))
        return b - math.sqrt((1.0 - p) * (b - a) * (b - c))
