"""
Pareto distribution family implementation.
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


@parametrization(name=FamilyName.PARETO)
class Pareto(
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
    Pareto (type I) distribution.

    Probability density function:
        f(x) = α x_m^α / x^(α+1) for x ≥ x_m

    Parameters
    ----------
    scale : float
        Minimum value of the support (x_m).
    shape : float
        Tail index (α).
    """

    scale: float
    shape: float

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return 0.0 < self.shape < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.scale)

    @property
    def minimum(self) -> float:
        return self.scale

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        if x < self.scale or math.isinf(x):
            return 0.0
        return self.shape / self.scale * (self.scale / x) ** (self.shape + 1.0)

    def ln_pdf(self, x: float) -> float:
        if x < self.scale or math.isinf(x):
            return -math.inf
        return (
            math.log(self.shape)
            + self.shape * math.log(self.scale)
            - (self.shape + 1.0) * math.log(x)
        )

    def cdf(self, x: float) -> float:
        if x <= self.scale:
            return 0.0
        if math.isinf(x):
            return 1.0
        return -math.expm1(self.shape * math.log(self.scale / x))

    def inverse_cdf(self, p: float) -> float:
        """Quantile function ``x_m (1 - p)^(-1/α)``."""
        require_probability(p)
        if p == 1.0:
            return math.inf
        return self.scale * math.exp(-math.log1p(-p) / self.shape)
