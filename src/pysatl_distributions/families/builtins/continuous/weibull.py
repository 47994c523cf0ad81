"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import xlogy

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


@parametrization(name=FamilyName.WEIBULL)
class Weibull(
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
    Weibull distribution.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0

    Parameters
    ----------
    shape : float
        Shape parameter (k).
    scale : float
        Scale parameter (λ).

    Notes
    -----
    For ``shape < 1`` the density diverges at zero; the checked density
    reports that point as undefined.
    """

    shape: float
    scale: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return 0.0 < self.shape < math.inf

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf

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
        return x == 0.0 and self.shape < 1.0

    def pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return -math.inf
        z = x / self.scale
        return (
            math.log(self.shape / self.scale)
            + float(xlogy(self.shape - 1.0, z))
            - z**self.shape
        )

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return -math.expm1(-((x / self.scale) ** self.shape))

    def inverse_cdf(self, p: float) -> float:
        """Quantile function ``λ (-ln(1 - p))^(1/k)``."""
        require_probability(p)
        if p == 1.0:
            return math.inf
        return self.scale * (-math.log1p(-p)) ** (1.0 / self.shape)
