"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

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
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.CAUCHY)
class Cauchy(
    Parametrization,
    CheckedDensity,
    CheckedQuantile,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
    InverseCDF[float],
    CheckedInverseCDF[float],
):
    """
    Cauchy (Lorentz) distribution.

    Probability density function:
        f(x) = 1 / (πγ (1 + ((x - x₀)/γ)²))

    Parameters
    ----------
    location : float
        Location of the peak (x₀).
    scale : float
        Half width at half maximum (γ).
    """

    location: float
    scale: float

    @constraint(description="location is finite")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        z = (x - self.location) / self.scale
        return 1.0 / (math.pi * self.scale * (1.0 + z * z))

    def ln_pdf(self, x: float) -> float:
        z = (x - self.location) / self.scale
        return -math.log(math.pi * self.scale) - math.log1p(z * z)

    def cdf(self, x: float) -> float:
        return 0.5 + math.atan((x - self.location) / self.scale) / math.pi

    def inverse_cdf(self, p: float) -> float:
        require_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return self.location + self.scale * math.tan(math.pi * (p - 0.5))

    def sample(self, rng: RandomSource) -> float:
        return self.location + self.scale * float(rng.standard_cauchy())
