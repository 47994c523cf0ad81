"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import gammaln, stdtr

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


@parametrization(name=FamilyName.STUDENTS_T)
class StudentsT(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Location-scale Student's t distribution.

    Parameters
    ----------
    location : float, default 0.0
        Location (μ).
    scale : float, default 1.0
        Scale (σ).
    freedom : float, default 1.0
        Degrees of freedom (ν).
    """

    location: float = 0.0
    scale: float = 1.0
    freedom: float = 1.0

    @constraint(description="location is finite")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf

    @constraint(description="freedom > 0")
    def check_freedom_positive(self) -> bool:
        return 0.0 < self.freedom < math.inf

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
        if math.isinf(x):
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if math.isinf(x):
            return -math.inf
        nu = self.freedom
        z = (x - self.location) / self.scale
        return float(
            gammaln((nu + 1.0) / 2.0)
            - gammaln(nu / 2.0)
            - 0.5 * math.log(nu * math.pi)
            - math.log(self.scale)
            - (nu + 1.0) / 2.0 * math.log1p(z * z / nu)
        )

    def cdf(self, x: float) -> float:
        return float(stdtr(self.freedom, (x - self.location) / self.scale))

    def sample(self, rng: RandomSource) -> float:
        return self.location + self.scale * float(rng.standard_t(self.freedom))
