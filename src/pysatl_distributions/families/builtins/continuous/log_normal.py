"""
Log-normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import ndtr, ndtri

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
from pysatl_distributions.families.builtins.continuous.normal import LN_SQRT_2PI
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.LOG_NORMAL)
class LogNormal(
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
    Log-normal distribution: ``exp(Y)`` with ``Y ~ Normal(location, scale)``.

    Parameters
    ----------
    location : float
        Mean of the underlying normal distribution (μ).
    scale : float
        Standard deviation of the underlying normal distribution (σ).

    Notes
    -----
    ``ln_pdf`` is evaluated in log space directly.
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
        ln_x = math.log(x)
        z = (ln_x - self.location) / self.scale
        return -0.5 * z * z - ln_x - math.log(self.scale) - LN_SQRT_2PI

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return float(ndtr((math.log(x) - self.location) / self.scale))

    def inverse_cdf(self, p: float) -> float:
        require_probability(p)
        return math.exp(self.location + self.scale * float(ndtri(p)))

    def sample(self, rng: RandomSource) -> float:
        return math.exp(self.location + self.scale * float(rng.standard_normal()))
