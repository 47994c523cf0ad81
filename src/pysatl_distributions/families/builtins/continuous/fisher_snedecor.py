"""
Fisher-Snedecor (F) distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import betainc, betaln, xlogy

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


@parametrization(name=FamilyName.FISHER_SNEDECOR)
class FisherSnedecor(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Fisher-Snedecor distribution with ``(freedom_1, freedom_2)`` degrees of freedom.

    Notes
    -----
    For ``freedom_1 < 2`` the density diverges at zero.
    """

    freedom_1: float
    freedom_2: float

    @constraint(description="freedom_1 > 0")
    def check_freedom_1_positive(self) -> bool:
        return 0.0 < self.freedom_1 < math.inf

    @constraint(description="freedom_2 > 0")
    def check_freedom_2_positive(self) -> bool:
        return 0.0 < self.freedom_2 < math.inf

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
        return x == 0.0 and self.freedom_1 < 2.0

    def pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if x < 0.0 or math.isinf(x):
            return -math.inf
        d1, d2 = self.freedom_1, self.freedom_2
        return float(
            0.5 * (d1 * math.log(d1) + d2 * math.log(d2))
            + xlogy(d1 / 2.0 - 1.0, x)
            - (d1 + d2) / 2.0 * math.log(d1 * x + d2)
            - betaln(d1 / 2.0, d2 / 2.0)
        )

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if math.isinf(x):
            return 1.0
        d1x = self.freedom_1 * x
        return float(betainc(self.freedom_1 / 2.0, self.freedom_2 / 2.0, d1x / (d1x + self.freedom_2)))

    def sample(self, rng: RandomSource) -> float:
        return float(rng.f(self.freedom_1, self.freedom_2))
