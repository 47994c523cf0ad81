"""
Gamma distribution family implementation.
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


@parametrization(name=FamilyName.GAMMA)
class Gamma(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Gamma distribution in the shape/rate parametrization.

    Probability density function:
        f(x) = β^α / Γ(α) x^(α-1) exp(-βx) for x ≥ 0

    Parameters
    ----------
    shape : float
        Shape parameter (α).
    rate : float
        Rate parameter (β).

    Notes
    -----
    No closed-form quantile exists, so the family does not provide
    ``inverse_cdf``; sampling relies on the NumPy gamma generator instead.
    For ``shape < 1`` the density diverges at zero and the checked density
    reports that point as undefined.
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
        return float(
            self.shape * math.log(self.rate)
            - gammaln(self.shape)
            + xlogy(self.shape - 1.0, x)
            - self.rate * x
        )

    def cdf(self, x: float) -> float:
        """Regularized lower incomplete gamma ``P(α, βx)``."""
        if x <= 0.0:
            return 0.0
        return float(gammainc(self.shape, self.rate * x))

    def sample(self, rng: RandomSource) -> float:
        return float(rng.gamma(self.shape, 1.0 / self.rate))
