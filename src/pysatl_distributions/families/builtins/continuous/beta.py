"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import betainc, betaln, xlog1py, xlogy

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


@parametrization(name=FamilyName.BETA)
class Beta(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Beta distribution on ``[0, 1]``.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β)

    Parameters
    ----------
    shape_a : float
        First shape parameter (α).
    shape_b : float
        Second shape parameter (β).

    Notes
    -----
    The density diverges at ``0`` when ``α < 1`` and at ``1`` when ``β < 1``;
    the checked density reports such boundary points as undefined.
    """

    shape_a: float
    shape_b: float

    @constraint(description="shape_a > 0")
    def check_shape_a_positive(self) -> bool:
        return 0.0 < self.shape_a < math.inf

    @constraint(description="shape_b > 0")
    def check_shape_b_positive(self) -> bool:
        return 0.0 < self.shape_b < math.inf

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return 1.0

    def _is_undefined_at(self, x: float) -> bool:
        return (x == 0.0 and self.shape_a < 1.0) or (x == 1.0 and self.shape_b < 1.0)

    def pdf(self, x: float) -> float:
        if not 0.0 <= x <= 1.0:
            return 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        if not 0.0 <= x <= 1.0:
            return -math.inf
        return float(
            xlogy(self.shape_a - 1.0, x)
            + xlog1py(self.shape_b - 1.0, -x)
            - betaln(self.shape_a, self.shape_b)
        )

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return float(betainc(self.shape_a, self.shape_b, x))

    def sample(self, rng: RandomSource) -> float:
        return float(rng.beta(self.shape_a, self.shape_b))
