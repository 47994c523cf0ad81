"""
Normal (Gaussian) distribution family implementation.
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
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource

LN_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


@parametrization(name=FamilyName.NORMAL)
class Normal(
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
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : float, default 0.0
        Mean of the distribution (μ).
    std_dev : float, default 1.0
        Standard deviation of the distribution (σ).

    Notes
    -----
    ``ln_pdf`` is evaluated directly as a quadratic form and stays finite in
    the tails where ``pdf`` underflows to zero.
    """

    mean: float = 0.0
    std_dev: float = 1.0

    @constraint(description="mean is finite")
    def check_mean_finite(self) -> bool:
        return math.isfinite(self.mean)

    @constraint(description="std_dev > 0")
    def check_std_dev_positive(self) -> bool:
        """Check that standard deviation is positive and finite."""
        return 0.0 < self.std_dev < math.inf

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

    def _z(self, x: float) -> float:
        return (x - self.mean) / self.std_dev

    def pdf(self, x: float) -> float:
        z = self._z(x)
        return math.exp(-0.5 * z * z) / (self.std_dev * math.sqrt(2.0 * math.pi))

    def ln_pdf(self, x: float) -> float:
        z = self._z(x)
        return -0.5 * z * z - math.log(self.std_dev) - LN_SQRT_2PI

    def cdf(self, x: float) -> float:
        return float(ndtr(self._z(x)))

    def inverse_cdf(self, p: float) -> float:
        """
        Quantile function ``μ + σ Φ⁻¹(p)``.

        Returns ``-inf`` for ``p = 0`` and ``inf`` for ``p = 1``.
        """
        require_probability(p)
        return self.mean + self.std_dev * float(ndtri(p))

    def sample(self, rng: RandomSource) -> float:
        return self.mean + self.std_dev * float(rng.standard_normal())
