"""
Uniform distribution family implementation.
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


@parametrization(name=FamilyName.UNIFORM)
class Uniform(
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
    Uniform (continuous) distribution.

    All intervals of the same length inside ``[lower_bound, upper_bound]`` are
    equally probable.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise

    Parameters
    ----------
    lower_bound : float
        Lower bound of the distribution.
    upper_bound : float
        Upper bound of the distribution.

    Notes
    -----
    ``ln_pdf`` is composed as ``ln(pdf(x))``: the density is a constant, so
    nothing is lost in linear scale.

    Examples
    --------
    >>> n = Uniform(0.0, 1.0)
    >>> n.pdf(0.5), n.ln_pdf(0.5), n.cdf(0.5)
    (1.0, 0.0, 0.5)
    """

    lower_bound: float
    upper_bound: float

    @constraint(description="lower_bound < upper_bound")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.lower_bound < self.upper_bound

    @constraint(description="bounds are finite")
    def check_bounds_finite(self) -> bool:
        """Check that both bounds are finite."""
        return math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.lower_bound, right=self.upper_bound)

    @property
    def minimum(self) -> float:
        return self.lower_bound

    @property
    def maximum(self) -> float:
        return self.upper_bound

    def pdf(self, x: float) -> float:
        """
        Probability density function.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound))
        """
        if self.lower_bound <= x <= self.upper_bound:
            return 1.0 / (self.upper_bound - self.lower_bound)
        return 0.0

    def ln_pdf(self, x: float) -> float:
        density = self.pdf(x)
        return math.log(density) if density > 0.0 else -math.inf

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function.
            - For x <= lower_bound: returns 0
            - For x >= upper_bound: returns 1
        """
        if x <= self.lower_bound:
            return 0.0
        if x >= self.upper_bound:
            return 1.0
        return (x - self.lower_bound) / (self.upper_bound - self.lower_bound)

    def inverse_cdf(self, p: float) -> float:
        """
        Percent point function.

        - For p = 0: returns lower_bound
        - For p = 1: returns upper_bound
        - For p in (0, 1): returns lower_bound + p × (upper_bound - lower_bound)

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        require_probability(p)
        if p == 1.0:
            return self.upper_bound
        return self.lower_bound + p * (self.upper_bound - self.lower_bound)
