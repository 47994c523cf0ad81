"""
Chi-squared distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

from pysatl_distributions.distributions.capabilities import (
    CheckedContinuous,
    Continuous,
    Univariate,
)
from pysatl_distributions.distributions.checked import CheckedDensity
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.builtins.continuous.gamma import Gamma
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.CHI_SQUARED)
class ChiSquared(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Chi-squared distribution with ``freedom`` degrees of freedom.

    Evaluated as ``Gamma(freedom / 2, 1 / 2)``.
    """

    freedom: float
    _gamma: Gamma = field(init=False, repr=False, compare=False)

    @constraint(description="freedom > 0")
    def check_freedom_positive(self) -> bool:
        return 0.0 < self.freedom < math.inf

    def __post_init__(self) -> None:
        object.__setattr__(self, "_gamma", Gamma(self.freedom / 2.0, 0.5))

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return self._gamma.support

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    def _is_undefined_at(self, x: float) -> bool:
        return self._gamma._is_undefined_at(x)

    def pdf(self, x: float) -> float:
        return self._gamma.pdf(x)

    def ln_pdf(self, x: float) -> float:
        return self._gamma.ln_pdf(x)

    def cdf(self, x: float) -> float:
        return self._gamma.cdf(x)

    def sample(self, rng: RandomSource) -> float:
        return float(rng.chisquare(self.freedom))
