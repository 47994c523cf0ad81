"""
Erlang distribution family implementation.

An Erlang distribution is a gamma distribution with an integral shape; every
operation is delegated to an equivalent :class:`Gamma`.
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
from pysatl_distributions.families.builtins._internal import is_integral
from pysatl_distributions.families.builtins.continuous.gamma import Gamma
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.ERLANG)
class Erlang(
    Parametrization,
    CheckedDensity,
    Univariate[float, float],
    Continuous[float, float],
    CheckedContinuous[float, float],
):
    """
    Erlang distribution.

    Parameters
    ----------
    shape : int
        Number of exponential stages (k ≥ 1).
    rate : float
        Rate of every stage (λ).
    """

    shape: int
    rate: float
    _gamma: Gamma = field(init=False, repr=False, compare=False)

    @constraint(description="shape is a positive integer")
    def check_shape_positive_integer(self) -> bool:
        return is_integral(self.shape) and self.shape >= 1

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return 0.0 < self.rate < math.inf

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", int(self.shape))
        object.__setattr__(self, "_gamma", Gamma(float(self.shape), self.rate))

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return self._gamma.support

    @property
    def minimum(self) -> float:
        return self._gamma.minimum

    @property
    def maximum(self) -> float:
        return self._gamma.maximum

    def pdf(self, x: float) -> float:
        return self._gamma.pdf(x)

    def ln_pdf(self, x: float) -> float:
        return self._gamma.ln_pdf(x)

    def cdf(self, x: float) -> float:
        return self._gamma.cdf(x)

    def sample(self, rng: RandomSource) -> float:
        return self._gamma.sample(rng)
