"""
Binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import bdtr, xlog1py, xlogy

from pysatl_distributions.distributions.capabilities import (
    CheckedDiscrete,
    Discrete,
    Univariate,
)
from pysatl_distributions.distributions.checked import CheckedMass
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.families.builtins._internal import is_integral
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.precision import is_probability
from pysatl_distributions.types import EuclideanDistributionType, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


@parametrization(name=FamilyName.BINOMIAL)
class Binomial(
    Parametrization,
    CheckedMass,
    Univariate[int, float],
    Discrete[int, float],
    CheckedDiscrete[int, float],
):
    """
    Binomial distribution: successes in ``n`` independent trials.

    Parameters
    ----------
    p : float
        Success probability of a single trial.
    n : int
        Number of trials.

    Notes
    -----
    ``ln_pmf`` uses the exact integer binomial coefficient, so the log-mass
    stays finite far into the tails where ``pmf`` underflows.
    """

    p: float
    n: int

    @constraint(description="0 <= p <= 1")
    def check_p_probability(self) -> bool:
        return is_probability(self.p)

    @constraint(description="n is a non-negative integer")
    def check_n_non_negative_integer(self) -> bool:
        return is_integral(self.n) and self.n >= 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", int(self.n))

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=self.n)

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return self.n

    def pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return 0.0
        return math.exp(self.ln_pmf(x))

    def ln_pmf(self, x: int) -> float:
        if not self.support.contains(x):
            return -math.inf
        k = int(x)
        return float(
            math.log(math.comb(self.n, k)) + xlogy(k, self.p) + xlog1py(self.n - k, -self.p)
        )

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x >= self.n:
            return 1.0
        return float(bdtr(math.floor(x), self.n, self.p))

    def sample(self, rng: RandomSource) -> int:
        return int(rng.binomial(self.n, self.p))
