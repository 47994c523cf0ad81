"""
Tests for Hypergeometric Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import hypergeom

from pysatl_distributions.errors import DomainError, ParameterError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from ..base import UNIVARIATE_DISCRETE_CAPABILITIES, BaseDistributionTest


class TestHypergeometricFamily(BaseDistributionTest):
    """Test suite for Hypergeometric distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.HYPERGEOMETRIC)
        self.dist = self.family(population=20, successes=7, draws=15)
        self.reference = hypergeom(M=20, n=7, N=15)

    def test_creation(self):
        assert self.dist.parameters == {"population": 20, "successes": 7, "draws": 15}
        assert (self.dist.minimum, self.dist.maximum) == (2, 7)
        self.assert_capabilities(self.dist, UNIVARIATE_DISCRETE_CAPABILITIES)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"population": 10, "successes": 11, "draws": 2}, "successes <= population"),
            ({"population": 10, "successes": 2, "draws": 11}, "draws <= population"),
            ({"population": 10, "successes": -1, "draws": 2}, "non-negative integers"),
            ({"population": 10.5, "successes": 1, "draws": 2}, "non-negative integers"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ParameterError, match=message):
            self.family(**params)

    @pytest.mark.parametrize(
        "method, scipy_method",
        [("pmf", "pmf"), ("ln_pmf", "logpmf"), ("cdf", "cdf")],
    )
    def test_matches_scipy(self, method, scipy_method):
        self.assert_matches_reference(
            getattr(self.dist, method),
            [0.0, 1.0, 2.0, 3.0, 4.5, 5.0, 7.0, 8.0],
            getattr(self.reference, scipy_method),
        )

    def test_no_draws(self, rng):
        dist = self.family(population=5, successes=3, draws=0)
        assert dist.pmf(0) == 1.0
        assert dist.sample(rng) == 0

    def test_checked_operations(self):
        with pytest.raises(DomainError, match=r"\[2, 7\]"):
            self.dist.checked_pmf(1)
        assert self.dist.checked_ln_pmf(7) == pytest.approx(math.log(math.comb(13, 8) / math.comb(20, 15)))

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert draws.min() >= 2 and draws.max() <= 7
        assert draws.mean() == pytest.approx(15 * 7 / 20, abs=0.1)
