"""
Tests for Multinomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import multinomial

from pysatl_distributions.errors import DimensionError, DomainError, ParameterError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import CapabilityName, FamilyName, Kind

from ..base import BaseDistributionTest


class TestMultinomialFamily(BaseDistributionTest):
    """Test suite for Multinomial distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.MULTINOMIAL)
        self.dist = self.family(weights=[0.3, 0.7], n=5)
        self.reference = multinomial(5, [0.3, 0.7])

    def test_creation(self):
        assert self.dist.parameters == {"weights": (0.3, 0.7), "n": 5}
        assert self.dist.distribution_type.kind == Kind.DISCRETE
        assert self.dist.distribution_type.dimension == 2
        assert (self.dist.minimum, self.dist.maximum) == (0, 5)
        self.assert_capabilities(
            self.dist,
            frozenset(
                {
                    CapabilityName.SAMPLING,
                    CapabilityName.MIN,
                    CapabilityName.MAX,
                    CapabilityName.DISCRETE,
                    CapabilityName.CHECKED_DISCRETE,
                }
            ),
        )

    def test_weights_are_normalized(self):
        dist = self.family(weights=[3, 7], n=5)
        assert dist.p == pytest.approx((0.3, 0.7))
        assert dist.pmf([2, 3]) == pytest.approx(self.dist.pmf([2, 3]))

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"weights": [0.0, 0.0], "n": 3}, "weights are non-negative"),
            ({"weights": [0.5, -0.5], "n": 3}, "weights are non-negative"),
            ({"weights": [0.5, 0.5], "n": -1}, "n is a non-negative integer"),
            ({"weights": [0.5, 0.5], "n": 1.5}, "n is a non-negative integer"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ParameterError, match=message):
            self.family(**params)

    def test_known_mass(self):
        assert self.dist.pmf([2, 3]) == pytest.approx(0.3087, abs=1e-12)

    @pytest.mark.parametrize("counts", [[0, 5], [1, 4], [2, 3], [3, 2], [5, 0]])
    def test_matches_scipy(self, counts):
        assert self.dist.pmf(counts) == pytest.approx(self.reference.pmf(counts), rel=1e-10)
        assert self.dist.ln_pmf(counts) == pytest.approx(self.reference.logpmf(counts), rel=1e-10)
        assert self.dist.checked_pmf(counts) == self.dist.pmf(counts)

    def test_mass_outside_domain(self):
        assert self.dist.pmf([1, 1]) == 0.0
        assert self.dist.ln_pmf([2.5, 2.5]) == -math.inf
        assert self.dist.pmf([-1, 6]) == 0.0

    def test_checked_operations(self):
        with pytest.raises(DimensionError, match="has length 1, expected 2"):
            self.dist.checked_pmf([1])
        with pytest.raises(DomainError, match="summing to 5"):
            self.dist.checked_pmf([1, 1])
        with pytest.raises(DomainError):
            self.dist.checked_ln_pmf([2.5, 2.5])

    def test_unchecked_wrong_length(self):
        with pytest.raises(ValueError):
            self.dist.pmf([1, 2, 2])

    def test_zero_weight_category(self):
        dist = self.family(weights=[0.0, 1.0], n=3)
        assert dist.pmf([0, 3]) == 1.0
        assert dist.pmf([1, 2]) == 0.0

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert draws.shape == (4000, 2)
        assert np.all(draws.sum(axis=1) == 5)
        np.testing.assert_allclose(draws.mean(axis=0), [1.5, 3.5], atol=0.06)
