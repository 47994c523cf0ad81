"""
Tests for Dirichlet Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import dirichlet

from pysatl_distributions.errors import (
    DimensionError,
    DomainError,
    ParameterError,
    UndefinedResultError,
)
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import CapabilityName, FamilyName, Kind

from ..base import BaseDistributionTest

SIMPLEX_POINTS = [
    [0.2, 0.3, 0.5],
    [0.1, 0.1, 0.8],
    [0.6, 0.25, 0.15],
    [1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0],
]


class TestDirichletFamily(BaseDistributionTest):
    """Test suite for Dirichlet distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.DIRICHLET)
        self.dist = self.family(alpha=[1.5, 2.0, 3.0])
        self.reference = dirichlet([1.5, 2.0, 3.0])

    def test_creation(self):
        assert self.dist.parameters == {"alpha": (1.5, 2.0, 3.0)}
        assert self.dist.distribution_type.kind == Kind.CONTINUOUS
        assert self.dist.distribution_type.dimension == 3
        assert (self.dist.minimum, self.dist.maximum) == (0.0, 1.0)
        self.assert_capabilities(
            self.dist,
            frozenset(
                {
                    CapabilityName.SAMPLING,
                    CapabilityName.MIN,
                    CapabilityName.MAX,
                    CapabilityName.CONTINUOUS,
                    CapabilityName.CHECKED_CONTINUOUS,
                }
            ),
        )

    @pytest.mark.parametrize(
        "alpha, message",
        [
            ([1.0], "at least two concentrations"),
            ([1.0, 0.0], "concentrations are positive and finite"),
            ([1.0, -2.0], "concentrations are positive and finite"),
            ([1.0, math.inf], "concentrations are positive and finite"),
        ],
    )
    def test_parametrization_constraints(self, alpha, message):
        with pytest.raises(ParameterError, match=message):
            self.family(alpha=alpha)

    @pytest.mark.parametrize("point", SIMPLEX_POINTS)
    def test_matches_scipy(self, point):
        assert self.dist.pdf(point) == pytest.approx(self.reference.pdf(point), rel=1e-10)
        assert self.dist.ln_pdf(point) == pytest.approx(self.reference.logpdf(point), rel=1e-10)
        assert self.dist.checked_ln_pdf(point) == self.dist.ln_pdf(point)

    def test_off_simplex(self):
        assert self.dist.pdf([0.2, 0.2, 0.2]) == 0.0
        assert self.dist.ln_pdf([-0.5, 0.5, 1.0]) == -math.inf
        with pytest.raises(DomainError, match="simplex"):
            self.dist.checked_pdf([0.2, 0.2, 0.2])

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            self.dist.pdf([0.5, 0.5])
        with pytest.raises(DimensionError, match="has length 2, expected 3"):
            self.dist.checked_pdf([0.5, 0.5])
        with pytest.raises(DimensionError):
            self.dist.checked_ln_pdf([[0.2, 0.3, 0.5]])

    def test_undefined_on_boundary(self):
        dist = self.family(alpha=[0.5, 2.0])
        with pytest.raises(UndefinedResultError):
            dist.checked_pdf([0.0, 1.0])
        assert dist.checked_pdf([1.0, 0.0]) == 0.0

    def test_flat_concentration_is_uniform(self):
        dist = self.family(alpha=[1.0, 1.0, 1.0])
        assert dist.pdf([0.1, 0.2, 0.7]) == pytest.approx(2.0)
        assert dist.checked_pdf([0.0, 0.0, 1.0]) == pytest.approx(2.0)

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert draws.shape == (4000, 3)
        np.testing.assert_allclose(draws.sum(axis=1), 1.0)
        np.testing.assert_allclose(draws.mean(axis=0), [1.5 / 6.5, 2.0 / 6.5, 3.0 / 6.5], atol=0.02)
