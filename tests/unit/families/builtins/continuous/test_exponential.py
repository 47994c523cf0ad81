"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including construction, evaluation against scipy, checked operations and
sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_distributions.distributions.strategies import InverseTransformSampling
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.errors import DomainError, ParameterError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import ContinuousSupportShape1D, FamilyName, UnivariateContinuous

from ..base import (
    QUANTILE_CAPABILITIES,
    UNIVARIATE_CONTINUOUS_CAPABILITIES,
    BaseDistributionTest,
)


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.exponential_family = registry.get(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(rate=0.5)

    def test_rate_parametrization_creation(self):
        """Test creation of distribution with rate parametrization."""
        dist = self.exponential_dist_example

        assert dist.family_name == FamilyName.EXPONENTIAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"rate": 0.5}
        assert isinstance(dist, InverseTransformSampling)
        self.assert_capabilities(dist, UNIVARIATE_CONTINUOUS_CAPABILITIES | QUANTILE_CAPABILITIES)

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterError, match="rate > 0"):
            self.exponential_family(rate=-0.5)

        with pytest.raises(ParameterError, match="rate > 0"):
            self.exponential_family(rate=math.inf)

    @pytest.mark.parametrize(
        "method, scipy_method, test_data",
        [
            ("pdf", "pdf", [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0]),
            ("ln_pdf", "logpdf", [-1.0, 0.0, 0.5, 1.0, 2.0, 100.0]),
            ("cdf", "cdf", [-math.inf, -1.0, 0.0, 1e-12, 0.5, 1.0, 2.0, math.inf]),
            ("inverse_cdf", "ppf", [0.0, 1e-12, 0.01, 0.1, 0.5, 0.9, 0.99, 1.0]),
        ],
    )
    def test_matches_scipy(self, method, scipy_method, test_data):
        """Test pointwise evaluation against scipy.stats."""
        self.assert_matches_reference(
            getattr(self.exponential_dist_example, method),
            test_data,
            getattr(expon(scale=2.0), scipy_method),
        )

    def test_exponential_support(self):
        """Test that exponential distribution has support [0, inf)."""
        dist = self.exponential_dist_example

        assert isinstance(dist.support, ContinuousSupport)
        assert dist.support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert dist.support.contains(0.0)
        assert dist.minimum == 0.0
        assert dist.maximum == math.inf

    def test_cdf_precision_near_zero(self):
        """Small arguments keep full relative precision."""
        assert self.exponential_dist_example.cdf(1e-20) == pytest.approx(0.5e-20, rel=1e-12)

    def test_checked_pdf(self):
        """Test checked density around the lower bound."""
        dist = self.exponential_dist_example
        assert dist.checked_pdf(0.0) == 0.5

        with pytest.raises(DomainError):
            dist.checked_pdf(-0.1)
        with pytest.raises(DomainError):
            dist.checked_ln_pdf(-math.inf)

    def test_sampling(self, rng):
        """Test sample mean of the inverse-transform sampler."""
        draws = np.array([self.exponential_dist_example.sample(rng) for _ in range(4000)])

        assert (draws >= 0.0).all()
        assert draws.mean() == pytest.approx(2.0, abs=0.15)
