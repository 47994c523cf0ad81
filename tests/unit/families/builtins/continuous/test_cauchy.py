"""
Tests for Cauchy Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import cauchy

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from ..base import (
    QUANTILE_CAPABILITIES,
    UNIVARIATE_CONTINUOUS_CAPABILITIES,
    BaseDistributionTest,
)


class TestCauchyFamily(BaseDistributionTest):
    """Test suite for Cauchy distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.CAUCHY)
        self.dist = self.family(location=-1.0, scale=2.0)
        self.reference = cauchy(loc=-1.0, scale=2.0)

    def test_creation(self):
        assert self.dist.parameters == {"location": -1.0, "scale": 2.0}
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES | QUANTILE_CAPABILITIES)

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="scale > 0"):
            self.family(location=0.0, scale=-2.0)

    @pytest.mark.parametrize(
        "method, scipy_method, test_data",
        [
            ("pdf", "pdf", [-100.0, -3.0, -1.0, 0.0, 5.0, 1e4]),
            ("ln_pdf", "logpdf", [-100.0, -3.0, -1.0, 0.0, 5.0, 1e4]),
            ("cdf", "cdf", [-math.inf, -100.0, -1.0, 0.0, 5.0, math.inf]),
            ("inverse_cdf", "ppf", [0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99]),
        ],
    )
    def test_matches_scipy(self, method, scipy_method, test_data):
        self.assert_matches_reference(
            getattr(self.dist, method), test_data, getattr(self.reference, scipy_method)
        )

    def test_quantile_endpoints(self):
        assert self.dist.inverse_cdf(0.0) == -math.inf
        assert self.dist.inverse_cdf(1.0) == math.inf
        assert self.dist.inverse_cdf(0.5) == -1.0

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert np.median(draws) == pytest.approx(-1.0, abs=0.2)
