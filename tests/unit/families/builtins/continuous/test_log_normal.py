"""
Tests for Log-normal Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import lognorm

from pysatl_distributions.errors import DomainError, ParameterError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import ContinuousSupportShape1D, FamilyName

from ..base import (
    QUANTILE_CAPABILITIES,
    UNIVARIATE_CONTINUOUS_CAPABILITIES,
    BaseDistributionTest,
)


class TestLogNormalFamily(BaseDistributionTest):
    """Test suite for LogNormal distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.LOG_NORMAL)
        self.dist = self.family(location=0.5, scale=0.75)
        self.reference = lognorm(s=0.75, scale=math.exp(0.5))

    def test_creation(self):
        assert self.dist.parameters == {"location": 0.5, "scale": 0.75}
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES | QUANTILE_CAPABILITIES)

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="scale > 0"):
            self.family(location=0.0, scale=0.0)
        with pytest.raises(ParameterError, match="location is finite"):
            self.family(location=-math.inf, scale=1.0)

    @pytest.mark.parametrize(
        "method, scipy_method, test_data",
        [
            ("pdf", "pdf", [-1.0, 0.1, 1.0, 1.65, 4.0, 20.0]),
            ("ln_pdf", "logpdf", [-1.0, 0.1, 1.0, 1.65, 4.0, 20.0]),
            ("cdf", "cdf", [-math.inf, -1.0, 0.0, 0.1, 1.0, 4.0, math.inf]),
            ("inverse_cdf", "ppf", [0.0, 0.001, 0.1, 0.5, 0.9, 0.999, 1.0]),
        ],
    )
    def test_matches_scipy(self, method, scipy_method, test_data):
        self.assert_matches_reference(
            getattr(self.dist, method), test_data, getattr(self.reference, scipy_method)
        )

    def test_support_is_open_at_zero(self):
        assert self.dist.support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert not self.dist.support.contains(0.0)
        assert self.dist.minimum == 0.0

    def test_checked_pdf(self):
        assert self.dist.pdf(0.0) == 0.0
        assert self.dist.ln_pdf(0.0) == -math.inf
        with pytest.raises(DomainError, match=r"must lie in \(0.0, inf\)"):
            self.dist.checked_pdf(0.0)
        with pytest.raises(DomainError):
            self.dist.checked_ln_pdf(0.0)
        assert self.dist.checked_pdf(1.0) == self.dist.pdf(1.0)
        with pytest.raises(DomainError):
            self.dist.checked_pdf(-1.0)

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert (draws > 0.0).all()
        assert np.log(draws).mean() == pytest.approx(0.5, abs=0.05)
