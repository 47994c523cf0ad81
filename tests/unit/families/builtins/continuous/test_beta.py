"""
Tests for Beta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import beta

from pysatl_distributions.errors import DomainError, ParameterError, UndefinedResultError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import ContinuousSupportShape1D, FamilyName

from ..base import UNIVARIATE_CONTINUOUS_CAPABILITIES, BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    """Test suite for Beta distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.BETA)
        self.dist = self.family(shape_a=2.0, shape_b=5.0)
        self.reference = beta(2.0, 5.0)

    def test_creation(self):
        assert self.dist.parameters == {"shape_a": 2.0, "shape_b": 5.0}
        assert self.dist.support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL
        assert (self.dist.minimum, self.dist.maximum) == (0.0, 1.0)
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"shape_a": 0.0, "shape_b": 1.0}, "shape_a > 0"),
            ({"shape_a": 1.0, "shape_b": math.inf}, "shape_b > 0"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ParameterError, match=message):
            self.family(**params)

    @pytest.mark.parametrize(
        "method, scipy_method, test_data",
        [
            ("pdf", "pdf", [-0.5, 0.0, 0.01, 0.2, 0.5, 0.99, 1.0, 1.5]),
            ("ln_pdf", "logpdf", [0.01, 0.2, 0.5, 0.99, 1.0 - 1e-9]),
            ("cdf", "cdf", [-0.5, 0.0, 0.01, 0.2, 0.5, 0.99, 1.0, 1.5]),
        ],
    )
    def test_matches_scipy(self, method, scipy_method, test_data):
        self.assert_matches_reference(
            getattr(self.dist, method), test_data, getattr(self.reference, scipy_method)
        )

    def test_boundaries(self):
        assert self.dist.checked_pdf(0.0) == 0.0
        assert self.dist.checked_pdf(1.0) == 0.0
        assert self.family(shape_a=1.0, shape_b=1.0).checked_pdf(1.0) == pytest.approx(1.0)

        arcsine = self.family(shape_a=0.5, shape_b=0.5)
        for x in (0.0, 1.0):
            with pytest.raises(UndefinedResultError):
                arcsine.checked_pdf(x)
        with pytest.raises(DomainError):
            arcsine.checked_pdf(1.5)

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert ((draws >= 0.0) & (draws <= 1.0)).all()
        assert draws.mean() == pytest.approx(2.0 / 7.0, abs=0.02)
