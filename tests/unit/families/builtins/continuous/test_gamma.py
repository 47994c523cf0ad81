"""
Tests for Gamma, Erlang and Chi-squared Distribution Families

Erlang and chi-squared evaluate through a Gamma delegate, so they are
tested side by side.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import chi2, erlang, gamma

from pysatl_distributions.errors import DomainError, ParameterError, UndefinedResultError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from ..base import UNIVARIATE_CONTINUOUS_CAPABILITIES, BaseDistributionTest

POINTS = [-1.0, 0.0, 0.05, 0.5, 1.0, 2.5, 7.0, 20.0]


class TestGammaFamily(BaseDistributionTest):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.GAMMA)
        self.dist = self.family(shape=2.5, rate=1.5)
        self.reference = gamma(a=2.5, scale=1.0 / 1.5)

    def test_creation(self):
        assert self.dist.parameters == {"shape": 2.5, "rate": 1.5}
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES)

    def test_no_quantile_capability(self):
        assert not hasattr(self.dist, "inverse_cdf")

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="shape > 0"):
            self.family(shape=0.0, rate=1.0)
        with pytest.raises(ParameterError, match="rate > 0"):
            self.family(shape=1.0, rate=0.0)

    @pytest.mark.parametrize(
        "method, scipy_method",
        [("pdf", "pdf"), ("cdf", "cdf")],
    )
    def test_matches_scipy(self, method, scipy_method):
        self.assert_matches_reference(
            getattr(self.dist, method), POINTS, getattr(self.reference, scipy_method)
        )

    def test_ln_pdf_matches_scipy(self):
        self.assert_matches_reference(self.dist.ln_pdf, POINTS[2:] + [300.0], self.reference.logpdf)

    def test_density_at_zero(self):
        assert self.dist.checked_pdf(0.0) == 0.0
        assert self.family(shape=1.0, rate=2.0).checked_pdf(0.0) == pytest.approx(2.0)

        singular = self.family(shape=0.5, rate=1.0)
        assert singular.pdf(0.0) == math.inf
        with pytest.raises(UndefinedResultError):
            singular.checked_pdf(0.0)
        with pytest.raises(UndefinedResultError):
            singular.checked_ln_pdf(0.0)
        with pytest.raises(DomainError):
            singular.checked_pdf(-1.0)

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert (draws >= 0.0).all()
        assert draws.mean() == pytest.approx(2.5 / 1.5, abs=0.08)


class TestErlangFamily(BaseDistributionTest):
    """Test suite for Erlang distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.ERLANG)
        self.dist = self.family(shape=3, rate=2.0)
        self.reference = erlang(a=3, scale=0.5)

    def test_creation(self):
        assert self.dist.parameters == {"shape": 3, "rate": 2.0}
        assert self.family(shape=3.0, rate=2.0) == self.dist
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"shape": 2.5, "rate": 1.0}, "shape is a positive integer"),
            ({"shape": 0, "rate": 1.0}, "shape is a positive integer"),
            ({"shape": 2, "rate": -1.0}, "rate > 0"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ParameterError, match=message):
            self.family(**params)

    @pytest.mark.parametrize(
        "method, scipy_method",
        [("pdf", "pdf"), ("cdf", "cdf")],
    )
    def test_matches_scipy(self, method, scipy_method):
        self.assert_matches_reference(
            getattr(self.dist, method), POINTS, getattr(self.reference, scipy_method)
        )

    def test_agrees_with_gamma(self):
        reference = configure_families_register().get(FamilyName.GAMMA)(shape=3.0, rate=2.0)
        for x in POINTS:
            assert self.dist.ln_pdf(x) == reference.ln_pdf(x)
        assert self.dist.checked_pdf(0.0) == 0.0

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert draws.mean() == pytest.approx(1.5, abs=0.08)


class TestChiSquaredFamily(BaseDistributionTest):
    """Test suite for ChiSquared distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.CHI_SQUARED)
        self.dist = self.family(freedom=5.0)
        self.reference = chi2(df=5.0)

    def test_creation(self):
        assert self.dist.parameters == {"freedom": 5.0}
        self.assert_capabilities(self.dist, UNIVARIATE_CONTINUOUS_CAPABILITIES)

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="freedom > 0"):
            self.family(freedom=0.0)

    @pytest.mark.parametrize(
        "method, scipy_method",
        [("pdf", "pdf"), ("cdf", "cdf")],
    )
    def test_matches_scipy(self, method, scipy_method):
        self.assert_matches_reference(
            getattr(self.dist, method), POINTS, getattr(self.reference, scipy_method)
        )

    def test_ln_pdf_matches_scipy(self):
        self.assert_matches_reference(self.dist.ln_pdf, POINTS[2:], self.reference.logpdf)

    def test_singular_at_zero_below_two_degrees(self):
        with pytest.raises(UndefinedResultError):
            self.family(freedom=1.0).checked_pdf(0.0)
        assert self.family(freedom=2.0).checked_pdf(0.0) == pytest.approx(0.5)

    def test_sampling(self, rng):
        draws = np.array([self.dist.sample(rng) for _ in range(4000)])
        assert draws.mean() == pytest.approx(5.0, abs=0.2)
