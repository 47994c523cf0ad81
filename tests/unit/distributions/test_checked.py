"""
Tests for the checked operation mixins.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_distributions.distributions.checked import require_probability
from pysatl_distributions.errors import (
    DimensionError,
    DomainError,
    FailureReason,
    StatsError,
    UndefinedResultError,
)
from pysatl_distributions.families.builtins import (
    Bernoulli,
    Beta,
    Binomial,
    Categorical,
    Dirichlet,
    Exponential,
    Gamma,
    Geometric,
    LogNormal,
    Multinomial,
    Normal,
    Uniform,
)


class TestCheckedDensity:
    def setup_method(self):
        self.uniform = Uniform(0.0, 2.0)

    @pytest.mark.parametrize("x", [0.0, 0.5, 2.0])
    def test_agrees_inside_bounds(self, x):
        assert self.uniform.checked_pdf(x) == self.uniform.pdf(x)
        assert self.uniform.checked_ln_pdf(x) == self.uniform.ln_pdf(x)

    @pytest.mark.parametrize("x", [-0.1, 2.5, math.inf, math.nan])
    def test_outside_bounds_raises(self, x):
        with pytest.raises(DomainError) as excinfo:
            self.uniform.checked_pdf(x)
        assert excinfo.value.argument == "x"
        assert excinfo.value.reason is FailureReason.OUT_OF_DOMAIN

        with pytest.raises(DomainError):
            self.uniform.checked_ln_pdf(x)

    def test_unchecked_outside_bounds_is_zero(self):
        assert self.uniform.pdf(3.0) == 0.0
        assert self.uniform.ln_pdf(3.0) == -math.inf

    @pytest.mark.parametrize("x", [-math.inf, math.inf])
    def test_infinity_is_not_an_outcome(self, x):
        assert Normal().pdf(x) == 0.0
        with pytest.raises(DomainError, match=r"\(-inf, inf\)"):
            Normal().checked_pdf(x)

    def test_domain_follows_support_closure(self):
        log_normal = LogNormal(0.0, 1.0)
        assert log_normal.minimum == 0.0
        with pytest.raises(DomainError, match=r"must lie in \(0.0, inf\)"):
            log_normal.checked_pdf(0.0)
        assert Exponential(1.0).checked_pdf(0.0) == 1.0
        with pytest.raises(DomainError, match=r"must lie in \[0.0, 2.0\]"):
            self.uniform.checked_pdf(2.5)

    def test_undefined_at_singular_boundary(self):
        with pytest.raises(UndefinedResultError):
            Gamma(0.5, 1.0).checked_pdf(0.0)
        with pytest.raises(UndefinedResultError):
            Beta(2.0, 0.5).checked_ln_pdf(1.0)

    def test_zero_density_inside_support_is_not_a_failure(self):
        assert Beta(2.0, 2.0).checked_pdf(0.0) == 0.0
        assert Exponential(1.0).checked_pdf(0.0) == 1.0


class TestCheckedMass:
    def setup_method(self):
        self.binomial = Binomial(0.5, 10)

    def test_agrees_on_support(self):
        for k in range(11):
            assert self.binomial.checked_pmf(k) == self.binomial.pmf(k)
            assert self.binomial.checked_ln_pmf(k) == self.binomial.ln_pmf(k)

    @pytest.mark.parametrize("x", [-1, 11, 2.5, math.nan])
    def test_off_support_raises(self, x):
        with pytest.raises(DomainError, match="must be an integer"):
            self.binomial.checked_pmf(x)

    def test_integral_float_is_accepted(self):
        assert self.binomial.checked_pmf(5.0) == self.binomial.pmf(5)

    def test_zero_weight_category_is_valid_zero(self):
        assert Categorical([0.0, 1.0]).checked_pmf(0) == 0.0

    def test_unbounded_support(self):
        with pytest.raises(DomainError):
            Geometric(0.5).checked_pmf(0)
        assert Geometric(0.5).checked_pmf(1000) == Geometric(0.5).pmf(1000)


class TestCheckedQuantile:
    @pytest.mark.parametrize("p", [-1.0, 1.5, math.nan])
    def test_invalid_probability(self, p):
        with pytest.raises(DomainError) as excinfo:
            Normal().checked_inverse_cdf(p)
        assert excinfo.value.argument == "p"

    def test_unchecked_fails_loudly_without_stats_error(self):
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]") as excinfo:
            Bernoulli(0.5).inverse_cdf(-1.0)
        assert not isinstance(excinfo.value, StatsError)

    def test_agrees_on_valid_probability(self):
        d = Categorical([1.0, 2.0, 1.0])
        for p in (0.0, 0.25, 0.5, 0.75, 1.0):
            assert d.checked_inverse_cdf(p) == d.inverse_cdf(p)

    def test_require_probability(self):
        require_probability(0.0)
        require_probability(1.0)
        with pytest.raises(ValueError):
            require_probability(1.0000001)


class TestCheckedMultivariate:
    def test_multinomial_wrong_length(self):
        with pytest.raises(DimensionError) as excinfo:
            Multinomial([0.3, 0.7], 5).checked_pmf([1])
        assert excinfo.value.reason is FailureReason.INVALID_STRUCTURE

    def test_multinomial_wrong_total(self):
        with pytest.raises(DomainError):
            Multinomial([0.3, 0.7], 5).checked_pmf([1, 1])
        assert Multinomial([0.3, 0.7], 5).pmf([1, 1]) == 0.0

    def test_dirichlet_structure_and_domain(self):
        d = Dirichlet([1.0, 2.0, 3.0])
        with pytest.raises(DimensionError):
            d.checked_pdf([[0.2, 0.3, 0.5]])
        with pytest.raises(DomainError):
            d.checked_pdf([0.5, 0.5, 0.5])
        assert d.pdf([0.5, 0.5, 0.5]) == 0.0

    def test_dirichlet_undefined_on_face(self):
        with pytest.raises(UndefinedResultError):
            Dirichlet([0.5, 2.0]).checked_pdf([0.0, 1.0])

    def test_unchecked_wrong_length_fails_loudly(self):
        with pytest.raises(ValueError) as excinfo:
            Dirichlet([1.0, 2.0, 3.0]).pdf([0.5, 0.5])
        assert not isinstance(excinfo.value, StatsError)
