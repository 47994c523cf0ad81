__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_distributions.precision import almost_eq, is_probability, relative_eq


class TestAlmostEq:
    def test_within_tolerance(self):
        assert almost_eq(0.1 + 0.2, 0.3, 1e-15)
        assert not almost_eq(1.0, 1.1, 1e-3)

    def test_infinities(self):
        assert almost_eq(math.inf, math.inf, 0.0)
        assert not almost_eq(math.inf, -math.inf, 1e300)
        assert not almost_eq(math.inf, 1e308, 1e308)

    def test_nan_is_never_equal(self):
        assert not almost_eq(math.nan, math.nan, 1.0)


class TestRelativeEq:
    def test_scales_with_magnitude(self):
        assert relative_eq(1e10, 1e10 + 1.0, 1e-9)
        assert not relative_eq(1e10, 1e10 + 100.0, 1e-9)

    def test_absolute_for_small_values(self):
        assert relative_eq(0.0, 1e-300, 1e-12)
        assert not relative_eq(0.0, 1e-3, 1e-12)

    def test_infinities_and_nan(self):
        assert relative_eq(-math.inf, -math.inf, 1e-12)
        assert not relative_eq(math.nan, 0.0, 1.0)


@pytest.mark.parametrize(
    "p, expected",
    [(0.0, True), (0.5, True), (1.0, True), (-1e-300, False), (1.0000001, False), (math.nan, False)],
)
def test_is_probability(p, expected):
    assert is_probability(p) is expected
