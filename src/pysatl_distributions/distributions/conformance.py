"""
Conformance Checks
==================

Reusable checks of the invariants every distribution honouring a capability
must satisfy. Each check raises :class:`AssertionError` with a descriptive
message on the first violation and returns ``None`` otherwise, so the checks
compose directly into test suites.

- :func:`check_bounds` – ``minimum <= maximum``.
- :func:`check_outside_bounds` – zero density/mass outside the bounds, domain
  failure from the checked forms.
- :func:`check_ln_identity` – log variants agree with the log of the linear ones.
- :func:`check_cdf_monotone`, :func:`check_cdf_limits` – the CDF is a
  non-decreasing map onto ``[0, 1]``.
- :func:`check_round_trip` – ``inverse_cdf`` inverts ``cdf``.
- :func:`check_checked_agreement` – checked and unchecked forms agree whenever
  the checked form returns.
- :func:`check_normalization` – total probability is one.
- :func:`check_conformance` – every check applicable to the capabilities of a
  distribution.

Notes
-----
Checks that cannot run exhaustively (unbounded discrete supports, vector
outcomes) emit a :class:`UserWarning` describing what was truncated or skipped.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
import warnings
from typing import TYPE_CHECKING, Any

from scipy import integrate as _sp_integrate

from pysatl_distributions.config import DEFAULT_TOLERANCES
from pysatl_distributions.distributions.capabilities import capabilities_of
from pysatl_distributions.distributions.support import DiscreteSupport
from pysatl_distributions.errors import DomainError, StatsError
from pysatl_distributions.precision import almost_eq, relative_eq
from pysatl_distributions.types import CapabilityName

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from pysatl_distributions.config import Tolerances

DEFAULT_PROBABILITIES: tuple[float, ...] = (0.0, 1e-6, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 1.0)
"""Probabilities probed by :func:`check_round_trip` when none are given."""

_TINY = sys.float_info.min


def _density_forms(distribution: Any) -> tuple[str, str, str, str] | None:
    """Names of (linear, log, checked linear, checked log) density or mass methods."""
    caps = capabilities_of(distribution)
    if CapabilityName.CONTINUOUS in caps:
        forms = ("pdf", "ln_pdf", "checked_pdf", "checked_ln_pdf")
        checked = CapabilityName.CHECKED_CONTINUOUS in caps
    elif CapabilityName.DISCRETE in caps:
        forms = ("pmf", "ln_pmf", "checked_pmf", "checked_ln_pmf")
        checked = CapabilityName.CHECKED_DISCRETE in caps
    else:
        return None
    return forms if checked else (forms[0], forms[1], "", "")


def _require_density(distribution: Any) -> tuple[str, str, str, str]:
    forms = _density_forms(distribution)
    if forms is None:
        raise TypeError(
            f"{type(distribution).__name__} provides neither a density nor a mass function"
        )
    return forms


def _outside_default_points(distribution: Any) -> list[float]:
    points: list[float] = []
    if math.isfinite(distribution.minimum):
        points += [distribution.minimum - 1.0, distribution.minimum - 0.5]
    if math.isfinite(distribution.maximum):
        points += [distribution.maximum + 0.5, distribution.maximum + 1.0]
    return points


def check_bounds(distribution: Any) -> None:
    """Check that ``minimum <= maximum``."""
    low, high = distribution.minimum, distribution.maximum
    if not low <= high:
        raise AssertionError(f"minimum {low} exceeds maximum {high}")


def check_outside_bounds(distribution: Any, points: Iterable[float] | None = None) -> None:
    """
    Check behaviour strictly outside ``[minimum, maximum]``.

    The unchecked density (or mass) must be exactly ``0`` and its logarithm
    ``-inf``; the checked forms must raise :class:`DomainError`.

    Parameters
    ----------
    distribution
        Univariate distribution with a density or mass function.
    points : iterable of float, optional
        Probe points; those inside the bounds are ignored. Defaults to points
        just beyond every finite bound.
    """
    linear, log, checked_linear, checked_log = _require_density(distribution)
    low, high = distribution.minimum, distribution.maximum
    probes = _outside_default_points(distribution) if points is None else list(points)
    for x in probes:
        if math.isnan(x) or low <= x <= high:
            continue
        value = getattr(distribution, linear)(x)
        if value != 0.0:
            raise AssertionError(f"{linear}({x}) = {value} outside [{low}, {high}], expected 0")
        ln_value = getattr(distribution, log)(x)
        if ln_value != -math.inf:
            raise AssertionError(f"{log}({x}) = {ln_value} outside [{low}, {high}], expected -inf")
        for name in (checked_linear, checked_log):
            if not name:
                continue
            try:
                result = getattr(distribution, name)(x)
            except DomainError:
                continue
            raise AssertionError(f"{name}({x}) returned {result} instead of raising DomainError")


def check_ln_identity(
    distribution: Any, points: Iterable[Any], tolerances: Tolerances | None = None
) -> None:
    """
    Check that the log variant equals the logarithm of the linear one.

    Where the linear value underflows to zero the log variant only has to be
    below the logarithm of the smallest normal float, since log-space
    evaluation legitimately stays finite there.
    """
    tol = tolerances or DEFAULT_TOLERANCES
    linear, log, _, _ = _require_density(distribution)
    for x in points:
        value = getattr(distribution, linear)(x)
        ln_value = getattr(distribution, log)(x)
        if value == 0.0:
            if not ln_value < math.log(_TINY):
                raise AssertionError(f"{linear}({x}) = 0 but {log}({x}) = {ln_value}")
        elif math.isinf(value):
            if ln_value != math.inf:
                raise AssertionError(f"{linear}({x}) = inf but {log}({x}) = {ln_value}")
        elif value >= _TINY and not relative_eq(ln_value, math.log(value), tol.ln_identity):
            raise AssertionError(
                f"{log}({x}) = {ln_value} differs from ln({linear}({x})) = {math.log(value)}"
            )


def check_cdf_monotone(
    distribution: Any, points: Iterable[float], tolerances: Tolerances | None = None
) -> None:
    """Check that the CDF is non-decreasing and stays within ``[0, 1]``."""
    tol = tolerances or DEFAULT_TOLERANCES
    previous_x, previous = -math.inf, 0.0
    for x in sorted(p for p in points if not math.isnan(p)):
        value = distribution.cdf(x)
        if not -tol.cdf_bounds <= value <= 1.0 + tol.cdf_bounds:
            raise AssertionError(f"cdf({x}) = {value} lies outside [0, 1]")
        if value < previous:
            raise AssertionError(
                f"cdf decreases: cdf({previous_x}) = {previous} > cdf({x}) = {value}"
            )
        previous_x, previous = x, value


def check_cdf_limits(distribution: Any, tolerances: Tolerances | None = None) -> None:
    """
    Check the CDF at the ends of the real line and beyond finite bounds.

    ``cdf(-inf)`` and ``cdf(x)`` for ``x < minimum`` must be ``0``;
    ``cdf(inf)`` and ``cdf(maximum)`` must be ``1``.
    """
    tol = tolerances or DEFAULT_TOLERANCES
    low, high = distribution.minimum, distribution.maximum
    zeros = [-math.inf] + ([low - 1.0] if math.isfinite(low) else [])
    ones = [math.inf] + ([high] if math.isfinite(high) else [])
    for x in zeros:
        value = distribution.cdf(x)
        if not almost_eq(value, 0.0, tol.cdf_bounds):
            raise AssertionError(f"cdf({x}) = {value}, expected 0")
    for x in ones:
        value = distribution.cdf(x)
        if not almost_eq(value, 1.0, tol.cdf_bounds):
            raise AssertionError(f"cdf({x}) = {value}, expected 1")


def check_round_trip(
    distribution: Any,
    probabilities: Iterable[float] = DEFAULT_PROBABILITIES,
    tolerances: Tolerances | None = None,
) -> None:
    """
    Check that ``inverse_cdf`` inverts ``cdf``.

    For continuous distributions ``cdf(inverse_cdf(p)) ≈ p`` wherever the
    quantile is finite, with ``inverse_cdf(0) == minimum`` and
    ``inverse_cdf(1) == maximum``. For discrete distributions the quantile
    must be the smallest support point whose CDF reaches ``p``, and
    ``inverse_cdf(0) == minimum``.
    """
    tol = tolerances or DEFAULT_TOLERANCES
    discrete = CapabilityName.DISCRETE in capabilities_of(distribution)
    for p in probabilities:
        x = distribution.inverse_cdf(p)
        if p == 0.0 and x != distribution.minimum:
            raise AssertionError(f"inverse_cdf(0) = {x}, expected minimum {distribution.minimum}")
        if p == 1.0 and not discrete and x != distribution.maximum:
            raise AssertionError(f"inverse_cdf(1) = {x}, expected maximum {distribution.maximum}")
        if math.isinf(x):
            continue
        value = distribution.cdf(x)
        if discrete:
            if value + tol.round_trip < p:
                raise AssertionError(f"cdf(inverse_cdf({p})) = {value} < {p}")
            if x > distribution.minimum and distribution.cdf(x - 1) >= p:
                raise AssertionError(f"inverse_cdf({p}) = {x} is not the smallest such point")
        elif p not in (0.0, 1.0) and not almost_eq(value, p, tol.round_trip):
            raise AssertionError(f"cdf(inverse_cdf({p})) = {value}, expected {p}")


def check_checked_agreement(
    distribution: Any,
    points: Iterable[Any],
    probabilities: Iterable[float] = (),
    tolerances: Tolerances | None = None,
) -> None:
    """
    Check that checked forms agree with unchecked ones where they return.

    A checked call that raises :class:`StatsError` is skipped; any other
    exception propagates.
    """
    tol = tolerances or DEFAULT_TOLERANCES
    pairs: list[tuple[Callable[[Any], Any], Callable[[Any], Any], Sequence[Any]]] = []
    forms = _density_forms(distribution)
    materialized = list(points)
    if forms is not None and forms[2]:
        linear, log, checked_linear, checked_log = forms
        pairs.append(
            (getattr(distribution, checked_linear), getattr(distribution, linear), materialized)
        )
        pairs.append((getattr(distribution, checked_log), getattr(distribution, log), materialized))
    if CapabilityName.CHECKED_INVERSE_CDF in capabilities_of(distribution):
        pairs.append(
            (distribution.checked_inverse_cdf, distribution.inverse_cdf, list(probabilities))
        )
    for checked, unchecked, args in pairs:
        for x in args:
            try:
                expected = checked(x)
            except StatsError:
                continue
            actual = unchecked(x)
            if not (expected == actual or almost_eq(expected, actual, tol.agreement)):
                raise AssertionError(
                    f"{checked.__name__}({x}) = {expected} but {unchecked.__name__}({x}) = {actual}"
                )


def _mass_total(distribution: Any, support: DiscreteSupport, tol: Tolerances) -> float:
    if getattr(support, "is_right_bounded", False):
        return math.fsum(distribution.pmf(k) for k in support.iter_points())
    terms: list[float] = []
    last = None
    for last in support.iter_points():
        terms.append(distribution.pmf(last))
        if 1.0 - distribution.cdf(last) <= tol.pmf_tail or len(terms) >= tol.max_terms:
            break
    warnings.warn(
        f"Mass sum over an unbounded support truncated at k={last} ({len(terms)} terms)",
        UserWarning,
        stacklevel=3,
    )
    return math.fsum(terms)


def check_normalization(distribution: Any, tolerances: Tolerances | None = None) -> None:
    """
    Check that total probability is one.

    Densities are integrated over ``[minimum, maximum]`` with
    :func:`scipy.integrate.quad`; masses are summed over the support.
    Distributions with vector outcomes are skipped with a warning.
    """
    tol = tolerances or DEFAULT_TOLERANCES
    caps = capabilities_of(distribution)
    if CapabilityName.UNIVARIATE not in caps:
        warnings.warn(
            f"Normalization of {type(distribution).__name__} is not checked: outcomes are vectors",
            UserWarning,
            stacklevel=2,
        )
        return
    if CapabilityName.CONTINUOUS in caps:
        total, _ = _sp_integrate.quad(
            lambda t: float(distribution.pdf(t)),
            float(distribution.minimum),
            float(distribution.maximum),
            limit=200,
        )
    elif CapabilityName.DISCRETE in caps:
        support = getattr(distribution, "support", None)
        if not isinstance(support, DiscreteSupport):
            raise TypeError(f"{type(distribution).__name__} exposes no discrete support")
        total = _mass_total(distribution, support, tol)
    else:
        raise TypeError(
            f"{type(distribution).__name__} provides neither a density nor a mass function"
        )
    if not almost_eq(total, 1.0, tol.normalization):
        raise AssertionError(f"total probability is {total}, expected 1")


def check_conformance(
    distribution: Any,
    points: Iterable[Any] = (),
    probabilities: Iterable[float] = DEFAULT_PROBABILITIES,
    tolerances: Tolerances | None = None,
) -> frozenset[CapabilityName]:
    """
    Run every check applicable to the capabilities of ``distribution``.

    Parameters
    ----------
    distribution
        Object under test.
    points : iterable
        Probe points of the density/mass domain. For univariate distributions
        points just beyond finite bounds are added automatically.
    probabilities : iterable of float
        Probe probabilities for quantile checks.
    tolerances : Tolerances, optional
        Numerical tolerances, :data:`DEFAULT_TOLERANCES` when omitted.

    Returns
    -------
    frozenset[CapabilityName]
        Capabilities the checks were selected from.
    """
    caps = capabilities_of(distribution)
    probes = list(points)
    probs = list(probabilities)
    if CapabilityName.MIN in caps and CapabilityName.MAX in caps:
        check_bounds(distribution)
    has_density = _density_forms(distribution) is not None
    if CapabilityName.UNIVARIATE in caps:
        probes += _outside_default_points(distribution)
        check_cdf_monotone(distribution, probes, tolerances)
        check_cdf_limits(distribution, tolerances)
        if has_density:
            check_outside_bounds(distribution, probes)
            check_normalization(distribution, tolerances)
    if has_density:
        check_ln_identity(distribution, probes, tolerances)
        check_checked_agreement(distribution, probes, probs, tolerances)
    elif CapabilityName.CHECKED_INVERSE_CDF in caps:
        check_checked_agreement(distribution, (), probs, tolerances)
    if CapabilityName.INVERSE_CDF in caps:
        check_round_trip(distribution, probs, tolerances)
    return caps


__all__ = [
    "DEFAULT_PROBABILITIES",
    "check_bounds",
    "check_cdf_limits",
    "check_cdf_monotone",
    "check_checked_agreement",
    "check_conformance",
    "check_ln_identity",
    "check_normalization",
    "check_outside_bounds",
    "check_round_trip",
]
