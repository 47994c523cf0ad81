"""
Numerical tolerance configuration.

Tolerances used by the precision helpers and the conformance checks. They are
plain code-level settings: pass a custom :class:`Tolerances` to a check to
override the defaults.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Tolerances:
    """
    Tolerances for invariant checks.

    Parameters
    ----------
    ln_identity : float, default 1e-12
        Relative tolerance for ``ln_pdf(x) == ln(pdf(x))``.
    cdf_bounds : float, default 1e-12
        Absolute tolerance for ``cdf(minimum) == 0`` and ``cdf(maximum) == 1``.
    round_trip : float, default 1e-9
        Absolute tolerance for ``cdf(inverse_cdf(p)) == p``.
    normalization : float, default 1e-6
        Absolute tolerance for the total probability mass.
    agreement : float, default 0.0
        Absolute tolerance between checked and unchecked results.
    pmf_tail : float, default 1e-12
        Probability mass left out when summing a PMF over an unbounded support.
    max_terms : int, default 1_000_000
        Hard cap on the number of PMF terms summed.
    """

    ln_identity: float = 1e-12
    cdf_bounds: float = 1e-12
    round_trip: float = 1e-9
    normalization: float = 1e-6
    agreement: float = 0.0
    pmf_tail: float = 1e-12
    max_terms: int = 1_000_000

    def __post_init__(self) -> None:
        for name in ("ln_identity", "cdf_bounds", "round_trip", "normalization", "agreement"):
            if getattr(self, name) < 0:
                raise ValueError(f"Tolerance '{name}' must be non-negative")
        if not 0.0 < self.pmf_tail < 1.0:
            raise ValueError("Tolerance 'pmf_tail' must lie in (0, 1)")
        if self.max_terms <= 0:
            raise ValueError("Tolerance 'max_terms' must be positive")

    def with_overrides(self, **overrides: float) -> Tolerances:
        """Return a copy with some tolerances replaced."""
        return replace(self, **overrides)


DEFAULT_TOLERANCES = Tolerances()
"""Tolerances used when a check is called without explicit ones."""


__all__ = [
    "Tolerances",
    "DEFAULT_TOLERANCES",
]
