"""
Sampling Strategies
===================

Reusable implementations of the sampling capability.

- :class:`InverseTransformSampling` – draws ``inverse_cdf(U)`` with
  ``U ~ U[0, 1)`` for distributions that own a closed-form quantile function.

Notes
-----
- Strategies are stateless mixins; the randomness source is always supplied by
  the caller.
- Exactly one uniform variate is consumed per draw.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

from pysatl_distributions.distributions.capabilities import InverseCDF

if TYPE_CHECKING:
    from pysatl_distributions.types import RandomSource


class InverseTransformSampling:
    """
    Univariate sampler using inverse transform sampling.

    Mix into a class implementing :class:`InverseCDF`; the resulting
    ``sample`` resolves the distribution's ``inverse_cdf`` and applies it to a
    single uniform variate drawn from ``rng``.
    """

    __slots__ = ()

    def sample(self, rng: "RandomSource") -> Any:
        """Draw one outcome as ``inverse_cdf(U)``."""
        quantile = cast(InverseCDF[Any], self).inverse_cdf
        return quantile(float(rng.random()))


__all__ = [
    "InverseTransformSampling",
]
