"""
Sampling Helpers
================

This module defines sample containers and the thin helpers layered on top of
the :class:`~pysatl_distributions.distributions.capabilities.Distribution`
sampling capability:

- :func:`sample_default` – draw once from a process-default randomness source;
- :func:`sample_n` – draw ``n`` i.i.d. outcomes into an :class:`ArraySample`.

Notes
-----
Neither helper changes the sampling contract: both obtain a generator and call
``distribution.sample(rng)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_distributions.distributions.capabilities import Distribution
    from pysatl_distributions.types import RandomSource


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[Any]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores samples as a 2D array of shape
    (n_samples, n_dimensions).

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape (n, d).

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.
    dimension : int
        Dimensionality of the samples (d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    @property
    def dim(self) -> int:
        """Alias for dimension attribute."""
        return self.dimension

    def __iter__(self) -> Iterator[npt.NDArray[Any]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[Any]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


def sample_default[T](distribution: Distribution[T]) -> T:
    """
    Draw one outcome using a process-default randomness source.

    A fresh :func:`numpy.random.default_rng` is created for the duration of
    the call, seeded from operating-system entropy.

    Examples
    --------
    >>> from pysatl_distributions.families.builtins import Bernoulli
    >>> sample_default(Bernoulli(0.5)) in (0, 1)
    True
    """
    rng = np.random.default_rng()
    return distribution.sample(rng)


def sample_n(
    distribution: Distribution[Any], n: int, rng: RandomSource | None = None
) -> ArraySample:
    """
    Draw ``n`` i.i.d. outcomes.

    Parameters
    ----------
    distribution : Distribution
        Anything honouring the sampling capability.
    n : int
        Number of draws (non-negative).
    rng : numpy.random.Generator, optional
        Randomness source; a process-default one is created when omitted.

    Returns
    -------
    ArraySample
        Samples of shape ``(n, 1)`` for scalar outcomes, ``(n, d)`` for
        vector outcomes of length ``d``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError("Number of samples must be non-negative.")
    if rng is None:
        rng = np.random.default_rng()

    draws = [np.atleast_1d(np.asarray(distribution.sample(rng))) for _ in range(n)]
    if not draws:
        return ArraySample(np.empty((0, 1), dtype=np.float64))
    return ArraySample(np.vstack(draws))


__all__ = [
    "Sample",
    "ArraySample",
    "sample_default",
    "sample_n",
]
