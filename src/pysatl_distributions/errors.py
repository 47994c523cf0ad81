"""
Failure Reporting
=================

Typed, recoverable failures produced by *checked* capability operations.

Every failure carries a :class:`FailureReason`, the shared taxonomy that all
distributions map into:

- ``OUT_OF_DOMAIN`` – an argument lies outside the declared domain;
- ``INVALID_STRUCTURE`` – an argument has the wrong structure or dimensionality;
- ``UNDEFINED`` – the result is numerically undefined (e.g. ``0 ** -a``).

Notes
-----
Unchecked operations never raise :class:`StatsError`. An unchecked call given
structurally invalid input fails with whatever the computation raises, so a
caller can always tell a programmer error from a reported failure.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import ClassVar


class FailureReason(StrEnum):
    """Why a checked query could not be answered."""

    OUT_OF_DOMAIN = "out_of_domain"
    INVALID_STRUCTURE = "invalid_structure"
    UNDEFINED = "undefined"


class StatsError(ValueError):
    """
    Base class of all recoverable failures.

    Parameters
    ----------
    message : str
        Human-readable description.
    argument : str, optional
        Name of the offending argument.
    """

    reason: ClassVar[FailureReason]

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason.value}: {self})"


class DomainError(StatsError):
    """Argument outside the declared domain."""

    reason = FailureReason.OUT_OF_DOMAIN

    @classmethod
    def interval(
        cls,
        argument: str,
        value: object,
        low: float,
        high: float,
        *,
        closed: bool = True,
    ) -> DomainError:
        """Build the failure for a value outside ``[low, high]`` (or ``(low, high)``)."""
        bounds = f"[{low}, {high}]" if closed else f"({low}, {high})"
        return cls.outside(argument, value, bounds)

    @classmethod
    def outside(cls, argument: str, value: object, region: object) -> DomainError:
        """Build the failure for a value outside ``region`` (rendered with ``str``)."""
        return cls(f"Argument {argument}={value} must lie in {region}", argument=argument)


class DimensionError(StatsError):
    """Argument with invalid structure or dimensionality."""

    reason = FailureReason.INVALID_STRUCTURE

    @classmethod
    def length(cls, argument: str, actual: int, expected: int) -> DimensionError:
        """Build the failure for a container of the wrong length."""
        return cls(
            f"Argument {argument} has length {actual}, expected {expected}", argument=argument
        )


class UndefinedResultError(StatsError):
    """Numerically undefined result, such as zero raised to a negative power."""

    reason = FailureReason.UNDEFINED


class ParameterError(StatsError):
    """Construction-time parameter constraint does not hold."""

    reason = FailureReason.OUT_OF_DOMAIN


__all__ = [
    "FailureReason",
    "StatsError",
    "DomainError",
    "DimensionError",
    "UndefinedResultError",
    "ParameterError",
]
