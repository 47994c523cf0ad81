"""
Parameterization classes and constraint validation for distribution families.

This module provides the base class shared by every builtin distribution: an
immutable set of parameters validated once at construction against the
constraints the family declares.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, dataclass_transform

from pysatl_distributions.errors import ParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for parametrized distributions.

    Instances own their parameters exclusively, are never mutated after
    construction and compare equal exactly when their parameters do.
    """

    # These attributes are set by the @parametrization decorator
    __family_name__: ClassVar[str]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def family_name(self) -> str:
        """Get the name of the family this parametrization belongs to."""
        return self.__class__.__family_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get constructor parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.init}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ParameterError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ParameterError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    """Collect constraint methods from the class."""
    constraints: list[ParametrizationConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @staticmethod"
                )
            continue
        if isinstance(attr, classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @classmethod"
                )
            continue

        func = attr if callable(attr) and isfunction(attr) else None
        if not func:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=func))
    return constraints


@dataclass_transform(frozen_default=True)
def parametrization(*, name: str) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator turning a class into an immutable, validated parametrization.

    Parameters
    ----------
    name : str
        Name of the family.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator.

    Notes
    -----
    Converts the class to a frozen dataclass. Constraint methods marked with
    @constraint are checked before the class' own ``__post_init__`` runs, so
    derived state is only ever computed from valid parameters.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must not be a dataclass already")

        cls.__family_name__ = name
        cls._constraints = _collect_constraints(cls)

        original_post_init = cls.__dict__.get("__post_init__")

        def __post_init__(self: Parametrization) -> None:
            self.validate()
            if original_post_init is not None:
                original_post_init(self)

        cls.__post_init__ = __post_init__  # type: ignore[attr-defined]
        return dataclass(frozen=True)(cls)

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
