"""
Global registry for distribution families using singleton pattern.

This module implements a centralized registry that maps family names to their
distribution classes, so that distributions can be looked up and constructed
by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any, ClassVar

    from pysatl_distributions.families.parametrizations import Parametrization


class FamilyRegister:
    """
    Singleton registry for distribution families.

    Maintains a global registry of all families, allowing them to be accessed
    by name.
    """

    _instance: ClassVar[FamilyRegister | None] = None
    _registered_families: dict[str, type[Parametrization]]

    def __new__(cls) -> FamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> type[Parametrization]:
        """
        Retrieve a family by name.

        Parameters
        ----------
        name : str
            Name of the family to retrieve.

        Returns
        -------
        type[Parametrization]
            The requested distribution class.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def register(cls, family: type[Parametrization]) -> None:
        """
        Register a new family.

        Parameters
        ----------
        family : type[Parametrization]
            The distribution class to register, decorated with
            :func:`~pysatl_distributions.families.parametrizations.parametrization`.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        name = family.__family_name__
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family

    @classmethod
    def create(cls, name: str, *args: Any, **parameters: Any) -> Parametrization:
        """
        Construct a distribution of the named family.

        Raises
        ------
        ValueError
            If the family is unknown.
        ParameterError
            If the parameters violate a constraint of the family.
        """
        return cls.get(name)(*args, **parameters)

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._registered_families)

    def __iter__(self) -> Iterator[type[Parametrization]]:
        return iter(self._registered_families.values())

    def __len__(self) -> int:
        return len(self._registered_families)

    def __contains__(self, name: object) -> bool:
        return name in self._registered_families

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
