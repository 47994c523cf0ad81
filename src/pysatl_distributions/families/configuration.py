"""
Distribution Families Configuration
====================================

This module registers the builtin distribution families of the library in the
global :class:`~pysatl_distributions.families.registry.FamilyRegister`.

Notes
-----
- Configuration is idempotent: repeated calls return the cached register.
- :func:`reset_families_register` drops the cache together with the register.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_distributions.families.builtins import BUILTIN_FAMILIES
from pysatl_distributions.families.registry import FamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> FamilyRegister:
    """
    Register all builtin distribution families in the global registry.

    Returns
    -------
    FamilyRegister
        The global registry of distribution families.
    """
    for family in BUILTIN_FAMILIES:
        FamilyRegister.register(family)
    return FamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    FamilyRegister._reset()
