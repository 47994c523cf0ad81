"""
Built-in multivariate distribution families.

Outcomes are one-dimensional NumPy arrays; bounds are reported per component.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.multivariate.dirichlet import Dirichlet
from pysatl_distributions.families.builtins.multivariate.multinomial import Multinomial

__all__ = [
    "Dirichlet",
    "Multinomial",
]
