"""
Built-in discrete distribution families.

This module contains implementations of univariate discrete families over
integer supports.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.discrete.bernoulli import Bernoulli
from pysatl_distributions.families.builtins.discrete.binomial import Binomial
from pysatl_distributions.families.builtins.discrete.categorical import Categorical
from pysatl_distributions.families.builtins.discrete.discrete_uniform import DiscreteUniform
from pysatl_distributions.families.builtins.discrete.geometric import Geometric
from pysatl_distributions.families.builtins.discrete.hypergeometric import Hypergeometric
from pysatl_distributions.families.builtins.discrete.poisson import Poisson

__all__ = [
    "Bernoulli",
    "Binomial",
    "Categorical",
    "DiscreteUniform",
    "Geometric",
    "Hypergeometric",
    "Poisson",
]
