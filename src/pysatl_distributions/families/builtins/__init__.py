"""
Built-in distribution families for PySATL.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.continuous import (
    Beta,
    Cauchy,
    Chi,
    ChiSquared,
    Erlang,
    Exponential,
    FisherSnedecor,
    Gamma,
    InverseGamma,
    LogNormal,
    Normal,
    Pareto,
    StudentsT,
    Triangular,
    Uniform,
    Weibull,
)
from pysatl_distributions.families.builtins.discrete import (
    Bernoulli,
    Binomial,
    Categorical,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    Poisson,
)
from pysatl_distributions.families.builtins.multivariate import Dirichlet, Multinomial

BUILTIN_FAMILIES = (
    # continuous
    Beta,
    Cauchy,
    Chi,
    ChiSquared,
    Erlang,
    Exponential,
    FisherSnedecor,
    Gamma,
    InverseGamma,
    LogNormal,
    Normal,
    Pareto,
    StudentsT,
    Triangular,
    Uniform,
    Weibull,
    # discrete
    Bernoulli,
    Binomial,
    Categorical,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    Poisson,
    # multivariate
    Dirichlet,
    Multinomial,
)
"""Every builtin family, in registration order."""

__all__ = [
    "BUILTIN_FAMILIES",
    "Beta",
    "Cauchy",
    "Chi",
    "ChiSquared",
    "Erlang",
    "Exponential",
    "FisherSnedecor",
    "Gamma",
    "InverseGamma",
    "LogNormal",
    "Normal",
    "Pareto",
    "StudentsT",
    "Triangular",
    "Uniform",
    "Weibull",
    "Bernoulli",
    "Binomial",
    "Categorical",
    "DiscreteUniform",
    "Geometric",
    "Hypergeometric",
    "Poisson",
    "Dirichlet",
    "Multinomial",
]
