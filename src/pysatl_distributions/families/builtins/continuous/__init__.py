"""
Built-in continuous distribution families.

This module contains implementations of univariate continuous families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.continuous.beta import Beta
from pysatl_distributions.families.builtins.continuous.cauchy import Cauchy
from pysatl_distributions.families.builtins.continuous.chi import Chi
from pysatl_distributions.families.builtins.continuous.chi_squared import ChiSquared
from pysatl_distributions.families.builtins.continuous.erlang import Erlang
from pysatl_distributions.families.builtins.continuous.exponential import Exponential
from pysatl_distributions.families.builtins.continuous.fisher_snedecor import FisherSnedecor
from pysatl_distributions.families.builtins.continuous.gamma import Gamma
from pysatl_distributions.families.builtins.continuous.inverse_gamma import InverseGamma
from pysatl_distributions.families.builtins.continuous.log_normal import LogNormal
from pysatl_distributions.families.builtins.continuous.normal import Normal
from pysatl_distributions.families.builtins.continuous.pareto import Pareto
from pysatl_distributions.families.builtins.continuous.students_t import StudentsT
from pysatl_distributions.families.builtins.continuous.triangular import Triangular
from pysatl_distributions.families.builtins.continuous.uniform import Uniform
from pysatl_distributions.families.builtins.continuous.weibull import Weibull

__all__ = [
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
]
