"""
PySATL Distributions
====================

Capability contracts for probability distributions: sampling, bounds,
density/mass, cumulative and inverse-cumulative functions in checked and
unchecked forms, together with a catalogue of builtin families implementing
them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import DEFAULT_TOLERANCES, Tolerances
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .precision import almost_eq, is_probability, relative_eq
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-distributions")
__all__ = [
    "__version__",
    "DEFAULT_TOLERANCES",
    "Tolerances",
    "almost_eq",
    "is_probability",
    "relative_eq",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _types_all
