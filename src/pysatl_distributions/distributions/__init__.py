"""
Distributions subpackage

Capability contracts and shared plumbing for probability distributions:

- capability protocols (:mod:`.capabilities`);
- checked-operation mixins (:mod:`.checked`);
- sampling protocol, array-backed samples and helpers (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`);
- support descriptors (:mod:`.support`);
- reusable invariant checks (:mod:`.conformance`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .capabilities import (
    CAPABILITY_PROTOCOLS,
    CheckedContinuous,
    CheckedDiscrete,
    CheckedInverseCDF,
    Continuous,
    Discrete,
    Distribution,
    InverseCDF,
    Max,
    Min,
    Univariate,
    capabilities_of,
)
from .checked import CheckedDensity, CheckedMass, CheckedQuantile
from .conformance import check_conformance
from .sampling import ArraySample, Sample, sample_default, sample_n
from .strategies import InverseTransformSampling
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # capabilities
    "Distribution",
    "Min",
    "Max",
    "Univariate",
    "InverseCDF",
    "CheckedInverseCDF",
    "Continuous",
    "CheckedContinuous",
    "Discrete",
    "CheckedDiscrete",
    "CAPABILITY_PROTOCOLS",
    "capabilities_of",
    # checked plumbing
    "CheckedDensity",
    "CheckedMass",
    "CheckedQuantile",
    # sampling
    "Sample",
    "ArraySample",
    "sample_default",
    "sample_n",
    # strategies
    "InverseTransformSampling",
    # support
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
    # conformance
    "check_conformance",
]
