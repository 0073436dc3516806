"""
Distributions subpackage

Interfaces and implementations for discrete distributions:

- distribution protocol (:mod:`.distribution`);
- discrete base class with random source and bounds bookkeeping (:mod:`.base`);
- the discrete empirical distribution (:mod:`.empirical`);
- computation primitives (:mod:`.computation`);
- sampling containers (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- discrete supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .base import DiscreteDistribution
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .empirical import EmpiricalDiscreteDistribution, IndexPair, SupportElement
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    CumulativeSamplingStrategy,
    DefaultComputationStrategy,
    SamplingStrategy,
)
from .support import DiscreteSupport, ExplicitTableDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distributions
    "Distribution",
    "DiscreteDistribution",
    "EmpiricalDiscreteDistribution",
    "IndexPair",
    "SupportElement",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "CumulativeSamplingStrategy",
    # supports
    "Support",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
]
