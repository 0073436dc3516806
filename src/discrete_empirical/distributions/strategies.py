"""
Computation and Sampling Strategies
===================================

Pluggable strategy interfaces and their default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves the analytical computations a
  distribution provides.
- :class:`SamplingStrategy`: draws batches from a distribution.
- :class:`CumulativeSamplingStrategy`: draws ``(n, 1)`` integer samples by
  locating uniform variates in the cumulative masses of a discrete
  distribution's ordered support.

Notes
-----
Strategies are lightweight and stateless.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from discrete_empirical.distributions.computation import AnalyticalComputation
from discrete_empirical.errors import InvalidArgumentError
from discrete_empirical.types import GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .base import DiscreteDistribution
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution registers for the
    requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution provides no computation for the characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name.
        distr : Distribution
            The distribution providing its analytical computations.
        **options
            Unused; accepted for interface compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        available = ", ".join(sorted(computations)) or "none"
        raise RuntimeError(
            f"Distribution provides no computation for '{state}' (available: {available})."
        )


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "DiscreteDistribution", **options: Any) -> Sample: ...


class CumulativeSamplingStrategy(SamplingStrategy):
    """
    Batch sampler for finite discrete distributions.

    Each draw takes a uniform ``r`` from the distribution's random source and
    returns the first support value (in ascending order) whose cumulative mass
    reaches ``r``. When rounding leaves the total mass below ``r`` the last
    support value is returned.

    Returns
    -------
    ArraySample
        A 2D ``int64`` sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "DiscreteDistribution", **options: Any) -> ArraySample:
        if n < 0:
            raise InvalidArgumentError(f"Sample size must be non-negative, got {n}.")

        values, masses = distr.ordered_masses()
        cumulative = np.cumsum(masses)
        uniforms = np.fromiter((distr.next_double() for _ in range(n)), dtype=np.float64, count=n)

        idx = np.searchsorted(cumulative, uniforms, side="left")
        np.minimum(idx, values.size - 1, out=idx)
        return ArraySample(values[idx].reshape(n, 1))
