"""
Discrete Distribution Base
==========================

Shared machinery for univariate distributions over the integers:

- an injected pseudo-random source (see :mod:`discrete_empirical.configuration`);
- validity tracking and informational bounds bookkeeping;
- probability checking;
- the ``cdf`` / ``inverse_cdf`` wrappers around subclass hooks;
- the :class:`~discrete_empirical.distributions.distribution.Distribution`
  protocol surface (analytical computations, strategies, support).

Subclasses implement ``pdf``, ``_cdf``, ``_inverse_cdf``, ``probability``,
``mean``, ``variance``, ``random_integer`` and ``ordered_masses``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from discrete_empirical.configuration import RandomSource, default_random_source
from discrete_empirical.distributions.computation import AnalyticalComputation
from discrete_empirical.distributions.distribution import Distribution
from discrete_empirical.distributions.strategies import (
    CumulativeSamplingStrategy,
    DefaultComputationStrategy,
)
from discrete_empirical.errors import InvalidProbabilityError, InvalidStateError
from discrete_empirical.types import (
    CharacteristicName,
    EuclideanDistributionType,
    GenericCharacteristicName,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    import numpy as np
    import numpy.typing as npt

    from discrete_empirical.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )


type _Computations = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]

_PROBABILITY_RANGE = Interval1D(0.0, 1.0, left_closed=False)


class DiscreteDistribution(Distribution):
    """
    Base class for univariate discrete distributions.

    Parameters
    ----------
    random_source : RandomSource, optional
        Source of uniform ``[0, 1)`` variates. Defaults to the process-wide
        generator returned by
        :func:`~discrete_empirical.configuration.default_random_source`.

    Notes
    -----
    Instances are not thread-safe. Subclasses that cache derived values must
    be confined to one thread or synchronized externally.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._random_source: RandomSource = (
            random_source if random_source is not None else default_random_source()
        )
        self._valid = False
        self._variable_bounds: Interval1D | None = None
        self._cdf_bounds: Interval1D | None = None
        self._computations: _Computations | None = None

    # ------------------------------------------------------------------ #
    # Random source
    # ------------------------------------------------------------------ #

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @random_source.setter
    def random_source(self, source: RandomSource) -> None:
        self._random_source = source

    def next_double(self) -> float:
        """Draw one uniform variate in ``[0, 1)`` from the random source."""
        return float(self._random_source.random())

    # ------------------------------------------------------------------ #
    # Validity and bounds bookkeeping
    # ------------------------------------------------------------------ #

    @property
    def valid(self) -> bool:
        """Whether the distribution has been successfully parameterized."""
        return self._valid

    def _set_valid(self, valid: bool) -> None:
        self._valid = valid

    def _check_valid(self) -> None:
        if not self._valid:
            raise InvalidStateError(
                f"{type(self).__name__} has no parameters; call set_parameters() first."
            )

    def set_variable_bounds(self, lower: int, upper: int) -> None:
        """Record the half-open domain ``[lower, upper)`` of support indices."""
        self._variable_bounds = Interval1D(lower, upper, left_closed=True, right_closed=False)

    def set_cdf_bounds(self, lower: float, upper: float) -> None:
        """Record the closed range ``[lower, upper]`` of cumulative probabilities."""
        self._cdf_bounds = Interval1D(lower, upper)

    @property
    def variable_bounds(self) -> Interval1D | None:
        return self._variable_bounds

    @property
    def cdf_bounds(self) -> Interval1D | None:
        return self._cdf_bounds

    @staticmethod
    def check_probability(probability: float) -> None:
        """
        Ensure ``probability`` lies in ``(0, 1]``.

        Raises
        ------
        InvalidProbabilityError
            If the value is outside the range or NaN.
        """
        if probability not in _PROBABILITY_RANGE:
            raise InvalidProbabilityError(
                f"Probability must lie in (0, 1], got {probability!r}."
            )

    # ------------------------------------------------------------------ #
    # Distribution protocol
    # ------------------------------------------------------------------ #

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return CumulativeSamplingStrategy()

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return DefaultComputationStrategy()

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Characteristics this distribution computes directly.

        Built once per instance; the callables are bound to the instance and
        therefore follow later reparameterizations.
        """
        if self._computations is None:
            self._computations = {
                CharacteristicName.PMF: AnalyticalComputation[int, float](
                    CharacteristicName.PMF, lambda x, **_: self.pmf(x)
                ),
                CharacteristicName.CDF: AnalyticalComputation[int, float](
                    CharacteristicName.CDF, lambda x, **_: self.cdf(x)
                ),
                CharacteristicName.MEAN: AnalyticalComputation[Any, float](
                    CharacteristicName.MEAN, lambda _x, **_: self.mean()
                ),
                CharacteristicName.VAR: AnalyticalComputation[Any, float](
                    CharacteristicName.VAR, lambda _x, **_: self.variance()
                ),
                CharacteristicName.STD: AnalyticalComputation[Any, float](
                    CharacteristicName.STD, lambda _x, **_: self.std()
                ),
            }
        return self._computations

    # ------------------------------------------------------------------ #
    # Characteristics
    # ------------------------------------------------------------------ #

    @abstractmethod
    def pdf(self, x: int) -> float:
        """Probability mass at ``x``."""

    def pmf(self, x: int) -> float:
        """Alias of :meth:`pdf`."""
        return self.pdf(x)

    def cdf(self, x: int) -> float:
        """Cumulative probability ``P(X <= x)``."""
        self._check_valid()
        return self._cdf(x)

    @abstractmethod
    def _cdf(self, x: int) -> float: ...

    def inverse_cdf(self, probability: float) -> int:
        """Smallest support value whose cumulative probability reaches ``probability``."""
        return self._inverse_cdf(probability)

    @abstractmethod
    def _inverse_cdf(self, probability: float) -> int: ...

    @abstractmethod
    def probability(self, x1: int, x2: int | None = None) -> float: ...

    @abstractmethod
    def mean(self) -> float: ...

    @abstractmethod
    def variance(self) -> float: ...

    def std(self) -> float:
        """Standard deviation, ``sqrt(variance())``."""
        return math.sqrt(self.variance())

    @abstractmethod
    def random_integer(self) -> int:
        """Draw a single support value."""

    def sample(self) -> int:
        """Draw a single support value; see :meth:`random_integer`."""
        return self.random_integer()

    @abstractmethod
    def ordered_masses(self) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.float64]]:
        """Support values in ascending order with their probabilities, as arrays."""
