"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the discrete empirical
distribution and its collaborators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Enumeration of distribution kinds."""

    DISCRETE = "discrete"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Spatial dimension (1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Finite 1D interval with configurable closure.

    Describes the support-index domain ``[0, n)`` and the cdf range
    ``[0, 1]`` a discrete distribution records at construction, and the
    ``(0, 1]`` range raw weights are checked against.

    Parameters
    ----------
    left : float
        Left endpoint.
    right : float
        Right endpoint.
    left_closed : bool, default=True
        Whether ``left`` belongs to the interval.
    right_closed : bool, default=True
        Whether ``right`` belongs to the interval.
    """

    left: float
    right: float
    left_closed: bool = True
    right_closed: bool = True

    def contains(self, x: Number) -> bool:
        """Whether ``x`` lies in the interval; NaN never does."""
        left_ok = x > self.left or (self.left_closed and x == self.left)
        right_ok = x < self.right or (self.right_closed and x == self.right)
        return bool(left_ok and right_ok)

    def __contains__(self, x: object) -> bool:
        return self.contains(x)  # type: ignore[arg-type]


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pmf', 'cdf')."""


class CharacteristicName(StrEnum):
    """
    Standard names of the characteristics a discrete distribution exposes.

    Note
    ----
    ``PPF`` is listed for completeness; the empirical distribution does not
    provide a quantile function.
    """

    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    STD = "std"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
]
