"""
Weight Vectors
==============

The probability-mass input consumed by discrete empirical distributions.

- :class:`VectorElement`: one ``(index, value)`` entry.
- :class:`WeightVector`: protocol: size, suffix sum and indexed iteration.
- :class:`DenseWeightVector`: NumPy-backed implementation.

Notes
-----
A distribution only relies on the protocol. Plain sequences and 1-D arrays
are wrapped in :class:`DenseWeightVector` via :func:`as_weight_vector`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from discrete_empirical.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    import numpy.typing as npt


@dataclass(frozen=True, slots=True)
class VectorElement:
    """
    Single entry of a weight vector.

    Parameters
    ----------
    index : int
        Position of the entry.
    value : float
        Weight stored at ``index``.
    """

    index: int
    value: float


@runtime_checkable
class WeightVector(Protocol):
    """Protocol for weight inputs of a discrete empirical distribution."""

    def size(self) -> int: ...

    def sum(self, offset: int = 0) -> float: ...

    def elements(self) -> Iterator[VectorElement]: ...


class DenseWeightVector(WeightVector):
    """
    Weight vector backed by a 1-D floating-point array.

    Parameters
    ----------
    values : Iterable[float] or numpy.ndarray
        Weights. Copied into a ``float64`` array.

    Raises
    ------
    InvalidArgumentError
        If the data is not one-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] | npt.NDArray[Any]) -> None:
        data = np.array(values, dtype=np.float64)
        if data.ndim != 1:
            raise InvalidArgumentError("DenseWeightVector expects a 1D array of weights.")
        self._data = data

    def size(self) -> int:
        return int(self._data.size)

    def __len__(self) -> int:
        return self.size()

    def sum(self, offset: int = 0) -> float:
        """Return the sum of the entries at positions ``>= offset``."""
        return float(self._data[offset:].sum())

    def elements(self) -> Iterator[VectorElement]:
        """Iterate over every position exactly once, in index order."""
        for i, value in enumerate(self._data):
            yield VectorElement(i, float(value))

    @property
    def array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the backing array."""
        return self._data.copy()


def as_weight_vector(weights: WeightVector | Iterable[float] | npt.NDArray[Any]) -> WeightVector:
    """Return ``weights`` unchanged if it already is a :class:`WeightVector`, else wrap it."""
    if isinstance(weights, WeightVector):
        return weights
    return DenseWeightVector(weights)


__all__ = [
    "VectorElement",
    "WeightVector",
    "DenseWeightVector",
    "as_weight_vector",
]
