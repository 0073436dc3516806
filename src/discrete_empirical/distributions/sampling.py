"""
Sampling Containers
===================

Protocols and implementations for the containers returned by batch sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from discrete_empirical.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[Any]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    Stores draws as a 2D array of shape ``(n_samples, n_dimensions)``. Discrete
    distributions fill it with integer support values.

    Parameters
    ----------
    data : numpy.ndarray
        2D numeric array of shape (n, d).

    Raises
    ------
    InvalidArgumentError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 2:
            raise InvalidArgumentError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[Any]]:
        """Iterate over draws (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[Any]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def frequencies(self) -> dict[int, float]:
        """
        Empirical relative frequency of every distinct value.

        Returns
        -------
        dict[int, float]
            Mapping ``value -> count / n`` in ascending value order; empty for
            an empty sample.

        Raises
        ------
        InvalidArgumentError
            If the sample is not univariate.
        """
        if self.dimension != 1:
            raise InvalidArgumentError("Frequencies are defined for univariate samples only.")
        n = len(self)
        if n == 0:
            return {}
        values, counts = np.unique(self.data[:, 0], return_counts=True)
        return {int(v): int(c) / n for v, c in zip(values, counts, strict=True)}
