"""
Discrete Supports
=================

Support descriptors for distributions over a finite set of integers.

- :class:`Support`: membership protocol.
- :class:`DiscreteSupport`: protocol adding ordered enumeration.
- :class:`ExplicitTableDiscreteSupport`: sorted table of distinct integers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from discrete_empirical.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Finite support given as an explicit table of integers.

    Parameters
    ----------
    points : Iterable[int]
        Support points; duplicates are collapsed.
    assume_sorted : bool, default False
        Skip sorting when ``points`` is already ascending.

    Raises
    ------
    ValueError
        If ``points`` is empty.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[int], assume_sorted: bool = False) -> None:
        arr = np.fromiter(points, dtype=np.int64)

        if arr.size == 0:
            raise ValueError("Points must be non-empty")

        if not assume_sorted:
            arr.sort()

        keep = np.empty(arr.size, dtype=bool)
        keep[0] = True
        keep[1:] = arr[1:] != arr[:-1]
        self._points = arr[keep]

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        idx = np.minimum(np.searchsorted(self._points, arr, side="left"), self._points.size - 1)
        result = self._points[idx] == arr

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return int(self._points.size)

    def iter_points(self) -> Iterator[int]:
        return (int(p) for p in self._points)

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


__all__ = [
    "Support",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
]
