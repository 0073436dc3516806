from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Iterator

from discrete_empirical.vectors import VectorElement, WeightVector


class ScriptedRandomSource:
    """Random source replaying a fixed list of uniforms, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self._pos = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        self.calls += 1
        return value


class SparseOrderWeightVector(WeightVector):
    """
    Weight vector that yields its entries in reverse index order.

    Checks that distributions rely on ``VectorElement.index`` rather than on
    iteration order.
    """

    def __init__(self, weights: Iterable[float]) -> None:
        self._weights = list(weights)
        self.sum_offsets: list[int] = []

    def size(self) -> int:
        return len(self._weights)

    def sum(self, offset: int = 0) -> float:
        self.sum_offsets.append(offset)
        return float(sum(self._weights[offset:]))

    def elements(self) -> Iterator[VectorElement]:
        for i in reversed(range(len(self._weights))):
            yield VectorElement(i, self._weights[i])
