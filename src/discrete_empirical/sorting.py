"""
Comparator-driven Sorting
=========================

A general-purpose in-place sort parameterized by a three-way comparator.

- :class:`CompareResult`: the three comparator outcomes.
- :class:`Comparator`: protocol for ``(a, b) -> int`` callables.
- :func:`sort_with_comparator`: reorders a mutable sequence in place.

Notes
-----
The algorithm is Python's built-in Timsort driven through
:func:`functools.cmp_to_key`, which is O(n log n). Stability is a property of
the implementation, not of the contract: callers must not rely on the order of
elements the comparator reports as equal.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import IntEnum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import MutableSequence


class CompareResult(IntEnum):
    """Outcome of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Comparator[T](Protocol):
    """Three-way comparator: negative, zero or positive for ``a <, ==, > b``."""

    def __call__(self, a: T, b: T, /) -> int: ...


def sort_with_comparator[T](seq: MutableSequence[T], comparator: Comparator[T]) -> None:
    """
    Sort ``seq`` in place so that consecutive elements satisfy ``comparator``.

    Parameters
    ----------
    seq : MutableSequence
        Sequence to reorder. Lists are sorted natively; any other mutable
        sequence is rewritten slot by slot.
    comparator : Comparator
        Three-way comparison function. Only the sign of its result matters.
    """
    key = cmp_to_key(comparator)
    if isinstance(seq, list):
        seq.sort(key=key)
        return

    ordered = sorted(seq, key=key)
    for i, item in enumerate(ordered):
        seq[i] = item


__all__ = [
    "CompareResult",
    "Comparator",
    "sort_with_comparator",
]
