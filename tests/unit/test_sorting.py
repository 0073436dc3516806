from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import random
from collections import UserList

import pytest

from discrete_empirical.sorting import CompareResult, sort_with_comparator


def ascending(a: int, b: int) -> int:
    return (a > b) - (a < b)


def descending(a: int, b: int) -> int:
    return ascending(b, a)


class TestSortWithComparator:
    @pytest.mark.parametrize(
        "data",
        [[], [1], [2, 1], [3, 1, 2, 1], list(range(10, 0, -1)), [5, -3, 0, 5, -3]],
        ids=["empty", "single", "pair", "with_duplicates", "reversed", "negatives"],
    )
    def test_sorts_list_in_place(self, data: list[int]) -> None:
        seq = list(data)
        result = sort_with_comparator(seq, ascending)

        assert result is None
        assert seq == sorted(data)

    def test_random_permutations(self) -> None:
        rng = random.Random(0)
        for _ in range(20):
            data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 200))]
            seq = list(data)
            sort_with_comparator(seq, ascending)
            assert seq == sorted(data)

    def test_comparator_controls_order(self) -> None:
        seq = [1, 3, 2]
        sort_with_comparator(seq, descending)
        assert seq == [3, 2, 1]

    def test_only_sign_matters(self) -> None:
        seq = [10, 30, 20]
        sort_with_comparator(seq, lambda a, b: (a - b) * 1000)
        assert seq == [10, 20, 30]

    def test_non_list_mutable_sequence(self) -> None:
        seq = UserList([4, 2, 3])
        sort_with_comparator(seq, ascending)
        assert list(seq) == [2, 3, 4]

    def test_compare_result_values(self) -> None:
        assert (CompareResult.LESS, CompareResult.EQUAL, CompareResult.GREATER) == (-1, 0, 1)
