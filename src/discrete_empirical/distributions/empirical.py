"""
Discrete Empirical Distribution
===============================

A finite distribution over integer support values whose probabilities come
from observed (or otherwise supplied) weights.

- :class:`SupportElement`: a ``(value, probability)`` pair keyed by value.
- :class:`IndexPair`: ascending ordered sequence plus a value lookup, built
  from the same elements.
- :class:`EmpiricalDiscreteDistribution`: the distribution itself.

Notes
-----
- Elements are identified by their support value alone. When the same value
  is supplied more than once, the ordered sequence keeps every entry (all of
  them contribute to ``cdf``, interval probabilities, moments and sampling)
  while the lookup keeps only the last one inserted, so ``pdf`` reports that
  entry's probability.
- Every raw weight must itself lie in ``(0, 1]``; the weights are then
  rescaled by their sum.
- ``mean`` and ``variance`` are computed on first access and cached until the
  distribution is reparameterized.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import operator
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import numpy as np

from discrete_empirical.distributions.base import DiscreteDistribution
from discrete_empirical.distributions.support import ExplicitTableDiscreteSupport
from discrete_empirical.errors import (
    InvalidArgumentError,
    ProbabilityNotImplementedError,
)
from discrete_empirical.sorting import CompareResult, sort_with_comparator
from discrete_empirical.vectors import WeightVector, as_weight_vector

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    import numpy.typing as npt

    from discrete_empirical.configuration import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class SupportElement:
    """
    One support value with its normalized probability.

    Equality and hashing use ``value`` only: two elements with the same value
    are the same key even if their probabilities differ.

    Parameters
    ----------
    value : int
        Support value.
    probability : float
        Normalized probability mass.
    """

    value: int
    probability: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SupportElement):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    @staticmethod
    def compare(a: SupportElement, b: SupportElement) -> int:
        """Three-way comparison by ascending support value."""
        if a.value < b.value:
            return CompareResult.LESS
        if b.value < a.value:
            return CompareResult.GREATER
        return CompareResult.EQUAL


class IndexPair:
    """
    Ordered sequence and value lookup over one set of support elements.

    The ordered sequence keeps every added element; the lookup maps each
    support value to the element most recently added with that value.
    """

    __slots__ = ("_ordered", "_lookup")

    def __init__(self) -> None:
        self._ordered: list[SupportElement] = []
        self._lookup: dict[int, SupportElement] = {}

    @classmethod
    def build(cls, elements: Iterable[SupportElement]) -> IndexPair:
        """Index ``elements`` in input order, then sort the ordered sequence."""
        pair = cls()
        for element in elements:
            pair.add(element)
        pair.sort()
        return pair

    def add(self, element: SupportElement) -> None:
        self._ordered.append(element)
        self._lookup[element.value] = element

    def sort(self) -> None:
        """Sort the ordered sequence ascending by support value."""
        sort_with_comparator(self._ordered, SupportElement.compare)

    def get(self, value: int) -> SupportElement | None:
        return self._lookup.get(value)

    @property
    def ordered(self) -> tuple[SupportElement, ...]:
        return tuple(self._ordered)

    @property
    def lookup(self) -> Mapping[int, SupportElement]:
        return MappingProxyType(self._lookup)

    @property
    def distinct_count(self) -> int:
        return len(self._lookup)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[SupportElement]:
        return iter(self._ordered)


_INT64 = np.iinfo(np.int64)


def _as_support_value(value: Any) -> int:
    if isinstance(value, bool | np.bool_):
        raise InvalidArgumentError(f"Support values must be integers, got {value!r}.")
    try:
        result = operator.index(value)
    except TypeError as err:
        raise InvalidArgumentError(f"Support values must be integers, got {value!r}.") from err
    if not _INT64.min <= result <= _INT64.max:
        raise InvalidArgumentError(
            f"Support values must fit in a signed 64-bit integer, got {value!r}."
        )
    return result


class EmpiricalDiscreteDistribution(DiscreteDistribution):
    """
    Discrete empirical distribution over integer support values.

    Parameters
    ----------
    values : Sequence[int], optional
        Support values, aligned index by index with ``weights``.
    weights : WeightVector or Sequence[float] or numpy.ndarray, optional
        Raw weights, each in ``(0, 1]``. Rescaled to sum to one.
    random_source : RandomSource, optional
        Source of uniform variates for sampling.

    Raises
    ------
    InvalidArgumentError
        If only one of ``values`` and ``weights`` is given, or see
        :meth:`set_parameters`.

    Notes
    -----
    An instance created without parameters is not valid until
    :meth:`set_parameters` succeeds; queries on it raise
    :class:`~discrete_empirical.errors.InvalidStateError`.

    Not thread-safe: construction replaces the internal state, and the first
    calls to :meth:`mean` / :meth:`variance` write their caches.

    Examples
    --------
    >>> d = EmpiricalDiscreteDistribution([10, 20, 30], [0.2, 0.3, 0.5])
    >>> d.pdf(20)
    0.3
    >>> d.cdf(20)
    0.5
    >>> str(d)
    'EmpiricalDistribution(10=0.2, 20=0.3, 30=0.5)'
    """

    def __init__(
        self,
        values: Sequence[int] | None = None,
        weights: WeightVector | Sequence[float] | npt.NDArray[Any] | None = None,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        super().__init__(random_source)
        self._indices = IndexPair()
        self._mean: float | None = None
        self._variance: float | None = None
        self._cdf_start = 0.0

        if values is None and weights is None:
            return
        if values is None or weights is None:
            raise InvalidArgumentError("Support values and weights must be given together.")
        self._set_parameters(values, weights, stacklevel=3)

    def set_parameters(
        self,
        values: Sequence[int],
        weights: WeightVector | Sequence[float] | npt.NDArray[Any],
    ) -> None:
        """
        (Re)build the distribution from support values and raw weights.

        Parameters
        ----------
        values : Sequence[int]
            Support values; duplicates are kept (see module notes).
        weights : WeightVector or Sequence[float] or numpy.ndarray
            Raw weights aligned with ``values``.

        Raises
        ------
        InvalidArgumentError
            If the sizes differ, the input is empty, or a support value is not
            an integer in the signed 64-bit range.
        InvalidProbabilityError
            If any raw weight lies outside ``(0, 1]``.

        Notes
        -----
        All validation happens before any state changes: on failure the
        previous parameters stay in place. The ``cdf`` start offset is kept.
        """
        self._set_parameters(values, weights, stacklevel=3)

    def _set_parameters(
        self,
        values: Sequence[int],
        weights: WeightVector | Sequence[float] | npt.NDArray[Any],
        stacklevel: int,
    ) -> None:
        vector = as_weight_vector(weights)
        if len(values) != vector.size():
            raise InvalidArgumentError("The arguments must be the same size.")
        if len(values) == 0:
            raise InvalidArgumentError("The arguments are empty.")

        entries = list(vector.elements())
        for entry in entries:
            self.check_probability(entry.value)
        support = [_as_support_value(v) for v in values]

        total = vector.sum(0)
        indices = IndexPair.build(
            SupportElement(support[entry.index], entry.value / total) for entry in entries
        )

        self._set_valid(False)
        self._indices = indices
        self._mean = None
        self._variance = None
        self.set_variable_bounds(0, len(support))
        self.set_cdf_bounds(0.0, 1.0)
        self._set_valid(True)

        if indices.distinct_count < len(indices):
            warnings.warn(
                f"{len(indices) - indices.distinct_count} duplicate support value(s); "
                "pdf reports the last supplied mass while cdf and sampling use all of them.",
                UserWarning,
                stacklevel=stacklevel,
            )
        logger.debug(
            "Built empirical distribution: %d elements, %d distinct values",
            len(indices),
            indices.distinct_count,
        )

    # ------------------------------------------------------------------ #
    # State accessors
    # ------------------------------------------------------------------ #

    @property
    def elements(self) -> tuple[SupportElement, ...]:
        """Support elements in ascending value order."""
        return self._indices.ordered

    @property
    def index(self) -> Mapping[int, SupportElement]:
        """Read-only view of the value lookup."""
        return self._indices.lookup

    @property
    def support(self) -> ExplicitTableDiscreteSupport | None:
        if not self.valid:
            return None
        return ExplicitTableDiscreteSupport(
            (el.value for el in self._indices), assume_sorted=True
        )

    @property
    def cdf_start(self) -> float:
        return self._cdf_start

    def set_cdf_start(self, start: float) -> None:
        """Set the offset added to every :meth:`cdf` result."""
        self._cdf_start = float(start)

    def __len__(self) -> int:
        return len(self._indices)

    # ------------------------------------------------------------------ #
    # Characteristics
    # ------------------------------------------------------------------ #

    def pdf(self, x: int) -> float:
        self._check_valid()
        found = self._indices.get(x)
        if found is None:
            return 0.0
        return found.probability

    def _cdf(self, x: int) -> float:
        total = self._cdf_start
        for el in self._indices:
            if el.value > x:
                break
            total += el.probability
        return total

    def _inverse_cdf(self, probability: float) -> int:
        raise ProbabilityNotImplementedError("Not implemented!")

    def probability(self, x1: int, x2: int | None = None) -> float:
        """
        Probability that the variable lies in ``[x1, x2]``.

        Returns ``0.0`` when no support value is in range, including whenever
        ``x1 > x2``. The single-argument form is not supported.

        Raises
        ------
        ProbabilityNotImplementedError
            If ``x2`` is omitted.
        """
        if x2 is None:
            raise ProbabilityNotImplementedError("Not implemented!")
        self._check_valid()

        total = 0.0
        for el in self._indices:
            if el.value < x1:
                continue
            if el.value > x2:
                break
            total += el.probability
        return total

    def mean(self) -> float:
        self._check_valid()
        if self._mean is None:
            mean = 0.0
            for el in self._indices:
                mean += el.probability * el.value
            self._mean = mean
        return self._mean

    def variance(self) -> float:
        self._check_valid()
        if self._variance is None:
            mean = self.mean()
            variance = 0.0
            for el in self._indices:
                delta = el.value - mean
                variance += el.probability * delta * delta
            self._variance = variance
        return self._variance

    # ------------------------------------------------------------------ #
    # Sampling
    # ------------------------------------------------------------------ #

    def random_integer(self) -> int:
        """
        Draw one support value.

        Walks the ascending sequence accumulating probability and returns the
        first value whose running sum reaches a uniform variate; if rounding
        keeps the total below the variate, the last value is returned.
        """
        self._check_valid()
        r = self.next_double()
        total = 0.0
        for el in self._indices:
            total += el.probability
            if r <= total:
                return el.value
        return self._indices.ordered[-1].value

    def ordered_masses(self) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.float64]]:
        self._check_valid()
        ordered = self._indices.ordered
        values = np.fromiter((el.value for el in ordered), dtype=np.int64, count=len(ordered))
        masses = np.fromiter(
            (el.probability for el in ordered), dtype=np.float64, count=len(ordered)
        )
        return values, masses

    # ------------------------------------------------------------------ #
    # Equality and rendering
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmpiricalDiscreteDistribution):
            return NotImplemented
        if len(other._indices) != len(self._indices):
            return False
        for e1, e2 in zip(self._indices, other._indices, strict=True):
            if e1.value != e2.value or e1.probability != e2.probability:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def to_string(self) -> str:
        body = ", ".join(f"{el.value}={el.probability!r}" for el in self._indices)
        return f"EmpiricalDistribution({body})"

    __str__ = to_string
    __repr__ = to_string
