"""
Computation Primitives
======================

Building blocks used to expose distribution characteristics through a uniform
callable interface:

- :class:`Computation`: protocol for a callable bound to one characteristic.
- :class:`AnalyticalComputation`: a callable provided by a distribution
  directly (e.g. its ``pmf`` or ``cdf`` method).

Notes
-----
- Callables are **scalar** in the univariate case. Moments (``mean``,
  ``var``, ``std``) ignore their argument; pass ``None``.
- ``**options`` are free-form and forwarded to the wrapped callable.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from discrete_empirical.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pmf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "Computation",
    "AnalyticalComputation",
]
