"""
Error Kinds
===========

Exceptions raised by the distributions of this package.

All errors derive from :class:`ProbabilityError` so that callers can catch
every failure of the package at once, while the concrete classes also derive
from the matching builtin (``ValueError``, ``NotImplementedError``) so that
generic handlers keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ProbabilityError(RuntimeError):
    """Base class for all errors raised by the package."""


class InvalidArgumentError(ProbabilityError, ValueError):
    """Raised when construction arguments are malformed (sizes, emptiness, types)."""


class InvalidProbabilityError(ProbabilityError, ValueError):
    """Raised when a value that must be a probability lies outside ``(0, 1]``."""


class ProbabilityNotImplementedError(ProbabilityError, NotImplementedError):
    """Raised by characteristics a distribution permanently does not support."""


class InvalidStateError(ProbabilityError):
    """Raised when a distribution is queried before it was successfully constructed."""


__all__ = [
    "ProbabilityError",
    "InvalidArgumentError",
    "InvalidProbabilityError",
    "ProbabilityNotImplementedError",
    "InvalidStateError",
]
