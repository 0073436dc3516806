"""
Random Source Configuration
===========================

Process-wide default pseudo-random source shared by distributions that are
not given one explicitly.

Notes
-----
- The default is a :class:`numpy.random.Generator` created lazily and cached.
- Call :func:`configure_random_source` with a seed early (e.g. at application
  startup) to make default sampling reproducible.
- Distributions hold on to the source they were built with; reconfiguring
  affects only distributions created afterwards.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)

_seed: int | None = None


@runtime_checkable
class RandomSource(Protocol):
    """Anything that draws uniform floats in ``[0, 1)`` via ``random()``."""

    def random(self) -> float: ...


@lru_cache(maxsize=1)
def default_random_source() -> np.random.Generator:
    """
    Return the default random source, creating it on first use.

    Returns
    -------
    numpy.random.Generator
        Generator seeded with the value passed to the last
        :func:`configure_random_source` call (unseeded otherwise).
    """
    logger.debug("Creating default random source (seed=%s)", _seed)
    return np.random.default_rng(_seed)


def configure_random_source(seed: int | None = None) -> np.random.Generator:
    """
    Replace the default random source with a freshly seeded one.

    Parameters
    ----------
    seed : int, optional
        Seed for :func:`numpy.random.default_rng`; ``None`` draws fresh
        entropy from the OS.

    Returns
    -------
    numpy.random.Generator
        The new default generator.
    """
    global _seed
    _seed = seed
    default_random_source.cache_clear()
    return default_random_source()


def reset_random_source() -> None:
    """
    Drop the cached default random source and forget the configured seed.
    """
    global _seed
    _seed = None
    default_random_source.cache_clear()


__all__ = [
    "RandomSource",
    "configure_random_source",
    "default_random_source",
    "reset_random_source",
]
