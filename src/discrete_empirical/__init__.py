"""
Discrete Empirical
==================

Discrete empirical probability distributions over integer support values:
point masses, cumulative and interval probabilities, moments and sampling,
together with the supporting types, weight vectors, error kinds and random
source configuration.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .configuration import *
from .configuration import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .sorting import *
from .sorting import __all__ as _sorting_all
from .types import *
from .types import __all__ as _types_all
from .vectors import *
from .vectors import __all__ as _vectors_all

__version__ = version("discrete-empirical")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_sorting_all,
    *_types_all,
    *_vectors_all,
]

del _config_all
del _distr_all
del _errors_all
del _sorting_all
del _types_all
del _vectors_all
