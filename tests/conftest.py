from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from discrete_empirical.configuration import configure_random_source, reset_random_source


@pytest.fixture(autouse=True)
def _seeded_random_source() -> Generator[None, Any, None]:
    configure_random_source(12345)
    yield
    reset_random_source()
