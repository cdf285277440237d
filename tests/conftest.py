"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_values(rng):
    """1000 values in [0, 10000), the shape the benchmark driver uses."""
    return rng.integers(0, 10_000, size=1000, dtype=np.int64)
