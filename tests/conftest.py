"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def float_sample(rng):
    """Normal float sample as a plain list."""
    return rng.normal(loc=10.0, scale=3.0, size=101).tolist()


@pytest.fixture
def int_sample(rng):
    """Integer sample as a plain list (exact arithmetic path)."""
    return rng.integers(-50, 50, size=60).tolist()
