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
def small_sample():
    """Ten observations, mean 5.5; 4 and 7 each appear twice."""
    return np.array([2.0, 4.0, 4.0, 5.0, 7.0, 9.0, 3.0, 6.0, 8.0, 7.0])
