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
def skewed_sample(rng):
    """Right-skewed sample for cross-checks against scipy."""
    return rng.gamma(shape=2.0, scale=1.5, size=200)


@pytest.fixture
def textbook_sample():
    """Mean 5, population variance 4, sd 2."""
    return np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])


@pytest.fixture
def percentile_sample():
    """Ten sorted scores used by the percentile examples."""
    return [50.0, 55.0, 60.0, 62.0, 65.0, 70.0, 72.0, 75.0, 80.0, 85.0]
