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
def ar1_series(rng):
    """AR(1) series with coefficient 0.6 (strong lag-1 autocorrelation)."""
    n = 60
    x = np.empty(n)
    x[0] = rng.standard_normal()
    for i in range(1, n):
        x[i] = 0.6 * x[i - 1] + rng.standard_normal()
    return x


@pytest.fixture
def unequal_variance_groups(rng):
    """Two equal-length groups with different means and spreads."""
    a = rng.normal(10.0, 1.0, size=25)
    b = rng.normal(11.0, 3.0, size=25)
    return a, b
