"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pynumerics.linalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_matrix():
    """3x3 invertible matrix with integer inverse-friendly entries (det = -2)."""
    return Matrix([[1, 2, 3], [2, 1, 5], [-1, 2, -1]])


@pytest.fixture
def quadratic_data():
    """Exact samples of y = 10x² - 100x + 13 at x = 0..99."""
    x = np.arange(100, dtype=np.float64)
    y = 10 * x ** 2 - 100 * x + 13
    return x, y
