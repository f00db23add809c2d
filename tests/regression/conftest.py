"""
Regression test fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def line_data():
    """Four points on y = 1 + x."""
    return [0, 1, 3, 4], [1, 2, 4, 5]


@pytest.fixture
def noisy_data():
    """Four points whose least-squares parabola is x²/3 - 7x/30 + 3/10."""
    return [0, 1, 3, 4], [0, 1, 2, 5]


@pytest.fixture
def cubic_data():
    """Exact samples of y = 2x³ - x² + 3x + 1 at x = 0..9."""
    x = np.arange(10, dtype=np.float64)
    return x, 2 * x ** 3 - x ** 2 + 3 * x + 1
