"""
Tests for the goodness-of-fit metrics.

Validates:
    - Each metric on a small hand-computed example
    - R² for a constant response
    - Adjusted R² fallback when degrees of freedom run out
    - MAPE for zero observations
"""

import math

import numpy as np
import pytest

from pynumerics.regression._metrics import (
    METRIC_NAMES,
    compute_metrics,
    mean_absolute_percentage_error,
    r2_score,
    r2_score_adjusted,
)


class TestComputeMetrics:
    """y = [1, 2, 3] against fitted = [1, 2, 4]: RSS = 1, TSS = 2."""

    @pytest.fixture
    def metrics(self):
        return compute_metrics(np.array([1.0, 2.0, 3.0]), np.array([1.0, 2.0, 4.0]), 1)

    def test_keys(self, metrics):
        assert tuple(metrics) == METRIC_NAMES

    def test_errors(self, metrics):
        assert metrics['mean_absolute_error'] == pytest.approx(1 / 3)
        assert metrics['mean_squared_error'] == pytest.approx(1 / 3)
        assert metrics['root_mean_squared_error'] == pytest.approx(math.sqrt(1 / 3))

    def test_mape_in_percent(self, metrics):
        assert metrics['mean_absolute_percentage_error'] == pytest.approx(100 / 9)

    def test_r2(self, metrics):
        assert metrics['r2_score'] == pytest.approx(0.5)

    def test_r2_adjusted(self, metrics):
        # n = 3, p = 1: 1 - 0.5 * 2 / 1
        assert metrics['r2_score_adjusted'] == pytest.approx(0.0)


class TestR2Score:

    def test_constant_reproduced(self):
        assert r2_score(0.0, 0.0) == 1.0

    def test_constant_missed(self):
        assert r2_score(1.0, 0.0) == 0.0

    def test_adjusted_falls_back_without_dof(self):
        assert r2_score_adjusted(0.5, n=3, n_coefficients=2) == 0.5
        assert r2_score_adjusted(0.5, n=2, n_coefficients=3) == 0.5


class TestMAPE:

    def test_zero_observation_is_infinite(self):
        y = np.array([0.0, 1.0])
        assert mean_absolute_percentage_error(y, np.array([0.1, 1.0])) == math.inf

    def test_perfect(self):
        y = np.array([2.0, 4.0])
        assert mean_absolute_percentage_error(y, y) == 0.0
