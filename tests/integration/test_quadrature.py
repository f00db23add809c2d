"""
Tests for Gauss-Legendre quadrature.

Validates:
    - Legendre coefficients, nodes and weights
    - Exactness on polynomials
    - Accuracy on smooth transcendental integrands
    - Composite rule over breakpoints for discontinuous integrands
"""

import math

import numpy as np
import pytest

from pynumerics.core.compute.tolerances import QUADRATURE_FP64
from pynumerics.core.exceptions import ValidationError
from pynumerics.integration import (
    gauss_legendre,
    gauss_legendre_by_intervals,
    legendre_coefficients,
    legendre_roots_weights,
)
from pynumerics.integration.quadrature import legendre_polynomial


def step(x):
    if x <= 1:
        return 1
    elif x <= 2:
        return 2
    return 3


# ═══════════════════════════════════════════════════════════════════════
# Legendre polynomials
# ═══════════════════════════════════════════════════════════════════════


class TestLegendre:

    def test_coefficients(self):
        assert legendre_coefficients(0) == [1.0]
        assert legendre_coefficients(2) == [1.5, -0.5]
        assert legendre_coefficients(3) == [2.5, -1.5]

    def test_negative_degree(self):
        with pytest.raises(ValidationError):
            legendre_coefficients(-1)

    def test_polynomial_and_derivative(self):
        p, dp = legendre_polynomial(3)
        assert p(0.5) == pytest.approx(0.5 * (5 * 0.125 - 1.5))
        assert dp(0.5) == pytest.approx(0.5 * (15 * 0.25 - 3))
        np.testing.assert_allclose(p(np.array([1.0, -1.0])), [1.0, -1.0])

    def test_two_point_rule(self):
        roots, weights = legendre_roots_weights(2)
        np.testing.assert_allclose(roots, [1 / math.sqrt(3), -1 / math.sqrt(3)], atol=1e-15)
        np.testing.assert_allclose(weights, [1, 1], atol=1e-14)

    @pytest.mark.parametrize("n", [1, 5, 20, 25])
    def test_weights_sum_to_two(self, n):
        _, weights = legendre_roots_weights(n)
        assert weights.sum() == pytest.approx(2.0, abs=1e-8)

    def test_matches_numpy_leggauss(self):
        roots, weights = legendre_roots_weights(10)
        ref_roots, ref_weights = np.polynomial.legendre.leggauss(10)
        order = np.argsort(roots)
        np.testing.assert_allclose(roots[order], ref_roots, atol=1e-12)
        np.testing.assert_allclose(weights[order], ref_weights, atol=1e-12)

    def test_early_exit_with_tolerance(self):
        roots, _ = legendre_roots_weights(10, tol=1e-15)
        ref_roots, _ = np.polynomial.legendre.leggauss(10)
        np.testing.assert_allclose(np.sort(roots), ref_roots, atol=1e-12)

    def test_zero_order(self):
        with pytest.raises(ValidationError, match="order"):
            legendre_roots_weights(0)


# ═══════════════════════════════════════════════════════════════════════
# gauss_legendre
# ═══════════════════════════════════════════════════════════════════════


class TestGaussLegendre:

    @pytest.mark.parametrize("a,b,expected", [
        (0, 1, 1 / 3),
        (0, 2, 8 / 3),
        (-2, 2, 16 / 3),
    ])
    @pytest.mark.parametrize("order", [2, 3, 4, 5, 10])
    def test_square(self, a, b, expected, order):
        result = gauss_legendre(lambda x: x * x, a, b, order)
        assert result == pytest.approx(expected, abs=QUADRATURE_FP64.atol)

    def test_exact_for_degree_2n_minus_1(self):
        result = gauss_legendre(lambda x: x ** 5 - 2 * x ** 2, 0, 1, 3)
        assert result == pytest.approx(1 / 6 - 2 / 3, abs=1e-12)

    def test_sin_exp_sqrt(self):
        def fn(x):
            return math.sin(math.sqrt(x)) * math.exp(math.sqrt(x)) / math.sqrt(x)

        root = math.sqrt(math.pi)
        expected = math.exp(root) * math.sin(root) - math.exp(root) * math.cos(root) + 1
        assert gauss_legendre(fn, 0, math.pi, 20) == pytest.approx(expected, abs=1e-4)

    def test_exp_sqrt_minus_square(self):
        def fn(x):
            return math.exp(math.sqrt(x)) - x * x

        expected = ((6 * math.sqrt(10) - 6) * math.exp(math.sqrt(10)) - 994) / 3
        assert gauss_legendre(fn, 0, 10, 20) == pytest.approx(expected, abs=1e-3)

    def test_quarter_circle(self):
        result = gauss_legendre(lambda x: math.sqrt(100 - x * x), 0, 10, 25)
        assert result == pytest.approx(25 * math.pi, abs=1e-3)

    def test_discontinuous_low_accuracy(self):
        assert gauss_legendre(step, 0, 10, 20) == pytest.approx(27, abs=0.5)

    def test_reversed_interval_changes_sign(self):
        assert gauss_legendre(lambda x: x * x, 1, 0, 5) == pytest.approx(-1 / 3)

    def test_invalid_order(self):
        with pytest.raises(ValidationError):
            gauss_legendre(math.sin, 0, 1, 0)


# ═══════════════════════════════════════════════════════════════════════
# gauss_legendre_by_intervals
# ═══════════════════════════════════════════════════════════════════════


class TestGaussLegendreByIntervals:

    def test_discontinuous_split_at_jumps(self):
        result = gauss_legendre_by_intervals(step, [0, 1, 2, 10], 2)
        assert result == pytest.approx(27, abs=1e-11)

    def test_single_interval_matches_plain_rule(self):
        plain = gauss_legendre(math.cos, 0, 2, 8)
        assert gauss_legendre_by_intervals(math.cos, [0, 2], 8) == pytest.approx(plain)

    @pytest.mark.parametrize("breakpoints", [[], [1.0]])
    def test_too_few_breakpoints(self, breakpoints):
        assert gauss_legendre_by_intervals(step, breakpoints, 2) is None
