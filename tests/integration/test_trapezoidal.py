"""
Tests for the trapezoidal integrators.

Validates:
    - trapezoidal_force: areas of rectangles, trapezoids, signed triangles
    - trapezoidal_moment: first moments about the origin and about xref
    - Length mismatch and degenerate inputs
"""

import numpy as np
import pytest

from pynumerics.core.exceptions import LengthMismatchError
from pynumerics.integration import trapezoidal_force, trapezoidal_moment


# ═══════════════════════════════════════════════════════════════════════
# trapezoidal_force
# ═══════════════════════════════════════════════════════════════════════


class TestTrapezoidalForce:
    """Integral of f(x) dx over piecewise-linear samples."""

    def test_rectangle(self):
        assert trapezoidal_force([0, 1], [1, 1]) == 1.0

    def test_rectangle_triangle(self):
        assert trapezoidal_force([0, 1], [1, 2]) == 1.5

    def test_several_segments(self):
        assert trapezoidal_force([0, 1, 2, 3, 4, 5], [1, 2, 2, 3, 2, 1]) == 10.0

    def test_opposite_triangles_cancel(self):
        assert trapezoidal_force([0, 1], [-1, 1]) == 0.0

    def test_signed_triangles(self):
        assert trapezoidal_force([0, 1, 2, 3], [-1, 0, 1, 0]) == 0.5

    def test_matches_numpy_trapezoid(self, rng):
        x = np.sort(rng.uniform(0, 10, 50))
        f = rng.standard_normal(50)
        expected = np.sum((f[:-1] + f[1:]) * np.diff(x)) / 2
        assert trapezoidal_force(x, f) == pytest.approx(expected)

    def test_single_sample_is_zero(self):
        assert trapezoidal_force([3], [7]) == 0.0

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError, match="Inconsistent lengths"):
            trapezoidal_force([0, 1], [1, 1, 1])


# ═══════════════════════════════════════════════════════════════════════
# trapezoidal_moment
# ═══════════════════════════════════════════════════════════════════════


class TestTrapezoidalMoment:
    """Integral of f(x) (x - xref) dx over piecewise-linear samples."""

    def test_rectangle(self):
        assert trapezoidal_moment([0, 1], [1, 1]) == pytest.approx(0.5)

    def test_rectangle_triangle(self):
        expected = 1 * 0.5 + 1 / 2 * (0 + 2 / 3)
        assert trapezoidal_moment([0, 1], [1, 2]) == pytest.approx(expected)

    def test_several_segments(self):
        expected = (
            8 * 2.5
            + 0.5 * 2 / 3
            + 0.5 * (2 + 2 / 3)
            + 0.5 * (3 + 1 / 3)
            + 0.5 * (4 + 1 / 3)
        )
        assert trapezoidal_moment([0, 1, 2, 3, 4, 5], [1, 2, 2, 3, 2, 1]) == pytest.approx(expected)

    def test_signed_triangles(self):
        expected = -1 / 2 * (1 / 3) + 1 / 2 * (1 + 2 / 3)
        assert trapezoidal_moment([0, 1, 2], [-1, 0, 1]) == pytest.approx(expected, abs=1e-15)

    def test_about_reference_point(self):
        expected = 2 * (1 / 2 * 2 / 3)
        assert trapezoidal_moment([0, 1, 2], [-1, 0, 1], xref=1) == pytest.approx(expected, abs=1e-15)

    def test_three_triangles(self):
        expected = -1 / 2 * (1 / 3) + 1 / 2 * (1 + 2 / 3) + 1 / 2 * (2 + 1 / 3)
        assert trapezoidal_moment([0, 1, 2, 3], [-1, 0, 1, 0]) == pytest.approx(expected, abs=1e-15)

    def test_input_not_modified(self):
        x = np.array([0.0, 1.0, 2.0])
        trapezoidal_moment(x, [1, 1, 1], xref=1)
        np.testing.assert_array_equal(x, [0.0, 1.0, 2.0])

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            trapezoidal_moment([0, 1], [1, 1, 1])
