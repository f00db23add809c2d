"""
Tests for the scalar and array helpers in core/numeric.py.

Validates:
    - round_to / round_to_fixed: half-up rounding and default decimals
    - to_degrees / to_radians
    - array_sum: NaN entries skipped
    - piecewise_linear_interpolation: interior, knots, extrapolation
    - factorial: values and rejected inputs
"""

import math

import numpy as np
import pytest

from pynumerics.core.exceptions import (
    DimensionError,
    LengthMismatchError,
    ValidationError,
)
from pynumerics.core.numeric import (
    array_sum,
    factorial,
    piecewise_linear_interpolation,
    round_to,
    round_to_fixed,
    to_degrees,
    to_radians,
)


# ═══════════════════════════════════════════════════════════════════════
# Rounding
# ═══════════════════════════════════════════════════════════════════════


class TestRounding:

    def test_default_two_decimals(self):
        assert round_to(8.1393) == 8.14

    def test_none_means_default(self):
        assert round_to(8.1393, None) == 8.14

    def test_custom_decimals(self):
        assert round_to(8.1393, 3) == 8.139
        assert round_to(8.1393, 0) == 8.0

    def test_negative_rounds_half_up(self):
        assert round_to(-2.5, 0) == -2.0

    def test_fixed_pads_zeros(self):
        assert round_to_fixed(2.0) == "2.00"
        assert round_to_fixed(8.1393, 1) == "8.1"

    def test_fixed_none_means_default(self):
        assert round_to_fixed(1.239, None) == "1.24"


# ═══════════════════════════════════════════════════════════════════════
# Angles
# ═══════════════════════════════════════════════════════════════════════


class TestAngles:

    def test_to_degrees(self):
        assert to_degrees(math.pi) == pytest.approx(180.0)
        assert to_degrees(math.pi / 2) == pytest.approx(90.0)

    def test_to_radians(self):
        assert to_radians(180) == pytest.approx(math.pi)

    def test_inverse_of_each_other(self):
        assert to_radians(to_degrees(0.75)) == pytest.approx(0.75)


# ═══════════════════════════════════════════════════════════════════════
# array_sum
# ═══════════════════════════════════════════════════════════════════════


class TestArraySum:

    def test_plain_sum(self):
        assert array_sum([1, 2, 3.5]) == 6.5

    def test_nan_skipped(self):
        assert array_sum([1.0, np.nan, 2.0]) == 3.0

    def test_empty_is_zero(self):
        assert array_sum([]) == 0.0

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            array_sum([[1, 2], [3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# piecewise_linear_interpolation
# ═══════════════════════════════════════════════════════════════════════


class TestPiecewiseLinearInterpolation:

    XS = [0.0, 1.0, 3.0]
    YS = [0.0, 2.0, 0.0]

    def test_interior_point(self):
        assert piecewise_linear_interpolation(self.XS, self.YS, 0.5) == pytest.approx(1.0)
        assert piecewise_linear_interpolation(self.XS, self.YS, 2.0) == pytest.approx(1.0)

    def test_knots_reproduced(self):
        for x, y in zip(self.XS, self.YS):
            assert piecewise_linear_interpolation(self.XS, self.YS, x) == pytest.approx(y)

    def test_extrapolates_first_segment(self):
        assert piecewise_linear_interpolation(self.XS, self.YS, -1.0) == pytest.approx(-2.0)

    def test_extrapolates_last_segment(self):
        assert piecewise_linear_interpolation(self.XS, self.YS, 5.0) == pytest.approx(-2.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            piecewise_linear_interpolation([0, 1, 2], [0, 1], 0.5)

    def test_single_point_rejected(self):
        with pytest.raises(ValidationError, match="at least 2"):
            piecewise_linear_interpolation([0], [0], 0.5)


# ═══════════════════════════════════════════════════════════════════════
# factorial
# ═══════════════════════════════════════════════════════════════════════


class TestFactorial:

    def test_values(self):
        assert factorial(0) == 1
        assert factorial(5) == 120
        assert factorial(20) == 2432902008176640000

    def test_integral_float_accepted(self):
        assert factorial(4.0) == 24

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="n >= 0"):
            factorial(-1)

    def test_fraction_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            factorial(2.5)
