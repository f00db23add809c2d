"""
Tests for RegressionDesign.

Validates:
    - from_arrays validation and immutability
    - design_matrix layout by decreasing power
"""

import numpy as np
import pytest

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.regression import RegressionDesign


class TestFromArrays:

    def test_basic(self):
        design = RegressionDesign.from_arrays([1, 2, 3], [2, 4, 6])
        assert design.n == 3
        assert design.n_dropped == 0
        np.testing.assert_array_equal(design.x, [1, 2, 3])

    def test_arrays_read_only(self):
        design = RegressionDesign.from_arrays([1, 2], [3, 4])
        with pytest.raises(ValueError):
            design.y[0] = 0.0

    def test_source_not_aliased(self):
        x = np.array([1.0, 2.0])
        design = RegressionDesign.from_arrays(x, [3, 4])
        x[0] = 10.0
        assert design.x[0] == 1.0

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            RegressionDesign.from_arrays([], [])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            RegressionDesign.from_arrays([[1, 2]], [1])


class TestDesignMatrix:

    def test_decreasing_powers(self):
        design = RegressionDesign.from_arrays([1, 2], [0, 0])
        assert design.design_matrix(2).to_array() == [[1, 1, 1], [4, 2, 1]]

    def test_order_zero_is_column_of_ones(self):
        design = RegressionDesign.from_arrays([5, 7], [0, 0])
        assert design.design_matrix(0).to_array() == [[1], [1]]

    def test_negative_order(self):
        design = RegressionDesign.from_arrays([1, 2], [0, 0])
        with pytest.raises(ValidationError):
            design.design_matrix(-1)
