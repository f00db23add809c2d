"""
Tests for axis-aligned bounding boxes.

Validates:
    - Box normalisation and validation
    - Union of several boxes
    - Measure, area and volume
    - Random points stay inside the box
"""

import numpy as np
import pytest

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.geometry import (
    as_bounding_box,
    bounding_box_addition,
    bounding_box_area,
    bounding_box_measure,
    bounding_box_volume,
    random_point_in_box,
)


class TestAsBoundingBox:

    def test_tuple_of_tuples(self):
        box = as_bounding_box([0, 1], np.array([2, 3]))
        assert box == ((0.0, 1.0), (2.0, 3.0))
        assert all(isinstance(v, float) for v in box[0])

    def test_dimension_mismatch(self):
        with pytest.raises(ValidationError):
            as_bounding_box([0, 1], [2, 3, 4])

    def test_non_finite(self):
        with pytest.raises(DimensionError):
            as_bounding_box([0, -np.inf], [1, 1])


class TestBoundingBoxAddition:

    def test_union_2d(self):
        boxes = [((0, 0), (1, 1)), ((-1, 0.5), (0.5, 3))]
        assert bounding_box_addition(boxes) == ((-1.0, 0.0), (1.0, 3.0))

    def test_single_box(self):
        assert bounding_box_addition([((0, 0, 0), (1, 2, 3))]) == ((0, 0, 0), (1, 2, 3))

    def test_empty(self):
        with pytest.raises(ValidationError, match="at least one"):
            bounding_box_addition([])

    def test_mixed_dimensions(self):
        with pytest.raises(DimensionError, match="same dimension"):
            bounding_box_addition([((0, 0), (1, 1)), ((0, 0, 0), (1, 1, 1))])

    def test_malformed_box(self):
        with pytest.raises(DimensionError, match=r"boxes\[0\]"):
            bounding_box_addition([(0, 1, 2)])


class TestMeasure:

    def test_measure_any_dimension(self):
        assert bounding_box_measure(((0,), (4,))) == 4.0
        assert bounding_box_measure(((0, 0, 0, 0), (1, 2, 3, 4))) == 24.0

    def test_area(self):
        assert bounding_box_area(((-1, -1), (1, 2))) == 6.0

    def test_area_requires_2d(self):
        with pytest.raises(DimensionError, match="2D"):
            bounding_box_area(((0, 0, 0), (1, 1, 1)))

    def test_volume(self):
        assert bounding_box_volume(((0, 0, 0), (1, 2, 3))) == 6.0

    def test_volume_requires_3d(self):
        with pytest.raises(DimensionError, match="3D"):
            bounding_box_volume(((0, 0), (1, 1)))


class TestRandomPoint:

    def test_points_inside(self, rng):
        box = ((-2, 5), (3, 6))
        points = np.array([random_point_in_box(box, rng) for _ in range(500)])
        assert points.shape == (500, 2)
        assert np.all(points >= [-2, 5])
        assert np.all(points <= [3, 6])

    def test_reproducible_with_seed(self):
        box = ((0, 0), (1, 1))
        a = random_point_in_box(box, np.random.default_rng(7))
        b = random_point_in_box(box, np.random.default_rng(7))
        np.testing.assert_array_equal(a, b)
