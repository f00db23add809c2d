"""
Tests for the Monte Carlo primitive shapes.

Validates:
    - Bounding boxes of rectangles, prisms, circles and spheres
    - Boxes include their boundary, balls exclude it
    - Construction validation
    - Box subclasses must supply their extents
"""

from dataclasses import dataclass

import pytest

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.protocols import Shape
from pynumerics.geometry import Circle, Rectangle, RectangularPrism, Sphere
from pynumerics.geometry.shapes import _Box


class TestRectangle:

    def test_defaults(self):
        rect = Rectangle()
        assert rect.bounding_box == ((-0.5, -0.5), (0.5, 0.5))

    def test_bounding_box(self):
        rect = Rectangle(center=(1, 2), width=4, height=2)
        assert rect.bounding_box == ((-1.0, 1.0), (3.0, 3.0))

    def test_boundary_inside(self):
        rect = Rectangle(width=2, height=2)
        assert rect.is_inside((1, 1))
        assert rect.is_inside((-1, 0))
        assert not rect.is_inside((1.0001, 0))

    def test_wrong_point_dimension(self):
        with pytest.raises(DimensionError, match="2 coordinates"):
            Rectangle().is_inside((0, 0, 0))

    def test_negative_width(self):
        with pytest.raises(ValidationError, match="width"):
            Rectangle(width=-1)

    def test_center_dimension(self):
        with pytest.raises(DimensionError):
            Rectangle(center=(0, 0, 0))

    def test_satisfies_protocol(self):
        assert isinstance(Rectangle(), Shape)


class TestRectangularPrism:

    def test_bounding_box(self):
        prism = RectangularPrism(center=(0, 0, 1), width=2, height=4, depth=2)
        assert prism.bounding_box == ((-1.0, -2.0, 0.0), (1.0, 2.0, 2.0))

    def test_is_inside(self):
        prism = RectangularPrism()
        assert prism.is_inside((0.5, -0.5, 0))
        assert not prism.is_inside((0, 0, 0.6))


class TestCircle:

    def test_bounding_box(self):
        assert Circle(center=(1, 1), radius=2).bounding_box == ((-1.0, -1.0), (3.0, 3.0))

    def test_boundary_outside(self):
        circle = Circle()
        assert circle.is_inside((0, 0))
        assert circle.is_inside((0.7, 0.7))
        assert not circle.is_inside((1, 0))
        assert not circle.is_inside((0.8, 0.8))

    def test_negative_radius(self):
        with pytest.raises(ValidationError, match="radius"):
            Circle(radius=-0.5)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Circle().radius = 3


class TestSphere:

    def test_bounding_box(self):
        assert Sphere(radius=3).bounding_box == ((-3.0, -3.0, -3.0), (3.0, 3.0, 3.0))

    def test_is_inside(self):
        sphere = Sphere(center=(1, 0, 0))
        assert sphere.is_inside((1.5, 0.5, 0.5))
        assert not sphere.is_inside((0, 0, 0))

    def test_wrong_point_dimension(self):
        with pytest.raises(DimensionError):
            Sphere().is_inside((0, 0))


class TestBoxBase:

    def test_box_without_extents_cannot_be_built(self):
        @dataclass(frozen=True)
        class Slab(_Box):
            center: tuple[float, float] = (0.0, 0.0)

        with pytest.raises(TypeError, match="_extents"):
            Slab()

    def test_box_with_extents(self):
        @dataclass(frozen=True)
        class Square(_Box):
            center: tuple[float, float] = (0.0, 0.0)

            def _extents(self):
                return (2.0, 2.0)

        square = Square()
        assert square.bounding_box == ((-1.0, -1.0), (1.0, 1.0))
        assert square.is_inside((1.0, -1.0))
