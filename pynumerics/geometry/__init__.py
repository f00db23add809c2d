"""
Geometry primitives.

Bounding boxes and the shapes consumed by Monte Carlo integration, plus
2D points and lines.
"""

from pynumerics.geometry.bounding_box import (
    BoundingBox,
    as_bounding_box,
    random_point_in_box,
    bounding_box_addition,
    bounding_box_measure,
    bounding_box_area,
    bounding_box_volume,
)
from pynumerics.geometry.shapes import Rectangle, Circle, RectangularPrism, Sphere
from pynumerics.geometry.lines import find_line_xaxis_intersection, Point2d, Line2d

__all__ = [
    # Bounding boxes
    "BoundingBox",
    "as_bounding_box",
    "random_point_in_box",
    "bounding_box_addition",
    "bounding_box_measure",
    "bounding_box_area",
    "bounding_box_volume",
    # Shapes
    "Rectangle",
    "Circle",
    "RectangularPrism",
    "Sphere",
    # Lines
    "find_line_xaxis_intersection",
    "Point2d",
    "Line2d",
]
