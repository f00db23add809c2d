"""
Points and straight lines in the plane.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pynumerics.core.exceptions import ParallelLineError, ValidationError
from pynumerics.linalg import Vector


def find_line_xaxis_intersection(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Abscissa where the line through (x1, y1) and (x2, y2) meets y = 0.

    Raises:
        ParallelLineError: If y1 == y2
    """
    if y1 - y2 == 0:
        raise ParallelLineError("The line is parallel to the X-axis", y=y1)
    return x1 - (x2 - x1) / (y2 - y1) * y1


@dataclass(frozen=True)
class Point2d:
    x: float
    y: float

    def distance_to_point(self, other: Point2d) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def vector_to(self, point: Point2d) -> Vector:
        return Vector([point.x - self.x, point.y - self.y])

    def unit_vector_to(self, point: Point2d) -> Vector:
        """
        Raises:
            DimensionError: If both points coincide
        """
        return self.vector_to(point).normalize()


@dataclass(frozen=True)
class Line2d:
    """
    Straight line ``y = slope * x + intercept``.

    Vertical lines have ``slope = inf``, no intercept, and store the
    abscissa they pass through in ``x0``.

    Construction:
        Line2d.from_points(Point2d(0, 1), Point2d(1, 2))
        Line2d.from_slope_intercept(0.5, 2)
    """
    slope: float
    intercept: float | None
    direction: Vector
    x0: float | None = None

    @classmethod
    def from_points(cls, p0: Point2d, p1: Point2d) -> Line2d:
        """
        Raises:
            ValidationError: If the points coincide
        """
        if p0 == p1:
            raise ValidationError("Line2d: two distinct points are required")

        inc_x = p1.x - p0.x
        if inc_x == 0:
            return cls(
                slope=math.inf,
                intercept=None,
                direction=Vector([0.0, math.copysign(1.0, p1.y - p0.y)]),
                x0=p0.x,
            )

        slope = (p1.y - p0.y) / inc_x
        return cls(
            slope=slope,
            intercept=p0.y - slope * p0.x,
            direction=p0.unit_vector_to(p1),
        )

    @classmethod
    def from_slope_intercept(cls, slope: float, intercept: float) -> Line2d:
        if not (math.isfinite(slope) and math.isfinite(intercept)):
            raise ValidationError(
                f"Line2d: slope and intercept must be finite, got {slope} and {intercept}"
            )
        p0 = Point2d(0.0, intercept)
        p1 = Point2d(1.0, slope + intercept)
        return cls(slope=slope, intercept=intercept, direction=p0.unit_vector_to(p1))

    @property
    def is_vertical(self) -> bool:
        return math.isinf(self.slope)

    def y(self, x: float) -> float:
        """
        Ordinate of the line at ``x``.

        Raises:
            ValidationError: For vertical lines, which have no single y
        """
        if self.is_vertical:
            if self.x0 == x:
                raise ValidationError(f"Vertical line having infinite y values for x={x}")
            raise ValidationError(f"Vertical line not passing through x={x}")
        return self.slope * x + self.intercept

    def parallel_line_passing_through(self, point: Point2d) -> Line2d:
        if self.is_vertical:
            return Line2d(
                slope=self.slope,
                intercept=None,
                direction=self.direction,
                x0=point.x,
            )
        return Line2d.from_slope_intercept(self.slope, point.y - self.slope * point.x)

    def intersection(self, line: Line2d) -> Point2d | Line2d | None:
        """
        Common points of two lines.

        Returns:
            The crossing Point2d, this line when both coincide, or None
            for distinct parallel lines
        """
        if line.slope == self.slope:
            same = line.x0 == self.x0 if self.is_vertical else line.intercept == self.intercept
            return self if same else None

        if self.is_vertical:
            return Point2d(self.x0, line.y(self.x0))
        if line.is_vertical:
            return Point2d(line.x0, self.y(line.x0))

        x = (line.intercept - self.intercept) / (self.slope - line.slope)
        return Point2d(x, self.slope * x + self.intercept)
