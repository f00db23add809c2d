"""
Primitive shapes for Monte Carlo area and volume estimation.

Every shape satisfies the Shape protocol: a ``bounding_box`` property and
an ``is_inside(point)`` predicate. Box shapes contain their boundary;
round shapes do not.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import Sequence

import numpy as np

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.validation import check_array, check_1d, check_finite
from pynumerics.geometry.bounding_box import BoundingBox, as_bounding_box


def _check_center(center: Sequence[float], dimension: int) -> tuple[float, ...]:
    arr = check_array(center, 'center')
    check_1d(arr, 'center')
    check_finite(arr, 'center')
    if arr.shape[0] != dimension:
        raise DimensionError(
            f"center: expected {dimension} coordinates, got {arr.shape[0]}"
        )
    return tuple(float(v) for v in arr)


def _check_size(value: float, name: str) -> float:
    if not np.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be a finite value >= 0, got {value}")
    return float(value)


def _check_point(point: Sequence[float], dimension: int) -> None:
    if len(point) != dimension:
        raise DimensionError(
            f"point: expected {dimension} coordinates, got {len(point)}"
        )


class _Box(ABC):
    """Axis-aligned box around a center, boundary included."""

    center: tuple[float, ...]

    @abstractmethod
    def _extents(self) -> tuple[float, ...]:
        """Edge lengths, one per axis."""

    @cached_property
    def bounding_box(self) -> BoundingBox:
        center = np.array(self.center)
        half = np.array(self._extents()) / 2
        return as_bounding_box(center - half, center + half)

    def is_inside(self, point: Sequence[float]) -> bool:
        _check_point(point, len(self.center))
        minimums, maximums = self.bounding_box
        return all(lo <= c <= hi for c, lo, hi in zip(point, minimums, maximums))


class _Ball:
    """Open ball around a center, boundary excluded."""

    center: tuple[float, ...]
    radius: float

    @cached_property
    def bounding_box(self) -> BoundingBox:
        center = np.array(self.center)
        return as_bounding_box(center - self.radius, center + self.radius)

    def is_inside(self, point: Sequence[float]) -> bool:
        _check_point(point, len(self.center))
        distance_sq = sum((c - m) ** 2 for c, m in zip(point, self.center))
        return distance_sq < self.radius ** 2


@dataclass(frozen=True)
class Rectangle(_Box):
    """Axis-aligned rectangle of size width x height."""
    center: tuple[float, float] = (0.0, 0.0)
    width: float = 1.0
    height: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'center', _check_center(self.center, 2))
        object.__setattr__(self, 'width', _check_size(self.width, 'width'))
        object.__setattr__(self, 'height', _check_size(self.height, 'height'))

    def _extents(self) -> tuple[float, ...]:
        return (self.width, self.height)


@dataclass(frozen=True)
class RectangularPrism(_Box):
    """Axis-aligned box of size width x height x depth."""
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'center', _check_center(self.center, 3))
        object.__setattr__(self, 'width', _check_size(self.width, 'width'))
        object.__setattr__(self, 'height', _check_size(self.height, 'height'))
        object.__setattr__(self, 'depth', _check_size(self.depth, 'depth'))

    def _extents(self) -> tuple[float, ...]:
        return (self.width, self.height, self.depth)


@dataclass(frozen=True)
class Circle(_Ball):
    center: tuple[float, float] = (0.0, 0.0)
    radius: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'center', _check_center(self.center, 2))
        object.__setattr__(self, 'radius', _check_size(self.radius, 'radius'))


@dataclass(frozen=True)
class Sphere(_Ball):
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'center', _check_center(self.center, 3))
        object.__setattr__(self, 'radius', _check_size(self.radius, 'radius'))
