"""
Fixed-length dense vectors.

A Vector is immutable: its components live in a read-only float64 array
and every operation returns a new Vector.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.compute.tolerances import DEFAULT_EPSILON, are_equal
from pynumerics.core.exceptions import DimensionError
from pynumerics.core.numeric import to_degrees
from pynumerics.core.validation import check_array, check_1d, check_finite

if TYPE_CHECKING:
    from pynumerics.linalg.matrix import Matrix


class Vector:
    """
    Ordered, fixed-length sequence of finite real components.

    Construction:
        Vector([1, 2, 3])
        Vector(np.arange(3))

    Raises:
        ValidationError: If components are not numeric
        DimensionError: If components are not 1D or contain NaN/Inf
    """

    __slots__ = ('_components',)

    def __init__(self, components: ArrayLike):
        arr = check_array(components, 'components')
        check_1d(arr, 'components')
        check_finite(arr, 'components')
        arr = arr.copy()
        arr.flags.writeable = False
        self._components = arr

    # === Views ===

    @property
    def components(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the components."""
        return self._components

    @property
    def dimension(self) -> int:
        return self._components.shape[0]

    def to_array(self) -> list[float]:
        """Copy of the components as a plain list."""
        return self._components.tolist()

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_array())

    def __getitem__(self, index: int) -> float:
        return float(self._components[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return np.array_equal(self._components, other._components)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.to_array()})"

    # === Arithmetic ===

    def _check_same_dimension(self, other: Vector) -> None:
        if self.dimension != other.dimension:
            raise DimensionError(
                f"Vectors must have the same dimension, got {self.dimension} and {other.dimension}"
            )

    def add(self, other: Vector) -> Vector:
        self._check_same_dimension(other)
        return Vector(self._components + other._components)

    def subtract(self, other: Vector) -> Vector:
        self._check_same_dimension(other)
        return Vector(self._components - other._components)

    def scale_by(self, factor: float) -> Vector:
        return Vector(self._components * factor)

    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(*self._components)

    def dot_product(self, other: Vector) -> float:
        self._check_same_dimension(other)
        return float(self._components @ other._components)

    def normalize(self) -> Vector:
        """
        Unit vector with the same direction.

        Raises:
            DimensionError: For the zero vector, whose direction is undefined
        """
        length = self.length()
        if length == 0:
            raise DimensionError("Cannot normalize the zero vector")
        return self.scale_by(1 / length)

    def normalized_dot_product(self, other: Vector) -> float:
        return self.normalize().dot_product(other.normalize())

    # === Direction predicates ===

    def has_same_direction(self, other: Vector, *, epsilon: float = DEFAULT_EPSILON) -> bool:
        return are_equal(self.normalized_dot_product(other), 1, epsilon)

    def has_opposite_direction(self, other: Vector, *, epsilon: float = DEFAULT_EPSILON) -> bool:
        return are_equal(self.normalized_dot_product(other), -1, epsilon)

    def is_perpendicular(self, other: Vector, *, epsilon: float = DEFAULT_EPSILON) -> bool:
        return are_equal(self.normalized_dot_product(other), 0, epsilon)

    def angle_between(self, other: Vector) -> float:
        """Angle between the two vectors, in degrees."""
        cosine = self.dot_product(other) / (self.length() * other.length())
        # Rounding can push parallel vectors marginally outside [-1, 1]
        return to_degrees(math.acos(min(1.0, max(-1.0, cosine))))

    def project_on(self, other: Vector) -> Vector:
        normalized = other.normalize()
        return normalized.scale_by(self.dot_product(normalized))

    def with_length(self, new_length: float) -> Vector:
        return self.normalize().scale_by(new_length)

    def equal_to(self, other: Vector, *, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Component-wise approximate equality."""
        self._check_same_dimension(other)
        return all(
            are_equal(a, b, epsilon)
            for a, b in zip(self._components, other._components)
        )

    # === Linear maps ===

    def transform(self, matrix: Matrix) -> Vector:
        """
        Apply the linear map ``matrix`` to this vector.

        Returns a Vector with one component per matrix row.

        Raises:
            DimensionError: If the matrix row length differs from the vector dimension
        """
        if matrix.columns_number != self.dimension:
            raise DimensionError(
                f"Matrix rows have {matrix.columns_number} columns, "
                f"vector has {self.dimension} components"
            )
        return Vector(matrix.to_numpy() @ self._components)
