"""
Small dense linear algebra.

Public API:
    Vector: immutable fixed-length vector
    Matrix: immutable rectangular matrix with Laplace determinant and
        Gauss-Jordan inverse

Example:
    >>> from pynumerics.linalg import Matrix
    >>> m = Matrix([[1, 2, 3], [2, 1, 5], [-1, 2, -1]])
    >>> m.determinant()
    -2.0
"""

from pynumerics.linalg.vector import Vector
from pynumerics.linalg.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
