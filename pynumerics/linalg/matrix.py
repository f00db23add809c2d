"""
Small dense matrices.

The Matrix type targets the handful-of-rows systems that appear in
polynomial least squares: the determinant uses cofactor (Laplace)
expansion, which is O(n!), and the inverse uses Gauss-Jordan elimination.
Neither is meant for large matrices.

Matrices are immutable. Every operation returns a new Matrix and never
modifies the receiver, so a single instance can be shared freely.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pynumerics.core.validation import check_array, check_2d, check_finite, check_square
from pynumerics.linalg.vector import Vector


def _coerce_rows(rows: ArrayLike | Iterable[Sequence[float]]) -> NDArray[np.floating[Any]]:
    """Turn a sequence of rows into a validated 2D float array."""
    if not isinstance(rows, np.ndarray):
        try:
            rows = [list(row) for row in rows]
        except TypeError as e:
            raise ValidationError(f"rows: expected a sequence of rows: {e}") from e
        if not rows:
            raise DimensionError("rows: a matrix needs at least one row")
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise DimensionError(
                f"rows: all rows must have the same number of columns, got lengths {sorted(lengths)}"
            )

    arr = check_array(rows, 'rows')
    check_2d(arr, 'rows')
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise DimensionError(f"rows: a matrix needs at least one entry, got shape {arr.shape}")
    check_finite(arr, 'rows')
    return arr


class Matrix:
    """
    Rectangular grid of finite reals stored row by row.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix.zeros(3, 2)
        Matrix.eye(3)
        Matrix.random(3, rng=np.random.default_rng(0))

    Raises:
        DimensionError: If rows differ in length, the matrix is empty,
            or any entry is NaN/Inf
    """

    __slots__ = ('_rows',)

    def __init__(self, rows: ArrayLike | Iterable[Sequence[float]]):
        arr = _coerce_rows(rows).copy()
        arr.flags.writeable = False
        self._rows = arr

    # === Constructors ===

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> Matrix:
        """Matrix filled with zeros (square when ``cols`` is omitted)."""
        if cols is None:
            cols = rows
        return cls(np.zeros((rows, cols)))

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return cls(np.eye(n))

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int | None = None,
        *,
        low: float = 0.0,
        high: float = 1.0,
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """Matrix of uniform draws from ``[low, high)``."""
        if cols is None:
            cols = rows
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.uniform(low, high, size=(rows, cols)))

    # === Views ===

    @property
    def rows_number(self) -> int:
        return self._rows.shape[0]

    @property
    def columns_number(self) -> int:
        return self._rows.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows.shape

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(row) for row in self._rows.tolist())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Read-only array view of the entries."""
        return self._rows

    def to_array(self) -> list[list[float]]:
        """Copy of the entries as nested lists."""
        return self._rows.tolist()

    def columns(self) -> list[list[float]]:
        """Entries grouped by column (the rows of the transpose)."""
        return self._rows.T.tolist()

    def is_square(self) -> bool:
        return self.rows_number == self.columns_number

    def equal_size(self, other: Matrix) -> bool:
        return self.shape == other.shape

    def check_equal_size(self, other: Matrix) -> None:
        if not self.equal_size(other):
            raise DimensionError(
                f"Both matrices should have the same size, got {self.shape} and {other.shape}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._rows, other._rows)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.to_array()})"

    # === Element-wise arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        self.check_equal_size(other)
        return Matrix(self._rows + other._rows)

    def subtract(self, other: Matrix) -> Matrix:
        self.check_equal_size(other)
        return Matrix(self._rows - other._rows)

    def scale_by(self, factor: float) -> Matrix:
        return Matrix(self._rows * factor)

    def map(self, func: Callable[[float, int, int], float]) -> Matrix:
        """New matrix with entry (i, j) replaced by ``func(value, i, j)``."""
        return Matrix([
            [func(value, i, j) for j, value in enumerate(row)]
            for i, row in enumerate(self._rows.tolist())
        ])

    # === Products ===

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product ``self x other``.

        Raises:
            DimensionError: If the inner dimensions do not agree
        """
        if self.columns_number != other.rows_number:
            raise DimensionError(
                f"The number of columns of the first matrix ({self.columns_number}) "
                f"should be equal to the number of rows of the second ({other.rows_number})"
            )
        return Matrix(self._rows @ other._rows)

    def transpose(self) -> Matrix:
        return Matrix(self._rows.T)

    # === Determinant and cofactors ===

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self._rows, 'matrix')
        return _laplace_determinant(self._rows)

    def submatrix_removing(self, row: int, column: int) -> Matrix:
        """Matrix without the given row and column."""
        reduced = np.delete(np.delete(self._rows, row, axis=0), column, axis=1)
        return Matrix(reduced)

    def minor(self, i: int, j: int) -> float:
        """Determinant of the submatrix obtained by deleting row i and column j."""
        return self.submatrix_removing(i, j).determinant()

    def cofactor(self, i: int, j: int) -> float:
        sign = (-1) ** (i + j)
        return sign * self.minor(i, j)

    def adjugate(self) -> Matrix:
        """
        Transpose of the cofactor matrix.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self._rows, 'matrix')
        return self.map(lambda _, i, j: self.cofactor(i, j)).transpose()

    # === Inverse and linear systems ===

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination.

        For each pivot column a zero on the diagonal is swapped with the
        first lower row holding a non-zero entry in that column. The same
        row operations applied to the identity produce the inverse.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If some column has no non-zero pivot
        """
        check_square(self._rows, 'matrix')

        dim = self.rows_number
        C = np.array(self._rows, dtype=np.float64)
        I = np.eye(dim)

        for i in range(dim):
            e = C[i, i]

            if e == 0:
                for ii in range(i + 1, dim):
                    if C[ii, i] != 0:
                        C[[i, ii]] = C[[ii, i]]
                        I[[i, ii]] = I[[ii, i]]
                        break
                e = C[i, i]
                if e == 0:
                    raise SingularMatrixError(
                        f"Matrix is singular: no non-zero pivot in column {i}",
                        matrix_name='matrix',
                        pivot_column=i,
                    )

            # Scale the pivot row so the diagonal holds a 1
            C[i] = C[i] / e
            I[i] = I[i] / e

            # Clear this column in every other row
            for ii in range(dim):
                if ii == i:
                    continue
                e = C[ii, i]
                C[ii] -= e * C[i]
                I[ii] -= e * I[i]

        return Matrix(I)

    def solve(self, b: Vector | ArrayLike) -> Vector:
        """
        Solve ``self @ x = b`` as ``inverse() x b``.

        Raises:
            DimensionError: If b does not match the matrix size
            SingularMatrixError: If the matrix has no inverse
        """
        if not isinstance(b, Vector):
            b = Vector(b)
        return b.transform(self.inverse())


def _laplace_determinant(rows: NDArray[np.floating[Any]]) -> float:
    n = rows.shape[0]
    if n == 1:
        return float(rows[0, 0])
    if n == 2:
        return float(rows[0, 0] * rows[1, 1] - rows[0, 1] * rows[1, 0])

    terms = []
    for index, coef in enumerate(rows[0]):
        sub = np.delete(rows[1:], index, axis=1)
        term = coef * _laplace_determinant(sub)
        terms.append(term if index % 2 == 0 else -term)
    return float(sum(terms))
