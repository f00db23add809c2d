"""
Regression Design.

Design holds the sample points a curve is fitted through. It knows it is
feeding a least-squares fit: it can lay the abscissae out as a polynomial
design matrix, but it does not know which model will be fitted.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
)
from pynumerics.linalg import Matrix


@dataclass(frozen=True)
class RegressionDesign:
    """
    Sample points for a one-dimensional curve fit.

    Immutable after construction.

    Construction:
        RegressionDesign.from_arrays(x, y)
        RegressionDesign.from_records([{'x': 0, 'y': 1}, {'x': 1, 'y': 3}])
        RegressionDesign.from_records([(0, 1), (1, 3)])
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _n_dropped: int = 0

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        n_dropped: int = 0,
    ) -> RegressionDesign:
        """
        Build Design directly from paired arrays.

        Raises:
            ValidationError: If inputs are not numeric or empty
            DimensionError: If inputs are not 1D or contain NaN/Inf
            LengthMismatchError: If x and y differ in length
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')

        x_arr = x_arr.copy()
        y_arr = y_arr.copy()
        x_arr.flags.writeable = False
        y_arr.flags.writeable = False
        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0], _n_dropped=n_dropped)

    @classmethod
    def from_records(cls, data: Iterable[Any]) -> RegressionDesign:
        """
        Build Design from loosely typed records, skipping unusable rows.

        Each record is either a mapping with 'x' and 'y' keys or an
        ``(x, y)`` pair. See filter_records() for what counts as unusable.

        Raises:
            ValidationError: If no record is usable
        """
        x, y, n_dropped = filter_records(data)
        return cls.from_arrays(x, y, n_dropped=n_dropped)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Abscissae (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Observed responses (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def n_dropped(self) -> int:
        """Number of input records discarded as unusable."""
        return self._n_dropped

    def design_matrix(self, order: int) -> Matrix:
        """
        Polynomial design matrix with row i = [x_i^k, x_i^(k-1), ..., 1].

        Args:
            order: Polynomial order k

        Raises:
            ValidationError: If order is negative
        """
        if order < 0:
            raise ValidationError(f"order: must be >= 0, got {order}")
        powers = np.arange(order, -1, -1)
        return Matrix(self._x[:, np.newaxis] ** powers)


def _is_usable(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def filter_records(
    data: Iterable[Any],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
    """
    Extract usable (x, y) pairs from loosely typed records.

    A record is dropped when it is neither a mapping nor a pair, when
    either value is missing, or when either value is not a finite real
    number (booleans and numeric strings included).

    Returns:
        Tuple of (x, y, n_dropped)
    """
    xs: list[float] = []
    ys: list[float] = []
    n_dropped = 0

    for record in data:
        if isinstance(record, Mapping):
            x_val, y_val = record.get('x'), record.get('y')
        elif isinstance(record, (tuple, list)) and len(record) == 2:
            x_val, y_val = record
        else:
            n_dropped += 1
            continue

        if _is_usable(x_val) and _is_usable(y_val):
            xs.append(float(x_val))
            ys.append(float(y_val))
        else:
            n_dropped += 1

    return np.array(xs, dtype=np.float64), np.array(ys, dtype=np.float64), n_dropped
