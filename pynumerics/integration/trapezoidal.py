"""
Trapezoidal rule for sampled functions.

Both integrals treat the samples as a piecewise-linear function, so the
results are exact for that interpolant.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import check_array, check_1d, check_consistent_length


def _check_samples(
    x: ArrayLike,
    f: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    x_arr = check_array(x, 'x')
    f_arr = check_array(f, 'f')
    check_1d(x_arr, 'x')
    check_1d(f_arr, 'f')
    check_consistent_length(x_arr, f_arr, names=('x', 'f'))
    return x_arr, f_arr


def trapezoidal_force(x: ArrayLike, f: ArrayLike) -> float:
    """
    Integral of f(x) dx over the samples.

    Sum over consecutive pairs of ``(f[i-1] + f[i]) (x[i] - x[i-1]) / 2``.
    Fewer than two samples integrate to 0.

    Raises:
        LengthMismatchError: If x and f differ in length

    >>> trapezoidal_force([0, 1, 2, 3, 4, 5], [1, 2, 2, 3, 2, 1])
    10.0
    """
    x_arr, f_arr = _check_samples(x, f)
    if x_arr.shape[0] < 2:
        return 0.0

    dx = np.diff(x_arr)
    return float(np.sum((f_arr[:-1] + f_arr[1:]) * dx / 2))


def trapezoidal_moment(x: ArrayLike, f: ArrayLike, xref: float = 0.0) -> float:
    """
    Integral of f(x) (x - xref) dx over the samples.

    Each segment contributes
    ``[f[i-1] (x[i] + x[i-1]) + (f[i] - f[i-1]) (2 x[i] + x[i-1]) / 3] (x[i] - x[i-1]) / 2``
    with x measured from ``xref``. The caller's arrays are left untouched.

    Raises:
        LengthMismatchError: If x and f differ in length
    """
    x_arr, f_arr = _check_samples(x, f)
    if x_arr.shape[0] < 2:
        return 0.0

    if xref != 0:
        x_arr = x_arr - xref

    x0, x1 = x_arr[:-1], x_arr[1:]
    f0, f1 = f_arr[:-1], f_arr[1:]
    addend1 = f0 * (x1 + x0)
    addend2 = (f1 - f0) * (2 * x1 + x0) / 3
    return float(np.sum((addend1 + addend2) * (x1 - x0) / 2))
