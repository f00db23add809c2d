"""
Small scalar and array helpers shared across pynumerics.

Rounding, angle conversion, NaN-tolerant summation, piecewise linear
interpolation and factorial.
"""

import math

import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


def round_to(num: float, decimals: int | None = 2) -> float:
    """
    Round ``num`` to ``decimals`` places, halves rounded upwards.

    ``decimals=None`` means the default of 2.

    >>> round_to(8.1393)
    8.14
    """
    if decimals is None:
        decimals = 2
    power = 10 ** decimals
    return math.floor(num * power + 0.5) / power


def round_to_fixed(num: float, decimals: int | None = 2) -> str:
    """Round like round_to() and format with exactly ``decimals`` places."""
    if decimals is None:
        decimals = 2
    return f"{round_to(num, decimals):.{decimals}f}"


def to_degrees(radians: float) -> float:
    """Convert radians into degrees."""
    return radians * 180 / math.pi


def to_radians(degrees: float) -> float:
    """Convert degrees into radians."""
    return degrees * math.pi / 180


def array_sum(values: ArrayLike) -> float:
    """
    Sum of a one-dimensional array, skipping NaN entries.

    Raises:
        ValidationError: If ``values`` is not numeric
        DimensionError: If ``values`` is not one-dimensional
    """
    arr = check_array(values, 'values')
    check_1d(arr, 'values')
    return float(np.nansum(arr))


def piecewise_linear_interpolation(xs: ArrayLike, ys: ArrayLike, x: float) -> float:
    """
    Evaluate the polyline through ``(xs[i], ys[i])`` at ``x``.

    ``xs`` must be sorted in ascending order. Outside ``[xs[0], xs[-1]]``
    the first or last segment is extended (linear extrapolation).

    Raises:
        LengthMismatchError: If xs and ys differ in length
        ValidationError: If fewer than two points are given
    """
    arr_x = check_array(xs, 'xs')
    arr_y = check_array(ys, 'ys')
    check_1d(arr_x, 'xs')
    check_1d(arr_y, 'ys')
    check_consistent_length(arr_x, arr_y, names=('xs', 'ys'))
    check_min_samples(arr_x, 2, 'xs')

    # Index of the last abscissa strictly below x, clamped to a valid segment
    i0 = int(np.searchsorted(arr_x, x, side='left')) - 1
    i0 = min(max(i0, 0), len(arr_x) - 2)

    x0, x1 = arr_x[i0], arr_x[i0 + 1]
    y0, y1 = arr_y[i0], arr_y[i0 + 1]
    return float(y0 + (y1 - y0) / (x1 - x0) * (x - x0))


def factorial(n: int) -> int:
    """
    n! for non-negative integers.

    Raises:
        ValidationError: If n is negative or not integral
    """
    if int(n) != n:
        raise ValidationError(f"n: factorial requires an integer, got {n!r}")
    n = int(n)
    if n < 0:
        raise ValidationError(f"n: factorial requires n >= 0, got {n}")
    return math.factorial(n)
