"""
Solver dispatch for regression.

This module provides the public fitting functions and the type-tag
dispatcher used for loosely typed record data.
"""

import dataclasses
import warnings
from typing import Any, Iterable

from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.regression.design import RegressionDesign, filter_records
from pynumerics.regression.solution import RegressionModel
from pynumerics.regression.backends.normal_equations import NormalEquationsBackend
from pynumerics.regression.backends.closed_form import ClosedFormBackend


# Polynomial orders for the named type tags
POLYNOMIAL_TAGS = {
    'linear': 1,
    'quadratic': 2,
    'cubic': 3,
    'quartic': 4,
}

CLOSED_FORM_TAGS = ('logarithmic', 'exponential', 'power')

DEFAULT_POLYNOMIAL_ORDER = 2


def polynomial_fit(x: ArrayLike, y: ArrayLike, order: int = 2) -> RegressionModel:
    """
    Fit ``y = c_0 x^k + c_1 x^(k-1) + ... + c_k`` by least squares.

    Precondition: at least ``order + 1`` distinct abscissae. This is not
    checked. With fewer the coefficients are arbitrary and usually no
    error is raised.

    Args:
        x: Abscissae (n,)
        y: Observed responses (n,)
        order: Polynomial order k

    Returns:
        RegressionModel with coefficients ordered from x^k down to x^0

    Raises:
        ValidationError: If inputs are invalid or order is negative
        LengthMismatchError: If x and y differ in length
        SingularMatrixError: If elimination meets an exactly zero pivot

    Example:
        >>> model = polynomial_fit([0, 1, 3, 4], [1, 2, 4, 5], order=1)
        >>> model.equation.with_parameters
        'y = a0 + a1 * x'
    """
    if int(order) != order or order < 0:
        raise ValidationError(f"order: must be a non-negative integer, got {order!r}")

    design = RegressionDesign.from_arrays(x, y)
    return _fit(design, NormalEquationsBackend(int(order)))


def logarithmic_fit(x: ArrayLike, y: ArrayLike) -> RegressionModel:
    """
    Fit ``y = a + b ln(x)``.

    Raises:
        ValidationError: If any x is not strictly positive
    """
    design = RegressionDesign.from_arrays(x, y)
    return _fit(design, ClosedFormBackend('logarithmic'))


def exponential_fit(x: ArrayLike, y: ArrayLike) -> RegressionModel:
    """
    Fit ``y = a exp(b x)``.

    Raises:
        ValidationError: If any y is not strictly positive
    """
    design = RegressionDesign.from_arrays(x, y)
    return _fit(design, ClosedFormBackend('exponential'))


def power_fit(x: ArrayLike, y: ArrayLike) -> RegressionModel:
    """
    Fit ``y = a x^b``.

    Raises:
        ValidationError: If any x or y is not strictly positive
    """
    design = RegressionDesign.from_arrays(x, y)
    return _fit(design, ClosedFormBackend('power'))


def least_squares_fit(
    type: str,
    data: Iterable[Any],
    *,
    order: int | None = None,
) -> RegressionModel | None:
    """
    Fit a curve chosen by type tag to loosely typed records.

    Records are mappings with 'x' and 'y' keys or ``(x, y)`` pairs. Rows
    with missing, non-numeric or non-finite values are dropped first.

    Args:
        type: One of 'linear', 'quadratic', 'cubic', 'quartic',
            'polynomial', 'logarithmic', 'exponential', 'power'.
            Anything else falls back to 'linear' with a UserWarning.
        data: The records
        order: Polynomial order for type='polynomial' (default 2)

    Returns:
        RegressionModel, or None when fewer than 2 usable records remain

    Example:
        >>> data = [{'x': v, 'y': 2 + v * v} for v in range(10)]
        >>> least_squares_fit('quadratic', data).coefficients
    """
    x, y, n_dropped = filter_records(data)
    if x.shape[0] < 2:
        return None

    design = RegressionDesign.from_arrays(x, y, n_dropped=n_dropped)
    backend, fallback_warning = _get_backend(type, order)

    model = _fit(design, backend)
    if fallback_warning is not None:
        warnings.warn(fallback_warning, UserWarning, stacklevel=2)
        result = dataclasses.replace(
            model._result,
            warnings=model._result.warnings + (fallback_warning,),
        )
        model = RegressionModel(_result=result, _design=design)
    return model


def _fit(design: RegressionDesign, backend) -> RegressionModel:
    result = backend.solve(design)
    return RegressionModel(_result=result, _design=design)


def _get_backend(tag: str, order: int | None):
    """
    Map a type tag to a backend instance.

    Returns:
        Tuple of (backend, warning message or None)
    """
    if tag in POLYNOMIAL_TAGS:
        return NormalEquationsBackend(POLYNOMIAL_TAGS[tag]), None

    if tag == 'polynomial':
        if order is None:
            order = DEFAULT_POLYNOMIAL_ORDER
        if int(order) != order or order < 0:
            raise ValidationError(f"order: must be a non-negative integer, got {order!r}")
        return NormalEquationsBackend(int(order)), None

    if tag in CLOSED_FORM_TAGS:
        return ClosedFormBackend(tag), None

    message = f"Unknown regression type {tag!r}, falling back to 'linear'"
    return NormalEquationsBackend(POLYNOMIAL_TAGS['linear']), message
