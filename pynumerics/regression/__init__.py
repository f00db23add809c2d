"""
Least-squares curve fitting.

Polynomial models are fitted through the normal equations; logarithmic,
exponential and power-law models through closed-form sums on linearised
variables.

Public API:
    polynomial_fit(x, y, order=2) -> RegressionModel
    logarithmic_fit(x, y) -> RegressionModel
    exponential_fit(x, y) -> RegressionModel
    power_fit(x, y) -> RegressionModel
    least_squares_fit(type, data, order=None) -> RegressionModel | None

Example:
    >>> from pynumerics.regression import polynomial_fit
    >>> model = polynomial_fit(x, y, order=2)
    >>> print(model.coefficients)
    >>> print(model.equation.with_coefficients)
    >>> print(model.summary())
"""

from pynumerics.regression.design import RegressionDesign
from pynumerics.regression._common import RegressionParams, Equation
from pynumerics.regression.solution import RegressionModel
from pynumerics.regression.solvers import (
    polynomial_fit,
    logarithmic_fit,
    exponential_fit,
    power_fit,
    least_squares_fit,
)

__all__ = [
    "polynomial_fit",
    "logarithmic_fit",
    "exponential_fit",
    "power_fit",
    "least_squares_fit",
    "RegressionDesign",
    "RegressionModel",
    "RegressionParams",
    "Equation",
]
