"""
Shared regression types.

Contains the parameter payload produced by every regression backend, the
equation pair and the per-model prediction and formatting rules.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


MODELS = ('polynomial', 'logarithmic', 'exponential', 'power')


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for a fitted curve.

    This is the immutable data computed by backends. Polynomial
    coefficients run from the highest power down to the constant term;
    the closed-form models store ``(a, b)``.
    """
    coefficients: tuple[float, ...]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    model: str
    order: int | None
    rss: float
    tss: float


@dataclass(frozen=True)
class Equation:
    """Human-readable model formula, symbolic and with fitted values."""
    with_parameters: str
    with_coefficients: str

    def __str__(self) -> str:
        return self.with_coefficients


def evaluate(
    model: str,
    coefficients: tuple[float, ...],
    x: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """Evaluate a fitted model at x (vectorised)."""
    x = np.asarray(x, dtype=np.float64)

    if model == 'polynomial':
        return np.polyval(coefficients, x)

    a, b = coefficients
    if model == 'logarithmic':
        return a + b * np.log(x)
    if model == 'exponential':
        return a * np.exp(b * x)
    if model == 'power':
        return a * np.power(x, b)

    raise ValueError(f"Unknown model: {model!r}")


def _polynomial_equation(coefficients: tuple[float, ...]) -> Equation:
    order = len(coefficients) - 1
    # Ascending powers: the constant term is printed first
    ascending = coefficients[::-1]

    def term(power: int) -> str:
        if power == 0:
            return ''
        if power == 1:
            return ' * x'
        return f' * x^{power}'

    symbolic = 'y = a0' + ''.join(
        f' + a{k}{term(k)}' for k in range(1, order + 1)
    )

    numeric = f'y = {ascending[0]}{term(0)}'
    for k in range(1, order + 1):
        value = ascending[k]
        sign = '-' if value < 0 else '+'
        numeric += f' {sign} {abs(value)}{term(k)}'

    return Equation(with_parameters=symbolic, with_coefficients=numeric)


def build_equation(model: str, coefficients: tuple[float, ...]) -> Equation:
    """Format the equation pair for a fitted model."""
    if model == 'polynomial':
        return _polynomial_equation(coefficients)

    a, b = coefficients
    if model == 'logarithmic':
        return Equation('y = a0 + a1 * log(x)', f'y = {a} + {b} * log(x)')
    if model == 'exponential':
        return Equation('y = a0 * exp(a1 * x)', f'y = {a} * exp({b} * x)')
    if model == 'power':
        return Equation('y = a * x^(b)', f'y = {a} * x^({b})')

    raise ValueError(f"Unknown model: {model!r}")
