"""
Goodness-of-fit metrics for fitted curves.

All metrics compare observed y against the model evaluated at the
sample abscissae, in the original (untransformed) domain.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


METRIC_NAMES = (
    'mean_absolute_error',
    'mean_squared_error',
    'root_mean_squared_error',
    'mean_absolute_percentage_error',
    'r2_score',
    'r2_score_adjusted',
)


def r2_score(rss: float, tss: float) -> float:
    """
    Coefficient of determination.

    A constant response (TSS = 0) scores 1 when it is reproduced exactly
    and 0 otherwise.
    """
    if tss == 0:
        return 1.0 if rss == 0 else 0.0
    return 1.0 - rss / tss


def r2_score_adjusted(r2: float, n: int, n_coefficients: int) -> float:
    """
    R² adjusted for the number of fitted coefficients p:
    ``1 - (1 - R²)(n - 1)/(n - (p + 1))``.

    Falls back to plain R² when ``n - (p + 1) <= 0``.
    """
    dof = n - (n_coefficients + 1)
    if dof <= 0:
        return r2
    return 1.0 - (1.0 - r2) * (n - 1) / dof


def mean_absolute_percentage_error(
    y: NDArray[np.floating[Any]],
    fitted: NDArray[np.floating[Any]],
) -> float:
    """MAPE in percent; infinite when any observed value is zero."""
    if np.any(y == 0):
        return float('inf')
    return float(100.0 * np.mean(np.abs((y - fitted) / y)))


def compute_metrics(
    y: NDArray[np.floating[Any]],
    fitted: NDArray[np.floating[Any]],
    n_coefficients: int,
) -> dict[str, float]:
    """
    Full metrics battery.

    Args:
        y: Observed responses
        fitted: Model predictions at the sample abscissae
        n_coefficients: Number of fitted coefficients (for adjusted R²)

    Returns:
        Dict keyed by METRIC_NAMES
    """
    residuals = y - fitted
    n = y.shape[0]

    mse = float(np.mean(residuals ** 2))
    rss = float(residuals @ residuals)
    tss = float(np.sum((y - np.mean(y)) ** 2))
    r2 = r2_score(rss, tss)

    return {
        'mean_absolute_error': float(np.mean(np.abs(residuals))),
        'mean_squared_error': mse,
        'root_mean_squared_error': float(np.sqrt(mse)),
        'mean_absolute_percentage_error': mean_absolute_percentage_error(y, fitted),
        'r2_score': r2,
        'r2_score_adjusted': r2_score_adjusted(r2, n, n_coefficients),
    }
