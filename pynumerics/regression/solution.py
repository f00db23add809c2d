"""
Regression solution types.

Contains the user-facing wrapper around a backend Result.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.result import Result
from pynumerics.regression._common import (
    Equation,
    RegressionParams,
    build_equation,
    evaluate,
)
from pynumerics.regression._metrics import compute_metrics

if TYPE_CHECKING:
    from pynumerics.regression.design import RegressionDesign


@dataclass
class RegressionModel:
    """
    User-facing fitted curve.

    Wraps the backend Result and provides prediction, residual
    diagnostics, the metrics battery and the formatted equation.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign'

    # Cached computations
    _metrics: dict[str, float] | None = None

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._result.params.coefficients

    @property
    def model(self) -> str:
        return self._result.params.model

    @property
    def order(self) -> int | None:
        """Polynomial order, or None for the closed-form models."""
        return self._result.params.order

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Evaluate the fitted curve.

        Returns a float for scalar input and an array otherwise.
        """
        values = evaluate(self.model, self.coefficients, x)
        if np.ndim(values) == 0:
            return float(values)
        return values

    @property
    def metrics(self) -> dict[str, float]:
        """
        Goodness-of-fit battery: mean_absolute_error, mean_squared_error,
        root_mean_squared_error, mean_absolute_percentage_error, r2_score
        and r2_score_adjusted.
        """
        if self._metrics is None:
            self._metrics = compute_metrics(
                self._design.y,
                self.fitted_values,
                len(self.coefficients),
            )
        return dict(self._metrics)

    @property
    def equation(self) -> Equation:
        return build_equation(self.model, self.coefficients)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        metrics = self.metrics
        model_name = self.model
        if self.order is not None:
            model_name = f"{model_name} (order {self.order})"

        lines = [
            "Least Squares Fit Results",
            "=" * 60,
            f"Model: {model_name}",
            f"Observations: {self.n}",
            f"Dropped records: {self._design.n_dropped}",
            f"Equation: {self.equation.with_parameters}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.coefficients):
            lines.append(f"  c[{i}]: {coef:14.6f}")

        lines.append("-" * 60)
        lines.append(f"R-squared: {metrics['r2_score']:.6f}")
        lines.append(f"Adj. R-squared: {metrics['r2_score_adjusted']:.6f}")
        lines.append(f"RMSE: {metrics['root_mean_squared_error']:.6f}")
        lines.append(f"MAE: {metrics['mean_absolute_error']:.6f}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionModel(model={self.model!r}, n={self.n}, "
            f"coefficients={self.coefficients})"
        )
