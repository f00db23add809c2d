"""
CPU backend for the linearisable two-parameter models.

    logarithmic:  y = a + b ln(x)
    exponential:  y = a exp(b x)     (fit ln y = ln a + b x)
    power:        y = a x^b          (fit ln y = ln a + b ln x)

Each is an ordinary straight-line least-squares fit on transformed
variables, solved with the closed-form sums. No matrix is inverted.
"""

from typing import Any

import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.validation import check_positive
from pynumerics.regression.design import RegressionDesign
from pynumerics.regression._common import RegressionParams, evaluate


CLOSED_FORM_MODELS = ('logarithmic', 'exponential', 'power')


def _line_fit(u: np.ndarray, v: np.ndarray) -> tuple[float, float]:
    """Least-squares intercept and slope of v against u."""
    n = u.shape[0]
    sum_u = np.sum(u)
    sum_v = np.sum(v)
    denom = n * np.sum(u * u) - sum_u ** 2
    slope = (n * np.sum(u * v) - sum_u * sum_v) / denom
    intercept = (sum_v - slope * sum_u) / n
    return float(intercept), float(slope)


class ClosedFormBackend:
    """
    CPU backend for logarithmic, exponential and power-law fits.

    Implements the Backend protocol for RegressionDesign -> RegressionParams.
    Coefficients are returned as ``(a, b)`` in the model's own parameters.
    """

    def __init__(self, model: str):
        if model not in CLOSED_FORM_MODELS:
            raise ValueError(
                f"model: expected one of {CLOSED_FORM_MODELS}, got {model!r}"
            )
        self._model = model

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    @property
    def model(self) -> str:
        return self._model

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        """
        Fit the model.

        Raises:
            ValidationError: If x (logarithmic, power) or y (exponential,
                power) has non-positive entries
        """
        x, y = design.x, design.y
        if self._model in ('logarithmic', 'power'):
            check_positive(x, 'x')
        if self._model in ('exponential', 'power'):
            check_positive(y, 'y')

        with Timer() as timer:
            with timer.section('linearised_fit'):
                if self._model == 'logarithmic':
                    a, b = _line_fit(np.log(x), y)
                elif self._model == 'exponential':
                    ln_a, b = _line_fit(x, np.log(y))
                    a = float(np.exp(ln_a))
                else:
                    ln_a, b = _line_fit(np.log(x), np.log(y))
                    a = float(np.exp(ln_a))
                coefficients = (a, b)

            with timer.section('residuals'):
                fitted_values = evaluate(self._model, coefficients, x)
                residuals = y - fitted_values

            with timer.section('statistics'):
                rss = float(residuals @ residuals)
                tss = float(np.sum((y - np.mean(y)) ** 2))

        params = RegressionParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            model=self._model,
            order=None,
            rss=rss,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'model': self._model,
            'n_dropped': design.n_dropped,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
