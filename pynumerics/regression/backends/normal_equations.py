"""
CPU backend for polynomial least squares.

Solves the normal equations (AᵗA) c = Aᵗy with the Gauss-Jordan inverse
of the small (order+1) x (order+1) matrix AᵗA. Squaring the design matrix
squares its condition number, so high orders over wide abscissa ranges
lose digits; that shows up as inaccurate coefficients, not as an error.
"""

from typing import Any

import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.linalg import Vector
from pynumerics.regression.design import RegressionDesign
from pynumerics.regression._common import RegressionParams, evaluate


class NormalEquationsBackend:
    """
    CPU backend fitting ``y = c_0 x^k + ... + c_k`` via the normal equations.

    Implements the Backend protocol for RegressionDesign -> RegressionParams.

    Precondition: at least order + 1 distinct abscissae. It is not checked.
    With fewer, AᵗA is singular in exact arithmetic but rounding usually
    leaves every pivot non-zero, so the solve returns arbitrary
    coefficients without raising.
    """

    def __init__(self, order: int = 2):
        self._order = order

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    @property
    def order(self) -> int:
        return self._order

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        """
        Fit the polynomial.

        Algorithm:
            1. Build A with rows [x^k, ..., x, 1]
            2. Invert AᵗA by Gauss-Jordan elimination
            3. coefficients = (AᵗA)⁻¹ (Aᵗy)

        Raises:
            SingularMatrixError: If elimination meets an exactly zero pivot,
                as with all abscissae equal
        """
        with Timer() as timer:
            with timer.section('normal_equations'):
                A = design.design_matrix(self._order)
                At = A.transpose()
                AtA = At.multiply(A)
                Aty = Vector(design.y).transform(At)

            with timer.section('inverse'):
                AtA_inv = AtA.inverse()

            with timer.section('solve'):
                coefficients = tuple(Aty.transform(AtA_inv).to_array())

            with timer.section('residuals'):
                fitted_values = evaluate('polynomial', coefficients, design.x)
                residuals = design.y - fitted_values

            with timer.section('statistics'):
                rss = float(residuals @ residuals)
                tss = float(np.sum((design.y - np.mean(design.y)) ** 2))

        params = RegressionParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            model='polynomial',
            order=self._order,
            rss=rss,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'order': self._order,
            'n_dropped': design.n_dropped,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
