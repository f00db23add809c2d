"""
Solution wrapper for Monte Carlo estimation.

MonteCarloSolution wraps Result[MonteCarloParams] and provides
convenient accessors and a summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pynumerics.core.result import Result
from pynumerics.geometry.bounding_box import BoundingBox
from pynumerics.montecarlo._common import MonteCarloParams

if TYPE_CHECKING:
    from pynumerics.montecarlo.design import MonteCarloDesign


_MEASURE_NAMES = {1: "Length", 2: "Area", 3: "Volume"}


@dataclass
class MonteCarloSolution:
    """
    User-facing area/volume estimate.
    """
    _result: Result[MonteCarloParams]
    _design: 'MonteCarloDesign'

    @property
    def estimate(self) -> float:
        return self._result.params.estimate

    @property
    def estimates(self) -> NDArray[np.floating[Any]]:
        return self._result.params.estimates

    @property
    def std_error(self) -> float:
        return self._result.params.std_error

    @property
    def bounding_box(self) -> BoundingBox:
        return self._result.params.bounding_box

    @property
    def box_measure(self) -> float:
        return self._result.params.box_measure

    @property
    def dimension(self) -> int:
        return self._design.dimension

    @property
    def num_points(self) -> int:
        return self._design.num_points

    @property
    def iterations(self) -> int:
        return self._design.iterations

    @property
    def seed(self) -> int | None:
        return self._design.seed

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

    def __float__(self) -> float:
        return self.estimate

    def summary(self) -> str:
        measure_name = _MEASURE_NAMES.get(self.dimension, "Measure")
        lines = [
            "Monte Carlo Estimation Results",
            "=" * 60,
            f"Shapes: {len(self._design.shapes)} ({self.dimension}D)",
            f"Points per iteration: {self.num_points}",
            f"Iterations: {self.iterations}",
            f"Bounding box: {self.bounding_box}",
            f"Bounding box {measure_name.lower()}: {self.box_measure:.6f}",
            "-" * 60,
            f"{measure_name}: {self.estimate:.6f}",
            f"Std. Error: {self.std_error:.6f}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MonteCarloSolution(estimate={self.estimate:.6f}, "
            f"iterations={self.iterations}, num_points={self.num_points}, "
            f"backend={self.backend_name!r})"
        )
