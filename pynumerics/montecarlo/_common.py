"""
Common data structures for Monte Carlo estimation.

MonteCarloParams is the parameter payload wrapped by Result[P] and
exposed through MonteCarloSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumerics.geometry.bounding_box import BoundingBox


@dataclass(frozen=True)
class MonteCarloParams:
    """
    Parameter payload for area/volume estimation.

    - estimate: mean of the per-iteration estimates
    - estimates: one estimate per iteration, (hits / num_points) x box measure
    - std_error: standard error of the mean (NaN for a single iteration)
    """
    estimate: float
    estimates: NDArray[np.floating[Any]]       # shape (iterations,)
    std_error: float
    bounding_box: BoundingBox
    box_measure: float
