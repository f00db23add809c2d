"""
CPU backend for Monte Carlo area and volume estimation.
"""

from __future__ import annotations

import math

import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.geometry.bounding_box import bounding_box_addition, bounding_box_measure
from pynumerics.montecarlo._common import MonteCarloParams
from pynumerics.montecarlo.design import MonteCarloDesign


class CPUMonteCarloBackend:
    """
    CPU backend for hit-or-miss estimation.

    Points are drawn uniformly in the combined bounding box of all shapes;
    a point is a hit when it lies inside any shape.
    """

    @property
    def name(self) -> str:
        return 'cpu_montecarlo'

    def solve(self, design: MonteCarloDesign) -> Result[MonteCarloParams]:
        """Run the estimation and return Result[MonteCarloParams]."""
        shapes = design.shapes
        rng = np.random.default_rng(design.seed)
        warnings_list: list[str] = []
        estimates = np.empty(design.iterations, dtype=np.float64)

        with Timer() as timer:
            with timer.section('bounding_box'):
                box = bounding_box_addition([shape.bounding_box for shape in shapes])
                measure = bounding_box_measure(box)
                lower = np.array(box[0])
                extent = np.array(box[1]) - lower

            if measure == 0:
                warnings_list.append(
                    "Combined bounding box has zero measure; every estimate is 0"
                )

            # 'sampling' accumulates over iterations
            for it in range(design.iterations):
                with timer.section('sampling'):
                    points = lower + rng.random((design.num_points, design.dimension)) * extent
                    hits = sum(
                        1 for point in points.tolist()
                        if any(shape.is_inside(point) for shape in shapes)
                    )
                    estimates[it] = hits / design.num_points * measure

            with timer.section('statistics'):
                estimate = float(np.mean(estimates))
                if design.iterations > 1:
                    std_error = float(np.std(estimates, ddof=1) / math.sqrt(design.iterations))
                else:
                    std_error = float('nan')

        params = MonteCarloParams(
            estimate=estimate,
            estimates=estimates,
            std_error=std_error,
            bounding_box=box,
            box_measure=measure,
        )

        return Result(
            params=params,
            info={
                'method': 'hit_or_miss',
                'num_points': design.num_points,
                'iterations': design.iterations,
                'seed': design.seed,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
