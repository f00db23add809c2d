"""
Solver dispatch for Monte Carlo estimation.
"""

from typing import Sequence

from pynumerics.core.compute.tolerances import MONTECARLO_ITERATIONS, MONTECARLO_POINTS
from pynumerics.core.protocols import Shape
from pynumerics.montecarlo.design import MonteCarloDesign
from pynumerics.montecarlo.solution import MonteCarloSolution
from pynumerics.montecarlo.backends.cpu import CPUMonteCarloBackend


def montecarlo_integration(
    shapes: Sequence[Shape],
    *,
    num_points: int = MONTECARLO_POINTS,
    iterations: int = MONTECARLO_ITERATIONS,
    seed: int | None = None,
) -> MonteCarloSolution:
    """
    Estimate the area (2D) or volume (3D) of a union of shapes.

    Each iteration draws ``num_points`` uniform points in the combined
    bounding box and scales the fraction that falls inside any shape by
    the box measure. The iterations are averaged.

    Args:
        shapes: Shapes satisfying the Shape protocol, all of one dimension
        num_points: Points per iteration
        iterations: Number of estimates to average
        seed: Random seed for reproducibility

    Returns:
        MonteCarloSolution

    Raises:
        ValidationError: If shapes is empty or settings are < 1
        DimensionError: If shapes differ in dimension

    Example:
        >>> from pynumerics.geometry import Circle
        >>> result = montecarlo_integration([Circle(radius=1)], seed=42)
        >>> result.estimate  # close to pi
    """
    design = MonteCarloDesign.for_shapes(
        shapes, num_points, iterations, seed=seed,
    )
    result = CPUMonteCarloBackend().solve(design)
    return MonteCarloSolution(_result=result, _design=design)
