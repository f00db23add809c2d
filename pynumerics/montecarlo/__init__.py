"""
Monte Carlo estimation of areas and volumes.

Usage:
    from pynumerics.geometry import Circle, Rectangle
    from pynumerics.montecarlo import montecarlo_integration

    result = montecarlo_integration(
        [Circle(center=(0, 0), radius=1), Rectangle(center=(1, 0))],
        num_points=1000, iterations=50, seed=42,
    )
    print(result.estimate)
    print(result.summary())
"""

from pynumerics.montecarlo.design import MonteCarloDesign
from pynumerics.montecarlo._common import MonteCarloParams
from pynumerics.montecarlo.solution import MonteCarloSolution
from pynumerics.montecarlo.solvers import montecarlo_integration

__all__ = [
    "montecarlo_integration",
    "MonteCarloDesign",
    "MonteCarloParams",
    "MonteCarloSolution",
]
