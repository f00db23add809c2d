"""
Monte Carlo backends.

Available backends:
    CPUMonteCarloBackend: hit-or-miss sampling over a union of shapes
"""

from pynumerics.montecarlo.backends.cpu import CPUMonteCarloBackend

__all__ = [
    "CPUMonteCarloBackend",
]
