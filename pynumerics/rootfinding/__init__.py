"""
Scalar root finding.

Public API:
    brent(f, lower, upper, tolerance=1e-7) -> float
"""

from pynumerics.rootfinding.solvers import brent

__all__ = [
    "brent",
]
