"""
Deterministic numerical integration.

Public API:
    trapezoidal_force(x, f) -> float
    trapezoidal_moment(x, f, xref=0.0) -> float
    resultant_stretches(path, values) -> list[Stretch]
    gauss_legendre(f, a, b, order) -> float
    gauss_legendre_by_intervals(f, breakpoints, order) -> float | None

Monte Carlo estimation of areas and volumes lives in pynumerics.montecarlo.
"""

from pynumerics.integration.trapezoidal import trapezoidal_force, trapezoidal_moment
from pynumerics.integration.stretches import Stretch, resultant_stretches
from pynumerics.integration.quadrature import (
    legendre_coefficients,
    legendre_polynomial,
    legendre_roots_weights,
    gauss_legendre,
    gauss_legendre_by_intervals,
)

__all__ = [
    # Trapezoidal rule
    "trapezoidal_force",
    "trapezoidal_moment",
    # Stretches
    "Stretch",
    "resultant_stretches",
    # Gauss-Legendre
    "legendre_coefficients",
    "legendre_polynomial",
    "legendre_roots_weights",
    "gauss_legendre",
    "gauss_legendre_by_intervals",
]
