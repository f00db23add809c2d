"""
pynumerics: small numerical-methods toolkit for Python.

Dense linear algebra on small matrices, least-squares curve fitting and
deterministic and Monte Carlo integration, with a Brent root finder and
probability helpers alongside.

Submodules:
    linalg: Vector and Matrix (Gauss-Jordan inverse, Laplace determinant)
    regression: Polynomial, logarithmic, exponential and power-law fits
    integration: Trapezoidal rule, stretch decomposition, Gauss-Legendre
    montecarlo: Area/volume estimation over unions of shapes
    geometry: Bounding boxes, shapes, 2D points and lines
    rootfinding: Brent's method
    probability: Random sampling, normal distribution fit
"""

__version__ = "0.1.0"

from pynumerics import linalg
from pynumerics import regression
from pynumerics import integration
from pynumerics import montecarlo
from pynumerics import geometry
from pynumerics import rootfinding
from pynumerics import probability

__all__ = [
    "__version__",
    "linalg",
    "regression",
    "integration",
    "montecarlo",
    "geometry",
    "rootfinding",
    "probability",
]
