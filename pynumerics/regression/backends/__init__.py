"""
Regression backends.

Available backends:
    NormalEquationsBackend: polynomial fits via the Gauss-Jordan inverse of AᵗA
    ClosedFormBackend: logarithmic, exponential and power-law fits
"""

from pynumerics.regression.backends.normal_equations import NormalEquationsBackend
from pynumerics.regression.backends.closed_form import ClosedFormBackend

__all__ = [
    "NormalEquationsBackend",
    "ClosedFormBackend",
]
