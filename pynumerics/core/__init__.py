"""
Core infrastructure for pynumerics.

This module provides shared abstractions and utilities used by all
domain-specific submodules (linalg, regression, integration, etc.).

Key components:
    protocols: Shape, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    numeric: Rounding, angle conversion, interpolation helpers
    compute: Timing, tolerances
"""

from pynumerics.core.protocols import Shape, Backend
from pynumerics.core.result import Result
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    PathTooShortError,
    NumericalError,
    SingularMatrixError,
    ParallelLineError,
)

__all__ = [
    # Protocols
    "Shape",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "PathTooShortError",
    "NumericalError",
    "SingularMatrixError",
    "ParallelLineError",
]
