"""
Exception hierarchy for pynumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericsError(Exception):
    """Base exception for all pynumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when a
    square matrix is required but not given, or when a vector or matrix
    is built from non-finite entries.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Two paired one-dimensional inputs have different lengths.

    Raised by the sampled-function integrators, where the abscissae and
    the function values must line up one to one.

    Attributes:
        lengths: Mapping of parameter name to the length received
    """

    def __init__(
        self,
        message: str,
        lengths: dict[str, int] | None = None,
    ):
        super().__init__(message)
        self.lengths = lengths


class PathTooShortError(ValidationError):
    """
    A sampled path has too few points to define a single segment.

    Attributes:
        n_points: Number of points received
        min_points: Minimum number of points required
    """

    def __init__(
        self,
        message: str,
        n_points: int | None = None,
        min_points: int = 2,
    ):
        super().__init__(message)
        self.n_points = n_points
        self.min_points = min_points


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gauss-Jordan elimination cannot find a non-zero pivot
    for one of the columns, so the matrix has no inverse.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column for which no non-zero pivot exists
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column


class ParallelLineError(NumericalError):
    """
    A line is parallel to the x-axis and never crosses it.

    Attributes:
        y: The constant ordinate of the line
    """

    def __init__(self, message: str, y: float | None = None):
        super().__init__(message)
        self.y = y
