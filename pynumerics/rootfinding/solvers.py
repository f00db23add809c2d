"""
Brent's method for scalar root finding.

The bracketing and interpolation work is delegated to
scipy.optimize.brentq; this module decides which bracket to hand it.
"""

import warnings
from typing import Callable

import numpy as np
from scipy.optimize import brentq

from pynumerics.core.compute.tolerances import BRENT_TOLERANCE
from pynumerics.core.exceptions import ValidationError


def _find_sign_change(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    subdivisions: int,
) -> tuple[float, float] | float | None:
    """
    Scan [lower, upper] from the lower end for the first sub-bracket with a
    sign change.

    Returns:
        A (lo, hi) bracket, an exact root hit by the scan, or None
    """
    grid = np.linspace(lower, upper, subdivisions + 1).tolist()
    prev_x, prev_f = grid[0], f(grid[0])
    for x in grid[1:]:
        fx = f(x)
        if fx == 0:
            return x
        if prev_f * fx < 0:
            return prev_x, x
        prev_x, prev_f = x, fx
    return None


def brent(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    tolerance: float = BRENT_TOLERANCE,
    *,
    subdivisions: int = 100,
) -> float:
    """
    Find a root of f in [lower, upper].

    An endpoint where f is exactly zero is returned as is. When f changes
    sign between the endpoints, Brent's method converges to a root inside
    the bracket. Otherwise the interval is scanned in ``subdivisions``
    equal steps from ``lower`` and the first sub-bracket with a sign change
    is solved instead.

    When no sign change is found at all the endpoint with the smaller
    ``|f|``, the one nearest to a sign change, is returned with a
    UserWarning. That endpoint is generally not a root.

    Args:
        f: Scalar function of one float
        lower: Lower end of the bracket
        upper: Upper end of the bracket
        tolerance: Absolute tolerance on the root
        subdivisions: Scan resolution for brackets without a sign change

    Returns:
        Abscissa of the root (or of the fallback endpoint)

    Raises:
        ValidationError: If lower >= upper or tolerance <= 0

    Example:
        >>> brent(lambda x: x * x - x - 2, 0, 10)  # close to 2
    """
    if not lower < upper:
        raise ValidationError(
            f"lower: must be strictly below upper, got lower={lower}, upper={upper}"
        )
    if tolerance <= 0:
        raise ValidationError(f"tolerance: must be > 0, got {tolerance}")

    f_lower, f_upper = f(lower), f(upper)
    if f_lower == 0:
        return float(lower)
    if f_upper == 0:
        return float(upper)

    if f_lower * f_upper < 0:
        return float(brentq(f, lower, upper, xtol=tolerance))

    found = _find_sign_change(f, lower, upper, subdivisions)
    if isinstance(found, tuple):
        return float(brentq(f, found[0], found[1], xtol=tolerance))
    if found is not None:
        return float(found)

    nearest = lower if abs(f_lower) <= abs(f_upper) else upper
    warnings.warn(
        f"No sign change of f in [{lower}, {upper}]; "
        f"returning the endpoint {nearest}, which is not a root",
        UserWarning,
        stacklevel=2,
    )
    return float(nearest)
