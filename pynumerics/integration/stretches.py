"""
Same-sign stretch decomposition of a sampled function.

A function sampled along a path (the stress over a beam section under
bending, say) can change sign several times. resultant_stretches() splits
the path into maximal runs over which the function keeps one sign,
inserting the interpolated zero crossing between samples of opposite
sign, and integrates each run with the trapezoidal rule.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import PathTooShortError
from pynumerics.core.validation import check_array, check_1d, check_consistent_length
from pynumerics.geometry.lines import find_line_xaxis_intersection
from pynumerics.integration.trapezoidal import trapezoidal_force, trapezoidal_moment


@dataclass(frozen=True)
class Stretch:
    """
    One same-sign run of the sampled function.

    Attributes:
        start: Path coordinate where the run begins
        end: Path coordinate where the run ends
        resultant: Signed area under the run
        centroid: Path coordinate of the area centroid (0.0 when the
            resultant is zero)
    """
    start: float
    end: float
    resultant: float
    centroid: float


def _integrate(
    path: NDArray[np.floating[Any]],
    values: NDArray[np.floating[Any]],
    lo: int,
    hi: int,
    lead: float | None,
    trail: float | None,
) -> Stretch:
    """
    Close the run over samples lo..hi, optionally bracketed by zero
    crossings at ``lead`` (before lo) and ``trail`` (after hi).
    """
    x_parts = [path[lo:hi + 1]]
    f_parts = [values[lo:hi + 1]]
    if lead is not None:
        x_parts.insert(0, [lead])
        f_parts.insert(0, [0.0])
    if trail is not None:
        x_parts.append([trail])
        f_parts.append([0.0])

    x = np.concatenate(x_parts)
    f = np.concatenate(f_parts)

    resultant = trapezoidal_force(x, f)
    centroid = 0.0 if resultant == 0 else trapezoidal_moment(x, f) / resultant

    return Stretch(
        start=float(x[0]),
        end=float(x[-1]),
        resultant=resultant,
        centroid=centroid,
    )


def resultant_stretches(path: ArrayLike, values: ArrayLike) -> list[Stretch]:
    """
    Split a sampled function into same-sign stretches and integrate each.

    A sample that is exactly zero ends the current stretch there and
    starts the next one. Between two samples of strictly opposite sign the
    crossing is interpolated linearly: the current stretch ends at the
    crossing and the next one starts from it. The stretches tile
    ``[path[0], path[-1]]``; a final sample of exactly zero closes the
    last stretch without adding an empty one after it.

    Args:
        path: Path coordinates (n,), typically monotonic
        values: Function values at the path coordinates (n,)

    Returns:
        Stretches in path order

    Raises:
        PathTooShortError: If fewer than two points are given
        LengthMismatchError: If path and values differ in length

    Example:
        >>> [s.resultant for s in resultant_stretches([-1, 1], [-1, 1])]
        [-0.5, 0.5]
    """
    p = check_array(path, 'path')
    r = check_array(values, 'values')
    check_1d(p, 'path')
    check_1d(r, 'values')

    n = p.shape[0]
    if n < 2:
        raise PathTooShortError(
            f"The path should have at least two points, got {n}",
            n_points=n,
        )
    check_consistent_length(p, r, names=('path', 'values'))

    stretches: list[Stretch] = []
    lo = 0
    lead: float | None = None

    for i in range(1, n):
        if r[i] == 0:
            stretches.append(_integrate(p, r, lo, i, lead, None))
            lo, lead = i, None

        elif r[i] * r[i - 1] < 0:
            crossing = find_line_xaxis_intersection(p[i - 1], r[i - 1], p[i], r[i])
            stretches.append(_integrate(p, r, lo, i - 1, lead, float(crossing)))
            lo, lead = i, float(crossing)

            if i == n - 1:
                stretches.append(_integrate(p, r, lo, i, lead, None))

        elif i == n - 1:
            stretches.append(_integrate(p, r, lo, i, lead, None))

    return stretches
