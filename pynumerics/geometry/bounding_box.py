"""
Axis-aligned bounding boxes.

A box is the pair ``(minimums, maximums)`` with one coordinate per
dimension in each entry.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.validation import check_array, check_finite


BoundingBox = tuple[tuple[float, ...], tuple[float, ...]]


def _check_box(box: ArrayLike, name: str = 'box') -> NDArray[np.floating[Any]]:
    arr = check_array(box, name)
    if arr.ndim != 2 or arr.shape[0] != 2 or arr.shape[1] == 0:
        raise DimensionError(
            f"{name}: expected [[min_1, ..., min_k], [max_1, ..., max_k]], got shape {arr.shape}"
        )
    check_finite(arr, name)
    return arr


def as_bounding_box(minimums: ArrayLike, maximums: ArrayLike) -> BoundingBox:
    """Normalise a pair of corner coordinates to a tuple-of-tuples box."""
    arr = _check_box([minimums, maximums])
    return tuple(float(v) for v in arr[0]), tuple(float(v) for v in arr[1])


def random_point_in_box(
    box: ArrayLike,
    rng: np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """Uniform random point inside ``box``."""
    arr = _check_box(box)
    if rng is None:
        rng = np.random.default_rng()
    return arr[0] + rng.random(arr.shape[1]) * (arr[1] - arr[0])


def bounding_box_addition(boxes: Sequence[ArrayLike]) -> BoundingBox:
    """
    Smallest box containing every box in ``boxes``.

    Raises:
        ValidationError: If ``boxes`` is empty
        DimensionError: If the boxes differ in dimension
    """
    if len(boxes) == 0:
        raise ValidationError("boxes: requires at least one bounding box")

    arrays = [_check_box(box, f'boxes[{i}]') for i, box in enumerate(boxes)]
    dims = {arr.shape[1] for arr in arrays}
    if len(dims) > 1:
        raise DimensionError(
            f"boxes: all bounding boxes must have the same dimension, got {sorted(dims)}"
        )

    stacked = np.stack(arrays)
    minimums = stacked[:, 0, :].min(axis=0)
    maximums = stacked[:, 1, :].max(axis=0)
    return as_bounding_box(minimums, maximums)


def bounding_box_measure(box: ArrayLike) -> float:
    """Product of the box extents: length, area, volume, ..."""
    arr = _check_box(box)
    return float(np.prod(arr[1] - arr[0]))


def bounding_box_area(box: ArrayLike) -> float:
    """
    Area of a 2D box.

    Raises:
        DimensionError: If the box is not two-dimensional
    """
    arr = _check_box(box)
    if arr.shape[1] != 2:
        raise DimensionError(f"box: expected a 2D bounding box, got {arr.shape[1]}D")
    return bounding_box_measure(arr)


def bounding_box_volume(box: ArrayLike) -> float:
    """
    Volume of a 3D box.

    Raises:
        DimensionError: If the box is not three-dimensional
    """
    arr = _check_box(box)
    if arr.shape[1] != 3:
        raise DimensionError(f"box: expected a 3D bounding box, got {arr.shape[1]}D")
    return bounding_box_measure(arr)
