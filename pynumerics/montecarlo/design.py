"""
Design for Monte Carlo area and volume estimation.

MonteCarloDesign encapsulates the shapes and sampling settings needed by
backends. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pynumerics.core.compute.tolerances import MONTECARLO_ITERATIONS, MONTECARLO_POINTS
from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.protocols import Shape


@dataclass(frozen=True)
class MonteCarloDesign:
    """
    Frozen design for hit-or-miss estimation over a union of shapes.

    Attributes:
        shapes: Shapes whose union is measured. Each satisfies the Shape
            protocol (``bounding_box`` and ``is_inside(point)``).
        num_points: Random points drawn per iteration.
        iterations: Number of independent estimates to average.
        seed: Random seed for reproducibility.
        dimension: Number of coordinates shared by all shapes.
    """
    shapes: tuple[Shape, ...]
    num_points: int
    iterations: int
    seed: int | None
    dimension: int

    @classmethod
    def for_shapes(
        cls,
        shapes: Sequence[Shape],
        num_points: int = MONTECARLO_POINTS,
        iterations: int = MONTECARLO_ITERATIONS,
        *,
        seed: int | None = None,
    ) -> MonteCarloDesign:
        """
        Create a design with validation.

        Raises:
            ValidationError: If shapes is empty, a shape does not satisfy
                the Shape protocol, or num_points/iterations < 1
            DimensionError: If the shapes differ in dimension
        """
        shapes = tuple(shapes)
        if not shapes:
            raise ValidationError("shapes: requires at least one shape")

        for i, shape in enumerate(shapes):
            if not isinstance(shape, Shape):
                raise ValidationError(
                    f"shapes[{i}]: {type(shape).__name__} has no bounding_box/is_inside"
                )

        dims = {len(shape.bounding_box[0]) for shape in shapes}
        if len(dims) > 1:
            raise DimensionError(
                f"shapes: all shapes must have the same dimension, got {sorted(dims)}"
            )

        if num_points < 1:
            raise ValidationError(f"num_points: must be >= 1, got {num_points}")
        if iterations < 1:
            raise ValidationError(f"iterations: must be >= 1, got {iterations}")

        return cls(
            shapes=shapes,
            num_points=int(num_points),
            iterations=int(iterations),
            seed=seed,
            dimension=dims.pop(),
        )
