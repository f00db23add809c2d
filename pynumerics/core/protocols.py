"""
Core protocols for pynumerics.

These define structural interfaces that domain-specific implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal typing)
so that any object exposing the right members can take part, including
user-defined shapes for Monte Carlo integration.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Sequence, runtime_checkable

from pynumerics.core.result import Result

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Shape(Protocol):
    """
    Minimal protocol for a bounded region of k-dimensional space.

    Consumed by Monte Carlo integration, which only needs to know where
    to sample and whether a sample landed inside.
    """

    @property
    def bounding_box(self) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """
        Axis-aligned bounding box as ``(minimums, maximums)``.

        Both entries have one coordinate per dimension.
        """
        ...

    def is_inside(self, point: Sequence[float]) -> bool:
        """Return True if ``point`` (k coordinates) lies in the region."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload.

    Backends are stateless beyond construction-time configuration, which
    makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_normal_equations', 'cpu_closed_form', 'cpu_montecarlo'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution (singularity, etc.)
            ValidationError: If design is invalid for this backend
        """
        ...
