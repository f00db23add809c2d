"""
Shared compute infrastructure for pynumerics.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances, iteration defaults and tolerance tiers
"""

from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import (
    DEFAULT_EPSILON,
    NEWTON_ITERATIONS,
    MONTECARLO_POINTS,
    MONTECARLO_ITERATIONS,
    BRENT_TOLERANCE,
    ToleranceTier,
    select_tolerance,
    are_equal,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "DEFAULT_EPSILON",
    "NEWTON_ITERATIONS",
    "MONTECARLO_POINTS",
    "MONTECARLO_ITERATIONS",
    "BRENT_TOLERANCE",
    "ToleranceTier",
    "select_tolerance",
    "are_equal",
]
