"""
Probability helpers.

Public API:
    random_interval(low=0, high=1, *, rng=None) -> float
    random_from_normal_distribution(mean, std_dev, *, rng=None) -> float
    normal_distribution(values) -> NormalDistribution
"""

from pynumerics.probability.sampling import (
    NormalDistribution,
    random_interval,
    random_from_normal_distribution,
    normal_distribution,
)

__all__ = [
    "NormalDistribution",
    "random_interval",
    "random_from_normal_distribution",
    "normal_distribution",
]
