"""
Random sampling and normal-distribution helpers.

Every sampler takes an optional numpy Generator. Pass a seeded one
(``np.random.default_rng(42)``) for reproducible draws.
"""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.validation import check_array, check_1d, check_finite, check_min_samples


@dataclass(frozen=True)
class NormalDistribution:
    """Mean and population standard deviation of a sample."""
    mean: float
    standard_deviation: float


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    return rng


def random_interval(
    low: float = 0.0,
    high: float = 1.0,
    *,
    rng: np.random.Generator | None = None,
) -> float:
    """Uniform random number in [low, high)."""
    rng = _generator(rng)
    return low + rng.random() * (high - low)


def random_from_normal_distribution(
    mean: float,
    std_dev: float,
    *,
    rng: np.random.Generator | None = None,
) -> float:
    """
    One draw from N(mean, std_dev²) by the Marsaglia polar method.

    Pairs (u, v) uniform on the square [-1, 1)² are rejected until they
    fall strictly inside the unit circle, excluding the origin.
    """
    rng = _generator(rng)
    while True:
        u = rng.random() * 2 - 1
        v = rng.random() * 2 - 1
        s = u * u + v * v
        if 0 < s < 1:
            break
    factor = math.sqrt(-2.0 * math.log(s) / s)
    return mean + std_dev * u * factor


def normal_distribution(values: ArrayLike) -> NormalDistribution:
    """
    Fit a normal distribution to a population.

    The standard deviation divides by n (population), not n - 1.

    Raises:
        ValidationError: If values is empty or not numeric
        DimensionError: If values is not 1D or contains NaN/Inf
    """
    arr = check_array(values, 'values')
    check_1d(arr, 'values')
    check_min_samples(arr, 1, 'values')
    check_finite(arr, 'values')

    mean = float(np.mean(arr))
    return NormalDistribution(
        mean=mean,
        standard_deviation=float(np.sqrt(np.mean((arr - mean) ** 2))),
    )
