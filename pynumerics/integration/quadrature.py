"""
Gauss-Legendre quadrature.

The n nodes are the roots of the degree-n Legendre polynomial P_n, found
by Newton-Raphson from Chebyshev-like initial guesses. Newton runs a
fixed number of iterations per root unless a convergence tolerance is
supplied. Nodes and weights are recomputed on every call.

An n-point rule integrates polynomials of degree 2n - 1 exactly. It
converges slowly for discontinuous integrands; split the interval at the
discontinuities with gauss_legendre_by_intervals() instead.
"""

import math
from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from pynumerics.core.compute.tolerances import NEWTON_ITERATIONS
from pynumerics.core.exceptions import ValidationError


Polynomial = Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]


def _check_order(order: int) -> int:
    if int(order) != order or order < 1:
        raise ValidationError(f"order: must be an integer >= 1, got {order!r}")
    return int(order)


def legendre_coefficients(n: int) -> list[float]:
    """
    Coefficients of P_n, by decreasing power in steps of two.

    ``coef[m] = (-1)^m (2n-2m)! / (2^n m! (n-m)! (n-2m)!)`` multiplies
    ``x^(n-2m)`` for ``m = 0..floor(n/2)``. Factorials are exact integers.

    >>> legendre_coefficients(2)
    [1.5, -0.5]
    """
    if int(n) != n or n < 0:
        raise ValidationError(f"n: must be an integer >= 0, got {n!r}")
    n = int(n)

    f = math.factorial
    return [
        (-1) ** m * f(2 * n - 2 * m) / (2 ** n * f(m) * f(n - m) * f(n - 2 * m))
        for m in range(n // 2 + 1)
    ]


def legendre_polynomial(n: int) -> tuple[Polynomial, Polynomial]:
    """
    P_n and its derivative as vectorised callables.

    Returns:
        Tuple of (P_n, dP_n/dx)
    """
    coef = np.array(legendre_coefficients(n))
    powers = n - 2 * np.arange(coef.shape[0])

    # The constant term of an even P_n vanishes on differentiation
    d_coef = coef * powers
    d_powers = np.maximum(powers - 1, 0)

    def p(x):
        x = np.asarray(x, dtype=np.float64)
        return np.sum(coef * x[..., np.newaxis] ** powers, axis=-1)

    def dp(x):
        x = np.asarray(x, dtype=np.float64)
        return np.sum(d_coef * x[..., np.newaxis] ** d_powers, axis=-1)

    return p, dp


def legendre_roots_weights(
    n: int,
    *,
    iterations: int = NEWTON_ITERATIONS,
    tol: float | None = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Nodes and weights of the n-point Gauss-Legendre rule on [-1, 1].

    Initial guesses ``cos(pi (i + 0.75) / (n + 0.5))`` for ``i = 0..n-1``
    are refined by ``iterations`` Newton-Raphson steps, all roots at once.
    With ``tol`` set, iteration stops early once every step is below it.

    Weights are ``2 / ((1 - x^2) P_n'(x)^2)``.

    Returns:
        Tuple of (nodes, weights), nodes in decreasing order
    """
    n = _check_order(n)
    if iterations < 0:
        raise ValidationError(f"iterations: must be >= 0, got {iterations}")

    p, dp = legendre_polynomial(n)

    roots = np.cos(np.pi * (np.arange(n) + 0.75) / (n + 0.5))
    for _ in range(iterations):
        step = p(roots) / dp(roots)
        roots = roots - step
        if tol is not None and np.all(np.abs(step) < tol):
            break

    weights = 2 / ((1 - roots ** 2) * dp(roots) ** 2)
    return roots, weights


def gauss_legendre(
    f: Callable[[float], float],
    a: float,
    b: float,
    order: int,
    *,
    iterations: int = NEWTON_ITERATIONS,
    tol: float | None = None,
) -> float:
    """
    Approximate the integral of f over [a, b] with an ``order``-point rule.

    ``f`` is called once per node with a float.

    Raises:
        ValidationError: If order < 1

    Example:
        >>> gauss_legendre(lambda x: x * x, 0, 2, 10)  # 8/3
    """
    roots, weights = legendre_roots_weights(order, iterations=iterations, tol=tol)

    half_width = (b - a) / 2
    midpoint = (a + b) / 2
    values = np.array([f(half_width * x + midpoint) for x in roots.tolist()], dtype=np.float64)
    return float(half_width * np.sum(weights * values))


def gauss_legendre_by_intervals(
    f: Callable[[float], float],
    breakpoints: Sequence[float],
    order: int,
    *,
    iterations: int = NEWTON_ITERATIONS,
    tol: float | None = None,
) -> float | None:
    """
    Composite Gauss-Legendre: sum of the rule over each consecutive pair
    of breakpoints.

    Place breakpoints at known discontinuities or sign changes so that
    every sub-interval is smooth.

    Returns:
        The integral, or None when fewer than two breakpoints are given
    """
    if len(breakpoints) < 2:
        return None

    return sum(
        gauss_legendre(f, lo, hi, order, iterations=iterations, tol=tol)
        for lo, hi in zip(breakpoints[:-1], breakpoints[1:])
    )
