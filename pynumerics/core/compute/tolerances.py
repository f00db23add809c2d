"""
Tolerances and iteration defaults for numerical routines.

Defines:
- the default epsilon for approximate float comparison
- fixed iteration counts and sample sizes used as keyword defaults
- tolerance tiers describing the precision each compute path achieves

Nothing here is mutable state: every routine takes its tolerance as an
explicit keyword argument and only falls back to these constants.
"""

from dataclasses import dataclass


# Approximate equality threshold for are_equal() and the Vector predicates
DEFAULT_EPSILON = 1e-8

# Newton-Raphson refinement steps per Legendre root
NEWTON_ITERATIONS = 100

# Monte Carlo sample sizes
MONTECARLO_POINTS = 1000
MONTECARLO_ITERATIONS = 50

# Absolute bracket tolerance for Brent's method
BRENT_TOLERANCE = 1e-7


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Small dense matrices: Gauss-Jordan inverse, Laplace determinant
LINALG_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='linalg_fp64',
    description='Dense linear algebra on small matrices, double precision',
)

# Gauss-Legendre quadrature of smooth integrands
QUADRATURE_FP64 = ToleranceTier(
    rtol=1e-11,
    atol=1e-11,
    name='quadrature_fp64',
    description='Gauss-Legendre quadrature, polynomial integrands',
)

# Least squares through the normal equations
REGRESSION_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='regression_fp64',
    description='Normal equations on well-scaled abscissae',
)

# Normal equations square the condition number of the design matrix; high
# polynomial orders or wide abscissa ranges lose digits accordingly.
REGRESSION_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='regression_ill_conditioned',
    description='Normal equations with large powers of x',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """
    Select the tier for comparing the output of a named backend.

    Quadrature has no backend; compare it against QUADRATURE_FP64 directly.
    """
    if 'normal_equations' in backend_name or 'closed_form' in backend_name:
        if is_ill_conditioned:
            return REGRESSION_ILL_CONDITIONED
        return REGRESSION_FP64
    return LINALG_FP64


def are_equal(one: float, other: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Compare two numbers within an absolute tolerance.

    Returns True when ``|one - other| < epsilon``.
    """
    return abs(one - other) < epsilon
