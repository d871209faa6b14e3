"""
Iteration limits for the iterative numerical routines.

Each continued fraction, series and root finder in the package reads its
cap and tolerance from one of the named records below so the limits are
defined in exactly one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IterationLimits:
    """Iteration cap and convergence tolerance for an iterative routine."""
    max_iter: int
    tol: float
    name: str
    description: str


# Lentz continued fraction for the incomplete beta function
BETACF = IterationLimits(
    max_iter=200,
    tol=3e-14,
    name='betacf',
    description='Continued fraction for I_x(a, b), relative change in the convergent',
)

# Floor substituted for near-zero denominators in the Lentz recurrences
BETACF_FPMIN = 1e-300

# Power series for P(s, x) when x < s + 1
GAMMA_SERIES = IterationLimits(
    max_iter=10_000,
    tol=1e-15,
    name='gamma_series',
    description='Series for P(s, x), absolute size of the last term',
)

# Continued fraction for Q(s, x) when x >= s + 1
GAMMA_CF = IterationLimits(
    max_iter=10_000,
    tol=1e-14,
    name='gamma_cf',
    description='Continued fraction for Q(s, x), relative change in the convergent',
)

# Bisection used to invert monotone CDFs
BISECTION = IterationLimits(
    max_iter=200,
    tol=1e-8,
    name='bisection',
    description='CDF bisection, |F(m) - target| or bracket width',
)

# Number of symmetric bracket expansions before bisection gives up looking
MAX_BRACKET_EXPANSIONS = 60
