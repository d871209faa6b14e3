"""
Generic numeric inverse for monotone CDFs.

Bisection with automatic bracket expansion: when F(lo) - target and
F(hi) - target have the same sign, both ends are pushed outward by the
initial width (hi - lo) up to MAX_BRACKET_EXPANSIONS times. Bisection
then runs until |F(m) - target| < tol or the bracket is narrower than tol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pyhtest.core.compute.tolerances import BISECTION, MAX_BRACKET_EXPANSIONS


@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a CDF inversion.

    Attributes
    ----------
    root : float
        Final midpoint.
    iterations : int
        Bisection steps performed.
    expansions : int
        Bracket expansions performed before bisection.
    converged : bool
        False if the iteration cap was reached or the target was never
        bracketed.
    """
    root: float
    iterations: int
    expansions: int
    converged: bool


def _same_sign(u: float, v: float) -> bool:
    return (u > 0 and v > 0) or (u < 0 and v < 0)


def bisect_cdf(
    cdf: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    tol: float = BISECTION.tol,
    max_iter: int = BISECTION.max_iter,
) -> RootResult:
    """Solve cdf(x) == target by bisection, returning diagnostics."""
    a, b = float(lo), float(hi)
    width = b - a
    fa = cdf(a) - target
    fb = cdf(b) - target

    expansions = 0
    while _same_sign(fa, fb) and expansions < MAX_BRACKET_EXPANSIONS:
        a -= width
        b += width
        fa = cdf(a) - target
        fb = cdf(b) - target
        expansions += 1
    bracketed = not _same_sign(fa, fb)

    for i in range(max_iter):
        m = 0.5 * (a + b)
        fm = cdf(m) - target
        if abs(fm) < tol or (b - a) < tol:
            return RootResult(root=m, iterations=i + 1, expansions=expansions,
                              converged=bracketed)
        if _same_sign(fa, fm):
            a, fa = m, fm
        else:
            b = m
    return RootResult(root=0.5 * (a + b), iterations=max_iter,
                      expansions=expansions, converged=False)


def invert_cdf(
    cdf: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    tol: float = BISECTION.tol,
    max_iter: int = BISECTION.max_iter,
) -> float:
    """
    Find x with cdf(x) == target for a monotone non-decreasing `cdf`.

    Returns the best midpoint even when the cap is reached; use
    bisect_cdf() to inspect convergence.
    """
    return bisect_cdf(cdf, target, lo, hi, tol=tol, max_iter=max_iter).root
