"""
Common types for the iterative special functions.

Defines SeriesResult (value plus convergence record) and the shared
policy for an exhausted iteration cap.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from pyhtest.core.compute.tolerances import IterationLimits
from pyhtest.core.exceptions import NumericDegeneracyError


@dataclass(frozen=True)
class SeriesResult:
    """
    Outcome of a continued fraction or power series evaluation.

    Attributes
    ----------
    value : float
        Best estimate after the last iteration performed.
    iterations : int
        Number of iterations (terms) evaluated.
    converged : bool
        Whether the tolerance was met before the iteration cap.
    """
    value: float
    iterations: int
    converged: bool


def handle_nonconvergence(
    series: SeriesResult,
    limits: IterationLimits,
    quantity: str,
    strict: bool,
) -> None:
    """
    Apply the cap policy to a finished evaluation.

    A converged evaluation passes through. Otherwise the best estimate is
    kept and a RuntimeWarning is issued, unless `strict` is set, in which
    case NumericDegeneracyError is raised.
    """
    if series.converged:
        return
    message = (
        f"{quantity}: {limits.name} did not reach tol={limits.tol:g} "
        f"within {limits.max_iter} iterations"
    )
    if strict:
        raise NumericDegeneracyError(
            message,
            quantity=quantity,
            iterations=series.iterations,
            reason="max_iterations",
        )
    warnings.warn(f"{message}; returning best estimate", RuntimeWarning, stacklevel=3)
