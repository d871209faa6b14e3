"""
Student's t CDF via the regularized incomplete beta function.

    x  = df / (df + t^2)
    ib = I_x(df/2, 1/2)
    F(t) = 1 - ib/2   for t >= 0
         = ib/2       for t < 0
"""

from __future__ import annotations

import math

from pyhtest.core.validation import check_positive
from pyhtest.special import regularized_incomplete_beta


def t_cdf(t: float, df: float, *, strict: bool = False) -> float:
    """
    CDF of Student's t distribution with `df` degrees of freedom.

    `df` may be fractional (Welch-Satterthwaite). With `strict=True` a
    non-converged incomplete beta raises NumericDegeneracyError.
    """
    df = check_positive(df, "df")
    t = float(t)
    if math.isnan(t):
        return math.nan
    if math.isinf(t):
        return 1.0 if t > 0 else 0.0
    x = df / (df + t * t)
    ib = regularized_incomplete_beta(df / 2.0, 0.5, x, strict=strict)
    if t >= 0:
        return 1.0 - 0.5 * ib
    return 0.5 * ib
