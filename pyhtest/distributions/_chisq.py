"""Chi-square CDF: F(x; df) = P(df/2, x/2)."""

from __future__ import annotations

from pyhtest.core.validation import check_positive
from pyhtest.special import regularized_gamma_p


def chi_square_cdf(x: float, df: float, *, strict: bool = False) -> float:
    """CDF of the chi-square distribution. Zero for x <= 0."""
    df = check_positive(df, "df")
    return regularized_gamma_p(df / 2.0, float(x) / 2.0, strict=strict)
