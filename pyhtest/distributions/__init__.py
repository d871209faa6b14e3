"""
Probability distributions built on pyhtest.special.

Public API:
    normal_cdf(z)                       - standard normal CDF
    normal_quantile(p)                  - inverse standard normal CDF (Acklam)
    t_cdf(t, df)                        - Student's t CDF
    chi_square_cdf(x, df)               - chi-square CDF
    invert_cdf(cdf, target, lo, hi)     - bisection inverse of a monotone CDF
    bisect_cdf(cdf, target, lo, hi)     - same, returning a RootResult
"""

from pyhtest.distributions._normal import normal_cdf, normal_quantile
from pyhtest.distributions._t import t_cdf
from pyhtest.distributions._chisq import chi_square_cdf
from pyhtest.distributions._invert import RootResult, bisect_cdf, invert_cdf

__all__ = [
    "normal_cdf",
    "normal_quantile",
    "t_cdf",
    "chi_square_cdf",
    "invert_cdf",
    "bisect_cdf",
    "RootResult",
]
