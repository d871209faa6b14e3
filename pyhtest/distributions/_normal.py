"""
Standard normal CDF and quantile.

normal_quantile uses Peter Acklam's rational approximation (relative error
about 1.15e-9) split into a central region and two tails at p = 0.02425.
"""

from __future__ import annotations

import math

from pyhtest.core.exceptions import InvalidParameterError
from pyhtest.special import erf

_A = (
    -3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
    1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
    6.680131188771972e+01, -1.328068155288572e+01,
)
_C = (
    -7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
    -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
    3.754408661907416e+00,
)
_P_LOW = 0.02425
_P_HIGH = 1.0 - _P_LOW


def normal_cdf(z: float) -> float:
    """Phi(z) = 0.5 * (1 + erf(z / sqrt(2)))."""
    return 0.5 * (1.0 + erf(float(z) / math.sqrt(2.0)))


def _tail(q: float) -> float:
    c, d = _C, _D
    return (((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]) / \
           ((((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1.0)


def normal_quantile(p: float) -> float:
    """
    Inverse of the standard normal CDF.

    Returns -inf at p == 0 and +inf at p == 1.

    Raises
    ------
    InvalidParameterError
        If p is NaN or outside [0, 1].
    """
    p = float(p)
    if p <= 0.0 or p >= 1.0:
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        raise InvalidParameterError(
            f"normal_quantile: p must be in (0, 1), got {p}",
            parameter="p",
            value=p,
        )
    if math.isnan(p):
        raise InvalidParameterError(
            "normal_quantile: p must be in (0, 1), got nan",
            parameter="p",
            value=p,
        )

    if p < _P_LOW:
        return _tail(math.sqrt(-2.0 * math.log(p)))
    if p > _P_HIGH:
        return -_tail(math.sqrt(-2.0 * math.log(1.0 - p)))

    a, b = _A, _B
    q = p - 0.5
    r = q * q
    return (((((a[0] * r + a[1]) * r + a[2]) * r + a[3]) * r + a[4]) * r + a[5]) * q / \
           (((((b[0] * r + b[1]) * r + b[2]) * r + b[3]) * r + b[4]) * r + 1.0)
