"""
Error function via Abramowitz & Stegun formula 7.1.26.

Maximum absolute error is about 1.5e-7 over the real line.
"""

from __future__ import annotations

import math

_P = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429


def erf(x: float) -> float:
    """Error function. Odd: erf(-x) == -erf(x)."""
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        # The fitted coefficients sum to 0.999999999, not 1
        return 0.0
    sign = -1.0 if x < 0 else 1.0
    x = abs(x)
    t = 1.0 / (1.0 + _P * x)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-x * x)
    return sign * y
