"""
Special functions.

Pure numerical routines with no statistical semantics. All state is local
to each call, so every function is safe to use from multiple threads and
returns bit-identical output for identical input.

Public API:
    erf(x)                                  - error function (A&S 7.1.26)
    log_gamma(z)                            - log-gamma (Lanczos, g=7)
    regularized_incomplete_beta(a, b, x)    - I_x(a, b)
    regularized_gamma_p(s, x)               - P(s, x)
    betacf(a, b, x)                         - continued fraction behind I_x
"""

from pyhtest.special._erf import erf
from pyhtest.special._gamma import log_gamma, regularized_gamma_p
from pyhtest.special._beta import betacf, regularized_incomplete_beta
from pyhtest.special._common import SeriesResult

__all__ = [
    "erf",
    "log_gamma",
    "regularized_incomplete_beta",
    "regularized_gamma_p",
    "betacf",
    "SeriesResult",
]
