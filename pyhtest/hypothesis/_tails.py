"""
Tail-aware decision rules shared by every test.

p-values come from the null CDF evaluated at the statistic. Critical
values are the positive upper cutoff at 1 - a, where a = alpha/2 for a
two-tailed test and alpha otherwise. Power is a normal-model
approximation, not an exact noncentral-distribution power.
"""

from __future__ import annotations

import math

from pyhtest.core.exceptions import NumericDegeneracyError
from pyhtest.distributions import (
    RootResult,
    bisect_cdf,
    chi_square_cdf,
    normal_cdf,
    normal_quantile,
    t_cdf,
)
from pyhtest.hypothesis._common import Tail

POWER_METHOD = "normal approximation"

# Initial bisection brackets for the critical values
T_CRITICAL_BRACKET = (0.0, 100.0)
CHISQ_CRITICAL_SPREAD = 50.0


def split_alpha(alpha: float, tail: Tail) -> float:
    """Per-side significance: alpha/2 for two-tailed, alpha otherwise."""
    return alpha / 2.0 if tail is Tail.TWO else alpha


def require_finite(quantity: str, **values: float) -> None:
    """Raise NumericDegeneracyError if an intermediate overflowed to inf or nan."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise NumericDegeneracyError(
                f"{quantity}: {name} is {value} (input magnitude overflows float64)",
                quantity=name,
                reason="non_finite",
            )


def p_value_from_cdf(cdf_value: float, tail: Tail) -> float:
    """Convert F(statistic) into a p-value for the given tail, in [0, 1]."""
    require_finite("p-value", cdf=cdf_value)
    if tail is Tail.TWO:
        p = 2.0 * min(cdf_value, 1.0 - cdf_value)
    elif tail is Tail.LEFT:
        p = cdf_value
    else:
        p = 1.0 - cdf_value
    return min(max(p, 0.0), 1.0)


def normal_critical(alpha: float, tail: Tail) -> float:
    return normal_quantile(1.0 - split_alpha(alpha, tail))


def t_critical(alpha: float, df: float, tail: Tail) -> RootResult:
    lo, hi = T_CRITICAL_BRACKET
    return bisect_cdf(
        lambda x: t_cdf(x, df),
        1.0 - split_alpha(alpha, tail),
        lo, hi,
    )


def chi_square_critical(alpha: float, df: float, tail: Tail) -> RootResult:
    return bisect_cdf(
        lambda x: chi_square_cdf(x, df),
        1.0 - split_alpha(alpha, tail),
        0.0, df + CHISQ_CRITICAL_SPREAD * math.sqrt(df),
    )


def approx_power(effect_times_root_n: float, alpha: float, tail: Tail) -> float:
    """
    Rough power of a z test with standardized shift e = |effect| * sqrt(n).

        two:   Phi(e - z_a) + 1 - Phi(e + z_a)
        right: 1 - Phi(z_a - e)
        left:  Phi(-z_a - e)

    with z_a = Phi^-1(1 - a). Clipped to [0, 1].
    """
    z_a = normal_quantile(1.0 - split_alpha(alpha, tail))
    e = abs(effect_times_root_n)
    if tail is Tail.TWO:
        power = normal_cdf(e - z_a) + (1.0 - normal_cdf(e + z_a))
    elif tail is Tail.RIGHT:
        power = 1.0 - normal_cdf(z_a - e)
    else:
        power = normal_cdf(-z_a - e)
    return min(max(power, 0.0), 1.0)


def critical_value_info(root: RootResult) -> tuple[dict[str, object], list[str]]:
    """Diagnostics and warnings for a bisection-derived critical value."""
    info: dict[str, object] = {
        "critical_value_iterations": root.iterations,
        "critical_value_expansions": root.expansions,
        "critical_value_converged": root.converged,
    }
    warnings_list: list[str] = []
    if not root.converged:
        warnings_list.append(
            f"critical value bisection did not converge after {root.iterations} "
            f"iterations; reporting best estimate {root.root:.6g}"
        )
    return info, warnings_list


def confidence_interval(
    center: float,
    se: float,
    critical: float,
    tail: Tail,
) -> tuple[float, float]:
    """
    center -/+ critical * se; a one-tailed alternative leaves the
    opposite side unbounded.
    """
    margin = critical * se
    if tail is Tail.RIGHT:
        return center - margin, math.inf
    if tail is Tail.LEFT:
        return -math.inf, center + margin
    return center - margin, center + margin
