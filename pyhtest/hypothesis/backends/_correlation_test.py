"""
Lag-1 autocorrelation t-test: H0: rho = 0.

r is the Pearson correlation between x[:-1] and x[1:], and

    t = r sqrt(df / (1 - r^2)),  df = n - 2

where n is the length of the full series.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import NDArray

from pyhtest.core.exceptions import NumericDegeneracyError
from pyhtest.distributions import t_cdf
from pyhtest.hypothesis import formatting
from pyhtest.hypothesis._common import HypothesisParams, TestKind
from pyhtest.hypothesis._tails import (
    approx_power,
    critical_value_info,
    p_value_from_cdf,
    require_finite,
    t_critical,
)

if TYPE_CHECKING:
    from pyhtest.hypothesis.design import HypothesisDesign


def lag1_pearson(x: NDArray) -> float:
    """Pearson correlation of the series with itself shifted by one."""
    lead = x[:-1] - np.mean(x[:-1])
    lag = x[1:] - np.mean(x[1:])
    den = math.sqrt(float(np.sum(lead * lead))) * math.sqrt(float(np.sum(lag * lag)))
    require_finite("lag-1 correlation", denominator=den)
    if den == 0.0:
        raise NumericDegeneracyError(
            "correlation test: series is constant, lag-1 correlation undefined",
            quantity="lag-1 correlation",
            reason="zero_variance",
        )
    r = float(np.sum(lead * lag)) / den
    require_finite("lag-1 correlation", r=r)
    return r


def correlation_test(
    design: HypothesisDesign,
) -> tuple[HypothesisParams, dict[str, Any], list[str]]:
    """t test of the lag-1 autocorrelation against zero."""
    x = design.x
    cfg = design.config
    alpha, tail = cfg.alpha, cfg.tail

    n = len(x)
    r = lag1_pearson(x)
    df = float(n - 2)

    one_minus_r2 = 1.0 - r * r
    if one_minus_r2 <= 0.0:
        raise NumericDegeneracyError(
            f"correlation test: |r| = {abs(r):g}, t statistic is unbounded",
            quantity="t statistic",
            reason="perfect_correlation",
        )

    t_stat = r * math.sqrt(df / one_minus_r2)
    p_value = p_value_from_cdf(t_cdf(t_stat, df, strict=True), tail)
    root = t_critical(alpha, df, tail)
    info, warnings_list = critical_value_info(root)
    significant = p_value < alpha

    power = approx_power(abs(r) * math.sqrt(n), alpha, tail)

    params = HypothesisParams(
        name="Lag-1 correlation test (t)",
        kind=TestKind.CORRELATION,
        tail=tail,
        statistic=t_stat,
        statistic_name="t",
        parameter={"df": df},
        p_value=p_value,
        critical_value=root.root,
        alpha=alpha,
        significant=significant,
        effect_size=abs(r),
        effect_size_name="|r|",
        power=power,
        estimate={"lag-1 correlation": r},
        null_value={"correlation": 0.0},
        sample_size={"n": n},
        null_hypothesis=formatting.null_hypothesis_text("ρ", "0"),
        alternative_hypothesis=formatting.alternative_hypothesis_text("ρ", "0", tail),
        interpretation=formatting.interpretation(
            TestKind.CORRELATION, significant, p_value, alpha, r, 0.0, n, tail
        ),
        data_name=design.data_name,
    )
    return params, info, warnings_list
