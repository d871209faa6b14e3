"""
Text for hypothesis test results.

Deterministic string construction from already-computed numbers: the
hypothesis statements, the decision phrase, interpretation sentences and
display helpers for p-values. Nothing here changes a statistic.
"""

from __future__ import annotations

import math
from enum import Enum

from pyhtest.hypothesis._common import Tail, TestKind


class SignificanceLevel(float, Enum):
    """Conventional significance thresholds."""
    VERY_HIGH = 0.001
    HIGH = 0.01
    STANDARD = 0.05
    LOW = 0.1


_ALT_SYMBOL = {
    Tail.TWO: "≠",
    Tail.LEFT: "<",
    Tail.RIGHT: ">",
}


def format_number(x: float) -> str:
    """
    Adaptive number format.

    Scientific notation with 3 decimals for 0 < |x| < 0.001 or
    |x| >= 1000; fixed with 4 decimals otherwise.
    """
    x = float(x)
    if not math.isfinite(x):
        return str(x)
    ax = abs(x)
    if ax >= 1000 or (0 < ax < 0.001):
        return f"{x:.3e}"
    return f"{x:.4f}"


def format_p_value(p: float) -> str:
    """Short p-value for tables: '< 0.001', 3 decimals below 0.01, else 2."""
    if p < SignificanceLevel.VERY_HIGH:
        return "< 0.001"
    if p < SignificanceLevel.HIGH:
        return f"{p:.3f}"
    return f"{p:.2f}"


def significance_label(p: float) -> str:
    """Star notation: '***', '**', '*' or 'ns'."""
    if p < SignificanceLevel.VERY_HIGH:
        return "***"
    if p < SignificanceLevel.HIGH:
        return "**"
    if p < SignificanceLevel.STANDARD:
        return "*"
    return "ns"


def decision_phrase(significant: bool) -> str:
    return "Reject H₀" if significant else "Fail to reject H₀"


def _value_text(value: float | str) -> str:
    return value if isinstance(value, str) else format_number(value)


def null_hypothesis_text(symbol: str, null_value: float | str) -> str:
    """e.g. 'H₀: μ = 3.0000' or 'H₀: μ₁ = μ₂'."""
    return f"H₀: {symbol} = {_value_text(null_value)}"


def alternative_hypothesis_text(symbol: str, null_value: float | str, tail: Tail) -> str:
    """e.g. 'H₁: μ ≠ 3.0000', with '<' or '>' for one-tailed tests."""
    return f"H₁: {symbol} {_ALT_SYMBOL[tail]} {_value_text(null_value)}"


def interpretation(
    kind: TestKind,
    significant: bool,
    p_value: float,
    alpha: float,
    estimate: float,
    null_value: float,
    n: int,
    tail: Tail,
) -> str:
    """One-sentence decision summary for a one-sample test."""
    base = decision_phrase(significant)
    suffix = f" (p={p_value:.2e} vs α={alpha:g})."
    differs = "differs from" if significant else "is not different from"
    est, null = format_number(estimate), format_number(null_value)
    tail_text = tail.value

    if kind is TestKind.MEAN:
        return (f"{base}: sample mean {est} {differs} {null} "
                f"with {tail_text}-tailed test, n={n}{suffix}")
    if kind is TestKind.VARIANCE:
        return (f"{base}: sample σ {est} {differs} {null} "
                f"with {tail_text}-tailed test, n={n}{suffix}")
    if kind is TestKind.PROPORTION:
        return (f"{base}: sample p={est} {differs} {null} "
                f"({tail_text}-tailed), n={n}{suffix}")
    relation = "≠" if significant else "≈"
    return (f"{base}: lag-1 correlation r={est} {relation} 0 "
            f"({tail_text}-tailed), n={n}{suffix}")


def welch_interpretation(
    significant: bool,
    mean_a: float,
    mean_b: float,
    statistic: float,
    df: float,
    p_value: float,
) -> str:
    """Decision summary for the Welch two-sample test."""
    return (
        f"{decision_phrase(significant)}: "
        f"Δ=({mean_a:.4f}−{mean_b:.4f}) with t={statistic:.4f}, "
        f"df≈{df:.2f}, p={p_value:.2e}."
    )
