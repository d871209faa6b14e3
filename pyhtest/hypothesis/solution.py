"""
Hypothesis test solution types.

HypothesisResult wraps Result[HypothesisParams] and provides a printable
summary in the style of R's print.htest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING

from pyhtest.core.result import Result
from pyhtest.hypothesis import formatting
from pyhtest.hypothesis._common import HypothesisParams, Tail, TestKind

if TYPE_CHECKING:
    from pyhtest.hypothesis.design import HypothesisDesign


@dataclass(frozen=True)
class HypothesisResult:
    """
    User-facing hypothesis test result.

    Immutable record created once per test invocation. Wraps
    Result[HypothesisParams]; all fields are available as read-only
    properties.
    """
    _result: Result[HypothesisParams]
    _design: 'HypothesisDesign | None' = None

    # --- Record fields ---

    @property
    def name(self) -> str:
        """Test name, e.g. 'One-sample t-test (mean)'."""
        return self._result.params.name

    @property
    def kind(self) -> TestKind:
        return self._result.params.kind

    @property
    def tail(self) -> Tail:
        return self._result.params.tail

    @property
    def null_hypothesis(self) -> str:
        return self._result.params.null_hypothesis

    @property
    def alternative_hypothesis(self) -> str:
        return self._result.params.alternative_hypothesis

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def parameter(self) -> Mapping[str, float] | None:
        """Distribution parameters (e.g. {'df': 4.0}); None for z tests."""
        return self._result.params.parameter

    @property
    def df(self) -> float | None:
        p = self._result.params.parameter
        return p.get("df") if p else None

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def critical_value(self) -> float:
        """Positive cutoff for the chosen tail configuration."""
        return self._result.params.critical_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def confidence_level(self) -> float:
        """1 - alpha."""
        return 1.0 - self._result.params.alpha

    @property
    def significant(self) -> bool:
        """p_value < alpha."""
        return self._result.params.significant

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def effect_size_name(self) -> str:
        return self._result.params.effect_size_name

    @property
    def power(self) -> float:
        """Approximate power from a normal model (see info['power_method'])."""
        return self._result.params.power

    @property
    def estimate(self) -> Mapping[str, float]:
        return self._result.params.estimate

    @property
    def null_value(self) -> Mapping[str, float]:
        return self._result.params.null_value

    @property
    def sample_size(self) -> Mapping[str, int]:
        return self._result.params.sample_size

    @property
    def confidence_interval(self) -> tuple[float, float] | None:
        """
        (lower, upper) bounds at confidence_level for the mean (or mean
        difference); one-tailed tests have one infinite bound. None for
        the variance, proportion and correlation tests.
        """
        return self._result.params.confidence_interval

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def params(self) -> HypothesisParams:
        return self._result.params

    # --- Metadata ---

    @property
    def info(self) -> Mapping[str, Any]:
        return self._result.info

    @property
    def timing(self) -> Mapping[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> Mapping[str, str]:
        return self._result.provenance

    # --- Formatting ---

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the record for report and UI consumers."""
        p = self._result.params
        return {
            "name": p.name,
            "kind": p.kind.value,
            "tail": p.tail.value,
            "null_hypothesis": p.null_hypothesis,
            "alternative_hypothesis": p.alternative_hypothesis,
            "statistic": p.statistic,
            "p_value": p.p_value,
            "critical_value": p.critical_value,
            "alpha": p.alpha,
            "significant": p.significant,
            "interpretation": p.interpretation,
            "effect_size": p.effect_size,
            "power": p.power,
            "confidence_interval": (
                list(p.confidence_interval) if p.confidence_interval is not None else None
            ),
        }

    def summary(self) -> str:
        """
        Multi-line report.

        Produces output like:
            One-sample t-test (mean)

        data:  x
        t = 0, df = 4, p-value = 1
        H₀: μ = 3.0000
        H₁: μ ≠ 3.0000
        95 percent confidence interval: [1.0368, 4.9632]
        critical value = 2.7764 (α = 0.05, two-tailed)
        Cohen's d = 0.0000, approximate power = 0.0500
        Fail to reject H₀ (ns)
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.name}")
        lines.append("")
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(p.null_hypothesis)
        lines.append(p.alternative_hypothesis)
        if p.confidence_interval is not None:
            lo, hi = p.confidence_interval
            lines.append(
                f"{100 * (1.0 - p.alpha):g} percent confidence interval: "
                f"[{formatting.format_number(lo)}, {formatting.format_number(hi)}]"
            )
        lines.append(
            f"critical value = {formatting.format_number(p.critical_value)} "
            f"(α = {p.alpha:g}, {p.tail.value}-tailed)"
        )
        lines.append(
            f"{p.effect_size_name} = {formatting.format_number(p.effect_size)}, "
            f"approximate power = {formatting.format_number(p.power)}"
        )
        lines.append(
            f"{formatting.decision_phrase(p.significant)} "
            f"({formatting.significance_label(p.p_value)})"
        )
        lines.append(p.interpretation)

        for w in self._result.warnings:
            lines.append(f"warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HypothesisResult(name={p.name!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, significant={p.significant})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
