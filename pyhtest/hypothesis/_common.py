"""
Common types for hypothesis testing.

Defines the closed enums for test kind and tail, and HypothesisParams,
the payload every test returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pyhtest.core.exceptions import InvalidParameterError


class Tail(str, Enum):
    """Direction of the alternative hypothesis."""
    TWO = "two"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def coerce(cls, value: Tail | str) -> Tail:
        """Accept a Tail or its string value; reject anything else."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidParameterError(
                f"tail must be one of {[t.value for t in cls]}, got {value!r}",
                parameter="tail",
                value=value,
            ) from None


class TestKind(str, Enum):
    """One-sample test selected by a TestConfig."""

    MEAN = "mean"
    VARIANCE = "variance"
    PROPORTION = "proportion"
    CORRELATION = "correlation"

    @classmethod
    def coerce(cls, value: TestKind | str) -> TestKind:
        """Accept a TestKind or its string value; reject anything else."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidParameterError(
                f"kind must be one of {[k.value for k in cls]}, got {value!r}",
                parameter="kind",
                value=value,
            ) from None


# Structural minimum of finite observations per sample
MIN_SAMPLES = {
    TestKind.MEAN: 2,
    TestKind.VARIANCE: 2,
    TestKind.PROPORTION: 2,
    TestKind.CORRELATION: 3,
}
MIN_SAMPLES_PER_GROUP = 2


@dataclass(frozen=True)
class HypothesisParams:
    """
    Parameter payload for hypothesis tests.

    Every test returns this same structure. Numeric fields are computed by
    the backends; the three text fields are produced by
    pyhtest.hypothesis.formatting from those numbers.

    Attributes
    ----------
    name : str
        Human-readable test name, e.g. "One-sample t-test (mean)".
    kind : TestKind
        Test kind. The Welch test reports TestKind.MEAN.
    tail : Tail
        Tail of the alternative hypothesis.
    statistic : float
        Test statistic value (t, z or chi-square).
    statistic_name : str
        "t", "z" or "X-squared".
    parameter : dict or None
        Distribution parameters, e.g. {"df": 4.0}. None for the z test.
    p_value : float
        p-value in [0, 1].
    critical_value : float
        Positive upper cutoff for the chosen tail configuration.
    alpha : float
        Significance level.
    significant : bool
        p_value < alpha.
    effect_size : float
        Non-negative effect size.
    effect_size_name : str
        "Cohen's d", "Cohen's h", "|r|" or "|s^2/sigma0^2 - 1|".
    power : float
        Approximate power under a normal model. Not an exact
        noncentral-distribution power.
    estimate : dict
        Point estimates, e.g. {"mean of x": 3.0}.
    null_value : dict
        Hypothesized value(s) under H0.
    sample_size : dict
        Finite observation counts, e.g. {"n": 5} or {"n1": 5, "n2": 6}.
    null_hypothesis : str
        e.g. "H₀: μ = 3.0000".
    alternative_hypothesis : str
        e.g. "H₁: μ ≠ 3.0000".
    interpretation : str
        One-sentence decision summary.
    data_name : str
        Description of the data, e.g. "x" or "Group A and Group B".
    confidence_interval : tuple of float or None
        Interval for the mean (mean test) or the difference in means
        (Welch) at level 1 - alpha; one-tailed tests leave one side
        infinite. None for the other tests.

    The mapping fields are stored as read-only views.
    """
    name: str
    kind: TestKind
    tail: Tail
    statistic: float
    statistic_name: str
    parameter: Mapping[str, float] | None
    p_value: float
    critical_value: float
    alpha: float
    significant: bool
    effect_size: float
    effect_size_name: str
    power: float
    estimate: Mapping[str, float]
    null_value: Mapping[str, float]
    sample_size: Mapping[str, int]
    null_hypothesis: str
    alternative_hypothesis: str
    interpretation: str
    data_name: str
    confidence_interval: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        for name in ("parameter", "estimate", "null_value", "sample_size"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, MappingProxyType(dict(value)))
