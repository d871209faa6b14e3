"""
Hypothesis testing module.

One-sample tests driven by a TestConfig, plus the independent two-sample
Welch t-test. p-values, critical values and power are computed with
pyhtest.distributions; no external statistics library is called.

Public API:
    run_one_sample_test(values, config)     - mean / variance / proportion / correlation
    run_welch_two_sample_test(a, b)         - Welch two-sample t-test
    mean_test(x)                            - one-sample t-test shortcut
    variance_test(x)                        - chi-square variance test shortcut
    proportion_test(x)                      - z test for a proportion shortcut
    correlation_test(x)                     - lag-1 autocorrelation t-test shortcut
"""

from pyhtest.hypothesis._common import HypothesisParams, Tail, TestKind
from pyhtest.hypothesis.design import HypothesisDesign, TestConfig
from pyhtest.hypothesis.solution import HypothesisResult
from pyhtest.hypothesis.solvers import (
    run_one_sample_test, run_welch_two_sample_test,
    mean_test, variance_test, proportion_test, correlation_test,
)
from pyhtest.hypothesis import formatting
from pyhtest.hypothesis.formatting import SignificanceLevel

__all__ = [
    "run_one_sample_test",
    "run_welch_two_sample_test",
    "mean_test",
    "variance_test",
    "proportion_test",
    "correlation_test",
    "TestConfig",
    "TestKind",
    "Tail",
    "HypothesisDesign",
    "HypothesisParams",
    "HypothesisResult",
    "SignificanceLevel",
    "formatting",
]
