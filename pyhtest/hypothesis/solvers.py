"""
Entry points for hypothesis tests.

run_one_sample_test() and run_welch_two_sample_test() form the public
contract; mean_test(), variance_test(), proportion_test() and
correlation_test() are keyword-argument shortcuts that build the
TestConfig for you.
"""

from __future__ import annotations

from typing import Callable

from numpy.typing import ArrayLike

from pyhtest.core.protocols import Backend
from pyhtest.hypothesis._common import HypothesisParams, Tail, TestKind
from pyhtest.hypothesis.design import HypothesisDesign, TestConfig, is_one
from pyhtest.hypothesis.solution import HypothesisResult
from pyhtest.hypothesis.backends.cpu import CPUHypothesisBackend


def _get_backend() -> Backend[HypothesisDesign, HypothesisParams]:
    return CPUHypothesisBackend()


def _solve(design: HypothesisDesign) -> HypothesisResult:
    result = _get_backend().solve(design)
    return HypothesisResult(_result=result, _design=design)


def run_one_sample_test(
    values: ArrayLike | HypothesisDesign,
    config: TestConfig | None = None,
) -> HypothesisResult:
    """
    Run a one-sample hypothesis test.

    Parameters
    ----------
    values : array-like or HypothesisDesign
        Sample data. NaN and +/-Inf are dropped before the sample-size
        check. Can also be a pre-built HypothesisDesign.
    config : TestConfig or None
        Test kind, alpha, null parameter and tail. None means
        TestConfig(): a two-tailed mean test of mu = 0 at alpha = 0.05.

    Returns
    -------
    HypothesisResult

    Raises
    ------
    InsufficientDataError
        Fewer than 2 finite values (3 for the correlation test).
    InvalidParameterError
        Invalid configuration values.
    NumericDegeneracyError
        Zero standard error, constant or perfectly autocorrelated series,
        or a p-value whose special function failed to converge.
    """
    if isinstance(values, HypothesisDesign):
        design = values
    else:
        design = HypothesisDesign.for_one_sample(values, config)
    return _solve(design)


def run_welch_two_sample_test(
    group_a: ArrayLike,
    group_b: ArrayLike,
    alpha: float = 0.05,
    tail: Tail | str = Tail.TWO,
    *,
    name_a: str = "Group A",
    name_b: str = "Group B",
) -> HypothesisResult:
    """
    Welch two-sample t-test of H0: mu1 = mu2.

    Parameters
    ----------
    group_a, group_b : array-like
        The two samples. Raw inputs must have equal length; non-finite
        values are then dropped from each group and each must keep at
        least 2 values.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    tail : Tail or str
        "two" (default), "left" (mu1 < mu2) or "right" (mu1 > mu2).
    name_a, name_b : str
        Group labels used in the test name and estimates.

    Raises
    ------
    LengthMismatchError
        Inputs of unequal length.
    InsufficientDataError
        A group with fewer than 2 finite values.
    NumericDegeneracyError
        Both groups constant, or p-value evaluation failed to converge.
    """
    design = HypothesisDesign.for_welch(
        group_a, group_b,
        alpha=alpha,
        tail=tail,
        name_a=name_a,
        name_b=name_b,
    )
    return _solve(design)


def mean_test(
    values: ArrayLike,
    *,
    mu0: float = 0.0,
    alpha: float = 0.05,
    tail: Tail | str = Tail.TWO,
) -> HypothesisResult:
    """One-sample t-test of H0: mu = mu0."""
    config = TestConfig(kind=TestKind.MEAN, mu0=mu0, alpha=alpha, tail=tail)
    return run_one_sample_test(values, config)


def variance_test(
    values: ArrayLike,
    *,
    sigma0_squared: float = 1.0,
    alpha: float = 0.05,
    tail: Tail | str = Tail.TWO,
) -> HypothesisResult:
    """Chi-square test of H0: sigma^2 = sigma0_squared."""
    config = TestConfig(
        kind=TestKind.VARIANCE, sigma0_squared=sigma0_squared, alpha=alpha, tail=tail
    )
    return run_one_sample_test(values, config)


def proportion_test(
    values: ArrayLike,
    *,
    p0: float = 0.5,
    success: Callable[[float], bool] = is_one,
    alpha: float = 0.05,
    tail: Tail | str = Tail.TWO,
) -> HypothesisResult:
    """z test of H0: p = p0, where p is the share of values with success(v)."""
    config = TestConfig(
        kind=TestKind.PROPORTION, p0=p0, success=success, alpha=alpha, tail=tail
    )
    return run_one_sample_test(values, config)


def correlation_test(
    values: ArrayLike,
    *,
    alpha: float = 0.05,
    tail: Tail | str = Tail.TWO,
) -> HypothesisResult:
    """t test of H0: rho = 0 for the lag-1 autocorrelation of a series."""
    config = TestConfig(kind=TestKind.CORRELATION, alpha=alpha, tail=tail)
    return run_one_sample_test(values, config)
