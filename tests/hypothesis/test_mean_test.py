"""
Tests for the one-sample t-test for a mean.

Reference values from R t.test() (R 4.5.2) and scipy.stats.ttest_1samp.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pyhtest import (
    InsufficientDataError,
    NumericDegeneracyError,
    TestConfig,
    run_one_sample_test,
)
from pyhtest.hypothesis import Tail, TestKind, mean_test


class TestOneSampleMean:
    """One-sample t-test: H0: mean(x) = mu0."""

    def test_basic(self):
        """t.test(1:5, mu=3) -> t=0, df=4, p=1."""
        result = mean_test([1, 2, 3, 4, 5], mu0=3)
        assert result.statistic == pytest.approx(0.0, abs=1e-15)
        assert result.parameter == {"df": 4.0}
        assert result.p_value == pytest.approx(1.0, abs=1e-15)
        assert not result.significant
        assert result.name == "One-sample t-test (mean)"
        assert result.kind is TestKind.MEAN
        assert result.tail is Tail.TWO
        assert result.estimate == {"mean of x": pytest.approx(3.0)}
        assert result.null_value == {"mean": 3.0}
        assert result.sample_size == {"n": 5}

    def test_hypothesis_text(self):
        result = mean_test([1, 2, 3, 4, 5], mu0=3)
        assert result.null_hypothesis == "H₀: μ = 3.0000"
        assert result.alternative_hypothesis == "H₁: μ ≠ 3.0000"

    def test_basic_mu0(self):
        """t.test(1:5) -> t=4.2426, df=4, p=0.01324."""
        result = mean_test([1, 2, 3, 4, 5])
        assert result.statistic == pytest.approx(4.2426406871192848, rel=1e-10)
        assert result.p_value == pytest.approx(0.013235599563682695, rel=1e-8)
        assert result.significant

    def test_alternative_right(self):
        result = mean_test([1, 2, 3, 4, 5], tail="right")
        assert result.p_value == pytest.approx(0.0066177997818413, rel=1e-8)
        assert result.alternative_hypothesis == "H₁: μ > 0.0000"
        assert result.critical_value == pytest.approx(stats.t.ppf(0.95, 4), abs=1e-5)

    def test_alternative_left(self):
        result = mean_test([1, 2, 3, 4, 5], tail=Tail.LEFT)
        assert result.p_value == pytest.approx(0.99338220021815871, rel=1e-8)
        assert result.alternative_hypothesis == "H₁: μ < 0.0000"
        assert not result.significant

    def test_critical_value_two_tailed(self):
        result = mean_test([1, 2, 3, 4, 5], mu0=3)
        assert result.critical_value == pytest.approx(stats.t.ppf(0.975, 4), abs=1e-5)
        assert result.info["critical_value_converged"] is True

    def test_against_scipy(self, rng):
        x = rng.normal(0.4, 1.3, size=40)
        result = mean_test(x, mu0=0.1)
        ref = stats.ttest_1samp(x, 0.1)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-7)

    def test_cohens_d(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        result = mean_test(x)
        assert result.effect_size_name == "Cohen's d"
        assert result.effect_size == pytest.approx(3.0 / np.std(x, ddof=1), rel=1e-12)

    def test_power_at_zero_effect_is_alpha(self):
        result = mean_test([1, 2, 3, 4, 5], mu0=3)
        assert result.power == pytest.approx(0.05, abs=1e-6)

    def test_nan_and_inf_removed(self):
        """Non-finite values are silently removed."""
        result = mean_test([1, 2, np.nan, 4, 5, np.inf], mu0=3)
        result2 = mean_test([1, 2, 4, 5], mu0=3)
        assert result.statistic == pytest.approx(result2.statistic, rel=1e-12)
        assert result.p_value == pytest.approx(result2.p_value, rel=1e-12)
        assert result.sample_size == {"n": 4}

    def test_interpretation(self):
        result = mean_test([1, 2, 3, 4, 5], mu0=3)
        assert result.interpretation.startswith("Fail to reject H₀: sample mean 3.0000")
        assert "two-tailed test, n=5" in result.interpretation


class TestMeanEdgeCases:

    def test_constant_data(self):
        with pytest.raises(NumericDegeneracyError) as exc_info:
            mean_test([2.0, 2.0, 2.0])
        assert exc_info.value.reason == "zero_variance"

    def test_single_finite_value(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            mean_test([1.0, np.nan])
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    def test_empty(self):
        with pytest.raises(InsufficientDataError):
            run_one_sample_test([])

    def test_default_config_is_mean_test_of_zero(self):
        result = run_one_sample_test([1, 2, 3, 4, 5])
        assert result.kind is TestKind.MEAN
        assert result.null_value == {"mean": 0.0}
        assert result.alpha == 0.05

    def test_metadata(self):
        result = run_one_sample_test([1, 2, 3, 4, 5], TestConfig(mu0=3))
        assert result.backend_name == "cpu_hypothesis"
        assert result.info["test_type"] == "mean"
        assert result.info["power_method"] == "normal approximation"
        assert "total_seconds" in result.timing
        assert result.warnings == ()

    @pytest.mark.parametrize("x", [
        [1e308, 1e308, 5e307],      # sum overflows the mean
        [1e160, 3e160, 2e160, 5e160],  # squared deviations overflow the variance
    ])
    def test_overflowing_input(self, x):
        with pytest.raises(NumericDegeneracyError) as exc_info:
            mean_test(x)
        assert exc_info.value.reason == "non_finite"


class TestMeanConfidenceInterval:

    def test_textbook_values(self):
        """t.test(1:5, mu=3)$conf.int -> [1.036757, 4.963243]."""
        lo, hi = mean_test([1, 2, 3, 4, 5], mu0=3).confidence_interval
        assert lo == pytest.approx(1.036757, abs=1e-5)
        assert hi == pytest.approx(4.963243, abs=1e-5)

    def test_against_scipy(self, rng):
        x = rng.normal(0.4, 1.3, size=40)
        ref = stats.ttest_1samp(x, 0.1).confidence_interval(0.95)
        lo, hi = mean_test(x, mu0=0.1).confidence_interval
        assert lo == pytest.approx(ref.low, abs=1e-5)
        assert hi == pytest.approx(ref.high, abs=1e-5)

    def test_alpha_sets_level(self, rng):
        x = rng.normal(size=25)
        ref = stats.ttest_1samp(x, 0.0).confidence_interval(0.99)
        lo, hi = mean_test(x, alpha=0.01).confidence_interval
        assert lo == pytest.approx(ref.low, abs=1e-5)
        assert hi == pytest.approx(ref.high, abs=1e-5)

    def test_right_tail_unbounded_above(self, rng):
        x = rng.normal(0.5, 1.0, size=30)
        ref = stats.ttest_1samp(x, 0.0, alternative="greater").confidence_interval()
        lo, hi = mean_test(x, tail="right").confidence_interval
        assert lo == pytest.approx(ref.low, abs=1e-5)
        assert hi == math.inf

    def test_left_tail_unbounded_below(self, rng):
        x = rng.normal(0.5, 1.0, size=30)
        ref = stats.ttest_1samp(x, 0.0, alternative="less").confidence_interval()
        lo, hi = mean_test(x, tail="left").confidence_interval
        assert lo == -math.inf
        assert hi == pytest.approx(ref.high, abs=1e-5)

    def test_contains_null_iff_not_significant(self, rng):
        for _ in range(20):
            x = rng.normal(0.3, 1.0, size=15)
            result = mean_test(x)
            lo, hi = result.confidence_interval
            assert (lo <= 0.0 <= hi) == (not result.significant)
