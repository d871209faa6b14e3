"""
Tests for the HypothesisResult record: formatting, immutability and
determinism.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from pyhtest import run_one_sample_test, run_welch_two_sample_test
from pyhtest.hypothesis import TestConfig, mean_test


@pytest.fixture
def result():
    return mean_test([1, 2, 3, 4, 5], mu0=3)


class TestSummary:

    def test_contains_sections(self, result):
        s = result.summary()
        assert "One-sample t-test (mean)" in s
        assert "data:  x" in s
        assert "t = 0, df = 4, p-value = 1" in s
        assert "H₀: μ = 3.0000" in s
        assert "H₁: μ ≠ 3.0000" in s
        assert "(α = 0.05, two-tailed)" in s
        assert "Fail to reject H₀ (ns)" in s
        assert "95 percent confidence interval: [1.0368, 4.9632]" in s

    def test_significant_label(self):
        s = mean_test([1, 2, 3, 4, 5]).summary()
        assert "Reject H₀ (*)" in s

    def test_welch_summary(self):
        s = run_welch_two_sample_test([1, 2, 3, 4, 5], [2, 3, 4, 5, 6]).summary()
        assert "Welch two-sample t-test: Group A vs Group B" in s
        assert "data:  Group A and Group B" in s

    def test_repr(self, result):
        r = repr(result)
        assert r.startswith("HypothesisResult(name='One-sample t-test (mean)'")
        assert "significant=False" in r


class TestToDict:

    def test_keys(self, result):
        d = result.to_dict()
        assert set(d) == {
            "name", "kind", "tail", "null_hypothesis", "alternative_hypothesis",
            "statistic", "p_value", "critical_value", "alpha", "significant",
            "interpretation", "effect_size", "power", "confidence_interval",
        }

    def test_plain_values(self, result):
        d = result.to_dict()
        assert d["kind"] == "mean"
        assert d["tail"] == "two"
        assert d["significant"] is False

    def test_confidence_interval_is_plain_list(self, result):
        ci = result.to_dict()["confidence_interval"]
        assert isinstance(ci, list)
        lo, hi = ci
        assert lo == pytest.approx(1.036757, abs=1e-5)
        assert hi == pytest.approx(4.963243, abs=1e-5)

    def test_confidence_interval_none(self):
        d = run_one_sample_test([1, 0, 1, 1], TestConfig(kind="proportion")).to_dict()
        assert d["confidence_interval"] is None


class TestRecord:

    def test_immutable(self, result):
        with pytest.raises(FrozenInstanceError):
            result._result = None
        with pytest.raises(AttributeError):
            result.p_value = 0.0

    def test_mappings_are_read_only(self, result):
        with pytest.raises(TypeError):
            result.estimate["mean of x"] = 0.0
        with pytest.raises(TypeError):
            result.null_value["mean"] = 0.0
        with pytest.raises(TypeError):
            result.sample_size["n"] = 0
        with pytest.raises(TypeError):
            result.parameter["df"] = 0.0
        with pytest.raises(TypeError):
            result.info["test_type"] = "variance"

    def test_mappings_still_compare_equal(self, result):
        assert result.estimate == {"mean of x": pytest.approx(3.0)}
        assert dict(result.sample_size) == {"n": 5}

    def test_confidence_level(self):
        result = run_one_sample_test([1, 2, 3, 4, 5], TestConfig(alpha=0.01))
        assert result.confidence_level == pytest.approx(0.99)

    def test_provenance(self, result):
        assert "pyhtest_version" in result.provenance

    def test_deterministic(self):
        a = mean_test([1.5, 2.25, 3.0, 8.0], mu0=1)
        b = mean_test([1.5, 2.25, 3.0, 8.0], mu0=1)
        assert a.params == b.params

    def test_concurrent_calls_agree(self, rng):
        samples = [rng.normal(size=20) for _ in range(8)]
        sequential = [mean_test(x, mu0=0.2).params for x in samples]
        with ThreadPoolExecutor(max_workers=4) as pool:
            threaded = list(pool.map(lambda x: mean_test(x, mu0=0.2).params, samples))
        assert threaded == sequential
