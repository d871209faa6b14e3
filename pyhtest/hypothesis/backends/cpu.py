"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pyhtest.core.result import Result
from pyhtest.core.compute.timing import Timer
from pyhtest.hypothesis._common import HypothesisParams
from pyhtest.hypothesis._tails import POWER_METHOD
from pyhtest.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HypothesisParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "mean":
                from pyhtest.hypothesis.backends._mean_test import mean_test
                params, info, warnings_list = mean_test(design)
            elif test_type == "variance":
                from pyhtest.hypothesis.backends._variance_test import variance_test
                params, info, warnings_list = variance_test(design)
            elif test_type == "proportion":
                from pyhtest.hypothesis.backends._proportion_test import proportion_test
                params, info, warnings_list = proportion_test(design)
            elif test_type == "correlation":
                from pyhtest.hypothesis.backends._correlation_test import correlation_test
                params, info, warnings_list = correlation_test(design)
            elif test_type == "welch":
                from pyhtest.hypothesis.backends._welch_test import welch_test
                params, info, warnings_list = welch_test(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'power_method': POWER_METHOD, **info},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
