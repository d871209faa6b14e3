"""
TestConfig and HypothesisDesign: validated inputs for hypothesis tests.

TestConfig is the single explicit configuration object for one-sample
tests; every field has a documented default, so TestConfig() is a valid
configuration. HypothesisDesign is built by factory classmethods that
filter non-finite values and enforce the structural sample-size minimums.
Both are immutable after construction.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhtest.core.exceptions import InvalidParameterError
from pyhtest.core.validation import (
    check_array,
    check_consistent_length,
    check_finite_scalar,
    check_min_samples,
    check_open_unit_interval,
    check_positive,
    drop_nonfinite,
)
from pyhtest.hypothesis._common import (
    MIN_SAMPLES,
    MIN_SAMPLES_PER_GROUP,
    Tail,
    TestKind,
)


def is_one(value: float) -> bool:
    """Default success predicate for the proportion test."""
    return value == 1


@dataclass(frozen=True)
class TestConfig:
    """
    Configuration for a one-sample test.

    Attributes
    ----------
    kind : TestKind or str
        "mean" (default), "variance", "proportion" or "correlation".
    alpha : float
        Significance level in (0, 1). Default 0.05.
    mu0 : float
        Null mean for the mean test. Default 0.
    sigma0_squared : float
        Null variance for the variance test, must be positive. Default 1.
    p0 : float
        Null proportion for the proportion test, in (0, 1). Default 0.5.
    tail : Tail or str
        "two" (default), "left" or "right".
    success : callable
        Maps a raw value to True/False for the proportion test.
        Default: value == 1.

    Strings for `kind` and `tail` are coerced to their enums. Use
    `with_()` to derive a modified copy.
    """

    kind: TestKind = TestKind.MEAN
    alpha: float = 0.05
    mu0: float = 0.0
    sigma0_squared: float = 1.0
    p0: float = 0.5
    tail: Tail = Tail.TWO
    success: Callable[[float], bool] = is_one

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TestKind.coerce(self.kind))
        object.__setattr__(self, "tail", Tail.coerce(self.tail))
        object.__setattr__(self, "alpha", check_open_unit_interval(self.alpha, "alpha"))
        object.__setattr__(self, "mu0", check_finite_scalar(self.mu0, "mu0"))
        object.__setattr__(
            self, "sigma0_squared", check_positive(self.sigma0_squared, "sigma0_squared")
        )
        object.__setattr__(self, "p0", check_open_unit_interval(self.p0, "p0"))
        if not callable(self.success):
            raise InvalidParameterError(
                f"success must be callable, got {type(self.success).__name__}",
                parameter="success",
                value=self.success,
            )

    def with_(self, **changes: Any) -> TestConfig:
        """Return a copy with the given fields replaced (and revalidated)."""
        return dataclasses.replace(self, **changes)


def _finite_sample(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to 1D float64 and drop NaN and +/-Inf."""
    return drop_nonfinite(check_array(values, name))


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated ("mean", "variance", "proportion", "correlation"
    or "welch"). Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Finite observations
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _config: TestConfig = field(default_factory=TestConfig)

    # Metadata
    _data_name: str = "x"
    _group_names: tuple[str, str] = ("Group A", "Group B")

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def config(self) -> TestConfig:
        return self._config

    @property
    def kind(self) -> TestKind:
        return self._config.kind

    @property
    def alpha(self) -> float:
        return self._config.alpha

    @property
    def tail(self) -> Tail:
        return self._config.tail

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def group_names(self) -> tuple[str, str]:
        return self._group_names

    # --- Factory classmethods ---

    @classmethod
    def for_one_sample(
        cls,
        values: ArrayLike,
        config: TestConfig | None = None,
        *,
        data_name: str = "x",
    ) -> HypothesisDesign:
        """Build design for run_one_sample_test()."""
        if config is None:
            config = TestConfig()

        x_arr = _finite_sample(values, data_name)
        check_min_samples(x_arr, MIN_SAMPLES[config.kind], data_name)

        return cls(
            test_type=config.kind.value,
            _x=x_arr,
            _config=config,
            _data_name=data_name,
        )

    @classmethod
    def for_welch(
        cls,
        group_a: ArrayLike,
        group_b: ArrayLike,
        *,
        alpha: float = 0.05,
        tail: Tail | str = Tail.TWO,
        name_a: str = "Group A",
        name_b: str = "Group B",
    ) -> HypothesisDesign:
        """
        Build design for run_welch_two_sample_test().

        The two raw inputs must have equal length; non-finite values are
        then dropped from each group independently.
        """
        config = TestConfig(kind=TestKind.MEAN, alpha=alpha, tail=tail)

        a_raw = check_array(group_a, name_a)
        b_raw = check_array(group_b, name_b)
        check_consistent_length(a_raw, b_raw, names=(name_a, name_b))

        a_arr = drop_nonfinite(a_raw)
        b_arr = drop_nonfinite(b_raw)
        check_min_samples(a_arr, MIN_SAMPLES_PER_GROUP, name_a)
        check_min_samples(b_arr, MIN_SAMPLES_PER_GROUP, name_b)

        return cls(
            test_type="welch",
            _x=a_arr,
            _y=b_arr,
            _config=config,
            _data_name=f"{name_a} and {name_b}",
            _group_names=(name_a, name_b),
        )

    def __repr__(self) -> str:
        n_x = len(self._x) if self._x is not None else 0
        n_y = len(self._y) if self._y is not None else 0
        if n_y > 0:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"n_x={n_x}, n_y={n_y})"
            )
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, n={n_x})"
        )
