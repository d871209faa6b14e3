"""
PyHTest: hypothesis testing with self-contained numerical machinery.

Special functions, distribution CDFs/quantiles and test statistics are
implemented directly on top of numpy, so every p-value, critical value
and power figure can be traced to code in this package.

Submodules:
    special: erf, log-gamma, incomplete beta and gamma functions
    distributions: normal, Student-t and chi-square CDFs, CDF inversion
    hypothesis: one-sample and Welch two-sample tests
"""

__version__ = "0.1.0"

from pyhtest import special
from pyhtest import distributions
from pyhtest import hypothesis
from pyhtest.core.exceptions import (
    PyHTestError,
    ValidationError,
    InsufficientDataError,
    InvalidParameterError,
    LengthMismatchError,
    NumericalError,
    NumericDegeneracyError,
)
from pyhtest.hypothesis import (
    HypothesisResult,
    Tail,
    TestConfig,
    TestKind,
    run_one_sample_test,
    run_welch_two_sample_test,
)

__all__ = [
    "__version__",
    "special",
    "distributions",
    "hypothesis",
    "run_one_sample_test",
    "run_welch_two_sample_test",
    "TestConfig",
    "TestKind",
    "Tail",
    "HypothesisResult",
    "PyHTestError",
    "ValidationError",
    "InsufficientDataError",
    "InvalidParameterError",
    "LengthMismatchError",
    "NumericalError",
    "NumericDegeneracyError",
]
