"""
Core infrastructure for PyHTest.

This module provides shared abstractions and utilities used by the
special-function, distribution and hypothesis-testing subpackages.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and iteration limits
"""

from pyhtest.core.protocols import Backend
from pyhtest.core.result import Result
from pyhtest.core.exceptions import (
    PyHTestError,
    ValidationError,
    InsufficientDataError,
    InvalidParameterError,
    DimensionError,
    LengthMismatchError,
    NumericalError,
    NumericDegeneracyError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyHTestError",
    "ValidationError",
    "InsufficientDataError",
    "InvalidParameterError",
    "DimensionError",
    "LengthMismatchError",
    "NumericalError",
    "NumericDegeneracyError",
]
