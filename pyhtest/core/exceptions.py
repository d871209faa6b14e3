"""
Exception hierarchy for PyHTest.

All exceptions inherit from PyHTestError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyHTestError(Exception):
    """Base exception for all PyHTest errors."""
    pass


class ValidationError(PyHTestError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Sample has fewer finite observations than the test requires.

    Attributes:
        name: Name of the offending sample
        required: Structural minimum for the test
        actual: Number of finite observations after filtering
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.required = required
        self.actual = actual


class InvalidParameterError(ValidationError):
    """
    A scalar parameter is outside its admissible domain.

    Covers probabilities outside (0, 1), unknown enum values and
    non-positive variances.

    Attributes:
        parameter: Parameter name
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Two inputs that must have equal length do not.

    Attributes:
        lengths: Mapping of input name to its length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths or {}


class NumericalError(PyHTestError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NumericDegeneracyError(NumericalError):
    """
    A statistic or special function cannot be evaluated reliably.

    Raised for zero standard errors (division by zero in a t or z
    statistic) and for special functions that exhaust their iteration
    cap while producing a value used for a significance decision.

    Attributes:
        quantity: Name of the quantity that degenerated
        iterations: Iterations completed, for iterative routines
        reason: Short tag, e.g. 'zero_variance', 'non_finite' or 'max_iterations'
    """

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        iterations: int | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.iterations = iterations
        self.reason = reason
