"""
Input validation utilities for PyHTest.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhtest.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
    LengthMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a 1D float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and inputs with more than one dimension.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
        DimensionError: If input is not one-dimensional
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.); bool is fine
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim == 0:
        result = result.reshape(1)
    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {result.ndim}D with shape {result.shape}"
        )

    return result.astype(np.float64, copy=False)


def drop_nonfinite(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return the finite entries of a 1D array, preserving order."""
    return array[np.isfinite(array)]


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length.

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = {name: int(arr.shape[0]) for arr, name in zip(arrays, names)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise LengthMismatchError(f"Inconsistent lengths: {details}", lengths=lengths)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples
        name: Parameter name for error messages

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = int(array.shape[0])
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} finite values, got {n}",
            name=name,
            required=min_samples,
            actual=n,
        )


def check_open_unit_interval(value: float, name: str) -> float:
    """
    Verify a probability-like parameter lies strictly inside (0, 1).

    Raises:
        InvalidParameterError: If value is NaN or outside (0, 1)
    """
    value = float(value)
    if not (0.0 < value < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar parameter is finite and strictly positive.

    Raises:
        InvalidParameterError: If value is non-finite or <= 0
    """
    value = float(value)
    if not (math.isfinite(value) and value > 0.0):
        raise InvalidParameterError(
            f"{name} must be positive and finite, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_finite_scalar(value: float, name: str) -> float:
    """
    Verify a scalar parameter is finite.

    Raises:
        InvalidParameterError: If value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(
            f"{name} must be finite, got {value}",
            parameter=name,
            value=value,
        )
    return value
