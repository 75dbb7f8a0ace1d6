"""
Input validation utilities for PyFreqStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (floats are never truncated to integers)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfreqstats.core.exceptions import ValidationError


def check_integer_array(values: ArrayLike, name: str) -> NDArray[np.int64]:
    """
    Validate and convert input to an int64 numpy array.

    Args:
        values: Input to validate (sequence of ints or integer array)
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype int64

    Raises:
        ValidationError: If input is not integer data or overflows int64
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    # Empty input has no meaningful dtype (np.asarray([]) is float64)
    if result.size == 0:
        return result.astype(np.int64)

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types "
            f"or integers outside the 64-bit range"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.integer):
        raise ValidationError(
            f"{name}: non-integer dtype {result.dtype}, expected integer data"
        )

    if result.dtype == np.uint64 and result.size and result.max() > np.iinfo(np.int64).max:
        raise ValidationError(f"{name}: values exceed the signed 64-bit range")

    return result.astype(np.int64)


def check_1d(array: NDArray, name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ValidationError: If array is not 1D
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_nonempty(array: NDArray, name: str) -> None:
    """
    Verify array has at least one observation.

    Raises:
        ValidationError: If array is empty
    """
    if array.shape[0] < 1:
        raise ValidationError(f"{name}: requires at least 1 observation, got 0")
