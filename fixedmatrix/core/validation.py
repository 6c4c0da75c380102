"""
Input validation utilities for fixedmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No truncation or padding of matrix data
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from fixedmatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows)
    and complex input, which matrices do not hold.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged rows"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )


def check_shape(
    actual: tuple[int, ...],
    expected: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify a shape matches the expected one exactly.

    Args:
        actual: Shape that was supplied
        expected: Shape the operation requires
        name: Parameter or operation name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if tuple(actual) != tuple(expected):
        raise DimensionError(
            f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}",
            expected=tuple(expected),
            actual=tuple(actual),
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is not positive
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e
    if dim < 1:
        raise ValidationError(f"{name}: must be positive, got {dim}")
    return dim


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected: checked access does not wrap around.

    Args:
        index: Candidate index
        bound: The fixed dimension being indexed
        axis: 'row' or 'column', used in the error message

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    try:
        idx = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{axis}: index must be an integer, got {type(index).__name__}"
        ) from e
    if not 0 <= idx < bound:
        raise IndexOutOfRangeError(
            f"{axis} index {idx} out of range for dimension {bound}",
            index=idx,
            bound=bound,
            axis=axis,
        )
    return idx


def check_non_negative(value: float, name: str) -> None:
    """
    Verify a tolerance parameter is a non-negative number.

    Args:
        value: Tolerance to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is negative or NaN
    """
    if not value >= 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
