"""
Numerical precision constants and utilities.

Provides machine epsilon and the floating-point closeness kernels used by
the tolerant matrix comparison.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from fixedmatrix.core.exceptions import ValidationError


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Default number of representable steps two values may differ by
DEFAULT_MAX_ULPS: int = 4


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def ulp_distance(a: ArrayLike, b: ArrayLike) -> NDArray[np.signedinteger[Any]]:
    """
    Count representable floating-point steps between a and b.

    The bit pattern of an IEEE float read as a signed integer is monotonic
    within each sign, so the distance between two same-signed values is
    the difference of their integer views. Values of opposite sign, and
    any NaN, get the maximum integer of the matching width.

    Args:
        a: First value(s)
        b: Second value(s)

    Returns:
        Integer array (broadcast shape of a and b) of ULP distances

    Raises:
        ValidationError: If the inputs are not floating point
    """
    a_arr = np.asarray(a)
    b_arr = np.asarray(b)
    dtype = np.result_type(a_arr, b_arr)
    if not np.issubdtype(dtype, np.floating):
        raise ValidationError(
            f"ulp_distance: expected floating-point input, got {dtype}"
        )
    if dtype.itemsize not in (2, 4, 8):
        raise ValidationError(
            f"ulp_distance: no integer view for {dtype} ({dtype.itemsize} bytes)"
        )

    a_arr, b_arr = (
        arr.copy() for arr in np.broadcast_arrays(a_arr.astype(dtype), b_arr.astype(dtype))
    )
    int_type = np.dtype(f'i{dtype.itemsize}')
    a_bits = a_arr.view(int_type)
    b_bits = b_arr.view(int_type)

    unreachable = np.signbit(a_arr) != np.signbit(b_arr)
    unreachable |= np.isnan(a_arr) | np.isnan(b_arr)

    # Substitute b for a where the subtraction could overflow
    a_bits = np.where(unreachable, b_bits, a_bits)
    distance = np.abs(a_bits - b_bits)
    return np.where(unreachable, np.iinfo(int_type).max, distance)


def almost_equal(
    a: ArrayLike,
    b: ArrayLike,
    epsilon: float,
    max_ulps: int,
) -> NDArray[np.bool_]:
    """
    Element-wise floating-point closeness.

    Two values are close when they are exactly equal, when they are at
    most ``max_ulps`` representable steps apart with the same sign, or
    when their absolute difference is within the floor

        epsilon * max(max_ulps, 1) * max(1, |a|, |b|)

    The floor covers results that should be zero but carry a few rounding
    steps of a unit-sized neighbour, such as the off-diagonal entries of a
    matrix multiplied by its inverse. With ``epsilon == 0`` only exact
    equality and the ULP bound apply.

    Args:
        a: First value(s)
        b: Second value(s)
        epsilon: Relative step of the floor (machine epsilon for "a few ULPs")
        max_ulps: Maximum ULP distance

    Returns:
        Boolean array indicating closeness
    """
    a_arr = np.asarray(a)
    b_arr = np.asarray(b)
    with np.errstate(invalid='ignore', over='ignore'):
        diff = np.abs(a_arr - b_arr)
        scale = np.maximum(1.0, np.maximum(np.abs(a_arr), np.abs(b_arr)))
        floor = epsilon * max(max_ulps, 1) * scale
        close = (a_arr == b_arr) | (np.isfinite(diff) & (diff <= floor))
    return close | (ulp_distance(a_arr, b_arr) <= max_ulps)
