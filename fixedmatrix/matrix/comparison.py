"""
Tolerance-aware matrix comparison.

Exact ``==`` is the right test for construction and for arithmetic that
stays on representable values, but results of elimination carry rounding
error. equals() compares entry by entry with a magnitude-scaled floor plus a
ULP bound instead. It is never used by ``==``.
"""

import operator

from fixedmatrix.core.compute.precision import (
    DEFAULT_MAX_ULPS,
    almost_equal,
    machine_epsilon,
)
from fixedmatrix.core.exceptions import ValidationError
from fixedmatrix.core.validation import check_non_negative
from fixedmatrix.matrix.matrix import Matrix


def equals(
    a: Matrix,
    b: Matrix,
    epsilon: float | None = None,
    max_ulps: int = DEFAULT_MAX_ULPS,
) -> bool:
    """
    Compare two matrices of identical dimensions within tolerance.

    Each entry pair must be exactly equal, differ by at most
    ``epsilon * max(max_ulps, 1) * max(1, |a|, |b|)``, or lie within ``max_ulps`` representable steps of each other with the
    same sign. NaN entries never compare close.

    Args:
        a: First matrix
        b: Second matrix, same dimensions and dtype as a
        epsilon: Step of the difference floor; machine epsilon of the dtype
            if None, 0 to rely on the ULP bound alone
        max_ulps: Maximum distance in units in the last place

    Returns:
        True if every entry pair is close

    Raises:
        ValidationError: If an operand is not a Matrix or a tolerance is negative
        DimensionError: If the dimensions or dtypes differ
    """
    if not isinstance(a, Matrix) or not isinstance(b, Matrix):
        raise ValidationError(
            f"equals: expected two matrices, got {type(a).__name__} and {type(b).__name__}"
        )
    a._check_compatible(b, 'equals')

    if epsilon is None:
        epsilon = machine_epsilon(a.dtype)
    check_non_negative(epsilon, 'epsilon')
    try:
        max_ulps = operator.index(max_ulps)
    except TypeError as e:
        raise ValidationError(
            f"max_ulps: expected an integer, got {type(max_ulps).__name__}"
        ) from e
    check_non_negative(max_ulps, 'max_ulps')

    return bool(almost_equal(a.array, b.array, epsilon, max_ulps).all())
