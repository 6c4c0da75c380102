"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different ways a matrix can be
produced:
- exact arithmetic paths (construction, +, -, scalar ops): machine epsilon
- elimination paths (gauss_jordan, solve, inverse): rounding accumulates
  across O(n) row operations, so the floor and ULP budget are relaxed

Used by the test suite, the tolerant comparison and the linear-system
layer's consistency and conditioning checks.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.core.compute.precision import (
    DEFAULT_MAX_ULPS,
    EPSILON_32,
    EPSILON_64,
    machine_epsilon,
)


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for matrix comparison."""
    epsilon: float
    max_ulps: int
    name: str
    description: str


# Double precision, results of exact or single-step arithmetic
FP64_EXACT = ToleranceTier(
    epsilon=EPSILON_64,
    max_ulps=DEFAULT_MAX_ULPS,
    name='fp64_exact',
    description='Double precision, machine epsilon floor',
)

# Double precision, results of elimination (solve, inverse, products with an inverse)
FP64_ELIMINATION = ToleranceTier(
    epsilon=1e-12,
    max_ulps=100,
    name='fp64_elimination',
    description='Double precision after elimination',
)

# Single precision, results of exact or single-step arithmetic
FP32_EXACT = ToleranceTier(
    epsilon=EPSILON_32,
    max_ulps=DEFAULT_MAX_ULPS,
    name='fp32_exact',
    description='Single precision, machine epsilon floor',
)

# Single precision, results of elimination
FP32_ELIMINATION = ToleranceTier(
    epsilon=1e-4,
    max_ulps=100,
    name='fp32_elimination',
    description='Single precision after elimination',
)

# Smallest acceptable min|pivot| / max|pivot| before the linear-system
# layer reports the system as ill-conditioned.
ILL_CONDITIONED_PIVOT_RATIO = 1e-10


def select_tolerance(
    dtype: np.dtype | type = np.float64,
    after_elimination: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given dtype."""
    if np.dtype(dtype).itemsize <= 4:
        if after_elimination:
            return FP32_ELIMINATION
        return FP32_EXACT
    else:
        if after_elimination:
            return FP64_ELIMINATION
        return FP64_EXACT


def pivot_tolerance(block: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Per-row thresholds at or below which a pivot candidate counts as zero.

    Each row's threshold scales machine epsilon by the block's largest
    dimension and that row's largest magnitude. Rows of very different
    scale are judged against their own entries, and an all-zero row has
    threshold zero.

    Args:
        block: Coefficient block being eliminated (rows x k)

    Returns:
        Array of absolute pivot thresholds, one per row
    """
    if block.size == 0:
        return np.zeros(block.shape[0], dtype=block.dtype)
    scale = np.max(np.abs(block), axis=1)
    return max(block.shape) * machine_epsilon(block.dtype) * scale
