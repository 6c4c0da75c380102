"""
Shared numeric infrastructure for fixedmatrix.

Submodules:
    precision: Machine epsilon and ULP-based closeness kernels
    tolerances: Tolerance tiers and the pivot threshold
"""

from fixedmatrix.core.compute.precision import (
    DEFAULT_MAX_ULPS,
    EPSILON_32,
    EPSILON_64,
    almost_equal,
    machine_epsilon,
    ulp_distance,
)
from fixedmatrix.core.compute.tolerances import (
    FP32_ELIMINATION,
    FP32_EXACT,
    FP64_ELIMINATION,
    FP64_EXACT,
    ILL_CONDITIONED_PIVOT_RATIO,
    ToleranceTier,
    pivot_tolerance,
    select_tolerance,
)

__all__ = [
    # Precision
    "DEFAULT_MAX_ULPS",
    "EPSILON_32",
    "EPSILON_64",
    "almost_equal",
    "machine_epsilon",
    "ulp_distance",
    # Tolerances
    "FP32_ELIMINATION",
    "FP32_EXACT",
    "FP64_ELIMINATION",
    "FP64_EXACT",
    "ILL_CONDITIONED_PIVOT_RATIO",
    "ToleranceTier",
    "pivot_tolerance",
    "select_tolerance",
]
