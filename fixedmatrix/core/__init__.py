"""
Core infrastructure for fixedmatrix.

This module provides shared abstractions and utilities used by the matrix
type and the linear-system layer.

Key components:
    protocols: Backend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision constants and tolerance tiers
"""

from fixedmatrix.core.protocols import Backend
from fixedmatrix.core.exceptions import (
    FixedMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Exceptions
    "FixedMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
]
