"""
Fixed-dimension matrix module.

Public API:
    Matrix           - Dense matrix type; bind dimensions with Matrix[rows, cols]
    Row              - Writable view of one matrix row
    matrix_type      - Functional form of Matrix[rows, cols, dtype]
    equals           - Tolerance-aware comparison (epsilon floor + ULP bound)
    back_substitute  - Solution of an augmented system from its gauss() form

Elimination kernels (arrays in, EliminationResult out):
    row_echelon, reduced_row_echelon, EliminationResult
"""

from fixedmatrix.matrix.matrix import Matrix, Row, matrix_type, back_substitute
from fixedmatrix.matrix.comparison import equals
from fixedmatrix.matrix.elimination import (
    EliminationResult,
    reduced_row_echelon,
    row_echelon,
)

__all__ = [
    "Matrix",
    "Row",
    "matrix_type",
    "equals",
    "back_substitute",
    "EliminationResult",
    "row_echelon",
    "reduced_row_echelon",
]
