"""
fixedmatrix: fixed-dimension dense matrices for Python.

Small dense matrices whose dimensions are bound to the type, with
arithmetic, transposition, Gaussian and Gauss-Jordan elimination,
linear-system solving, inversion and tolerance-aware comparison.

Submodules:
    matrix: The Matrix type, elimination kernels, tolerant comparison
    linsolve: Linear systems with elimination diagnostics
    core: Exceptions, validation, precision and tolerance infrastructure
"""

__version__ = "0.1.0"

from fixedmatrix.matrix import Matrix, Row, matrix_type, equals, back_substitute
from fixedmatrix import linsolve

__all__ = [
    "__version__",
    "Matrix",
    "Row",
    "matrix_type",
    "equals",
    "back_substitute",
    "linsolve",
]
