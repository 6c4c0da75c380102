"""
Elimination kernels.

Row echelon and reduced row echelon reduction of dense 2-D arrays, plus
unit-triangular back substitution. The Matrix methods gauss(),
gauss_jordan(), solve() and inverse() are thin wrappers over these; the
linear-system backends call them directly to get pivot diagnostics.

Pivot rule:
    Partial pivoting. For pivot column j (j < min(rows, cols)) the pivot
    row is the one at or below row j with the largest |a[i, j]|; ties go
    to the topmost such row. A column whose best candidate is at or below
    the threshold of the candidate's own row (pivot_tolerance of the
    coefficient block) makes the matrix singular.

Every pivot row is divided by its pivot before it is used, so pivots are
exactly 1.0 and eliminated entries come out as exact zeros.
"""

from dataclasses import dataclass, replace
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from fixedmatrix.core.compute.tolerances import pivot_tolerance
from fixedmatrix.core.exceptions import DimensionError, SingularMatrixError
from fixedmatrix.core.validation import check_2d, check_finite


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of forward (and optionally backward) elimination.

    Attributes:
        reduced: The eliminated matrix (row echelon or reduced row echelon)
        pivot_rows: For each pivot position, the original row index moved there
        pivots: Pivot values before normalization, one per pivot column
        swaps: Number of row interchanges performed
        reduced_form: True when entries above the pivots were also eliminated
    """
    reduced: NDArray[np.floating[Any]]
    pivot_rows: tuple[int, ...]
    pivots: NDArray[np.floating[Any]]
    swaps: int
    reduced_form: bool = False

    @property
    def rank(self) -> int:
        """Number of pivots found (always min(rows, cols) on success)."""
        return len(self.pivots)

    @property
    def determinant(self) -> float:
        """
        Determinant of the square coefficient block.

        Product of the pivots, negated once per row interchange.
        """
        sign = -1.0 if self.swaps % 2 else 1.0
        return sign * float(np.prod(self.pivots))

    @property
    def pivot_ratio(self) -> float:
        """min|pivot| / max|pivot|, a cheap conditioning indicator."""
        magnitudes = np.abs(self.pivots)
        return float(np.min(magnitudes) / np.max(magnitudes))


def row_echelon(
    A: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> EliminationResult:
    """
    Forward Gaussian elimination with partial pivoting and unit pivots.

    Entries below each pivot are eliminated; entries above are left as is.

    Args:
        A: 2-D array (coefficients, optionally augmented with right-hand sides)
        matrix_name: Name used in error messages

    Returns:
        EliminationResult in row echelon form. A is not modified.

    Raises:
        ValidationError: If A contains NaN or Inf
        SingularMatrixError: If a pivot column has no usable candidate
    """
    check_2d(A, matrix_name)
    check_finite(A, matrix_name)
    a = np.array(A, copy=True)
    n_rows, n_cols = a.shape
    k = min(n_rows, n_cols)

    row_tol = pivot_tolerance(a[:, :k])
    order = list(range(n_rows))
    pivots = np.empty(k, dtype=a.dtype)
    swaps = 0

    for col in range(k):
        p = col + int(np.argmax(np.abs(a[col:, col])))
        candidate = float(abs(a[p, col]))
        tol = float(row_tol[p])
        if candidate <= tol:
            raise SingularMatrixError(
                f"{matrix_name} is singular: no pivot in column {col} "
                f"(largest candidate {candidate:.3e}, tolerance {tol:.3e})",
                matrix_name=matrix_name,
                column=col,
                pivot=candidate,
                tolerance=tol,
            )

        if p != col:
            a[[col, p]] = a[[p, col]]
            row_tol[[col, p]] = row_tol[[p, col]]
            order[col], order[p] = order[p], order[col]
            swaps += 1

        pivots[col] = a[col, col]
        a[col] /= a[col, col]

        factors = a[col + 1:, col].copy()
        a[col + 1:] -= np.outer(factors, a[col])

    return EliminationResult(
        reduced=a,
        pivot_rows=tuple(order),
        pivots=pivots,
        swaps=swaps,
    )


def reduced_row_echelon(
    A: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> EliminationResult:
    """
    Gauss-Jordan reduction.

    Runs row_echelon(), then eliminates the entries above each pivot
    working from the last pivot upward.

    Args:
        A: 2-D array (coefficients, optionally augmented with right-hand sides)
        matrix_name: Name used in error messages

    Returns:
        EliminationResult in reduced row echelon form. A is not modified.

    Raises:
        SingularMatrixError: If a pivot column has no usable candidate
    """
    forward = row_echelon(A, matrix_name)
    a = forward.reduced

    for col in reversed(range(len(forward.pivots))):
        factors = a[:col, col].copy()
        a[:col] -= np.outer(factors, a[col])

    return replace(forward, reduced=a, reduced_form=True)


def back_substitute(
    echelon: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve an augmented system already in row echelon form.

    The left n x n block of an n x (n + m) echelon matrix from
    row_echelon() is upper triangular with a unit diagonal, so the
    solution follows by back substitution on the right-hand columns.

    Args:
        echelon: Row echelon augmented matrix (n x (n + m), m >= 1)

    Returns:
        Solution array of shape (n, m)

    Raises:
        DimensionError: If echelon has no right-hand-side column
    """
    check_2d(echelon, 'echelon')
    n, n_cols = echelon.shape
    if n_cols <= n:
        raise DimensionError(
            f"echelon: expected an augmented n x (n + m) matrix, got shape {echelon.shape}",
            expected=(n, n + 1),
            actual=echelon.shape,
        )
    return solve_triangular(
        echelon[:, :n],
        echelon[:, n:],
        lower=False,
        unit_diagonal=True,
    )
