"""
Solver dispatch for linear systems.

This module provides the solve_system() function (public API) and backend
selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from fixedmatrix.core.exceptions import ValidationError
from fixedmatrix.core.protocols import Backend
from fixedmatrix.linsolve.design import LinearSystemDesign
from fixedmatrix.linsolve.solution import LinearSystemParams, LinearSystemSolution
from fixedmatrix.linsolve.backends.cpu import CPUGaussBackend, CPUGaussJordanBackend
from fixedmatrix.matrix import Matrix


MethodChoice = Literal['gauss_jordan', 'gauss']


def solve_system(
    system: ArrayLike | Matrix | LinearSystemDesign,
    rhs: ArrayLike | Matrix | None = None,
    *,
    method: MethodChoice = 'gauss_jordan',
) -> LinearSystemSolution:
    """
    Solve the square linear system A X = B with elimination diagnostics.

    Args:
        system: One of
            - an augmented n x (n + k) Matrix or array-like [A | B] (rhs=None)
            - the n x n coefficients A (rhs given)
            - a prepared LinearSystemDesign
        rhs: Right-hand side(s), shape (n,) or (n, k)
        method: Elimination strategy:
            - 'gauss_jordan': reduced row echelon form (default)
            - 'gauss': row echelon form plus back substitution

    Returns:
        LinearSystemSolution with X, determinant, pivots and timing

    Raises:
        ValidationError: If inputs are invalid or method is unknown
        DimensionError: If A is not square or B does not match A
        SingularMatrixError: If A is singular

    Example:
        >>> from fixedmatrix.linsolve import solve_system
        >>> result = solve_system([[0, 1, 1, 5], [3, 2, 2, 13], [1, -1, 3, 8]])
        >>> result.solution.ravel()
        array([1., 2., 3.])
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(system, LinearSystemDesign):
        if rhs is not None:
            raise ValidationError("rhs must be None when system is a LinearSystemDesign")
        design = system
    elif rhs is None:
        design = LinearSystemDesign.from_augmented(system)
    else:
        design = LinearSystemDesign.from_arrays(system, rhs)

    # === Select Backend and Solve ===
    backend_impl = _get_backend(method)
    params = backend_impl.solve(design)

    return LinearSystemSolution(_params=params, _design=design)


def _get_backend(method: str) -> Backend[LinearSystemDesign, LinearSystemParams]:
    """Select backend based on method."""
    if method == 'gauss_jordan':
        return CPUGaussJordanBackend()
    if method == 'gauss':
        return CPUGaussBackend()
    raise ValidationError(
        f"Unknown method: {method!r}. Expected 'gauss_jordan' or 'gauss'."
    )
