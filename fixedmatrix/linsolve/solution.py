"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from fixedmatrix.core.compute.precision import almost_equal
from fixedmatrix.core.compute.tolerances import ToleranceTier, select_tolerance
from fixedmatrix.matrix import Matrix, matrix_type

if TYPE_CHECKING:
    from fixedmatrix.linsolve.design import LinearSystemDesign


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for a solved linear system.

    Attributes:
        solution: X with A X = B, shape (n, k)
        pivots: Pivot values before normalization, shape (n,)
        pivot_rows: Original row moved into each pivot position
        swaps: Number of row interchanges
        determinant: det(A) from the pivots and swap parity
        pivot_ratio: min|pivot| / max|pivot|
        method: 'gauss_jordan' or 'gauss'
        backend_name: Backend that produced the solution
        timing: Seconds per phase ('elimination', 'extract') and in total
        warnings: Non-fatal conditioning issues found during elimination
    """
    solution: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    pivot_rows: tuple[int, ...]
    swaps: int
    determinant: float
    pivot_ratio: float
    method: str
    backend_name: str
    timing: dict[str, float]
    warnings: tuple[str, ...] = ()

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps LinearSystemParams and the design it was solved from.
    """
    _params: LinearSystemParams
    _design: 'LinearSystemDesign'

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        """Solution array, shape (n, k)."""
        return self._params.solution

    @property
    def x(self) -> Matrix:
        """Solution as an n x k Matrix."""
        n, k = self.solution.shape
        return matrix_type(n, k, self.solution.dtype)(self.solution)

    @property
    def determinant(self) -> float:
        return self._params.determinant

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        return self._params.pivots

    @property
    def pivot_rows(self) -> tuple[int, ...]:
        return self._params.pivot_rows

    @property
    def pivot_ratio(self) -> float:
        return self._params.pivot_ratio

    @property
    def method(self) -> str:
        return self._params.method

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """A X - B, shape (n, k)."""
        return self._design.A @ self.solution - self._design.B

    def is_consistent(self, tolerance: ToleranceTier | None = None) -> bool:
        """
        Check that A X reproduces B within tolerance.

        Args:
            tolerance: Tier to compare with; the elimination tier for the
                solution's dtype if None
        """
        if tolerance is None:
            tolerance = select_tolerance(self.solution.dtype, after_elimination=True)
        reproduced = self._design.A @ self.solution
        return bool(np.all(almost_equal(
            reproduced, self._design.B, tolerance.epsilon, tolerance.max_ulps
        )))

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        """Elimination metadata: method, swaps, pivot rows, pivot ratio."""
        return {
            'method': self.method,
            'swaps': self._params.swaps,
            'pivot_rows': self.pivot_rows,
            'pivot_ratio': self.pivot_ratio,
        }

    @property
    def timing(self) -> dict[str, float]:
        return self._params.timing

    @property
    def backend_name(self) -> str:
        return self._params.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._params.warnings

    def summary(self) -> str:
        """Plain-text report of the solution and elimination diagnostics."""
        lines = [
            "Linear System Solution",
            "=" * 60,
            f"Equations: {self._design.n}",
            f"Right-hand sides: {self._design.n_rhs}",
            f"Method: {self.method}",
            f"Determinant: {self.determinant:.6g}",
            f"Row swaps: {self._params.swaps}",
            f"Pivot ratio: {self.pivot_ratio:.3e}",
            "",
            "Solution:",
            "-" * 60,
        ]

        for i, row in enumerate(self.solution):
            values = " ".join(f"{v:14.6f}" for v in row)
            lines.append(f"  x[{i}]: {values}")

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self._design.n}, n_rhs={self._design.n_rhs}, "
            f"method={self.method!r}, determinant={self.determinant:.6g})"
        )
