"""
CPU elimination backends for linear systems.

Both backends run partial-pivoting elimination from
fixedmatrix.matrix.elimination on the augmented matrix [A | B]:

    cpu_gauss_jordan: reduce to reduced row echelon form and read X from
                      the right-hand columns.
    cpu_gauss:        reduce to row echelon form, then back substitute
                      through the unit upper-triangular block (SciPy).
"""

import time
import warnings
from abc import ABC, abstractmethod

from fixedmatrix.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from fixedmatrix.linsolve.design import LinearSystemDesign
from fixedmatrix.linsolve.solution import LinearSystemParams
from fixedmatrix.matrix.elimination import (
    EliminationResult,
    back_substitute,
    reduced_row_echelon,
    row_echelon,
)


def _conditioning_warnings(elimination: EliminationResult) -> tuple[str, ...]:
    ratio = elimination.pivot_ratio
    if ratio >= ILL_CONDITIONED_PIVOT_RATIO:
        return ()
    return (
        f"System is ill-conditioned: pivot ratio {ratio:.3e} is below "
        f"{ILL_CONDITIONED_PIVOT_RATIO:.0e}; the solution may be inaccurate.",
    )


class _CPUEliminationBackend(ABC):
    """
    Shared driver for the elimination backends.

    Subclasses supply the reduction and the extraction of X. The driver
    times both phases and checks the pivot ratio.
    """

    method: str

    @property
    def name(self) -> str:
        return f'cpu_{self.method}'

    @abstractmethod
    def _eliminate(self, augmented) -> EliminationResult:
        ...

    @abstractmethod
    def _extract(self, elimination: EliminationResult, n: int):
        ...

    def solve(self, design: LinearSystemDesign) -> LinearSystemParams:
        """
        Solve A X = B.

        Args:
            design: Validated linear system design

        Returns:
            LinearSystemParams with the solution, pivot diagnostics and
            per-phase timing

        Raises:
            SingularMatrixError: If A is singular
        """
        started = time.perf_counter()
        elimination = self._eliminate(design.augmented)
        eliminated = time.perf_counter()
        solution = self._extract(elimination, design.n)
        finished = time.perf_counter()

        notes = _conditioning_warnings(elimination)
        for msg in notes:
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        return LinearSystemParams(
            solution=solution,
            pivots=elimination.pivots,
            pivot_rows=elimination.pivot_rows,
            swaps=elimination.swaps,
            determinant=elimination.determinant,
            pivot_ratio=elimination.pivot_ratio,
            method=self.method,
            backend_name=self.name,
            timing={
                'total_seconds': finished - started,
                'elimination': eliminated - started,
                'extract': finished - eliminated,
            },
            warnings=notes,
        )


class CPUGaussJordanBackend(_CPUEliminationBackend):
    """Reduced row echelon form; X is read off the right-hand columns."""

    method = 'gauss_jordan'

    def _eliminate(self, augmented) -> EliminationResult:
        return reduced_row_echelon(augmented, 'A')

    def _extract(self, elimination: EliminationResult, n: int):
        return elimination.reduced[:, n:].copy()


class CPUGaussBackend(_CPUEliminationBackend):
    """Row echelon form followed by unit-triangular back substitution."""

    method = 'gauss'

    def _eliminate(self, augmented) -> EliminationResult:
        return row_echelon(augmented, 'A')

    def _extract(self, elimination: EliminationResult, n: int):
        return back_substitute(elimination.reduced)
