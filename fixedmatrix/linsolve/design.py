"""
Linear system design.

LinearSystemDesign holds a validated square coefficient matrix A and one
or more right-hand-side columns B for the system A X = B. Backends trust
it: validation happens once, here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from fixedmatrix.core.exceptions import DimensionError
from fixedmatrix.core.validation import check_array, check_finite, check_2d
from fixedmatrix.matrix import Matrix


def _as_array(value: ArrayLike | Matrix, name: str) -> NDArray[np.floating[Any]]:
    if isinstance(value, Matrix):
        return value.array.copy()
    return check_array(value, name)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system A X = B.

    Immutable after construction.

    Construction:
        LinearSystemDesign.from_augmented(m)    # m is n x (n + k), Matrix or array
        LinearSystemDesign.from_arrays(A, b)    # b is (n,) or (n, k)
    """
    _A: NDArray[np.floating[Any]]
    _B: NDArray[np.floating[Any]]
    _n: int
    _n_rhs: int

    @classmethod
    def from_augmented(cls, augmented: ArrayLike | Matrix) -> LinearSystemDesign:
        """
        Build from an augmented matrix [A | B].

        Args:
            augmented: n x (n + k) Matrix or array-like, k >= 1
        """
        arr = _as_array(augmented, 'augmented')
        check_2d(arr, 'augmented')
        n, n_cols = arr.shape
        if n_cols <= n:
            raise DimensionError(
                f"augmented: expected n x (n + k) with k >= 1, got shape {arr.shape}",
                expected=(n, n + 1),
                actual=arr.shape,
            )
        return cls._build(arr[:, :n], arr[:, n:])

    @classmethod
    def from_arrays(
        cls,
        A: ArrayLike | Matrix,
        b: ArrayLike | Matrix,
    ) -> LinearSystemDesign:
        """
        Build from coefficients and right-hand side(s).

        Args:
            A: Square n x n coefficients
            b: Right-hand side, shape (n,) or (n, k)
        """
        A_arr = _as_array(A, 'A')
        b_arr = _as_array(b, 'b')
        if b_arr.ndim == 1:
            b_arr = b_arr.reshape(-1, 1)
        return cls._build(A_arr, b_arr)

    @classmethod
    def _build(
        cls,
        A: NDArray[np.floating[Any]],
        B: NDArray[np.floating[Any]],
    ) -> LinearSystemDesign:
        check_2d(A, 'A')
        check_2d(B, 'b')

        n, p = A.shape
        if n != p:
            raise DimensionError(
                f"A: expected a square coefficient matrix, got shape {A.shape}",
                expected=(n, n),
                actual=A.shape,
            )
        if B.shape[0] != n:
            raise DimensionError(
                f"Inconsistent lengths: A={n}, b={B.shape[0]}",
                expected=n,
                actual=B.shape[0],
            )
        if B.shape[1] < 1:
            raise DimensionError(
                "b: expected at least one right-hand-side column",
                expected=1,
                actual=0,
            )

        check_finite(A, 'A')
        check_finite(B, 'b')

        dtype = np.result_type(A, B)
        return cls(
            _A=np.ascontiguousarray(A, dtype=dtype),
            _B=np.ascontiguousarray(B, dtype=dtype),
            _n=n,
            _n_rhs=B.shape[1],
        )

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def B(self) -> NDArray[np.floating[Any]]:
        """Right-hand sides (n x k)."""
        return self._B

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    @property
    def n_rhs(self) -> int:
        """Number of right-hand-side columns."""
        return self._n_rhs

    @property
    def augmented(self) -> NDArray[np.floating[Any]]:
        """[A | B] as a fresh n x (n + k) array."""
        return np.hstack([self._A, self._B])
