"""
Fixed-dimension dense matrix type.

Dimensions are bound to the class rather than to instances: ``Matrix[3, 4]``
is a cached subclass whose every instance holds exactly 3 x 4 entries.
Binary operations compare the operands' bound dimensions (and dtype)
before computing and raise DimensionError on mismatch.

Storage is a flat, row-major numpy buffer; entry (r, c) lives at
position r * cols + c.

Example:
    >>> from fixedmatrix import Matrix
    >>> m = Matrix[3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    >>> (m * m).at(0, 0)
    30.0
    >>> Matrix[3, 4]([[0, 1, 1, 5], [3, 2, 2, 13], [1, -1, 3, 8]]).solve().shape
    (3, 1)
"""

from __future__ import annotations

import numbers
import operator
from functools import lru_cache
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from fixedmatrix.core.exceptions import DimensionError, ValidationError
from fixedmatrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_shape,
)
from fixedmatrix.matrix.elimination import (
    back_substitute as _back_substitute,
    reduced_row_echelon,
    row_echelon,
)


class Row:
    """
    Mutable view of one matrix row.

    Writes through a Row change the owning matrix. ``at`` and ``put`` are
    column-checked; ``row[c]`` is plain numpy indexing.
    """

    __slots__ = ('_values',)

    def __init__(self, values: NDArray[np.floating[Any]]):
        self._values = values

    def at(self, col: int) -> float:
        """Checked read of one entry."""
        idx = check_index(col, len(self._values), 'column')
        return self._values[idx].item()

    def put(self, col: int, value: float) -> None:
        """Checked write of one entry."""
        idx = check_index(col, len(self._values), 'column')
        self._values[idx] = value

    def __getitem__(self, col):
        value = self._values[col]
        return value.item() if np.ndim(value) == 0 else value

    def __setitem__(self, col, value) -> None:
        self._values[col] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self._values, dtype=dtype, copy=True)

    def __repr__(self) -> str:
        return f"Row({self._values.tolist()!r})"


@lru_cache(maxsize=None)
def _specialize(rows: int, cols: int, dtype: np.dtype) -> type[Matrix]:
    return type(
        f"Matrix[{rows}, {cols}]",
        (Matrix,),
        {
            '__slots__': (),
            '__module__': __name__,
            '__qualname__': f"Matrix[{rows}, {cols}]",
            'ROWS': rows,
            'COLS': cols,
            'DTYPE': dtype,
        },
    )


def matrix_type(rows: int, cols: int, dtype: Any = np.float64) -> type[Matrix]:
    """
    Return the Matrix class bound to the given dimensions and dtype.

    Classes are cached, so ``matrix_type(3, 3) is Matrix[3, 3]``.

    Args:
        rows: Positive row count
        cols: Positive column count
        dtype: Floating-point entry type (default float64)

    Raises:
        ValidationError: If a dimension is not a positive integer or the
            dtype is not a real floating type of at most 64 bits
    """
    rows = check_dimension(rows, 'rows')
    cols = check_dimension(cols, 'cols')
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a numpy dtype: {dtype!r}") from e
    if not np.issubdtype(dt, np.floating):
        raise ValidationError(f"dtype: expected a real floating type, got {dt}")
    if dt.itemsize > 8:
        raise ValidationError(
            f"dtype: {dt} is wider than 64 bits; supported floating types are "
            f"float16, float32 and float64"
        )
    return _specialize(rows, cols, dt)


def _restore(rows: int, cols: int, dtype: str, data: NDArray[Any]) -> Matrix:
    return matrix_type(rows, cols, np.dtype(dtype))(data)


class Matrix:
    """
    Dense matrix with dimensions fixed at the type level.

    Construction (on a bound class such as ``Matrix[2, 3]``):
        Matrix[2, 3]()                        # all zeros
        Matrix[2, 3](1.5)                     # every entry 1.5
        Matrix[2, 3]([1, 2, 3, 4, 5, 6])      # flat, row-major
        Matrix[2, 3]([[1, 2, 3], [4, 5, 6]])  # nested rows
        Matrix[2, 3](other)                   # deep copy
        Matrix[2, 3, np.float32]()            # non-default dtype

    Supplying anything other than exactly rows * cols values raises
    DimensionError; the data is never truncated or padded.
    """

    __slots__ = ('_data',)

    # numpy defers binary operators to the Matrix methods
    __array_ufunc__ = None

    ROWS: ClassVar[int | None] = None
    COLS: ClassVar[int | None] = None
    DTYPE: ClassVar[np.dtype] = np.dtype(np.float64)

    def __class_getitem__(cls, params) -> type[Matrix]:
        if not isinstance(params, tuple) or len(params) not in (2, 3):
            raise ValidationError(
                f"Matrix[...]: expected [rows, cols] or [rows, cols, dtype], got {params!r}"
            )
        return matrix_type(*params)

    def __init__(self, values: ArrayLike | Matrix | None = None):
        if self.ROWS is None or self.COLS is None:
            raise ValidationError(
                "Matrix: dimensions are unbound; construct through Matrix[rows, cols](...)"
            )
        size = self.ROWS * self.COLS

        if values is None:
            self._data = np.zeros(size, dtype=self.DTYPE)
            return

        if isinstance(values, Matrix):
            check_shape(values.shape, self.shape, 'values')
            self._data = values._data.astype(self.DTYPE, copy=True)
            return

        arr = check_array(values, 'values')
        if arr.ndim == 0:
            self._data = np.full(size, arr, dtype=self.DTYPE)
        elif arr.ndim == 1:
            if arr.size != size:
                raise DimensionError(
                    f"values: expected {size} entries for a {self.ROWS}x{self.COLS} "
                    f"matrix, got {arr.size}",
                    expected=size,
                    actual=arr.size,
                )
            self._data = arr.astype(self.DTYPE, copy=True)
        else:
            check_shape(arr.shape, self.shape, 'values')
            self._data = arr.astype(self.DTYPE, copy=True).reshape(size)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Build an instance around computed data without re-validating it."""
        obj = cls.__new__(cls)
        obj._data = np.array(data, dtype=cls.DTYPE, copy=True).reshape(cls.ROWS * cls.COLS)
        return obj

    # === Dimensions ===

    @classmethod
    def get_rows(cls) -> int:
        """Fixed row count."""
        return cls.ROWS

    @classmethod
    def get_columns(cls) -> int:
        """Fixed column count."""
        return cls.COLS

    @property
    def shape(self) -> tuple[int, int]:
        return (self.ROWS, self.COLS)

    @property
    def dtype(self) -> np.dtype:
        return self.DTYPE

    @property
    def array(self) -> NDArray[np.floating[Any]]:
        """Writable (rows, cols) view of the backing buffer."""
        return self._data.reshape(self.ROWS, self.COLS)

    # === Copying ===

    def copy(self) -> Matrix:
        return type(self)(self)

    def assign(self, other: Matrix) -> Matrix:
        """Copy other's entries into this matrix in place and return self."""
        self._check_compatible(other, 'assign')
        self._data[:] = other._data
        return self

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo) -> Matrix:
        return self.copy()

    def __reduce__(self):
        return (_restore, (self.ROWS, self.COLS, self.DTYPE.str, self._data.copy()))

    # === Element access ===

    def at(self, row: int, col: int | None = None) -> Row | float:
        """
        Checked access.

        ``at(row)`` returns a writable Row view; ``at(row, col)`` returns
        the entry as a float.

        Raises:
            IndexOutOfRangeError: If row (or col) is outside the fixed dimensions
        """
        r = check_index(row, self.ROWS, 'row')
        if col is None:
            return Row(self._data[r * self.COLS:(r + 1) * self.COLS])
        c = check_index(col, self.COLS, 'column')
        return self._data[r * self.COLS + c].item()

    def put(self, row: int, col: int, value: float) -> None:
        """
        Checked write of a single entry.

        Raises:
            IndexOutOfRangeError: If row or col is outside the fixed dimensions
        """
        r = check_index(row, self.ROWS, 'row')
        c = check_index(col, self.COLS, 'column')
        self._data[r * self.COLS + c] = value

    def __getitem__(self, key):
        # Unchecked. An out-of-range row slices past the buffer and yields
        # an empty Row instead of raising.
        if isinstance(key, tuple):
            row, col = key
            return self._data[row * self.COLS + col].item()
        row = operator.index(key)
        return Row(self._data[row * self.COLS:(row + 1) * self.COLS])

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            row, col = key
            self._data[row * self.COLS + col] = value
            return
        row = operator.index(key)
        self._data[row * self.COLS:(row + 1) * self.COLS] = value

    def __len__(self) -> int:
        return self.ROWS

    def __iter__(self) -> Iterator[Row]:
        for r in range(self.ROWS):
            yield self[r]

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self.array, dtype=dtype, copy=True)

    # === Comparison ===

    def _check_compatible(self, other: Matrix, op: str) -> None:
        check_shape(other.shape, self.shape, op)
        if other.DTYPE != self.DTYPE:
            raise DimensionError(
                f"{op}: dtype mismatch ({self.DTYPE} vs {other.DTYPE})",
                expected=self.shape,
                actual=other.shape,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, '==')
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # mutable

    # === Arithmetic ===

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, '+')
        return type(self)._wrap(self._data + other._data)

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, '+=')
        self._data += other._data
        return self

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, '-')
        return type(self)._wrap(self._data - other._data)

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, '-=')
        self._data -= other._data
        return self

    def __neg__(self) -> Matrix:
        return type(self)._wrap(-self._data)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self)._wrap(self._data * other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self)._wrap(other * self._data)

    def __imul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._data *= other
        return self

    def __truediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self)._wrap(self._data / other)

    def __itruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._data /= other
        return self

    def __matmul__(self, other: Matrix) -> Matrix:
        """
        Matrix product: (m x k) @ (k x n) -> (m x n).

        Raises:
            DimensionError: If self.COLS != other.ROWS or the dtypes differ
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.COLS != other.ROWS:
            raise DimensionError(
                f"*: cannot multiply {self.ROWS}x{self.COLS} by {other.ROWS}x{other.COLS}",
                expected=(self.COLS, other.COLS),
                actual=other.shape,
            )
        if other.DTYPE != self.DTYPE:
            raise DimensionError(
                f"*: dtype mismatch ({self.DTYPE} vs {other.DTYPE})",
                expected=other.shape,
                actual=other.shape,
            )
        result = matrix_type(self.ROWS, other.COLS, self.DTYPE)
        return result._wrap(self.array @ other.array)

    # === Structure ===

    def transpose(self) -> Matrix:
        """Return the (cols x rows) transpose."""
        return matrix_type(self.COLS, self.ROWS, self.DTYPE)._wrap(self.array.T)

    @classmethod
    def identity(cls) -> Matrix:
        """Same-dimension matrix with ones on the main diagonal."""
        return cls._wrap(np.eye(cls.ROWS, cls.COLS, dtype=cls.DTYPE))

    # === Elimination ===

    def gauss(self) -> Matrix:
        """
        Row echelon form with unit pivots (partial pivoting).

        Entries above the diagonal are not eliminated; see back_substitute()
        for recovering the solution of an augmented system.

        Raises:
            SingularMatrixError: If a pivot column has no usable candidate
        """
        return type(self)._wrap(row_echelon(self.array, 'matrix').reduced)

    def gauss_jordan(self) -> Matrix:
        """
        Reduced row echelon form.

        For a consistent square augmented system the left block becomes the
        identity and the right-hand columns hold the solution.

        Raises:
            SingularMatrixError: If a pivot column has no usable candidate
        """
        return type(self)._wrap(reduced_row_echelon(self.array, 'matrix').reduced)

    def solve(self) -> Matrix:
        """
        Solve an N x (N + 1) augmented system, returning the N x 1 solution.

        Raises:
            DimensionError: If the matrix is not N x (N + 1)
            SingularMatrixError: If the coefficient block is singular
        """
        if self.COLS != self.ROWS + 1:
            raise DimensionError(
                f"solve: expected an augmented {self.ROWS}x{self.ROWS + 1} matrix, "
                f"got {self.ROWS}x{self.COLS}",
                expected=(self.ROWS, self.ROWS + 1),
                actual=self.shape,
            )
        reduced = reduced_row_echelon(self.array, 'system').reduced
        return matrix_type(self.ROWS, 1, self.DTYPE)._wrap(reduced[:, -1:])

    def inverse(self) -> Matrix:
        """
        Multiplicative inverse, by Gauss-Jordan reduction of [A | I].

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        if self.ROWS != self.COLS:
            raise DimensionError(
                f"inverse: expected a square matrix, got {self.ROWS}x{self.COLS}",
                expected=(self.ROWS, self.ROWS),
                actual=self.shape,
            )
        n = self.ROWS
        augmented = np.hstack([self.array, np.eye(n, dtype=self.DTYPE)])
        reduced = reduced_row_echelon(augmented, 'matrix').reduced
        return type(self)._wrap(reduced[:, n:])

    # === Rendering ===

    def to_string(self) -> str:
        """
        Render as ``Matrix<R,C>`` followed by one line per row in braces.

        Every entry is fixed-point with six decimals and followed by a
        comma; there is no newline after the closing brace.
        """
        lines = [f"Matrix<{self.ROWS},{self.COLS}>", "{"]
        for row in self.array:
            lines.append("".join(f"{value:.6f}," for value in row))
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.ROWS is None:
            return "Matrix()"
        return f"Matrix[{self.ROWS}, {self.COLS}]({self.array.tolist()!r})"


def back_substitute(echelon: Matrix) -> Matrix:
    """
    Solve an augmented system from its gauss() output.

    Args:
        echelon: N x (N + m) row echelon matrix with unit pivots

    Returns:
        N x m solution matrix

    Raises:
        DimensionError: If echelon has no right-hand-side column
    """
    solution = _back_substitute(echelon.array)
    return matrix_type(echelon.ROWS, solution.shape[1], echelon.DTYPE)._wrap(solution)
