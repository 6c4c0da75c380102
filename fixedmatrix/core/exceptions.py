"""
Exception hierarchy for fixedmatrix.

All exceptions inherit from FixedMatrixError to allow catching any
library-specific error. Checked element access raises IndexOutOfRangeError,
which is also an IndexError so that generic Python code handles it too.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class FixedMatrixError(Exception):
    """Base exception for all fixedmatrix errors."""
    pass


class ValidationError(FixedMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    entries, ragged rows, unsupported dtypes, negative tolerances.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when the operands of a binary operation do not share compatible
    dimensions, or when construction data does not fill the matrix exactly.

    Attributes:
        expected: The shape (or size) the operation required
        actual: The shape (or size) that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(FixedMatrixError, IndexError):
    """
    Checked element access went past a fixed dimension.

    Only raised by the checked accessors (``at``, ``put``, ``Row.at``).
    Unchecked access through ``m[row]`` never raises it.

    Attributes:
        index: The offending index
        bound: The dimension the index was checked against
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class NumericalError(FixedMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically singular.

    Raised by the elimination family (gauss, gauss_jordan, solve, inverse)
    when a pivot column has no candidate above the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Pivot column that had no usable candidate
        pivot: Largest candidate magnitude found in that column
        tolerance: Pivot tolerance the candidate was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        pivot: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.pivot = pivot
        self.tolerance = tolerance
