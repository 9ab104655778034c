"""Error hierarchy and validation helpers for matrix operations.

This module provides the exceptions raised by the matrix types and the
decomposition engines, plus the small validation functions that raise them.
Every failure is surfaced to the caller synchronously; nothing is retried.
"""

from collections.abc import Sequence


class LinearAlgebraError(Exception):
    """Base exception for linear-algebra errors."""

    pass


class DimensionMismatchError(LinearAlgebraError):
    """Exception for arithmetic between incompatibly shaped operands."""

    def __init__(self, message: str, expected: int | tuple | None = None, actual: int | tuple | None = None):
        """Initialize DimensionMismatchError with dimension information."""
        super().__init__(message)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        """Return string representation with dimension information."""
        base_msg = super().__str__()
        if self.expected is not None and self.actual is not None:
            return f"{base_msg} (expected={self.expected}, actual={self.actual})"
        return base_msg


class IndexOutOfRangeError(LinearAlgebraError, IndexError):
    """Exception for element access outside the valid row/column bounds."""

    def __init__(self, message: str, index: int | tuple | None = None, shape: tuple | None = None):
        """Initialize IndexOutOfRangeError with the offending index and the valid shape."""
        super().__init__(message)
        self.index = index
        self.shape = shape


class NotPositiveDefiniteError(LinearAlgebraError):
    """Error raised when Cholesky factorization meets a non-positive pivot.

    No decomposition object is produced and the source matrix is left
    unmodified.
    """

    def __init__(self, message: str, pivot_index: int | None = None, pivot_value: float | None = None) -> None:
        """Initialize the error with message and optional pivot diagnostics.

        Args:
            message: Error description.
            pivot_index: Row at which the factorization failed.
            pivot_value: The rejected pivot (diagonal value before the square root).
        """
        super().__init__(message)
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class SingularMatrixError(LinearAlgebraError):
    """Exception for inverting a matrix that has no inverse."""

    def __init__(self, message: str, column: int | None = None):
        """Initialize SingularMatrixError with the column where elimination stalled."""
        super().__init__(message)
        self.column = column


class ConvergenceError(LinearAlgebraError):
    """Exception for iterative algorithms that fail to converge."""

    def __init__(
        self,
        message: str,
        max_iterations: int | None = None,
        final_error: float | None = None,
        tolerance: float | None = None,
    ):
        """Initialize ConvergenceError with algorithm convergence information."""
        super().__init__(message)
        self.max_iterations = max_iterations
        self.final_error = final_error
        self.tolerance = tolerance


def check_index(index: tuple[int, int], shape: tuple[int, int]) -> None:
    """Validate that a (row, column) index lies inside a matrix shape.

    Args:
        index: Requested (row, column) pair.
        shape: Matrix shape as (row_count, column_count).

    Raises:
        IndexOutOfRangeError: If either component is outside [0, count).
    """
    r, c = index
    rows, cols = shape
    if not (0 <= r < rows):
        raise IndexOutOfRangeError(f"Row index {r} outside [0, {rows})", index=index, shape=shape)
    if not (0 <= c < cols):
        raise IndexOutOfRangeError(f"Column index {c} outside [0, {cols})", index=index, shape=shape)


def check_same_shape(left: Sequence[int], right: Sequence[int], operation: str) -> None:
    """Validate that two operand shapes are identical.

    Raises:
        DimensionMismatchError: If the shapes differ.
    """
    if tuple(left) != tuple(right):
        raise DimensionMismatchError(f"Shape mismatch in {operation}", expected=tuple(left), actual=tuple(right))


def check_inner_dimensions(left: Sequence[int], right: Sequence[int], operation: str = "product") -> None:
    """Validate that the column count of the left operand equals the row count of the right.

    Raises:
        DimensionMismatchError: If the inner dimensions differ.
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"Inner dimension mismatch in {operation}", expected=left[1], actual=right[0]
        )


def check_axis_index(index: int, count: int, axis: str) -> None:
    """Validate a single row, column or vector index.

    Raises:
        IndexOutOfRangeError: If the index is outside [0, count).
    """
    if not (0 <= index < count):
        raise IndexOutOfRangeError(f"{axis.capitalize()} index {index} outside [0, {count})", index=index)
