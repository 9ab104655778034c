"""Dense matrix and vector storage.

This module provides the general rectangular :class:`Matrix`, the
:class:`SquareMatrix` specialization with trace, determinant and inverse, and
the degenerate :class:`ColumnVector` (n x 1) and :class:`RowVector` (1 x n)
shapes. All of them keep their entries in a row-major float64 numpy array.

Row and column extraction returns snapshots: later mutation of the matrix is
not reflected in a previously extracted vector.
"""

import operator
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from ..core.errors import DimensionMismatchError, SingularMatrixError, check_axis_index, check_index
from ..core.type_system import DenseArray, as_float_array, check_dimension
from .base import AnyMatrix, as_entry, unpack_index


class Matrix(AnyMatrix):
    """General rectangular matrix with dense storage.

    Examples:
        >>> M = Matrix(2, 3)
        >>> M[1, 2] = 5.0
        >>> M.transpose().shape
        (3, 2)
    """

    def __init__(self, row_count: int, column_count: int) -> None:
        """Create a zero matrix with the given shape.

        Args:
            row_count: Number of rows (non-negative).
            column_count: Number of columns (non-negative).
        """
        rows = check_dimension(row_count, "row_count")
        cols = check_dimension(column_count, "column_count")
        self._values: DenseArray = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_array(cls, values: Any) -> "Matrix":
        """Build a matrix from nested sequences or a 2D array-like, copying the entries."""
        return cls._from_array(as_float_array(values, ndim=2))

    @classmethod
    def _from_array(cls, values: DenseArray) -> "Matrix":
        """Wrap an owned array without copying."""
        matrix = cls.__new__(cls)
        matrix._values = values
        return matrix

    @property
    def row_count(self) -> int:
        return int(self._values.shape[0])

    @property
    def column_count(self) -> int:
        return int(self._values.shape[1])

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = unpack_index(index)
        check_index((r, c), self.shape)
        return float(self._values[r, c])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = unpack_index(index)
        check_index((r, c), self.shape)
        self._values[r, c] = as_entry(value)

    def to_array(self) -> DenseArray:
        return self._values.copy()

    def copy(self) -> "Matrix":
        return type(self)._from_array(self._values.copy())

    def transpose(self) -> "Matrix":
        return Matrix._from_array(np.ascontiguousarray(self._values.T))

    def row(self, r: int) -> "RowVector":
        """Return a snapshot of row ``r``."""
        check_axis_index(r, self.row_count, "row")
        return RowVector._from_array(self._values[r, :].copy())

    def column(self, c: int) -> "ColumnVector":
        """Return a snapshot of column ``c``."""
        check_axis_index(c, self.column_count, "column")
        return ColumnVector._from_array(self._values[:, c].copy())

    def _scaled(self, alpha: float) -> "Matrix":
        return type(self)._from_array(alpha * self._values)


class SquareMatrix(Matrix):
    """Square matrix with dense storage."""

    def __init__(self, dimension: int) -> None:
        """Create a zero ``dimension`` x ``dimension`` matrix."""
        super().__init__(dimension, dimension)

    @classmethod
    def from_array(cls, values: Any) -> "SquareMatrix":
        array = as_float_array(values, ndim=2)
        if array.shape[0] != array.shape[1]:
            raise DimensionMismatchError(
                "SquareMatrix requires square input", expected=(array.shape[0], array.shape[0]), actual=array.shape
            )
        return cls._from_array(array)

    @classmethod
    def identity(cls, dimension: int) -> "SquareMatrix":
        """Return the ``dimension`` x ``dimension`` unit matrix."""
        n = check_dimension(dimension)
        return cls._from_array(np.eye(n, dtype=np.float64))

    @property
    def dimension(self) -> int:
        return self.row_count

    def transpose(self) -> "SquareMatrix":
        return SquareMatrix._from_array(np.ascontiguousarray(self._values.T))

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return float(np.trace(self._values))

    def determinant(self) -> float:
        """Determinant by LU elimination with partial pivoting."""
        return lu_determinant(self._values)

    def inverse(self) -> "SquareMatrix":
        """Inverse by Gauss-Jordan elimination with partial pivoting.

        Raises:
            SingularMatrixError: If elimination meets an exactly zero pivot column.
        """
        return SquareMatrix._from_array(gauss_jordan_inverse(self._values))


def unit_matrix(dimension: int) -> SquareMatrix:
    """Return the ``dimension`` x ``dimension`` identity matrix."""
    return SquareMatrix.identity(dimension)


class _Vector(Matrix):
    """Shared behavior of column and row vectors.

    Vectors accept a single integer subscript in addition to the (row, column)
    pair understood by every matrix.
    """

    def __init__(self, values: int | Sequence[float] | np.ndarray) -> None:
        """Create a vector.

        Args:
            values: Either a dimension (the vector is zero-filled) or a flat
                sequence of entries.
        """
        if isinstance(values, (int, np.integer)) and not isinstance(values, bool):
            entries = np.zeros(check_dimension(values), dtype=np.float64)
        else:
            entries = as_float_array(values, ndim=1)
        self._values = entries.reshape(self._shape_for(entries.size))

    @classmethod
    def _shape_for(cls, dimension: int) -> tuple[int, int]:
        raise NotImplementedError("Subclasses must implement _shape_for")

    @classmethod
    def from_array(cls, values: Any) -> "_Vector":
        """Build a vector from a 2D array-like already shaped as this vector kind.

        Raises:
            DimensionMismatchError: If the input is not a single column (or row).
        """
        array = as_float_array(values, ndim=2)
        expected = cls._shape_for(array.size)
        if array.shape != expected:
            raise DimensionMismatchError(
                f"{cls.__name__} requires {expected[0]} x {expected[1]} input", expected=expected, actual=array.shape
            )
        return cls._from_array(array)

    @classmethod
    def _from_array(cls, values: np.ndarray) -> "_Vector":
        vector = cls.__new__(cls)
        vector._values = np.ascontiguousarray(values, dtype=np.float64).reshape(cls._shape_for(values.size))
        return vector

    @property
    def dimension(self) -> int:
        return int(self._values.size)

    def _cell(self, i: int) -> tuple[int, int]:
        raise NotImplementedError("Subclasses must implement _cell")

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        if isinstance(index, tuple):
            return super().__getitem__(index)
        i = operator.index(index)
        check_axis_index(i, self.dimension, "vector")
        return float(self._values[self._cell(i)])

    def __setitem__(self, index: int | tuple[int, int], value: float) -> None:
        if isinstance(index, tuple):
            super().__setitem__(index, value)
            return
        i = operator.index(index)
        check_axis_index(i, self.dimension, "vector")
        self._values[self._cell(i)] = as_entry(value)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._values.ravel())

    def norm(self) -> float:
        """Euclidean norm."""
        return float(np.linalg.norm(self._values))


class ColumnVector(_Vector):
    """An n x 1 matrix.

    Examples:
        >>> b = ColumnVector([9.0, 7.0, 15.0])
        >>> b.dimension, b[2]
        (3, 15.0)
    """

    @classmethod
    def _shape_for(cls, dimension: int) -> tuple[int, int]:
        return (dimension, 1)

    def _cell(self, i: int) -> tuple[int, int]:
        return (i, 0)

    def transpose(self) -> "RowVector":
        return RowVector._from_array(self._values.ravel().copy())


class RowVector(_Vector):
    """A 1 x n matrix."""

    @classmethod
    def _shape_for(cls, dimension: int) -> tuple[int, int]:
        return (1, dimension)

    def _cell(self, i: int) -> tuple[int, int]:
        return (0, i)

    def transpose(self) -> ColumnVector:
        return ColumnVector._from_array(self._values.ravel().copy())


def lu_determinant(values: DenseArray) -> float:
    """Determinant of a square array via LU decomposition with partial pivoting."""
    lu = values.copy()
    n = lu.shape[0]
    det = 1.0
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(lu[col:, col])))
        if lu[pivot_row, col] == 0.0:
            return 0.0
        if pivot_row != col:
            lu[[col, pivot_row]] = lu[[pivot_row, col]]
            det = -det
        pivot = lu[col, col]
        det *= pivot
        factors = lu[col + 1 :, col] / pivot
        lu[col + 1 :, col + 1 :] -= np.outer(factors, lu[col, col + 1 :])
    return float(det)


def gauss_jordan_inverse(values: DenseArray) -> DenseArray:
    """Inverse of a square array via Gauss-Jordan elimination with partial pivoting.

    Raises:
        SingularMatrixError: If a pivot column is entirely zero.
    """
    n = values.shape[0]
    augmented = np.hstack([values, np.eye(n, dtype=np.float64)])
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(augmented[col:, col])))
        if augmented[pivot_row, col] == 0.0:
            raise SingularMatrixError("Matrix is singular", column=col)
        if pivot_row != col:
            augmented[[col, pivot_row]] = augmented[[pivot_row, col]]
        augmented[col] /= augmented[col, col]
        factors = augmented[:, col].copy()
        factors[col] = 0.0
        augmented -= np.outer(factors, augmented[col])
    return np.ascontiguousarray(augmented[:, n:])
