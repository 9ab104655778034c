"""Abstract base class for matrix implementations.

This module defines the contract every matrix type satisfies: shape, element
access, conversion to a dense numpy array, and the norms, equality and
arithmetic operators that are shared by all concrete storage layouts.
"""

import math
import numbers
import operator

import numpy as np

from ..core.type_system import DenseArray


class AnyMatrix:
    """Abstract base class for real matrices.

    Concrete subclasses choose a storage layout (dense row-major, packed
    lower-triangular) and implement element access, ``to_array``, ``copy``,
    ``transpose`` and ``_scaled``. Norms and exact equality are defined here in
    terms of ``to_array`` so that every layout obeys the same definitions.

    Arithmetic operators always return new matrices; the only in-place
    mutation is through ``__setitem__``.
    """

    # Make numpy defer binary operators (e.g. ``np.float64(2.0) * M``) to us.
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    @property
    def row_count(self) -> int:
        """Number of rows."""
        raise NotImplementedError("Subclasses must implement row_count")

    @property
    def column_count(self) -> int:
        """Number of columns."""
        raise NotImplementedError("Subclasses must implement column_count")

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix shape as (row_count, column_count)."""
        return (self.row_count, self.column_count)

    def __getitem__(self, index: tuple[int, int]) -> float:
        """Return the entry at (row, column)."""
        raise NotImplementedError("Subclasses must implement element access")

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        """Set the entry at (row, column)."""
        raise NotImplementedError("Subclasses must implement element assignment")

    def to_array(self) -> DenseArray:
        """Return a fresh dense float64 copy of the matrix entries."""
        raise NotImplementedError("Subclasses must implement to_array")

    def copy(self) -> "AnyMatrix":
        """Return a structurally independent copy."""
        raise NotImplementedError("Subclasses must implement copy")

    def clone(self) -> "AnyMatrix":
        """Alias for :meth:`copy`."""
        return self.copy()

    def transpose(self) -> "AnyMatrix":
        """Return the transpose as a new matrix."""
        raise NotImplementedError("Subclasses must implement transpose")

    @property
    def T(self) -> "AnyMatrix":  # noqa: N802
        """Alias for :meth:`transpose`."""
        return self.transpose()

    def _scaled(self, alpha: float) -> "AnyMatrix":
        """Return ``alpha * self`` with the same concrete type."""
        raise NotImplementedError("Subclasses must implement scalar multiplication")

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        """Return a dense copy; a zero-copy view is never available."""
        if copy is False:
            raise ValueError("A matrix cannot be converted to a numpy array without copying")
        values = self.to_array()
        if dtype is not None:
            values = values.astype(dtype)
        return values

    # Norms

    def one_norm(self) -> float:
        """Maximum absolute column sum."""
        values = self.to_array()
        if values.size == 0:
            return 0.0
        return float(np.max(np.sum(np.abs(values), axis=0)))

    def infinity_norm(self) -> float:
        """Maximum absolute row sum."""
        values = self.to_array()
        if values.size == 0:
            return 0.0
        return float(np.max(np.sum(np.abs(values), axis=1)))

    def frobenius_norm(self) -> float:
        """Square root of the sum of squares of all entries."""
        values = self.to_array()
        if values.size == 0:
            return 0.0
        return float(np.linalg.norm(values, "fro"))

    def max_norm(self) -> float:
        """Largest absolute entry."""
        values = self.to_array()
        if values.size == 0:
            return 0.0
        return float(np.max(np.abs(values)))

    # Equality is exact and element-wise; use an explicit tolerance predicate for
    # approximate comparisons.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_array(), other.to_array()))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Arithmetic

    def __add__(self, other: object) -> "AnyMatrix":
        if not isinstance(other, AnyMatrix):
            return NotImplemented
        from . import algebra

        return algebra.add(self, other)

    def __sub__(self, other: object) -> "AnyMatrix":
        if not isinstance(other, AnyMatrix):
            return NotImplemented
        from . import algebra

        return algebra.subtract(self, other)

    def __matmul__(self, other: object) -> "AnyMatrix | float":
        if not isinstance(other, AnyMatrix):
            return NotImplemented
        from . import algebra

        return algebra.multiply(self, other)

    def __mul__(self, alpha: object) -> "AnyMatrix":
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
            return NotImplemented
        return self._scaled(float(alpha))

    __rmul__ = __mul__

    def __truediv__(self, alpha: object) -> "AnyMatrix":
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
            return NotImplemented
        return self._scaled(1.0 / float(alpha))

    def __neg__(self) -> "AnyMatrix":
        return self._scaled(-1.0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array().tolist()!r})"


def unpack_index(index: object) -> tuple[int, int]:
    """Split a ``(row, column)`` subscript into two integers.

    Raises:
        TypeError: If the subscript is not a pair of integers (slices are not supported).
    """
    if not isinstance(index, tuple) or len(index) != 2:
        raise TypeError(f"Matrix indices must be (row, column) pairs, got {index!r}")
    return operator.index(index[0]), operator.index(index[1])


def as_entry(value: object) -> float:
    """Convert an assigned value to a finite float.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    entry = float(value)  # type: ignore[arg-type]
    if not math.isfinite(entry):
        raise ValueError(f"Matrix entries must be finite real numbers, got {entry}")
    return entry
