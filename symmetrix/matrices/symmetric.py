"""Symmetric matrix with packed lower-triangular storage.

Only the entries with ``c <= r`` are stored, in a one-dimensional array of
length n(n+1)/2. Every subscript is folded onto the lower triangle before it
reaches storage, so ``S[r, c]`` and ``S[c, r]`` address the same cell and the
symmetry invariant holds by construction rather than by a runtime check.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

from ..core.errors import DimensionMismatchError, check_axis_index, check_index
from ..core.settings import EvaluationSettings
from ..core.type_system import DenseArray, PackedArray, as_float_array, check_dimension, triangular_index
from .base import AnyMatrix, as_entry, unpack_index
from .dense import ColumnVector, RowVector, gauss_jordan_inverse

if TYPE_CHECKING:
    from ..decompositions.cholesky import CholeskyDecomposition
    from ..decompositions.eigen import RealEigendecomposition


class SymmetricMatrix(AnyMatrix):
    """Real symmetric matrix stored as its packed lower triangle.

    Arithmetic with another symmetric matrix (``+``, ``-``), scalar
    multiplication and negation operate on the packed triangle and return a
    ``SymmetricMatrix``. Products with any matrix return a general
    ``SquareMatrix`` since the product of two symmetric matrices is not
    generally symmetric.

    Examples:
        >>> S = SymmetricMatrix(3)
        >>> S[2, 0] = 1.5
        >>> S[0, 2]
        1.5
    """

    def __init__(self, dimension: int) -> None:
        """Create a zero ``dimension`` x ``dimension`` symmetric matrix."""
        n = check_dimension(dimension)
        self._dimension = n
        self._store: PackedArray = np.zeros(n * (n + 1) // 2, dtype=np.float64)

    @classmethod
    def _from_packed(cls, dimension: int, store: PackedArray) -> "SymmetricMatrix":
        """Wrap an owned packed array without copying."""
        matrix = cls.__new__(cls)
        matrix._dimension = dimension
        matrix._store = store
        return matrix

    @classmethod
    def from_generator(cls, dimension: int, generator: Callable[[int, int], float]) -> "SymmetricMatrix":
        """Build a symmetric matrix by evaluating ``generator(r, c)`` on the lower triangle."""
        matrix = cls(dimension)
        matrix.fill(generator)
        return matrix

    @classmethod
    def from_array(cls, values: Any) -> "SymmetricMatrix":
        """Build a symmetric matrix from an exactly symmetric 2D array-like.

        Raises:
            DimensionMismatchError: If the input is not square.
            ValueError: If the input is not exactly symmetric.
        """
        array = as_float_array(values, ndim=2)
        n = array.shape[0]
        if array.shape != (n, n):
            raise DimensionMismatchError(
                "SymmetricMatrix requires square input", expected=(n, n), actual=array.shape
            )
        if not np.array_equal(array, array.T):
            raise ValueError("Input array is not symmetric")
        return cls._from_packed(n, array[np.tril_indices(n)].copy())

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def row_count(self) -> int:
        return self._dimension

    @property
    def column_count(self) -> int:
        return self._dimension

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = unpack_index(index)
        check_index((r, c), self.shape)
        return float(self._store[triangular_index(r, c)])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = unpack_index(index)
        check_index((r, c), self.shape)
        self._store[triangular_index(r, c)] = as_entry(value)

    def fill(self, generator: Callable[[int, int], float]) -> None:
        """Overwrite every entry with ``generator(r, c)``, evaluated only for ``c <= r``.

        The generator is called row by row, left to right across the lower
        triangle; the upper triangle is derived.
        """
        if not callable(generator):
            raise TypeError(f"generator must be callable, got {type(generator).__name__}")
        store = np.empty_like(self._store)
        k = 0
        for r in range(self._dimension):
            for c in range(r + 1):
                store[k] = as_entry(generator(r, c))
                k += 1
        self._store = store

    def to_array(self) -> DenseArray:
        n = self._dimension
        full = np.zeros((n, n), dtype=np.float64)
        lower = np.tril_indices(n)
        full[lower] = self._store
        full.T[lower] = self._store
        return full

    def copy(self) -> "SymmetricMatrix":
        return SymmetricMatrix._from_packed(self._dimension, self._store.copy())

    def transpose(self) -> "SymmetricMatrix":
        return self.copy()

    def _row_values(self, i: int) -> np.ndarray:
        check_axis_index(i, self._dimension, "row")
        offsets = [triangular_index(i, j) for j in range(self._dimension)]
        return self._store[offsets].copy()

    def row(self, r: int) -> RowVector:
        """Return a snapshot of row ``r``."""
        return RowVector._from_array(self._row_values(r))

    def column(self, c: int) -> ColumnVector:
        """Return a snapshot of column ``c`` (equal to row ``c``)."""
        return ColumnVector._from_array(self._row_values(c))

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        diagonal = [triangular_index(i, i) for i in range(self._dimension)]
        return float(np.sum(self._store[diagonal]))

    def _scaled(self, alpha: float) -> "SymmetricMatrix":
        return SymmetricMatrix._from_packed(self._dimension, alpha * self._store)

    def _combined(self, other: "SymmetricMatrix", sign: float) -> "SymmetricMatrix":
        """Triangle-wise ``self + sign * other``; shapes are checked by the caller."""
        if sign > 0:
            return SymmetricMatrix._from_packed(self._dimension, self._store + other._store)
        return SymmetricMatrix._from_packed(self._dimension, self._store - other._store)

    def inverse(self) -> "SymmetricMatrix":
        """Inverse of a non-singular symmetric matrix, which is itself symmetric.

        Uses Gauss-Jordan elimination with partial pivoting, so indefinite
        matrices are supported. For positive-definite input,
        :meth:`cholesky_decomposition` followed by
        :meth:`CholeskyDecomposition.inverse` is cheaper.

        Raises:
            SingularMatrixError: If the matrix is singular.
        """
        inverse = gauss_jordan_inverse(self.to_array())
        folded = 0.5 * (inverse + inverse.T)
        return SymmetricMatrix._from_packed(self._dimension, folded[np.tril_indices(self._dimension)].copy())

    def cholesky_decomposition(self) -> "CholeskyDecomposition":
        """Factor this matrix as L Lᵗ.

        Raises:
            NotPositiveDefiniteError: If the matrix is not positive definite.
        """
        from ..decompositions.cholesky import CholeskyDecomposition

        return CholeskyDecomposition(self)

    def eigendecomposition(self, settings: EvaluationSettings | None = None) -> "RealEigendecomposition":
        """Diagonalize this matrix.

        Args:
            settings: Optional convergence tolerance and iteration budget.
        """
        from ..decompositions.eigen import RealEigendecomposition

        return RealEigendecomposition(self, settings)

    def eigenvalues(self, settings: EvaluationSettings | None = None) -> list[float]:
        """Eigenvalues in the order produced by the iteration (not sorted)."""
        return self.eigendecomposition(settings).eigenvalues()
