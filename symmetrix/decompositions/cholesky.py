"""Cholesky Decomposition Engine for symmetric positive-definite matrices.

This module factors a symmetric positive-definite matrix A into L Lᵗ, where L
is lower triangular, with the row-by-row Cholesky-Banachiewicz scheme in
O(n³/3) operations. The factor is then used for:

- Linear solves by forward substitution (L y = b) and back substitution (Lᵗ x = y)
- The inverse, returned as a symmetric matrix
- The determinant, as the product of the squared diagonal entries of L

A decomposition is immutable once constructed. It holds its own copy of the
factor, so later mutation of the source matrix does not affect it.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..core.constants import NumericalConstants
from ..core.errors import DimensionMismatchError, NotPositiveDefiniteError
from ..core.type_system import DenseArray, as_float_array
from ..matrices.dense import ColumnVector, SquareMatrix
from ..matrices.symmetric import SymmetricMatrix

logger = logging.getLogger(__name__)


def _cholesky_factor(a: DenseArray) -> DenseArray:
    """Return the lower-triangular L with L Lᵗ = a.

    Raises:
        NotPositiveDefiniteError: If a pivot is not strictly positive, measured
            relative to the original diagonal entry.
    """
    n = a.shape[0]
    lower = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i):
            acc = a[i, j] - lower[i, :j] @ lower[j, :j]
            lower[i, j] = acc / lower[j, j]
        pivot = a[i, i] - lower[i, :i] @ lower[i, :i]
        if not math.isfinite(pivot) or pivot <= NumericalConstants.CHOLESKY_PIVOT_TOLERANCE * abs(a[i, i]):
            logger.debug(f"Cholesky factorization rejected pivot {pivot!r} at row {i} of {n}")
            raise NotPositiveDefiniteError(
                f"Matrix is not positive definite (pivot {pivot:.3e} at row {i})",
                pivot_index=i,
                pivot_value=float(pivot),
            )
        lower[i, i] = math.sqrt(pivot)
    return lower


def _forward_substitute(lower: DenseArray, b: np.ndarray) -> np.ndarray:
    """Solve L y = b for y; ``b`` may be a vector or a matrix of right-hand sides."""
    y = np.zeros_like(b)
    for i in range(lower.shape[0]):
        y[i] = (b[i] - lower[i, :i] @ y[:i]) / lower[i, i]
    return y


def _back_substitute_transpose(lower: DenseArray, y: np.ndarray) -> np.ndarray:
    """Solve Lᵗ x = y for x without forming Lᵗ."""
    n = lower.shape[0]
    x = np.zeros_like(y)
    for i in range(n - 1, -1, -1):
        x[i] = (y[i] - lower[i + 1 :, i] @ x[i + 1 :]) / lower[i, i]
    return x


class CholeskyDecomposition:
    """Cholesky factorization A = L Lᵗ of a symmetric positive-definite matrix.

    Construction fails with :class:`NotPositiveDefiniteError` when the source is
    not strictly positive definite; no partial decomposition is produced and
    the source is left unmodified.

    Examples:
        >>> S = SymmetricMatrix.from_array([[4.0, -2.0], [-2.0, 5.0]])
        >>> CD = CholeskyDecomposition(S)
        >>> round(CD.determinant(), 12)
        16.0
    """

    def __init__(self, matrix: SymmetricMatrix) -> None:
        """Factor ``matrix``.

        Args:
            matrix: Symmetric matrix to factor. Only read; a snapshot is taken.

        Raises:
            TypeError: If ``matrix`` is not a SymmetricMatrix.
            NotPositiveDefiniteError: If ``matrix`` is not positive definite.
        """
        if not isinstance(matrix, SymmetricMatrix):
            raise TypeError(f"Cholesky decomposition requires a SymmetricMatrix, got {type(matrix).__name__}")
        self._lower = _cholesky_factor(matrix.to_array())
        logger.debug(f"Cholesky factorization of {matrix.dimension} x {matrix.dimension} matrix succeeded")

    @property
    def dimension(self) -> int:
        return int(self._lower.shape[0])

    def square_root_matrix(self) -> SquareMatrix:
        """Return (a copy of) the lower-triangular factor L."""
        return SquareMatrix._from_array(self._lower.copy())

    def determinant(self) -> float:
        """Determinant of A, the product of the squared diagonal entries of L."""
        diagonal = np.diag(self._lower)
        return float(np.prod(diagonal * diagonal))

    def log_determinant(self) -> float:
        """Natural logarithm of the determinant, free of overflow and underflow."""
        return float(2.0 * np.sum(np.log(np.diag(self._lower))))

    def solve(self, b: ColumnVector | Sequence[float]) -> ColumnVector:
        """Solve A x = b.

        Args:
            b: Right-hand side as a ColumnVector or a flat sequence of floats.

        Returns:
            The solution x.

        Raises:
            DimensionMismatchError: If ``b`` does not have ``dimension`` entries.
        """
        if isinstance(b, ColumnVector):
            rhs = b.to_array().ravel()
        else:
            rhs = as_float_array(b, ndim=1)
        if rhs.size != self.dimension:
            raise DimensionMismatchError("Right-hand side dimension mismatch", expected=self.dimension, actual=rhs.size)
        y = _forward_substitute(self._lower, rhs)
        return ColumnVector._from_array(_back_substitute_transpose(self._lower, y))

    def inverse(self) -> SymmetricMatrix:
        """Inverse of A, by substitution against the identity.

        For ill-conditioned input (e.g. Hilbert matrices of dimension 4 and
        above) the accuracy of the result degrades in proportion to the
        condition number; this is a limit of double precision, not of the
        algorithm.
        """
        n = self.dimension
        y = _forward_substitute(self._lower, np.eye(n, dtype=np.float64))
        x = _back_substitute_transpose(self._lower, y)
        folded = 0.5 * (x + x.T)
        return SymmetricMatrix._from_packed(n, folded[np.tril_indices(n)].copy())
