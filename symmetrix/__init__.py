"""symmetrix: dense symmetric linear algebra on numpy.

Symmetric matrices are stored as their packed lower triangle, so the symmetry
invariant cannot be broken by element assignment. Two factorizations are built
on that storage:

- **Cholesky** (A = L Lᵗ) for symmetric positive-definite matrices, giving
  linear solves, inverses and determinants.
- **Symmetric eigendecomposition** (A = V D Vᵗ) by Householder
  tridiagonalization and implicit QL iteration, with re-orderable eigenpairs.

Quick start:
    >>> import symmetrix as sx
    >>> S = sx.SymmetricMatrix.from_array([[4.0, -2.0, 1.0], [-2.0, 5.0, 3.0], [1.0, 3.0, 6.0]])
    >>> x = S.cholesky_decomposition().solve([9.0, 7.0, 15.0])
    >>> E = S.eigendecomposition()
    >>> pairs = E.eigenpairs
    >>> pairs.sort(sx.OrderBy.VALUE_DESCENDING)

Every matrix converts to numpy with ``to_array()`` or ``np.asarray(M)``.
"""

__version__ = "0.1.0"
__author__ = "symmetrix Contributors"

from .core import (
    DEFAULT_SETTINGS,
    ConvergenceError,
    DimensionMismatchError,
    EvaluationSettings,
    IndexOutOfRangeError,
    LinearAlgebraError,
    NotPositiveDefiniteError,
    NumericalConstants,
    SingularMatrixError,
)
from .decompositions import (
    CholeskyDecomposition,
    OrderBy,
    RealEigendecomposition,
    RealEigenpair,
    RealEigenpairCollection,
)
from .matrices import (
    AnyMatrix,
    ColumnVector,
    Matrix,
    RowVector,
    SquareMatrix,
    SymmetricMatrix,
    unit_matrix,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "AnyMatrix",
    "CholeskyDecomposition",
    "ColumnVector",
    "ConvergenceError",
    "DimensionMismatchError",
    "EvaluationSettings",
    "IndexOutOfRangeError",
    "LinearAlgebraError",
    "Matrix",
    "NotPositiveDefiniteError",
    "NumericalConstants",
    "OrderBy",
    "RealEigendecomposition",
    "RealEigenpair",
    "RealEigenpairCollection",
    "RowVector",
    "SingularMatrixError",
    "SquareMatrix",
    "SymmetricMatrix",
    "unit_matrix",
]
