"""Dense and symmetric matrix storage with shared arithmetic and norms."""

from .base import AnyMatrix
from .dense import ColumnVector, Matrix, RowVector, SquareMatrix, unit_matrix
from .symmetric import SymmetricMatrix

__all__ = [
    "AnyMatrix",
    "ColumnVector",
    "Matrix",
    "RowVector",
    "SquareMatrix",
    "SymmetricMatrix",
    "unit_matrix",
]
