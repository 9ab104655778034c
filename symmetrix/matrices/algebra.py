"""Result-type dispatch for matrix sums and products.

The arithmetic operators on :class:`AnyMatrix` delegate here. Values are
computed on dense numpy arrays (or on packed storage when both operands are
symmetric) and wrapped in the most specific type the operands guarantee:

- symmetric ± symmetric → ``SymmetricMatrix``
- same concrete type ± same concrete type → that type
- square-shaped types (``SquareMatrix``, ``SymmetricMatrix``) → ``SquareMatrix``
- ``RowVector @ ColumnVector`` → ``float`` (dot product)
- ``X @ ColumnVector`` → ``ColumnVector``; ``RowVector @ X`` → ``RowVector``
- anything else → ``Matrix``
"""

import numpy as np

from ..core.errors import check_inner_dimensions, check_same_shape
from .base import AnyMatrix
from .dense import ColumnVector, Matrix, RowVector, SquareMatrix
from .symmetric import SymmetricMatrix


def _is_square_type(matrix: AnyMatrix) -> bool:
    return isinstance(matrix, (SquareMatrix, SymmetricMatrix))


def _wrap_sum(left: AnyMatrix, right: AnyMatrix, values: np.ndarray) -> AnyMatrix:
    if type(left) is type(right) and isinstance(left, Matrix):
        return type(left)._from_array(values)
    if _is_square_type(left) and _is_square_type(right):
        return SquareMatrix._from_array(values)
    return Matrix._from_array(values)


def add(left: AnyMatrix, right: AnyMatrix) -> AnyMatrix:
    """Element-wise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If the shapes differ.
    """
    check_same_shape(left.shape, right.shape, "addition")
    if isinstance(left, SymmetricMatrix) and isinstance(right, SymmetricMatrix):
        return left._combined(right, 1.0)
    return _wrap_sum(left, right, left.to_array() + right.to_array())


def subtract(left: AnyMatrix, right: AnyMatrix) -> AnyMatrix:
    """Element-wise difference of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If the shapes differ.
    """
    check_same_shape(left.shape, right.shape, "subtraction")
    if isinstance(left, SymmetricMatrix) and isinstance(right, SymmetricMatrix):
        return left._combined(right, -1.0)
    return _wrap_sum(left, right, left.to_array() - right.to_array())


def multiply(left: AnyMatrix, right: AnyMatrix) -> AnyMatrix | float:
    """Matrix product of an m x n and an n x p matrix.

    Raises:
        DimensionMismatchError: If the inner dimensions differ.
    """
    check_inner_dimensions(left.shape, right.shape)
    values = left.to_array() @ right.to_array()
    if isinstance(left, RowVector) and isinstance(right, ColumnVector):
        return float(values[0, 0])
    if isinstance(right, ColumnVector):
        return ColumnVector._from_array(values[:, 0])
    if isinstance(left, RowVector):
        return RowVector._from_array(values[0, :])
    if _is_square_type(left) and _is_square_type(right):
        return SquareMatrix._from_array(values)
    return Matrix._from_array(values)
