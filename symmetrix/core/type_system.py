"""Type system for symmetrix with numpy array validation.

This module provides jaxtyping aliases for the numpy arrays backing the matrix
types, and the coercion helper that turns caller input into owned float64
storage.
"""

from typing import Any

import numpy as np
from jaxtyping import Float

DenseArray = Float[np.ndarray, "rows cols"]
"""Type alias for dense row-major matrix storage."""

PackedArray = Float[np.ndarray, "packed"]
"""Type alias for packed lower-triangular storage of length n(n+1)/2."""

VectorArray = Float[np.ndarray, "dim"]
"""Type alias for one-dimensional vector storage."""


def as_float_array(values: Any, ndim: int) -> np.ndarray:
    """Copy array-like input into a fresh, finite float64 numpy array.

    Args:
        values: Nested sequences, numpy array, or any object supporting ``__array__``.
        ndim: Required number of dimensions.

    Returns:
        A new C-contiguous float64 array owned by the caller.

    Raises:
        ValueError: If the input has the wrong number of dimensions or holds
            non-finite entries.

    Examples:
        >>> as_float_array([[1, 2], [3, 4]], ndim=2).dtype
        dtype('float64')
    """
    array = np.array(values, dtype=np.float64, copy=True, order="C")
    if array.ndim != ndim:
        raise ValueError(f"Expected {ndim}D input, got {array.ndim}D array of shape {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ValueError("Matrix entries must be finite real numbers")
    return array


def triangular_index(r: int, c: int) -> int:
    """Return the packed-storage offset of entry (r, c), folding the upper triangle onto the lower.

    Examples:
        >>> triangular_index(2, 1), triangular_index(1, 2)
        (4, 4)
    """
    if r < c:
        r, c = c, r
    return r * (r + 1) // 2 + c


def check_dimension(value: int, name: str = "dimension") -> int:
    """Validate a non-negative integer size."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)

