"""Cholesky and symmetric eigendecomposition engines."""

from .cholesky import CholeskyDecomposition
from .eigen import OrderBy, RealEigendecomposition, RealEigenpair, RealEigenpairCollection

__all__ = [
    "CholeskyDecomposition",
    "OrderBy",
    "RealEigendecomposition",
    "RealEigenpair",
    "RealEigenpairCollection",
]
