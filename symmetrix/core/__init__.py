"""symmetrix core module: constants, settings, error taxonomy and array typing."""

from .constants import NumericalConstants
from .errors import (
    ConvergenceError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    LinearAlgebraError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)
from .settings import DEFAULT_SETTINGS, EvaluationSettings

__all__ = [
    "DEFAULT_SETTINGS",
    "ConvergenceError",
    "DimensionMismatchError",
    "EvaluationSettings",
    "IndexOutOfRangeError",
    "LinearAlgebraError",
    "NotPositiveDefiniteError",
    "NumericalConstants",
    "SingularMatrixError",
]
