"""Evaluation settings for iterative algorithms.

The eigendecomposition engine takes an optional :class:`EvaluationSettings`
instance to override its convergence tolerance and iteration budget.
"""

import dataclasses

from .constants import NumericalConstants


@dataclasses.dataclass(frozen=True)
class EvaluationSettings:
    """Precision targets and iteration budget for an iterative computation.

    Attributes:
        absolute_precision: Absolute tolerance floor. Negative values are rejected.
        relative_precision: Tolerance relative to the magnitude of the quantity
            being driven to zero (for the QL iteration, the running norm of the
            tridiagonal matrix).
        max_iterations: Iteration budget. For the eigendecomposition this is the
            number of QL sweeps allowed per eigenvalue.
    """

    absolute_precision: float = 0.0
    relative_precision: float = NumericalConstants.MACHINE_EPSILON
    max_iterations: int = NumericalConstants.DEFAULT_MAX_QL_ITERATIONS

    def __post_init__(self):
        """Validate the settings."""
        if not self.absolute_precision >= 0.0:
            raise ValueError(f"absolute_precision must be non-negative, got {self.absolute_precision}")
        if not self.relative_precision >= 0.0:
            raise ValueError(f"relative_precision must be non-negative, got {self.relative_precision}")
        if self.absolute_precision == 0.0 and self.relative_precision == 0.0:
            raise ValueError("At least one of absolute_precision and relative_precision must be positive")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")

    def tolerance(self, norm: float) -> float:
        """Return the combined tolerance for a quantity of the given magnitude.

        tol = max(0, absolute_precision) + norm * max(0, relative_precision)
        """
        return max(0.0, self.absolute_precision) + abs(norm) * max(0.0, self.relative_precision)


DEFAULT_SETTINGS = EvaluationSettings()
