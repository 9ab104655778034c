"""Configuration constants for the symmetrix library.

This module defines the numerical constants used throughout the library for
convergence tests, pivot checks and conformance tolerances, so that no magic
numbers are scattered through the decomposition engines.
"""


class NumericalConstants:
    """Numerical constants for tolerances and iteration budgets.

    These constants are used by the decomposition engines and by the
    approximate-equality helpers in the test suite.
    """

    MACHINE_EPSILON: float = 2.0**-52
    """Spacing of double-precision numbers near 1.0."""

    TARGET_PRECISION: float = 2.0**-42
    """Conformance tolerance: allows the last three decimal digits to deviate."""

    DEFAULT_MAX_QL_ITERATIONS: int = 30
    """Implicit QL sweeps allowed per eigenvalue before giving up."""

    CHOLESKY_PIVOT_TOLERANCE: float = 2.0**-52
    """Smallest admissible Cholesky pivot, relative to the original diagonal entry."""
