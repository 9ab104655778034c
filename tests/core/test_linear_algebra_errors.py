"""Tests for the linear-algebra error hierarchy and validation helpers."""

import pytest

from symmetrix.core.errors import (
    ConvergenceError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    LinearAlgebraError,
    NotPositiveDefiniteError,
    SingularMatrixError,
    check_axis_index,
    check_index,
    check_inner_dimensions,
    check_same_shape,
)


class TestErrorHierarchy:
    """Test the error hierarchy."""

    def test_base_exception(self):
        error = LinearAlgebraError("Test error")
        assert isinstance(error, Exception)
        assert str(error) == "Test error"

    @pytest.mark.parametrize(
        "error_class",
        [DimensionMismatchError, IndexOutOfRangeError, NotPositiveDefiniteError, SingularMatrixError, ConvergenceError],
    )
    def test_all_errors_derive_from_base(self, error_class):
        assert issubclass(error_class, LinearAlgebraError)

    def test_dimension_mismatch_renders_dimensions(self):
        error = DimensionMismatchError("Shape mismatch", expected=(2, 3), actual=(3, 2))
        assert error.expected == (2, 3)
        assert error.actual == (3, 2)
        assert "expected=(2, 3)" in str(error)
        assert "actual=(3, 2)" in str(error)

    def test_dimension_mismatch_without_dimensions(self):
        assert str(DimensionMismatchError("Shape mismatch")) == "Shape mismatch"

    def test_index_error_is_also_builtin_index_error(self):
        """Test that callers catching IndexError also catch out-of-range access."""
        error = IndexOutOfRangeError("Row index 5 outside [0, 3)", index=(5, 0), shape=(3, 3))
        assert isinstance(error, IndexError)
        assert error.index == (5, 0)
        assert error.shape == (3, 3)

    def test_not_positive_definite_carries_pivot(self):
        error = NotPositiveDefiniteError("Not positive definite", pivot_index=2, pivot_value=-0.5)
        assert error.pivot_index == 2
        assert error.pivot_value == -0.5

    def test_convergence_error_carries_diagnostics(self):
        error = ConvergenceError("No convergence", max_iterations=30, final_error=1e-3, tolerance=1e-15)
        assert error.max_iterations == 30
        assert error.final_error == 1e-3
        assert error.tolerance == 1e-15


class TestValidationHelpers:
    """Test the validation helpers."""

    def test_check_index_accepts_valid(self):
        check_index((0, 0), (1, 1))
        check_index((2, 4), (3, 5))

    @pytest.mark.parametrize("index", [(-1, 0), (0, -1), (3, 0), (0, 5)])
    def test_check_index_rejects_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError):
            check_index(index, (3, 5))

    def test_check_same_shape(self):
        check_same_shape((2, 3), (2, 3), "addition")
        with pytest.raises(DimensionMismatchError, match="addition"):
            check_same_shape((2, 3), (3, 2), "addition")

    def test_check_inner_dimensions(self):
        check_inner_dimensions((2, 3), (3, 4))
        with pytest.raises(DimensionMismatchError) as excinfo:
            check_inner_dimensions((2, 3), (2, 3))
        assert excinfo.value.expected == 3
        assert excinfo.value.actual == 2

    def test_check_axis_index(self):
        check_axis_index(0, 1, "row")
        with pytest.raises(IndexOutOfRangeError, match="Column"):
            check_axis_index(1, 1, "column")
