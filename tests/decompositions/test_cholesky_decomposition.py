"""Tests for the Cholesky Decomposition Engine.

Verifies the factor (S Sᵗ = A), linear solves, inverses and determinants on
Hilbert, Catalan-Hankel and random positive-definite matrices, and the
rejection of matrices that are not positive definite.
"""

import logging
import math
from fractions import Fraction

import numpy as np
import pytest

from symmetrix import (
    CholeskyDecomposition,
    ColumnVector,
    DimensionMismatchError,
    EvaluationSettings,
    NotPositiveDefiniteError,
    SquareMatrix,
    SymmetricMatrix,
    unit_matrix,
)
from tests.utils.numerical import (
    create_spd_matrix,
    create_symmetric_hilbert_matrix,
    is_matrix_nearly_equal,
    is_nearly_equal,
)


class TestCholeskyDecomposition:
    """Test suite for the Cholesky decomposition."""

    @pytest.fixture
    def example_matrix(self) -> SymmetricMatrix:
        """A small positive-definite matrix."""
        S = SymmetricMatrix(3)
        S[0, 0] = 4.0
        S[1, 0] = -2.0
        S[1, 1] = 5.0
        S[2, 0] = 1.0
        S[2, 1] = 3.0
        S[2, 2] = 6.0
        return S

    def test_solve_example(self, example_matrix: SymmetricMatrix) -> None:
        """Test that S x reproduces the right-hand side."""
        CD = example_matrix.cholesky_decomposition()
        b = ColumnVector([9.0, 7.0, 15.0])
        x = CD.solve(b)
        assert isinstance(x, ColumnVector)
        assert is_matrix_nearly_equal(example_matrix @ x, b)

    def test_solve_accepts_sequences(self, example_matrix: SymmetricMatrix) -> None:
        CD = CholeskyDecomposition(example_matrix)
        x1 = CD.solve(ColumnVector([9.0, 7.0, 15.0]))
        x2 = CD.solve([9.0, 7.0, 15.0])
        x3 = CD.solve(np.array([9.0, 7.0, 15.0]))
        assert x1 == x2
        assert x1 == x3

    def test_solve_dimension_mismatch(self, example_matrix: SymmetricMatrix) -> None:
        CD = example_matrix.cholesky_decomposition()
        with pytest.raises(DimensionMismatchError):
            CD.solve([1.0, 2.0])

    def test_square_root_matrix_is_lower_triangular(self, example_matrix: SymmetricMatrix) -> None:
        L = example_matrix.cholesky_decomposition().square_root_matrix()
        assert isinstance(L, SquareMatrix)
        values = L.to_array()
        assert np.array_equal(values, np.tril(values))
        assert np.all(np.diag(values) > 0.0)
        assert L[0, 0] == 2.0

    def test_square_root_matrix_is_a_copy(self, example_matrix: SymmetricMatrix) -> None:
        CD = example_matrix.cholesky_decomposition()
        L = CD.square_root_matrix()
        L[0, 0] = 100.0
        assert CD.square_root_matrix()[0, 0] == 2.0

    def test_determinant_example(self, example_matrix: SymmetricMatrix) -> None:
        """det = 4 * (5 * 6 - 9) + 2 * (-2 * 6 - 3) + 1 * (-6 - 5) = 43."""
        CD = example_matrix.cholesky_decomposition()
        assert is_nearly_equal(CD.determinant(), 43.0)
        assert CD.log_determinant() == pytest.approx(math.log(43.0), rel=1e-13)

    def test_inverse_example(self, example_matrix: SymmetricMatrix) -> None:
        SI = example_matrix.cholesky_decomposition().inverse()
        assert isinstance(SI, SymmetricMatrix)
        assert is_matrix_nearly_equal(SI @ example_matrix, unit_matrix(3))

    @pytest.mark.parametrize("d", [1, 2, 3, 4])
    def test_hilbert_matrix(self, d: int) -> None:
        """Test factor and inverse of the ill-conditioned Hilbert matrices."""
        H = create_symmetric_hilbert_matrix(d)
        CD = H.cholesky_decomposition()
        assert CD.dimension == d

        S = CD.square_root_matrix()
        assert is_matrix_nearly_equal(S @ S.transpose(), H)

        HI = CD.inverse()
        # The accuracy of the inverse degrades with the condition number.
        assert is_matrix_nearly_equal(H @ HI, unit_matrix(d), e=2.0**-32)

    @pytest.mark.parametrize("d", range(1, 9))
    def test_hilbert_determinant(self, d: int) -> None:
        """The determinant matches the closed form c(d)⁴ / c(2d), c(n) = 1! 2! ... (n-1)!."""

        def c(n: int) -> int:
            return math.prod(math.factorial(i) for i in range(1, n))

        exact = float(Fraction(c(d) ** 4, c(2 * d)))
        H = create_symmetric_hilbert_matrix(d)
        # Accuracy degrades with the condition number, which grows roughly like 10^(1.5 d).
        assert H.cholesky_decomposition().determinant() == pytest.approx(exact, rel=10.0 ** (1.5 * d - 15))

    @pytest.mark.parametrize("d", range(1, 9))
    def test_catalan_hankel_determinant(self, d: int) -> None:
        """The Hankel matrix of Catalan numbers has determinant one."""
        S = SymmetricMatrix(d)
        for r in range(d):
            for c in range(r + 1):
                n = r + c
                S[r, c] = math.comb(2 * n, n) // (n + 1)
        CD = S.cholesky_decomposition()
        assert is_nearly_equal(CD.determinant(), 1.0, EvaluationSettings(absolute_precision=1e-6, relative_precision=1e-6))

    def test_random_gram_matrix(self) -> None:
        """A Gram matrix of random vectors factors and solves accurately."""
        d = 100
        rng = np.random.default_rng(d)
        V = rng.random((d, d))
        A = SymmetricMatrix.from_generator(d, lambda i, j: float(V[i] @ V[j]))

        CD = A.cholesky_decomposition()
        assert CD.dimension == d

        S = CD.square_root_matrix()
        assert is_matrix_nearly_equal(S @ S.transpose(), A)

    @pytest.mark.parametrize("d", [5, 20, 50])
    def test_solve_and_inverse_random(self, d: int) -> None:
        A = create_spd_matrix(d, seed=d)
        CD = A.cholesky_decomposition()
        b = ColumnVector(np.linspace(-1.0, 1.0, d))
        x = CD.solve(b)
        assert is_matrix_nearly_equal(A @ x, b, e=1e-12)
        assert is_matrix_nearly_equal(CD.inverse() @ A, unit_matrix(d), e=1e-12)
        assert CD.log_determinant() == pytest.approx(math.log(CD.determinant()), rel=1e-10)

    def test_empty_matrix(self) -> None:
        CD = SymmetricMatrix(0).cholesky_decomposition()
        assert CD.dimension == 0
        assert CD.determinant() == 1.0
        assert CD.inverse().dimension == 0

    def test_decomposition_is_independent_of_source(self, example_matrix: SymmetricMatrix) -> None:
        CD = example_matrix.cholesky_decomposition()
        L = CD.square_root_matrix()
        example_matrix[0, 0] = -100.0
        assert CD.square_root_matrix() == L


class TestCholeskyFailures:
    """Test rejection of matrices that are not positive definite."""

    def test_indefinite_matrix(self) -> None:
        S = SymmetricMatrix.from_array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError) as excinfo:
            S.cholesky_decomposition()
        assert excinfo.value.pivot_index == 1
        assert excinfo.value.pivot_value == pytest.approx(-3.0)

    def test_zero_matrix(self) -> None:
        with pytest.raises(NotPositiveDefiniteError) as excinfo:
            SymmetricMatrix(2).cholesky_decomposition()
        assert excinfo.value.pivot_index == 0

    def test_negative_definite(self) -> None:
        with pytest.raises(NotPositiveDefiniteError):
            CholeskyDecomposition(-1.0 * create_spd_matrix(4, seed=1))

    def test_semidefinite_rank_deficient(self) -> None:
        S = SymmetricMatrix.from_array([[1.0, 1.0], [1.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError):
            S.cholesky_decomposition()

    def test_source_unmodified_on_failure(self) -> None:
        S = SymmetricMatrix.from_array([[1.0, 2.0], [2.0, 1.0]])
        before = S.copy()
        with pytest.raises(NotPositiveDefiniteError):
            S.cholesky_decomposition()
        assert S == before

    def test_requires_symmetric_matrix(self) -> None:
        with pytest.raises(TypeError):
            CholeskyDecomposition(SquareMatrix.identity(2))

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="symmetrix.decompositions.cholesky")
        with pytest.raises(NotPositiveDefiniteError):
            SymmetricMatrix(1).cholesky_decomposition()
        assert "rejected pivot" in caplog.text
