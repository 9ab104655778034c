"""Test module for numerical constants and evaluation settings."""

import dataclasses
import sys

import pytest

from symmetrix.core.constants import NumericalConstants
from symmetrix.core.settings import DEFAULT_SETTINGS, EvaluationSettings


class TestNumericalConstants:
    """Test numerical constants configuration."""

    def test_machine_epsilon_matches_float64(self):
        """Test that MACHINE_EPSILON is the float64 spacing at 1.0."""
        assert NumericalConstants.MACHINE_EPSILON == sys.float_info.epsilon
        assert 1.0 + NumericalConstants.MACHINE_EPSILON != 1.0

    def test_target_precision_value(self):
        """Test that TARGET_PRECISION is 2^-42."""
        assert NumericalConstants.TARGET_PRECISION == 2.0**-42

    def test_target_precision_looser_than_epsilon(self):
        assert NumericalConstants.TARGET_PRECISION > NumericalConstants.MACHINE_EPSILON

    def test_iteration_budget_is_positive_int(self):
        assert isinstance(NumericalConstants.DEFAULT_MAX_QL_ITERATIONS, int)
        assert NumericalConstants.DEFAULT_MAX_QL_ITERATIONS > 0

    def test_cholesky_pivot_tolerance_positive(self):
        assert 0.0 < NumericalConstants.CHOLESKY_PIVOT_TOLERANCE < 1e-12


class TestEvaluationSettings:
    """Test evaluation settings validation and tolerance arithmetic."""

    def test_defaults(self):
        settings = EvaluationSettings()
        assert settings.absolute_precision == 0.0
        assert settings.relative_precision == NumericalConstants.MACHINE_EPSILON
        assert settings.max_iterations == NumericalConstants.DEFAULT_MAX_QL_ITERATIONS
        assert DEFAULT_SETTINGS == settings

    def test_tolerance_combines_absolute_and_relative(self):
        """Test tol = abs + norm * rel."""
        settings = EvaluationSettings(absolute_precision=1e-3, relative_precision=1e-2)
        assert settings.tolerance(10.0) == pytest.approx(1e-3 + 0.1)
        assert settings.tolerance(-10.0) == pytest.approx(1e-3 + 0.1)
        assert settings.tolerance(0.0) == pytest.approx(1e-3)

    def test_settings_are_frozen(self):
        settings = EvaluationSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.max_iterations = 5

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"absolute_precision": -1e-10},
            {"relative_precision": -1e-10},
            {"absolute_precision": 0.0, "relative_precision": 0.0},
            {"max_iterations": 0},
            {"max_iterations": -3},
            {"relative_precision": float("nan")},
        ],
    )
    def test_invalid_settings_rejected(self, kwargs):
        """Test that invalid settings raise ValueError."""
        with pytest.raises(ValueError):
            EvaluationSettings(**kwargs)
