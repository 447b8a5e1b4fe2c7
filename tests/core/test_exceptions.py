"""
Tests for the pylikely exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via LikelyError)
    - Diagnostic attributes on DimensionError, NotPositiveDefiniteError
    - MissingCovarianceError is distinct from NumericalError
"""

import pytest

from pylikely.core.exceptions import (
    BinningError,
    DimensionError,
    LikelyError,
    MissingCovarianceError,
    NotPositiveDefiniteError,
    NumericalError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via LikelyError."""

    def test_validation_error_is_likely_error(self):
        with pytest.raises(LikelyError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_binning_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise BinningError("bad bins")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_not_positive_definite_is_likely_error(self):
        with pytest.raises(LikelyError):
            raise NotPositiveDefiniteError("not PD")

    def test_missing_covariance_is_likely_error(self):
        with pytest.raises(LikelyError):
            raise MissingCovarianceError("no covariance")

    def test_missing_covariance_is_not_numerical_error(self):
        """A missing covariance is a precondition problem, not a numerical one."""
        err = MissingCovarianceError("no covariance")
        assert not isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries expected and actual sizes."""

    def test_all_attributes(self):
        err = DimensionError("covariance has 5 elements", expected=6, actual=5)
        assert str(err) == "covariance has 5 elements"
        assert err.expected == 6
        assert err.actual == 5

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.expected is None
        assert err.actual is None

    def test_shape_tuples(self):
        err = DimensionError("bad", expected=(3, 3), actual=(2, 3))
        assert err.expected == (3, 3)
        assert err.actual == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# NotPositiveDefiniteError
# ═══════════════════════════════════════════════════════════════════════


class TestNotPositiveDefiniteError:
    """NotPositiveDefiniteError carries the matrix name."""

    def test_all_attributes(self):
        err = NotPositiveDefiniteError("Cholesky failed", matrix_name="covariance")
        assert str(err) == "Cholesky failed"
        assert err.matrix_name == "covariance"

    def test_defaults_are_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None

    def test_catchable_with_attributes(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            raise NotPositiveDefiniteError("not PD", matrix_name="errors")
        assert exc_info.value.matrix_name == "errors"
