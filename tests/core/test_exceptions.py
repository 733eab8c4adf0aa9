"""
Tests for PyMatrices exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatricesError)
    - Diagnostic attributes on DimensionMismatchError, NonSquareError,
      MatrixIndexError, SingularMatrixError
    - str works correctly
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrices.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IllConditionedWarning,
    MatrixIndexError,
    NonSquareError,
    NumericalError,
    PyMatricesError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatricesError."""

    def test_validation_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_dimension_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DimensionMismatchError("mismatch")

    def test_non_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NonSquareError("not square")

    def test_index_error_is_validation_and_builtin_index_error(self):
        err = MatrixIndexError("out of range")
        assert isinstance(err, ValidationError)
        assert isinstance(err, IndexError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_dimension_error(self):
        """Callers can tell the three failure kinds apart by class."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, DimensionError)
        assert not isinstance(NonSquareError("x"), DimensionMismatchError)
        assert not isinstance(DimensionMismatchError("x"), NonSquareError)

    def test_ill_conditioned_is_runtime_warning(self):
        assert issubclass(IllConditionedWarning, RuntimeWarning)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatchError:

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "Expected: 3, but found: 4",
            operation="multiply",
            expected=3,
            actual=4,
        )
        assert str(err) == "Expected: 3, but found: 4"
        assert err.operation == "multiply"
        assert err.expected == 3
        assert err.actual == 4

    def test_defaults_are_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.operation is None
        assert err.expected is None
        assert err.actual is None


class TestNonSquareError:

    def test_shape(self):
        err = NonSquareError("Found: 2 x 3", shape=(2, 3))
        assert err.shape == (2, 3)
        assert "2 x 3" in str(err)

    def test_default_shape_none(self):
        assert NonSquareError("x").shape is None


class TestMatrixIndexError:

    def test_attributes(self):
        err = MatrixIndexError("bad", index=(5, 0), shape=(2, 2))
        assert err.index == (5, 0)
        assert err.shape == (2, 2)


class TestSingularMatrixError:
    """SingularMatrixError carries elimination diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "Matrix is singular",
            matrix_name="A",
            stage="forward",
            pivot_index=2,
        )
        assert str(err) == "Matrix is singular"
        assert err.matrix_name == "A"
        assert err.stage == "forward"
        assert err.pivot_index == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.stage is None
        assert err.pivot_index is None

    def test_catchable_with_attributes(self):
        """Attributes accessible in except block."""
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", stage="backward", pivot_index=1)
        assert exc_info.value.stage == "backward"
        assert exc_info.value.pivot_index == 1
