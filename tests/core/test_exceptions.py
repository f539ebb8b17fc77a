"""
Tests for PyLinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - Every precondition violation is a ValidationError
    - Diagnostic attributes on the structured exceptions
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    ConformabilityError,
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    NumericalError,
    PyLinalgError,
    ResizeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad"),
        DimensionError("bad"),
        ConformabilityError("bad"),
        NotSquareError("bad"),
        IndexOutOfRangeError("bad"),
        ResizeError("bad", current=3, requested=4),
        NumericalError("bad"),
        SingularMatrixError("bad"),
    ])
    def test_catchable_as_base(self, exc):
        with pytest.raises(PyLinalgError):
            raise exc

    @pytest.mark.parametrize("cls", [
        DimensionError, ConformabilityError, NotSquareError,
        IndexOutOfRangeError, ResizeError,
    ])
    def test_precondition_violations_are_validation_errors(self, cls):
        assert issubclass(cls, ValidationError)

    def test_conformability_error_is_dimension_error(self):
        assert issubclass(ConformabilityError, DimensionError)

    def test_not_square_error_is_dimension_error(self):
        assert issubclass(NotSquareError, DimensionError)

    def test_index_error_is_builtin_index_error(self):
        """Plays well with code that catches IndexError."""
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range", index=5, bound=3)

    def test_numerical_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Structured exceptions
# ═══════════════════════════════════════════════════════════════════════


class TestConformabilityError:

    def test_all_attributes(self):
        err = ConformabilityError(
            "inner dimensions do not match",
            operation="Matrix.matmul",
            left_shape=(2, 3),
            right_shape=(4, 2),
        )
        assert str(err) == "inner dimensions do not match"
        assert err.operation == "Matrix.matmul"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (4, 2)

    def test_defaults_are_none(self):
        err = ConformabilityError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("row index 5 out of bounds", index=5, bound=3, axis="row")
        assert err.index == 5
        assert err.bound == 3
        assert err.axis == "row"

    def test_catchable_with_attributes(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            raise IndexOutOfRangeError("bad", index=-1, bound=4, axis="vector")
        assert exc_info.value.index == -1
        assert exc_info.value.axis == "vector"


class TestResizeError:

    def test_attributes(self):
        err = ResizeError("cannot resize", current=3, requested=4)
        assert err.current == 3
        assert err.requested == 4


class TestNotSquareError:

    def test_shape(self):
        err = NotSquareError("not square", shape=(2, 3))
        assert err.shape == (2, 3)

    def test_default_shape(self):
        assert NotSquareError("not square").shape is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "grammian is singular",
            matrix_name="grammian",
            rank=3,
            expected_rank=4,
        )
        assert str(err) == "grammian is singular"
        assert err.matrix_name == "grammian"
        assert err.rank == 3
        assert err.expected_rank == 4

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None
