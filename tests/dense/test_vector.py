"""
Tests for Vector: construction, sizing, indexing, arithmetic and dumps.
"""

import io
import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    ResizeError,
    ValidationError,
)
from pylinalg.dense import Matrix, Vector


# ═══════════════════════════════════════════════════════════════════════
# Construction and ownership
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zero_filled(self):
        v = Vector(3)
        assert v.ndims == 3
        assert list(v) == [0.0, 0.0, 0.0]

    def test_zero_length_rejected(self):
        with pytest.raises(DimensionError, match="less than 1"):
            Vector(0)

    def test_from_array_copies(self):
        source = np.array([1.0, 2.0, 3.0])
        v = Vector.from_array(source, 3)
        source[0] = 99.0
        assert v[0] == 1.0

    def test_from_array_length_must_match(self):
        with pytest.raises(DimensionError, match="declared size is 4"):
            Vector.from_array([1.0, 2.0, 3.0], 4)

    def test_from_array_zero_length_rejected(self):
        with pytest.raises(DimensionError):
            Vector.from_array([], 0)

    def test_copy_is_deep(self):
        v = Vector.from_array([1.0, 2.0], 2)
        w = v.copy()
        w[0] = 5.0
        assert v[0] == 1.0

    def test_transfer_empties_source(self):
        v = Vector.from_array([1.0, 2.0], 2)
        w = v.transfer()
        assert v.ndims == 0
        assert v.is_empty
        assert list(w) == [1.0, 2.0]

    def test_moved_from_vector_rejects_operations(self):
        v = Vector.from_array([1.0, 2.0], 2)
        v.transfer()
        with pytest.raises(DimensionError, match="zero element vector"):
            v.dot(Vector(2))


class TestSetVector:

    def test_sizes_empty_vector(self):
        v = Vector.empty()
        assert v.ndims == 0
        v.set_vector([1.0, 2.0, 3.0], 3)
        assert v.ndims == 3
        assert v[2] == 3.0

    def test_same_size_overwrites(self):
        v = Vector(2)
        v.set_vector([4.0, 5.0], 2)
        assert list(v) == [4.0, 5.0]

    def test_resize_rejected(self):
        v = Vector(3)
        with pytest.raises(ResizeError, match="from 3 to 4") as exc_info:
            v.set_vector([1.0, 2.0, 3.0, 4.0], 4)
        assert exc_info.value.current == 3
        assert exc_info.value.requested == 4

    def test_resize_is_precondition_violation(self):
        with pytest.raises(ValidationError):
            Vector(2).set_vector([1.0], 1)


class TestAssign:

    def test_equal_sizes(self):
        v = Vector(2)
        w = Vector.from_array([3.0, 4.0], 2)
        v.assign(w)
        assert v == w
        w[0] = 0.0
        assert v[0] == 3.0

    def test_unsized_destination_initializes(self):
        v = Vector.empty()
        v.assign(Vector.from_array([1.0, 2.0, 3.0], 3))
        assert v.ndims == 3

    def test_size_mismatch_rejected(self):
        with pytest.raises(DimensionError, match="not equal"):
            Vector(2).assign(Vector(3))


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_get_and_set(self):
        v = Vector(3)
        v[1] = 2.5
        assert v[1] == 2.5

    def test_numpy_integer_index(self):
        v = Vector.from_array([1.0, 2.0], 2)
        assert v[np.int32(1)] == 2.0

    def test_negative_index_is_error(self):
        v = Vector(3)
        with pytest.raises(IndexOutOfRangeError, match="invalid vector index -1"):
            v[-1]

    def test_upper_bound(self):
        v = Vector(3)
        with pytest.raises(IndexOutOfRangeError, match="out of bounds"):
            v[3]

    def test_set_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            Vector(2)[5] = 1.0

    def test_slice_rejected(self):
        with pytest.raises(ValidationError):
            Vector(3)[0:2]


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_dot(self):
        a = Vector.from_array([1.0, 2.0, 3.0, 4.0], 4)
        b = Vector.from_array([-1.0, 2.0, 4.0, 1.0], 4)
        assert a.dot(b) == 19.0
        assert a @ b == 19.0

    def test_dot_size_mismatch(self):
        with pytest.raises(DimensionError, match="Vector.dot"):
            Vector(2).dot(Vector(3))

    def test_dot_equals_magnitude_squared(self, rng):
        for n in (1, 2, 5, 10):
            v = Vector.from_array(rng.standard_normal(n), n)
            assert_allclose(v.dot(v), v.magnitude() ** 2, rtol=1e-12)

    def test_bilinearity(self, rng):
        a, b, c = (Vector.from_array(rng.standard_normal(6), 6) for _ in range(3))
        assert_allclose((a + b).dot(c), a.dot(c) + b.dot(c), rtol=1e-12)

    def test_magnitude(self):
        assert Vector.from_array([3.0, 4.0], 2).magnitude() == 5.0
        assert Vector.from_array([3.0, 4.0], 2).norm() == 5.0

    def test_add_subtract(self):
        a = Vector.from_array([1.0, 2.0], 2)
        b = Vector.from_array([0.5, -1.0], 2)
        assert list(a + b) == [1.5, 1.0]
        assert list(a - b) == [0.5, 3.0]
        assert list(a.add(b)) == [1.5, 1.0]
        assert list(a.subtract(b)) == [0.5, 3.0]

    def test_in_place(self):
        a = Vector.from_array([1.0, 2.0], 2)
        a += Vector.from_array([1.0, 1.0], 2)
        a -= Vector.from_array([0.5, 0.5], 2)
        assert list(a) == [1.5, 2.5]

    def test_add_size_mismatch(self):
        with pytest.raises(DimensionError):
            Vector(2) + Vector(3)

    def test_operands_not_modified(self):
        a = Vector.from_array([1.0, 2.0], 2)
        b = Vector.from_array([3.0, 4.0], 2)
        a + b
        assert list(a) == [1.0, 2.0]
        assert list(b) == [3.0, 4.0]

    def test_scalar_commutative(self):
        v = Vector.from_array([1.0, -2.0], 2)
        assert 3.0 * v == v * 3.0
        assert list(v / 2.0) == [0.5, -1.0]
        assert list(-v) == [-1.0, 2.0]

    def test_numpy_scalar_on_the_left(self):
        v = Vector.from_array([1.0, 2.0], 2)
        result = np.float64(2.0) * v
        assert isinstance(result, Vector)
        assert result == v * 2.0

    def test_vector_times_vector_unsupported(self):
        with pytest.raises(TypeError):
            Vector(2) * Vector(2)

    def test_unit(self):
        u = Vector.from_array([3.0, 4.0], 2).unit()
        assert_allclose(list(u), [0.6, 0.8])
        assert math.isclose(u.magnitude(), 1.0)

    def test_unit_of_zero_vector(self):
        with pytest.raises(NumericalError, match="zero-magnitude"):
            Vector(3).unit()


class TestOuter:

    def test_shape_and_entries(self):
        a = Vector.from_array([1.0, 2.0, 3.0], 3)
        b = Vector.from_array([4.0, 5.0], 2)
        M = a.outer(b)
        assert isinstance(M, Matrix)
        assert M.shape == (3, 2)
        for i in range(3):
            for j in range(2):
                assert M[i, j] == a[i] * b[j]

    def test_empty_operand_rejected(self):
        with pytest.raises(DimensionError):
            Vector.empty().outer(Vector(2))


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestFormat:

    def test_format(self):
        v = Vector.from_array([1.0, -2.5], 2)
        expected = "\n".join([
            "Vector dimension: 2",
            "Vector elements",
            " " + f"{1.0:12.3f}",
            " " + f"{-2.5:12.3f}",
        ])
        assert v.format() == expected

    def test_single_element_header(self):
        assert "Vector element\n" in Vector.from_array([7.0], 1).format()

    def test_element_width(self):
        line = Vector.from_array([3.14159], 1).format().splitlines()[-1]
        assert line == "        3.142"

    def test_dump(self):
        buf = io.StringIO()
        Vector.from_array([1.0], 1).dump(buf)
        assert buf.getvalue().startswith("Vector dimension: 1")

    def test_format_empty_rejected(self):
        with pytest.raises(DimensionError):
            Vector.empty().format()

    def test_repr(self):
        assert repr(Vector.empty()) == "Vector(empty)"
        assert repr(Vector(2)).startswith("Vector(")
