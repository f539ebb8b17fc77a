"""
Dense n-dimensional real vector.

A Vector exclusively owns a float64 buffer. Copies are deep; transfer()
moves the buffer into a new Vector and leaves the source empty. The only
way to change a vector's dimension is to size an empty vector with
set_vector().
"""

from __future__ import annotations

import math
import numbers
import sys
from typing import Any, Iterator, TYPE_CHECKING, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import NumericalError, ResizeError
from pylinalg.core.validation import (
    check_array,
    check_dimension,
    check_element_count,
    check_index,
    check_operand_sizes,
    check_scalar,
)
from pylinalg.dense._format import format_vector

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


class Vector:
    """
    Fixed-length dense real vector.

    Construction:
        Vector(4)                               # zero-filled
        Vector.from_array([1, 2, 3, 4], 4)      # copies the source
        Vector.empty()                          # unsized, see set_vector()

    Arithmetic:
        v + w, v - w, v += w, v -= w            # element-wise, equal sizes
        v @ w, v.dot(w)                         # dot product
        2.0 * v, v * 2.0, v / 2.0, -v           # scalar
        v.outer(w)                              # Matrix (len(v), len(w))
    """

    __slots__ = ('_data',)
    # numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, ndims: int):
        ndims = check_dimension(ndims, "Vector")
        self._data: NDArray[np.float64] | None = np.zeros(ndims, dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike, ndims: int) -> Vector:
        """
        Build a Vector by copying ``ndims`` values from a source array.

        Parameters
        ----------
        values : array-like
            Source coordinates. Must hold exactly ``ndims`` values.
        ndims : int
            Declared vector dimension (at least 1).
        """
        vec = cls.empty()
        vec.set_vector(values, ndims)
        return vec

    @classmethod
    def empty(cls) -> Vector:
        """Create an unsized vector (ndims == 0, no backing storage)."""
        vec = cls.__new__(cls)
        vec._data = None
        return vec

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        # Takes ownership of data without copying
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    # --- Sizing and ownership ---

    def set_vector(self, values: ArrayLike, ndims: int) -> None:
        """
        Assign values, sizing the vector if it is still empty.

        Raises
        ------
        ResizeError
            If the vector is already sized with a different dimension.
        DimensionError
            If ndims is 0 or the source does not hold ndims values.
        """
        current = self.ndims
        if current != 0 and current != ndims:
            raise ResizeError(
                f"Vector.set_vector: attempting to reset vector dimension "
                f"from {current} to {ndims}",
                current=current, requested=ndims,
            )
        ndims = check_dimension(ndims, "Vector.set_vector")

        source = check_array(values, "Vector.set_vector").ravel()
        check_element_count(source, ndims, "Vector.set_vector")

        if self._data is None:
            self._data = source
        else:
            self._data[:] = source

    def assign(self, other: Vector) -> Vector:
        """
        Copy assignment.

        An unsized destination is initialized from ``other``; otherwise the
        two vectors must have equal size.
        """
        if self._data is None:
            check_operand_sizes(other.ndims, other.ndims, "Vector.assign")
            self._data = other._data.copy()
        else:
            check_operand_sizes(self.ndims, other.ndims, "Vector.assign")
            self._data[:] = other._data
        return self

    def copy(self) -> Vector:
        """Deep copy. Copying an empty vector yields an empty vector."""
        if self._data is None:
            return Vector.empty()
        return Vector._wrap(self._data.copy())

    def transfer(self) -> Vector:
        """Move the buffer into a new Vector, leaving this one empty."""
        moved = Vector.empty()
        moved._data = self._data
        self._data = None
        return moved

    # --- Properties ---

    @property
    def ndims(self) -> int:
        """Number of elements (0 while empty)."""
        return 0 if self._data is None else int(self._data.shape[0])

    @property
    def is_empty(self) -> bool:
        return self._data is None

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a 1-D float64 array."""
        if self._data is None:
            return np.zeros(0, dtype=np.float64)
        return self._data.copy()

    def __len__(self) -> int:
        return self.ndims

    def __iter__(self) -> Iterator[float]:
        if self._data is None:
            return iter(())
        return (float(x) for x in self._data)

    # --- Element access ---

    def __getitem__(self, index: int) -> float:
        i = check_index(index, self.ndims, "vector", "Vector.__getitem__")
        return float(self._data[i])

    def __setitem__(self, index: int, value: float) -> None:
        i = check_index(index, self.ndims, "vector", "Vector.__setitem__")
        self._data[i] = check_scalar(value, "Vector.__setitem__")

    # --- Products and norms ---

    def dot(self, other: Vector) -> float:
        """Sum of element-wise products."""
        if not isinstance(other, Vector):
            raise TypeError(f"Vector.dot: expected Vector, got {type(other).__name__}")
        check_operand_sizes(self.ndims, other.ndims, "Vector.dot")
        return float(np.dot(self._data, other._data))

    def magnitude(self) -> float:
        """Euclidean norm, sqrt(self . self)."""
        return math.sqrt(self.dot(self))

    norm = magnitude

    def unit(self) -> Vector:
        """
        Unit vector in the direction of self.

        Deciding whether the magnitude is numerically zero is the caller's
        job (compare against FLOAT_TOL); only an exact zero is rejected here.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise NumericalError("Vector.unit: cannot normalize a zero-magnitude vector")
        return self / mag

    def outer(self, other: Vector) -> Matrix:
        """Outer product, shape (len(self), len(other)), [i][j] = self[i] * other[j]."""
        from pylinalg.dense.matrix import Matrix

        if self._data is None or other._data is None:
            check_operand_sizes(self.ndims, other.ndims, "Vector.outer")
        return Matrix._wrap(np.outer(self._data, other._data))

    # --- Element-wise arithmetic ---

    def add(self, other: Vector) -> Vector:
        result = self.copy()
        result += other
        return result

    def subtract(self, other: Vector) -> Vector:
        result = self.copy()
        result -= other
        return result

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __iadd__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_operand_sizes(self.ndims, other.ndims, "Vector.__iadd__")
        self._data += other._data
        return self

    def __isub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_operand_sizes(self.ndims, other.ndims, "Vector.__isub__")
        self._data -= other._data
        return self

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __mul__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        scale = check_scalar(other, "Vector.__mul__")
        check_operand_sizes(self.ndims, self.ndims, "Vector.__mul__")
        return Vector._wrap(self._data * scale)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        scale = check_scalar(other, "Vector.__truediv__")
        check_operand_sizes(self.ndims, self.ndims, "Vector.__truediv__")
        if scale == 0.0:
            raise NumericalError("Vector.__truediv__: division by zero")
        return Vector._wrap(self._data / scale)

    def __neg__(self) -> Vector:
        check_operand_sizes(self.ndims, self.ndims, "Vector.__neg__")
        return Vector._wrap(-self._data)

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.ndims != other.ndims:
            return False
        if self._data is None:
            return True
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def format(self) -> str:
        """Dimension header and %12.3f elements, one per line."""
        check_dimension(self.ndims, "Vector.format")
        return format_vector(self._data)

    def dump(self, file: TextIO | None = None) -> None:
        """Print format() to ``file`` (stdout by default)."""
        print(self.format(), file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        if self._data is None:
            return "Vector(empty)"
        return f"Vector({np.array2string(self._data, separator=', ')})"


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
