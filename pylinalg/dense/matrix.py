"""
Dense m x n real matrix.

A Matrix exclusively owns a row-major float64 buffer. Sub-matrices and
products allocate fresh buffers; only MatrixRow is a view, and it is only
valid while the owning matrix keeps its buffer.
"""

from __future__ import annotations

import numbers
import sys
from typing import Any, Iterator, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import FLOAT_TOL
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_array,
    check_conformable,
    check_dimension,
    check_element_count,
    check_equal_shape,
    check_index,
    check_scalar,
    check_square,
)
from pylinalg.dense._format import format_matrix
from pylinalg.dense.vector import Vector


class MatrixRow:
    """
    Bounds-checked view of one row of a Matrix.

    Reads and writes go straight to the owner's buffer. The view checks
    on every access that the owner still holds a buffer with this row, so
    a view outliving a transfer() fails loudly instead of reading stale data.
    """

    __slots__ = ('_owner', '_row')

    def __init__(self, owner: Matrix, row: int):
        self._owner = owner
        self._row = row

    def _buffer(self) -> NDArray[np.float64]:
        owner = self._owner
        if owner._data is None:
            raise DimensionError("MatrixRow: owning matrix no longer holds data")
        check_index(self._row, owner.mrows, "row", "MatrixRow")
        return owner._data[self._row]

    @property
    def ncols(self) -> int:
        return self._owner.ncols

    def __len__(self) -> int:
        return self.ncols

    def __getitem__(self, col: int) -> float:
        data = self._buffer()
        j = check_index(col, data.shape[0], "column", "MatrixRow.__getitem__")
        return float(data[j])

    def __setitem__(self, col: int, value: float) -> None:
        data = self._buffer()
        j = check_index(col, data.shape[0], "column", "MatrixRow.__setitem__")
        data[j] = check_scalar(value, "MatrixRow.__setitem__")

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._buffer().copy())

    def to_vector(self) -> Vector:
        return Vector._wrap(self._buffer().copy())

    def __repr__(self) -> str:
        return f"MatrixRow({self._row}, {np.array2string(self._buffer(), separator=', ')})"


class Matrix:
    """
    Dense real matrix stored row-major.

    Construction:
        Matrix(3, 4)                                # zero-filled
        Matrix.from_array(values, 3, 4)             # copies a row-major buffer
        Matrix.identity(3)

    Access:
        A[i]            -> MatrixRow view, A[i][j] element
        A[i, j]         -> element
        A.row(i), A.column(j) -> Vector copies

    Arithmetic:
        A + B, A - B, A += B, A -= B    # equal dimensions
        s * A, A * s, A *= s            # scalar
        A @ B, A @ v                    # product, A.ncols == B.mrows
    """

    __slots__ = ('_data',)
    # numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, mrows: int, ncols: int):
        mrows = check_dimension(mrows, "Matrix rows")
        ncols = check_dimension(ncols, "Matrix columns")
        self._data: NDArray[np.float64] | None = np.zeros((mrows, ncols), dtype=np.float64)

    @classmethod
    def from_array(cls, data: ArrayLike, mrows: int, ncols: int) -> Matrix:
        """
        Build a Matrix by copying a row-major source buffer.

        Parameters
        ----------
        data : array-like
            Flat row-major buffer of mrows * ncols values, or any array of
            that many elements (it is read in row-major order).
        mrows, ncols : int
            Declared dimensions, both at least 1.
        """
        mrows = check_dimension(mrows, "Matrix.from_array rows")
        ncols = check_dimension(ncols, "Matrix.from_array columns")
        source = check_array(data, "Matrix.from_array")
        check_element_count(source, mrows * ncols, "Matrix.from_array")
        return cls._wrap(source.reshape(mrows, ncols))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_dimension(n, "Matrix.identity")
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def empty(cls) -> Matrix:
        """Create the moved-from 0x0 matrix."""
        mat = cls.__new__(cls)
        mat._data = None
        return mat

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        # Takes ownership of a 2-D float64 array without copying
        mat = cls.__new__(cls)
        mat._data = data
        return mat

    # --- Ownership ---

    def copy(self) -> Matrix:
        if self._data is None:
            return Matrix.empty()
        return Matrix._wrap(self._data.copy())

    def assign(self, other: Matrix) -> Matrix:
        """
        Copy assignment. An empty destination takes other's dimensions;
        otherwise the dimensions must match.
        """
        if other._data is None:
            raise DimensionError("Matrix.assign: source matrix is empty")
        if self._data is None:
            self._data = other._data.copy()
        else:
            self.check_equal_size(other, "Matrix.assign")
            self._data[:, :] = other._data
        return self

    def transfer(self) -> Matrix:
        """Move the buffer into a new Matrix, leaving this one 0x0."""
        moved = Matrix._wrap(self._data)
        self._data = None
        return moved

    # --- Shape ---

    @property
    def mrows(self) -> int:
        return 0 if self._data is None else int(self._data.shape[0])

    @property
    def ncols(self) -> int:
        return 0 if self._data is None else int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.mrows, self.ncols)

    @property
    def is_square(self) -> bool:
        return self.mrows == self.ncols

    @property
    def is_empty(self) -> bool:
        return self._data is None

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a 2-D float64 array."""
        if self._data is None:
            return np.zeros((0, 0), dtype=np.float64)
        return self._data.copy()

    # --- Precondition gates ---

    def _require_data(self, operation: str) -> None:
        if self._data is None:
            raise DimensionError(f"{operation}: matrix is empty (moved-from)")

    def check_equal_size(self, other: Matrix, operation: str = "Matrix") -> None:
        self._require_data(operation)
        other._require_data(operation)
        check_equal_shape(self.shape, other.shape, operation)

    def check_conformable(self, other: Matrix | Vector, operation: str = "Matrix.__matmul__") -> None:
        self._require_data(operation)
        if isinstance(other, Vector):
            check_conformable(self.shape, (other.ndims,), operation)
        else:
            other._require_data(operation)
            check_conformable(self.shape, other.shape, operation)

    def check_row_index(self, row: int, operation: str = "Matrix") -> int:
        return check_index(row, self.mrows, "row", operation)

    def check_col_index(self, col: int, operation: str = "Matrix") -> int:
        return check_index(col, self.ncols, "column", operation)

    # --- Element access ---

    def __getitem__(self, key: int | tuple[int, int]) -> MatrixRow | float:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValidationError(f"Matrix.__getitem__: expected (row, col), got {key!r}")
            i = self.check_row_index(key[0], "Matrix.__getitem__")
            j = self.check_col_index(key[1], "Matrix.__getitem__")
            return float(self._data[i, j])
        i = self.check_row_index(key, "Matrix.__getitem__")
        return MatrixRow(self, i)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix.__setitem__: expected (row, col), got {key!r}; use A[i][j] = x for row access"
            )
        i = self.check_row_index(key[0], "Matrix.__setitem__")
        j = self.check_col_index(key[1], "Matrix.__setitem__")
        self._data[i, j] = check_scalar(value, "Matrix.__setitem__")

    def __len__(self) -> int:
        return self.mrows

    def __iter__(self) -> Iterator[MatrixRow]:
        return (MatrixRow(self, i) for i in range(self.mrows))

    def row(self, i: int) -> Vector:
        i = self.check_row_index(i, "Matrix.row")
        return Vector._wrap(self._data[i].copy())

    def column(self, j: int) -> Vector:
        j = self.check_col_index(j, "Matrix.column")
        return Vector._wrap(self._data[:, j].copy())

    def sub_matrix(self, start_row: int, start_col: int, end_row: int, end_col: int) -> Matrix:
        """
        Independent copy of rows start_row..end_row and columns
        start_col..end_col (inclusive, 0-indexed).
        """
        op = "Matrix.sub_matrix"
        r0 = self.check_row_index(start_row, op)
        c0 = self.check_col_index(start_col, op)
        r1 = self.check_row_index(end_row, op)
        c1 = self.check_col_index(end_col, op)
        if r1 < r0:
            raise DimensionError(f"{op}: end row {r1} precedes start row {r0}")
        if c1 < c0:
            raise DimensionError(f"{op}: end column {c1} precedes start column {c0}")
        return Matrix._wrap(self._data[r0:r1 + 1, c0:c1 + 1].copy())

    def transpose(self) -> Matrix:
        self._require_data("Matrix.transpose")
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.check_equal_size(other, "Matrix.__iadd__")
        self._data += other._data
        return self

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.check_equal_size(other, "Matrix.__isub__")
        self._data -= other._data
        return self

    def __mul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        self._require_data("Matrix.__mul__")
        return Matrix._wrap(self._data * float(other))

    __rmul__ = __mul__

    def __imul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        self._require_data("Matrix.__imul__")
        self._data *= float(other)
        return self

    def __neg__(self) -> Matrix:
        return self * -1.0

    def matmul(self, other: Matrix | Vector) -> Matrix | Vector:
        """
        Matrix product by explicit inner-product sums.

        ``A @ B`` gives an A.mrows x B.ncols Matrix; ``A @ v`` gives a Vector
        of length A.mrows.
        """
        self.check_conformable(other, "Matrix.matmul")
        left = self._data
        if isinstance(other, Vector):
            right = other._data.reshape(-1, 1)
        else:
            right = other._data

        m, inner = left.shape
        n = right.shape[1]
        out = np.zeros((m, n), dtype=np.float64)
        for i in range(m):
            for j in range(n):
                total = 0.0
                for k in range(inner):
                    total += left[i, k] * right[k, j]
                out[i, j] = total

        if isinstance(other, Vector):
            return Vector._wrap(out[:, 0])
        return Matrix._wrap(out)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.matmul(other)

    # --- Decompositions ---

    def rank(self, tol: float = FLOAT_TOL) -> int:
        """Numerical rank via Householder QR."""
        from pylinalg.core.compute.linalg.qr import qr_rank

        self._require_data("Matrix.rank")
        return qr_rank(self, tol=tol)

    def determinant(self, tol: float = FLOAT_TOL) -> float:
        """Determinant via Householder QR; the matrix must be square."""
        from pylinalg.core.compute.linalg.qr import qr_determinant

        self._require_data("Matrix.determinant")
        check_square(self.shape, "Matrix.determinant")
        return qr_determinant(self, tol=tol)

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        if self._data is None:
            return True
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def format(self) -> str:
        """Dimension header and %12.3f elements, one matrix row per line."""
        self._require_data("Matrix.format")
        return format_matrix(self._data)

    def dump(self, file: TextIO | None = None) -> None:
        """Print format() to ``file`` (stdout by default)."""
        print(self.format(), file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        if self._data is None:
            return "Matrix(empty)"
        body = np.array2string(self._data, separator=', ', prefix='Matrix(')
        return f"Matrix({body})"


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
