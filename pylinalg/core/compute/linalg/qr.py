"""
Householder QR reduction for rank and determinant.

Reduces a matrix one column at a time with Householder reflections,
tracking the numerical rank and, for square matrices, the determinant as
the product of the reflected pivots. Each step produces a fresh, smaller
working Matrix; the caller's matrix is never modified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, TYPE_CHECKING

from pylinalg.core.compute.tolerances import FLOAT_TOL
from pylinalg.core.validation import check_square

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix
    from pylinalg.dense.vector import Vector


DecompMode = Literal['rank', 'determinant']


@dataclass(frozen=True)
class QRResult:
    """
    Result of a Householder QR reduction.

    Attributes:
        rank: Numerical rank (number of pivots at or above tolerance).
            In 'determinant' mode a singular matrix short-circuits, so the
            rank is only a lower bound there.
        determinant: Determinant of the original matrix, or None when the
            matrix is not square
        pivots: Signed diagonal entries k' produced by each reflection,
            in order (skipped zero columns contribute nothing)
        reflections: Number of Householder reflections applied
        mode: Which quantity the reduction was run for
    """
    rank: int
    determinant: float | None
    pivots: tuple[float, ...]
    reflections: int
    mode: DecompMode


def _sign(x: float) -> float:
    # sign(0) is taken as +1 so that k' is never zero for a nonzero column
    return -1.0 if x < 0.0 else 1.0


def householder_vector(x: Vector, k_signed: float) -> Vector:
    """
    Unit Householder vector v such that (I - 2 v v^T) x = k' e_0.

    Parameters
    ----------
    x : Vector
        Column to reflect.
    k_signed : float
        Signed norm k' = -sign(x[0]) * ||x||.
    """
    from pylinalg.dense.vector import Vector

    n = x.ndims
    v = Vector(n)
    v0 = math.sqrt((k_signed - x[0]) / (2.0 * k_signed))
    v[0] = v0
    for j in range(1, n):
        v[j] = -x[j] / (2.0 * k_signed * v0)
    return v


def _reflect(work: Matrix, v: Vector) -> Matrix:
    """
    Rows 1.. of (I - 2 v v^T) applied to columns 1.. of the working block.

    The first row and column of the reflected block hold the pivot and
    zeros, so the next working block is one smaller in each dimension.
    """
    from pylinalg.dense.matrix import Matrix
    from pylinalg.dense.vector import Vector

    m, n = work.shape
    tail = Vector.from_array(v.to_numpy()[1:], m - 1)
    reflector = Matrix.identity(m).sub_matrix(1, 0, m - 1, m - 1) - 2.0 * tail.outer(v)
    return reflector @ work.sub_matrix(0, 1, m - 1, n - 1)


def _block_norm(work: Matrix) -> float:
    total = 0.0
    for row in work:
        for value in row:
            total += value * value
    return math.sqrt(total)


def householder_qr(
    matrix: Matrix,
    mode: DecompMode = 'rank',
    tol: float = FLOAT_TOL,
) -> QRResult:
    """
    Rank and determinant of a matrix by Householder reduction.

    Algorithm:
        1. A single row or column has rank 1 when any entry exceeds tol
           in absolute value; a 1x1 matrix is its own determinant.
        2. While the working block has more than one row and column:
           take its first column x with norm k. A numerically zero column
           makes a square matrix singular; in 'determinant' mode that ends
           the reduction with determinant 0, in 'rank' mode the column is
           dropped without a reflection. Otherwise reflect x onto
           k' = -sign(x[0]) k, multiply the determinant by k', count one
           rank, and keep the lower-right block of the reflected matrix.
        3. A residual block with norm >= tol adds one to the rank and its
           leading element to the determinant, negated when (ncols - 1) is
           odd to account for the reflections' signs.

    Parameters
    ----------
    matrix : Matrix
        Matrix to reduce. It is copied, never modified.
    mode : {'rank', 'determinant'}
        'determinant' stops at the first zero column.
    tol : float
        Zero threshold for column norms and single entries.

    Returns
    -------
    QRResult
    """
    mrows, ncols = matrix.shape
    is_square = mrows == ncols
    n = min(mrows, ncols)

    if n == 1:
        values = matrix.to_numpy().ravel()
        rank = 1 if any(abs(value) > tol for value in values) else 0
        det = float(values[0]) if is_square else None
        return QRResult(rank=rank, determinant=det, pivots=(), reflections=0, mode=mode)

    work = matrix.copy()
    det = 1.0
    rank = 0
    pivots: list[float] = []

    while work.mrows > 1 and work.ncols > 1:
        x = work.column(0)
        k = x.magnitude()

        if k < tol:
            if is_square:
                det = 0.0
            if mode == 'determinant':
                return QRResult(
                    rank=rank, determinant=0.0, pivots=tuple(pivots),
                    reflections=len(pivots), mode=mode,
                )
            # Reflection of a zero column is the identity: drop the column only
            work = work.sub_matrix(0, 1, work.mrows - 1, work.ncols - 1)
            continue

        k_signed = -_sign(x[0]) * k
        if is_square:
            det *= k_signed
        rank += 1
        pivots.append(k_signed)

        v = householder_vector(x, k_signed)
        work = _reflect(work, v)

    if _block_norm(work) >= tol:
        rank += 1
        if is_square:
            lead = work[0, 0]
            det *= -lead if (ncols - 1) % 2 == 1 else lead
    elif is_square:
        det = 0.0

    return QRResult(
        rank=rank,
        determinant=det if is_square else None,
        pivots=tuple(pivots),
        reflections=len(pivots),
        mode=mode,
    )


def qr_rank(matrix: Matrix, tol: float = FLOAT_TOL) -> int:
    """Numerical rank of any m x n matrix."""
    return householder_qr(matrix, mode='rank', tol=tol).rank


def qr_determinant(matrix: Matrix, tol: float = FLOAT_TOL) -> float:
    """
    Determinant of a square matrix.

    Raises:
        NotSquareError: If the matrix is not square
    """
    check_square(matrix.shape, "qr_determinant")
    return householder_qr(matrix, mode='determinant', tol=tol).determinant
