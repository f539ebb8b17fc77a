"""
Reference determinant by cofactor (Laplace) expansion.

O(n!) and therefore only meant for small matrices; it shares no code with
the Householder path, which makes it a useful independent check on the
sign bookkeeping of qr_determinant().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_square

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix

# Expansion beyond this size is too slow to be useful
MAX_COFACTOR_SIZE = 8


def cofactor_determinant(matrix: Matrix) -> float:
    """
    Determinant by expansion along the first row.

    Raises:
        NotSquareError: If the matrix is not square
        ValidationError: If the matrix is larger than MAX_COFACTOR_SIZE
    """
    check_square(matrix.shape, "cofactor_determinant")
    n = matrix.mrows
    if n > MAX_COFACTOR_SIZE:
        raise ValidationError(
            f"cofactor_determinant: size {n} exceeds maximum {MAX_COFACTOR_SIZE}"
        )
    rows = [list(row) for row in matrix]
    return _expand(rows)


def _expand(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    total = 0.0
    for j, a in enumerate(rows[0]):
        if a == 0.0:
            continue
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        sign = -1.0 if j % 2 else 1.0
        total += sign * a * _expand(minor)
    return total
