"""
Dense vector and matrix types.

Public API:
    Vector      - fixed-length real vector
    Matrix      - m x n real matrix, row-major
    MatrixRow   - bounds-checked row view of a Matrix
"""

from pylinalg.dense.vector import Vector
from pylinalg.dense.matrix import Matrix, MatrixRow

__all__ = [
    "Vector",
    "Matrix",
    "MatrixRow",
]
