"""
PyLinalg: dense vectors, matrices and Householder QR for Python.

Rank and determinant by Householder reduction, and Gram-Schmidt
orthogonalization driven by the rank of the Grammian matrix.

Submodules:
    dense: Vector and Matrix types
    orthogonalization: Gram-Schmidt driver
    core: Exceptions, validation, result envelope, QR engine
"""

__version__ = "0.1.0"

from pylinalg.dense import Vector, Matrix, MatrixRow
from pylinalg.core.compute.tolerances import FLOAT_TOL
from pylinalg.core.compute.linalg import householder_qr, QRResult
from pylinalg.orthogonalization import gram_schmidt, grammian
from pylinalg import orthogonalization

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "MatrixRow",
    "FLOAT_TOL",
    "householder_qr",
    "QRResult",
    "gram_schmidt",
    "grammian",
    "orthogonalization",
]
