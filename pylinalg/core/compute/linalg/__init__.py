"""
Linear algebra kernels for PyLinalg.

All functions follow these conventions:
    - Inputs are pylinalg Matrix objects and are never modified
    - Each reduction returns a structured result dataclass
    - Precondition violations are raised immediately with clear messages

Submodules:
    qr: Householder QR reduction (rank, determinant)
    determinant: Cofactor-expansion reference determinant
"""

from pylinalg.core.compute.linalg.qr import (
    QRResult,
    householder_qr,
    householder_vector,
    qr_rank,
    qr_determinant,
)
from pylinalg.core.compute.linalg.determinant import cofactor_determinant

__all__ = [
    # QR decomposition
    "QRResult",
    "householder_qr",
    "householder_vector",
    "qr_rank",
    "qr_determinant",
    # Reference determinant
    "cofactor_determinant",
]
