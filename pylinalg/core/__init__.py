"""
Core infrastructure for PyLinalg.

Shared abstractions and utilities used by the dense types and the
orthogonalization driver.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Precondition gates
    compute: Timing, tolerances, linear algebra kernels
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ConformabilityError,
    NotSquareError,
    IndexOutOfRangeError,
    ResizeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ConformabilityError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "ResizeError",
    "NumericalError",
    "SingularMatrixError",
]
