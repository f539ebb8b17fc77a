"""
Shared compute infrastructure for PyLinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero threshold and comparison tolerances
    linalg: Linear algebra kernels (Householder QR, reference determinant)
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import FLOAT_TOL

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "FLOAT_TOL",
]
