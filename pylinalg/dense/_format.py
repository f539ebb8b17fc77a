"""
Human-readable dumps of vectors and matrices.

Each element is printed fixed-width, 12 characters wide with 3 decimals.
These strings are diagnostic output, not a persisted format.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

ELEMENT_FORMAT = "{:12.3f}"


def format_element(value: float) -> str:
    return ELEMENT_FORMAT.format(value)


def format_vector(data: NDArray[np.floating[Any]]) -> str:
    """Dimension header followed by one element per line."""
    n = data.shape[0]
    lines = [f"Vector dimension: {n}"]
    lines.append("Vector element" if n == 1 else "Vector elements")
    lines.extend(" " + format_element(x) for x in data)
    return "\n".join(lines)


def format_matrix(data: NDArray[np.floating[Any]]) -> str:
    """Dimension header followed by one matrix row per line."""
    m, n = data.shape
    lines = [f"Matrix dimensions: {m} x {n}"]
    lines.append("Matrix element" if m * n == 1 else "Matrix elements")
    for row in data:
        lines.append(" " + " ".join(format_element(x) for x in row))
    return "\n".join(lines)
