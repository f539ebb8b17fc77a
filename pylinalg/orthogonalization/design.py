"""
VectorSetDesign: the fixed-size vector set handed to Gram-Schmidt.

Wraps k vectors of a common dimension d, validated and deep-copied so the
caller's vectors are never touched by the orthogonalization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_array,
    check_dimension,
    check_element_count,
    check_finite,
    check_index,
)
from pylinalg.dense.vector import Vector


@dataclass(frozen=True)
class VectorSetDesign:
    """
    Design for Gram-Schmidt orthogonalization.

    Holds k vectors of dimension d. Immutable after construction; the
    backend works on copies of the stored vectors.

    Construction:
        VectorSetDesign.from_array(coords, n_vectors=3, ndims=4)
        VectorSetDesign.from_vectors([v1, v2, v3])
    """
    _vectors: tuple[Vector, ...]
    _ndims: int

    @classmethod
    def from_array(cls, coords: ArrayLike, n_vectors: int, ndims: int) -> VectorSetDesign:
        """
        Build from a row-major coordinate buffer.

        Parameters
        ----------
        coords : array-like
            n_vectors * ndims values; row i holds the coordinates of vector i.
        n_vectors : int
            Number of vectors in the set.
        ndims : int
            Dimension of every vector.
        """
        n_vectors = check_dimension(n_vectors, "VectorSetDesign n_vectors")
        ndims = check_dimension(ndims, "VectorSetDesign ndims")
        data = check_array(coords, "coords")
        check_element_count(data, n_vectors * ndims, "coords")
        data = data.reshape(n_vectors, ndims)
        return cls._build(data)

    @classmethod
    def from_vectors(cls, vectors: Iterable[Vector]) -> VectorSetDesign:
        """Build from existing Vector objects (copied)."""
        vectors = list(vectors)
        if not vectors:
            raise ValidationError("Need at least 1 vector, got 0")

        for i, vec in enumerate(vectors):
            if not isinstance(vec, Vector):
                raise ValidationError(
                    f"vectors[{i}]: expected Vector, got {type(vec).__name__}"
                )
            if vec.is_empty:
                raise DimensionError(f"vectors[{i}]: vector is empty (ndims == 0)")

        dims = {vec.ndims for vec in vectors}
        if len(dims) > 1:
            details = ", ".join(f"vectors[{i}]={vec.ndims}" for i, vec in enumerate(vectors))
            raise DimensionError(f"Inconsistent vector dimensions: {details}")

        data = np.vstack([vec.to_numpy() for vec in vectors])
        return cls._build(data)

    @classmethod
    def _build(cls, data: NDArray[np.floating[Any]]) -> VectorSetDesign:
        """Internal builder with validation."""
        check_finite(data, "vectors")
        k, d = data.shape
        vectors = tuple(Vector.from_array(data[i], d) for i in range(k))
        return cls(_vectors=vectors, _ndims=d)

    @property
    def n_vectors(self) -> int:
        """Number of vectors k."""
        return len(self._vectors)

    @property
    def ndims(self) -> int:
        """Dimension d of every vector."""
        return self._ndims

    def vectors(self) -> list[Vector]:
        """Fresh deep copies of the vectors, safe to modify."""
        return [vec.copy() for vec in self._vectors]

    def vector(self, i: int) -> Vector:
        """Deep copy of vector i."""
        i = check_index(i, self.n_vectors, "vector", "VectorSetDesign.vector")
        return self._vectors[i].copy()

    @property
    def coords(self) -> NDArray[np.float64]:
        """Coordinates as a (k, d) array (a copy)."""
        return np.vstack([vec.to_numpy() for vec in self._vectors])

    def __repr__(self) -> str:
        return f"VectorSetDesign(n_vectors={self.n_vectors}, ndims={self._ndims})"
