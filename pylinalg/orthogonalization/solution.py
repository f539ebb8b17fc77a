"""
Gram-Schmidt solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result
from pylinalg.dense._format import format_element

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix
    from pylinalg.dense.vector import Vector
    from pylinalg.orthogonalization.design import VectorSetDesign


@dataclass(frozen=True)
class GramSchmidtParams:
    """
    Parameter payload for Gram-Schmidt orthogonalization.

    basis_indices[i] is the original index of the input vector that
    became basis[i].
    """
    basis_indices: tuple[int, ...]
    basis: tuple['Vector', ...]
    rank: int
    grammian: 'Matrix'
    grammian_determinant: float


@dataclass
class GramSchmidtSolution:
    """
    User-facing Gram-Schmidt results.

    Wraps Result[GramSchmidtParams] and provides convenient accessors.
    """
    _result: Result[GramSchmidtParams]
    _design: 'VectorSetDesign'

    @property
    def basis_indices(self) -> tuple[int, ...]:
        """Original indices of the vectors that formed the basis, in order."""
        return self._result.params.basis_indices

    @property
    def excluded_indices(self) -> tuple[int, ...]:
        """Original indices that did not contribute a basis vector."""
        kept = set(self.basis_indices)
        return tuple(i for i in range(self._design.n_vectors) if i not in kept)

    @property
    def basis(self) -> tuple['Vector', ...]:
        """Orthonormal basis vectors (copies)."""
        return tuple(vec.copy() for vec in self._result.params.basis)

    @property
    def basis_matrix(self) -> NDArray[np.float64]:
        """Basis as a (rank, d) array, one unit vector per row."""
        params = self._result.params
        if not params.basis:
            return np.zeros((0, self._design.ndims), dtype=np.float64)
        return np.vstack([vec.to_numpy() for vec in params.basis])

    @property
    def rank(self) -> int:
        """Rank of the Grammian, i.e. the number of independent vectors."""
        return self._result.params.rank

    @property
    def grammian(self) -> 'Matrix':
        """Grammian matrix of the input set (a copy)."""
        return self._result.params.grammian.copy()

    @property
    def grammian_determinant(self) -> float:
        return self._result.params.grammian_determinant

    @property
    def n_vectors(self) -> int:
        return self._design.n_vectors

    @property
    def ndims(self) -> int:
        return self._design.ndims

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text report: Grammian determinant, rank and the basis vectors."""
        lines = []
        lines.append(f"Gram-Schmidt orthogonalization ({self.info.get('method', '?')})")
        lines.append(f"Number of vectors: {self.n_vectors}")
        lines.append(f"Vector dimension: {self.ndims}")
        lines.append(f"Grammian Determinant: {self.grammian_determinant:f}")
        lines.append(f"Grammian Rank: {self.rank}")
        lines.append("")

        if self.basis_indices:
            lines.append("Orthonormal basis:")
            for idx, vec in zip(self.basis_indices, self._result.params.basis):
                coords = " ".join(format_element(x) for x in vec)
                lines.append(f"  [{idx}] {coords}")
        else:
            lines.append("Orthonormal basis: (empty)")

        if self.excluded_indices:
            excluded = ", ".join(str(i) for i in self.excluded_indices)
            lines.append(f"Excluded (dependent) vectors: {excluded}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GramSchmidtSolution(n_vectors={self.n_vectors}, rank={self.rank}, "
            f"basis_indices={self.basis_indices})"
        )
