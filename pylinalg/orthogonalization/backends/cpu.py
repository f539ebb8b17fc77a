"""
CPU backend for Gram-Schmidt orthogonalization.

The Grammian rank (from the Householder QR engine) fixes how many basis
vectors to expect; orthogonalization stops as soon as that many have been
accepted.
"""

from __future__ import annotations

import warnings
from typing import Literal

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import FLOAT_TOL
from pylinalg.core.exceptions import NumericalError, ValidationError
from pylinalg.core.result import Result
from pylinalg.dense.matrix import Matrix
from pylinalg.dense.vector import Vector
from pylinalg.orthogonalization.design import VectorSetDesign
from pylinalg.orthogonalization.solution import GramSchmidtParams


GSMethod = Literal['modified', 'classical']


def grammian_matrix(vectors: list[Vector]) -> Matrix:
    """k x k matrix of pairwise dot products, G[i][j] = vec[i] . vec[j]."""
    k = len(vectors)
    G = Matrix(k, k)
    for i in range(k):
        for j in range(i, k):
            g = vectors[i].dot(vectors[j])
            G[i, j] = g
            G[j, i] = g
    return G


class CPUGramSchmidtBackend:
    """
    Gram-Schmidt on the CPU.

    method='modified' re-projects every remaining vector against each newly
    finalized unit vector; method='classical' projects each candidate
    against all accepted basis vectors at once.
    """

    def __init__(self, method: GSMethod = 'modified'):
        if method not in ('modified', 'classical'):
            raise ValidationError(f"method must be 'modified' or 'classical', got {method!r}")
        self._method = method

    @property
    def name(self) -> str:
        return 'cpu_mgs' if self._method == 'modified' else 'cpu_cgs'

    def solve(
        self,
        design: VectorSetDesign,
        *,
        tol: float = FLOAT_TOL,
    ) -> Result[GramSchmidtParams]:
        """
        Orthonormalize the design's vector set.

        Parameters
        ----------
        design : VectorSetDesign
        tol : float
            Zero threshold for the Grammian reduction and vector magnitudes.
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        vecs = design.vectors()

        with timer.section('grammian'):
            G = grammian_matrix(vecs)

        with timer.section('rank'):
            rank = G.rank(tol=tol)
            det = G.determinant(tol=tol)

        with timer.section('orthogonalize'):
            if self._method == 'modified':
                indices, basis = _modified(vecs, rank, tol, warnings_list)
            else:
                indices, basis = _classical(vecs, rank, tol, warnings_list)

        timer.stop()

        for w in warnings_list:
            warnings.warn(w, RuntimeWarning, stacklevel=3)

        return Result(
            params=GramSchmidtParams(
                basis_indices=tuple(indices),
                basis=tuple(basis),
                rank=rank,
                grammian=G,
                grammian_determinant=det,
            ),
            info={
                'method': self._method,
                'rank': rank,
                'tol': tol,
                'n_vectors': design.n_vectors,
                'ndims': design.ndims,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _accept(
    vec: Vector,
    index: int,
    n_left: int,
    remaining: int,
    tol: float,
    warnings_list: list[str],
) -> Vector | None:
    """
    Normalize vec if it is large enough, or if every vector left is needed
    to reach the Grammian rank. Returns None when vec is rejected.
    """
    mag = vec.magnitude()
    if mag >= tol:
        return vec.unit()
    if n_left > remaining:
        return None
    if mag == 0.0:
        raise NumericalError(
            f"vector {index} vanished after projection but is required to reach "
            f"the Grammian rank; the rank and the vector set disagree"
        )
    warnings_list.append(
        f"vector {index} has magnitude {mag:.3e} below tolerance {tol:g} "
        f"but is required to complete the basis"
    )
    return vec.unit()


def _modified(
    vecs: list[Vector],
    rank: int,
    tol: float,
    warnings_list: list[str],
) -> tuple[list[int], list[Vector]]:
    """Modified Gram-Schmidt; vecs is overwritten in place."""
    k = len(vecs)
    ndims = vecs[0].ndims
    remaining = rank
    indices: list[int] = []
    basis: list[Vector] = []

    for i in range(k):
        if remaining == 0:
            break

        if i > 0 and (i - 1) in indices:
            prev = vecs[i - 1]
            for j in range(i, k):
                vecs[j] -= vecs[j].dot(prev) * prev

        unit = _accept(vecs[i], i, k - i, remaining, tol, warnings_list)
        if unit is None:
            vecs[i] = Vector(ndims)
            continue

        vecs[i] = unit
        indices.append(i)
        basis.append(unit.copy())
        remaining -= 1

    return indices, basis


def _classical(
    vecs: list[Vector],
    rank: int,
    tol: float,
    warnings_list: list[str],
) -> tuple[list[int], list[Vector]]:
    """Classical Gram-Schmidt against the accepted basis."""
    k = len(vecs)
    remaining = rank
    indices: list[int] = []
    basis: list[Vector] = []

    for i in range(k):
        if remaining == 0:
            break

        candidate = vecs[i].copy()
        for q in basis:
            candidate -= vecs[i].dot(q) * q

        unit = _accept(candidate, i, k - i, remaining, tol, warnings_list)
        if unit is None:
            continue

        indices.append(i)
        basis.append(unit)
        remaining -= 1

    return indices, basis
