"""
Solver dispatch for Gram-Schmidt orthogonalization.

Provides gram_schmidt() as the entry point and grammian() for the
pairwise dot-product matrix on its own.
"""

from __future__ import annotations

from typing import Iterable, Literal

from pylinalg.core.compute.tolerances import FLOAT_TOL
from pylinalg.core.protocols import Backend
from pylinalg.core.exceptions import SingularMatrixError, ValidationError
from pylinalg.dense.matrix import Matrix
from pylinalg.dense.vector import Vector
from pylinalg.orthogonalization.backends.cpu import CPUGramSchmidtBackend, grammian_matrix
from pylinalg.orthogonalization.design import VectorSetDesign
from pylinalg.orthogonalization.solution import GramSchmidtParams, GramSchmidtSolution


GSMethod = Literal['modified', 'classical']


def _get_backend(method: str) -> Backend[VectorSetDesign, GramSchmidtParams]:
    """Backend for the requested Gram-Schmidt variant."""
    if method not in ('modified', 'classical'):
        raise ValidationError(f"method must be 'modified' or 'classical', got {method!r}")
    return CPUGramSchmidtBackend(method=method)


def _ensure_design(vectors: Iterable[Vector] | VectorSetDesign) -> VectorSetDesign:
    """Convert a sequence of Vectors to VectorSetDesign if needed."""
    if isinstance(vectors, VectorSetDesign):
        return vectors
    return VectorSetDesign.from_vectors(vectors)


def grammian(vectors: Iterable[Vector] | VectorSetDesign) -> Matrix:
    """
    Grammian matrix of a vector set.

    Parameters
    ----------
    vectors : sequence of Vector or VectorSetDesign
        k vectors of equal dimension.

    Returns
    -------
    Matrix
        k x k, G[i][j] = vec[i] . vec[j]. Its rank is the number of
        linearly independent vectors in the set.
    """
    design = _ensure_design(vectors)
    return grammian_matrix(design.vectors())


def gram_schmidt(
    vectors: Iterable[Vector] | VectorSetDesign,
    *,
    method: GSMethod = 'modified',
    tol: float = FLOAT_TOL,
    require_full_rank: bool = False,
) -> GramSchmidtSolution:
    """
    Orthonormalize a vector set.

    The rank of the Grammian (Householder QR) decides how many orthonormal
    vectors the set spans. Vectors are then processed in order; each one
    that keeps a magnitude of at least ``tol`` after projection becomes the
    next unit basis vector, the others are dropped.

    Parameters
    ----------
    vectors : sequence of Vector or VectorSetDesign
        k vectors of equal dimension. The inputs are not modified.
    method : str
        'modified' (default) or 'classical' Gram-Schmidt.
    tol : float
        Zero threshold. Default FLOAT_TOL (1e-6).
    require_full_rank : bool
        If True, raise SingularMatrixError when the vectors are linearly
        dependent.

    Returns
    -------
    GramSchmidtSolution

    Raises
    ------
    ValidationError
        On an empty set, vectors of differing dimension, or a bad method.
    SingularMatrixError
        If require_full_rank and the Grammian is rank-deficient.
    """
    backend = _get_backend(method)
    if not tol > 0:
        raise ValidationError(f"tol must be positive, got {tol!r}")

    design = _ensure_design(vectors)
    result = backend.solve(design, tol=tol)

    if require_full_rank and result.params.rank < design.n_vectors:
        raise SingularMatrixError(
            f"Vector set is linearly dependent: Grammian rank={result.params.rank}, "
            f"expected={design.n_vectors}",
            matrix_name='grammian',
            rank=result.params.rank,
            expected_rank=design.n_vectors,
        )

    return GramSchmidtSolution(_result=result, _design=design)
