"""
Gram-Schmidt orthogonalization.

Public API:
    gram_schmidt(vectors)   - Orthonormal basis of a vector set
    grammian(vectors)       - Pairwise dot-product matrix
"""

from pylinalg.orthogonalization.design import VectorSetDesign
from pylinalg.orthogonalization.solution import GramSchmidtParams, GramSchmidtSolution
from pylinalg.orthogonalization.solvers import gram_schmidt, grammian

__all__ = [
    "gram_schmidt",
    "grammian",
    "VectorSetDesign",
    "GramSchmidtParams",
    "GramSchmidtSolution",
]
