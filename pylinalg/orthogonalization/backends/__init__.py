"""Gram-Schmidt backends."""

from pylinalg.orthogonalization.backends.cpu import CPUGramSchmidtBackend, grammian_matrix

__all__ = ["CPUGramSchmidtBackend", "grammian_matrix"]
