"""
Generic result container for PyLinalg computations.

The Result class provides a standardized envelope that higher-level
drivers (Gram-Schmidt) use. This enables shared handling of timing and
warnings while each driver defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, tolerance)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The driver-specific parameter payload type

    Attributes:
        params: Driver-specific payload (basis vectors, indices, etc.)
        info: Structured metadata (method, rank, tolerance)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=GramSchmidtParams(...),
        ...     info={'method': 'modified', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_mgs'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
