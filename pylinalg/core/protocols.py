"""
Core protocols for PyLinalg.

Structural interfaces that driver backends must satisfy. We use Protocol
(structural typing) rather than ABC (nominal typing) so that backends need
not inherit from a common base.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from pylinalg.core.result import Result

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a driver-specific design and produce a
    driver-specific parameter payload. Backends are stateless: all
    configuration is passed at call time or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_mgs', 'cpu_cgs'
        """
        ...

    def solve(self, design: D, **kwargs: Any) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Driver-specific validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
