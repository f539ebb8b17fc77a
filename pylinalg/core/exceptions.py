"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Every precondition violation (bad sizes, bad
indices, non-conformable operands) is a ValidationError: it is raised
eagerly at the start of the offending operation and is never retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the operation and the offending values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    A precondition was violated.

    Raised when an operation is called with operands it cannot accept.
    The caller decides whether to abort; the library never recovers.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are zero, or inconsistent between operands.

    Raised on zero-sized construction and on element-wise operations
    whose operands differ in size.
    """
    pass


class ConformabilityError(DimensionError):
    """
    Operand shapes do not permit the requested operation.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Index outside the declared bounds [0, bound).

    Also an IndexError so that iteration protocols built on
    __getitem__ behave as expected.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of the valid range
        axis: Which axis was indexed ('vector', 'row', 'column')
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ResizeError(ValidationError):
    """
    Attempt to change the dimension of an already-sized vector.

    Attributes:
        current: Current dimension
        requested: Requested dimension
    """

    def __init__(self, message: str, current: int, requested: int):
        super().__init__(message)
        self.current = current
        self.requested = requested


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires full rank but the matrix is
    numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
