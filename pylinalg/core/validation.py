"""
Precondition gates for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - The operation name is included in all error messages
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    ConformabilityError,
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a fresh float64 array owned by
    the caller. Rejects inputs that result in object dtype (indicating
    mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 (always a copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested dimension is an integer of at least 1.

    Args:
        value: Requested size
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: dimension must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise DimensionError(f"{name}: dimension ({value}) is less than 1")
    return int(value)


def check_element_count(
    array: NDArray[np.floating[Any]],
    expected: int,
    name: str,
) -> None:
    """
    Verify a source buffer holds exactly the declared number of values.

    Args:
        array: Source buffer
        expected: Declared number of elements
        name: Parameter name for error messages

    Raises:
        DimensionError: If the buffer size differs from expected
    """
    if array.size != expected:
        raise DimensionError(
            f"{name}: source holds {array.size} values, declared size is {expected}"
        )


def check_index(index: Any, bound: int, axis: str, operation: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        axis: Axis label for error messages ('vector', 'row', 'column')
        operation: Operation name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is negative or >= bound
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{operation}: {axis} index must be an integer, got {type(index).__name__}"
        )
    if index < 0:
        raise IndexOutOfRangeError(
            f"{operation}: invalid {axis} index {index}",
            index=int(index), bound=bound, axis=axis,
        )
    if index >= bound:
        raise IndexOutOfRangeError(
            f"{operation}: {axis} index {index} out of bounds, "
            f"range of {axis} indices: 0-{bound - 1}",
            index=int(index), bound=bound, axis=axis,
        )
    return int(index)


def check_operand_sizes(n1: int, n2: int, operation: str) -> None:
    """
    Verify two vector operands are sized and of equal length.

    Args:
        n1: Length of the left operand
        n2: Length of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If either operand is empty or the lengths differ
    """
    if n1 == 0 or n2 == 0:
        raise DimensionError(
            f"{operation}: zero element vector not allowed in operations, "
            f"use set_vector() or construct with a size"
        )
    if n1 != n2:
        raise DimensionError(
            f"{operation}: vector sizes are not equal ({n1} != {n2})"
        )


def check_equal_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        ConformabilityError: If the shapes differ
    """
    if left != right:
        raise ConformabilityError(
            f"{operation}: matrix dimensions differ, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_conformable(
    left: tuple[int, int],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify left.cols == right.rows for a product.

    Raises:
        ConformabilityError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ConformabilityError(
            f"{operation}: inner dimensions do not match, "
            f"left has {left[1]} columns, right has {right[0]} rows",
            operation=operation, left_shape=left, right_shape=tuple(right),
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: matrix must be square, got {shape[0]}x{shape[1]}",
            shape=shape,
        )


def check_scalar(value: Any, operation: str) -> float:
    """
    Verify a scalar operand is a real number.

    Returns:
        The value as float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{operation}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)
