"""
Contract checks for PyVecMat containers.

These validators stand in for the compile-time checks a statically typed
fixed-size container would get for free. They follow the "fail fast, fail
loud" principle and raise immediately with clear error messages.

Design principles:
    - No silent type coercion of the element type (values are cast into it)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyvecmat.core.defaults import CROSS_PRODUCT_SIZES
from pyvecmat.core.exceptions import DimensionError, ElementTypeError


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Validate that a dtype is an integer or floating-point type.

    Args:
        dtype: Anything numpy accepts as a dtype (int, float, np.int32, 'f8', ...)
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ElementTypeError: If dtype is not understood or not numeric
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(f"{name}: not a valid dtype: {e}", dtype=dtype) from e

    # bool, complex, object, strings and datetimes are all rejected
    if not (np.issubdtype(result, np.integer) or np.issubdtype(result, np.floating)):
        raise ElementTypeError(
            f"{name}: element type must be integer or floating point, got {result}",
            dtype=result,
        )
    return result


def is_integral(dtype: np.dtype) -> bool:
    """True if the dtype holds integers."""
    return bool(np.issubdtype(dtype, np.integer))


def check_size(value: Any, name: str) -> int:
    """
    Validate a container dimension.

    Args:
        value: Proposed dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        DimensionError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise DimensionError(
            f"{name}: dimension must be an integer, got {type(value).__name__}",
            expected="non-negative integer",
            actual=value,
        )
    if value < 0:
        raise DimensionError(
            f"{name}: dimension must be non-negative, got {value}",
            expected="non-negative integer",
            actual=value,
        )
    return int(value)


def check_values(values: ArrayLike, name: str, flatten: bool = False) -> NDArray[Any]:
    """
    Validate and convert initial values to a 1-D numeric array.

    Args:
        values: Sequence of initial values
        name: Parameter name for error messages
        flatten: If True, nested input is flattened in row-major order

    Returns:
        1-D numpy array with a numeric dtype

    Raises:
        ElementTypeError: If values are not numeric
        DimensionError: If values are nested and flatten is False
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ElementTypeError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ElementTypeError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            dtype=result.dtype,
        )

    # Empty input converts to float64, which is fine
    if result.size and not (
        np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.bool_)
    ):
        raise ElementTypeError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            dtype=result.dtype,
        )
    if np.issubdtype(result.dtype, np.complexfloating):
        raise ElementTypeError(
            f"{name}: complex values are not supported",
            dtype=result.dtype,
        )

    if flatten:
        return result.ravel()

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat sequence of values, got {result.ndim}D "
            f"with shape {result.shape}",
            expected=1,
            actual=result.ndim,
        )
    return result


def check_same_length(left: int, right: int, name: str) -> None:
    """
    Verify two vector operands have the same number of elements.

    Raises:
        DimensionError: If the lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{name}: operands must have the same length, got {left} and {right}",
            expected=left,
            actual=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    name: str,
) -> None:
    """
    Verify two matrix operands have identical declared dimensions.

    Raises:
        DimensionError: If the declared shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{name}: operands must have identical declared dimensions, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            expected=left,
            actual=right,
        )


def check_square_nonempty(rows: int, cols: int, name: str) -> None:
    """
    Verify dimensions describe a non-empty square matrix.

    Raises:
        DimensionError: If rows != cols or the matrix would be empty
    """
    if rows != cols:
        raise DimensionError(
            f"{name}: requires a square matrix, got {rows}x{cols}",
            expected="rows == cols",
            actual=(rows, cols),
        )
    if rows == 0:
        raise DimensionError(
            f"{name}: requires a non-empty matrix, got {rows}x{cols}",
            expected="rows > 0",
            actual=(rows, cols),
        )


def check_cross_operand(size: int, name: str) -> None:
    """
    Verify a vector can take part in a cross product.

    Raises:
        DimensionError: If the vector length is not 2 or 3
    """
    if size not in CROSS_PRODUCT_SIZES:
        raise DimensionError(
            f"{name}: cross product requires a 2D or 3D vector, got length {size}",
            expected=sorted(CROSS_PRODUCT_SIZES),
            actual=size,
        )
