"""
Element-wise transforms over fixed-size storage buffers.

Vector and Matrix both keep their elements in a flat numpy array whose
length and dtype never change. The helpers here mutate such a buffer in
place, casting results back into the buffer's own dtype the way an
assignment into a typed array would (float into int truncates toward zero).
"""

from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.validation import is_integral


def is_scalar(value: Any) -> bool:
    """True for real numbers usable as a scaling factor (Python or numpy)."""
    return isinstance(value, Real)


def add_inplace(data: NDArray[Any], other: NDArray[Any]) -> None:
    """data[i] += other[i] for every i, result kept in data's dtype."""
    with np.errstate(over='ignore', invalid='ignore'):
        np.add(data, other, out=data, casting='unsafe')


def subtract_inplace(data: NDArray[Any], other: NDArray[Any]) -> None:
    """data[i] -= other[i] for every i, result kept in data's dtype."""
    with np.errstate(over='ignore', invalid='ignore'):
        np.subtract(data, other, out=data, casting='unsafe')


def scale_inplace(data: NDArray[Any], scalar: float) -> None:
    """Multiply every element by scalar, result kept in data's dtype."""
    with np.errstate(over='ignore', invalid='ignore'):
        np.multiply(data, scalar, out=data, casting='unsafe')


def divide_inplace(data: NDArray[Any], scalar: float) -> None:
    """
    Divide every element by scalar, result kept in data's dtype.

    Floating-point buffers follow IEEE semantics for a zero divisor
    (inf or nan, no warning). Integer buffers trap the way Python
    integers do.

    Raises:
        ZeroDivisionError: If data holds integers and scalar is zero
    """
    if is_integral(data.dtype) and scalar == 0:
        raise ZeroDivisionError("integer vector or matrix division by zero")

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        np.true_divide(data, scalar, out=data, casting='unsafe')


def format_element(value: Any, integral: bool) -> str:
    """
    Format one element for text rendering.

    Integers print in decimal. Floats use the %g conversion (six
    significant digits, trailing zeros dropped), so 1.0 renders as '1'.
    """
    if integral:
        return str(int(value))
    return format(float(value), 'g')


def format_line(values: NDArray[Any], integral: bool) -> str:
    """Render values on one line, each followed by a single space."""
    return "".join(f"{format_element(v, integral)} " for v in values)
