"""
Geometric operations on vectors.

Free functions layered on top of Vector: squared magnitude, magnitude,
dot product, cross product and the angle between two vectors. Operands
may have different element types; cross_product and angle also accept
operands of different lengths.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.defaults import DEFAULT_ULPS
from pyvecmat.core.precision import is_approximately_zero
from pyvecmat.core.validation import check_cross_operand, check_same_length, is_integral
from pyvecmat.vector.vector import Vector


def _padded(v: Vector, size: int, dtype: np.dtype | type) -> NDArray[Any]:
    """Components of v in dtype, zero-padded to size."""
    result = np.zeros(size, dtype=dtype)
    result[:v.size] = v.to_numpy()
    return result


def magnitude2(v: Vector) -> np.integer[Any] | np.floating[Any]:
    """
    Squared magnitude: the sum of the squared components.

    Avoids the square root when only relative lengths matter. The sum is
    accumulated in int64 for integer vectors and float64 otherwise, and
    returned in that widened type. Overflow past int64 is not guarded.

    Args:
        v: Input vector

    Returns:
        Sum of squares as np.int64 or np.float64
    """
    accumulator = np.int64 if is_integral(v.dtype) else np.float64
    data = v.to_numpy().astype(accumulator)
    return np.sum(data * data, dtype=accumulator)


def magnitude(v: Vector) -> float:
    """Euclidean length of v, always computed in floating point."""
    return float(np.sqrt(np.float64(magnitude2(v))))


def dot_product(lhs: Vector, rhs: Vector) -> float:
    """
    Dot product of two vectors of the same length.

    The element types may differ; the sum of pairwise products is
    computed in float64.

    Raises:
        DimensionError: If the lengths differ
    """
    check_same_length(lhs.size, rhs.size, "dot_product")
    return float(np.dot(
        lhs.to_numpy().astype(np.float64),
        rhs.to_numpy().astype(np.float64),
    ))


def cross_product(lhs: Vector, rhs: Vector) -> Vector:
    """
    Cross product of two 2D or 3D vectors.

    A 2D operand is treated as lying in the xy-plane (z = 0). The result
    is always a 3D vector with the element type of lhs:

        (y1*z2 - z1*y2, z1*x2 - x1*z2, x1*y2 - y1*x2)

    Args:
        lhs: Left operand, length 2 or 3
        rhs: Right operand, length 2 or 3; element type may differ

    Returns:
        New 3-component Vector

    Raises:
        DimensionError: If either operand's length is not 2 or 3
    """
    check_cross_operand(lhs.size, "cross_product lhs")
    check_cross_operand(rhs.size, "cross_product rhs")

    dtype = np.result_type(lhs.dtype, rhs.dtype)
    product = np.cross(_padded(lhs, 3, dtype), _padded(rhs, 3, dtype))
    return Vector(product, size=3, dtype=lhs.dtype)


def angle(lhs: Vector, rhs: Vector) -> float:
    """
    Angle between two vectors, in radians.

    If either vector has (approximately) zero magnitude the angle is
    undefined and pi/2 is returned. Vectors of different lengths are
    compared with the shorter one zero-padded. The cosine is clipped to
    [-1, 1] so rounding never produces nan for parallel vectors.
    """
    lhs_length = magnitude(lhs)
    rhs_length = magnitude(rhs)
    if (is_approximately_zero(lhs_length, DEFAULT_ULPS)
            or is_approximately_zero(rhs_length, DEFAULT_ULPS)):
        return float(np.pi / 2)

    size = max(lhs.size, rhs.size)
    dot = np.dot(_padded(lhs, size, np.float64), _padded(rhs, size, np.float64))
    cosine = np.clip(dot / (lhs_length * rhs_length), -1.0, 1.0)
    return float(np.arccos(cosine))
