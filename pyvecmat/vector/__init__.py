"""
Euclidean vector module.

Public API:
    Vector              - Fixed-length vector with element-wise arithmetic
    magnitude2(v)       - Squared length
    magnitude(v)        - Length
    dot_product(a, b)   - Dot product (same length)
    cross_product(a, b) - Cross product (2D or 3D operands, 3D result)
    angle(a, b)         - Angle in radians
"""

from pyvecmat.vector.vector import Vector
from pyvecmat.vector.operations import (
    magnitude2,
    magnitude,
    dot_product,
    cross_product,
    angle,
)

__all__ = [
    "Vector",
    "magnitude2",
    "magnitude",
    "dot_product",
    "cross_product",
    "angle",
]
