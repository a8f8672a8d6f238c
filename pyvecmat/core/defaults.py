"""
Default configuration constants for PyVecMat.

This module is the SINGLE SOURCE OF TRUTH for container defaults and
comparison tolerances. Import from here, never hard-code the values.

Usage:
    from pyvecmat.core.defaults import DEFAULT_DTYPE, DEFAULT_ULPS

    v = Vector(size=DEFAULT_VECTOR_SIZE, dtype=DEFAULT_DTYPE)
"""

import numpy as np

# Element type used when none is given (a 3D double vector / 3x3 double matrix)
DEFAULT_DTYPE = np.float64

# Number of components of a Vector constructed without an explicit size
DEFAULT_VECTOR_SIZE = 3

# Row count of a Matrix constructed without explicit dimensions;
# the column count defaults to the row count
DEFAULT_MATRIX_ROWS = 3

# Tolerance, in units in the last place, for floating-point element
# comparison and for the zero-magnitude check in normalize()
DEFAULT_ULPS = 4

# Vector lengths accepted by cross_product
CROSS_PRODUCT_SIZES = frozenset({2, 3})

__all__ = [
    'DEFAULT_DTYPE',
    'DEFAULT_VECTOR_SIZE',
    'DEFAULT_MATRIX_ROWS',
    'DEFAULT_ULPS',
    'CROSS_PRODUCT_SIZES',
]
