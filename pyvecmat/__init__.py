"""
PyVecMat: small fixed-size vectors and matrices for Python.

Lightweight 2D/3D vector-math primitives backed by numpy, for code that
needs a Euclidean vector or a small matrix without a full linear-algebra
library.

Submodules:
    vector: Vector and the geometric free functions
    matrix: Matrix and the square-matrix factories
    core: Exceptions, validation, precision helpers
"""

__version__ = "0.1.0"

from pyvecmat import vector
from pyvecmat import matrix
from pyvecmat.vector import (
    Vector,
    magnitude2,
    magnitude,
    dot_product,
    cross_product,
    angle,
)
from pyvecmat.matrix import (
    Matrix,
    make_identity,
    make_upper_triangular,
    make_lower_triangular,
)
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    ElementTypeError,
    OrientationWarning,
)

__all__ = [
    "__version__",
    "vector",
    "matrix",
    # Vector
    "Vector",
    "magnitude2",
    "magnitude",
    "dot_product",
    "cross_product",
    "angle",
    # Matrix
    "Matrix",
    "make_identity",
    "make_upper_triangular",
    "make_lower_triangular",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "ElementTypeError",
    "OrientationWarning",
]
