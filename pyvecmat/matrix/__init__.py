"""
Matrix module.

Public API:
    Matrix                   - Fixed-size matrix with a lazy transpose flag
    make_identity()          - Identity matrix
    make_upper_triangular()  - Ones at and above the diagonal
    make_lower_triangular()  - Ones at and below the diagonal
"""

from pyvecmat.matrix.matrix import Matrix
from pyvecmat.matrix.factories import (
    make_identity,
    make_upper_triangular,
    make_lower_triangular,
)

__all__ = [
    "Matrix",
    "make_identity",
    "make_upper_triangular",
    "make_lower_triangular",
]
