"""
Factory functions for common square matrices.

All factories require a non-empty square shape and raise DimensionError
otherwise.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import DTypeLike

from pyvecmat.core.defaults import DEFAULT_DTYPE, DEFAULT_MATRIX_ROWS
from pyvecmat.core.validation import check_dtype, check_size, check_square_nonempty
from pyvecmat.matrix.matrix import Matrix


def _square_dims(rows: int, cols: int | None, name: str) -> int:
    rows = check_size(rows, "rows")
    cols = rows if cols is None else check_size(cols, "cols")
    check_square_nonempty(rows, cols, name)
    return rows


def make_identity(
    rows: int = DEFAULT_MATRIX_ROWS,
    cols: int | None = None,
    dtype: DTypeLike = DEFAULT_DTYPE,
) -> Matrix:
    """
    Identity matrix: 1 on the diagonal, 0 elsewhere.

    Args:
        rows: Row count
        cols: Column count; defaults to rows and must equal it
        dtype: Element type

    Raises:
        DimensionError: If the shape is not square or is empty
    """
    n = _square_dims(rows, cols, "make_identity")
    dtype = check_dtype(dtype, "dtype")
    return Matrix(np.eye(n, dtype=dtype), rows=n, cols=n, dtype=dtype)


def make_upper_triangular(
    rows: int = DEFAULT_MATRIX_ROWS,
    cols: int | None = None,
    dtype: DTypeLike = DEFAULT_DTYPE,
) -> Matrix:
    """Square matrix with 1 at and above the diagonal, 0 below."""
    n = _square_dims(rows, cols, "make_upper_triangular")
    dtype = check_dtype(dtype, "dtype")
    return Matrix(np.triu(np.ones((n, n), dtype=dtype)), rows=n, cols=n, dtype=dtype)


def make_lower_triangular(
    rows: int = DEFAULT_MATRIX_ROWS,
    cols: int | None = None,
    dtype: DTypeLike = DEFAULT_DTYPE,
) -> Matrix:
    """Square matrix with 1 at and below the diagonal, 0 above."""
    n = _square_dims(rows, cols, "make_lower_triangular")
    dtype = check_dtype(dtype, "dtype")
    return Matrix(np.tril(np.ones((n, n), dtype=dtype)), rows=n, cols=n, dtype=dtype)
