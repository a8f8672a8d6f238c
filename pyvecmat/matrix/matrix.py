"""
Matrix: fixed-size 2D grid with a lazy transpose flag.

Elements live in a flat numpy buffer in row-major order relative to the
untransposed orientation. Transposing in place only toggles a flag that
swaps the logical row/column addressing; the buffer never moves.

Operations fall into two groups:
    - physical order: +=, -=, *=, /= and iteration walk the buffer as
      stored, ignoring the flag
    - logical order: indexing, equality, shaping (to_diagonal and the
      triangular modifiers), copy_transposed and rendering honor the flag

Adding matrices whose flags differ therefore combines logically different
positions. This is kept as-is and reported with an OrientationWarning.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyvecmat.core.defaults import DEFAULT_DTYPE, DEFAULT_MATRIX_ROWS
from pyvecmat.core.elementwise import (
    add_inplace,
    divide_inplace,
    format_line,
    is_scalar,
    scale_inplace,
    subtract_inplace,
)
from pyvecmat.core.exceptions import OrientationWarning
from pyvecmat.core.protocols import TextSink
from pyvecmat.core.validation import (
    check_dtype,
    check_same_shape,
    check_size,
    check_values,
    is_integral,
)


class Matrix:
    """
    A container that represents a matrix in linear algebra.

    The element type and the declared dimensions are fixed at construction.
    By default the matrix is 3x3 float64; the column count defaults to the
    row count:

        Matrix()                                  # 3x3, float64
        Matrix(dtype=int)                         # 3x3, int64
        Matrix(rows=2)                            # 2x2, float64
        Matrix([1, 3, 5, 2, 4, 6], rows=2, cols=3)

    Initial values are taken in row-major order; missing trailing values
    are zero and extra values are ignored.
    """

    __slots__ = ('_data', '_rows', '_cols', '_transposed')

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        values: ArrayLike = (),
        rows: int = DEFAULT_MATRIX_ROWS,
        cols: int | None = None,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> None:
        """
        Args:
            values: Initial values in row-major order. Nested sequences
                are flattened row by row.
            rows: Declared row count (R >= 0)
            cols: Declared column count (C >= 0); defaults to rows
            dtype: Integer or floating-point element type

        Raises:
            DimensionError: If rows or cols is not a non-negative integer
            ElementTypeError: If dtype or values are not numeric
        """
        dtype = check_dtype(dtype, "dtype")
        rows = check_size(rows, "rows")
        cols = rows if cols is None else check_size(cols, "cols")
        initial = check_values(values, "values", flatten=True)

        self._data = np.zeros(rows * cols, dtype=dtype)
        count = min(rows * cols, initial.shape[0])
        self._data[:count] = initial[:count]
        self._rows = rows
        self._cols = cols
        self._transposed = False

    @classmethod
    def _from_array(
        cls,
        data: NDArray[Any],
        rows: int,
        cols: int,
        transposed: bool = False,
    ) -> Matrix:
        """Wrap an already validated row-major buffer without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._rows = rows
        obj._cols = cols
        obj._transposed = transposed
        return obj

    # -- Dimensions --

    def rows(self) -> int:
        """Logical row count (declared columns when transposed)."""
        return self._cols if self._transposed else self._rows

    def cols(self) -> int:
        """Logical column count (declared rows when transposed)."""
        return self._rows if self._transposed else self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Logical (rows, cols)."""
        return (self.rows(), self.cols())

    @property
    def declared_shape(self) -> tuple[int, int]:
        """(R, C) as constructed, independent of the transpose flag."""
        return (self._rows, self._cols)

    @property
    def transposed(self) -> bool:
        return self._transposed

    @property
    def size(self) -> int:
        """Total number of elements, R*C."""
        return self._data.shape[0]

    @property
    def empty(self) -> bool:
        return self._data.shape[0] == 0

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def square(self) -> bool:
        """True if the declared dimensions are equal; the flag is irrelevant."""
        return self._rows == self._cols

    # -- Element access --

    def _offset(self, row: int, col: int) -> int:
        if self._transposed:
            return col * self._cols + row
        return row * self._cols + col

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = key
        return self._data[self._offset(row, col)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self._data[self._offset(row, col)] = value

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in physical storage order."""
        return iter(self._data)

    def _logical_view(self) -> NDArray[Any]:
        """Writable 2D view of the buffer in logical orientation."""
        grid = self._data.reshape(self._rows, self._cols)
        return grid.T if self._transposed else grid

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the matrix as a 2D array of shape (rows(), cols())."""
        return self._logical_view().copy()

    def copy(self) -> Matrix:
        """Independent copy; the transpose flag is preserved."""
        return Matrix._from_array(self._data.copy(), self._rows, self._cols, self._transposed)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    # -- Transposition --

    def transpose(self) -> Matrix:
        """
        Transpose in place in O(1) by toggling the transpose flag.

        Returns:
            self, for chaining
        """
        self._transposed = not self._transposed
        return self

    def copy_transposed(self) -> Matrix:
        """
        Materialized transpose.

        Returns a new, untransposed matrix declared (cols(), rows()) whose
        element (i, j) is this matrix's logical element (j, i). This
        matrix is left untouched.
        """
        data = self._logical_view().T.flatten()
        return Matrix._from_array(data, self.cols(), self.rows())

    # -- Shaping (logical coordinates) --

    def to_diagonal(self) -> Matrix:
        """Zero every off-diagonal element. Returns self."""
        grid = self._logical_view()
        grid[~np.eye(*grid.shape, dtype=bool)] = 0
        return self

    def to_upper_triangular(self) -> Matrix:
        """Zero every element strictly below the diagonal. Returns self."""
        grid = self._logical_view()
        grid[np.tri(*grid.shape, k=-1, dtype=bool)] = 0
        return self

    def to_lower_triangular(self) -> Matrix:
        """Zero every element strictly above the diagonal. Returns self."""
        grid = self._logical_view()
        grid[~np.tri(*grid.shape, k=0, dtype=bool)] = 0
        return self

    # -- In-place arithmetic (physical order) --

    def _warn_orientation(self, other: Matrix, op: str) -> None:
        if self._transposed != other._transposed:
            warnings.warn(
                f"Matrix {op}: operands have different transpose states; "
                f"elements are combined in physical storage order",
                OrientationWarning,
                stacklevel=3,
            )

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.declared_shape, other.declared_shape, "Matrix +=")
        self._warn_orientation(other, "+=")
        add_inplace(self._data, other._data)
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.declared_shape, other.declared_shape, "Matrix -=")
        self._warn_orientation(other, "-=")
        subtract_inplace(self._data, other._data)
        return self

    def __imul__(self, scalar: float) -> Matrix:
        if not is_scalar(scalar):
            return NotImplemented
        scale_inplace(self._data, scalar)
        return self

    def __itruediv__(self, scalar: float) -> Matrix:
        if not is_scalar(scalar):
            return NotImplemented
        divide_inplace(self._data, scalar)
        return self

    # -- Value-producing arithmetic --

    def _promoted_copy(self, other: Matrix) -> Matrix:
        dtype = np.result_type(self._data.dtype, other._data.dtype)
        return Matrix._from_array(
            self._data.astype(dtype), self._rows, self._cols, self._transposed
        )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.declared_shape, other.declared_shape, "Matrix +")
        self._warn_orientation(other, "+")
        result = self._promoted_copy(other)
        add_inplace(result._data, other._data)
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.declared_shape, other.declared_shape, "Matrix -")
        self._warn_orientation(other, "-")
        result = self._promoted_copy(other)
        subtract_inplace(result._data, other._data)
        return result

    def __mul__(self, scalar: float) -> Matrix:
        if not is_scalar(scalar):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Matrix:
        if not is_scalar(scalar):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    # -- Comparison (logical order) --

    def __eq__(self, other: object) -> bool:
        """
        Compare logical shape and logical elements.

        Declared dimensions and transpose flags may differ: a 3x1 matrix
        transposed in place equals a 1x3 matrix holding the same values.
        Elements are compared exactly.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._logical_view(), other._logical_view()))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    # -- Rendering --

    def render(self, sink: TextSink) -> TextSink:
        """
        Write one line per logical row to sink.

        Elements are followed by a single space; each line ends with a
        newline.

        Returns:
            sink, so renders can be chained
        """
        integral = is_integral(self.dtype)
        for row in self._logical_view():
            sink.write(format_line(row, integral) + "\n")
        return sink

    def __str__(self) -> str:
        integral = is_integral(self.dtype)
        return "".join(format_line(row, integral) + "\n" for row in self._logical_view())

    def __repr__(self) -> str:
        return (
            f"Matrix({self._data.tolist()!r}, rows={self._rows}, cols={self._cols}, "
            f"dtype={self.dtype.name}, transposed={self._transposed})"
        )
