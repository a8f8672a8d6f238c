"""
Vector: fixed-length Euclidean vector.

A Vector owns a flat numpy buffer whose length and dtype are fixed at
construction. Arithmetic is element-wise; the in-place operators mutate
the buffer and the binary operators are built on them (copy the left
operand, apply in place, return the copy).
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyvecmat.core.defaults import DEFAULT_DTYPE, DEFAULT_ULPS, DEFAULT_VECTOR_SIZE
from pyvecmat.core.elementwise import (
    add_inplace,
    divide_inplace,
    format_line,
    is_scalar,
    scale_inplace,
    subtract_inplace,
)
from pyvecmat.core.precision import (
    approximately_equal,
    floating_type,
    is_approximately_zero,
    machine_epsilon,
    smallest_normal,
)
from pyvecmat.core.protocols import TextSink
from pyvecmat.core.validation import (
    check_dtype,
    check_same_length,
    check_size,
    check_values,
    is_integral,
)


class Vector:
    """
    A container that represents a Euclidean vector.

    Typically used for a 2D or 3D direction or position, but there is no
    limit on the number of components. The element type and length are
    fixed for the lifetime of the object. By default a vector has three
    float64 components:

        Vector()                         # (0, 0, 0), float64
        Vector([1, 2, 3], dtype=int)     # (1, 2, 3), int64
        Vector([1, 2], size=3)           # (1, 2, 0)
        Vector([1, 2, 3, 4], size=2)     # (1, 2)

    Element access is 0-indexed and not bounds-checked beyond what numpy
    does for the underlying buffer.
    """

    __slots__ = ('_data',)

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        values: ArrayLike = (),
        size: int = DEFAULT_VECTOR_SIZE,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> None:
        """
        Args:
            values: Initial values, copied in order. Missing trailing
                values are zero; values beyond size are ignored.
            size: Number of components (N >= 0)
            dtype: Integer or floating-point element type

        Raises:
            DimensionError: If size is not a non-negative integer
            ElementTypeError: If dtype or values are not numeric
        """
        dtype = check_dtype(dtype, "dtype")
        size = check_size(size, "size")
        initial = check_values(values, "values")

        self._data = np.zeros(size, dtype=dtype)
        count = min(size, initial.shape[0])
        self._data[:count] = initial[:count]

    @classmethod
    def from_range(
        cls,
        source: Iterable[Any],
        first: int = 0,
        last: int | None = None,
        size: int = DEFAULT_VECTOR_SIZE,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> Vector:
        """
        Build a vector from the positions [first, last) of an external sequence.

        Copies min(size, last - first) elements in order; remaining
        components stay zero. A non-positive distance leaves the vector
        entirely zero. Any iterable works, including generators; only the
        elements up to the copied range are consumed.

        Args:
            source: Ordered source of values
            first: Position of the first element to copy
            last: Position one past the last element; None means the end
                of source
            size: Number of components
            dtype: Element type

        Raises:
            DimensionError: If first or size is negative
        """
        first = check_size(first, "first")
        size = check_size(size, "size")
        count = size if last is None else min(size, last - first)
        if count <= 0:
            return cls(size=size, dtype=dtype)
        return cls(list(itertools.islice(source, first, first + count)), size=size, dtype=dtype)

    @classmethod
    def _from_array(cls, data: NDArray[Any]) -> Vector:
        """Wrap an already validated buffer without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # -- Container protocol --

    @property
    def size(self) -> int:
        """Number of components."""
        return self._data.shape[0]

    @property
    def empty(self) -> bool:
        """True for a zero-length vector."""
        return self._data.shape[0] == 0

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def copy(self) -> Vector:
        """Independent copy with its own storage."""
        return Vector._from_array(self._data.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the components as a 1-D numpy array."""
        return self._data.copy()

    # -- In-place arithmetic --

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_length(self.size, other.size, "Vector +=")
        add_inplace(self._data, other._data)
        return self

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_length(self.size, other.size, "Vector -=")
        subtract_inplace(self._data, other._data)
        return self

    def __imul__(self, scalar: float) -> Vector:
        if not is_scalar(scalar):
            return NotImplemented
        scale_inplace(self._data, scalar)
        return self

    def __itruediv__(self, scalar: float) -> Vector:
        if not is_scalar(scalar):
            return NotImplemented
        divide_inplace(self._data, scalar)
        return self

    def normalize(self) -> Vector:
        """
        Scale this vector to unit length, in place.

        A vector whose magnitude is approximately zero is left unchanged.
        Integer vectors keep their dtype, so their components truncate.

        Returns:
            self, for chaining
        """
        from pyvecmat.vector.operations import magnitude

        length = magnitude(self)
        ftype = floating_type(self.dtype)
        if is_approximately_zero(
            length, DEFAULT_ULPS, machine_epsilon(ftype), smallest_normal(ftype)
        ):
            return self
        scale_inplace(self._data, 1.0 / length)
        return self

    # -- Value-producing arithmetic --

    def _promoted_copy(self, other: Vector) -> Vector:
        dtype = np.result_type(self._data.dtype, other._data.dtype)
        return Vector._from_array(self._data.astype(dtype))

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_length(self.size, other.size, "Vector +")
        result = self._promoted_copy(other)
        result += other
        return result

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_length(self.size, other.size, "Vector -")
        result = self._promoted_copy(other)
        result -= other
        return result

    def __mul__(self, scalar: float) -> Vector:
        if not is_scalar(scalar):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not is_scalar(scalar):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    # -- Comparison --

    def __eq__(self, other: object) -> bool:
        """
        Compare with a vector of possibly different length and element type.

        Vectors of different lengths are never equal. Two integral vectors
        compare exactly; if either side is floating point, elements are
        compared with a ULP tolerance in the promoted floating type.
        """
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size != other.size:
            return False
        if is_integral(self.dtype) and is_integral(other.dtype):
            return bool(np.array_equal(self._data, other._data))
        ftype = floating_type(self.dtype, other.dtype)
        eps = machine_epsilon(ftype)
        tiny = smallest_normal(ftype)
        return all(
            approximately_equal(a, b, DEFAULT_ULPS, eps, tiny)
            for a, b in zip(self._data, other._data)
        )

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
        Write the components to sink, each followed by a single space.

        Returns:
            sink, so renders can be chained
        """
        sink.write(format_line(self._data, is_integral(self.dtype)))
        return sink

    def __str__(self) -> str:
        return format_line(self._data, is_integral(self.dtype))

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r}, size={self.size}, dtype={self.dtype.name})"
