"""
Tests for contract checks.

Validates every function in core/validation.py:
    - check_dtype: numeric dtype acceptance, everything else rejected
    - check_size: non-negative integer dimensions
    - check_values: conversion, flattening, non-numeric rejection
    - check_same_length / check_same_shape: operand agreement
    - check_square_nonempty: factory preconditions
    - check_cross_operand: cross product lengths
"""

import numpy as np
import pytest

from pyvecmat.core.exceptions import DimensionError, ElementTypeError
from pyvecmat.core.validation import (
    check_cross_operand,
    check_dtype,
    check_same_length,
    check_same_shape,
    check_size,
    check_square_nonempty,
    check_values,
    is_integral,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dtype
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDtype:
    """check_dtype accepts integer and floating types only."""

    @pytest.mark.parametrize("dtype", [int, float, np.int8, np.int32, np.uint16,
                                       np.float32, np.float64, "f8", "i4"])
    def test_numeric_accepted(self, dtype):
        assert check_dtype(dtype, "dtype") == np.dtype(dtype)

    @pytest.mark.parametrize("dtype", [bool, np.bool_, complex, np.complex128,
                                       str, object, "datetime64[s]"])
    def test_non_numeric_rejected(self, dtype):
        with pytest.raises(ElementTypeError, match="integer or floating point"):
            check_dtype(dtype, "dtype")

    def test_unknown_dtype_rejected(self):
        with pytest.raises(ElementTypeError, match="not a valid dtype"):
            check_dtype("nonsense", "dtype")

    def test_error_carries_dtype(self):
        with pytest.raises(ElementTypeError) as exc_info:
            check_dtype(bool, "my_dtype")
        assert exc_info.value.dtype == np.dtype(bool)
        assert "my_dtype" in str(exc_info.value)


class TestIsIntegral:

    def test_integer_types(self):
        assert is_integral(np.dtype(np.int64))
        assert is_integral(np.dtype(np.uint8))

    def test_float_types(self):
        assert not is_integral(np.dtype(np.float64))
        assert not is_integral(np.dtype(np.float32))


# ═══════════════════════════════════════════════════════════════════════
# check_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:
    """check_size accepts non-negative integers."""

    def test_positive(self):
        assert check_size(3, "size") == 3

    def test_zero(self):
        assert check_size(0, "size") == 0

    def test_numpy_integer(self):
        result = check_size(np.int64(4), "size")
        assert result == 4
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(DimensionError, match="non-negative") as exc_info:
            check_size(-1, "size")
        assert exc_info.value.actual == -1

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(DimensionError, match="must be an integer"):
            check_size(value, "size")


# ═══════════════════════════════════════════════════════════════════════
# check_values
# ═══════════════════════════════════════════════════════════════════════


class TestCheckValues:
    """check_values converts to a flat numeric array."""

    def test_list(self):
        result = check_values([1, 2, 3], "values")
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, [1, 2, 3])

    def test_tuple_of_floats(self):
        result = check_values((1.5, 2.5), "values")
        assert result.dtype == np.float64

    def test_empty(self):
        result = check_values((), "values")
        assert result.shape == (0,)

    def test_bools_accepted(self):
        result = check_values([True, False], "values")
        assert result.shape == (2,)

    def test_nested_rejected_by_default(self):
        with pytest.raises(DimensionError, match="flat sequence"):
            check_values([[1, 2], [3, 4]], "values")

    def test_nested_flattened_row_major(self):
        result = check_values([[1, 2], [3, 4]], "values", flatten=True)
        np.testing.assert_array_equal(result, [1, 2, 3, 4])

    def test_strings_rejected(self):
        with pytest.raises(ElementTypeError, match="non-numeric dtype"):
            check_values(["a", "b"], "values")

    def test_mixed_types_rejected(self):
        with pytest.raises(ElementTypeError, match="object dtype"):
            check_values([None, 1, 2.0], "values")

    def test_complex_rejected(self):
        with pytest.raises(ElementTypeError, match="complex"):
            check_values([1 + 2j], "values")

    def test_error_message_includes_name(self):
        with pytest.raises(ElementTypeError, match="my_values"):
            check_values(["x"], "my_values")


# ═══════════════════════════════════════════════════════════════════════
# Operand agreement
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameLength:

    def test_equal_passes(self):
        check_same_length(3, 3, "op")  # no exception

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="got 3 and 2") as exc_info:
            check_same_length(3, 2, "Vector +")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2


class TestCheckSameShape:

    def test_equal_passes(self):
        check_same_shape((2, 3), (2, 3), "op")  # no exception

    def test_swapped_dimensions_rejected(self):
        with pytest.raises(DimensionError, match="2x3 and 3x2"):
            check_same_shape((2, 3), (3, 2), "Matrix +")


class TestCheckSquareNonempty:

    def test_square_passes(self):
        check_square_nonempty(4, 4, "factory")  # no exception

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            check_square_nonempty(2, 3, "make_identity")

    def test_empty(self):
        with pytest.raises(DimensionError, match="non-empty"):
            check_square_nonempty(0, 0, "make_identity")


class TestCheckCrossOperand:

    @pytest.mark.parametrize("size", [2, 3])
    def test_valid(self, size):
        check_cross_operand(size, "lhs")  # no exception

    @pytest.mark.parametrize("size", [0, 1, 4, 7])
    def test_invalid(self, size):
        with pytest.raises(DimensionError, match="2D or 3D") as exc_info:
            check_cross_operand(size, "lhs")
        assert exc_info.value.actual == size
