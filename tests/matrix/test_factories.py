"""
Tests for make_identity, make_upper_triangular and make_lower_triangular.
"""

import numpy as np
import pytest

from pyvecmat import DimensionError, ElementTypeError
from pyvecmat.matrix import make_identity, make_lower_triangular, make_upper_triangular


class TestIdentity:

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_ones_on_diagonal(self, n):
        m = make_identity(n)
        assert m.shape == (n, n)
        for i in range(n):
            for j in range(n):
                assert m[i, j] == (1 if i == j else 0)

    def test_default_is_3x3_float(self):
        m = make_identity()
        assert m.shape == (3, 3)
        assert m.dtype == np.float64
        np.testing.assert_array_equal(m.to_numpy(), np.eye(3))

    def test_int_identity(self):
        m = make_identity(2, dtype=int)
        assert np.issubdtype(m.dtype, np.integer)
        assert str(m) == "1 0 \n0 1 \n"

    def test_explicit_square_cols(self):
        assert make_identity(4, 4).shape == (4, 4)

    def test_not_transposed(self):
        assert not make_identity(3).transposed


class TestTriangularOnes:

    def test_upper(self):
        np.testing.assert_array_equal(
            make_upper_triangular(3).to_numpy(),
            [[1, 1, 1], [0, 1, 1], [0, 0, 1]],
        )

    def test_lower(self):
        np.testing.assert_array_equal(
            make_lower_triangular(3).to_numpy(),
            [[1, 0, 0], [1, 1, 0], [1, 1, 1]],
        )

    def test_upper_transposed_is_lower(self):
        assert make_upper_triangular(4).transpose() == make_lower_triangular(4)

    def test_single_element(self):
        assert make_upper_triangular(1) == make_identity(1)
        assert make_lower_triangular(1) == make_identity(1)


class TestContract:
    """All factories require a non-empty square shape."""

    factories = [make_identity, make_upper_triangular, make_lower_triangular]

    @pytest.mark.parametrize("factory", factories)
    def test_non_square(self, factory):
        with pytest.raises(DimensionError, match="square"):
            factory(2, 3)

    @pytest.mark.parametrize("factory", factories)
    def test_empty(self, factory):
        with pytest.raises(DimensionError, match="non-empty"):
            factory(0)

    @pytest.mark.parametrize("factory", factories)
    def test_negative(self, factory):
        with pytest.raises(DimensionError):
            factory(-2)

    @pytest.mark.parametrize("factory", factories)
    def test_bad_dtype(self, factory):
        with pytest.raises(ElementTypeError):
            factory(2, dtype=bool)
