"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvecmat import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Twenty random float64 3D vectors."""
    return [Vector(rng.standard_normal(3)) for _ in range(20)]


@pytest.fixture
def random_int_vectors(rng):
    """Twenty random int64 vectors of length 4."""
    return [Vector(rng.integers(-100, 100, size=4), size=4, dtype=np.int64) for _ in range(20)]


@pytest.fixture
def rect_matrix():
    """2x3 float matrix [[1, 3, 5], [2, 4, 6]]."""
    return Matrix([1, 3, 5, 2, 4, 6], rows=2, cols=3)


@pytest.fixture
def square_matrix():
    """Non-symmetric 3x3 int matrix [[1, 2, 3], [4, 5, 6], [7, 8, 9]]."""
    return Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9], rows=3, dtype=int)
