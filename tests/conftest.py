"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from fixedmatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m123():
    """3x3 matrix holding 1..9 row-major."""
    return Matrix[3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def m321():
    """3x3 matrix holding 9..1 row-major."""
    return Matrix[3, 3]([[9, 8, 7], [6, 5, 4], [3, 2, 1]])


@pytest.fixture
def augmented_system():
    """Augmented 3x4 system whose solution is (1, 2, 3)."""
    return Matrix[3, 4]([[0, 1, 1, 5], [3, 2, 2, 13], [1, -1, 3, 8]])


@pytest.fixture
def exact_invertible():
    """Invertible 3x3 whose inverse and products involve no rounding."""
    return Matrix[3, 3]([[1, 2, 0], [1, 0, 1], [2, 2, 2]])


@pytest.fixture
def inexact_invertible():
    """Invertible 3x3 whose inverse has non-representable entries."""
    return Matrix[3, 3]([[1, 2, 3], [0, 1, 5], [5, 6, 0]])


@pytest.fixture
def integer_matrices(rng):
    """Factory for integer-valued 3x3 matrices (float sums stay exact)."""
    def make(count):
        return [Matrix[3, 3](rng.integers(-50, 50, size=(3, 3))) for _ in range(count)]
    return make


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 4x4 coefficients and a right-hand side."""
    n = 4
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    b = rng.standard_normal(n)
    return A, b
