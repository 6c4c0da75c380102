"""
Linear system test fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def ill_conditioned_system():
    """Nearly singular 2x2 system; the second pivot is about 1e-12."""
    A = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
    b = np.array([2.0, 2.0 + 1e-12])
    return A, b


@pytest.fixture
def multi_rhs_system(rng):
    """Diagonally dominant 5x5 coefficients with three right-hand sides."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    B = rng.standard_normal((n, 3))
    return A, B
