"""
Tests for tolerance-aware matrix comparison.
"""

import numpy as np
import pytest

from fixedmatrix import Matrix, equals
from fixedmatrix.core.compute.precision import EPSILON_64
from fixedmatrix.core.exceptions import DimensionError, ValidationError


class TestEquals:

    def test_reflexive(self, m123):
        assert equals(m123, m123)

    def test_symmetric(self, m123):
        other = m123 * (1.0 + 2 * EPSILON_64)
        assert equals(m123, other) == equals(other, m123)

    def test_tolerates_rounding(self):
        a = Matrix[1, 1]([[0.1]]) * 3
        b = Matrix[1, 1]([[0.3]])
        assert a != b
        assert equals(a, b)

    def test_absolute_floor_near_zero(self):
        a = Matrix[1, 2]([1e-17, 0.0])
        b = Matrix[1, 2]([-1e-17, 0.0])
        assert equals(a, b)
        assert not equals(a, b, epsilon=0.0, max_ulps=100)

    def test_ulp_bound(self):
        a = Matrix[1, 1]([[1.0]])
        b = Matrix[1, 1]([[1.0 + 10 * EPSILON_64]])
        assert not equals(a, b, epsilon=0.0, max_ulps=4)
        assert equals(a, b, epsilon=0.0, max_ulps=10)

    def test_clearly_different(self, m123, m321):
        assert not equals(m123, m321, epsilon=1e-6, max_ulps=1000)

    def test_nan_never_equal(self):
        m = Matrix[1, 1]([[np.nan]])
        assert not equals(m, m)

    def test_float32_default_epsilon(self):
        one = np.float32(1.0)
        a = Matrix[1, 1, np.float32]([[one]])
        b = Matrix[1, 1, np.float32]([[np.nextafter(one, np.float32(2.0))]])
        assert equals(a, b)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            equals(Matrix[2, 2](), Matrix[2, 3]())

    def test_dtype_mismatch(self):
        with pytest.raises(DimensionError, match="dtype"):
            equals(Matrix[2, 2](), Matrix[2, 2, np.float32]())

    def test_non_matrix(self, m123):
        with pytest.raises(ValidationError, match="expected two matrices"):
            equals(m123, np.asarray(m123))

    @pytest.mark.parametrize("kwargs", [
        {"epsilon": -1e-9},
        {"epsilon": float("nan")},
        {"max_ulps": -1},
    ])
    def test_negative_tolerance(self, m123, kwargs):
        with pytest.raises(ValidationError, match="non-negative"):
            equals(m123, m123, **kwargs)

    def test_non_integer_ulps(self, m123):
        with pytest.raises(ValidationError, match="integer"):
            equals(m123, m123, max_ulps=2.5)
