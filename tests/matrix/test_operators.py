"""
Tests for Matrix operators, transpose and identity.

Validates:
    - == / != are exact and reject mismatched dimensions
    - Non-assigning operators leave operands untouched; compound
      operators mutate in place and return the same object
    - Matrix product shapes and values
    - Algebraic properties: commutativity/associativity of +, transpose
      involution and distributivity, identity as multiplicative unit
"""

import numpy as np
import pytest

from fixedmatrix import Matrix, equals
from fixedmatrix.core.compute.precision import EPSILON_64
from fixedmatrix.core.exceptions import DimensionError


def _doubled():
    return Matrix[3, 3]([[1 * 2, 2 * 2, 3 * 2], [4 * 2, 5 * 2, 6 * 2], [7 * 2, 8 * 2, 9 * 2]])


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal(self, m123):
        assert m123 == Matrix[3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    def test_not_equal(self, m123, m321):
        assert m123 != m321
        assert not (m123 == m321)

    def test_single_entry_differs(self, m123):
        other = m123.copy()
        other.put(2, 2, 9.000000000000002)
        assert m123 != other

    def test_different_shapes_rejected(self):
        with pytest.raises(DimensionError):
            Matrix[3, 3]() == Matrix[3, 4]()

    def test_different_dtype_rejected(self):
        with pytest.raises(DimensionError, match="dtype"):
            Matrix[2, 2]() == Matrix[2, 2, np.float32]()

    def test_non_matrix_is_not_equal(self, m123):
        assert m123 != 5
        assert not (m123 == "Matrix<3,3>")

    def test_unhashable(self, m123):
        with pytest.raises(TypeError):
            hash(m123)

    def test_rounding_breaks_exact_equality(self):
        assert Matrix[1, 1]([[0.1]]) * 3 != Matrix[1, 1]([[0.3]])

    def test_inverse_product_not_exactly_identity(self, inexact_invertible):
        m1 = inexact_invertible
        assert m1.inverse() * m1 != m1.identity()
        assert equals(m1.inverse() * m1, m1.identity(), EPSILON_64, 100)


# ═══════════════════════════════════════════════════════════════════════
# Scalar operators
# ═══════════════════════════════════════════════════════════════════════


class TestScalarOperators:

    def test_multiplication(self, m123):
        m0 = m123.copy()
        m2 = _doubled()
        assert m2 == m123 * 2
        assert m0 == m123
        result = m123.__imul__(2)
        assert result is m123
        assert m2 == m123

    def test_compound_multiplication(self, m123):
        alias = m123
        m123 *= 2
        assert m123 is alias
        assert m123 == _doubled()

    def test_left_multiplication(self, m123):
        assert 2 * m123 == m123 * 2

    def test_division(self, m123):
        m1 = _doubled()
        m0 = m1.copy()
        assert m123 == m1 / 2
        assert m0 == m1
        m1 /= 2
        assert m123 == m1

    def test_numpy_scalar(self, m123):
        assert m123 * np.float64(2.0) == _doubled()

    def test_numpy_scalar_on_the_left(self, m123):
        for k in (np.float64(2.0), np.int64(2)):
            result = k * m123
            assert type(result) is Matrix[3, 3]
            assert result == _doubled()

    def test_numpy_array_operand_rejected(self, m123):
        with pytest.raises(TypeError):
            np.ones((3, 3)) * m123

    def test_element_wise_definition(self, rng):
        m = Matrix[3, 3](rng.standard_normal((3, 3)))
        k = 1.7
        np.testing.assert_array_equal((m * k).array, m.array * k)

    def test_negation(self, m123):
        assert -m123 == m123 * -1

    def test_unsupported_operand(self, m123):
        with pytest.raises(TypeError):
            m123 * "2"
        with pytest.raises(TypeError):
            m123 / [2]


# ═══════════════════════════════════════════════════════════════════════
# Matrix addition and subtraction
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_addition(self, m123):
        m1 = m123.copy()
        m2 = _doubled()
        assert m2 == m123 + m1
        assert m123 == m1
        m1 += m123
        assert m2 == m1

    def test_compound_addition_same_object(self, m123, m321):
        alias = m123
        m123 += m321
        assert m123 is alias
        assert m123 == Matrix[3, 3](10)

    def test_subtraction(self, m123):
        m0 = _doubled()
        assert m123 == m0 - m123
        m0 -= m123
        assert m123 == m0

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix[2, 2]() + Matrix[2, 3]()
        with pytest.raises(DimensionError):
            Matrix[2, 2]() - Matrix[3, 2]()

    def test_compound_shape_mismatch(self):
        m = Matrix[2, 2]()
        with pytest.raises(DimensionError):
            m += Matrix[1, 2]()

    def test_scalar_addition_unsupported(self, m123):
        with pytest.raises(TypeError):
            m123 + 1

    def test_commutative(self, integer_matrices):
        a, b = integer_matrices(2)
        assert a + b == b + a

    def test_associative(self, integer_matrices):
        a, b, c = integer_matrices(3)
        assert (a + b) + c == a + (b + c)


# ═══════════════════════════════════════════════════════════════════════
# Matrix product
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixProduct:

    def test_square(self, m123):
        expected = Matrix[3, 3]([[30, 36, 42], [66, 81, 96], [102, 126, 150]])
        assert expected == m123 * m123

    def test_matmul_operator(self, m123):
        assert m123 @ m123 == m123 * m123

    def test_column_vector(self, m123):
        v = Matrix[3, 1]([[1], [2], [3]])
        assert Matrix[3, 1]([[14], [32], [50]]) == m123 * v

    def test_row_times_column(self):
        row = Matrix[1, 3]()
        row.put(0, 0, 1)
        row.put(0, 1, 2)
        row.put(0, 2, 3)
        col = Matrix[3, 1]()
        col.put(0, 0, 1)
        col.put(1, 0, 2)
        col.put(2, 0, 3)
        expected = Matrix[1, 1]()
        expected.put(0, 0, 14)
        assert expected == row * col

    def test_result_type(self):
        product = Matrix[2, 3]() * Matrix[3, 4]()
        assert type(product) is Matrix[2, 4]

    def test_operands_untouched(self, m123):
        before = m123.copy()
        m123 * m123
        assert m123 == before

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="cannot multiply 2x3 by 2x3"):
            Matrix[2, 3]() * Matrix[2, 3]()

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((2, 3))
        b = rng.standard_normal((3, 4))
        np.testing.assert_allclose((Matrix[2, 3](a) * Matrix[3, 4](b)).array, a @ b)


# ═══════════════════════════════════════════════════════════════════════
# Transpose and identity
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_properties(self, m123, m321):
        assert m123 == m123.transpose().transpose()
        assert (m123 + m321).transpose() == m123.transpose() + m321.transpose()
        assert (m123 * 4.0).transpose() == m123.transpose() * 4.0

    def test_non_square_shape(self):
        m = Matrix[2, 3]([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert type(t) is Matrix[3, 2]
        assert t == Matrix[3, 2]([[1, 4], [2, 5], [3, 6]])

    def test_entries_swapped(self, rng):
        m = Matrix[3, 4](rng.standard_normal((3, 4)))
        t = m.transpose()
        for i in range(3):
            for j in range(4):
                assert t.at(j, i) == m.at(i, j)

    def test_involution_random(self, integer_matrices):
        for m in integer_matrices(5):
            assert m.transpose().transpose() == m


class TestIdentity:

    def test_identity(self, m123):
        m0 = Matrix[3, 3]([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert m0 == m123.identity()
        assert m123 == m123 * m123.identity()
        assert m123 == m123.identity() * m123

    def test_identity_on_class(self):
        assert Matrix[2, 2].identity() == Matrix[2, 2]([[1, 0], [0, 1]])

    def test_non_square_identity(self):
        assert Matrix[2, 3].identity() == Matrix[2, 3]([[1, 0, 0], [0, 1, 0]])

    def test_multiplicative_unit_random(self, integer_matrices):
        for m in integer_matrices(5):
            assert m * m.identity() == m
            assert m.identity() * m == m
