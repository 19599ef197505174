"""
Unit tests for rational matrices.

Tests construction, element access, multiplication, determinants and
exact Gauss-Jordan inversion.
"""

import pytest

from splinegen.numerics.matrix import RationalMatrix
from splinegen.numerics.rational import Rational
from splinegen.splines.catalog import ALL_SPLINE_TYPES
from splinegen.utils.exceptions import IndexOutOfRangeError, NotInvertibleError


class TestMatrixConstruction:
    """Test matrix construction and access."""

    def test_from_rows(self):
        m = RationalMatrix.from_rows([1, 2], [3, 4])
        assert m.size == 2
        assert m[1, 0] == 3
        assert isinstance(m[0, 1], Rational)

    def test_identity(self):
        m = RationalMatrix.identity(3)
        assert m.rows == ((1, 0, 0), (0, 1, 0), (0, 0, 1))

    def test_non_square_rejected(self):
        with pytest.raises(ValueError):
            RationalMatrix([[1, 2, 3], [4, 5, 6]])

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            RationalMatrix([])

    def test_row_and_column(self):
        m = RationalMatrix.from_rows([1, 2], [3, 4])
        assert m.row(1) == (3, 4)
        assert m.column(1) == (2, 4)

    def test_index_out_of_range(self):
        m = RationalMatrix.identity(2)
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            m[2, 0]
        assert "Matrix row index has to be from 0 to 1, got: 2" in str(exc_info.value)
        with pytest.raises(IndexOutOfRangeError):
            m[0, -1]
        with pytest.raises(IndexError):
            m.column(5)

    def test_equality_and_hash(self):
        a = RationalMatrix.from_rows([Rational(1, 2), 0], [0, 1])
        b = RationalMatrix.from_rows([Rational(2, 4), 0], [0, 1])
        assert a == b
        assert hash(a) == hash(b)
        assert a != RationalMatrix.identity(2)

    def test_repr(self):
        m = RationalMatrix.from_rows([1, Rational(1, 2)], [0, 1])
        assert repr(m) == "RationalMatrix([[1, 1/2], [0, 1]])"


class TestMatrixArithmetic:
    """Test products and scaling."""

    def test_matmul(self):
        a = RationalMatrix.from_rows([1, 2], [3, 4])
        b = RationalMatrix.from_rows([0, 1], [1, 0])
        assert a @ b == RationalMatrix.from_rows([2, 1], [4, 3])

    def test_matmul_size_mismatch(self):
        with pytest.raises(ValueError):
            RationalMatrix.identity(2) @ RationalMatrix.identity(3)

    def test_scalar_multiplication(self):
        m = Rational(1, 2) * RationalMatrix.from_rows([2, 4], [6, 8])
        assert m == RationalMatrix.from_rows([1, 2], [3, 4])
        assert RationalMatrix.identity(2) * 3 == RationalMatrix.from_rows([3, 0], [0, 3])

    def test_apply(self):
        m = RationalMatrix.from_rows([1, 1], [1, -1])
        assert m.apply([3, 1]) == [4, 2]

    def test_apply_length_mismatch(self):
        with pytest.raises(ValueError):
            RationalMatrix.identity(2).apply([1, 2, 3])


class TestMatrixInversion:
    """Test determinant and inverse."""

    def test_determinant(self):
        assert RationalMatrix.from_rows([1, 2], [3, 4]).determinant() == -2
        assert RationalMatrix.identity(4).determinant() == 1

    def test_determinant_with_row_interchange(self):
        m = RationalMatrix.from_rows([0, 1], [1, 0])
        assert m.determinant() == -1

    def test_determinant_singular(self):
        assert RationalMatrix.from_rows([1, 2], [2, 4]).determinant() == 0

    def test_inverse(self):
        m = RationalMatrix.from_rows([2, 1], [1, 1])
        assert m.inverse() == RationalMatrix.from_rows([1, -1], [-1, 2])

    def test_inverse_needs_row_interchange(self):
        m = RationalMatrix.from_rows([0, 1, 0], [1, 0, 0], [0, 0, 2])
        inv = m.inverse()
        assert m @ inv == RationalMatrix.identity(3)
        assert inv[2, 2] == Rational(1, 2)

    def test_singular_matrix(self):
        m = RationalMatrix.from_rows([1, 2, 3], [2, 4, 6], [1, 0, 1])
        with pytest.raises(NotInvertibleError) as exc_info:
            m.inverse()
        assert exc_info.value.size == 3

    def test_zero_matrix(self):
        with pytest.raises(NotInvertibleError):
            RationalMatrix([[0, 0], [0, 0]]).inverse()

    def test_inverse_is_exact(self):
        m = RationalMatrix.from_rows([3, 1], [1, 3])
        assert m.inverse() == Rational(1, 8) * RationalMatrix.from_rows([3, -1], [-1, 3])

    @pytest.mark.parametrize("spline", ALL_SPLINE_TYPES, ids=lambda s: s.matrix_name)
    def test_characteristic_matrices_invert(self, spline):
        m = spline.char_matrix
        assert m @ m.inverse() == RationalMatrix.identity(m.size)
        assert m.inverse() @ m == RationalMatrix.identity(m.size)
