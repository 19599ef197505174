"""
Unit tests for basis conversion.

Tests the conversion matrices between spline types of equal degree
and the conversion of concrete control points.
"""

import pytest

from splinegen.codegen.expressions import LinearCombination
from splinegen.numerics.matrix import RationalMatrix
from splinegen.numerics.rational import Rational
from splinegen.splines.catalog import (
    ALL_SPLINE_TYPES,
    CUBIC_BEZIER,
    CUBIC_CATMULL_ROM,
    CUBIC_HERMITE,
    CUBIC_UNIFORM_BSPLINE,
    QUADRATIC_BEZIER,
    spline_types_of_degree,
)
from splinegen.splines.conversion import conversion_targets, convert_points, get_conversion_matrix
from splinegen.splines.evaluation import evaluate
from splinegen.utils.exceptions import IncompatibleDegreeError

CUBIC_PAIRS = [
    (source, target)
    for source in spline_types_of_degree(3)
    for target in spline_types_of_degree(3)
    if source is not target
]


def _pair_id(pair):
    return f"{pair[0].matrix_name}->{pair[1].matrix_name}"


class TestConversionMatrix:
    """Test derived conversion matrices."""

    def test_bezier_to_hermite(self):
        c = get_conversion_matrix(CUBIC_BEZIER, CUBIC_HERMITE)
        assert c.rows == (
            (1, 0, 0, 0),
            (-3, 3, 0, 0),
            (0, 0, 0, 1),
            (0, 0, -3, 3),
        )

    def test_hermite_to_bezier(self):
        c = get_conversion_matrix(CUBIC_HERMITE, CUBIC_BEZIER)
        assert c.row(1) == (1, Rational(1, 3), 0, 0)
        assert c.row(2) == (0, 0, 1, Rational(-1, 3))

    def test_catmull_rom_to_bezier(self):
        c = get_conversion_matrix(CUBIC_CATMULL_ROM, CUBIC_BEZIER)
        assert c.row(0) == (0, 1, 0, 0)
        assert c.row(1) == (Rational(-1, 6), 1, Rational(1, 6), 0)
        assert c.row(2) == (0, Rational(1, 6), 1, Rational(-1, 6))
        assert c.row(3) == (0, 0, 1, 0)

    def test_uniform_bspline_to_bezier(self):
        c = get_conversion_matrix(CUBIC_UNIFORM_BSPLINE, CUBIC_BEZIER)
        assert c.row(0) == (Rational(1, 6), Rational(2, 3), Rational(1, 6), 0)
        assert c.row(1) == (0, Rational(2, 3), Rational(1, 3), 0)

    @pytest.mark.parametrize("pair", CUBIC_PAIRS, ids=_pair_id)
    def test_preserves_polynomial(self, pair):
        source, target = pair
        c = get_conversion_matrix(source, target)
        assert target.char_matrix @ c == source.char_matrix

    @pytest.mark.parametrize("pair", CUBIC_PAIRS, ids=_pair_id)
    def test_round_trip_is_identity(self, pair):
        source, target = pair
        there = get_conversion_matrix(source, target)
        back = get_conversion_matrix(target, source)
        assert back @ there == RationalMatrix.identity(4)

    def test_self_conversion_is_identity(self):
        assert get_conversion_matrix(CUBIC_HERMITE, CUBIC_HERMITE) == RationalMatrix.identity(4)

    def test_incompatible_degree(self):
        with pytest.raises(IncompatibleDegreeError) as exc_info:
            get_conversion_matrix(QUADRATIC_BEZIER, CUBIC_BEZIER)
        assert exc_info.value.source_degree == 2
        assert exc_info.value.target_degree == 3


class TestConversionTargets:
    """Test enumeration of conversion targets."""

    def test_cubic_bezier_targets(self):
        targets = [target for target, _ in conversion_targets(CUBIC_BEZIER)]
        assert targets == [CUBIC_HERMITE, CUBIC_UNIFORM_BSPLINE, CUBIC_CATMULL_ROM]

    def test_quadratic_has_no_targets(self):
        assert list(conversion_targets(QUADRATIC_BEZIER)) == []

    def test_matrices_match_direct_derivation(self):
        for target, matrix in conversion_targets(CUBIC_CATMULL_ROM, ALL_SPLINE_TYPES):
            assert matrix == get_conversion_matrix(CUBIC_CATMULL_ROM, target)

    def test_formatted_rows(self):
        sources = ["s.P0", "s.P1", "s.P2", "s.P3"]
        c = get_conversion_matrix(CUBIC_BEZIER, CUBIC_HERMITE)
        lines = [str(LinearCombination.from_row(c.row(o), sources)) for o in range(4)]
        assert lines == ["s.P0", "3*(-s.P0+s.P1)", "s.P3", "3*(-s.P2+s.P3)"]

        hermite = ["s.P0", "s.V0", "s.P1", "s.V1"]
        c = get_conversion_matrix(CUBIC_HERMITE, CUBIC_BEZIER)
        lines = [str(LinearCombination.from_row(c.row(o), hermite)) for o in range(4)]
        assert lines == ["s.P0", "s.P0+(1/3f)*s.V0", "s.P1-(1/3f)*s.V1", "s.P1"]


class TestConvertPoints:
    """Test conversion of concrete control points."""

    def test_bezier_to_hermite_points(self, bezier_points):
        points = convert_points(CUBIC_BEZIER, CUBIC_HERMITE, bezier_points)
        assert points == [(0, 0), (3, 6), (4, 0), (3, -6)]

    def test_scalar_points(self):
        assert convert_points(CUBIC_HERMITE, CUBIC_BEZIER, [0, 3, 1, 3]) == [0, 1, 0, 1]

    @pytest.mark.parametrize("pair", CUBIC_PAIRS, ids=_pair_id)
    def test_converted_curve_is_identical(self, pair):
        source, target = pair
        points = [(0, 1), (2, 5), (-3, 4), (7, -2)]
        converted = convert_points(source, target, points)
        for t in (Rational(0), Rational(1, 3), Rational(1, 2), Rational(1), Rational(-2)):
            assert evaluate(target, converted, t) == evaluate(source, points, t)
