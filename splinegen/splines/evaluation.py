"""
Exact evaluation of spline segments.

Reference implementations of what the generated types compute, used to
check derived formulas with exact arithmetic. Points are scalars or
tuples of components; values are ints or Rationals so that every result
is exact.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

from ..numerics.matrix import RationalMatrix
from ..numerics.rational import Rational

T = TypeVar("T")


def _is_vector(point) -> bool:
    return isinstance(point, tuple)


def _dimension(points: Sequence) -> int:
    dims = {len(p) if _is_vector(p) else 0 for p in points}
    if len(dims) != 1:
        raise ValueError(f"Control points must share one dimension, got {sorted(dims)}")
    return dims.pop()


def apply_to_points(matrix: RationalMatrix, points: Sequence) -> List:
    """Multiply a matrix with a column of points, component-wise for vectors."""
    dim = _dimension(points)
    if dim == 0:
        return matrix.apply(points)
    columns = [matrix.apply([p[c] for p in points]) for c in range(dim)]
    return [tuple(col[r] for col in columns) for r in range(matrix.size)]


def polynomial_coefficients(spline, points: Sequence) -> List:
    """Return the monomial coefficients (t^0 first) of a segment's polynomial."""
    return apply_to_points(spline.char_matrix, points)


def evaluate_polynomial(coefficients: Sequence, t):
    """Evaluate sum(c[i] * t^i) with Horner's scheme."""
    if _is_vector(coefficients[0]):
        return tuple(
            evaluate_polynomial([c[i] for c in coefficients], t)
            for i in range(len(coefficients[0]))
        )
    result = Rational.ZERO
    for coeff in reversed(coefficients):
        result = result * t + coeff
    return result


def evaluate(spline, points: Sequence, t):
    """Evaluate a spline segment at parameter ``t``."""
    return evaluate_polynomial(polynomial_coefficients(spline, points), t)


def lerp(a, b, t):
    """Unclamped linear interpolation ``a + (b - a) * t``, component-wise for vectors."""
    if _is_vector(a):
        return tuple(lerp(ac, bc, t) for ac, bc in zip(a, b))
    return a + (b - a) * t


def casteljau_pyramid(points: Sequence[T], interpolate: Callable[[T, T], T]) -> List[List[T]]:
    """
    Build the de Casteljau pyramid.

    Row 0 is the input; every following row interpolates adjacent
    elements of the previous row, down to the single apex.

    Args:
        points: Control points of the segment
        interpolate: Pairwise interpolation between neighbouring elements

    Returns:
        Rows of the pyramid, the last one holding only the apex
    """
    rows = [list(points)]
    while len(rows[-1]) > 1:
        prev = rows[-1]
        rows.append([interpolate(prev[i], prev[i + 1]) for i in range(len(prev) - 1)])
    return rows


def split_pyramid(rows: Sequence[Sequence[T]]) -> Tuple[List[T], List[T]]:
    """Read the two sub-segments off a de Casteljau pyramid."""
    left = [row[0] for row in rows]
    right = [row[-1] for row in reversed(rows)]
    return left, right


def split_bezier(points: Sequence, t) -> Tuple[List, List]:
    """
    Split a Bézier segment at ``t`` into two segments tracing the same curve.

    Exact for any ``t``, including values outside [0, 1].
    """
    return split_pyramid(casteljau_pyramid(points, lambda a, b: lerp(a, b, t)))
