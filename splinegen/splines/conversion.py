"""
Basis conversion between spline types.

If ``P`` are the control points of ``source`` describing a curve, then
``C @ P`` with ``C = inverse(M_target) @ M_source`` are the control points
of ``target`` describing the identical polynomial, since
``M_target @ C @ P == M_source @ P``.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .catalog import ALL_SPLINE_TYPES, SplineType
from .evaluation import apply_to_points
from ..numerics.matrix import RationalMatrix
from ..utils.exceptions import IncompatibleDegreeError


def get_conversion_matrix(source: SplineType, target: SplineType) -> RationalMatrix:
    """
    Compute the exact matrix mapping source control points to target control points.

    Row ``o`` of the result is the linear combination of source points
    that produces target point ``o``.

    Args:
        source: Spline type the control points belong to
        target: Spline type to express the same curve in

    Returns:
        The conversion matrix ``inverse(M_target) @ M_source``

    Raises:
        IncompatibleDegreeError: If the two types differ in degree
    """
    if source.degree != target.degree:
        raise IncompatibleDegreeError(source.matrix_name, source.degree, target.matrix_name, target.degree)
    return target.char_matrix.inverse() @ source.char_matrix


def conversion_targets(
    source: SplineType,
    catalog: Sequence[SplineType] = ALL_SPLINE_TYPES,
) -> Iterator[Tuple[SplineType, RationalMatrix]]:
    """
    Yield ``(target, matrix)`` for every other cataloged type of the same degree.

    The source itself is skipped, so no identity conversion is produced.
    """
    for target in catalog:
        if target == source or target.degree != source.degree:
            continue
        yield target, get_conversion_matrix(source, target)


def convert_points(source: SplineType, target: SplineType, points: Sequence) -> List:
    """
    Convert concrete control points from one spline type to another.

    Points can be scalars or tuples of components (ints or Rationals).
    """
    return apply_to_points(get_conversion_matrix(source, target), points)
