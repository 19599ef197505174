"""
Naming conventions for generated types.

Type names are derived deterministically from the spline family, the
degree and the dimension, e.g. ``BezierCubic3D`` or ``Vector2Matrix4x1``.
"""

from __future__ import annotations

from ..utils.exceptions import UnsupportedDimensionError

SUPPORTED_DIMENSIONS = (1, 2, 3, 4)

VECTOR_COMPONENTS = "xyzw"

_DEGREE_NAMES = {
    1: ("Linear", "Linear"),
    2: ("Quadratic", "Quad"),
    3: ("Cubic", "Cubic"),
    4: ("Quartic", "Quartic"),
    5: ("Quintic", "Quintic"),
}


def validate_dimension(dim: int) -> int:
    """
    Check that a geometric dimension is supported.

    Raises:
        UnsupportedDimensionError: If ``dim`` is not 1, 2, 3 or 4
    """
    if isinstance(dim, bool) or dim not in SUPPORTED_DIMENSIONS:
        raise UnsupportedDimensionError(dim)
    return dim


def degree_name(degree: int, short: bool) -> str:
    """Return ``Cubic``, ``Quadratic``/``Quad`` etc. for a polynomial degree."""
    try:
        full, abbreviated = _DEGREE_NAMES[degree]
    except KeyError:
        raise ValueError(f"No name for polynomial degree {degree}") from None
    return abbreviated if short else full


def element_type(dim: int) -> str:
    """C# type of one control point."""
    validate_dimension(dim)
    return "float" if dim == 1 else f"Vector{dim}"


def polynomial_type(dim: int) -> str:
    validate_dimension(dim)
    return "Polynomial" if dim == 1 else f"Polynomial{dim}D"


def lerp_function(dim: int) -> str:
    """Unclamped linear interpolation function for the element type."""
    validate_dimension(dim)
    if dim == 1:
        return "Mathf.LerpUnclamped"
    return f"Vector{dim}.LerpUnclamped"


def matrix_type_name(row_count: int, dim: int) -> str:
    """Name of a column matrix type, e.g. ``Matrix4x1`` or ``Vector3Matrix4x1``."""
    validate_dimension(dim)
    prefix = "" if dim == 1 else f"Vector{dim}"
    return f"{prefix}Matrix{row_count}x1"


def spline_type_name(spline, dim: int) -> str:
    """Name of a spline segment type, e.g. ``BezierCubic3D``."""
    validate_dimension(dim)
    return f"{spline.class_name}{degree_name(spline.degree, short=True)}{dim}D"
