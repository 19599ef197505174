"""
Spline families, their characteristic matrices and the operations
derived from them.
"""

from .catalog import (
    ALL_SPLINE_TYPES,
    CUBIC_BEZIER,
    CUBIC_CATMULL_ROM,
    CUBIC_HERMITE,
    CUBIC_UNIFORM_BSPLINE,
    QUADRATIC_BEZIER,
    SplineFamily,
    SplineType,
    get_spline_type,
    spline_types_of_degree,
    validate_catalog,
)
from .conversion import conversion_targets, convert_points, get_conversion_matrix
from .evaluation import evaluate, polynomial_coefficients, split_bezier

__all__ = [
    "ALL_SPLINE_TYPES",
    "CUBIC_BEZIER",
    "CUBIC_CATMULL_ROM",
    "CUBIC_HERMITE",
    "CUBIC_UNIFORM_BSPLINE",
    "QUADRATIC_BEZIER",
    "SplineFamily",
    "SplineType",
    "get_spline_type",
    "spline_types_of_degree",
    "validate_catalog",
    "conversion_targets",
    "convert_points",
    "get_conversion_matrix",
    "evaluate",
    "polynomial_coefficients",
    "split_bezier",
]
