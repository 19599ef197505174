"""
splinegen: Offline generator for spline segment types

Derives the polynomial coefficient formulas, basis conversions and
subdivision formulas of the supported spline families with exact
rational arithmetic, and emits them as ready-to-compile type
definitions.

Key Features:
- Exact rational matrices with Gauss-Jordan inversion
- Cubic/quadratic Bezier, cubic Hermite, uniform B-spline and Catmull-Rom
- Basis conversion matrices between any two splines of equal degree
- Simplified, factored coefficient expressions in the emitted code

Usage:
    import splinegen

    report = splinegen.regenerate()
    print(report.type_names)
"""

__version__ = "0.1.0"
__author__ = "Splinegen Team"
__email__ = "splinegen@example.com"

# Public API exports
from .numerics import Rational, RationalMatrix
from .splines import (
    ALL_SPLINE_TYPES,
    SplineFamily,
    SplineType,
    get_conversion_matrix,
    get_spline_type,
)
from .pipeline import (
    GenerationReport,
    SplineCodegenPipeline,
    enumerate_artifact_keys,
    regenerate,
    resolve_artifact_key,
)
from .utils.config import SplinegenConfig, get_config

__all__ = [
    "Rational",
    "RationalMatrix",
    "ALL_SPLINE_TYPES",
    "SplineFamily",
    "SplineType",
    "get_conversion_matrix",
    "get_spline_type",
    "GenerationReport",
    "SplineCodegenPipeline",
    "enumerate_artifact_keys",
    "regenerate",
    "resolve_artifact_key",
    "SplinegenConfig",
    "get_config",
]
