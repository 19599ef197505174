"""
Code generation for spline segment and column matrix types.

The generators build each type line by line with a CodeBuilder and
return a GeneratedArtifact; the file header is rendered from a Jinja2
template.
"""

from .code_builder import CodeBuilder
from .expressions import LinearCombination, coefficient_expressions, format_rational_literal
from .types import CodegenOptions, GeneratedArtifact
from .matrix_generator import ColumnMatrixGenerator
from .spline_generator import SplineSegmentGenerator

__all__ = [
    "CodeBuilder",
    "LinearCombination",
    "coefficient_expressions",
    "format_rational_literal",
    "CodegenOptions",
    "GeneratedArtifact",
    "ColumnMatrixGenerator",
    "SplineSegmentGenerator",
]
