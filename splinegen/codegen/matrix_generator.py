"""
Column matrix type generation.

Emits the ``Matrix<n>x1`` / ``Vector<d>Matrix<n>x1`` value types that hold
the control points of spline segments: fields, constructors (including
composing a vector matrix from per-component scalar matrices), a
range-checked indexer, per-axis component extraction, interpolation and
equality.
"""

from __future__ import annotations

from typing import Callable

from .base import BaseTypeGenerator
from .naming import VECTOR_COMPONENTS, element_type, lerp_function, matrix_type_name, validate_dimension
from .types import GeneratedArtifact
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _join(separator: str, count: int, elem: Callable[[int], str]) -> str:
    return separator.join(elem(i) for i in range(count))


class ColumnMatrixGenerator(BaseTypeGenerator):
    """Generator for n x 1 column matrix types."""

    def generate(self, row_count: int, dim: int) -> GeneratedArtifact:
        """
        Generate the column matrix type with ``row_count`` rows of dimension ``dim``.

        Args:
            row_count: Number of rows (elements) of the matrix
            dim: Dimension of each element (1 for float)

        Returns:
            The generated artifact
        """
        validate_dimension(dim)
        if row_count < 1:
            raise ValueError(f"Matrix row count must be positive, got {row_count}")

        type_name = matrix_type_name(row_count, dim)
        elem = element_type(dim)
        lerp = lerp_function(dim)
        fields = _join(", ", row_count, lambda i: f"m{i}")
        fields_this = _join(", ", row_count, lambda i: f"this.m{i}")
        ctor_params = _join(", ", row_count, lambda i: f"{elem} m{i}")
        index_error = (
            f'throw new IndexOutOfRangeException( $"Matrix row index has to be from 0 to {row_count - 1}, got: {{row}}" )'
        )

        code = self._new_builder(["System", "UnityEngine"])

        with code.bracket_scope(f"namespace {self.options.namespace}"):
            code.summary(f"A {row_count}x1 column matrix with {elem} values")

            with code.bracket_scope(f"[Serializable] public struct {type_name}"):
                # fields
                code.append(f"public {elem} {fields};")

                # constructors
                code.append(f"public {type_name}( {ctor_params} ) => ( {fields_this} ) = ( {fields} );")
                if dim > 1:
                    components = VECTOR_COMPONENTS[:dim]
                    scalar_matrix = matrix_type_name(row_count, 1)
                    params = ", ".join(f"{scalar_matrix} {c}" for c in components)
                    composed = _join(
                        ", ", row_count,
                        lambda i: f"new {elem}( {', '.join(f'{c}.m{i}' for c in components)} )"
                    )
                    code.append(f"public {type_name}( {params} ) => ( {fields} ) = ( {composed} );")
                code.line_break()

                # indexer
                with code.bracket_scope(f"public {elem} this[ int row ]"):
                    cases = _join(", ", row_count, lambda i: f"{i} => m{i}")
                    code.append(f"get => row switch {{ {cases}, _ => {index_error} }};")
                    with code.bracket_scope("set"):
                        with code.bracket_scope("switch( row )"):
                            code.append(_join(" ", row_count, lambda i: f"case {i}: m{i} = value; break;"))
                            code.append(f"default: {index_error};")

                # per-axis component extraction
                if dim > 1:
                    scalar_matrix = matrix_type_name(row_count, 1)
                    for c in VECTOR_COMPONENTS[:dim]:
                        values = _join(", ", row_count, lambda i: f"m{i}.{c}")
                        code.append(f"public {scalar_matrix} {c.upper()} => new( {values} );")
                code.line_break()

                # interpolation
                code.summary("Linearly interpolates between two matrices, based on a value <c>t</c>")
                code.param("a", "The first matrix")
                code.param("b", "The second matrix")
                code.param("t", "The value to blend by")
                lerp_args = _join(", ", row_count, lambda i: f"{lerp}( a.m{i}, b.m{i}, t )")
                code.append(
                    f"public static {type_name} Lerp( {type_name} a, {type_name} b, float t ) => new {type_name}( {lerp_args} );"
                )
                code.line_break()

                # equality
                op_compare = _join(" && ", row_count, lambda i: f"a.m{i} == b.m{i}")
                equals_compare = _join(" && ", row_count, lambda i: f"m{i}.Equals( other.m{i} )")
                code.append(f"public static bool operator ==( {type_name} a, {type_name} b ) => {op_compare};")
                code.append(f"public static bool operator !=( {type_name} a, {type_name} b ) => !( a == b );")
                code.append(f"public bool Equals( {type_name} other ) => {equals_compare};")
                code.append(f"public override bool Equals( object obj ) => obj is {type_name} other && Equals( other );")
                code.append(f"public override int GetHashCode() => HashCode.Combine( {fields} );")

        logger.debug(f"Built {type_name} ({len(code.lines)} lines)")
        return self._create_artifact(
            type_name,
            self.options.matrix_category,
            code,
            metadata={"row_count": row_count, "dimension": dim},
        )
