"""
Uniform spline segment type generation.

Emits one value type per (spline type, dimension): control point
storage, constructors, a lazily recomputed polynomial, point accessors
and a range-checked indexer, equality, dimension and basis casts,
interpolation, and for Bézier segments spherical blending and
de Casteljau subdivision.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase
from typing import List, Tuple

from .base import BaseTypeGenerator
from .code_builder import CodeBuilder
from .expressions import LinearCombination, coefficient_expressions
from .naming import (
    VECTOR_COMPONENTS,
    degree_name,
    element_type,
    lerp_function,
    matrix_type_name,
    polynomial_type,
    spline_type_name,
    validate_dimension,
)
from .types import GeneratedArtifact
from ..splines.catalog import SplineType
from ..splines.conversion import conversion_targets
from ..splines.evaluation import casteljau_pyramid, split_pyramid
from ..utils.logging import SplinegenLogger

# t is the split parameter and p names the apex of the pyramid
_SPLIT_VARIABLES = [c for c in ascii_lowercase if c not in "pt"]


@dataclass(frozen=True)
class SegmentNames:
    """Names used throughout one generated spline segment type."""
    struct_name: str
    data_type: str
    polynomial_type: str
    point_matrix_type: str
    lerp: str
    fields: Tuple[str, ...]
    dimension: int

    @classmethod
    def of(cls, spline: SplineType, dim: int) -> SegmentNames:
        validate_dimension(dim)
        return cls(
            struct_name=spline_type_name(spline, dim),
            data_type=element_type(dim),
            polynomial_type=polynomial_type(dim),
            point_matrix_type=matrix_type_name(spline.point_count, dim),
            lerp=lerp_function(dim),
            fields=spline.field_names,
            dimension=dim,
        )


class SplineSegmentGenerator(BaseTypeGenerator):
    """Generator for uniform spline segment types."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._events = SplinegenLogger("codegen.spline")

    def generate(self, spline: SplineType, dim: int) -> GeneratedArtifact:
        """
        Generate the segment type for a spline type in a given dimension.

        Args:
            spline: Cataloged spline type
            dim: Geometric dimension, 1 to 4

        Returns:
            The generated artifact
        """
        names = SegmentNames.of(spline, dim)
        degree_full = degree_name(spline.degree, short=False).lower()
        s = names.struct_name

        code = self._new_builder(["System", "System.Runtime.CompilerServices", "UnityEngine"])

        with code.bracket_scope(f"namespace {self.options.namespace}"):
            code.line_break()
            code.summary(
                f"An optimized uniform {dim}D {degree_full} {spline.pretty_name_lower} segment, "
                f"with {spline.point_count} control points"
            )

            with code.bracket_scope(
                f"[Serializable] public struct {s} : IParamSplineSegment<{names.polynomial_type},{names.point_matrix_type}>"
            ):
                code.line_break()
                code.append("const MethodImplOptions INLINE = MethodImplOptions.AggressiveInlining;")
                code.line_break()

                self._append_fields(code, names)
                self._append_constructors(code, spline, names, degree_full)
                self._append_curve(code, spline, names)
                self._append_point_accessors(code, spline, names)
                self._append_indexer(code, spline, names)
                self._append_equality(code, names)
                self._append_dimension_casts(code, spline, names)
                conversions = self._append_basis_casts(code, spline, names)
                self._append_lerp(code, spline, names)
                if spline.supports_slerp and dim in (2, 3):
                    self._append_slerp(code, spline, names)
                if spline.supports_split:
                    self._append_split(code, spline, names)

        return self._create_artifact(
            s,
            self.options.spline_category,
            code,
            metadata={
                "spline": spline.matrix_name,
                "dimension": dim,
                "conversions": conversions,
            },
        )

    def _append_fields(self, code: CodeBuilder, names: SegmentNames) -> None:
        code.append(f"[SerializeField] {names.point_matrix_type} pointMatrix;")
        code.append(f"[NonSerialized] {names.polynomial_type} curve;")
        code.append("[NonSerialized] bool validCoefficients;")
        code.line_break()

    def _append_constructors(self, code: CodeBuilder, spline: SplineType, names: SegmentNames, degree_full: str) -> None:
        s = names.struct_name
        summary = (
            f"Creates a uniform {names.dimension}D {degree_full} {spline.pretty_name_lower} segment, "
            f"from {spline.point_count} control points"
        )
        ctor_params = ", ".join(f"{names.data_type} {p}" for p in spline.point_names)
        points = ", ".join(spline.point_names)

        code.summary(summary)
        for point, description in zip(spline.point_names, spline.point_descriptions):
            code.param(point, description)
        code.append(f"public {s}( {ctor_params} ) : this( new {names.point_matrix_type}( {points} ) ){{}}")

        code.summary(summary)
        code.param("pointMatrix", "The matrix containing the control points of this spline")
        code.append(
            f"public {s}( {names.point_matrix_type} pointMatrix ) => "
            f"( this.pointMatrix, curve, validCoefficients ) = ( pointMatrix, default, false );"
        )
        code.line_break()

    def _append_curve(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        expressions = coefficient_expressions(spline)
        last = len(expressions) - 1

        with code.bracket_scope(f"public {names.polynomial_type} Curve"):
            with code.bracket_scope("get"):
                with code.scope("if( validCoefficients )"):
                    code.append("return curve; // no need to update")
                code.append("validCoefficients = true;")
                with code.scope(f"return curve = new {names.polynomial_type}("):
                    for i, expression in enumerate(expressions):
                        code.append(f"{expression}{',' if i < last else ''}")
                code.append(");")

    def _append_point_accessors(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        code.append(
            f"public {names.point_matrix_type} PointMatrix {{ [MethodImpl( INLINE )] get => pointMatrix; "
            f"[MethodImpl( INLINE )] set => _ = ( pointMatrix = value, validCoefficients = false ); }}"
        )
        for i, (field, description) in enumerate(zip(names.fields, spline.point_descriptions)):
            code.summary(description)
            code.append(
                f"public {names.data_type} {field} {{ [MethodImpl( INLINE )] get => pointMatrix.m{i}; "
                f"[MethodImpl( INLINE )] set => _ = ( pointMatrix.m{i} = value, validCoefficients = false ); }}"
            )

    def _append_indexer(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        error = (
            f'throw new ArgumentOutOfRangeException( nameof(i), '
            f'$"Index has to be in the 0 to {spline.degree} range, got: {{i}}" )'
        )
        get_cases = ", ".join(f"{i} => {field}" for i, field in enumerate(names.fields))
        set_cases = " ".join(f"case {i}: {field} = value; break;" for i, field in enumerate(names.fields))

        code.summary(f"Get or set a control point position by index. Valid indices from 0 to {spline.degree}")
        with code.bracket_scope(f"public {names.data_type} this[ int i ]"):
            code.append(f"get => i switch {{ {get_cases}, _ => {error} }};")
            code.append(f"set {{ switch( i ) {{ {set_cases} default: {error}; }} }}")

    def _append_equality(self, code: CodeBuilder, names: SegmentNames) -> None:
        s = names.struct_name
        compare = " && ".join(f"{field}.Equals( other.{field} )" for field in names.fields)
        to_string = ", ".join(f"{{pointMatrix.m{i}}}" for i in range(len(names.fields)))

        code.append(f"public static bool operator ==( {s} a, {s} b ) => a.pointMatrix == b.pointMatrix;")
        code.append(f"public static bool operator !=( {s} a, {s} b ) => !( a == b );")
        code.append(f"public bool Equals( {s} other ) => {compare};")
        code.append(f"public override bool Equals( object obj ) => obj is {s} other && pointMatrix.Equals( other.pointMatrix );")
        code.append("public override int GetHashCode() => pointMatrix.GetHashCode();")
        code.append(f'public override string ToString() => $"({to_string})";')
        code.line_break()

    def _append_dimension_casts(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        if spline.degree != 3 or names.dimension not in (2, 3):
            return

        s = names.struct_name
        if names.dimension == 2:
            target = spline_type_name(spline, 3)
            args = ", ".join(f"curve2D.{field}" for field in names.fields)
            code.summary("Returns this spline segment in 3D, where z = 0")
            code.param("curve2D", "The 2D curve to cast to 3D")
            code.append(f"public static explicit operator {target}( {s} curve2D ) => new {target}( {args} );")
        else:
            target = spline_type_name(spline, 2)
            args = ", ".join(f"curve3D.{field}" for field in names.fields)
            code.summary("Returns this curve flattened to 2D. Effectively setting z = 0")
            code.param("curve3D", "The 3D curve to flatten to the Z plane")
            code.append(f"public static explicit operator {target}( {s} curve3D ) => new {target}( {args} );")

    def _append_basis_casts(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> List[str]:
        s = names.struct_name
        sources = [f"s.{field}" for field in names.fields]
        emitted = []

        for target, matrix in conversion_targets(spline):
            target_name = spline_type_name(target, names.dimension)
            last = target.point_count - 1
            with code.scope(f"public static explicit operator {target_name}( {s} s ) =>"):
                with code.scope(f"new {target_name}("):
                    for o in range(target.point_count):
                        expression = LinearCombination.from_row(matrix.row(o), sources)
                        code.append(f"{expression}{',' if o < last else ''}")
                code.append(");")
            self._events.log_conversion(s, target_name)
            emitted.append(target_name)

        return emitted

    def _append_lerp(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        s = names.struct_name
        last = len(names.fields) - 1

        code.summary(f"Returns a linear blend between two {spline.pretty_name_lower} curves")
        code.param("a", "The first spline segment")
        code.param("b", "The second spline segment")
        code.param("t", "A value from 0 to 1 to blend between <c>a</c> and <c>b</c>")
        with code.scope(f"public static {s} Lerp( {s} a, {s} b, float t ) =>"):
            with code.scope("new("):
                for i, field in enumerate(names.fields):
                    code.append(f"{names.lerp}( a.{field}, b.{field}, t ){',' if i < last else ''}")
            code.append(");")

    def _append_slerp(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        """Blend endpoints linearly and the end tangent directions spherically."""
        s = names.struct_name
        dt = names.data_type
        cast = "(Vector2)" if names.dimension == 2 else ""
        first, second = names.fields[0], names.fields[1]
        penultimate, last = names.fields[-2], names.fields[-1]

        code.line_break()
        code.summary(
            f"Returns a linear blend between two {spline.pretty_name_lower} curves, "
            f"where the tangent directions are spherically interpolated"
        )
        code.param("a", "The first spline segment")
        code.param("b", "The second spline segment")
        code.param("t", "A value from 0 to 1 to blend between <c>a</c> and <c>b</c>")
        with code.bracket_scope(f"public static {s} Slerp( {s} a, {s} b, float t )"):
            code.append(f"{dt} {first} = {names.lerp}( a.{first}, b.{first}, t );")
            code.append(f"{dt} {last} = {names.lerp}( a.{last}, b.{last}, t );")
            with code.scope(f"return new {s}("):
                code.append(f"{first},")
                code.append(
                    f"{first} + {cast}Vector3.SlerpUnclamped( a.{second} - a.{first}, b.{second} - b.{first}, t ),"
                )
                code.append(
                    f"{last} + {cast}Vector3.SlerpUnclamped( a.{penultimate} - a.{last}, b.{penultimate} - b.{last}, t ),"
                )
                code.append(f"{last}")
            code.append(");")

    def _append_split(self, code: CodeBuilder, spline: SplineType, names: SegmentNames) -> None:
        s = names.struct_name
        count = spline.degree * (spline.degree + 1) // 2
        variables = iter(_SPLIT_VARIABLES[:count - 1] + ["p"])

        def interpolate(a: str, b: str) -> str:
            var = next(variables)
            self._append_lerp_variable(code, names, var, a, b)
            return var

        code.summary("Splits this curve at the given t-value, into two curves that together form the exact same shape")
        code.param("t", "The t-value to split at")
        with code.bracket_scope(f"public ({s} pre, {s} post) Split( float t )"):
            left, right = split_pyramid(casteljau_pyramid(list(names.fields), interpolate))
            code.append(f"return ( new {s}( {', '.join(left)} ), new {s}( {', '.join(right)} ) );")

    def _append_lerp_variable(self, code: CodeBuilder, names: SegmentNames, var: str, a: str, b: str) -> None:
        dt = names.data_type
        if names.dimension == 1:
            code.append(f"{dt} {var} = {a} + ( {b} - {a} ) * t;")
            return

        components = VECTOR_COMPONENTS[:names.dimension]
        with code.scope(f"{dt} {var} = new {dt}("):
            for i, c in enumerate(components):
                end = " );" if i == len(components) - 1 else ","
                code.append(f"{a}.{c} + ( {b}.{c} - {a}.{c} ) * t{end}")
