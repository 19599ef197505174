"""
Spline Family Catalog.

The closed set of uniform spline segment types the generator knows
about. Each type carries its characteristic matrix, whose rows give the
monomial coefficients (t^0 first) as a linear combination of the
control points, together with the control point names and descriptions
used in the emitted documentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..numerics.matrix import RationalMatrix
from ..numerics.rational import Rational
from ..utils.exceptions import CatalogError, SplinegenError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class SplineFamily(Enum):
    """Spline family tag. The value is the prefix of generated type names."""
    BEZIER = "Bezier"
    HERMITE = "Hermite"
    UNIFORM_BSPLINE = "UBS"
    CATMULL_ROM = "CatRom"


@dataclass(frozen=True)
class SplineType:
    """Descriptor of one cataloged spline segment type."""
    family: SplineFamily
    degree: int
    pretty_name: str
    matrix_name: str
    point_names: Tuple[str, ...]
    point_descriptions: Tuple[str, ...]
    char_matrix: RationalMatrix

    @property
    def class_name(self) -> str:
        return self.family.value

    @property
    def point_count(self) -> int:
        return self.degree + 1

    @property
    def pretty_name_lower(self) -> str:
        return self.pretty_name.lower()

    @property
    def supports_split(self) -> bool:
        """Bézier segments of any degree can be subdivided with de Casteljau."""
        return self.family is SplineFamily.BEZIER

    @property
    def supports_slerp(self) -> bool:
        return self.family is SplineFamily.BEZIER and self.degree == 3

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Names of the emitted point properties (``P0``, ``V0``, ...)."""
        return tuple(name.upper() for name in self.point_names)

    def __str__(self) -> str:
        return f"{self.matrix_name}"


CUBIC_BEZIER_MATRIX = RationalMatrix.from_rows(
    [1, 0, 0, 0],
    [-3, 3, 0, 0],
    [3, -6, 3, 0],
    [-1, 3, -3, 1],
)

QUADRATIC_BEZIER_MATRIX = RationalMatrix.from_rows(
    [1, 0, 0],
    [-2, 2, 0],
    [1, -2, 1],
)

CUBIC_HERMITE_MATRIX = RationalMatrix.from_rows(
    [1, 0, 0, 0],
    [0, 1, 0, 0],
    [-3, -2, 3, -1],
    [2, 1, -2, 1],
)

CUBIC_CATMULL_ROM_MATRIX = Rational(1, 2) * RationalMatrix.from_rows(
    [0, 2, 0, 0],
    [-1, 0, 1, 0],
    [2, -5, 4, -1],
    [-1, 3, -3, 1],
)

CUBIC_UNIFORM_BSPLINE_MATRIX = Rational(1, 6) * RationalMatrix.from_rows(
    [1, 4, 1, 0],
    [-3, 0, 3, 0],
    [3, -6, 3, 0],
    [-1, 3, -3, 1],
)


CUBIC_BEZIER = SplineType(
    family=SplineFamily.BEZIER,
    degree=3,
    pretty_name="Bézier",
    matrix_name="cubicBezier",
    point_names=("p0", "p1", "p2", "p3"),
    point_descriptions=(
        "The starting point of the curve",
        "The second control point of the curve, sometimes called the start tangent point",
        "The third control point of the curve, sometimes called the end tangent point",
        "The end point of the curve",
    ),
    char_matrix=CUBIC_BEZIER_MATRIX,
)

QUADRATIC_BEZIER = SplineType(
    family=SplineFamily.BEZIER,
    degree=2,
    pretty_name="Bézier",
    matrix_name="quadraticBezier",
    point_names=("p0", "p1", "p2"),
    point_descriptions=(
        "The starting point of the curve",
        "The middle control point of the curve, sometimes called a tangent point",
        "The end point of the curve",
    ),
    char_matrix=QUADRATIC_BEZIER_MATRIX,
)

CUBIC_HERMITE = SplineType(
    family=SplineFamily.HERMITE,
    degree=3,
    pretty_name="Hermite",
    matrix_name="cubicHermite",
    point_names=("p0", "v0", "p1", "v1"),
    point_descriptions=(
        "The starting point of the curve",
        "The rate of change (velocity) at the start of the curve",
        "The end point of the curve",
        "The rate of change (velocity) at the end of the curve",
    ),
    char_matrix=CUBIC_HERMITE_MATRIX,
)

CUBIC_UNIFORM_BSPLINE = SplineType(
    family=SplineFamily.UNIFORM_BSPLINE,
    degree=3,
    pretty_name="B-Spline",
    matrix_name="cubicUniformBspline",
    point_names=("p0", "p1", "p2", "p3"),
    point_descriptions=(
        "The first point of the B-spline hull",
        "The second point of the B-spline hull",
        "The third point of the B-spline hull",
        "The fourth point of the B-spline hull",
    ),
    char_matrix=CUBIC_UNIFORM_BSPLINE_MATRIX,
)

CUBIC_CATMULL_ROM = SplineType(
    family=SplineFamily.CATMULL_ROM,
    degree=3,
    pretty_name="Catmull-Rom",
    matrix_name="cubicCatmullRom",
    point_names=("p0", "p1", "p2", "p3"),
    point_descriptions=(
        "The first control point of the catmull-rom curve. Note that this point is not included in the curve itself, and only helps to shape it",
        "The second control point, and the start of the catmull-rom curve",
        "The third control point, and the end of the catmull-rom curve",
        "The last control point of the catmull-rom curve. Note that this point is not included in the curve itself, and only helps to shape it",
    ),
    char_matrix=CUBIC_CATMULL_ROM_MATRIX,
)

ALL_SPLINE_TYPES: Tuple[SplineType, ...] = (
    CUBIC_BEZIER,
    QUADRATIC_BEZIER,
    CUBIC_HERMITE,
    CUBIC_UNIFORM_BSPLINE,
    CUBIC_CATMULL_ROM,
)

_BY_KEY: Dict[Tuple[SplineFamily, int], SplineType] = {
    (spline.family, spline.degree): spline for spline in ALL_SPLINE_TYPES
}


def get_spline_type(family: SplineFamily, degree: int) -> SplineType:
    """
    Look up a cataloged spline type by family tag and degree.

    Raises:
        CatalogError: If no such type is cataloged
    """
    try:
        return _BY_KEY[(family, degree)]
    except KeyError:
        raise CatalogError(
            f"No {family.value} spline of degree {degree} is cataloged",
            {'family': family.name, 'degree': degree}
        ) from None


def spline_types_of_degree(degree: int) -> Tuple[SplineType, ...]:
    """Return the cataloged types of the given degree, in catalog order."""
    return tuple(spline for spline in ALL_SPLINE_TYPES if spline.degree == degree)


def validate_catalog(catalog: Tuple[SplineType, ...] = ALL_SPLINE_TYPES) -> None:
    """
    Check every cataloged type for structural defects.

    Each type needs degree + 1 point names and descriptions, a
    characteristic matrix of matching size, and that matrix must be
    invertible for basis conversion to be defined.

    Raises:
        SplinegenError: On a malformed descriptor
        NotInvertibleError: On a singular characteristic matrix
    """
    for spline in catalog:
        if len(spline.point_names) != spline.point_count:
            raise SplinegenError(
                f"{spline.matrix_name} has {len(spline.point_names)} point names, expected {spline.point_count}"
            )
        if len(spline.point_descriptions) != spline.point_count:
            raise SplinegenError(
                f"{spline.matrix_name} has {len(spline.point_descriptions)} point descriptions, expected {spline.point_count}"
            )
        if spline.char_matrix.size != spline.point_count:
            raise SplinegenError(
                f"{spline.matrix_name} has a {spline.char_matrix.size}x{spline.char_matrix.size} characteristic matrix, "
                f"expected {spline.point_count}x{spline.point_count}"
            )
        # raises NotInvertibleError for singular matrices
        spline.char_matrix.inverse()
    logger.debug(f"Validated {len(catalog)} spline types")

