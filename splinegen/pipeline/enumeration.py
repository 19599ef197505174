"""
Enumeration of the artifacts a generation run produces.

Every artifact is identified by an explicit key (spline type or matrix
row count, plus dimension) instead of by parsing type names. Generated
type names map back to keys through a direct lookup table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from ..codegen.naming import SUPPORTED_DIMENSIONS, matrix_type_name, spline_type_name, validate_dimension
from ..splines.catalog import ALL_SPLINE_TYPES, SplineType
from ..utils.exceptions import CatalogError, SplinegenError

DEFAULT_MATRIX_SIZES = (3, 4)


class ArtifactKind(Enum):
    """Kind of generated type."""
    SPLINE = "spline"
    MATRIX = "matrix"


@dataclass(frozen=True)
class ArtifactKey:
    """Identity of one generated type."""
    kind: ArtifactKind
    dimension: int
    spline_type: Optional[SplineType] = None
    row_count: Optional[int] = None

    def __post_init__(self):
        validate_dimension(self.dimension)
        if self.kind is ArtifactKind.SPLINE and self.spline_type is None:
            raise ValueError("Spline artifacts need a spline type")
        if self.kind is ArtifactKind.MATRIX and self.row_count is None:
            raise ValueError("Matrix artifacts need a row count")

    @classmethod
    def spline(cls, spline_type: SplineType, dimension: int) -> ArtifactKey:
        return cls(ArtifactKind.SPLINE, dimension, spline_type=spline_type)

    @classmethod
    def matrix(cls, row_count: int, dimension: int) -> ArtifactKey:
        return cls(ArtifactKind.MATRIX, dimension, row_count=row_count)

    @property
    def type_name(self) -> str:
        if self.kind is ArtifactKind.SPLINE:
            return spline_type_name(self.spline_type, self.dimension)
        return matrix_type_name(self.row_count, self.dimension)


def enumerate_artifact_keys(
    dimensions: Iterable[int] = SUPPORTED_DIMENSIONS,
    matrix_sizes: Iterable[int] = DEFAULT_MATRIX_SIZES,
    catalog: Sequence[SplineType] = ALL_SPLINE_TYPES,
) -> List[ArtifactKey]:
    """
    List every artifact of a generation run.

    For each dimension, all cataloged spline types come first, followed
    by the column matrices of each requested size.

    Raises:
        UnsupportedDimensionError: For a dimension outside 1 to 4
        SplinegenError: If two keys would produce the same type name
    """
    matrix_sizes = tuple(matrix_sizes)
    keys = []
    for dim in dimensions:
        validate_dimension(dim)
        keys.extend(ArtifactKey.spline(spline, dim) for spline in catalog)
        keys.extend(ArtifactKey.matrix(size, dim) for size in matrix_sizes)

    seen: Dict[str, ArtifactKey] = {}
    for key in keys:
        name = key.type_name
        if name in seen:
            raise SplinegenError(f"Duplicate generated type {name}", {'type_name': name})
        seen[name] = key
    return keys


def build_name_index(keys: Optional[Iterable[ArtifactKey]] = None) -> Dict[str, ArtifactKey]:
    """Map generated type names to their keys."""
    if keys is None:
        keys = enumerate_artifact_keys()
    return {key.type_name: key for key in keys}


_NAME_INDEX: Optional[Dict[str, ArtifactKey]] = None


def resolve_artifact_key(type_name: str, index: Optional[Dict[str, ArtifactKey]] = None) -> ArtifactKey:
    """
    Find the key of a generated type by its name.

    Looks the name up in ``index`` when given (see ``build_name_index``),
    otherwise among the artifacts of the default enumeration.

    Raises:
        CatalogError: If no artifact of that name is generated
    """
    global _NAME_INDEX
    if index is None:
        if _NAME_INDEX is None:
            _NAME_INDEX = build_name_index()
        index = _NAME_INDEX
    try:
        return index[type_name]
    except KeyError:
        raise CatalogError(f"Unknown generated type '{type_name}'", {'type_name': type_name}) from None
