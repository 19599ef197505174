"""
Core data structures for source generation.

All data structures here are immutable and shared between the
generators and the generation driver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class CodegenOptions:
    """Options that shape the emitted source text and its location."""
    namespace: str = "Splinegen"
    banner: Tuple[str, ...] = ()
    indent: str = "\t"
    extension: str = "cs"
    spline_category: str = "Splines/Uniform Spline Segments"
    matrix_category: str = "Numerics"


@dataclass(frozen=True)
class GeneratedArtifact:
    """One complete generated type definition and where it belongs."""
    type_name: str
    category: str
    lines: Tuple[str, ...]
    extension: str = "cs"
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        """Validate the artifact."""
        if not self.type_name:
            raise ValueError("Artifact type name cannot be empty")
        if not self.lines:
            raise ValueError("Artifact content cannot be empty")

    @property
    def file_name(self) -> str:
        return f"{self.type_name}.{self.extension}"

    @property
    def relative_path(self) -> Path:
        """Path of the artifact below the output root: ``<category>/<TypeName>.<ext>``."""
        return Path(self.category) / self.file_name

    @property
    def content(self) -> str:
        """Source text, one terminated line per emitted line."""
        return "".join(f"{line}\n" for line in self.lines)

    def write(self, root: Union[str, Path]) -> Path:
        """
        Write the artifact below ``root``, creating directories as needed.

        Returns:
            The path written to
        """
        path = Path(root) / self.relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.content, encoding="utf-8")
        return path
