"""
Base class for type generators.

Generators turn one (type, dimension) request into a GeneratedArtifact.
This module holds what they share: the builder setup, the rendered
header block and the artifact packaging.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

from .code_builder import CodeBuilder
from .templates import JinjaTemplateRenderer, create_template_renderer
from .types import CodegenOptions, GeneratedArtifact


class BaseTypeGenerator(ABC):
    """Base class for all type generators."""

    def __init__(
        self,
        options: Optional[CodegenOptions] = None,
        template_renderer: Optional[JinjaTemplateRenderer] = None,
    ):
        """Initialize the generator with options and a template renderer."""
        self._options = options or CodegenOptions()
        self._template_renderer = template_renderer or create_template_renderer()

    @property
    def options(self) -> CodegenOptions:
        return self._options

    @abstractmethod
    def generate(self, *args, **kwargs) -> GeneratedArtifact:
        """Generate the artifact for one type."""

    def _new_builder(self, usings: Iterable[str]) -> CodeBuilder:
        """Create a builder that already holds the file header."""
        builder = CodeBuilder(indent=self._options.indent)
        builder.extend(self._template_renderer.render_header(
            banner=list(self._options.banner),
            usings=list(usings),
        ))
        builder.line_break()
        return builder

    def _create_artifact(
        self,
        type_name: str,
        category: str,
        builder: CodeBuilder,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> GeneratedArtifact:
        return GeneratedArtifact(
            type_name=type_name,
            category=category,
            lines=tuple(builder.lines),
            extension=self._options.extension,
            metadata=metadata or {},
        )
