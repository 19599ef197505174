"""
Template Rendering Engine.

This module provides template-based rendering of the fixed parts of the
generated sources (the machine-generated header block) using Jinja2.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ...utils.exceptions import SplinegenError

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "csharp"


class JinjaTemplateRenderer:
    """Jinja2-based template renderer for source generation."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the template renderer."""
        self._template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    @property
    def template_dir(self) -> Path:
        return self._template_dir

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template_obj = self._env.from_string(template)
            return template_obj.render(**context)
        except TemplateError as e:
            raise SplinegenError(f"Template rendering failed: {e}") from e

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise SplinegenError(
                f"Template file rendering failed: {e}", {'template': template_path}
            ) from e

    def render_header(self, banner: List[str], usings: List[str], generator: str = "splinegen") -> List[str]:
        """
        Render the machine-generated header block.

        Args:
            banner: Comment lines placed at the very top of the file
            usings: Namespaces imported by the artifact
            generator: Name of the generating tool

        Returns:
            Header lines, ending with the last using directive
        """
        text = self.render_file(
            "header.j2",
            {"banner": list(banner), "usings": list(usings), "generator": generator},
        )
        return text.splitlines()

    def list_templates(self) -> List[str]:
        """List available template files."""
        return self._env.list_templates()


def create_template_renderer(template_dir: Optional[str] = None) -> JinjaTemplateRenderer:
    """Create a template renderer for the given directory (or the packaged templates)."""
    return JinjaTemplateRenderer(template_dir)
