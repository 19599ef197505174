"""Jinja2 templates for the fixed parts of generated sources."""

from .renderer import JinjaTemplateRenderer, create_template_renderer

__all__ = [
    "JinjaTemplateRenderer",
    "create_template_renderer",
]
