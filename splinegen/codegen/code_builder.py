"""
Code Builder for C# source generation.

This module implements the line accumulator used by the generators.
Lines are indented by the current scope depth; scopes are context
managers, so the depth is restored on every exit path, including
exceptions raised while a scope is open.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List


class CodeBuilder:
    """
    Builder that accumulates indented source lines.

    This class provides a small fluent interface for emitting C# code
    with bracketed and unbracketed indentation scopes.
    """

    def __init__(self, indent: str = "\t"):
        """
        Initialize the code builder.

        Args:
            indent: String emitted once per indentation level
        """
        self._indent = indent
        self._lines: List[str] = []
        self._depth = 0

    @property
    def lines(self) -> List[str]:
        """Lines emitted so far."""
        return list(self._lines)

    @property
    def depth(self) -> int:
        return self._depth

    def reset(self) -> None:
        """Reset the builder for a new artifact."""
        self._lines = []
        self._depth = 0

    def append(self, line: str) -> CodeBuilder:
        """Add a line at the current indentation."""
        self._lines.append(f"{self._indent * self._depth}{line}")
        return self

    def extend(self, lines: Iterable[str]) -> CodeBuilder:
        for line in lines:
            if line.strip():
                self.append(line)
            else:
                self.line_break()
        return self

    def summary(self, text: str) -> CodeBuilder:
        """Add an XML documentation summary."""
        return self.append(f"/// <summary>{text}</summary>")

    def param(self, name: str, description: str) -> CodeBuilder:
        """Add an XML documentation parameter description."""
        return self.append(f'/// <param name="{name}">{description}</param>')

    def line_break(self) -> CodeBuilder:
        self._lines.append("")
        return self

    @contextmanager
    def bracket_scope(self, header: str) -> Iterator[CodeBuilder]:
        """Open ``header {``, indent the body and close with ``}``."""
        self.append(f"{header} {{")
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
            self.append("}")

    @contextmanager
    def scope(self, header: str) -> Iterator[CodeBuilder]:
        """Emit ``header`` and indent the body without brackets."""
        self.append(header)
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def build(self) -> str:
        """Build the final source text."""
        return "\n".join(self._lines)
