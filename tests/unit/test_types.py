"""
Unit tests for generated artifacts and the generator base class.
"""

import pytest

from splinegen.codegen.base import BaseTypeGenerator
from splinegen.codegen.types import CodegenOptions, GeneratedArtifact


class TestGeneratedArtifact:
    """Test the artifact data structure."""

    def test_paths(self):
        artifact = GeneratedArtifact("BezierCubic3D", "Splines/Uniform Spline Segments", ("a", "b"))
        assert artifact.file_name == "BezierCubic3D.cs"
        assert artifact.relative_path.as_posix() == "Splines/Uniform Spline Segments/BezierCubic3D.cs"

    def test_content_terminates_every_line(self):
        artifact = GeneratedArtifact("Matrix3x1", "Numerics", ("a", "", "b"))
        assert artifact.content == "a\n\nb\n"

    def test_write_creates_directories(self, tmp_path):
        artifact = GeneratedArtifact("Matrix3x1", "Numerics", ("x",), extension="txt")
        path = artifact.write(tmp_path / "root")
        assert path == tmp_path / "root" / "Numerics" / "Matrix3x1.txt"
        assert path.read_text(encoding="utf-8") == "x\n"

    def test_write_overwrites(self, tmp_path):
        GeneratedArtifact("Matrix3x1", "Numerics", ("old",)).write(tmp_path)
        path = GeneratedArtifact("Matrix3x1", "Numerics", ("new",)).write(tmp_path)
        assert path.read_text(encoding="utf-8") == "new\n"

    def test_validation(self):
        with pytest.raises(ValueError):
            GeneratedArtifact("", "Numerics", ("x",))
        with pytest.raises(ValueError):
            GeneratedArtifact("Matrix3x1", "Numerics", ())

    def test_metadata_ignored_in_equality(self):
        a = GeneratedArtifact("M", "N", ("x",), metadata={"a": 1})
        b = GeneratedArtifact("M", "N", ("x",), metadata={"a": 2})
        assert a == b


class _CommentGenerator(BaseTypeGenerator):
    def generate(self, name):
        code = self._new_builder(["System"])
        with code.bracket_scope(f"namespace {self.options.namespace}"):
            code.append(f"// {name}")
        return self._create_artifact(name, "Misc", code, metadata={"name": name})


class TestBaseTypeGenerator:
    """Test the shared generator plumbing."""

    def test_default_options(self):
        assert _CommentGenerator().options == CodegenOptions()

    def test_header_and_packaging(self):
        artifact = _CommentGenerator(CodegenOptions(extension="txt")).generate("Thing")
        assert artifact.lines == (
            "// Do not manually edit - this file is generated by splinegen",
            "",
            "using System;",
            "",
            "namespace Splinegen {",
            "\t// Thing",
            "}",
        )
        assert artifact.file_name == "Thing.txt"
        assert artifact.metadata == {"name": "Thing"}

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseTypeGenerator()
