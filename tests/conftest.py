"""
Pytest configuration and shared fixtures for splinegen tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import yaml

from splinegen.codegen import ColumnMatrixGenerator, SplineSegmentGenerator
from splinegen.codegen.types import CodegenOptions
from splinegen.utils.config import SplinegenConfig, set_config
from splinegen.utils.logging import setup_logging


# Configuration fixtures
@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Keep environment overrides, the global config and log handlers out of every test."""
    monkeypatch.delenv("SPLINEGEN_OUTPUT_ROOT", raising=False)
    monkeypatch.delenv("SPLINEGEN_FAIL_FAST", raising=False)
    monkeypatch.delenv("SPLINEGEN_LOG_LEVEL", raising=False)
    set_config(None)
    yield
    set_config(None)
    setup_logging("INFO")


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML configuration file and return its path."""
    def _write(data, name="splinegen.yaml"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path
    return _write


@pytest.fixture
def output_config(tmp_path, write_config):
    """Configuration writing below a temporary output root."""
    path = write_config({"output": {"root": str(tmp_path / "out")}})
    return SplinegenConfig(str(path))


# Generator fixtures
@pytest.fixture
def spline_generator():
    """Create a spline segment generator with default options."""
    return SplineSegmentGenerator(CodegenOptions())


@pytest.fixture
def matrix_generator():
    """Create a column matrix generator with default options."""
    return ColumnMatrixGenerator(CodegenOptions())


# Test data fixtures
@pytest.fixture
def bezier_points():
    """Control points of a symmetric 2D cubic Bezier arch."""
    return [(0, 0), (1, 2), (3, 2), (4, 0)]


# FileCheck-style matching
class FileCheck:
    """
    Ordered pattern matching over generated source lines.

    Mirrors LLVM FileCheck: CHECK finds the next matching line at or after
    the cursor, CHECK-NEXT requires the match on the very next line and
    CHECK-NOT asserts a pattern occurs nowhere in the source. Patterns
    are literal text matched against lines with their indentation
    stripped.
    """

    def __init__(self, source: str):
        self.source = source
        self.lines = [line.strip() for line in source.splitlines()]
        self.cursor = 0

    def _fail(self, kind: str, pattern: str):
        pytest.fail(f"{kind} failed\nPattern: {pattern}\nAfter line {self.cursor}\nSource:\n{self.source}")

    def check(self, pattern: str) -> "FileCheck":
        for i in range(self.cursor, len(self.lines)):
            if pattern in self.lines[i]:
                self.cursor = i + 1
                return self
        self._fail("CHECK", pattern)

    def check_next(self, pattern: str) -> "FileCheck":
        if self.cursor < len(self.lines) and pattern in self.lines[self.cursor]:
            self.cursor += 1
            return self
        self._fail("CHECK-NEXT", pattern)

    def check_not(self, pattern: str) -> "FileCheck":
        if pattern in self.source:
            self._fail("CHECK-NOT", pattern)
        return self


@pytest.fixture
def filecheck():
    """Create a FileCheck matcher for a generated source."""
    return FileCheck


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "filecheck" in str(item.fspath):
            item.add_marker(pytest.mark.filecheck)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style validation of generated sources"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
