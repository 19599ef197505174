"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import splinegen


def test_main_package_import():
    """Test that the main splinegen package can be imported."""
    assert hasattr(splinegen, '__version__')
    assert hasattr(splinegen, '__author__')
    assert hasattr(splinegen, 'regenerate')
    assert hasattr(splinegen, 'SplineCodegenPipeline')
    for name in splinegen.__all__:
        assert getattr(splinegen, name) is not None


def test_numerics_imports():
    """Test that numerics submodules can be imported."""
    from splinegen.numerics import Rational, RationalMatrix, as_rational

    assert Rational is not None
    assert RationalMatrix is not None
    assert as_rational is not None


def test_splines_imports():
    """Test that splines submodules can be imported."""
    from splinegen.splines import (
        ALL_SPLINE_TYPES,
        SplineFamily,
        convert_points,
        get_conversion_matrix,
        split_bezier,
    )

    assert len(ALL_SPLINE_TYPES) == 5
    assert SplineFamily is not None
    assert convert_points is not None
    assert get_conversion_matrix is not None
    assert split_bezier is not None


def test_codegen_imports():
    """Test that codegen submodules can be imported."""
    from splinegen.codegen import (
        CodeBuilder,
        CodegenOptions,
        ColumnMatrixGenerator,
        GeneratedArtifact,
        LinearCombination,
        SplineSegmentGenerator,
        coefficient_expressions,
    )

    assert CodeBuilder is not None
    assert CodegenOptions is not None
    assert ColumnMatrixGenerator is not None
    assert GeneratedArtifact is not None
    assert LinearCombination is not None
    assert SplineSegmentGenerator is not None
    assert coefficient_expressions is not None


def test_pipeline_imports():
    """Test that pipeline submodules can be imported."""
    from splinegen.pipeline import (
        ArtifactKey,
        GenerationReport,
        enumerate_artifact_keys,
        regenerate,
        resolve_artifact_key,
    )

    assert ArtifactKey is not None
    assert GenerationReport is not None
    assert enumerate_artifact_keys is not None
    assert regenerate is not None
    assert resolve_artifact_key is not None


def test_utils_imports():
    """Test that utils submodules can be imported."""
    from splinegen.utils import (
        SplinegenConfig,
        SplinegenError,
        SplinegenLogger,
        get_config,
        get_logger,
        setup_logging,
    )

    assert SplinegenConfig is not None
    assert SplinegenError is not None
    assert SplinegenLogger is not None
    assert get_config is not None
    assert get_logger is not None
    assert setup_logging is not None


def test_cli_entry_point():
    """Test that the console script target exists."""
    from splinegen.cli import main

    assert callable(main)


def test_math_layers_do_not_import_codegen():
    """Test that numerics and splines stay independent of code generation."""
    from pathlib import Path

    package_root = Path(splinegen.__file__).parent
    for layer in ("numerics", "splines"):
        for module in (package_root / layer).glob("*.py"):
            source = module.read_text(encoding="utf-8")
            assert "codegen" not in source, f"{layer}/{module.name} imports codegen"
