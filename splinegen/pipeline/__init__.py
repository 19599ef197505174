"""
Generation pipeline: artifact enumeration and the regeneration driver.
"""

from .enumeration import (
    ArtifactKey,
    ArtifactKind,
    build_name_index,
    enumerate_artifact_keys,
    resolve_artifact_key,
)
from .regenerate import GenerationReport, SplineCodegenPipeline, regenerate

__all__ = [
    "ArtifactKey",
    "ArtifactKind",
    "build_name_index",
    "enumerate_artifact_keys",
    "resolve_artifact_key",
    "GenerationReport",
    "SplineCodegenPipeline",
    "regenerate",
]
