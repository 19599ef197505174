"""
Generation driver.

Walks the (spline type x dimension) and (matrix size x dimension)
enumeration, generates one artifact per key and writes it below the
output root. Artifacts are independent, so they may be generated on a
thread pool; results are always handled in enumeration order.

The default is fail-fast: the first derivation failure propagates and
stops the run. With ``fail_fast`` disabled, failures are logged and
recorded per artifact and the remaining artifacts are still produced.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .enumeration import ArtifactKey, ArtifactKind, enumerate_artifact_keys
from ..codegen.matrix_generator import ColumnMatrixGenerator
from ..codegen.spline_generator import SplineSegmentGenerator
from ..codegen.templates import JinjaTemplateRenderer, create_template_renderer
from ..codegen.types import CodegenOptions, GeneratedArtifact
from ..splines.catalog import validate_catalog
from ..utils.config import SplinegenConfig, get_config
from ..utils.exceptions import GenerationError
from ..utils.logging import SplinegenLogger


@dataclass
class GenerationReport:
    """Outcome of a generation run."""
    artifacts: List[GeneratedArtifact] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    failures: Dict[str, GenerationError] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def type_names(self) -> List[str]:
        return [artifact.type_name for artifact in self.artifacts]


def options_from_config(config: SplinegenConfig) -> CodegenOptions:
    """Derive the generator options from the loaded configuration."""
    return CodegenOptions(
        namespace=config.output.namespace,
        banner=tuple(config.output.banner),
        indent=config.generation.indent,
        extension=config.output.extension,
        spline_category=config.output.spline_category,
        matrix_category=config.output.matrix_category,
    )


class SplineCodegenPipeline:
    """
    Runs the full regeneration.

    This class ties the enumeration to the type generators and the
    artifact writer, according to a SplinegenConfig.
    """

    def __init__(
        self,
        config: Optional[SplinegenConfig] = None,
        template_renderer: Optional[JinjaTemplateRenderer] = None,
    ):
        self.config = config or get_config()
        options = options_from_config(self.config)
        renderer = template_renderer or create_template_renderer()
        self.spline_generator = SplineSegmentGenerator(options, renderer)
        self.matrix_generator = ColumnMatrixGenerator(options, renderer)
        self._events = SplinegenLogger("pipeline")

    def enumerate(self) -> List[ArtifactKey]:
        """List the artifacts of a full run under the current configuration."""
        return enumerate_artifact_keys(
            dimensions=self.config.generation.dimensions,
            matrix_sizes=self.config.generation.matrix_sizes,
        )

    def generate(self, key: ArtifactKey) -> GeneratedArtifact:
        """Generate the artifact for a single key."""
        if key.kind is ArtifactKind.SPLINE:
            return self.spline_generator.generate(key.spline_type, key.dimension)
        return self.matrix_generator.generate(key.row_count, key.dimension)

    def _generate_checked(self, key: ArtifactKey) -> Tuple[ArtifactKey, Union[GeneratedArtifact, GenerationError]]:
        if self.config.generation.fail_fast:
            return key, self.generate(key)
        try:
            return key, self.generate(key)
        except Exception as e:
            return key, GenerationError(key.type_name, e)

    def _generate_all(self, keys: List[ArtifactKey]):
        workers = self.config.generation.max_workers
        if workers <= 1 or len(keys) <= 1:
            return (self._generate_checked(key) for key in keys)
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="splinegen")
        try:
            return list(executor.map(self._generate_checked, keys))
        finally:
            executor.shutdown(wait=True)

    def run(
        self,
        keys: Optional[Iterable[ArtifactKey]] = None,
        write: bool = True,
        output_root: Optional[Union[str, Path]] = None,
    ) -> GenerationReport:
        """
        Generate (and by default write) artifacts.

        Args:
            keys: Artifacts to generate; all enumerated artifacts if None
            write: Whether to write the artifacts to disk
            output_root: Directory to write below; configured root if None

        Returns:
            Report of the generated artifacts, written files and failures
        """
        start = time.perf_counter()
        validate_catalog()

        keys = list(keys) if keys is not None else self.enumerate()
        root = Path(output_root) if output_root is not None else self.config.output_root
        report = GenerationReport()
        self._events.log_generation_start(len(keys), str(root))

        for key, result in self._generate_all(keys):
            if isinstance(result, GenerationError):
                self._events.log_failure(key.type_name, str(result.cause))
                report.failures[key.type_name] = result
                continue

            report.artifacts.append(result)
            path = None
            if write:
                path = result.write(root)
                report.written.append(path)
            self._events.log_artifact(result.type_name, len(result.lines), str(path) if path else None)

        report.elapsed = time.perf_counter() - start
        self._events.log_generation_summary(len(report.artifacts), len(report.failures), report.elapsed)
        return report


def regenerate(config: Optional[SplinegenConfig] = None) -> GenerationReport:
    """Regenerate every artifact into the configured output root."""
    return SplineCodegenPipeline(config).run()
