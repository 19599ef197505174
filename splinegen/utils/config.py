"""
Configuration System for splinegen.

This module provides a unified configuration interface loaded from a
YAML or JSON file, with a few environment variable overrides for use in
build scripts.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigurationError, UnsupportedDimensionError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent / "splinegen_config.yaml"


@dataclass
class OutputConfig:
    """Where artifacts are written and how their files look."""

    root: str = "Assets/Splinegen/Runtime"
    spline_category: str = "Splines/Uniform Spline Segments"
    matrix_category: str = "Numerics"
    extension: str = "cs"
    namespace: str = "Splinegen"
    banner: List[str] = field(default_factory=list)


@dataclass
class GenerationConfig:
    """What a generation run enumerates and how it reacts to failures."""

    dimensions: List[int] = field(default_factory=lambda: [1, 2, 3, 4])
    matrix_sizes: List[int] = field(default_factory=lambda: [3, 4])
    fail_fast: bool = True
    max_workers: int = 1
    indent_size: int = 4
    use_tabs: bool = True

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "splinegen.log"


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value.lower() in ("1", "true", "yes")


class SplinegenConfig:
    """
    Configuration manager for splinegen.

    This class loads all configuration options from a single YAML or
    JSON file and exposes them as typed sections.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses the packaged default.
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config_data = self._load_config()

        self.output = self._create_output_config()
        self.generation = self._create_generation_config()
        self.logging = self._create_logging_config()
        self.validate()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}", str(self.config_file)) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration root must be a mapping", str(self.config_file))
        logger.debug(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration section '{name}' must be a mapping", str(self.config_file))
        return data

    def _list_option(self, data: Dict[str, Any], section: str, key: str, default: List[Any]) -> List[Any]:
        value = data.get(key, default)
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError(f"'{section}.{key}' must be a list, got {value!r}", str(self.config_file))
        return list(value)

    def _banner(self, data: Dict[str, Any]) -> List[str]:
        banner = data.get("banner") or []
        if isinstance(banner, str):
            return [banner]
        if not isinstance(banner, (list, tuple)) or not all(isinstance(line, str) for line in banner):
            raise ConfigurationError(f"'output.banner' must be a string or a list of strings, got {banner!r}",
                                     str(self.config_file))
        return list(banner)

    def _create_output_config(self) -> OutputConfig:
        """Create output configuration from loaded data."""
        data = self._section("output")
        defaults = OutputConfig()

        return OutputConfig(
            root=os.getenv("SPLINEGEN_OUTPUT_ROOT") or data.get("root", defaults.root),
            spline_category=data.get("spline_category", defaults.spline_category),
            matrix_category=data.get("matrix_category", defaults.matrix_category),
            extension=data.get("extension", defaults.extension),
            namespace=data.get("namespace", defaults.namespace),
            banner=self._banner(data),
        )

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        data = self._section("generation")
        defaults = GenerationConfig()

        fail_fast = _env_flag("SPLINEGEN_FAIL_FAST")
        if fail_fast is None:
            fail_fast = data.get("fail_fast", defaults.fail_fast)

        return GenerationConfig(
            dimensions=self._list_option(data, "generation", "dimensions", defaults.dimensions),
            matrix_sizes=self._list_option(data, "generation", "matrix_sizes", defaults.matrix_sizes),
            fail_fast=bool(fail_fast),
            max_workers=data.get("max_workers", defaults.max_workers),
            indent_size=data.get("indent_size", defaults.indent_size),
            use_tabs=bool(data.get("use_tabs", defaults.use_tabs)),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        data = self._section("logging")
        defaults = LoggingConfig()

        return LoggingConfig(
            level=data.get("level", defaults.level),
            enable_file_logging=bool(data.get("enable_file_logging", defaults.enable_file_logging)),
            log_file=data.get("log_file", defaults.log_file),
        )

    def validate(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            UnsupportedDimensionError: For a dimension outside 1 to 4
            ConfigurationError: For any other invalid value
        """
        for dim in self.generation.dimensions:
            if isinstance(dim, bool) or dim not in (1, 2, 3, 4):
                raise UnsupportedDimensionError(dim)
        for size in self.generation.matrix_sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size < 1:
                raise ConfigurationError(f"Matrix size must be a positive integer, got {size!r}", str(self.config_file))
        if not isinstance(self.generation.max_workers, int) or self.generation.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1", str(self.config_file))
        if not isinstance(self.generation.indent_size, int) or self.generation.indent_size < 0:
            raise ConfigurationError("indent_size must be non-negative", str(self.config_file))
        if not self.output.extension or not self.output.namespace:
            raise ConfigurationError("Output extension and namespace cannot be empty", str(self.config_file))

    @property
    def output_root(self) -> Path:
        return Path(self.output.root)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output": {
                "root": self.output.root,
                "spline_category": self.output.spline_category,
                "matrix_category": self.output.matrix_category,
                "extension": self.output.extension,
                "namespace": self.output.namespace,
                "banner": list(self.output.banner),
            },
            "generation": {
                "dimensions": list(self.generation.dimensions),
                "matrix_sizes": list(self.generation.matrix_sizes),
                "fail_fast": self.generation.fail_fast,
                "max_workers": self.generation.max_workers,
                "indent_size": self.generation.indent_size,
                "use_tabs": self.generation.use_tabs,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self, path: Optional[str] = None) -> Path:
        """Save current configuration as YAML or JSON, chosen by file suffix."""
        target = Path(path) if path else self.config_file
        data = self.to_dict()
        with open(target, "w", encoding="utf-8") as f:
            if target.suffix.lower() in (".yaml", ".yml"):
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            else:
                json.dump(data, f, indent=2)
        logger.info(f"Configuration saved to {target}")
        return target


# Global configuration instance
_global_config: Optional[SplinegenConfig] = None


def get_config() -> SplinegenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = SplinegenConfig()
    return _global_config


def set_config(config: Optional[SplinegenConfig]) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> SplinegenConfig:
    """Load configuration from a specific file."""
    return SplinegenConfig(config_file)
