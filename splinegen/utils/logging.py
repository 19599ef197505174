"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
splinegen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the splinegen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("SPLINEGEN_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    # Configure root logger for splinegen
    logger = logging.getLogger("splinegen")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "splinegen" or name.startswith("splinegen."):
        return logging.getLogger(name)
    return logging.getLogger(f"splinegen.{name}")


class SplinegenLogger:
    """
    Domain logging for the generation run.

    Wraps a package logger with helpers for the events of a
    regeneration: start, per-artifact output, derived conversions,
    failures and the final summary.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, artifact_count: int, output_root: str) -> None:
        """
        Log beginning of a generation run.

        Args:
            artifact_count: Number of artifacts that will be generated
            output_root: Directory the artifacts are written below
        """
        self.logger.info(f"Generating {artifact_count} artifacts into {output_root}")

    def log_artifact(self, type_name: str, line_count: int, path: Optional[str] = None) -> None:
        """
        Log a generated artifact.

        Args:
            type_name: Name of the generated type
            line_count: Number of emitted source lines
            path: File the artifact was written to, if any
        """
        target = path if path else "<not written>"
        self.logger.debug(f"Generated {type_name} ({line_count} lines) -> {target}")

    def log_conversion(self, source: str, target: str) -> None:
        """
        Log a derived basis conversion.

        Args:
            source: Source type name
            target: Target type name
        """
        self.logger.debug(f"Derived conversion {source} -> {target}")

    def log_failure(self, type_name: str, reason: str) -> None:
        """
        Log an artifact that could not be generated.

        Args:
            type_name: Name of the type that failed
            reason: Description of the failure
        """
        self.logger.error(f"Failed to generate {type_name}: {reason}")

    def log_generation_summary(self, generated: int, failed: int, elapsed: float) -> None:
        """
        Log the outcome of a generation run.

        Args:
            generated: Number of artifacts generated
            failed: Number of artifacts that failed
            elapsed: Wall time of the run (seconds)
        """
        self.logger.info(f"Generated {generated} artifacts, {failed} failed in {elapsed:.3f}s")


# Initialize logging on module import
setup_logging()
