"""
Utils package for splinegen.

This module provides the error hierarchy, logging setup and
configuration shared by the rest of the package.
"""

from .exceptions import (
    SplinegenError,
    DivisionByZeroError,
    ArithmeticOverflowError,
    NotInvertibleError,
    IncompatibleDegreeError,
    IndexOutOfRangeError,
    UnsupportedDimensionError,
    CatalogError,
    ConfigurationError,
    GenerationError,
)

from .logging import SplinegenLogger, get_logger, setup_logging

from .config import (
    SplinegenConfig,
    OutputConfig,
    GenerationConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
