"""
Custom exception definitions.

This module defines the exception hierarchy for splinegen-specific
errors. Derivation errors are never retried: the inputs are fixed
catalog data, so the remedy is fixing the catalog.
"""

from typing import Optional


class SplinegenError(Exception):
    """
    Base exception for all splinegen-related errors.

    This is the root exception class for all splinegen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize splinegen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class DivisionByZeroError(SplinegenError, ZeroDivisionError):
    """Raised when a rational value would get a zero denominator."""

    def __init__(self, numerator: int):
        super().__init__(f"Division by zero: {numerator}/0", {'numerator': numerator})
        self.numerator = numerator


class ArithmeticOverflowError(SplinegenError, OverflowError):
    """
    Raised when an exact value cannot be represented in the target type.

    Rational arithmetic itself is arbitrary precision; this is raised when
    a rational is narrowed to a binary float outside the float range.
    """

    def __init__(self, value: str, target: str = "float"):
        super().__init__(f"Value {value} does not fit in {target}", {'target': target})
        self.value = value
        self.target = target


class NotInvertibleError(SplinegenError):
    """
    Raised when a singular matrix is inverted.

    For cataloged characteristic matrices this indicates a cataloging
    defect, never a user error.
    """

    def __init__(self, size: int, column: Optional[int] = None):
        details = {'size': size}
        if column is not None:
            details['column'] = column
        super().__init__(f"{size}x{size} matrix is not invertible", details)
        self.size = size
        self.column = column


class IncompatibleDegreeError(SplinegenError):
    """Raised when converting between spline types of different degree."""

    def __init__(self, source: str, source_degree: int, target: str, target_degree: int):
        super().__init__(
            f"Cannot convert {source} (degree {source_degree}) to {target} (degree {target_degree})",
            {'source_degree': source_degree, 'target_degree': target_degree}
        )
        self.source_degree = source_degree
        self.target_degree = target_degree


class IndexOutOfRangeError(SplinegenError, IndexError):
    """Raised when a row, column or control point index is out of range."""

    def __init__(self, what: str, index, size: int):
        super().__init__(
            f"{what} index has to be from 0 to {size - 1}, got: {index}",
            {'index': index, 'size': size}
        )
        self.index = index
        self.size = size


class UnsupportedDimensionError(SplinegenError, ValueError):
    """Raised when a geometric dimension outside 1 to 4 is requested."""

    def __init__(self, dimension):
        super().__init__(
            f"Unsupported dimension {dimension}, expected 1 to 4",
            {'dimension': dimension}
        )
        self.dimension = dimension


class CatalogError(SplinegenError, LookupError):
    """Raised when a spline type or generated type name is not cataloged."""


class ConfigurationError(SplinegenError):
    """Raised when a configuration file cannot be loaded or is invalid."""

    def __init__(self, message: str, config_file: Optional[str] = None):
        details = {}
        if config_file is not None:
            details['config_file'] = config_file
        super().__init__(message, details)
        self.config_file = config_file


class GenerationError(SplinegenError):
    """
    Raised when an artifact could not be derived.

    Wraps the underlying derivation failure together with the name
    of the type that was being generated.
    """

    def __init__(self, type_name: str, cause: Exception):
        super().__init__(
            f"Failed to generate {type_name}: {cause}",
            {'type_name': type_name, 'cause': type(cause).__name__}
        )
        self.type_name = type_name
        self.cause = cause
