"""
Core infrastructure for PyDescriptive.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, randvar, shuffle).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance constants
"""

from pydescriptive.core.result import Result
from pydescriptive.core.exceptions import (
    PyDescriptiveError,
    ValidationError,
    DimensionError,
    DifferentLengthError,
    EmptyDataError,
    InvalidPercentileError,
    InvalidQuantileError,
    InvalidLogBaseError,
    NullScaleFactorError,
    NumericalError,
    NullStdDeviationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyDescriptiveError",
    "ValidationError",
    "DimensionError",
    "DifferentLengthError",
    "EmptyDataError",
    "InvalidPercentileError",
    "InvalidQuantileError",
    "InvalidLogBaseError",
    "NullScaleFactorError",
    "NumericalError",
    "NullStdDeviationError",
]
