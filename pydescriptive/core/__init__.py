"""
Core infrastructure for PyDescriptive.

Shared abstractions and utilities used by the descriptive statistics
module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pydescriptive.core.result import Result
from pydescriptive.core.exceptions import (
    PyDescriptiveError,
    ValidationError,
    DimensionError,
    NumericalError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyDescriptiveError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
]
