"""
Error handling framework for tempfuzz.

This module provides the exception hierarchy and the central registry of
error codes used across the package.
"""

from tempfuzz.errors.error_codes import ErrorCodes
from tempfuzz.errors.exceptions import (
    ConfigurationError,
    FuzzyError,
    NullArgumentError,
    RangeError,
    ValidationError,
)

__all__ = [
    # Base exception
    "FuzzyError",
    # Exception hierarchy
    "ValidationError",
    "RangeError",
    "NullArgumentError",
    "ConfigurationError",
    # Error codes
    "ErrorCodes",
]
