"""
tagpath exception classes.

This package provides all exception types raised while expanding selectors
and templates, for consistent error handling and reporting.
"""

from tagpath.exceptions.core import (
    ArgumentExhaustedError,
    ErrorContext,
    ErrorLevel,
    MalformedSelectorError,
    TagPathError,
)

__all__ = [
    "TagPathError",
    "MalformedSelectorError",
    "ArgumentExhaustedError",
    "ErrorContext",
    "ErrorLevel",
]
